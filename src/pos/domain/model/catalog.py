"""Catalog aggregate — the store's current set of products.

The catalog is a value: every operation returns a new Catalog and leaves
the original untouched, so a reader holding a snapshot never sees a
half-applied change.  Product order is insertion order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from pos.domain.exceptions import DuplicateCodeError, EntityNotFoundError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Catalog:
    """Aggregate root for the product catalog.

    Invariants:
    - product codes are unique, compared case-insensitively
    - every product's ``stock`` is >= 0
    """

    products: tuple[Product, ...] = ()

    @staticmethod
    def of(products: Iterable[Product]) -> Catalog:
        return Catalog(tuple(products))

    def __iter__(self) -> Iterator[Product]:
        return iter(self.products)

    def __len__(self) -> int:
        return len(self.products)

    # --- Queries --------------------------------------------------------------

    def get(self, product_id: str) -> Product | None:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def require(self, product_id: str) -> Product:
        product = self.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product

    def find_by_code(self, code: str) -> Product | None:
        """Case-insensitive lookup, as used by the barcode scanner."""
        if not code or not code.strip():
            return None
        for product in self.products:
            if product.matches_code(code):
                return product
        return None

    def search(self, term: str | None) -> list[Product]:
        """Products whose name or code contains *term* (case-insensitive)."""
        if not term or not term.strip():
            return list(self.products)
        needle = term.strip().casefold()
        return [
            p
            for p in self.products
            if needle in p.name.casefold() or needle in p.code.casefold()
        ]

    def stock_of(self, product_id: str) -> int:
        product = self.get(product_id)
        return product.stock if product is not None else 0

    def next_id(self) -> str:
        """Auto-assign an ID one above the highest numeric ID in use."""
        numeric = [int(p.id) for p in self.products if p.id.isdigit()]
        return str(max(numeric) + 1) if numeric else "1"

    # --- Mutations (each returns a new Catalog) -------------------------------

    def add(
        self,
        code: str,
        name: str,
        price: Money,
        cost_price: Money,
        stock: int = 0,
    ) -> tuple[Catalog, Product]:
        product = Product.create(self.next_id(), code, name, price, cost_price, stock)
        self._ensure_code_available(product.code)
        return Catalog(self.products + (product,)), product

    def edit(
        self,
        product_id: str,
        *,
        code: str | None = None,
        name: str | None = None,
        price: Money | None = None,
        cost_price: Money | None = None,
        stock: int | None = None,
    ) -> tuple[Catalog, Product]:
        """Replace fields of an existing product.

        Fields left as ``None`` keep their current value.  The edited
        product's own code never counts as a collision.
        """
        current = self.require(product_id)
        edited = Product.create(
            product_id=current.id,
            code=current.code if code is None else code,
            name=current.name if name is None else name,
            price=current.price if price is None else price,
            cost_price=current.cost_price if cost_price is None else cost_price,
            stock=current.stock if stock is None else stock,
        )
        self._ensure_code_available(edited.code, exclude_id=current.id)
        return self._replace(edited), edited

    def remove(self, product_id: str) -> tuple[Catalog, Product]:
        removed = self.require(product_id)
        remaining = tuple(p for p in self.products if p.id != product_id)
        return Catalog(remaining), removed

    def add_stock(self, product_id: str, quantity: int) -> tuple[Catalog, Product]:
        restocked = self.require(product_id).with_stock_added(quantity)
        return self._replace(restocked), restocked

    def deduct(self, quantities: Iterable[tuple[str, int]]) -> Catalog:
        """Subtract sold quantities from stock.

        Products not mentioned are untouched; IDs that no longer exist in
        the catalog are skipped, so this never fails on a stale cart line.
        """
        by_id = {p.id: p for p in self.products}
        for product_id, quantity in quantities:
            product = by_id.get(product_id)
            if product is None:
                continue
            by_id[product_id] = product.with_stock_deducted(quantity)
        return Catalog(tuple(by_id[p.id] for p in self.products))

    # --- Internal helpers -----------------------------------------------------

    def _replace(self, product: Product) -> Catalog:
        return Catalog(
            tuple(product if p.id == product.id else p for p in self.products)
        )

    def _ensure_code_available(self, code: str, exclude_id: str | None = None) -> None:
        existing = self.find_by_code(code)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateCodeError(code)
