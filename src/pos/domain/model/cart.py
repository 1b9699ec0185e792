"""Cart — the lines an operator is assembling for one checkout.

A cart is never persisted.  It is rebuilt from nothing at the start of a
session and cleared by a successful checkout.  Each operation takes the
current catalog so quantities can be capped against live stock.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Iterator

from pos.domain.model.catalog import Catalog
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class CartItem:
    """Snapshot of a product taken when it was added to the cart.

    Code, name, price and cost are copied by value.  Editing the product
    afterwards does not change the line, nor any sale built from it.
    """

    product_id: str
    product_code: str
    name: str
    price: Money  # locked at add-to-cart time
    cost_price: Money
    quantity: int

    @staticmethod
    def from_product(product: Product, quantity: int = 1) -> CartItem:
        return CartItem(
            product_id=product.id,
            product_code=product.code,
            name=product.name,
            price=product.price,
            cost_price=product.cost_price,
            quantity=quantity,
        )

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity

    @property
    def line_cost(self) -> Money:
        return self.cost_price * self.quantity

    @property
    def line_profit(self) -> Money:
        return self.line_total - self.line_cost


def parse_quantity_input(raw: str) -> int | None:
    """Interpret text typed into a quantity field.

    Mirrors a numeric input box: an empty field reads as 0 while the
    operator is still typing, a leading integer is taken as-is, and
    anything else returns None so the caller keeps the prior value.
    """
    if raw.strip() == "":
        return 0
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


@dataclass(frozen=True)
class Cart:
    """Aggregate root for the in-progress checkout.

    Invariants:
    - at most one line per product
    - a line's quantity never exceeds the product's current stock
    - a finalized line never has quantity 0 (it is removed instead)
    """

    items: tuple[CartItem, ...] = ()

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def total(self) -> Money:
        return Money.total(item.line_total for item in self.items)

    def get(self, product_id: str) -> CartItem | None:
        for item in self.items:
            if item.product_id == product_id:
                return item
        return None

    def quantity_of(self, product_id: str) -> int:
        item = self.get(product_id)
        return item.quantity if item is not None else 0

    # --- Mutations (each returns a new Cart) ----------------------------------

    def add(self, product: Product, catalog: Catalog) -> Cart:
        """Add one unit of *product*, capped by its current stock.

        Going over stock is silently ignored; it is a capacity guard, not
        an error.
        """
        current = catalog.get(product.id)
        if current is None:
            return self

        existing = self.get(current.id)
        if existing is None:
            if current.stock <= 0:
                return self
            return Cart(self.items + (CartItem.from_product(current),))

        if existing.quantity + 1 > current.stock:
            return self
        return self._with_quantity(current.id, existing.quantity + 1)

    def set_quantity(self, product_id: str, requested: int, catalog: Catalog) -> Cart:
        """Set a line's quantity, clamped to ``[0, current stock]``.

        A 0 result is kept as a transient line until ``finalize_line()``.
        """
        current = catalog.get(product_id)
        if current is None or self.get(product_id) is None:
            return self
        clamped = max(0, min(requested, current.stock))
        return self._with_quantity(product_id, clamped)

    def set_quantity_from_input(self, product_id: str, raw: str, catalog: Catalog) -> Cart:
        requested = parse_quantity_input(raw)
        if requested is None:
            return self
        return self.set_quantity(product_id, requested, catalog)

    def finalize_line(self, product_id: str) -> Cart:
        """Drop the line if the operator left it at zero."""
        item = self.get(product_id)
        if item is not None and item.quantity <= 0:
            return self.remove(product_id)
        return self

    def finalized(self) -> Cart:
        return Cart(tuple(item for item in self.items if item.quantity > 0))

    def remove(self, product_id: str) -> Cart:
        return Cart(tuple(item for item in self.items if item.product_id != product_id))

    def clear(self) -> Cart:
        return Cart()

    # --- Internal helpers -----------------------------------------------------

    def _with_quantity(self, product_id: str, quantity: int) -> Cart:
        return Cart(
            tuple(
                replace(item, quantity=quantity) if item.product_id == product_id else item
                for item in self.items
            )
        )
