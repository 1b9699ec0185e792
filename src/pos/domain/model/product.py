"""Product aggregate.

Products live independently of sales. They have their own lifecycle:
prices change, stock is received and sold, products are removed from
the catalog.  Every change produces a new Product; sales hold their
own copies of the fields they need.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from pos.domain.exceptions import InvariantViolation, ValidationError
from pos.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new or edited products, it enforces all
    field rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted products without re-validating.
    """

    id: str
    code: str
    name: str
    price: Money
    cost_price: Money
    stock: int = 0

    @staticmethod
    def create(
        product_id: str,
        code: str,
        name: str,
        price: Money,
        cost_price: Money,
        stock: int = 0,
    ) -> Product:
        if not code or not code.strip():
            raise ValidationError("Product code is required")
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if price.is_negative:
            raise ValidationError("Product price cannot be negative")
        if cost_price.is_negative:
            raise ValidationError("Product cost price cannot be negative")
        if not isinstance(stock, int) or isinstance(stock, bool):
            raise ValidationError(
                f"Stock must be an integer, got {type(stock).__name__}"
            )
        if stock < 0:
            raise ValidationError("Stock cannot be negative")

        return Product(
            id=product_id,
            code=code.strip(),
            name=name.strip(),
            price=price,
            cost_price=cost_price,
            stock=stock,
        )

    def matches_code(self, code: str) -> bool:
        return self.code.casefold() == code.strip().casefold()

    @property
    def unit_profit(self) -> Money:
        return self.price - self.cost_price

    # --- Stock movements ------------------------------------------------------

    def with_stock_added(self, quantity: int) -> Product:
        """Receive new stock."""
        if not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("Stock quantity to add must be a positive integer")
        return replace(self, stock=self.stock + quantity)

    def with_stock_deducted(self, quantity: int) -> Product:
        """Remove sold units.

        The cart never holds more than the available stock, so an
        underflow here means a caller bypassed the cart rules.
        """
        if quantity < 0:
            raise InvariantViolation(
                f"Cannot deduct a negative quantity ({quantity}) from {self.code}"
            )
        if quantity > self.stock:
            raise InvariantViolation(
                f"Stock underflow for {self.code}: "
                f"deducting {quantity} from {self.stock}"
            )
        return replace(self, stock=self.stock - quantity)
