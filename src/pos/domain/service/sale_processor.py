"""Domain service: Sale Processing.

Turns a cart into a sale.  This is the one cross-aggregate operation in
the system: it reads the Cart, writes the Catalog (stock) and the
SalesLedger (history), and must do so as a single step.

The processor never mutates its inputs.  It builds the new catalog, the
new ledger and the cleared cart first and hands all three back together
in a CheckoutResult, so a caller either publishes the whole result or
nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from pos.domain.model.cart import Cart
from pos.domain.model.catalog import Catalog
from pos.domain.model.ledger import SalesLedger
from pos.domain.model.sale import Sale

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Timezone-aware current local time."""
    return datetime.now().astimezone()


@dataclass(frozen=True)
class CheckoutResult:
    sale: Sale | None
    cart: Cart
    catalog: Catalog
    ledger: SalesLedger

    @property
    def completed(self) -> bool:
        return self.sale is not None


class SaleProcessor:

    def __init__(self, clock: Clock = local_now) -> None:
        self._clock = clock

    def process(self, cart: Cart, catalog: Catalog, ledger: SalesLedger) -> CheckoutResult:
        """Check out *cart*.

        An empty cart (or one holding only zero-quantity lines) produces
        no sale and leaves everything as it was.

        Totals use the prices captured when each line was added, even if
        the product has been re-priced since.  Stock is deducted from the
        *current* catalog; a line whose product was deleted still counts
        toward the totals but has no stock to deduct.

        No stock re-check happens here: the cart already caps every line
        at the stock it saw, and an underflow raises InvariantViolation.
        """
        lines = cart.finalized()
        if lines.is_empty:
            return CheckoutResult(sale=None, cart=cart, catalog=catalog, ledger=ledger)

        now = self._clock()
        sale = Sale.create(ledger.next_id(now), lines.items, now)

        new_catalog = catalog.deduct(
            (item.product_id, item.quantity) for item in sale.items
        )
        new_ledger = ledger.append(sale)

        logger.debug(
            "Processed sale %s: %d line(s), total %s", sale.id, sale.item_count, sale.total
        )
        return CheckoutResult(
            sale=sale, cart=cart.clear(), catalog=new_catalog, ledger=new_ledger
        )
