"""Application service: the sell screen.

A SellSession is the state of one operator at the register: the cart
being built, which screen is showing, and the last completed sale (for
the receipt).  It owns the Cart exclusively; the catalog is re-read from
the repository for every operation so quantities are capped against the
stock that is actually stored.

The session also owns the scan decoder.  Keystrokes are pushed in with
``press_key()``; a completed scan adds the matching product and brings
the sell screen to the front.
"""

from __future__ import annotations

import logging
from enum import Enum

from pos.application.checkout import CheckoutHandler
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.cart import Cart
from pos.domain.model.catalog import Catalog
from pos.domain.model.product import Product
from pos.domain.model.sale import Sale
from pos.domain.repository.catalog_repository import CatalogRepository
from pos.domain.service.scan_decoder import SCAN_IDLE_WINDOW, KeyEvent, ScanDecoder
from pos.domain.service.scheduler import Scheduler

logger = logging.getLogger(__name__)


class View(Enum):
    SELL = "sell"
    PRODUCTS = "products"
    INVENTORY = "inventory"
    SALES = "sales"
    REPORTS = "reports"


class SellSession:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        checkout_handler: CheckoutHandler,
        scheduler: Scheduler,
        idle_window: float = SCAN_IDLE_WINDOW,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._checkout_handler = checkout_handler
        self._scheduler = scheduler
        self._decoder = ScanDecoder(scheduler, self._on_scan, idle_window)
        self.cart = Cart()
        self.view = View.SELL
        self.last_sale: Sale | None = None

    @property
    def catalog(self) -> Catalog:
        return Catalog.of(self._catalog_repo.load())

    @property
    def scan_buffer(self) -> str:
        return self._decoder.buffer

    # --- Cart operations ------------------------------------------------------

    def add(self, product_id: str) -> Cart:
        catalog = self.catalog
        product = catalog.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self.cart = self.cart.add(product, catalog)
        return self.cart

    def add_by_code(self, code: str) -> Product | None:
        """Add one unit of the product with *code*; None if no such code."""
        catalog = self.catalog
        product = catalog.find_by_code(code)
        if product is None:
            return None
        self.cart = self.cart.add(product, catalog)
        return product

    def set_quantity(self, product_id: str, value: str | int) -> Cart:
        """Apply a quantity typed into a cart line.

        Text is parsed the way the quantity field reads it: blank is a
        transient 0, garbage leaves the line unchanged.
        """
        catalog = self.catalog
        if isinstance(value, str):
            self.cart = self.cart.set_quantity_from_input(product_id, value, catalog)
        else:
            self.cart = self.cart.set_quantity(product_id, value, catalog)
        return self.cart

    def leave_quantity_field(self, product_id: str) -> Cart:
        self.cart = self.cart.finalize_line(product_id)
        return self.cart

    def remove(self, product_id: str) -> Cart:
        self.cart = self.cart.remove(product_id)
        return self.cart

    def clear(self) -> Cart:
        self.cart = self.cart.clear()
        return self.cart

    def checkout(self) -> Sale | None:
        """Pay for the cart.  Returns None when there was nothing to sell."""
        result = self._checkout_handler.handle(self.cart)
        self.cart = result.cart
        if result.sale is not None:
            self.last_sale = result.sale
        return result.sale

    # --- Navigation and keyboard ----------------------------------------------

    def switch_view(self, view: View) -> None:
        self.view = view

    def is_scanning(self) -> bool:
        """True while a scan is partway through its idle window."""
        self._scheduler.run_due()
        return bool(self._decoder.buffer)

    def press_key(self, event: KeyEvent) -> None:
        self._scheduler.run_due()
        self._decoder.handle(event)

    def _on_scan(self, code: str) -> None:
        product = self.add_by_code(code)
        if product is None:
            logger.debug("No product with code %r", code)
            return
        self.view = View.SELL
