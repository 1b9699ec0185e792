"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductSpec:
    """Input: product fields as typed by the operator."""

    code: str
    name: str
    price: str
    cost_price: str
    stock: int = 0


@dataclass(frozen=True)
class InventoryLineDTO:
    """Output: one row of the inventory screen."""

    product_id: str
    code: str
    name: str
    price: str  # formatted, e.g. "130.00"
    cost_price: str
    stock: int
    status: str  # "in_stock" | "low" | "out"


@dataclass(frozen=True)
class SaleLineDTO:
    """Output: a single receipt line."""

    code: str
    name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class SaleDTO:
    """Output: a completed sale as displayed on a receipt or in history."""

    id: str
    date: str
    items: list[SaleLineDTO]
    total: str
    total_cost: str
    total_profit: str
    profit_is_negative: bool
