"""Runtime settings.

Values are resolved by the CLI group (command-line option, then
environment variable, then default) and travel on the click context
object as a single frozen Settings instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pos.domain.model.value_objects import Money
from pos.domain.service.low_stock_monitor import LOW_STOCK_THRESHOLD

DEFAULT_DATA_DIR = Path("data")
DEFAULT_CURRENCY_SYMBOL = "฿"


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    low_stock_threshold: int = LOW_STOCK_THRESHOLD
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL

    @property
    def catalog_path(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def sales_path(self) -> Path:
        return self.data_dir / "sales.json"

    def money(self, value: Money | str) -> str:
        """Format an amount for display, e.g. ``฿1,390.00``."""
        text = str(value)
        if text.startswith("-"):
            return f"-{self.currency_symbol}{text[1:]}"
        return f"{self.currency_symbol}{text}"
