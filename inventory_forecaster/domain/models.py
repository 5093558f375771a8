"""
Domain models for inventory-forecaster.

Pure data classes + value objects. No I/O, no side effects.
Derived objects (ReorderEntry, ProfitLine, ProfitResult, DemandRank) are
recomputed on every query and never stored; SaleRecord is a receipt returned
to the caller, the history keeps only daily totals.
"""
from dataclasses import dataclass, field
from typing import Tuple


@dataclass
class Entity:
    """Product tracked by the registry - mutable (stock and prices change)."""
    name: str
    stock: int              # Signed: negative stock represents backorder
    unit_cost: float = 0.0
    unit_price: float = 0.0

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Product name cannot be empty")
        if self.unit_cost < 0:
            raise ValueError("Unit cost cannot be negative")
        if self.unit_price < 0:
            raise ValueError("Unit price cannot be negative")

    @property
    def key(self) -> str:
        """Case-insensitive identity used for lookups."""
        return self.name.casefold()

    @property
    def unit_margin(self) -> float:
        """Profit per unit sold (price - cost)."""
        return self.unit_price - self.unit_cost

    def sellable_stock(self) -> int:
        """Physical stock available to ship (backorder counts as zero)."""
        return max(self.stock, 0)


@dataclass(frozen=True)
class SaleRecord:
    """Sale recorded into today's bucket."""
    name: str
    qty: int
    day: int            # Logical day number of the sale
    stock_after: int    # Stock after the sale (negative = backorder)


@dataclass(frozen=True)
class ReorderEntry:
    """Reorder recommendation for one product."""
    name: str
    needed_qty: int     # predicted - stock
    est_cost: float     # needed_qty × unit_cost


@dataclass(frozen=True)
class ProfitLine:
    """Per-product contribution to the profit estimate."""
    name: str
    predicted: int      # Forecast demand over the horizon
    sellable: int       # min(predicted, max(stock, 0))
    unit_margin: float
    profit: float       # sellable × unit_margin


@dataclass(frozen=True)
class ProfitResult:
    """Profit estimate over a forecast horizon, broken down per product."""
    window_days: int
    days_ahead: int
    lines: Tuple[ProfitLine, ...] = field(default_factory=tuple)
    total: float = 0.0


@dataclass(frozen=True)
class DemandRank:
    """One row of the top-demand ranking."""
    rank: int           # 1-based position
    name: str
    daily_average: int
    stock: int
