"""
InventoryForecaster: composition root for registry, history, forecasts and
the workflows built on them.

Each instance owns its own registry and history store (and therefore its own
timeline), so several independent forecasters can coexist in one process.
Not thread-safe: one logical writer per instance.
"""
from typing import Dict, List, Optional

from config import HISTORY_DAYS
from .analytics.profit import ProfitEstimator
from .analytics.ranking import top_by_demand
from .domain.history import CircularHistoryStore
from .domain.models import DemandRank, Entity, ProfitResult, ReorderEntry, SaleRecord
from .domain.registry import EntityRegistry
from .forecast import ForecastEngine
from .replenishment_policy import ReorderPlanner
from .workflows import CatalogWorkflow, DailyCloseWorkflow, SalesWorkflow


class InventoryForecaster:
    """Name-based facade used by the demo driver and the reports."""

    def __init__(self, history_days: int = HISTORY_DAYS):
        """
        Args:
            history_days: Days of sales retained per product (fixed)
        """
        self.history = CircularHistoryStore(capacity=history_days)
        self.registry = EntityRegistry(self.history)
        self.engine = ForecastEngine(self.history)
        self.planner = ReorderPlanner(self.registry, self.engine)
        self.profit = ProfitEstimator(self.registry, self.engine)

        self.catalog = CatalogWorkflow(self.registry)
        self.sales = SalesWorkflow(self.registry)
        self.daily_close = DailyCloseWorkflow(self.history)

    @property
    def history_days(self) -> int:
        return self.history.capacity

    def reset(self, history_days: Optional[int] = None) -> None:
        """
        Drop every product and its history and restart the timeline at day 0.

        Args:
            history_days: New retention length (default: keep the current one)

        Raises:
            ValidationError: history_days is not an integer >= 1 (nothing changes)
        """
        self.history.reset(capacity=history_days)
        self.registry.clear()

    @property
    def current_day(self) -> int:
        """Logical day number of today (0 at construction)."""
        return self.history.current_day

    # --- catalog ---------------------------------------------------------

    def add_product(self, name: str, initial_stock: int, cost: float, price: float) -> int:
        return self.catalog.add_product(name, initial_stock, cost, price)

    def update_stock(self, name: str, new_stock: int) -> None:
        self.catalog.update_stock(name, new_stock)

    def update_prices(self, name: str, new_cost: float, new_price: float) -> None:
        self.catalog.update_prices(name, new_cost, new_price)

    def products(self) -> List[Entity]:
        return self.catalog.list_products()

    def product(self, name: str) -> Entity:
        return self.registry.entity(name)

    # --- sales & timeline -----------------------------------------------

    def record_sale(self, name: str, qty: int) -> SaleRecord:
        return self.sales.record_sale(name, qty)

    def record_sales(self, sales: Dict[str, int]) -> List[str]:
        return self.sales.record_bulk(sales)

    def advance_day(self) -> int:
        return self.daily_close.close_day()

    def advance_days(self, days: int) -> int:
        return self.daily_close.close_days(days)

    # --- forecasts -------------------------------------------------------

    def forecast_daily(self, name: str, window_days: int) -> int:
        """Daily average demand for a product over ``window_days``."""
        return self.engine.daily_average(self.registry.find_index(name), window_days)

    def forecast_total(self, name: str, window_days: int, days_ahead: int) -> int:
        """Forecast demand for a product over the next ``days_ahead`` days."""
        return self.engine.horizon_total(self.registry.find_index(name), window_days, days_ahead)

    def reorder_list(self, window_days: int, days_ahead: int) -> List[ReorderEntry]:
        return self.planner.build_reorder_list(window_days, days_ahead)

    def estimate_profit(self, window_days: int, days_ahead: int) -> float:
        return self.profit.estimate_profit(window_days, days_ahead)

    def profit_breakdown(self, window_days: int, days_ahead: int) -> ProfitResult:
        return self.profit.profit_breakdown(window_days, days_ahead)

    def top_demanded(self, k: int, window_days: int) -> List[DemandRank]:
        return top_by_demand(self.registry, self.engine, k, window_days)

    def sales_history(self, name: str) -> List[int]:
        """Daily sales for a product, oldest retained day first, today last."""
        return self.history.history(self.registry.find_index(name))
