"""
Forecast-vs-stock replenishment policy.

Policy Formula:
    predicted = daily_average(W) × D      (Horizon demand)
    needed    = predicted - stock         (only when predicted > stock)
    est_cost  = needed × unit_cost

Where:
    - W: Averaging window (days of history)
    - D: Planning horizon (days ahead to cover)
    - stock: Current stock, negative when backordered; a backorder raises
      ``needed`` by the same amount

Products with enough stock are left out of the list. The list keeps
registration order; it is not sorted by need or cost.
"""
import logging
from typing import Iterable, List

from .domain.models import ReorderEntry
from .domain.registry import EntityRegistry
from .forecast import ForecastEngine

logger = logging.getLogger(__name__)


class ReorderPlanner:
    """Builds reorder recommendations from horizon forecasts."""

    def __init__(self, registry: EntityRegistry, engine: ForecastEngine):
        self.registry = registry
        self.engine = engine

    def build_reorder_list(self, window_days: int, days_ahead: int) -> List[ReorderEntry]:
        """
        Recommend reorder quantities for products whose forecast exceeds stock.

        Args:
            window_days: Averaging window for the daily forecast (e.g. 7/14/30)
            days_ahead: Horizon the stock has to cover (e.g. 14)

        Returns:
            ReorderEntry per product short of stock, in registration order

        Raises:
            NegativeHorizonError: days_ahead < 0
        """
        entries: List[ReorderEntry] = []
        for index, entity in enumerate(self.registry):
            predicted = self.engine.horizon_total(index, window_days, days_ahead)
            if predicted <= entity.stock:
                continue
            needed = predicted - entity.stock
            entries.append(
                ReorderEntry(
                    name=entity.name,
                    needed_qty=needed,
                    est_cost=needed * entity.unit_cost,
                )
            )

        logger.debug(
            f"Reorder list (window={window_days}, horizon={days_ahead}): "
            f"{len(entries)}/{len(self.registry)} products"
        )
        return entries


def total_cost(entries: Iterable[ReorderEntry]) -> float:
    """Total estimated spend for a reorder list."""
    return sum(entry.est_cost for entry in entries)
