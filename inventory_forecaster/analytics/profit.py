"""
Expected profit over a forecast horizon.

Sellable volume per product = min(predicted demand, max(stock, 0)).
Backordered stock never counts as inventory to sell, so a negative stock
contributes zero units even though the sales that caused it were recorded.
"""
import logging

from ..domain.models import ProfitLine, ProfitResult
from ..domain.registry import EntityRegistry
from ..forecast import ForecastEngine

logger = logging.getLogger(__name__)


class ProfitEstimator:
    """Profit on forecast demand, capped by physical stock."""

    def __init__(self, registry: EntityRegistry, engine: ForecastEngine):
        self.registry = registry
        self.engine = engine

    def profit_breakdown(self, window_days: int, days_ahead: int) -> ProfitResult:
        """
        Per-product profit estimate.

        Args:
            window_days: Averaging window for the daily forecast
            days_ahead: Horizon in days

        Returns:
            ProfitResult with one line per product (registration order)

        Raises:
            NegativeHorizonError: days_ahead < 0
        """
        lines = []
        total = 0.0
        for index, entity in enumerate(self.registry):
            predicted = self.engine.horizon_total(index, window_days, days_ahead)
            sellable = min(predicted, entity.sellable_stock())
            profit = sellable * entity.unit_margin
            total += profit
            lines.append(
                ProfitLine(
                    name=entity.name,
                    predicted=predicted,
                    sellable=sellable,
                    unit_margin=entity.unit_margin,
                    profit=profit,
                )
            )

        return ProfitResult(
            window_days=window_days,
            days_ahead=days_ahead,
            lines=tuple(lines),
            total=total,
        )

    def estimate_profit(self, window_days: int, days_ahead: int) -> float:
        """Total expected profit (revenue - cost) on sellable units."""
        return self.profit_breakdown(window_days, days_ahead).total
