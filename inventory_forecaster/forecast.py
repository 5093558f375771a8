"""
Moving-average demand forecasting over the circular sales history.

Model: daily demand = floor(sum of the last W days / W), with W clamped to
the history capacity. Horizon demand = daily demand × days ahead.

Integer floor division is intentional: forecasts are whole units and a
partial unit per day is not carried into the horizon total.
"""
import logging
from typing import Dict, Iterable

from config import FORECAST_WINDOWS
from .domain.errors import NegativeHorizonError
from .domain.history import CircularHistoryStore

logger = logging.getLogger(__name__)


class ForecastEngine:
    """Windowed-average forecasts read from a CircularHistoryStore."""

    def __init__(self, history: CircularHistoryStore):
        self.history = history

    def effective_window(self, window_days: int) -> int:
        """Window actually averaged: min(window_days, capacity), 0 if window_days <= 0."""
        if window_days <= 0:
            return 0
        return min(window_days, self.history.capacity)

    def daily_average(self, index: int, window_days: int) -> int:
        """
        Forecast units per day from the last ``window_days`` days.

        Args:
            index: Entity index
            window_days: Averaging window; values above capacity are clamped
                         (no extrapolation beyond retained history)

        Returns:
            Whole units per day (floor), 0 for window_days <= 0 or unknown index

        Example:
            >>> store = CircularHistoryStore(capacity=30)
            >>> i = store.allocate()
            >>> _ = store.record_today(i, 15)
            >>> ForecastEngine(store).daily_average(i, 7)
            2
        """
        window = self.effective_window(window_days)
        if window == 0:
            return 0
        # Bucket sums are never negative, so // truncates toward zero as well
        return self.history.sum_last_k(index, window) // window

    def horizon_total(self, index: int, window_days: int, days_ahead: int) -> int:
        """
        Forecast total units over the next ``days_ahead`` days.

        Raises:
            NegativeHorizonError: days_ahead < 0
        """
        if days_ahead < 0:
            logger.warning(f"Rejected negative forecast horizon: days_ahead={days_ahead}")
            raise NegativeHorizonError(f"days_ahead must be >= 0, got {days_ahead}")
        return self.daily_average(index, window_days) * days_ahead

    def daily_averages(self, index: int, windows: Iterable[int] = FORECAST_WINDOWS) -> Dict[int, int]:
        """Daily average for several windows at once, keyed by window length."""
        return {window: self.daily_average(index, window) for window in windows}
