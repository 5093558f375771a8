"""
Daily closing workflow: advance the shared timeline and age out old sales.
"""
import logging

from ..domain.history import CircularHistoryStore

logger = logging.getLogger(__name__)


class DailyCloseWorkflow:
    """Closes the current logical day for every product at once."""

    def __init__(self, history: CircularHistoryStore):
        """
        Initialize the workflow.

        Args:
            history: Store whose timeline is advanced
        """
        self.history = history

    def close_day(self) -> int:
        """
        Close today and open the next logical day.

        Sales older than the history capacity drop out of every product's
        window.

        Returns:
            Logical day number of the new today
        """
        expired = self.history.advance_day()
        if expired:
            logger.info(f"Advanced day to: {self.history.current_day} ({expired} units aged out)")
        else:
            logger.info(f"Advanced day to: {self.history.current_day}")
        return self.history.current_day

    def close_days(self, days: int) -> int:
        """
        Close ``days`` consecutive days (0 is a no-op).

        Returns:
            Logical day number of the new today

        Raises:
            ValueError: days < 0
        """
        if days < 0:
            raise ValueError(f"Cannot close a negative number of days: {days}")
        for _ in range(days):
            self.close_day()
        return self.history.current_day
