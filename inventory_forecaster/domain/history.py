"""
Circular sales history: one fixed-length ring of day buckets per product.

Layout:
- rows[entity_index][column] = units sold on the day held by that column
- all rows share one timeline: ``current_pos`` is the column for "today"
- the column after ``current_pos`` (mod capacity) holds the oldest retained day

Timeline:
- ``start_day`` is the logical day number of the oldest retained column
- a new store starts with today = day 0, so start_day = -(capacity - 1)
- ``advance_day()`` rotates ``current_pos`` forward and zeroes the column it
  lands on (that column held the day that just left the retention window)

Only the logical day counter is tracked; mapping it to calendar dates is a
reporting concern.
"""
import logging
from typing import List, Optional, Tuple

from config import HISTORY_DAYS
from .errors import InvalidQuantityError, NotFoundError, ValidationError
from .validation import validate_capacity, validate_sale_quantity

logger = logging.getLogger(__name__)


class CircularHistoryStore:
    """Fixed-capacity per-product sales history addressed by entity index."""

    def __init__(self, capacity: int = HISTORY_DAYS):
        """
        Args:
            capacity: Number of days retained per product (H). Fixed for the
                      lifetime of the store; use reset() to change it.
        """
        is_valid, error = validate_capacity(capacity)
        if not is_valid:
            raise ValidationError(f"History capacity: {error}")

        self._capacity = capacity
        self._rows: List[List[int]] = []
        self._current_pos = 0
        self._start_day = -(capacity - 1)

    # ------------------------------------------------------------------
    # Timeline
    # ------------------------------------------------------------------

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def current_pos(self) -> int:
        """Ring column holding today's bucket (0 <= current_pos < capacity)."""
        return self._current_pos

    @property
    def start_day(self) -> int:
        """Logical day number of the oldest retained column."""
        return self._start_day

    @property
    def current_day(self) -> int:
        """Logical day number of today."""
        return self._start_day + self._capacity - 1

    def __len__(self) -> int:
        return len(self._rows)

    def reset(self, capacity: Optional[int] = None) -> None:
        """
        Drop every row and restart the timeline at day 0.

        This is the only way to change capacity: rows sized for the old
        capacity would break ring arithmetic. The registry must be cleared
        with it (``InventoryForecaster.reset`` does both); until then it
        refuses new registrations.
        """
        if capacity is not None:
            is_valid, error = validate_capacity(capacity)
            if not is_valid:
                raise ValidationError(f"History capacity: {error}")
            self._capacity = capacity

        self._rows = []
        self._current_pos = 0
        self._start_day = -(self._capacity - 1)
        logger.info(f"History store reset (capacity={self._capacity})")

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def allocate(self) -> int:
        """
        Allocate a zero-filled row for a newly registered product.

        Returns:
            Index of the new row (matches the registry index)
        """
        self._rows.append([0] * self._capacity)
        return len(self._rows) - 1

    def record_today(self, index: int, qty: int) -> int:
        """
        Add a sale to today's bucket. Same-day sales accumulate.

        Args:
            index: Entity index
            qty: Units sold (must be > 0)

        Returns:
            Today's accumulated quantity for the entity

        Raises:
            InvalidQuantityError: qty is not a positive integer
            NotFoundError: index has no row
        """
        is_valid, error = validate_sale_quantity(qty)
        if not is_valid:
            raise InvalidQuantityError(f"Invalid sale quantity {qty!r}: {error}")

        row = self._row(index)
        row[self._current_pos] += qty
        return row[self._current_pos]

    def advance_day(self) -> int:
        """
        Move the shared timeline forward by one day.

        The column that becomes "today" held the oldest retained day; it is
        zeroed for every product. O(products).

        Returns:
            Units dropped from the window, summed over all products
        """
        self._current_pos = (self._current_pos + 1) % self._capacity
        expired = 0
        for row in self._rows:
            expired += row[self._current_pos]
            row[self._current_pos] = 0
        self._start_day += 1
        logger.debug(f"Advanced to logical day {self.current_day} (column {self._current_pos})")
        return expired

    def advance_days(self, days: int) -> int:
        """Advance the timeline ``days`` times (0 is a no-op); returns units expired."""
        if days < 0:
            raise ValueError(f"Cannot advance a negative number of days: {days}")
        return sum(self.advance_day() for _ in range(days))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def sum_last_k(self, index: int, k: int) -> int:
        """
        Sum the last ``k`` days for a product, today counting as day 1.

        ``k`` is clamped to [0, capacity]. Returns 0 for k <= 0 or an
        unknown index.
        """
        if index < 0 or index >= len(self._rows):
            return 0
        if k <= 0:
            return 0
        k = min(k, self._capacity)

        row = self._rows[index]
        total = 0
        pos = self._current_pos
        for _ in range(k):
            total += row[pos]
            pos = (pos - 1 + self._capacity) % self._capacity
        return total

    def total(self, index: int) -> int:
        """Sum of the whole retained window for a product."""
        return sum(self._row(index))

    def today(self, index: int) -> int:
        """Units recorded so far today for a product."""
        return self._row(index)[self._current_pos]

    def row(self, index: int) -> Tuple[int, ...]:
        """Raw ring contents in column order (not chronological)."""
        return tuple(self._row(index))

    def chronological_columns(self) -> List[int]:
        """Ring columns ordered oldest → today."""
        oldest = (self._current_pos + 1) % self._capacity
        return [(oldest + offset) % self._capacity for offset in range(self._capacity)]

    def history(self, index: int) -> List[int]:
        """
        Daily quantities for a product in chronological order.

        Returns:
            List of ``capacity`` ints, oldest day first, today last
        """
        row = self._row(index)
        return [row[col] for col in self.chronological_columns()]

    def date_for_column(self, col: int) -> int:
        """
        Logical day number represented by a ring column.

        The forward distance from the oldest column to ``col`` is added to
        ``start_day``; for col == current_pos this is current_day.
        """
        if col < 0 or col >= self._capacity:
            raise ValueError(f"Column {col} outside ring of capacity {self._capacity}")
        oldest = (self._current_pos + 1) % self._capacity
        offset = (col - oldest) % self._capacity
        return self._start_day + offset

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _row(self, index: int) -> List[int]:
        if index < 0 or index >= len(self._rows):
            raise NotFoundError(f"No history row for entity index {index}")
        return self._rows[index]
