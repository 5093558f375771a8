"""
Sales workflow: record today's sales into stock and history.
"""
import logging
from typing import Dict, List

from ..domain.errors import ForecasterError
from ..domain.models import SaleRecord
from ..domain.registry import EntityRegistry

logger = logging.getLogger(__name__)


class SalesWorkflow:
    """Records sales for the current logical day."""

    def __init__(self, registry: EntityRegistry):
        """
        Initialize the workflow.

        Args:
            registry: Product registry; sales go to ``registry.history``
        """
        self.registry = registry

    def record_sale(self, name: str, qty: int) -> SaleRecord:
        """
        Record a sale for today.

        Stock is reduced by ``qty`` and may go negative (backorder).
        Several sales on the same day accumulate in today's bucket.

        Args:
            name: Product name (case-insensitive)
            qty: Units sold (> 0)

        Returns:
            SaleRecord with the logical day and resulting stock

        Raises:
            NotFoundError: unknown product
            InvalidQuantityError: qty <= 0 (stock and history unchanged)
        """
        try:
            index = self.registry.find_index(name)
            # History first: a rejected quantity must not touch stock
            self.registry.history.record_today(index, qty)
        except ForecasterError as e:
            logger.warning(f"Sale rejected for {name!r} (qty={qty!r}): {e}")
            raise

        stock_after = self.registry.adjust_stock(index, -qty)
        entity = self.registry.get(index)
        day = self.registry.history.current_day

        if stock_after < 0:
            logger.info(f"Recorded sale: {entity.name} x{qty} on day {day}. Backorder: {-stock_after}")
        else:
            logger.info(f"Recorded sale: {entity.name} x{qty} on day {day}. New stock={stock_after}")

        return SaleRecord(name=entity.name, qty=qty, day=day, stock_after=stock_after)

    def record_bulk(self, sales: Dict[str, int]) -> List[str]:
        """
        Record several sales for today.

        Args:
            sales: Dict {product name: qty}

        Returns:
            List of status messages, one per entry

        Note: Continues processing when one entry fails.
        """
        results = []

        for name, qty in sales.items():
            try:
                record = self.record_sale(name, qty)
                results.append(f"✓ {record.name} | Sold: {record.qty} | Stock: {record.stock_after}")
            except ForecasterError as e:
                results.append(f"✗ {name} | Error: {e}")

        return results
