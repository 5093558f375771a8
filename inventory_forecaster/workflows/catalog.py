"""
Catalog workflow: product registration and master-data updates.
"""
import logging
from typing import List

from ..domain.errors import ForecasterError
from ..domain.models import Entity
from ..domain.registry import EntityRegistry

logger = logging.getLogger(__name__)


class CatalogWorkflow:
    """Thin wrapper over the registry used by the demo and reporting layers."""

    def __init__(self, registry: EntityRegistry):
        """
        Initialize the workflow.

        Args:
            registry: Product registry (owns the history store)
        """
        self.registry = registry

    def add_product(self, name: str, initial_stock: int, cost: float, price: float) -> int:
        """
        Register a product with a zero-filled sales history.

        Returns:
            Entity index

        Raises:
            AlreadyExistsError: name already registered (case-insensitive)
            ValidationError: malformed name, stock or prices
        """
        return self.registry.register(name, initial_stock, cost, price)

    def update_stock(self, name: str, new_stock: int) -> None:
        """
        Set stock to an absolute value (e.g. after a physical count).

        Raises:
            NotFoundError: unknown product
        """
        try:
            self.registry.set_stock(name, new_stock)
        except ForecasterError as e:
            logger.warning(f"Stock update rejected for {name!r}: {e}")
            raise

    def update_prices(self, name: str, new_cost: float, new_price: float) -> None:
        """
        Set unit cost and unit price.

        Raises:
            NotFoundError: unknown product
        """
        try:
            self.registry.set_prices(name, new_cost, new_price)
        except ForecasterError as e:
            logger.warning(f"Price update rejected for {name!r}: {e}")
            raise

    def list_products(self) -> List[Entity]:
        """Products in registration order."""
        return list(self.registry)
