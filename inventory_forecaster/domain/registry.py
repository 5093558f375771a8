"""
Product registry: maps product names to dense entity indices.

The registry and its CircularHistoryStore are index-aligned: entity ``i`` owns
history row ``i``. Products are never removed or reordered; the only way to
start over is to reset the store and clear the registry together.
"""
import logging
from typing import Dict, Iterator, List

from .errors import AlreadyExistsError, HistoryOutOfSyncError, NotFoundError, ValidationError
from .history import CircularHistoryStore
from .models import Entity
from .validation import validate_price, validate_product_name, validate_quantity

logger = logging.getLogger(__name__)


def _lookup_key(name: str) -> str:
    return name.strip().casefold()


class EntityRegistry:
    """Ordered product catalog with case-insensitive names."""

    def __init__(self, history: CircularHistoryStore):
        """
        Args:
            history: Store that receives one row per registered product
        """
        if len(history) != 0:
            raise ValidationError("History store must be empty when the registry is created")
        self.history = history
        self._entities: List[Entity] = []
        self._index_by_key: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        """Products in registration order."""
        return iter(self._entities)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _lookup_key(name) in self._index_by_key

    def register(self, name: str, initial_stock: int, cost: float, price: float) -> int:
        """
        Register a new product and allocate its history row.

        Args:
            name: Product name (unique, case-insensitive; surrounding spaces ignored)
            initial_stock: Starting stock (may be negative for a backorder)
            cost: Unit cost
            price: Unit selling price

        Returns:
            Dense entity index of the new product

        Raises:
            AlreadyExistsError: a product with the same name exists (no state change)
            ValidationError: name, stock, cost or price is malformed
            HistoryOutOfSyncError: the store was reset without clearing the registry
        """
        self._validate(name, initial_stock, cost, price)
        clean_name = name.strip()
        entity = Entity(name=clean_name, stock=initial_stock, unit_cost=float(cost), unit_price=float(price))
        key = entity.key

        if key in self._index_by_key:
            existing = self._entities[self._index_by_key[key]]
            logger.warning(f"Product already exists: {clean_name!r} (registered as {existing.name!r})")
            raise AlreadyExistsError(f"Product already exists: {existing.name}")

        if len(self.history) != len(self._entities):
            logger.error(
                f"History store out of sync: {len(self.history)} rows for {len(self._entities)} products"
            )
            raise HistoryOutOfSyncError(
                f"History store has {len(self.history)} rows for {len(self._entities)} products; "
                "reset the forecaster instead of the store alone"
            )
        index = self.history.allocate()

        self._entities.append(entity)
        self._index_by_key[key] = index
        logger.info(f"Added product: {clean_name} (stock={initial_stock}, index={index})")
        return index

    def find_index(self, name: str) -> int:
        """
        Resolve a product name to its entity index (case-insensitive).

        Raises:
            NotFoundError: no product with that name
        """
        key = _lookup_key(name) if isinstance(name, str) else None
        if key not in self._index_by_key:
            raise NotFoundError(f"Product not found: {name}")
        return self._index_by_key[key]

    def clear(self) -> None:
        """
        Forget every product.

        Only valid together with a reset of the history store, which drops
        the matching rows.
        """
        self._entities = []
        self._index_by_key = {}
        logger.info("Registry cleared")

    def get(self, index: int) -> Entity:
        """Entity at a dense index."""
        if index < 0 or index >= len(self._entities):
            raise NotFoundError(f"No product at index {index}")
        return self._entities[index]

    def entity(self, name: str) -> Entity:
        """Entity for a product name (case-insensitive)."""
        return self._entities[self.find_index(name)]

    def names(self) -> List[str]:
        """Product names in registration order."""
        return [e.name for e in self._entities]

    def set_stock(self, name: str, value: int) -> None:
        """Overwrite current stock (negative allowed for backorder)."""
        is_valid, error = validate_quantity(value, allow_negative=True)
        if not is_valid:
            raise ValidationError(f"Stock: {error}")
        entity = self.entity(name)
        entity.stock = value
        logger.info(f"Stock updated: {entity.name} -> {value}")

    def set_prices(self, name: str, cost: float, price: float) -> None:
        """Overwrite unit cost and unit price."""
        for value, field_name in ((cost, "Unit cost"), (price, "Unit price")):
            is_valid, error = validate_price(value, field_name)
            if not is_valid:
                raise ValidationError(error)
        entity = self.entity(name)
        entity.unit_cost = float(cost)
        entity.unit_price = float(price)
        logger.info(f"Prices updated: {entity.name} -> cost={cost:.2f}, price={price:.2f}")

    def adjust_stock(self, index: int, delta: int) -> int:
        """
        Add ``delta`` to a product's stock and return the new value.

        Stock may go negative (backorder).
        """
        entity = self.get(index)
        entity.stock += delta
        return entity.stock

    @staticmethod
    def _validate(name: str, initial_stock: int, cost: float, price: float) -> None:
        checks = (
            validate_product_name(name),
            validate_quantity(initial_stock, allow_negative=True),
            validate_price(cost, "Unit cost"),
            validate_price(price, "Unit price"),
        )
        errors = [error for is_valid, error in checks if not is_valid]
        if errors:
            raise ValidationError("; ".join(errors))
