"""
Tests for the product registry.

Tests registration, case-insensitive lookup, updates and alignment with
the history store.
"""
import pytest

from inventory_forecaster.domain.errors import (
    AlreadyExistsError,
    ForecasterError,
    HistoryOutOfSyncError,
    NotFoundError,
    ValidationError,
)
from inventory_forecaster.domain.history import CircularHistoryStore
from inventory_forecaster.domain.registry import EntityRegistry


@pytest.fixture
def registry():
    """Empty registry over a 30-day store."""
    return EntityRegistry(CircularHistoryStore(capacity=30))


class TestRegister:
    """Registration and history allocation."""

    def test_register_returns_dense_indices(self, registry):
        """Indices are handed out 0, 1, 2 in registration order."""
        assert registry.register("Widget A", 120, 2.5, 5.0) == 0
        assert registry.register("Gadget B", 30, 8.0, 12.5) == 1
        assert len(registry) == 2

    def test_register_allocates_zero_history_row(self, registry):
        """Each product gets a zero-filled history row."""
        index = registry.register("Widget A", 120, 2.5, 5.0)
        assert len(registry.history) == 1
        assert registry.history.history(index) == [0] * 30

    def test_late_registration_keeps_existing_history(self, registry):
        """Registering later does not disturb recorded sales."""
        a = registry.register("A", 10, 1.0, 2.0)
        registry.history.record_today(a, 6)
        registry.history.advance_days(3)
        b = registry.register("B", 10, 1.0, 2.0)
        assert registry.history.total(a) == 6
        assert registry.history.total(b) == 0
        assert len(registry.history.row(b)) == 30

    def test_attributes_stored(self, registry):
        """Stock, cost and price are stored as given."""
        registry.register("Widget A", 120, 2.5, 5.0)
        entity = registry.entity("Widget A")
        assert entity.stock == 120
        assert entity.unit_cost == 2.5
        assert entity.unit_price == 5.0

    def test_name_is_stripped(self, registry):
        """Surrounding whitespace is dropped from names."""
        registry.register("  Notebook  ", 5, 0.7, 1.5)
        assert registry.names() == ["Notebook"]

    def test_negative_initial_stock_allowed(self, registry):
        """A product may start on backorder."""
        registry.register("Backordered", -4, 1.0, 2.0)
        assert registry.entity("Backordered").stock == -4


class TestDuplicateRegistration:
    """Names are unique ignoring case."""

    def test_duplicate_raises_and_leaves_state_unchanged(self, registry):
        """A duplicate name raises and allocates nothing."""
        registry.register("A", 100, 1.0, 2.0)
        with pytest.raises(AlreadyExistsError):
            registry.register("A", 5, 9.0, 9.0)

        assert len(registry) == 1
        assert len(registry.history) == 1
        entity = registry.entity("A")
        assert (entity.stock, entity.unit_cost, entity.unit_price) == (100, 1.0, 2.0)

    @pytest.mark.parametrize("other", ["widget a", "WIDGET A", " Widget a "])
    def test_duplicate_ignores_case_and_spaces(self, registry, other):
        """Duplicates are detected regardless of case and padding."""
        registry.register("Widget A", 1, 1.0, 1.0)
        with pytest.raises(AlreadyExistsError):
            registry.register(other, 1, 1.0, 1.0)


class TestValidation:
    """Malformed inputs are rejected before any allocation."""

    @pytest.mark.parametrize(
        "name, stock, cost, price",
        [
            ("", 1, 1.0, 1.0),
            ("   ", 1, 1.0, 1.0),
            ("X", 1.5, 1.0, 1.0),
            ("X", 1, -0.5, 1.0),
            ("X", 1, 1.0, -2.0),
            ("X", 1, "cheap", 1.0),
        ],
    )
    def test_invalid_registration(self, registry, name, stock, cost, price):
        """Malformed attributes raise ValidationError."""
        with pytest.raises(ValidationError):
            registry.register(name, stock, cost, price)
        assert len(registry) == 0
        assert len(registry.history) == 0

    def test_registry_requires_empty_store(self):
        """A registry cannot adopt a store that already has rows."""
        store = CircularHistoryStore(capacity=5)
        store.allocate()
        with pytest.raises(ValidationError):
            EntityRegistry(store)


class TestLookup:
    """Case-insensitive lookup."""

    def test_find_index_case_insensitive(self, registry):
        """Lookup ignores case."""
        registry.register("Coffee Beans", 50, 6.0, 10.0)
        assert registry.find_index("coffee beans") == 0
        assert registry.find_index("COFFEE BEANS") == 0
        assert "cOfFeE bEaNs" in registry

    def test_find_unknown_raises(self, registry):
        """Unknown names raise NotFoundError."""
        with pytest.raises(NotFoundError):
            registry.find_index("Missing")

    def test_not_found_is_a_key_error(self, registry):
        """NotFoundError can be caught as KeyError."""
        with pytest.raises(KeyError):
            registry.find_index("Missing")

    def test_get_out_of_range(self, registry):
        """Index lookups outside the catalog raise NotFoundError."""
        with pytest.raises(NotFoundError):
            registry.get(0)

    def test_iteration_follows_registration_order(self, registry):
        """Iteration yields products in registration order."""
        for name in ["C", "A", "B"]:
            registry.register(name, 1, 1.0, 1.0)
        assert [e.name for e in registry] == ["C", "A", "B"]


class TestUpdates:
    """Stock and price updates."""

    def test_set_stock(self, registry):
        """Stock is overwritten, negative values included."""
        registry.register("Gadget B", 30, 8.0, 12.5)
        registry.set_stock("gadget b", 60)
        assert registry.entity("Gadget B").stock == 60

    def test_set_stock_unknown(self, registry):
        """Updating an unknown product raises NotFoundError."""
        with pytest.raises(NotFoundError):
            registry.set_stock("Nope", 1)

    def test_set_prices(self, registry):
        """Cost and price are overwritten together."""
        registry.register("Coffee Beans", 50, 6.0, 10.0)
        registry.set_prices("Coffee Beans", 5.5, 9.5)
        entity = registry.entity("Coffee Beans")
        assert entity.unit_cost == 5.5
        assert entity.unit_price == 9.5

    def test_set_prices_unknown(self, registry):
        """Repricing an unknown product raises NotFoundError."""
        with pytest.raises(NotFoundError):
            registry.set_prices("Nope", 1.0, 2.0)

    def test_set_prices_negative_rejected(self, registry):
        """Negative prices are rejected without changes."""
        registry.register("A", 1, 1.0, 2.0)
        with pytest.raises(ValidationError):
            registry.set_prices("A", -1.0, 2.0)
        assert registry.entity("A").unit_cost == 1.0

    def test_adjust_stock_can_go_negative(self, registry):
        """Adjustments may push stock below zero."""
        index = registry.register("A", 3, 1.0, 2.0)
        assert registry.adjust_stock(index, -5) == -2


class TestStoreAlignment:
    """Registry and history store stay index-aligned."""

    def test_register_after_store_reset_rejected(self, registry):
        """A store reset behind the registry blocks registration before allocating."""
        registry.register("Widget A", 120, 2.5, 5.0)
        registry.history.reset()
        with pytest.raises(HistoryOutOfSyncError):
            registry.register("Gadget B", 30, 8.0, 12.5)
        assert len(registry.history) == 0
        assert registry.names() == ["Widget A"]

    def test_out_of_sync_is_a_forecaster_error(self, registry):
        """The alignment failure is recoverable like other domain errors."""
        registry.register("Widget A", 120, 2.5, 5.0)
        registry.history.reset()
        with pytest.raises(ForecasterError):
            registry.register("Gadget B", 30, 8.0, 12.5)

    def test_clear_with_store_reset_starts_over(self, registry):
        """Clearing together with a store reset gives index 0 again."""
        registry.register("Widget A", 120, 2.5, 5.0)
        registry.history.reset()
        registry.clear()
        assert len(registry) == 0
        assert "Widget A" not in registry
        assert registry.register("Widget A", 10, 1.0, 2.0) == 0
        assert registry.history.row(0) == tuple([0] * 30)
