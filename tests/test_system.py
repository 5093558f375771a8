"""
End-to-end scenarios through the InventoryForecaster facade.
"""
import pytest

from inventory_forecaster import (
    AlreadyExistsError,
    HistoryOutOfSyncError,
    InventoryForecaster,
    NegativeHorizonError,
    NotFoundError,
    ValidationError,
)


@pytest.fixture
def forecaster():
    f = InventoryForecaster(history_days=30)
    f.add_product("A", 100, 1.0, 2.0)
    return f


class TestRetentionScenario:
    """A sale stays in the window for exactly 30 days."""

    def test_sale_ages_out_on_thirtieth_advance(self, forecaster):
        """A sale counts for 30 days, then drops out of the window."""
        index = forecaster.registry.find_index("A")
        forecaster.record_sale("A", 10)
        for _ in range(29):
            forecaster.advance_day()
        assert forecaster.history.sum_last_k(index, 30) == 10

        forecaster.advance_day()
        assert forecaster.history.sum_last_k(index, 30) == 0

    def test_stock_not_restored_when_sale_ages_out(self, forecaster):
        """Ageing out only affects history, never stock."""
        forecaster.record_sale("A", 10)
        forecaster.advance_days(30)
        assert forecaster.product("A").stock == 90


class TestSteadyDemandScenario:
    """Seven days of 14 units."""

    def test_average_and_horizon(self, forecaster):
        """7 x 14 units gives 14\/day and 196 over two weeks."""
        for day in range(7):
            if day:
                forecaster.advance_day()
            forecaster.record_sale("A", 14)

        assert forecaster.forecast_daily("A", 7) == 14
        assert forecaster.forecast_total("A", 7, 14) == 196
        # stock 100 - 98 = 2, predicted 196 → reorder 194 at cost 1.0
        [entry] = forecaster.reorder_list(7, 14)
        assert (entry.name, entry.needed_qty, entry.est_cost) == ("A", 194, 194.0)
        # sellable = min(196, 2) = 2 at margin 1.0
        assert forecaster.estimate_profit(7, 14) == pytest.approx(2.0)

    def test_window_beyond_capacity_equals_capacity(self, forecaster):
        """Windows longer than the history are clamped to it."""
        for day in range(45):
            if day:
                forecaster.advance_day()
            forecaster.record_sale("A", 1 + day % 3)
        assert forecaster.forecast_daily("A", 365) == forecaster.forecast_daily("A", 30)


class TestFacadeErrors:
    """Errors surface unchanged through the facade."""

    def test_duplicate_registration_keeps_first(self, forecaster):
        """A case-insensitive duplicate leaves the first product untouched."""
        with pytest.raises(AlreadyExistsError):
            forecaster.add_product("a", 1, 9.0, 9.0)
        product = forecaster.product("A")
        assert (product.stock, product.unit_cost, product.unit_price) == (100, 1.0, 2.0)
        assert len(forecaster.products()) == 1

    def test_forecast_unknown_product(self, forecaster):
        """Forecasting an unknown product raises NotFoundError."""
        with pytest.raises(NotFoundError):
            forecaster.forecast_daily("Z", 7)

    def test_negative_horizon(self, forecaster):
        """A negative horizon raises NegativeHorizonError."""
        with pytest.raises(NegativeHorizonError):
            forecaster.forecast_total("A", 7, -14)


class TestFacadeQueries:
    """Reads used by the reporting layer."""

    def test_sales_history_oldest_to_today(self, forecaster):
        """History lists the oldest day first and today last."""
        forecaster.record_sale("A", 3)
        forecaster.advance_day()
        forecaster.record_sale("A", 5)
        history = forecaster.sales_history("a")
        assert len(history) == 30
        assert history[-2:] == [3, 5]
        assert sum(history) == 8

    def test_top_demanded(self, forecaster):
        """Ranking is by daily average, highest first."""
        forecaster.add_product("B", 10, 1.0, 2.0)
        forecaster.record_sale("B", 14)
        ranks = forecaster.top_demanded(5, 7)
        assert [r.name for r in ranks] == ["B", "A"]
        assert ranks[0].daily_average == 2

    def test_products_added_late_share_timeline(self, forecaster):
        """Products registered later record on the shared current day."""
        forecaster.advance_days(3)
        forecaster.add_product("Late", 5, 1.0, 1.0)
        record = forecaster.record_sale("Late", 1)
        assert record.day == forecaster.current_day == 3
        assert forecaster.sales_history("Late")[-1] == 1

    def test_independent_forecasters(self):
        """Each forecaster owns its own timeline."""
        first = InventoryForecaster(history_days=7)
        second = InventoryForecaster(history_days=7)
        first.advance_days(4)
        assert first.current_day == 4
        assert second.current_day == 0
        assert first.history_days == 7


class TestReset:
    """Products and history are cleared together."""

    def test_reset_clears_products_and_timeline(self, forecaster):
        """Reset empties the catalog and restarts at day 0."""
        forecaster.record_sale("A", 5)
        forecaster.advance_days(3)
        forecaster.reset()
        assert forecaster.products() == []
        assert forecaster.current_day == 0
        assert forecaster.history_days == 30
        assert "A" not in forecaster.registry

    def test_reset_with_new_history_days(self, forecaster):
        """Products registered after a resize get rows of the new length."""
        forecaster.reset(history_days=14)
        forecaster.add_product("B", 10, 1.0, 2.0)
        forecaster.record_sale("B", 3)
        assert forecaster.history_days == 14
        assert forecaster.sales_history("B") == [0] * 13 + [3]
        assert forecaster.registry.find_index("B") == 0

    def test_reset_rejects_bad_history_days(self, forecaster):
        """An invalid length leaves products and history in place."""
        forecaster.record_sale("A", 4)
        with pytest.raises(ValidationError):
            forecaster.reset(history_days=0)
        assert forecaster.history_days == 30
        assert forecaster.sales_history("A")[-1] == 4
        assert forecaster.product("A").stock == 96

    def test_store_reset_alone_blocks_registration(self, forecaster):
        """Resetting only the store makes registration fail without side effects."""
        forecaster.history.reset(capacity=14)
        with pytest.raises(HistoryOutOfSyncError):
            forecaster.add_product("B", 10, 1.0, 2.0)
        assert len(forecaster.history) == 0
        assert [p.name for p in forecaster.products()] == ["A"]
        assert "B" not in forecaster.registry

    def test_orphaned_product_cannot_record(self, forecaster):
        """A product whose row was dropped cannot record sales."""
        forecaster.history.reset()
        with pytest.raises(NotFoundError):
            forecaster.record_sale("A", 3)
        assert forecaster.product("A").stock == 100
