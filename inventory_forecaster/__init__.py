"""
Inventory demand forecaster.

Rolling per-product sales history with moving-average forecasts, reorder
recommendations and profit estimates.
"""
from .domain.errors import (
    AlreadyExistsError,
    ForecasterError,
    HistoryOutOfSyncError,
    InvalidQuantityError,
    NegativeHorizonError,
    NotFoundError,
    ValidationError,
)
from .domain.history import CircularHistoryStore
from .domain.registry import EntityRegistry
from .forecast import ForecastEngine
from .replenishment_policy import ReorderPlanner
from .analytics import ProfitEstimator, top_by_demand
from .system import InventoryForecaster

__version__ = "1.0.0"

__all__ = [
    "AlreadyExistsError",
    "CircularHistoryStore",
    "EntityRegistry",
    "ForecastEngine",
    "ForecasterError",
    "HistoryOutOfSyncError",
    "InvalidQuantityError",
    "InventoryForecaster",
    "NegativeHorizonError",
    "NotFoundError",
    "ProfitEstimator",
    "ReorderPlanner",
    "ValidationError",
    "top_by_demand",
]
