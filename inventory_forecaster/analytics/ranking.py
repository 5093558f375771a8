"""
Top-demand ranking by forecast daily average.
"""
from typing import List

from ..domain.models import DemandRank
from ..domain.registry import EntityRegistry
from ..forecast import ForecastEngine


def top_by_demand(
    registry: EntityRegistry,
    engine: ForecastEngine,
    k: int,
    window_days: int,
) -> List[DemandRank]:
    """
    Rank products by daily average demand, highest first.

    Ties keep registration order (``sorted`` is stable).

    Args:
        registry: Product registry
        engine: Forecast engine over the registry's history
        k: Number of rows to return (k <= 0 → empty, k > products → all)
        window_days: Averaging window

    Returns:
        List of DemandRank with 1-based ranks
    """
    if k <= 0:
        return []

    demand = [
        (engine.daily_average(index, window_days), entity)
        for index, entity in enumerate(registry)
    ]
    ranked = sorted(demand, key=lambda item: item[0], reverse=True)

    return [
        DemandRank(rank=position, name=entity.name, daily_average=average, stock=entity.stock)
        for position, (average, entity) in enumerate(ranked[:k], start=1)
    ]
