"""Analytics package for profit estimation and demand ranking."""

from .profit import ProfitEstimator
from .ranking import top_by_demand

__all__ = [
    "ProfitEstimator",
    "top_by_demand",
]
