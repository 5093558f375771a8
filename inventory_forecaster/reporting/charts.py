"""
History charts: daily sales over the retained window, rendered to PNG.
"""
import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence, Union

import numpy as np
from matplotlib.figure import Figure

from ..system import InventoryForecaster
from .console import day_label

logger = logging.getLogger(__name__)


def render_history_chart(
    forecaster: InventoryForecaster,
    names: Sequence[str],
    output_path: Union[str, Path],
    window_days: int = 7,
    base_date: Optional[date] = None,
) -> Path:
    """
    Save a grouped bar chart of daily sales with the forecast level per product.

    Args:
        forecaster: Source of history and forecasts
        names: Products to plot (at least one)
        output_path: PNG destination (parent directories are created)
        window_days: Window for the dashed daily-average line
        base_date: Calendar date of logical day 0, for axis labels

    Returns:
        Path of the written file

    Raises:
        NotFoundError: a name is not registered
        ValueError: no names given
    """
    if not names:
        raise ValueError("At least one product is required for a history chart")

    store = forecaster.history
    days = [store.date_for_column(col) for col in store.chronological_columns()]
    x = np.arange(len(days))
    width = 0.8 / len(names)

    fig = Figure(figsize=(10, 5), dpi=80)
    ax = fig.add_subplot(1, 1, 1)
    ax.set_title(f"Daily sales (last {store.capacity} days)")
    ax.set_xlabel("Day")
    ax.set_ylabel("Units sold")
    ax.grid(True, alpha=0.3)

    for i, name in enumerate(names):
        entity = forecaster.product(name)
        series = np.asarray(forecaster.sales_history(name))
        offset = (i - (len(names) - 1) / 2) * width
        bars = ax.bar(x + offset, series, width=width, label=entity.name)
        average = forecaster.forecast_daily(name, window_days)
        ax.axhline(
            average,
            linestyle="--",
            linewidth=1,
            color=bars.patches[0].get_facecolor(),
            label=f"{entity.name} {window_days}d avg={average}",
        )

    # Thin out tick labels so 30+ days stay readable
    step = max(1, len(days) // 10)
    ax.set_xticks(x[::step])
    ax.set_xticklabels([day_label(d, base_date) for d in days[::step]], rotation=45, ha="right")
    ax.legend(loc="upper left", fontsize="small")
    fig.tight_layout()

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, format="png")
    logger.info(f"History chart written to {path}")
    return path
