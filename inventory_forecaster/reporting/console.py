"""
Plain-text reports for the console.

Every function returns a string; printing is left to the caller.
"""
from datetime import date, timedelta
from typing import Iterable, List, Optional, Sequence

from config import FORECAST_WINDOWS
from ..domain.models import DemandRank, ProfitResult, ReorderEntry
from ..replenishment_policy import total_cost
from ..system import InventoryForecaster


def day_label(day: int, base_date: Optional[date] = None) -> str:
    """
    Label for a logical day.

    With a base date (the calendar date of logical day 0) the label is an
    ISO date, otherwise "day N".
    """
    if base_date is None:
        return f"day {day}"
    return (base_date + timedelta(days=day)).isoformat()


def format_inventory(
    forecaster: InventoryForecaster,
    windows: Sequence[int] = FORECAST_WINDOWS,
) -> str:
    """Inventory snapshot with stock, prices and moving averages."""
    header = f"{'Product':<20} {'Stock':>8} {'Cost':>10} {'Price':>10}"
    header += "".join(f" {str(w) + 'dAvg':>7}" for w in windows)
    lines = ["Inventory snapshot:", header]

    for index, entity in enumerate(forecaster.products()):
        averages = forecaster.engine.daily_averages(index, windows)
        row = f"{entity.name:<20} {entity.stock:>8d} {entity.unit_cost:>10.2f} {entity.unit_price:>10.2f}"
        row += "".join(f" {averages[w]:>7d}" for w in windows)
        lines.append(row)

    if len(lines) == 2:
        lines.append("(no products)")
    return "\n".join(lines)


def format_sales_history(
    forecaster: InventoryForecaster,
    name: str,
    base_date: Optional[date] = None,
) -> str:
    """
    Chronological sales history for one product, oldest day first.

    Raises:
        NotFoundError: unknown product
    """
    entity = forecaster.product(name)
    index = forecaster.registry.find_index(name)
    store = forecaster.history
    row = store.row(index)

    lines = [f"Sales history for {entity.name} (chronological oldest->today):"]
    for col in store.chronological_columns():
        label = day_label(store.date_for_column(col), base_date)
        lines.append(f"{label} : {row[col]}")
    return "\n".join(lines)


def format_top_demand(ranks: Iterable[DemandRank], window_days: int) -> str:
    """Top-demand ranking."""
    ranks = list(ranks)
    if not ranks:
        return "No products."

    lines = [f"Top demanded products (by daily avg over windowDays={window_days}):"]
    for r in ranks:
        lines.append(f"{r.rank}) {r.name} - forecast/daily={r.daily_average}, stock={r.stock}")
    return "\n".join(lines)


def format_reorder_list(entries: Iterable[ReorderEntry]) -> str:
    """Reorder recommendations with a total estimated cost."""
    entries: List[ReorderEntry] = list(entries)
    if not entries:
        return "No items to reorder."

    lines = [
        "Reorder recommendations:",
        f"{'Product':<20} {'Qty':>10} {'Est. Cost':>12}",
    ]
    for entry in entries:
        lines.append(f"{entry.name:<20} {entry.needed_qty:>10d} {entry.est_cost:>12.2f}")
    lines.append(f"{'Total':<20} {'':>10} {total_cost(entries):>12.2f}")
    return "\n".join(lines)


def format_profit(result: ProfitResult, detailed: bool = False) -> str:
    """Profit estimate line, optionally with the per-product breakdown."""
    lines = []
    if detailed:
        lines.append(f"{'Product':<20} {'Predicted':>10} {'Sellable':>10} {'Margin':>8} {'Profit':>12}")
        for line in result.lines:
            lines.append(
                f"{line.name:<20} {line.predicted:>10d} {line.sellable:>10d} "
                f"{line.unit_margin:>8.2f} {line.profit:>12.2f}"
            )
    lines.append(
        f"Estimated profit over next {result.days_ahead} days "
        f"(sellable portion only): {result.total:.2f}"
    )
    return "\n".join(lines)
