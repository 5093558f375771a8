"""
Demo driver: sample catalog, sixteen simulated days of sales, then reports.

Usage:
    python main.py
    python main.py --window 14 --horizon 21 --chart data/widget_a.png
    python main.py --base-date 2026-01-01 --log-dir logs/
"""
import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

import config
from .domain.errors import ForecasterError
from .reporting.console import (
    format_inventory,
    format_profit,
    format_reorder_list,
    format_sales_history,
    format_top_demand,
)
from .system import InventoryForecaster
from .utils.error_formatting import ErrorFormatter
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = (
    # name, stock, cost, price
    ("Widget A", 120, 2.50, 5.00),
    ("Gadget B", 30, 8.00, 12.50),
    ("Coffee Beans", 50, 6.00, 10.00),
    ("Notebook", 200, 0.70, 1.50),
)


def build_demo_forecaster(history_days: int = config.HISTORY_DAYS) -> InventoryForecaster:
    """
    Sample catalog with sixteen days of recorded sales (today = day 16).

    Widget A trends up for five days and then settles; the other products
    follow small repeating patterns.
    """
    forecaster = InventoryForecaster(history_days=history_days)
    for name, stock, cost, price in SAMPLE_PRODUCTS:
        forecaster.add_product(name, stock, cost, price)

    # Day 0
    forecaster.record_sales({"Widget A": 12, "Gadget B": 3, "Coffee Beans": 5, "Notebook": 9})

    # Day 1
    forecaster.advance_day()
    forecaster.record_sales({"Widget A": 10, "Gadget B": 4, "Coffee Beans": 8, "Notebook": 7})

    # Days 2-6: heavier Widget A days
    for i in range(5):
        forecaster.advance_day()
        forecaster.record_sales({
            "Widget A": 15 + i,
            "Gadget B": 2 + (i % 2),
            "Coffee Beans": 3 + (i % 3),
            "Notebook": 5 + (i % 4),
        })

    # Days 7-16: fill the 14-day window
    for i in range(10):
        forecaster.advance_day()
        forecaster.record_sales({
            "Widget A": 7 + (i % 5),
            "Gadget B": 1 + (i % 3),
            "Coffee Beans": 2 + (i % 4),
            "Notebook": 3 + (i % 6),
        })

    return forecaster


def run_demo(
    window_days: int,
    days_ahead: int,
    top_k: int,
    history_days: int = config.HISTORY_DAYS,
    base_date: Optional[date] = None,
    chart_path: Optional[Path] = None,
) -> List[str]:
    """
    Run the scripted scenario and return the report sections in order.
    """
    forecaster = build_demo_forecaster(history_days)
    sections: List[str] = []

    sections.append(format_inventory(forecaster))
    sections.append(format_top_demand(forecaster.top_demanded(top_k, window_days), window_days))
    sections.append(format_reorder_list(forecaster.reorder_list(window_days, days_ahead)))
    sections.append(format_profit(forecaster.profit_breakdown(window_days, days_ahead), detailed=True))
    sections.append(format_sales_history(forecaster, "Widget A", base_date=base_date))

    # Rejected inputs are reported, not fatal
    for operation, action in (
        ("add_product", lambda: forecaster.add_product("widget a", 10, 1.0, 2.0)),
        ("record_sale", lambda: forecaster.record_sale("Gadget B", 0)),
        ("record_sale", lambda: forecaster.record_sale("Gizmo Z", 1)),
    ):
        try:
            action()
        except ForecasterError as e:
            error_ctx = ErrorFormatter.format_forecaster_error(e, operation)
            logger.warning(error_ctx.format_for_log())
            sections.append(error_ctx.format_for_display())

    forecaster.update_stock("Gadget B", 60)
    forecaster.update_prices("Coffee Beans", 5.50, 9.50)
    sections.append("After updates:\n" + format_inventory(forecaster))
    sections.append(format_reorder_list(forecaster.reorder_list(window_days, days_ahead)))

    if chart_path is not None:
        from .reporting.charts import render_history_chart  # noqa: PLC0415
        path = render_history_chart(
            forecaster,
            [name for name, *_ in SAMPLE_PRODUCTS],
            chart_path,
            window_days=window_days,
            base_date=base_date,
        )
        sections.append(f"History chart saved: {path}")

    return sections


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def main(argv: Optional[List[str]] = None) -> int:
    settings = config.load_settings()

    parser = argparse.ArgumentParser(
        description="Inventory demand forecaster demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--window", type=_positive_int, default=settings["window_days"],
                        help=f"Averaging window in days (default: {settings['window_days']})")
    parser.add_argument("--horizon", type=int, default=settings["horizon_days"],
                        help=f"Days ahead to cover (default: {settings['horizon_days']})")
    parser.add_argument("--top", type=int, default=settings["top_k"],
                        help=f"Rows in the top-demand ranking (default: {settings['top_k']})")
    parser.add_argument("--history-days", type=_positive_int, default=settings["history_days"],
                        help=f"Days of history retained (default: {settings['history_days']})")
    parser.add_argument("--base-date", type=str, default=None,
                        help="Calendar date of logical day 0 (YYYY-MM-DD), for display")
    parser.add_argument("--chart", type=Path, default=None, help="Write a PNG history chart here")
    parser.add_argument("--log-dir", type=str, default=None, help="Log directory (default: logs/)")
    parser.add_argument("--verbose", action="store_true", help="Echo sales and day closes to the console")

    args = parser.parse_args(argv)
    setup_logging(log_dir=args.log_dir, verbose=args.verbose)

    base_date = None
    if args.base_date is not None:
        try:
            base_date = date.fromisoformat(args.base_date)
        except ValueError as e:
            error_ctx = ErrorFormatter.format_validation_error(
                "base-date", args.base_date, f"date format ({e})", expected="YYYY-MM-DD"
            )
            logger.warning(error_ctx.format_for_log())
            print(error_ctx.format_for_display())
            return 2

    try:
        sections = run_demo(
            window_days=args.window,
            days_ahead=args.horizon,
            top_k=args.top,
            history_days=args.history_days,
            base_date=base_date,
            chart_path=args.chart,
        )
    except ForecasterError as e:
        error_ctx = ErrorFormatter.format_forecaster_error(e, "demo")
        logger.error(error_ctx.format_for_log())
        print(error_ctx.format_for_display(include_technical=True))
        return 1

    print("\n\n".join(sections))
    print("\nDemo complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
