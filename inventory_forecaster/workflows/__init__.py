"""Workflows module."""
from .catalog import CatalogWorkflow
from .sales import SalesWorkflow
from .daily_close import DailyCloseWorkflow

__all__ = ['CatalogWorkflow', 'SalesWorkflow', 'DailyCloseWorkflow']
