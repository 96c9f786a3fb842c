"""Database models and configuration for the profit calculator."""

from .base import Base, create_tables, drop_tables, get_db, get_engine, get_session
from .models import ProfitCalculation

__all__ = [
    "Base",
    "create_tables",
    "drop_tables",
    "get_db",
    "get_engine",
    "get_session",
    "ProfitCalculation",
]
