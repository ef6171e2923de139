"""Public port exports for concrete adapter implementations."""

from .db_api import Dialect, PostgresDialect

__all__ = [
    "Dialect",
    "PostgresDialect",
]
