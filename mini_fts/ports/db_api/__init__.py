"""DB-API dialect exports."""

from .dialects import Dialect, PostgresDialect

__all__ = [
    "Dialect",
    "PostgresDialect",
]
