"""Core port contracts used by fragment compilation."""

from __future__ import annotations

from typing import Protocol


class DialectPort(Protocol):
    """Dialect behavior required by fragment compilation."""

    name: str
    paramstyle: str

    def q(self, ident: str) -> str: ...

    def placeholder(self, key: str) -> str: ...

    def escape_text(self, text: str) -> str: ...
