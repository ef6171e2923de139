"""SQL compilation from fragments to DB-API input.

This module turns immutable `SQL` fragments into a SQL string and parameters
matching a dialect's paramstyle. Search builders stay free of placeholder
concerns, and the same fragment can be previewed for several drivers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from .columns import Column
from .contracts import DialectPort
from .sql import SQL, Param
from .types import NamedParams, PositionalParams, QueryParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledFragment:
    """Represents a compiled SQL fragment with its bound parameters."""

    sql: str
    params: QueryParams


class _ParamNameGenerator:
    """Generates safe, unique parameter names for named SQL styles."""

    def __init__(self) -> None:
        self._counter = 0

    def next(self, base: str) -> str:
        """Return a deterministic parameter name based on a hint."""

        self._counter += 1
        safe = "".join(ch if ch.isalnum() or ch == "_" else "_" for ch in base)
        return f"{safe}_{self._counter}"


def compile_sql(fragment: SQL, dialect: DialectPort) -> CompiledFragment:
    """Compile a fragment into SQL text and parameters.

    Args:
        fragment: Fragment to compile.
        dialect: SQL dialect used for identifier quoting and placeholders.

    Returns:
        Compiled SQL and parameters: a dict for the `named` paramstyle, a list
        in textual order otherwise. Parameters are `None` when nothing is bound.
    """

    generator = _ParamNameGenerator()
    parts: List[str] = []
    params: QueryParams = _empty_params(dialect)

    _compile_chunks(fragment, dialect, generator, parts, params)

    text = "".join(parts)
    logger.debug(
        "Compiled SQL fragment for %s dialect with %d parameter(s): %s",
        dialect.name,
        len(params) if params else 0,
        text,
    )
    return CompiledFragment(text, params if params else None)


def _compile_chunks(
    fragment: SQL,
    dialect: DialectPort,
    generator: _ParamNameGenerator,
    parts: List[str],
    params: QueryParams,
) -> None:
    """Append compiled chunks of one fragment, recursing into nested fragments."""

    for chunk in fragment.chunks:
        if isinstance(chunk, str):
            parts.append(dialect.escape_text(chunk))
        elif isinstance(chunk, Param):
            parts.append(_bind(chunk, dialect, generator, params))
        elif isinstance(chunk, Column):
            parts.append(_column_sql(chunk, dialect))
        elif isinstance(chunk, SQL):
            _compile_chunks(chunk, dialect, generator, parts, params)
        else:
            raise TypeError(f"Unsupported SQL chunk type: {type(chunk).__name__}")


def _bind(
    param: Param,
    dialect: DialectPort,
    generator: _ParamNameGenerator,
    params: QueryParams,
) -> str:
    """Register one parameter and return its placeholder."""

    key = generator.next(param.hint)
    if dialect.paramstyle == "named":
        _merge_params(params, {key: param.value})
        return f":{key}"

    placeholder = dialect.placeholder(key)
    _merge_params(params, [param.value])
    return placeholder


def _column_sql(column: Column, dialect: DialectPort) -> str:
    """Render a column reference as a (qualified) quoted identifier."""

    name = dialect.escape_text(dialect.q(column.name))
    if column.table:
        return f"{dialect.escape_text(dialect.q(column.table))}.{name}"
    return name


def _empty_params(dialect: DialectPort) -> QueryParams:
    """Return empty parameters matching dialect param style."""

    return {} if dialect.paramstyle == "named" else []


def _merge_params(target: QueryParams, source: NamedParams | PositionalParams) -> None:
    """Merge parameter collections in place."""

    if isinstance(target, dict) and isinstance(source, dict):
        target.update(source)
    elif isinstance(target, list) and isinstance(source, list):
        target.extend(source)
