"""Immutable SQL fragments with safe value interpolation.

A fragment is a tuple of chunks: trusted template text, bound parameters,
column references, and nested fragments. Values never become SQL text; they
stay `Param` chunks until `compile_sql` turns them into driver placeholders.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Union
from uuid import UUID

from .columns import Column


_SCALAR_TYPES = (str, int, float, bool, Decimal, bytes, date, datetime, time, UUID)
_FORMATTER = string.Formatter()


@dataclass(frozen=True)
class Param:
    """A value bound as a driver parameter.

    Attributes:
        value: Python value passed to the driver.
        hint: Base used to generate the parameter name for named styles.
    """

    value: Any
    hint: str = "param"


Chunk = Union[str, Param, Column, "SQL"]


@dataclass(frozen=True)
class SQL:
    """Composable SQL fragment."""

    chunks: tuple[Chunk, ...] = ()

    @property
    def params(self) -> tuple[Param, ...]:
        """Return bound parameters in textual order, nested fragments included."""

        collected: list[Param] = []
        for chunk in self.chunks:
            if isinstance(chunk, Param):
                collected.append(chunk)
            elif isinstance(chunk, SQL):
                collected.extend(chunk.params)
        return tuple(collected)


def sql(template: str, *values: Any) -> SQL:
    """Build a fragment from a template with `{}` interpolation slots.

    Each slot receives the next value. Fragments and columns are embedded,
    enum members contribute their value, and scalars are bound as parameters.
    Literal braces are written as `{{` and `}}`.

    Args:
        template: Trusted SQL text containing only positional `{}` slots.
        *values: One value per slot.

    Returns:
        Immutable fragment.

    Raises:
        ValueError: If the template uses named/indexed slots or format specs,
            or if the slot count does not match the value count.
        TypeError: If a value cannot be interpolated.
    """

    chunks: list[Chunk] = []
    remaining = list(values)
    for literal, field_name, format_spec, conversion in _FORMATTER.parse(template):
        if literal:
            chunks.append(literal)
        if field_name is None:
            continue
        if field_name != "" or format_spec or conversion:
            raise ValueError(
                f"SQL templates only support positional '{{}}' slots, got {{{field_name}}}."
            )
        if not remaining:
            raise ValueError(
                f"SQL template expects more values than the {len(values)} given."
            )
        chunks.append(_interpolate(remaining.pop(0)))

    if remaining:
        raise ValueError(
            f"SQL template has fewer slots than the {len(values)} values given."
        )
    return SQL(tuple(chunks))


def raw(text: str) -> SQL:
    """Build a fragment from trusted SQL text without parameters."""

    return SQL((text,)) if text else SQL()


def join_sql(parts: Iterable[Any], separator: str = ", ") -> SQL:
    """Join values or fragments with a trusted separator."""

    chunks: list[Chunk] = []
    for index, part in enumerate(parts):
        if index and separator:
            chunks.append(separator)
        chunks.append(_interpolate(part))
    return SQL(tuple(chunks))


def _interpolate(value: Any) -> Chunk:
    """Convert one interpolated value into a fragment chunk."""

    if isinstance(value, (SQL, Column, Param)):
        return value
    if isinstance(value, Enum):
        value = value.value
    if value is None or isinstance(value, _SCALAR_TYPES):
        return Param(value)
    raise TypeError(
        f"Cannot interpolate value of type {type(value).__name__} into SQL fragment."
    )
