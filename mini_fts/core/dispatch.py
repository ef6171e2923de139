"""Argument classification shared by the full-text search builders.

Every search builder accepts a short positional argument list whose meaning
depends on its length and runtime types. `resolve_arguments` is the single
place where that meaning is decided, so the builders only pick a template.
"""

from __future__ import annotations

from collections.abc import Sequence as SequenceABC
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class ResolvedArguments:
    """Arguments of one builder call, sorted into semantic roles.

    Attributes:
        payload: Document, vector, or query values in call order.
        configuration: Text search configuration, when given.
        weights: Numeric label weights, when given.
        normalization: Rank normalization bitmask, when given.
    """

    payload: tuple[Any, ...]
    configuration: Any = None
    weights: Optional[Sequence[Any]] = None
    normalization: Any = None


def resolve_arguments(
    args: Sequence[Any],
    *,
    payload_arity: int,
    accepts_configuration: bool = False,
    accepts_weights: bool = False,
    accepts_normalization: bool = False,
) -> ResolvedArguments:
    """Classify positional builder arguments by count and runtime type.

    Trailing `None` values are unused optional parameters and are dropped
    before classification.

    - A leading numeric array is weights when weights are accepted, at least
      three arguments are present, and the second one is not a plain number.
    - Otherwise a leading argument beyond `payload_arity` is the configuration
      when configurations are accepted.
    - The last argument past the payload is the normalization flag when
      normalization is accepted.
    - Whatever remains fills the payload slots in order.

    Args:
        args: Positional arguments as received by the builder.
        payload_arity: Number of mandatory payload values.
        accepts_configuration: Whether a leading configuration is allowed.
        accepts_weights: Whether a leading weights array is allowed.
        accepts_normalization: Whether a trailing normalization is allowed.

    Returns:
        Arguments sorted into roles. Nothing is validated.
    """

    remaining = _present(args)
    configuration = None
    weights = None
    normalization = None

    if (
        accepts_weights
        and len(remaining) >= 3
        and is_number_array(remaining[0])
        and not is_number(remaining[1])
    ):
        weights, remaining = remaining[0], remaining[1:]
    elif accepts_configuration and len(remaining) > payload_arity:
        configuration, remaining = remaining[0], remaining[1:]

    if accepts_normalization and len(remaining) > payload_arity:
        normalization, remaining = remaining[-1], remaining[:-1]

    return ResolvedArguments(
        payload=tuple(remaining),
        configuration=configuration,
        weights=weights,
        normalization=normalization,
    )


def is_number(value: Any) -> bool:
    """Return whether `value` is a plain number (booleans excluded)."""

    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_number_array(value: Any) -> bool:
    """Return whether `value` is a non-string sequence of plain numbers."""

    if not isinstance(value, SequenceABC) or isinstance(value, (str, bytes, bytearray)):
        return False
    return all(is_number(item) for item in value)


def _present(args: Sequence[Any]) -> tuple[Any, ...]:
    items = list(args)
    while items and items[-1] is None:
        items.pop()
    return tuple(items)
