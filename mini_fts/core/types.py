"""Shared core type aliases used across fragments, dialects, and search builders."""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, List, Literal, Union, get_args

NamedParams = Dict[str, Any]
PositionalParams = List[Any]
QueryParams = Union[NamedParams, PositionalParams, None]

Configuration = Literal[
    "simple",
    "arabic",
    "armenian",
    "basque",
    "catalan",
    "danish",
    "dutch",
    "english",
    "finnish",
    "french",
    "german",
    "greek",
    "hindi",
    "hungarian",
    "indonesian",
    "irish",
    "italian",
    "lithuanian",
    "nepali",
    "norwegian",
    "portuguese",
    "romanian",
    "russian",
    "serbian",
    "spanish",
    "swedish",
    "tamil",
    "turkish",
    "yiddish",
]

Weight = Literal["A", "B", "C", "D"]

KNOWN_CONFIGURATIONS: FrozenSet[str] = frozenset(get_args(Configuration))
WEIGHT_LABELS: tuple[str, ...] = get_args(Weight)
