"""Public core API for SQL fragments and full-text search builders."""

from .columns import Column, table_name
from .compiler import CompiledFragment, compile_sql
from .dispatch import ResolvedArguments, is_number, is_number_array, resolve_arguments
from .full_text_search import (
    concat_vectors,
    float4_array,
    matches,
    phraseto_tsquery,
    plainto_tsquery,
    setweight,
    to_tsquery,
    to_tsvector,
    ts_rank,
    ts_rank_cd,
    websearch_to_tsquery,
)
from .sql import SQL, Param, join_sql, raw, sql
from .types import KNOWN_CONFIGURATIONS, WEIGHT_LABELS, Configuration, Weight

__all__ = [
    "SQL",
    "Param",
    "Column",
    "CompiledFragment",
    "ResolvedArguments",
    "Configuration",
    "Weight",
    "KNOWN_CONFIGURATIONS",
    "WEIGHT_LABELS",
    "sql",
    "raw",
    "join_sql",
    "compile_sql",
    "table_name",
    "resolve_arguments",
    "is_number",
    "is_number_array",
    "float4_array",
    "to_tsvector",
    "to_tsquery",
    "plainto_tsquery",
    "phraseto_tsquery",
    "websearch_to_tsquery",
    "ts_rank",
    "ts_rank_cd",
    "setweight",
    "matches",
    "concat_vectors",
]
