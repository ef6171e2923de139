"""mini-fts: typed PostgreSQL full-text search fragments for DB-API drivers."""

from .core import (
    KNOWN_CONFIGURATIONS,
    SQL,
    WEIGHT_LABELS,
    Column,
    CompiledFragment,
    Configuration,
    Param,
    ResolvedArguments,
    Weight,
    compile_sql,
    concat_vectors,
    float4_array,
    join_sql,
    matches,
    phraseto_tsquery,
    plainto_tsquery,
    raw,
    resolve_arguments,
    setweight,
    sql,
    to_tsquery,
    to_tsvector,
    ts_rank,
    ts_rank_cd,
    websearch_to_tsquery,
)
from .ports import Dialect, PostgresDialect

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
    "Dialect",
    "PostgresDialect",
    "sql",
    "raw",
    "join_sql",
    "compile_sql",
    "resolve_arguments",
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
