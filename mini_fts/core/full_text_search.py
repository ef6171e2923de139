"""PostgreSQL full-text search function builders.

Each builder returns an immutable `SQL` fragment. Values are bound as
parameters, columns are quoted by the dialect, and nested fragments are
inlined, so the results can be freely combined:

    title = Column("title", "posts")
    vector = setweight(to_tsvector("english", title), "A")
    query = websearch_to_tsquery("english", user_input)
    where = matches(vector, query)
    rank = ts_rank([0.1, 0.2, 0.4, 1.0], vector, query, 32)

Optional trailing arguments left as `None` count as not given: a `None` in
the last position is dropped before the remaining arguments are classified,
so `to_tsvector("english", None)` binds `"english"` as the document.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Union, overload

from .columns import Column
from .dispatch import ResolvedArguments, resolve_arguments
from .sql import SQL, join_sql, sql
from .types import Configuration, Weight

ConfigurationInput = Union[Configuration, str, SQL]
DocumentInput = Union[Column, SQL, str]
QueryInput = Union[SQL, str]


def float4_array(weights: Sequence[Any]) -> SQL:
    """Render numeric weights as a `float4[]` cast of their comma-joined text.

    The numbers are joined with `str` and bound as one text parameter, which
    PostgreSQL splits and casts, e.g. `string_to_array('0.1,0.2', ',')::float4[]`.
    """

    return sql("string_to_array({}, ',')::float4[]", ",".join(str(item) for item in weights))


@overload
def to_tsvector(document: DocumentInput) -> SQL: ...


@overload
def to_tsvector(configuration: ConfigurationInput, document: DocumentInput) -> SQL: ...


def to_tsvector(arg1: Any, arg2: Any = None) -> SQL:
    """Convert a document to the `tsvector` data type.

    Args:
        arg1: The document, or the text search configuration when a document
            follows (for example `"english"` or `"simple"`).
        arg2: The document when a configuration is given. `None` means
            not given, and `arg1` is then the document.

    Returns:
        `to_tsvector([configuration, ]document)` fragment.

    Example:
        `to_tsvector("english", Column("title", "posts"))`
    """

    return _text_search_call("to_tsvector", arg1, arg2)


@overload
def to_tsquery(query: QueryInput) -> SQL: ...


@overload
def to_tsquery(configuration: ConfigurationInput, query: QueryInput) -> SQL: ...


def to_tsquery(arg1: Any, arg2: Any = None) -> SQL:
    """Convert query text written in `tsquery` syntax to the `tsquery` data type.

    Args:
        arg1: The query, or the text search configuration when a query follows.
        arg2: The query when a configuration is given. `None` means
            not given, and `arg1` is then the query.

    Returns:
        `to_tsquery([configuration, ]query)` fragment.
    """

    return _text_search_call("to_tsquery", arg1, arg2)


@overload
def plainto_tsquery(query: QueryInput) -> SQL: ...


@overload
def plainto_tsquery(configuration: ConfigurationInput, query: QueryInput) -> SQL: ...


def plainto_tsquery(arg1: Any, arg2: Any = None) -> SQL:
    """Convert plain text to `tsquery`, joining surviving words with `&` (AND).

    Accepts `(query)` or `(configuration, query)`; a trailing `None` means not given.
    """

    return _text_search_call("plainto_tsquery", arg1, arg2)


@overload
def phraseto_tsquery(query: QueryInput) -> SQL: ...


@overload
def phraseto_tsquery(configuration: ConfigurationInput, query: QueryInput) -> SQL: ...


def phraseto_tsquery(arg1: Any, arg2: Any = None) -> SQL:
    """Convert plain text to `tsquery`, joining surviving words with `<->` (FOLLOWED BY).

    Accepts `(query)` or `(configuration, query)`; a trailing `None` means not given.
    """

    return _text_search_call("phraseto_tsquery", arg1, arg2)


@overload
def websearch_to_tsquery(query: QueryInput) -> SQL: ...


@overload
def websearch_to_tsquery(configuration: ConfigurationInput, query: QueryInput) -> SQL: ...


def websearch_to_tsquery(arg1: Any, arg2: Any = None) -> SQL:
    """Convert web-search style text to `tsquery`.

    Unformatted text is a valid query, and quoted phrases, `or` and `-` are
    recognized. PostgreSQL never raises syntax errors for this function, so it
    is the one to use with raw user input.
    A trailing `None` means not given.
    """

    return _text_search_call("websearch_to_tsquery", arg1, arg2)


@overload
def ts_rank(vector: SQL, query: SQL, normalization: Optional[int] = None) -> SQL: ...


@overload
def ts_rank(
    weights: Sequence[float],
    vector: SQL,
    query: SQL,
    normalization: Optional[int] = None,
) -> SQL: ...


def ts_rank(arg1: Any, arg2: Any, arg3: Any = None, arg4: Any = None) -> SQL:
    """Rank a `tsvector` against a `tsquery` by lexeme frequency.

    Args:
        arg1: The vector, or the label weights (`[D, C, B, A]`) when a vector
            and a query follow.
        arg2: The query, or the vector when weights are given.
        arg3: The normalization bitmask, or the query when weights are given.
        arg4: The normalization bitmask when weights are given.

    Returns:
        `ts_rank([weights, ]vector, query[, normalization])` fragment.
        A normalization of `0` is rendered.
        Only trailing `None` values are omitted; a `None` followed by another
        argument stays in place and is bound as `NULL`.
    """

    return _rank_call("ts_rank", (arg1, arg2, arg3, arg4))


@overload
def ts_rank_cd(vector: SQL, query: SQL, normalization: Optional[int] = None) -> SQL: ...


@overload
def ts_rank_cd(
    weights: Sequence[float],
    vector: SQL,
    query: SQL,
    normalization: Optional[int] = None,
) -> SQL: ...


def ts_rank_cd(arg1: Any, arg2: Any, arg3: Any = None, arg4: Any = None) -> SQL:
    """Rank a `tsvector` against a `tsquery` using cover density.

    Accepts the same argument shapes as `ts_rank`. A trailing `None` means not given.
    """

    return _rank_call("ts_rank_cd", (arg1, arg2, arg3, arg4))


def setweight(vector: Any, weight: Weight | str) -> SQL:
    """Label the entries of a `tsvector` with one of the weights A, B, C, or D."""

    return sql("setweight({}, {})", vector, weight)


def matches(vector: Any, query: Any) -> SQL:
    """Build the `vector @@ query` match predicate."""

    return sql("{} @@ {}", vector, query)


def concat_vectors(*vectors: Any) -> SQL:
    """Concatenate vectors with `||`, wrapped in parentheses.

    Raises:
        ValueError: If no vector is given.
    """

    if not vectors:
        raise ValueError("concat_vectors() requires at least one vector.")
    return sql("({})", join_sql(vectors, " || "))


def _text_search_call(function: str, arg1: Any, arg2: Any) -> SQL:
    resolved = resolve_arguments(
        (arg1, arg2),
        payload_arity=1,
        accepts_configuration=True,
    )
    return _render_call(function, resolved)


def _rank_call(function: str, args: Sequence[Any]) -> SQL:
    resolved = resolve_arguments(
        args,
        payload_arity=2,
        accepts_weights=True,
        accepts_normalization=True,
    )
    return _render_call(function, resolved)


def _render_call(function: str, resolved: ResolvedArguments) -> SQL:
    """Render `function(...)` with the present roles in positional order."""

    values: List[Any] = []
    if resolved.weights is not None:
        values.append(float4_array(resolved.weights))
    if resolved.configuration is not None:
        values.append(resolved.configuration)
    values.extend(resolved.payload)
    if resolved.normalization is not None:
        values.append(resolved.normalization)

    slots = ", ".join("{}" for _ in values)
    return sql(f"{function}({slots})", *values)
