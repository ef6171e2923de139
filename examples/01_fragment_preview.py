"""Show full-text search fragments compiled for named and Postgres paramstyles."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "mini_fts").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mini_fts import (
    Column,
    Dialect,
    PostgresDialect,
    compile_sql,
    matches,
    setweight,
    to_tsquery,
    to_tsvector,
    ts_rank,
    ts_rank_cd,
    websearch_to_tsquery,
)


@dataclass
class Post:
    id: Optional[int] = field(default=None, metadata={"pk": True, "auto": True})
    title: str = ""
    description: str = ""


def show_for_dialect(name: str, dialect) -> None:  # noqa: ANN001
    print(f"\n===== {name} =====")

    vector = to_tsvector("english", Column.of(Post, "title"))
    query = to_tsquery("english", "Drizzle")
    samples = {
        "to_tsvector": vector,
        "to_tsquery": query,
        "websearch": websearch_to_tsquery("tips or updates Drizzle"),
        "setweight": setweight(vector, "A"),
        "ts_rank": ts_rank(vector, query),
        "ts_rank weighted": ts_rank([0.1, 0.2, 0.4, 0.3], vector, query),
        "ts_rank_cd normalized": ts_rank_cd(vector, query, 0),
        "match": matches(vector, query),
    }

    for label, fragment in samples.items():
        compiled = compile_sql(fragment, dialect)
        print(f"{label}:")
        print("  SQL:", compiled.sql)
        print("  Params:", compiled.params)


def main() -> None:
    show_for_dialect("Dialect (named)", Dialect())
    show_for_dialect("PostgresDialect", PostgresDialect())


if __name__ == "__main__":
    main()
