"""Run a weighted, ranked full-text search against PostgreSQL with psycopg.

Connection settings come from the libpq environment (`PGHOST`, `PGUSER`, ...).
"""

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

import psycopg

from mini_fts import (
    Column,
    PostgresDialect,
    compile_sql,
    concat_vectors,
    matches,
    setweight,
    sql,
    to_tsvector,
    ts_rank,
    websearch_to_tsquery,
)


@dataclass
class Article:
    __table__ = "example_articles"

    id: Optional[int] = field(default=None, metadata={"pk": True, "auto": True})
    title: str = ""
    body: str = ""


ARTICLES = [
    ("Drizzle best practice", "Tips and updates for typed query builders."),
    ("Cooking pasta", "Boil water, add salt, then the pasta."),
    ("Query builder updates", "Drizzle ships full text search helpers."),
]


def main() -> None:
    dialect = PostgresDialect()
    document = concat_vectors(
        setweight(to_tsvector("english", Column.of(Article, "title")), "A"),
        setweight(to_tsvector("english", Column.of(Article, "body")), "B"),
    )
    query = websearch_to_tsquery("english", sys.argv[1] if len(sys.argv) > 1 else "drizzle")
    rank = ts_rank([0.1, 0.2, 0.4, 1.0], document, query, 32)

    statement = compile_sql(
        sql(
            'SELECT "title", {} AS rank FROM "example_articles" WHERE {} ORDER BY rank DESC',
            rank,
            matches(document, query),
        ),
        dialect,
    )
    print("SQL:", statement.sql)
    print("Params:", statement.params)

    with psycopg.connect() as conn:
        with conn.cursor() as cursor:
            cursor.execute(
                'CREATE TEMP TABLE "example_articles" '
                '("id" SERIAL PRIMARY KEY, "title" TEXT NOT NULL, "body" TEXT NOT NULL)'
            )
            cursor.executemany(
                'INSERT INTO "example_articles" ("title", "body") VALUES (%s, %s)',
                ARTICLES,
            )
            cursor.execute(statement.sql, statement.params)
            for title, score in cursor.fetchall():
                print(f"{score:.4f}  {title}")


if __name__ == "__main__":
    main()
