from __future__ import annotations

import importlib
import os
import unittest
from dataclasses import dataclass, field
from typing import Any, Optional

from mini_fts import (
    Column,
    PostgresDialect,
    compile_sql,
    concat_vectors,
    matches,
    phraseto_tsquery,
    plainto_tsquery,
    setweight,
    sql,
    to_tsquery,
    to_tsvector,
    ts_rank,
    ts_rank_cd,
    websearch_to_tsquery,
)


def _load_connect() -> Any:
    for module_name in ("psycopg", "psycopg2"):
        try:
            module = importlib.import_module(module_name)
        except (ModuleNotFoundError, ImportError):
            continue
        connect = getattr(module, "connect", None)
        if connect is not None:
            return connect
    return None


POSTGRES_CONNECT = _load_connect()
HAS_POSTGRES_DRIVER = POSTGRES_CONNECT is not None


@dataclass
class FtsPost:
    __table__ = "mini_fts_posts"

    id: Optional[int] = field(default=None, metadata={"pk": True, "auto": True})
    title: str = ""
    body: str = ""


@unittest.skipUnless(HAS_POSTGRES_DRIVER, "psycopg/psycopg2 is not installed")
class FullTextSearchPostgresTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        password = os.getenv(
            "MINI_FTS_PG_PASSWORD",
            os.getenv("PGPASSWORD", os.getenv("POSTGRES_PASSWORD", "password")),
        )
        params = {
            "host": os.getenv("MINI_FTS_PG_HOST", os.getenv("PGHOST", "localhost")),
            "port": int(os.getenv("MINI_FTS_PG_PORT", os.getenv("PGPORT", "5432"))),
            "user": os.getenv("MINI_FTS_PG_USER", os.getenv("PGUSER", "postgres")),
            "password": password,
            "dbname": os.getenv("MINI_FTS_PG_DATABASE", os.getenv("PGDATABASE", "postgres")),
        }

        try:
            cls.conn = POSTGRES_CONNECT(**params)
        except Exception as exc:
            raise unittest.SkipTest(
                "PostgreSQL is not reachable with configured credentials: "
                f"{exc}"
            ) from exc

        cls.dialect = PostgresDialect()
        cls.title = Column.of(FtsPost, "title")
        cls.body = Column.of(FtsPost, "body")

    @classmethod
    def tearDownClass(cls) -> None:
        conn = getattr(cls, "conn", None)
        if conn is not None:
            conn.close()

    def setUp(self) -> None:
        cursor = self.conn.cursor()
        try:
            cursor.execute('DROP TABLE IF EXISTS "mini_fts_posts";')
            cursor.execute(
                'CREATE TABLE "mini_fts_posts" ('
                '"id" SERIAL PRIMARY KEY, "title" TEXT NOT NULL, "body" TEXT NOT NULL);'
            )
            cursor.executemany(
                'INSERT INTO "mini_fts_posts" ("title", "body") VALUES (%s, %s);',
                [
                    ("Drizzle best practice", "Tips and updates for query builders."),
                    ("Cooking pasta", "Boil water, add salt, then the pasta."),
                    ("Query builder updates", "Drizzle ships full text search helpers."),
                ],
            )
        finally:
            cursor.close()
        self.conn.commit()

    def tearDown(self) -> None:
        self.conn.rollback()
        cursor = self.conn.cursor()
        try:
            cursor.execute('DROP TABLE IF EXISTS "mini_fts_posts";')
        finally:
            cursor.close()
        self.conn.commit()

    def _fetchall(self, fragment) -> list:  # noqa: ANN001
        compiled = compile_sql(fragment, self.dialect)
        cursor = self.conn.cursor()
        try:
            cursor.execute(compiled.sql, compiled.params)
            return list(cursor.fetchall())
        finally:
            cursor.close()

    def _matching_titles(self, query) -> list[str]:  # noqa: ANN001
        vector = to_tsvector("english", self.title)
        rows = self._fetchall(
            sql(
                'SELECT "title" FROM "mini_fts_posts" WHERE {} ORDER BY "id"',
                matches(vector, query),
            )
        )
        return [row[0] for row in rows]

    def test_query_variants_match_expected_rows(self) -> None:
        self.assertEqual(
            self._matching_titles(to_tsquery("english", "drizzle")),
            ["Drizzle best practice"],
        )
        self.assertEqual(
            self._matching_titles(plainto_tsquery("english", "query builder")),
            ["Query builder updates"],
        )
        self.assertEqual(
            self._matching_titles(phraseto_tsquery("english", "best practice")),
            ["Drizzle best practice"],
        )
        self.assertEqual(
            self._matching_titles(websearch_to_tsquery("english", "pasta or drizzle")),
            ["Drizzle best practice", "Cooking pasta"],
        )

    def test_websearch_accepts_malformed_input(self) -> None:
        titles = self._matching_titles(websearch_to_tsquery("english", "drizzle & ( | !"))

        self.assertEqual(titles, ["Drizzle best practice"])

    def test_rank_shapes_execute(self) -> None:
        vector = concat_vectors(
            setweight(to_tsvector("english", self.title), "A"),
            setweight(to_tsvector("english", self.body), "B"),
        )
        query = to_tsquery("english", "drizzle")
        weights = [0.1, 0.2, 0.4, 1.0]

        rows = self._fetchall(
            sql(
                'SELECT "title", {}, {}, {}, {} FROM "mini_fts_posts" WHERE {} ORDER BY "id"',
                ts_rank(vector, query),
                ts_rank(weights, vector, query, 0),
                ts_rank_cd(vector, query, 32),
                ts_rank_cd(weights, vector, query),
                matches(vector, query),
            )
        )

        self.assertEqual([row[0] for row in rows], ["Drizzle best practice", "Query builder updates"])
        for row in rows:
            for value in row[1:]:
                self.assertGreater(value, 0)

        title_hit, body_hit = rows
        self.assertGreater(title_hit[2], body_hit[2])

    def test_parameters_are_not_executed_as_sql(self) -> None:
        hostile = "x'); DROP TABLE mini_fts_posts; --"

        self.assertEqual(self._matching_titles(plainto_tsquery("english", hostile)), [])
        rows = self._fetchall(sql('SELECT count(*) FROM "mini_fts_posts"'))
        self.assertEqual(rows[0][0], 3)


if __name__ == "__main__":
    unittest.main()
