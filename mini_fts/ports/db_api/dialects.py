"""Concrete SQL dialect implementations for DB-API drivers."""

from __future__ import annotations


class Dialect:
    """Base dialect that defines SQL quoting and placeholder behavior."""

    name: str = "generic"
    paramstyle: str = "named"
    quote_char: str = '"'

    def q(self, ident: str) -> str:
        """Quote SQL identifier, doubling embedded quote characters."""

        escaped = ident.replace(self.quote_char, self.quote_char * 2)
        return f"{self.quote_char}{escaped}{self.quote_char}"

    def placeholder(self, key: str) -> str:
        """Return parameter placeholder for current param style."""

        if self.paramstyle == "named":
            return f":{key}"
        if self.paramstyle == "qmark":
            return "?"
        if self.paramstyle == "format":
            return "%s"
        raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")

    def escape_text(self, text: str) -> str:
        """Escape trusted SQL text so the driver does not read it as placeholders."""

        if self.paramstyle == "format":
            return text.replace("%", "%%")
        return text


class PostgresDialect(Dialect):
    """PostgreSQL dialect (`%s` positional parameters)."""

    name = "postgres"
    paramstyle = "format"
    quote_char = '"'
