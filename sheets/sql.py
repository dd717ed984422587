"""Recognising simple SQL statements and reserved words."""

from __future__ import annotations

import dataclasses
import re
from typing import Optional

_LABEL = r"[a-zA-Z][a-zA-Z0-9_]*"
_SPACE = r"[\t\n\f\r ]"

STATEMENT_PATTERN = re.compile(
    rf"^{_SPACE}*(SELECT|INSERT INTO|DELETE|UPDATE){_SPACE}+(\*|{_LABEL}\]*)"
    rf"{_SPACE}+FROM{_SPACE}+({_LABEL}){_SPACE}*WHERE{_SPACE}+(.+?){_SPACE}+"
    rf"(?:LIMIT{_SPACE}+([1-9][0-9]*))?"
)

RESERVED_WORDS = frozenset(
    {
        "ADD", "ADD CONSTRAINT", "ALL", "ALTER", "ALTER COLUMN", "ALTER TABLE",
        "AND", "ANY", "AS", "ASC", "BACKUP DATABASE", "BETWEEN", "CASE", "CHECK",
        "COLUMN", "CONSTRAINT", "CREATE", "CREATE DATABASE", "CREATE INDEX",
        "CREATE OR REPLACE VIEW", "CREATE TABLE", "CREATE PROCEDURE",
        "CREATE UNIQUE INDEX", "CREATE VIEW", "DATABASE", "DEFAULT", "DELETE",
        "DESC", "DISTINCT", "DROP", "DROP COLUMN", "DROP CONSTRAINT",
        "DROP DATABASE", "DROP DEFAULT", "DROP INDEX", "DROP TABLE", "DROP VIEW",
        "EXEC", "EXISTS", "FOREIGN KEY", "FROM", "FULL OUTER JOIN", "GROUP BY",
        "HAVING", "IN", "INDEX", "INNER JOIN", "INSERT INTO", "INSERT INTO SELECT",
        "IS NULL", "IS NOT NULL", "JOIN", "LEFT JOIN", "LIKE", "LIMIT", "NOT",
        "NOT NULL", "OR", "ORDER BY", "OUTER JOIN", "PRIMARY KEY", "PROCEDURE",
        "RIGHT JOIN", "ROWNUM", "SELECT", "SELECT DISTINCT", "SELECT INTO",
        "SELECT TOP", "SET", "TABLE", "TOP", "TRUNCATE TABLE", "UNION",
        "UNION ALL", "UNIQUE", "UPDATE", "VALUES", "VIEW", "WHERE",
    }
)


@dataclasses.dataclass(frozen=True)
class Statement:
    """The parts of a recognised statement."""

    matched: str
    command: str
    columns: str
    table: str
    condition: str
    limit: Optional[int]


def match_statement(text: str) -> Optional[Statement]:
    """The parts of a SELECT, INSERT INTO, DELETE or UPDATE statement, or None.

    The condition is taken lazily: it ends at the first white space after it.
    """
    found = STATEMENT_PATTERN.match(text)
    if found is None:
        return None
    command, columns, table, condition, limit = found.groups()
    return Statement(
        matched=found.group(0),
        command=command,
        columns=columns,
        table=table,
        condition=condition,
        limit=int(limit) if limit is not None else None,
    )


def is_reserved(word: str) -> bool:
    """True when ``word`` (any case, any spacing) is a reserved SQL word or phrase."""
    return " ".join(word.split()).upper() in RESERVED_WORDS