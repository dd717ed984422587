"""Sheets: rows of rows, with column and row selection and grouping."""

from __future__ import annotations

import dataclasses
import itertools
import json
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Optional

from sheets.row import Formatter, Row, compare_rows, new_row
from sheets.sequences import Seq, concat, same, split

_MISSING = object()


def _as_row(items: Iterable[Any]) -> Row[Any]:
    return items if isinstance(items, Row) else Row(items)


class Sheet(Row[Row[Any]]):
    """A row whose items are rows."""

    __slots__ = ()

    def column(self, index: int) -> Row[Any]:
        """The item at 1-based ``index`` of every row; None where a row is short."""
        if index < 1:
            raise ValueError("columns are numbered from 1")
        return Row(Seq(lambda: (_as_row(r).at(index - 1) for r in self)))

    def select_columns(self, *args: int) -> Sheet:
        """Every row cut down to the given 1-based columns."""
        return Sheet(Seq(lambda: (_as_row(r).select(*args) for r in self)))


def new_sheet(*args: Iterable[Any]) -> Sheet:
    """A sheet of the given rows."""
    return Sheet(list(args))


def compare_sheets(first: Iterable[Iterable[Any]], second: Iterable[Iterable[Any]]) -> bool:
    """True when both sheets hold equal rows in equal number."""
    for a, b in itertools.zip_longest(first, second, fillvalue=_MISSING):
        if a is _MISSING or b is _MISSING or not same(a, b):
            return False
    return True


def select_rows_func(sheet: Iterable[Any], match: Callable[[Row[Any]], bool]) -> Sheet:
    """Rows for which ``match`` is true."""
    return Sheet(Seq(lambda: (r for r in sheet if match(_as_row(r)))))


def select_rows(sheet: Iterable[Any], column: int, value: Any) -> Sheet:
    """Rows whose item at 0-based ``column`` equals ``value``."""
    return select_rows_func(sheet, lambda r: r.at(column) == value)


def select_matched_rows(sheet: Iterable[Any], match: Iterable[Any]) -> Sheet:
    """Rows equal to ``match``."""
    return select_rows_func(sheet, lambda r: compare_rows(r, match))


def select_rows_from_func(
    source: Iterable[Any], sheet: Iterable[Any], match: Callable[[Row[Any]], bool]
) -> Sheet:
    """Rows of ``source`` at the positions where rows of ``sheet`` match."""

    def generate() -> Iterator[Any]:
        paired = iter(source)
        for r in sheet:
            candidate = next(paired, None)
            if match(_as_row(r)):
                yield candidate

    return Sheet(Seq(generate))


def select_rows_from(source: Iterable[Any], sheet: Iterable[Any], column: int, value: Any) -> Sheet:
    """Rows of ``source`` where the row of ``sheet`` has ``value`` at 0-based ``column``."""
    return select_rows_from_func(source, sheet, lambda r: r.at(column) == value)


def select_matched_rows_from(source: Iterable[Any], sheet: Iterable[Any], match: Iterable[Any]) -> Sheet:
    """Rows of ``source`` where the row of ``sheet`` equals ``match``."""
    return select_rows_from_func(source, sheet, lambda r: compare_rows(r, match))


@dataclasses.dataclass
class HeadedSheet:
    """A sheet with a row of column names."""

    header: Row[str]
    sheet: Sheet

    def __format__(self, spec: str) -> str:
        """The header, then one line per row; ``spec`` is ignored."""
        head = new_row(self.header).sprintf("%10s", "|%s", None)
        body = self.sheet.sprintf("%s", "|%s", None)
        return format(Row(concat(head, body)), "\n")

    def __str__(self) -> str:
        return format(self, "")


@dataclasses.dataclass
class FormattedSheet(HeadedSheet):
    """A headed sheet with a formatter for each column."""

    formatters: Row[Optional[Formatter]]


def new_headed_sheet(pairs: Iterable[tuple[str, Any]]) -> HeadedSheet:
    """A headed sheet of one row from (name, value) pairs."""
    keys, values = split(pairs)
    return HeadedSheet(Row(keys), new_sheet(Row(values)))


def fields(obj: Any) -> Seq[tuple[str, Any]]:
    """(name, value) pairs of the fields of a record object."""
    if isinstance(obj, type):
        raise TypeError("fields needs an instance, not a class")
    if dataclasses.is_dataclass(obj):
        names = [f.name for f in dataclasses.fields(obj)]
    elif isinstance(obj, tuple) and hasattr(obj, "_fields"):
        names = list(obj._fields)
    elif hasattr(obj, "__dict__"):
        names = list(vars(obj))
    else:
        raise TypeError(f"{type(obj).__name__} has no fields")
    return Seq(lambda: ((name, getattr(obj, name)) for name in names))


class Sheets(dict):
    """Named sheets."""

    def __str__(self) -> str:
        return "".join(
            f"{json.dumps(name, ensure_ascii=False)}\n{sheet}" for name, sheet in self.items()
        )


def group_by(sheet: Iterable[Any], group: Callable[[Row[Any]], bool]) -> Sheets:
    """The rows for which ``group`` is true, as one sheet named "1"."""
    return Sheets({"1": select_rows_func(sheet, group)})


def group_by2(sheet: Iterable[Any], matches: Iterable[Callable[[Row[Any]], bool]]) -> Row[Sheet]:
    """One sheet per predicate, holding the rows it matches."""
    return Row(Seq(lambda: (select_rows_func(sheet, match) for match in matches)))