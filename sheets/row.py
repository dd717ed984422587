"""Rows: re-iterable sequences of values with selection and formatting."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, Optional, TypeVar

from sheets import sequences

T = TypeVar("T")

Formatter = Callable[[Any], str]

SEPARATORS = frozenset("\t\n,./\\|")


class Row(Generic[T]):
    """A sequence of values that is read from its source on every pass.

    A row built over a list sees later changes made to that list.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Iterable[T]) -> None:
        if not isinstance(source, Iterable):
            raise TypeError(f"a row needs an iterable source, not {type(source).__name__}")
        self._source = source

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __format__(self, spec: str) -> str:
        """Join items with ``spec`` if it is a separator, else format each item with it."""
        if spec in SEPARATORS:
            return spec.join(str(item) for item in self)
        return "".join(format(item, spec) for item in self)

    def __str__(self) -> str:
        return "".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"

    def cache(self) -> Row[T]:
        """A row holding the items read now."""
        return Row(list(self))

    def reverse(self) -> Row[T]:
        """A row holding the items read now, last first."""
        items = list(self)
        items.reverse()
        return Row(items)

    def at(self, index: int) -> Optional[T]:
        """The item at 0-based ``index``, or None past the end."""
        return next(iter(sequences.after(self, index)), None)

    def items(self, *args: int) -> Row[Optional[T]]:
        """The items at the given 1-based positions; None where there is none."""
        wanted = set(args)
        found = {position: item for position, item in enumerate(self, start=1) if position in wanted}
        return Row([found.get(position) for position in args])

    def sample(self, span: tuple[int, int]) -> Row[T]:
        """Every ``stride``-th item after skipping ``start``; ``span`` is (start, stride)."""
        start, stride = span
        return Row(sequences.step(sequences.after(self, start), stride))

    def sub(self, span: tuple[int, int]) -> Row[T]:
        """At most ``count`` items after skipping ``start``; ``span`` is (start, count)."""
        start, count = span
        return Row(sequences.limit(sequences.after(self, start), count))

    def select(self, *args: int) -> Row[T]:
        """Items at the given 1-based positions, in that order, repeats allowed."""
        return Row(sequences.sub(self, *args))

    def sprintf(
        self,
        first: str,
        rest: str,
        formatters: Optional[Iterable[Optional[Formatter]]] = None,
    ) -> Row[str]:
        """Each item as a string.

        An item is given to the matching formatter when there is one; otherwise
        it is put through the printf-style template ``first`` (for the first
        item) or ``rest`` (for the others).
        """

        def generate() -> Iterator[str]:
            fmts = iter(formatters) if formatters is not None else iter(())
            for position, value in enumerate(self):
                fmt = next(fmts, None)
                if fmt is not None:
                    yield fmt(value)
                else:
                    yield (rest if position else first) % (value,)

        return Row(sequences.Seq(generate))


def new_row(*args: T) -> Row[T]:
    """A row of the given items."""
    return Row(list(args))


def new_row_seq(*args: T) -> Row[T]:
    """A row of the given items, read through a generator on each pass."""
    return Row(sequences.Seq(lambda: (item for item in args)))


def new_reverse_row(*args: T) -> Row[T]:
    """A row of the given items, last first."""
    return Row(sequences.reverse(args))


def compare_rows(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """True when both rows hold equal items in equal number."""
    return sequences.same(first, second)


def sorted_row(row: Iterable[T]) -> Row[T]:
    """A row of the items in ascending order."""
    return Row(sorted(row))


def formatter(spec: str) -> Formatter:
    """A formatter for a printf-style template; ``%v`` means plain ``str``."""
    if spec == "%v":
        return str
    return lambda value: spec % (value,)