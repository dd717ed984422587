"""Lazy, re-iterable sequence combinators.

Every combinator returns a :class:`Seq`, which starts a fresh pass over its
sources each time it is iterated. Sources may be any iterable; passing a
one-shot iterator makes the result effectively one-shot as well.
"""

from __future__ import annotations

import functools
import itertools
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

_MISSING = object()


class Seq(Generic[T]):
    """A sequence that can be iterated any number of times.

    Each iteration calls ``factory`` for a new iterable.
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Iterable[T]]) -> None:
        if not callable(factory):
            raise TypeError("factory must be callable")
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._factory!r})"


def _lazy(generator: Callable[..., Iterator[Any]]) -> Callable[..., Seq[Any]]:
    """Turn a generator function into one returning a re-iterable Seq."""

    @functools.wraps(generator)
    def wrapper(*args: Any, **kwargs: Any) -> Seq[Any]:
        return Seq(lambda: generator(*args, **kwargs))

    return wrapper


@_lazy
def concat(*args: Iterable[T]) -> Iterator[T]:
    """Items of every given sequence, one sequence after another."""
    for seq in args:
        yield from seq


def compare_not_nil(first: Iterable[Any], second: Iterable[Any]) -> bool:
    """True when both sequences are equal in length and items, with no None."""
    for a, b in itertools.zip_longest(first, second, fillvalue=_MISSING):
        if a is _MISSING or b is _MISSING or a is None or b is None or a != b:
            return False
    return True


@_lazy
def after(seq: Iterable[T], start: int) -> Iterator[T]:
    """Items following the first ``start`` items."""
    return itertools.islice(seq, start, None)


@_lazy
def limit(seq: Iterable[T], n: int) -> Iterator[T]:
    """At most the first ``n`` items."""
    return itertools.islice(seq, n)


def step(seq: Iterable[T], stride: int) -> Seq[T]:
    """Every ``stride``-th item, starting with the first."""
    if stride < 1:
        raise ValueError("stride must be at least 1")
    return Seq(lambda: itertools.islice(seq, 0, None, stride))


@_lazy
def ats(seqs: Iterable[Iterable[T]], index: int) -> Iterator[T]:
    """The item at ``index`` of each inner sequence; short ones are skipped."""
    for inner in seqs:
        yield from itertools.islice(inner, index, index + 1)


@_lazy
def select(
    seqs: Iterable[Iterable[T]], index: int, is_match: Callable[[T], bool]
) -> Iterator[Iterable[T]]:
    """Inner sequences whose item at ``index`` satisfies ``is_match``."""
    for inner in seqs:
        for item in itertools.islice(inner, index, index + 1):
            if is_match(item):
                yield inner


@_lazy
def reverse(items: Iterable[T]) -> Iterator[T]:
    """Items in reverse order, read from ``items`` on each pass."""
    return reversed(list(items))


@_lazy
def sub(seq: Iterable[T], *args: int) -> Iterator[T]:
    """Items at the given 1-based positions, in the order asked for.

    Positions may repeat or go backwards; items already read are remembered.
    Positions past the end are skipped.
    """
    found: dict[int, T] = {}
    source = iter(seq)
    count = 0
    for index in args:
        if index in found:
            yield found[index]
            continue
        for count, item in enumerate(source, start=count + 1):
            found[count] = item
            if count == index:
                yield item
                break


@_lazy
def until(stop: Callable[[T], bool], seq: Iterable[T]) -> Iterator[T]:
    """Items up to and including the first for which ``stop`` is true."""
    for item in seq:
        yield item
        if stop(item):
            return


@_lazy
def until_history(stop: Callable[..., bool], seq: Iterable[T]) -> Iterator[T]:
    """Like :func:`until`, but ``stop`` receives every item seen so far."""
    history: list[T] = []
    for item in seq:
        history.append(item)
        yield item
        if stop(*history):
            return


@_lazy
def filter_until(
    selected: Callable[[T], bool], stop: Callable[[T], bool], seq: Iterable[T]
) -> Iterator[T]:
    """Selected items, up to and including the first selected one that stops."""
    for item in seq:
        if selected(item):
            yield item
            if stop(item):
                return


@_lazy
def filtered(selected: Callable[[T], bool], seq: Iterable[T]) -> Iterator[T]:
    """Items for which ``selected`` is true."""
    return (item for item in seq if selected(item))


@_lazy
def interlace(*args: Iterable[T]) -> Iterator[T]:
    """One item from each sequence in turn, until any sequence runs out."""
    iterators = [iter(seq) for seq in args]
    if not iterators:
        return
    while True:
        for it in iterators:
            for item in it:
                yield item
                break
            else:
                return


def _zip_apply(apply_fn: Callable[..., U], seqs: tuple[Iterable[Any], ...]) -> Iterator[U]:
    if not seqs:
        while True:
            yield apply_fn()
    for values in zip(*seqs):
        yield apply_fn(*values)


@_lazy
def combine(apply_fn: Callable[..., U], *args: Iterable[Any]) -> Iterator[U]:
    """``apply_fn`` of one item from each sequence, until any runs out."""
    return _zip_apply(apply_fn, args)


@_lazy
def amalgamate(apply_fn: Callable[..., U], *args: Iterable[Any]) -> Iterator[U]:
    """Same as :func:`combine`."""
    return _zip_apply(apply_fn, args)


@_lazy
def repeat(value: T) -> Iterator[T]:
    """``value`` without end."""
    return itertools.repeat(value)


@_lazy
def repeat_sequence(seq: Iterable[T]) -> Iterator[T]:
    """The items of ``seq`` over and over; ends if a pass yields nothing."""
    while True:
        produced = False
        for item in seq:
            produced = True
            yield item
        if not produced:
            return


@_lazy
def make(fn: Callable[[int], T]) -> Iterator[T]:
    """``fn(0)``, ``fn(1)``, ``fn(2)`` and so on without end."""
    return map(fn, itertools.count())


@_lazy
def apply(seq: Iterable[T], fn: Callable[[T], U]) -> Iterator[U]:
    """``fn`` of each item."""
    return map(fn, seq)


@_lazy
def append(seq: Iterable[T], *args: T) -> Iterator[T]:
    """Items of ``seq`` followed by the extra items."""
    yield from seq
    yield from args


@_lazy
def prepend(seq: Iterable[T], *args: T) -> Iterator[T]:
    """The extra items followed by the items of ``seq``."""
    yield from args
    yield from seq


@_lazy
def delimit(seq: Iterable[T], *args: T) -> Iterator[T]:
    """``seq`` wrapped by the first half of the extras before, the rest after."""
    half = len(args) // 2
    yield from args[:half]
    yield from seq
    yield from args[half:]


def interleave(seq: Iterable[T], *args: T) -> Seq[T]:
    """After each item of ``seq``, the next of the extras, cycling."""
    if not args:
        raise ValueError("interleave needs at least one item to insert")

    def generate() -> Iterator[T]:
        for item, extra in zip(seq, itertools.cycle(args)):
            yield item
            yield extra

    return Seq(generate)


def split(pairs: Iterable[tuple[str, T]] | Mapping[str, T]) -> tuple[Seq[str], Seq[T]]:
    """Separate a sequence of pairs into keys and values.

    ``pairs`` is read once for each of the two results.
    """
    source: Any = pairs.items() if isinstance(pairs, Mapping) else pairs
    keys = Seq(lambda: (key for key, _ in source))
    values = Seq(lambda: (value for _, value in source))
    return keys, values


def matched(first: Iterable[T], *args: Iterable[T]) -> bool:
    """True when every other sequence starts with the items of ``first``.

    Extra items in the others are ignored; an empty ``first`` never matches.
    """
    lead = iter(first)
    head = next(lead, _MISSING)
    if head is _MISSING:
        return False
    followers = []
    for other in args:
        it = iter(other)
        item = next(it, _MISSING)
        if item is _MISSING or item != head:
            return False
        followers.append(it)
    for head in lead:
        for it in followers:
            item = next(it, _MISSING)
            if item is _MISSING or item != head:
                return False
    return True


def same(first: Iterable[T], second: Iterable[T]) -> bool:
    """True when both sequences have equal items and equal length."""
    for a, b in itertools.zip_longest(first, second, fillvalue=_MISSING):
        if a is _MISSING or b is _MISSING or a != b:
            return False
    return True


@_lazy
def until_value(value: T, seq: Iterable[T]) -> Iterator[T]:
    """Items up to and including the first equal to ``value``."""
    for item in seq:
        yield item
        if item == value:
            return