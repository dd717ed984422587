"""Numeric sequences, running totals and integer stripe predicates."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from sheets.sequences import Seq, apply, concat, limit, repeat

T = TypeVar("T")


def _quotient(value: Any, scale: Any) -> Any:
    """Division that truncates toward zero for integers."""
    if isinstance(value, int) and isinstance(scale, int):
        if scale == 0:
            raise ZeroDivisionError("integer division by zero")
        q = abs(value) // abs(scale)
        return q if (value >= 0) == (scale > 0) else -q
    return value / scale


def _remainder(value: int, divisor: int) -> int:
    """Remainder carrying the sign of the dividend."""
    if isinstance(value, int) and isinstance(divisor, int):
        return value - _quotient(value, divisor) * divisor
    return math.fmod(value, divisor)


def runes(text: str) -> Seq[str]:
    """The characters of ``text``."""
    return Seq(lambda: iter(text))


def permutations(seq: Iterable[T]) -> Seq[T]:
    """The items of ``seq``, passed through twice."""

    def generate() -> Iterator[T]:
        yield from seq
        yield from seq

    return Seq(generate)


def totalise(seq: Iterable[T]) -> Seq[T]:
    """Running totals of the items, numbers or strings."""

    def generate() -> Iterator[T]:
        started = False
        total: Any = None
        for item in seq:
            total = item if not started else total + item
            started = True
            yield total

    return Seq(generate)


def geometric(start: T, step_size: T) -> Seq[T]:
    """``start``, ``start + step_size``, ``start + 2*step_size`` and so on."""
    return totalise(concat(limit(repeat(start), 1), repeat(step_size)))


def odds() -> Seq[int]:
    """1, 3, 5, ..."""
    return geometric(1, 2)


def evens() -> Seq[int]:
    """0, 2, 4, ..."""
    return geometric(0, 2)


def fibonacci() -> Seq[int]:
    """1, 1, 2, 3, 5, ..."""

    def generate() -> Iterator[int]:
        a, b = 1, 1
        while True:
            yield a
            a, b = b, a + b

    return Seq(generate)


def multiply(seq: Iterable[T], scale: T) -> Seq[T]:
    """Each item times ``scale``."""
    return apply(seq, lambda v: v * scale)


def divide(seq: Iterable[T], scale: T) -> Seq[T]:
    """Each item divided by ``scale``; integers truncate toward zero."""
    return apply(seq, lambda v: _quotient(v, scale))


def modify(fn: Callable[[int], int], test: Callable[[int], bool]) -> Callable[[int], bool]:
    """A predicate applying ``test`` to ``fn`` of its argument."""
    return lambda c: test(fn(c))


def invert(test: Callable[[int], bool]) -> Callable[[int], bool]:
    """The negation of ``test``."""
    return lambda c: not test(c)


def start_striper(d: int) -> Callable[[int], bool]:
    """True below ``d``."""
    return lambda c: c < d


def dash_striper(d: int, s: int) -> Callable[[int], bool]:
    """True for the first ``d/s`` of every period ``d``."""
    dash = _quotient(d, s)
    return lambda c: _remainder(c, d) < dash


def half_striper(d: int) -> Callable[[int], bool]:
    """True for the first half of every period ``d``."""
    return dash_striper(d, 2)


def third_striper(d: int) -> Callable[[int], bool]:
    """True for the first third of every period ``d``."""
    return dash_striper(d, 3)


def multi_striper(*args: Callable[[int], bool]) -> Callable[[int], bool]:
    """True when any of the given predicates is true."""
    return lambda c: any(test(c) for test in args)


def between(lower: T, upper: T) -> Callable[[T], bool]:
    """True for values in the half-open range ``[lower, upper)``."""
    return lambda i: lower <= i < upper