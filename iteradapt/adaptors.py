"""General iterator adaptors: put-back, interleaving, products, batching and merging."""

from __future__ import annotations

import itertools
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any

_MISSING = object()


class PutBack:
    """An iterator that can have a single value pushed back onto its front."""

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iter = iter(iterable)
        self._top: Any = _MISSING

    def __iter__(self) -> PutBack:
        return self

    def __next__(self) -> Any:
        if self._top is not _MISSING:
            value, self._top = self._top, _MISSING
            return value
        return next(self._iter)

    def put_back(self, value: Any) -> None:
        """Put ``value`` back at the front, replacing any value already there."""
        self._top = value

    def with_value(self, value: Any) -> PutBack:
        """Put ``value`` back and return ``self``."""
        self.put_back(value)
        return self

    def into_parts(self) -> tuple[Any, Iterator[Any]]:
        """The put-back value (or ``None``) and the underlying iterator."""
        top = None if self._top is _MISSING else self._top
        return top, self._iter


def put_back(iterable: Iterable[Any]) -> PutBack:
    """A :class:`PutBack` over ``iterable``."""
    return PutBack(iterable)


def interleave(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Alternate elements of both inputs until both run out."""
    a, b = iter(first), iter(second)
    for x in a:
        yield x
        y = next(b, _MISSING)
        if y is _MISSING:
            yield from a
            return
        yield y
    yield from b


def interleave_shortest(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Alternate elements of both inputs until either runs out."""
    a, b = iter(first), iter(second)
    for x in a:
        yield x
        y = next(b, _MISSING)
        if y is _MISSING:
            return
        yield y


def cartesian_product(
    first: Iterable[Any], second: Iterable[Any]
) -> Iterator[tuple[Any, Any]]:
    """All pairs ``(a, b)`` with ``a`` from ``first`` and ``b`` from ``second``."""
    pool = tuple(second)

    def generate() -> Iterator[tuple[Any, Any]]:
        if not pool:
            return
        for a in first:
            for b in pool:
                yield (a, b)

    return generate()


def batching(
    iterable: Iterable[Any], f: Callable[[Iterator[Any]], Any]
) -> Iterator[Any]:
    """Yield ``f(iterator)`` repeatedly until it returns ``None``."""
    it = iter(iterable)
    while True:
        value = f(it)
        if value is None:
            return
        yield value


def step(iterable: Iterable[Any], n: int) -> Iterator[Any]:
    """Every ``n``-th element, starting with the first.

    Raises ``ValueError`` if ``n`` is zero.
    """
    if n == 0:
        raise ValueError("step must be non-zero")
    if n < 0:
        raise ValueError("step must be positive")
    return itertools.islice(iterable, 0, None, n)


def merge_by(
    first: Iterable[Any],
    second: Iterable[Any],
    less_equal: Callable[[Any, Any], bool],
) -> Iterator[Any]:
    """Merge two inputs, taking from ``first`` while ``less_equal(a, b)`` holds."""
    a, b = iter(first), iter(second)
    x = next(a, _MISSING)
    y = next(b, _MISSING)
    while x is not _MISSING and y is not _MISSING:
        if less_equal(x, y):
            yield x
            x = next(a, _MISSING)
        else:
            yield y
            y = next(b, _MISSING)
    if x is not _MISSING:
        yield x
        yield from a
    elif y is not _MISSING:
        yield y
        yield from b


def merge(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Merge two ascending inputs into one ascending sequence."""
    return merge_by(first, second, operator.le)