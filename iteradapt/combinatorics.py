"""Combinations, combinations with replacement and cartesian products."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from typing import Any


class Combinations:
    """All ``k``-length combinations of an iterable's elements, as lists.

    The source is read lazily: only as many elements as are needed to
    produce the next combination are taken from it.
    """

    def __init__(self, iterable: Iterable[Any], k: int) -> None:
        if k < 0:
            raise ValueError("k must be non-negative")
        self._iter = iter(iterable)
        self._pool: list[Any] = []
        self._indices = list(range(k))
        self._first = True
        self._done = False
        self._prefill(k)

    def _prefill(self, count: int) -> None:
        missing = count - len(self._pool)
        if missing > 0:
            self._pool.extend(itertools.islice(self._iter, missing))

    def _get_next(self) -> bool:
        for item in self._iter:
            self._pool.append(item)
            return True
        return False

    def __iter__(self) -> Combinations:
        return self

    def __next__(self) -> list[Any]:
        if self._done:
            raise StopIteration
        indices = self._indices
        k = len(indices)
        if self._first:
            if k > len(self._pool):
                self._done = True
                raise StopIteration
            self._first = False
        elif not indices:
            self._done = True
            raise StopIteration
        else:
            i = k - 1
            if indices[i] == len(self._pool) - 1:
                self._get_next()
            while indices[i] == i + len(self._pool) - k:
                if i == 0:
                    self._done = True
                    raise StopIteration
                i -= 1
            indices[i] += 1
            for j in range(i + 1, k):
                indices[j] = indices[j - 1] + 1
        return [self._pool[index] for index in indices]


def combinations(iterable: Iterable[Any], k: int) -> Combinations:
    """A :class:`Combinations` iterator over ``iterable``."""
    return Combinations(iterable, k)


def combinations_with_replacement(iterable: Iterable[Any], k: int) -> Iterator[list[Any]]:
    """All ``k``-length combinations with repeated elements allowed, as lists."""
    if k < 0:
        raise ValueError("k must be non-negative")

    def generate() -> Iterator[list[Any]]:
        it = iter(iterable)
        pool: list[Any] = []

        def get_next() -> bool:
            for item in it:
                pool.append(item)
                return True
            return False

        indices = [0] * k
        if k and not get_next():
            return
        yield [pool[index] for index in indices]
        while True:
            get_next()
            for position in reversed(range(k)):
                if indices[position] < len(pool) - 1:
                    value = indices[position] + 1
                    indices[position:] = [value] * (k - position)
                    break
            else:
                return
            yield [pool[index] for index in indices]

    return generate()


def multi_cartesian_product(iterables: Iterable[Iterable[Any]]) -> Iterator[list[Any]]:
    """The cartesian product of any number of iterables, as lists.

    No iterables at all, or any empty one, give an empty product.
    """
    pools = [tuple(items) for items in iterables]

    def generate() -> Iterator[list[Any]]:
        if not pools or not all(pools):
            return
        for combo in itertools.product(*pools):
            yield list(combo)

    return generate()


def cons_tuples(iterable: Iterable[tuple[tuple[Any, ...], Any]]) -> Iterator[tuple[Any, ...]]:
    """Flatten elements like ``((a, b), c)`` into ``(a, b, c)``."""
    for head, last in iterable:
        yield (*head, last)


def tuple_combinations(iterable: Iterable[Any], k: int) -> Iterator[tuple[Any, ...]]:
    """All ``k``-length combinations as tuples; ``k`` must be at least one."""
    if k < 1:
        raise ValueError("tuple combinations need k of at least 1")
    return itertools.combinations(iterable, k)