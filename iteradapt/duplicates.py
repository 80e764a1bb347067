"""Adaptors that yield the elements occurring more than once."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any


def duplicates_by(
    iterable: Iterable[Any], key: Callable[[Any], Hashable]
) -> Iterator[Any]:
    """Yield each element whose ``key`` has been seen exactly once before.

    Every key is reported at most once, at its second occurrence.
    """
    produced: dict[Hashable, bool] = {}
    for item in iterable:
        k = key(item)
        seen = produced.get(k)
        if seen is None:
            produced[k] = False
        elif not seen:
            produced[k] = True
            yield item


def duplicates(iterable: Iterable[Hashable]) -> Iterator[Hashable]:
    """Yield each element the second time it occurs, and never again."""
    return duplicates_by(iterable, lambda item: item)