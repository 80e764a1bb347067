"""Adaptors that select, stop early, locate or modify elements."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from iteradapt.adaptors import PutBack


def take_while_ref(source: PutBack, predicate: Callable[[Any], bool]) -> Iterator[Any]:
    """Take elements from ``source`` while ``predicate`` holds.

    The first element that fails the predicate is put back into ``source``,
    so it is not lost to later readers.
    """
    if not isinstance(source, PutBack):
        raise TypeError("take_while_ref needs a PutBack source")

    def generate() -> Iterator[Any]:
        for item in source:
            if not predicate(item):
                source.put_back(item)
                return
            yield item

    return generate()


def while_some(iterable: Iterable[Any]) -> Iterator[Any]:
    """Yield elements until the first ``None``."""
    for item in iterable:
        if item is None:
            return
        yield item


def positions(iterable: Iterable[Any], predicate: Callable[[Any], bool]) -> Iterator[int]:
    """Indices of the elements that satisfy ``predicate``."""
    return (index for index, item in enumerate(iterable) if predicate(item))


def update(iterable: Iterable[Any], f: Callable[[Any], Any]) -> Iterator[Any]:
    """Call ``f`` on each element, to modify it in place, before yielding it."""
    for item in iterable:
        f(item)
        yield item