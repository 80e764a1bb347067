"""Adaptors that join adjacent elements and remove repeated duplicates."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any


def coalesce(
    iterable: Iterable[Any], f: Callable[[Any, Any], tuple]
) -> Iterator[Any]:
    """Join adjacent elements with ``f``.

    ``f(previous, current)`` returns a one-element tuple ``(joined,)`` to merge
    the two, or a two-element tuple ``(previous, current)`` to keep them apart,
    in which case the first is yielded and the second carried on.
    """
    it = iter(iterable)
    try:
        last = next(it)
    except StopIteration:
        return
    for item in it:
        result = f(last, item)
        match result:
            case (joined,):
                last = joined
            case (done, pending):
                yield done
                last = pending
            case _:
                raise ValueError(
                    f"coalesce function must return a 1- or 2-tuple, got {result!r}"
                )
    yield last


def dedup_by(iterable: Iterable[Any], same: Callable[[Any, Any], bool]) -> Iterator[Any]:
    """Drop elements that ``same`` judges equal to the one kept before them."""

    def join(kept: Any, item: Any) -> tuple:
        return (kept,) if same(kept, item) else (kept, item)

    return coalesce(iterable, join)


def dedup(iterable: Iterable[Any]) -> Iterator[Any]:
    """Drop consecutive repeats of equal elements."""
    return dedup_by(iterable, operator.eq)


def dedup_by_with_count(
    iterable: Iterable[Any], same: Callable[[Any, Any], bool]
) -> Iterator[tuple[int, Any]]:
    """Like :func:`dedup_by`, yielding ``(count, element)`` for each run."""

    def join(counted: tuple[int, Any], item: Any) -> tuple:
        count, kept = counted
        if same(kept, item):
            return ((count + 1, kept),)
        return ((count, kept), (1, item))

    return coalesce(((1, item) if i == 0 else item for i, item in _first_marked(iterable)), join)


def _first_marked(iterable: Iterable[Any]) -> Iterator[tuple[int, Any]]:
    for i, item in enumerate(iterable):
        yield (0 if i == 0 else 1), item


def dedup_with_count(iterable: Iterable[Any]) -> Iterator[tuple[int, Any]]:
    """Like :func:`dedup`, yielding ``(count, element)`` for each run."""
    return dedup_by_with_count(iterable, operator.eq)