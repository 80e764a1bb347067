"""Eager grouping into dictionaries and concatenation of collections."""

from __future__ import annotations

import copy
from collections.abc import Callable, Hashable, Iterable
from typing import Any


def into_group_map(pairs: Iterable[tuple[Hashable, Any]]) -> dict[Hashable, list[Any]]:
    """Map each key to the list of values paired with it, in input order."""
    lookup: dict[Hashable, list[Any]] = {}
    for key, value in pairs:
        lookup.setdefault(key, []).append(value)
    return lookup


def into_group_map_by(
    iterable: Iterable[Any], key: Callable[[Any], Hashable]
) -> dict[Hashable, list[Any]]:
    """Map ``key(value)`` to the list of values that produced it."""
    return into_group_map((key(value), value) for value in iterable)


def concat(iterable: Iterable[Any]) -> Any:
    """Extend a copy of the first element with each of the rest.

    An empty input gives an empty list.
    """
    it = iter(iterable)
    try:
        result = copy.copy(next(it))
    except StopIteration:
        return []
    for part in it:
        result += part
    return result