"""Free functions that accept any iterable and forward to iterator operations."""

from __future__ import annotations

import builtins
import copy
import functools
import itertools
from collections.abc import Callable, Iterable, Iterator
from typing import Any


def enumerate(iterable: Iterable[Any]) -> Iterator[tuple[int, Any]]:
    """Iterate with a running index."""
    return builtins.enumerate(iterable)


def rev(iterable: Iterable[Any]) -> Iterator[Any]:
    """Iterate in reverse order."""
    try:
        return builtins.reversed(iterable)
    except TypeError:
        return builtins.reversed(list(iterable))


def zip(first: Iterable[Any], second: Iterable[Any]) -> Iterator[tuple[Any, Any]]:
    """Iterate both inputs in lock step, stopping at the shorter."""
    return builtins.zip(first, second)


def chain(first: Iterable[Any], second: Iterable[Any]) -> Iterator[Any]:
    """Iterate ``first`` and then ``second``."""
    return itertools.chain(first, second)


def cloned(iterable: Iterable[Any]) -> Iterator[Any]:
    """Yield a shallow copy of each element."""
    return builtins.map(copy.copy, iterable)


def fold(iterable: Iterable[Any], init: Any, f: Callable[[Any, Any], Any]) -> Any:
    """Accumulate ``f(acc, item)`` over the elements, starting from ``init``."""
    return functools.reduce(f, iterable, init)


def all(iterable: Iterable[Any], predicate: Callable[[Any], bool]) -> bool:
    """True if ``predicate`` holds for every element."""
    return builtins.all(predicate(item) for item in iterable)


def any(iterable: Iterable[Any], predicate: Callable[[Any], bool]) -> bool:
    """True if ``predicate`` holds for some element."""
    return builtins.any(predicate(item) for item in iterable)


def max(iterable: Iterable[Any]) -> Any:
    """The largest element, the last of equal ones, or ``None`` if empty."""
    result: Any = None
    first = True
    for item in iterable:
        if first or not item < result:
            result = item
            first = False
    return result


def min(iterable: Iterable[Any]) -> Any:
    """The smallest element, the first of equal ones, or ``None`` if empty."""
    return builtins.min(iterable, default=None)


def join(iterable: Iterable[Any], sep: str) -> str:
    """The text of all elements, separated by ``sep``."""
    return sep.join(builtins.map(str, iterable))


def sorted(iterable: Iterable[Any]) -> Iterator[Any]:
    """An iterator over the elements in ascending order."""
    return iter(builtins.sorted(iterable))