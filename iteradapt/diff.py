"""Lock-step comparison of two iterables, stopping at the first difference."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from iteradapt.adaptors import PutBack, put_back

_MISSING = object()


@dataclass(frozen=True)
class FirstMismatch:
    """The index of the first mismatch and both remainders, starting at it."""

    index: int
    first: PutBack
    second: PutBack


@dataclass(frozen=True)
class Shorter:
    """``second`` ended after ``index`` elements; the rest of ``first``."""

    index: int
    remaining: PutBack


@dataclass(frozen=True)
class Longer:
    """``first`` ended after ``index`` elements; the rest of ``second``."""

    index: int
    remaining: PutBack


def diff_with(
    first: Iterable[Any],
    second: Iterable[Any],
    is_equal: Callable[[Any, Any], bool],
) -> FirstMismatch | Shorter | Longer | None:
    """Compare both inputs element by element; ``None`` if they are equal."""
    i, j = iter(first), iter(second)
    index = 0
    for a in i:
        b = next(j, _MISSING)
        if b is _MISSING:
            return Shorter(index, put_back(i).with_value(a))
        if not is_equal(a, b):
            return FirstMismatch(
                index, put_back(i).with_value(a), put_back(j).with_value(b)
            )
        index += 1
    b = next(j, _MISSING)
    if b is _MISSING:
        return None
    return Longer(index, put_back(j).with_value(b))