"""Take the single element of an iterable, or report why there was not one."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

_MISSING = object()


class ExactlyOneError(ValueError):
    """Raised when an iterable does not hold exactly one element.

    Iterating the error yields every element of the original input,
    including the ones already read.
    """

    def __init__(self, first_two: Iterable[Any], inner: Iterator[Any]) -> None:
        self._pending: deque[Any] = deque(first_two)
        self._inner = inner
        super().__init__(self._message())

    def _message(self) -> str:
        if self._pending:
            return "got at least 2 elements when exactly one was expected"
        return "got zero elements when exactly one was expected"

    def __str__(self) -> str:
        return self._message()

    def __iter__(self) -> ExactlyOneError:
        return self

    def __next__(self) -> Any:
        if self._pending:
            return self._pending.popleft()
        return next(self._inner)


def exactly_one(iterable: Iterable[Any]) -> Any:
    """The only element of ``iterable``; raises :class:`ExactlyOneError` otherwise."""
    it = iter(iterable)
    first = next(it, _MISSING)
    if first is _MISSING:
        raise ExactlyOneError((), it)
    second = next(it, _MISSING)
    if second is _MISSING:
        return first
    raise ExactlyOneError((first, second), it)