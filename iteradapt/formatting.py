"""Lazy, single-use formatting of iterables with a separator."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any


class Format:
    """Formats the elements of an iterable, separated by ``sep``, once only."""

    def __init__(self, iterable: Iterable[Any], sep: str) -> None:
        self._sep = sep
        self._iter: Iterator[Any] | None = iter(iterable)

    def _take(self) -> Iterator[Any]:
        if self._iter is None:
            raise RuntimeError("Format: was already formatted once")
        it, self._iter = self._iter, None
        return it

    def __str__(self) -> str:
        return self._sep.join(str(item) for item in self._take())

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return self._sep.join(format(item, spec) for item in self._take())


class FormatWith:
    """Formats each element through a callback, separated by ``sep``, once only.

    The callback is called as ``func(item, write)``; every value passed to
    ``write`` is appended as text.
    """

    def __init__(
        self,
        iterable: Iterable[Any],
        sep: str,
        func: Callable[[Any, Callable[[Any], None]], None],
    ) -> None:
        self._sep = sep
        self._func = func
        self._iter: Iterator[Any] | None = iter(iterable)

    def __str__(self) -> str:
        if self._iter is None:
            raise RuntimeError("FormatWith: was already formatted once")
        it, self._iter = self._iter, None
        parts: list[str] = []
        write = lambda value: parts.append(str(value))  # noqa: E731
        for index, item in enumerate(it):
            if index and self._sep:
                parts.append(self._sep)
            self._func(item, write)
        return "".join(parts)

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


def format_items(iterable: Iterable[Any], sep: str) -> Format:
    """A :class:`Format` over ``iterable``."""
    return Format(iterable, sep)


def format_with(
    iterable: Iterable[Any],
    sep: str,
    func: Callable[[Any, Callable[[Any], None]], None],
) -> FormatWith:
    """A :class:`FormatWith` over ``iterable`` using ``func``."""
    return FormatWith(iterable, sep, func)