"""Adaptors over sequences of ``Ok``/``Err`` results and plain conversions."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Ok:
    """A successful result holding ``value``."""

    value: Any


@dataclass(frozen=True, slots=True)
class Err:
    """A failed result holding ``error``."""

    error: Any


def _not_a_result(item: Any) -> TypeError:
    return TypeError(f"expected Ok or Err, got {item!r}")


def map_ok(iterable: Iterable[Ok | Err], f: Callable[[Any], Any]) -> Iterator[Ok | Err]:
    """Apply ``f`` to the value of every ``Ok``; pass every ``Err`` through."""
    for item in iterable:
        match item:
            case Ok(value):
                yield Ok(f(value))
            case Err():
                yield item
            case _:
                raise _not_a_result(item)


def filter_ok(
    iterable: Iterable[Ok | Err], predicate: Callable[[Any], bool]
) -> Iterator[Ok | Err]:
    """Keep the ``Ok`` values that satisfy ``predicate``, and every ``Err``."""
    for item in iterable:
        match item:
            case Ok(value):
                if predicate(value):
                    yield item
            case Err():
                yield item
            case _:
                raise _not_a_result(item)


def filter_map_ok(
    iterable: Iterable[Ok | Err], f: Callable[[Any], Any]
) -> Iterator[Ok | Err]:
    """Replace each ``Ok`` value by ``f(value)``, dropping it where that is ``None``."""
    for item in iterable:
        match item:
            case Ok(value):
                mapped = f(value)
                if mapped is not None:
                    yield Ok(mapped)
            case Err():
                yield item
            case _:
                raise _not_a_result(item)


def flatten_ok(iterable: Iterable[Ok | Err]) -> Iterator[Ok | Err]:
    """Expand each ``Ok`` holding an iterable into one ``Ok`` per element."""
    for item in iterable:
        match item:
            case Ok(inner):
                for element in inner:
                    yield Ok(element)
            case Err():
                yield item
            case _:
                raise _not_a_result(item)


def map_into(iterable: Iterable[Any], convert: Callable[[Any], Any]) -> Iterator[Any]:
    """Convert every element with ``convert``, typically a type."""
    return map(convert, iterable)