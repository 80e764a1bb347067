"""A value holding a left item, a right item, or both."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


class EitherOrBoth:
    """Base of the three variants :class:`Left`, :class:`Right` and :class:`Both`."""

    __slots__ = ()

    def has_left(self) -> bool:
        """True for ``Left`` and ``Both``."""
        return isinstance(self, (Left, Both))

    def has_right(self) -> bool:
        """True for ``Right`` and ``Both``."""
        return isinstance(self, (Right, Both))

    def is_left(self) -> bool:
        """True only for ``Left``."""
        return isinstance(self, Left)

    def is_right(self) -> bool:
        """True only for ``Right``."""
        return isinstance(self, Right)

    def is_both(self) -> bool:
        """True only for ``Both``."""
        return isinstance(self, Both)

    def left(self) -> Any:
        """The left value of ``Left`` or ``Both``, otherwise ``None``."""
        match self:
            case Left(value) | Both(value, _):
                return value
        return None

    def right(self) -> Any:
        """The right value of ``Right`` or ``Both``, otherwise ``None``."""
        match self:
            case Right(value) | Both(_, value):
                return value
        return None

    def both(self) -> tuple[Any, Any] | None:
        """The pair held by ``Both``, otherwise ``None``."""
        match self:
            case Both(first, second):
                return (first, second)
        return None

    def flip(self) -> EitherOrBoth:
        """Swap the left and right sides."""
        match self:
            case Left(value):
                return Right(value)
            case Right(value):
                return Left(value)
            case Both(first, second):
                return Both(second, first)
        raise TypeError(f"not a variant: {self!r}")

    def map_left(self, f: Callable[[Any], Any]) -> EitherOrBoth:
        """Apply ``f`` to the left value, if present, keeping the variant."""
        match self:
            case Left(value):
                return Left(f(value))
            case Both(first, second):
                return Both(f(first), second)
            case Right():
                return self
        raise TypeError(f"not a variant: {self!r}")

    def map_right(self, f: Callable[[Any], Any]) -> EitherOrBoth:
        """Apply ``f`` to the right value, if present, keeping the variant."""
        match self:
            case Right(value):
                return Right(f(value))
            case Both(first, second):
                return Both(first, f(second))
            case Left():
                return self
        raise TypeError(f"not a variant: {self!r}")

    def map_any(
        self, f: Callable[[Any], Any], g: Callable[[Any], Any]
    ) -> EitherOrBoth:
        """Apply ``f`` to the left value and ``g`` to the right value."""
        match self:
            case Left(value):
                return Left(f(value))
            case Right(value):
                return Right(g(value))
            case Both(first, second):
                return Both(f(first), g(second))
        raise TypeError(f"not a variant: {self!r}")

    def left_and_then(self, f: Callable[[Any], EitherOrBoth]) -> EitherOrBoth:
        """Replace ``self`` with ``f(left)`` when a left value is present."""
        match self:
            case Left(value) | Both(value, _):
                return f(value)
            case Right():
                return self
        raise TypeError(f"not a variant: {self!r}")

    def right_and_then(self, f: Callable[[Any], EitherOrBoth]) -> EitherOrBoth:
        """Replace ``self`` with ``f(right)`` when a right value is present."""
        match self:
            case Right(value) | Both(_, value):
                return f(value)
            case Left():
                return self
        raise TypeError(f"not a variant: {self!r}")

    def or_(self, left: Any, right: Any) -> tuple[Any, Any]:
        """A pair, filling a missing side with ``left`` or ``right``."""
        match self:
            case Left(value):
                return (value, right)
            case Right(value):
                return (left, value)
            case Both(first, second):
                return (first, second)
        raise TypeError(f"not a variant: {self!r}")

    def or_else(
        self, left: Callable[[], Any], right: Callable[[], Any]
    ) -> tuple[Any, Any]:
        """A pair, computing a missing side with ``left()`` or ``right()``."""
        match self:
            case Left(value):
                return (value, right())
            case Right(value):
                return (left(), value)
            case Both(first, second):
                return (first, second)
        raise TypeError(f"not a variant: {self!r}")

    def reduce(self, f: Callable[[Any, Any], Any]) -> Any:
        """The single value present, or ``f(left, right)`` for ``Both``."""
        match self:
            case Left(value) | Right(value):
                return value
            case Both(first, second):
                return f(first, second)
        raise TypeError(f"not a variant: {self!r}")


@dataclass(frozen=True, slots=True)
class Left(EitherOrBoth):
    """Only a left value is present."""

    value: Any


@dataclass(frozen=True, slots=True)
class Right(EitherOrBoth):
    """Only a right value is present."""

    value: Any


@dataclass(frozen=True, slots=True)
class Both(EitherOrBoth):
    """Both a left and a right value are present."""

    first: Any
    second: Any