"""Lazy grouping of consecutive elements by key, and lazy fixed-size chunking.

Groups (and chunks) share one underlying iterator. Consuming them in order
needs no buffering; elements are buffered only when a later group is
requested while an earlier one is still alive and unfinished.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any

_MISSING = object()
_NO_GROUP = -1


class _ChunkIndex:
    """A stateful key function that numbers consecutive runs of ``size`` elements."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._index = 0
        self._key = 0

    def __call__(self, _item: Any) -> int:
        if self._index == self._size:
            self._key += 1
            self._index = 0
        self._index += 1
        return self._key


class _GroupInner:
    """Shared state behind every group produced from one source iterator."""

    def __init__(self, iterable: Iterable[Any], key: Callable[[Any], Any]) -> None:
        self._key = key
        self._iter = iter(iterable)
        self._current_key: Any = _MISSING
        self._current_elt: Any = _MISSING
        self._done = False
        # Index of the group being buffered or visited.
        self._top_group = 0
        # Lowest group index that may still have buffered elements.
        self._oldest_buffered_group = 0
        # Group index of buffer[0].
        self._bottom_group = 0
        self._buffer: list[deque[Any]] = []
        # Highest group index that was closed, or _NO_GROUP.
        self._dropped_group = _NO_GROUP

    def step(self, client: int) -> Any:
        """The next element of group ``client``, or ``_MISSING``."""
        if client < self._oldest_buffered_group:
            return _MISSING
        if client < self._top_group or (
            client == self._top_group
            and len(self._buffer) > self._top_group - self._bottom_group
        ):
            return self._lookup_buffer(client)
        if self._done:
            return _MISSING
        if client == self._top_group:
            return self._step_current()
        return self._step_buffering()

    def _lookup_buffer(self, client: int) -> Any:
        if client < self._oldest_buffered_group:
            return _MISSING
        bufidx = client - self._bottom_group
        elt: Any = _MISSING
        if bufidx < len(self._buffer) and self._buffer[bufidx]:
            elt = self._buffer[bufidx].popleft()
        if elt is _MISSING and client == self._oldest_buffered_group:
            self._oldest_buffered_group += 1
            while True:
                idx = self._oldest_buffered_group - self._bottom_group
                if idx < len(self._buffer) and not self._buffer[idx]:
                    self._oldest_buffered_group += 1
                else:
                    break
            nclear = self._oldest_buffered_group - self._bottom_group
            if nclear > 0 and nclear >= len(self._buffer) // 2:
                del self._buffer[:nclear]
                self._bottom_group = self._oldest_buffered_group
        return elt

    def _next_element(self) -> Any:
        elt = next(self._iter, _MISSING)
        if elt is _MISSING:
            self._done = True
        return elt

    def _step_buffering(self) -> Any:
        # A later group was requested: buffer the rest of the current one
        # (unless it was closed) and return the first element of the next.
        keep = self._top_group != self._dropped_group
        group: list[Any] = []
        if self._current_elt is not _MISSING:
            elt, self._current_elt = self._current_elt, _MISSING
            if keep:
                group.append(elt)
        first_elt: Any = _MISSING
        while (elt := self._next_element()) is not _MISSING:
            key = self._key(elt)
            old_key, self._current_key = self._current_key, _MISSING
            if old_key is not _MISSING and old_key != key:
                self._current_key = key
                first_elt = elt
                break
            self._current_key = key
            if keep:
                group.append(elt)
        if keep:
            self._push_next_group(group)
        if first_elt is not _MISSING:
            self._top_group += 1
        return first_elt

    def _push_next_group(self, group: list[Any]) -> None:
        while self._top_group - self._bottom_group > len(self._buffer):
            if not self._buffer:
                self._bottom_group += 1
                self._oldest_buffered_group += 1
            else:
                self._buffer.append(deque())
        self._buffer.append(deque(group))

    def _step_current(self) -> Any:
        if self._current_elt is not _MISSING:
            elt, self._current_elt = self._current_elt, _MISSING
            return elt
        elt = self._next_element()
        if elt is _MISSING:
            return _MISSING
        key = self._key(elt)
        old_key, self._current_key = self._current_key, _MISSING
        if old_key is not _MISSING and old_key != key:
            self._current_key = key
            self._current_elt = elt
            self._top_group += 1
            return _MISSING
        self._current_key = key
        return elt

    def group_key(self, client: int) -> Any:
        """The key of the group whose first element was just returned."""
        old_key, self._current_key = self._current_key, _MISSING
        if not self._done:
            elt = self._next_element()
            if elt is not _MISSING:
                key = self._key(elt)
                if old_key != key:
                    self._top_group += 1
                self._current_key = key
                self._current_elt = elt
        return old_key

    def drop_group(self, client: int) -> None:
        """Record that group ``client`` will not be read any further."""
        if self._dropped_group == _NO_GROUP or client > self._dropped_group:
            self._dropped_group = client


class _Member:
    """Shared state of an iterator over the elements of one group."""

    def __init__(self, inner: _GroupInner, index: int, first: Any) -> None:
        self._inner = inner
        self._index = index
        self._first = first
        self._closed = False

    def _advance(self) -> Any:
        if self._closed:
            raise StopIteration
        if self._first is not _MISSING:
            elt, self._first = self._first, _MISSING
            return elt
        elt = self._inner.step(self._index)
        if elt is _MISSING:
            raise StopIteration
        return elt

    def _release(self) -> None:
        if not self._closed:
            self._closed = True
            self._first = _MISSING
            self._inner.drop_group(self._index)

    def __del__(self) -> None:
        try:
            self._release()
        except Exception:  # pragma: no cover - interpreter shutdown
            pass


class Group(_Member):
    """The elements of one group produced by :class:`GroupBy`."""

    def __iter__(self) -> Group:
        return self

    def __next__(self) -> Any:
        return self._advance()

    def close(self) -> None:
        """Stop reading this group; its remaining elements are no longer buffered."""
        self._release()


class Chunk(_Member):
    """The elements of one chunk produced by :class:`IntoChunks`."""

    def __iter__(self) -> Chunk:
        return self

    def __next__(self) -> Any:
        return self._advance()

    def close(self) -> None:
        """Stop reading this chunk; its remaining elements are no longer buffered."""
        self._release()


class GroupBy:
    """Consecutive elements with equal keys, as ``(key, Group)`` pairs.

    All iterators over one ``GroupBy`` share a single position.
    """

    def __init__(self, iterable: Iterable[Any], key: Callable[[Any], Hashable]) -> None:
        self._inner = _GroupInner(iterable, key)
        self._index = 0

    def __iter__(self) -> Iterator[tuple[Any, Group]]:
        inner = self._inner
        while True:
            index = self._index
            self._index += 1
            elt = inner.step(index)
            if elt is _MISSING:
                return
            key = inner.group_key(index)
            yield key, Group(inner, index, elt)


class IntoChunks:
    """Consecutive runs of at most ``size`` elements, as :class:`Chunk` iterators.

    All iterators over one ``IntoChunks`` share a single position.
    """

    def __init__(self, iterable: Iterable[Any], size: int) -> None:
        if size < 1:
            raise ValueError("chunk size must be at least 1")
        self._inner = _GroupInner(iterable, _ChunkIndex(size))
        self._index = 0

    def __iter__(self) -> Iterator[Chunk]:
        inner = self._inner
        while True:
            index = self._index
            self._index += 1
            elt = inner.step(index)
            if elt is _MISSING:
                return
            yield Chunk(inner, index, elt)


def group_by(iterable: Iterable[Any], key: Callable[[Any], Hashable]) -> GroupBy:
    """A :class:`GroupBy` over ``iterable`` using ``key``."""
    return GroupBy(iterable, key)


def chunks(iterable: Iterable[Any], size: int) -> IntoChunks:
    """An :class:`IntoChunks` over ``iterable``; ``size`` must be at least 1."""
    return IntoChunks(iterable, size)