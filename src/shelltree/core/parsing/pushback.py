from __future__ import annotations

"""
Lookahead Buffer.

Wraps a forward-only iterator and lets the consumer hand items back for
re-consumption. Put-back items are replayed in FIFO order before the
underlying source is advanced again.
"""

from collections import deque
from typing import Deque, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class PushbackIterator(Generic[T]):
    """
    Iterator with an unbounded FIFO put-back queue.

    Items are never inspected; the buffer is agnostic of what it carries.
    """

    def __init__(self, source: Iterable[T]) -> None:
        self._source: Iterator[T] = iter(source)
        self._buffer: Deque[T] = deque()

    def __iter__(self) -> PushbackIterator[T]:
        return self

    def __next__(self) -> T:
        if self._buffer:
            return self._buffer.popleft()
        return next(self._source)

    def next(self) -> Optional[T]:
        """Return the next item, or None once the source is exhausted."""
        try:
            return self.__next__()
        except StopIteration:
            return None

    def put_back(self, item: T) -> None:
        """Queue `item` to be returned before any further source consumption."""
        self._buffer.append(item)

    @property
    def pending(self) -> int:
        return len(self._buffer)
