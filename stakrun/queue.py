"""Queue of one-shot callbacks waiting to be run against a context object."""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Generic, TypeVar

S = TypeVar("S")

Callback = Callable[[S], object]


class FnOnceQueue(Generic[S]):
    """A FIFO queue of callbacks, each run at most once.

    ``execute`` runs every queued callback in the order it was pushed,
    passing each the same context object, and leaves the queue empty.
    Callbacks pushed while the queue is executing are kept for the next
    ``execute``.  ``clear`` discards queued callbacks without running them.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: Deque[Callable[[S], object]] = deque()

    def push(self, callback: Callable[[S], object]) -> None:
        """Append a callback to the end of the queue."""
        if not callable(callback):
            raise TypeError("queued item must be callable")
        self._items.append(callback)

    def execute(self, context: S) -> None:
        """Run all queued callbacks in order, passing them ``context``.

        If a callback raises, the callbacks after it in this batch are
        discarded and the exception propagates.
        """
        batch, self._items = self._items, deque()
        try:
            while batch:
                batch.popleft()(context)
        finally:
            batch.clear()

    def is_empty(self) -> bool:
        """Test whether the queue holds no callbacks."""
        return not self._items

    def clear(self) -> None:
        """Discard all queued callbacks without running them."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)