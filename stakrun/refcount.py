"""Reference counts packed with actor state, and minimal shared references."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Generic, Optional, Tuple, TypeVar

T = TypeVar("T")
M = TypeVar("M")

_WORD_MAX = (1 << 64) - 1

COUNT_SHIFT = 2
COUNT_INC = 1 << COUNT_SHIFT
COUNT_MASK = ~(COUNT_INC - 1) & _WORD_MAX


class ActorState(IntEnum):
    """Lifecycle state of an actor."""

    PREP = 0
    READY = 1
    ZOMBIE = 2


@dataclass(frozen=True)
class CountAndState:
    """A strong count and an actor state packed into one word.

    Once the count reaches its maximum it locks there and never decreases.
    """

    value: int = int(ActorState.PREP)

    @classmethod
    def new(cls) -> CountAndState:
        """Return a zero count in the PREP state."""
        return cls(int(ActorState.PREP))

    @property
    def count(self) -> int:
        return self.value >> COUNT_SHIFT

    @property
    def state(self) -> ActorState:
        return ActorState(self.value & ~COUNT_MASK & _WORD_MAX)

    def inc(self) -> CountAndState:
        """Return this value with the count increased by one."""
        if self.value >= COUNT_MASK:
            return self
        return CountAndState(self.value + COUNT_INC)

    def dec(self) -> Tuple[CountAndState, bool]:
        """Return the decreased value and whether the count went to zero."""
        if self.value < COUNT_INC or self.value >= COUNT_MASK:
            return self, False
        val = self.value - COUNT_INC
        return CountAndState(val), val < COUNT_INC

    def set_state(self, state: ActorState) -> CountAndState:
        """Return this value with the state replaced."""
        return CountAndState((self.value & COUNT_MASK) | int(state))

    def is_prep(self) -> bool:
        return (self.value & ~COUNT_MASK) == ActorState.PREP

    def is_zombie(self) -> bool:
        return (self.value & ~COUNT_MASK) == ActorState.ZOMBIE


class _RcBox(Generic[T]):
    __slots__ = ("count", "value", "on_release")

    def __init__(self, value: T, on_release: Optional[Callable[[T], object]]) -> None:
        self.count = 1
        self.value: Optional[T] = value
        self.on_release = on_release


class MinRc(Generic[T]):
    """A handle on a shared value with a single reference count.

    Each handle is released once; when the last handle is released the
    value is dropped and ``on_release`` is called with it.  The count
    locks at its maximum and the value is then never released.
    """

    __slots__ = ("_box", "_released")

    def __init__(self, value: T, on_release: Optional[Callable[[T], object]] = None) -> None:
        self._box: _RcBox[T] = _RcBox(value, on_release)
        self._released = False

    @classmethod
    def _share(cls, box: _RcBox[T]) -> MinRc[T]:
        handle = cls.__new__(cls)
        handle._box = box
        handle._released = False
        return handle

    def _check_live(self) -> None:
        if self._released:
            raise RuntimeError("MinRc handle has already been released")

    def clone(self) -> MinRc[T]:
        """Return another handle on the same value."""
        self._check_live()
        box = self._box
        box.count = min(box.count + 1, _WORD_MAX)
        return MinRc._share(box)

    def release(self) -> bool:
        """Release this handle; return True if the value was dropped."""
        self._check_live()
        self._released = True
        box = self._box
        if box.count == 1:
            box.count = 0
            value, box.value = box.value, None
            callback, box.on_release = box.on_release, None
            if callback is not None:
                callback(value)
            return True
        if box.count not in (0, _WORD_MAX):
            box.count -= 1
        return False

    def inner(self) -> T:
        """Return the shared value."""
        self._check_live()
        return self._box.value

    def count(self) -> int:
        """Return the number of live handles."""
        return self._box.count


class FwdRc(Generic[M]):
    """A cheaply cloned shared reference to a message-forwarding callable."""

    __slots__ = ("_callback",)

    def __init__(self, callback: Callable[[M], object]) -> None:
        if not callable(callback):
            raise TypeError("forwarding target must be callable")
        self._callback = callback

    def clone(self) -> FwdRc[M]:
        """Return another reference to the same callable."""
        return FwdRc(self._callback)

    def inner(self) -> Callable[[M], object]:
        """Return the shared callable."""
        return self._callback

    def __call__(self, msg: M) -> None:
        self._callback(msg)