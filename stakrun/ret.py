"""One-shot returners that deliver a message exactly once."""

from __future__ import annotations

from types import TracebackType
from typing import Callable, Generic, Optional, Type, TypeVar

M = TypeVar("M")


class RetPanicError(RuntimeError):
    """Raised when a message is returned through a panicking returner."""


class Ret(Generic[M]):
    """Returner for messages of type ``M``.

    The callback is called exactly once: with the message when ``ret`` is
    called, or with ``None`` when the returner is closed (or garbage
    collected) without a message having been returned.  Messages should
    therefore not themselves be ``None``.
    """

    __slots__ = ("_callback",)

    def __init__(self, callback: Callable[[Optional[M]], object]) -> None:
        if not callable(callback):
            raise TypeError("returner callback must be callable")
        self._callback: Optional[Callable[[Optional[M]], object]] = callback

    @property
    def is_used(self) -> bool:
        """True once a message has been returned or the returner closed."""
        return self._callback is None

    def ret(self, msg: M) -> None:
        """Return a message.  A returner may be used only once."""
        callback = self._callback
        if callback is None:
            raise RuntimeError("Ret instance has already been used")
        self._callback = None
        callback(msg)

    def close(self) -> None:
        """Give up the returner, passing ``None`` if nothing was returned."""
        callback = self._callback
        if callback is not None:
            self._callback = None
            callback(None)

    def __enter__(self) -> Ret[M]:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_callback", None) is not None:
            self.close()


def ret_panic(msg: str) -> Ret:
    """Create a returner that raises ``RetPanicError`` when a message is returned.

    Closing it without a message is ignored.
    """
    text = str(msg)

    def _panic(m: object) -> None:
        if m is not None:
            raise RetPanicError(text)

    return Ret(_panic)


def ret_nop() -> Ret:
    """Create a returner that does nothing at all."""
    return Ret(lambda _m: None)


def ret_do(callback: Callable[[Optional[M]], object]) -> Ret[M]:
    """Create a returner that calls ``callback`` with the message or ``None``."""
    return Ret(callback)


def ret_some_do(callback: Callable[[M], object]) -> Ret[M]:
    """Create a returner that calls ``callback`` only when a message is returned."""

    def _some(m: Optional[M]) -> None:
        if m is not None:
            callback(m)

    return Ret(_some)