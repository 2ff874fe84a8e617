"""Logging levels, level filters, log records and the key-value visitor interface."""

from __future__ import annotations

import abc
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterable, Optional

LogID = int
"""Logging span identifier: allocated from one upwards, zero means "none"."""


class LogLevelError(ValueError):
    """Raised when text or a number does not name a valid logging level."""

    def __init__(self, message: str = "invalid logging level") -> None:
        super().__init__(message)


class LogLevel(IntEnum):
    """Logging levels.

    TRACE to ERROR are severity levels.  OFF disables severity logging.
    AUDIT records are key-value records meant for machine processing.
    OPEN and CLOSE mark the start and end of a span.
    """

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    OFF = 8
    AUDIT = 5
    OPEN = 6
    CLOSE = 7

    def __str__(self) -> str:
        return self.name

    @staticmethod
    def all_levels() -> tuple[LogLevel, ...]:
        """Return every defined logging level."""
        return tuple(LogLevel)

    @staticmethod
    def parse(text: str) -> LogLevel:
        """Parse a level name, ignoring ASCII case and surrounding whitespace."""
        name = text.strip()
        if name and name.isascii():
            level = LogLevel.__members__.get(name.upper())
            if level is not None:
                return level
        raise LogLevelError()

    @staticmethod
    def from_value(value: int) -> LogLevel:
        """Convert a numeric level value back into a LogLevel."""
        try:
            return LogLevel(value)
        except ValueError:
            raise LogLevelError() from None


_SEVERITY_MASK = 0x1F


class LogFilter:
    """An immutable set of enabled logging levels, combinable with ``|``."""

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0) -> None:
        self._bits = bits

    @property
    def bits(self) -> int:
        return self._bits

    @classmethod
    def from_level(cls, level: LogLevel) -> LogFilter:
        """Build a filter from one level.

        A severity level also enables every more severe level; OPEN and
        CLOSE enable each other; AUDIT enables only itself; OFF enables
        nothing.
        """
        level = LogLevel(level)
        if level in (LogLevel.AUDIT,):
            return cls(1 << LogLevel.AUDIT)
        if level in (LogLevel.OPEN, LogLevel.CLOSE):
            return cls((1 << LogLevel.OPEN) | (1 << LogLevel.CLOSE))
        return cls(_SEVERITY_MASK & (_SEVERITY_MASK << int(level)))

    @classmethod
    def all(cls, levels: Iterable[LogLevel]) -> LogFilter:
        """Combine the filters of all the given levels."""
        result = cls()
        for level in levels:
            result |= cls.from_level(level)
        return result

    @classmethod
    def parse(cls, text: str) -> LogFilter:
        """Parse a comma-separated list of level names."""
        return cls.all(LogLevel.parse(part) for part in text.split(","))

    def allows(self, level: LogLevel) -> bool:
        """Test whether the given level is enabled."""
        return bool(self._bits & (1 << int(level)))

    def is_empty(self) -> bool:
        """Test whether no levels are enabled."""
        return self._bits == 0

    def __or__(self, other: LogFilter) -> LogFilter:
        if not isinstance(other, LogFilter):
            return NotImplemented
        return LogFilter(self._bits | other._bits)

    def __ior__(self, other: LogFilter) -> LogFilter:
        return self.__or__(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LogFilter):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __iter__(self):
        return (level for level in LogLevel.all_levels() if self.allows(level))

    def __str__(self) -> str:
        return "LogFilter(" + ",".join(level.name for level in self) + ")"

    def __repr__(self) -> str:
        return str(self)


class LogVisitor(abc.ABC):
    """Receives the key-value pairs of a log record in sequence.

    Keys are ``None`` for members of an array.  Maps and arrays are opened
    with ``kv_map``/``kv_arr`` and closed with ``kv_mapend``/``kv_arrend``
    using the same key.
    """

    @abc.abstractmethod
    def kv_u64(self, key: Optional[str], val: int) -> None: ...

    @abc.abstractmethod
    def kv_i64(self, key: Optional[str], val: int) -> None: ...

    @abc.abstractmethod
    def kv_f64(self, key: Optional[str], val: float) -> None: ...

    @abc.abstractmethod
    def kv_bool(self, key: Optional[str], val: bool) -> None: ...

    @abc.abstractmethod
    def kv_null(self, key: Optional[str]) -> None: ...

    @abc.abstractmethod
    def kv_str(self, key: Optional[str], val: str) -> None: ...

    @abc.abstractmethod
    def kv_fmt(self, key: Optional[str], val: str) -> None: ...

    @abc.abstractmethod
    def kv_map(self, key: Optional[str]) -> None: ...

    @abc.abstractmethod
    def kv_mapend(self, key: Optional[str]) -> None: ...

    @abc.abstractmethod
    def kv_arr(self, key: Optional[str]) -> None: ...

    @abc.abstractmethod
    def kv_arrend(self, key: Optional[str]) -> None: ...


def _no_pairs(_visitor: LogVisitor) -> None:
    return None


@dataclass(frozen=True)
class LogRecord:
    """A log record passed to a logger.

    ``kvscan`` is called with a visitor to receive the key-value pairs.
    """

    id: LogID
    level: LogLevel
    target: str
    fmt: str
    kvscan: Callable[[LogVisitor], None] = _no_pairs