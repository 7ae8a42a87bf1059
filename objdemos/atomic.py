"""A 32-bit signed integer with atomic read-modify-write operations.

Arithmetic wraps around the same way 32-bit two's-complement arithmetic does.
The read-modify-write operations return the value held before the change.
"""

from __future__ import annotations

import threading
from typing import Callable

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
_MASK32 = 0xFFFFFFFF


def _wrap(value: int) -> int:
    """Reduce an integer to the signed 32-bit range."""
    value &= _MASK32
    return value - 2**32 if value & 0x80000000 else value


class AtomicInt32:
    """A 32-bit signed integer guarded by a lock."""

    def __init__(self, value: int = 0) -> None:
        self._value = _wrap(value)
        self._lock = threading.Lock()

    def _update(self, change: Callable[[int], int]) -> int:
        with self._lock:
            previous = self._value
            self._value = _wrap(change(previous))
            return previous

    def inc(self) -> int:
        """Add one; return the previous value."""
        return self.add(1)

    def dec(self) -> int:
        """Subtract one; return the previous value."""
        return self.add(-1)

    def add(self, increment: int) -> int:
        """Add ``increment``; return the previous value."""
        step = _wrap(increment)
        return self._update(lambda current: current + step)

    def and_(self, value: int) -> int:
        """Bitwise-and with ``value``; return the previous value."""
        mask = _wrap(value)
        return self._update(lambda current: current & mask)

    def or_(self, value: int) -> int:
        """Bitwise-or with ``value``; return the previous value."""
        mask = _wrap(value)
        return self._update(lambda current: current | mask)

    def acquire_load(self) -> int:
        with self._lock:
            return self._value

    def release_load(self) -> int:
        with self._lock:
            return self._value

    def acquire_store(self, value: int) -> None:
        with self._lock:
            self._value = _wrap(value)

    def release_store(self, value: int) -> None:
        with self._lock:
            self._value = _wrap(value)

    def _compare_and_set(self, old_value: int, new_value: int) -> bool:
        with self._lock:
            if self._value != _wrap(old_value):
                return False
            self._value = _wrap(new_value)
            return True

    def acquire_cas(self, old_value: int, new_value: int) -> bool:
        """Store ``new_value`` if the value equals ``old_value``; True if stored."""
        return self._compare_and_set(old_value, new_value)

    def release_cas(self, old_value: int, new_value: int) -> bool:
        """Store ``new_value`` if the value equals ``old_value``; True if stored."""
        return self._compare_and_set(old_value, new_value)

    def __int__(self) -> int:
        return self.acquire_load()

    def __repr__(self) -> str:
        return f"AtomicInt32({self.acquire_load()})"