"""An atomic reference count that releases its owner when it drops to zero."""

from __future__ import annotations

from typing import Callable

from objdemos.atomic import AtomicInt32


class ARef:
    """A reference count starting at one."""

    def __init__(self) -> None:
        self._count = AtomicInt32(1)

    def count(self) -> int:
        """Current number of references."""
        return self._count.acquire_load()

    def get(self) -> None:
        """Take one more reference."""
        self._count.inc()

    def put(self, release: Callable[[ARef], None]) -> bool:
        """Drop a reference; call ``release(self)`` if it was the last.

        Returns True when ``release`` was called.
        """
        if self._count.dec() == 1:
            release(self)
            return True
        return False