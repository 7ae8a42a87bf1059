"""Intrusive reference counting and a strong pointer that maintains the count."""

from __future__ import annotations

import threading
from typing import Any


class LightRefBase:
    """Base for objects that count their strong references.

    When the last strong reference is dropped, ``on_destroy`` runs once.
    """

    def __init__(self) -> None:
        self._count = 0
        self._count_lock = threading.Lock()
        self.destroyed = False

    def inc_strong(self, owner: object = None) -> None:
        """Record one more strong reference held by ``owner``."""
        with self._count_lock:
            self._count += 1

    def dec_strong(self, owner: object = None) -> None:
        """Drop a strong reference; destroy the object when it was the last."""
        with self._count_lock:
            if self._count <= 0:
                raise ValueError("no strong reference left to drop")
            self._count -= 1
            last = self._count == 0
        if last:
            self.on_destroy()

    def strong_count(self) -> int:
        """Current number of strong references (for debugging)."""
        return self._count

    def on_destroy(self) -> None:
        """Called when the last strong reference goes away; marks the object destroyed."""
        self.destroyed = True


class StrongPointer:
    """Holds a strong reference to a ``LightRefBase`` object.

    Attribute access is forwarded to the held object.
    """

    def __init__(self, target: LightRefBase | None = None) -> None:
        self._target = target
        if target is not None:
            target.inc_strong(self)

    @staticmethod
    def _unwrap(other: Any) -> LightRefBase | None:
        if isinstance(other, StrongPointer):
            return other._target
        return other

    def assign(self, other: StrongPointer | LightRefBase | None) -> StrongPointer:
        """Point at what ``other`` holds (or at ``other`` itself), releasing the old object."""
        new_target = self._unwrap(other)
        if new_target is not None:
            new_target.inc_strong(self)
        old_target = self._target
        self._target = new_target
        if old_target is not None:
            old_target.dec_strong(self)
        return self

    def clear(self) -> None:
        """Release the held object, if any."""
        target = self._target
        if target is not None:
            self._target = None
            target.dec_strong(self)

    def get(self) -> LightRefBase | None:
        """Return the held object, or None."""
        return self._target

    def copy(self) -> StrongPointer:
        """Return a new pointer holding another strong reference to the same object."""
        return StrongPointer(self._target)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        target = self._target
        if target is None:
            raise AttributeError(f"empty pointer has no attribute {name!r}")
        return getattr(target, name)

    def __bool__(self) -> bool:
        return self._target is not None

    def __eq__(self, other: object) -> bool:
        return self._target is self._unwrap(other)

    def __hash__(self) -> int:
        return id(self._target)

    def __enter__(self) -> StrongPointer:
        return self

    def __exit__(self, *args: object) -> None:
        self.clear()

    def __repr__(self) -> str:
        return f"StrongPointer({self._target!r})"