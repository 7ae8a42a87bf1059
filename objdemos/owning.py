"""A pointer that owns its object and lets go of it when released."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class Person:
    name: str = ""
    age: int = 0

    def show(self) -> str:
        """Print the person's name and age and return the printed line."""
        line = f"name:{self.name}  age:{self.age}"
        print(line)
        return line


class OwningPointer:
    """Holds one object, forwards attribute access to it, releases it on exit."""

    def __init__(self, target: Any = None) -> None:
        if target is None:
            print("just for test")
        self._target = target

    def get(self) -> Any:
        """Return the held object; raise ValueError if there is none."""
        if self._target is None:
            raise ValueError("pointer holds no object")
        return self._target

    def release(self) -> None:
        """Drop the held object, reporting it once."""
        if self._target is not None:
            self._target = None
            print("~smatPointer")

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.get(), name)

    def __enter__(self) -> OwningPointer:
        return self

    def __exit__(self, *args: object) -> None:
        self.release()


def main(argv: list[str] | None = None) -> int:
    """Show a person through the pointer twice, then release it."""
    with OwningPointer(Person("xiaowang", 30)) as pointer:
        pointer.show()
        pointer.get().show()
    return 0