"""A reference-counted person shared through strong pointers."""

from __future__ import annotations

from objdemos.lightref import LightRefBase, StrongPointer


class Person(LightRefBase):
    def __init__(self) -> None:
        super().__init__()
        print("Pserson()")

    def on_destroy(self) -> None:
        """Mark the person destroyed and announce it."""
        super().on_destroy()
        print("~Person()")

    def print_info(self) -> str:
        """Print and return the person's test line."""
        message = "just a test function"
        print(message)
        return message


def use_pointer(pointer: StrongPointer) -> int:
    """Hold a second reference for the call; return the count seen inside."""
    with pointer.copy() as local:
        count = local.strong_count()
        print(f"In test_func: {count}")
        local.print_info()
    return count


def main(argv: list[str] | None = None) -> int:
    """Share one person through a pointer and report the reference counts."""
    with StrongPointer(Person()) as other:
        other.get().print_info()
        print(f"Before call test_func: {other.strong_count()}")
        for _ in range(2):
            use_pointer(other)
            print(f"After call test_func: {other.strong_count()}")
    return 0