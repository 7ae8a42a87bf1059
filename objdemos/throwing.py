"""Exceptions propagating through three call levels, with a declared throw list."""

from __future__ import annotations

import string
from itertools import takewhile

_ULONG_MAX = 2**64 - 1
_ABORT_STATUS = 134


class ThrownValue(Exception):
    """A plain value thrown as an exception; ``kind`` names its type."""

    def __init__(self, value: object, kind: str) -> None:
        super().__init__(value)
        self.value = value
        self.kind = kind


class MyError(Exception):
    def what(self) -> str:
        return "This is MyException"


class MySubError(MyError):
    def what(self) -> str:
        return "This is MySubException"


class _UnexpectedException(RuntimeError):
    """Raised when level_c throws something outside its declared list."""


# level_c may only let int and double values escape.
_DECLARED_KINDS = frozenset({"int", "double"})


def _thrown_by_c(i: int) -> Exception | None:
    if i == 1:
        return ThrownValue(1, "int")
    if i == 2:
        return ThrownValue(1.2, "double")
    if i == 3:
        return ThrownValue(1.3, "float")
    if i == 4:
        return MyError()
    if i == 5:
        return MySubError()
    return None


def level_c(i: int) -> None:
    """Innermost level: reports success for 0, throws for 1 to 5."""
    if i == 0:
        print("In C, it is OK")
        return
    error = _thrown_by_c(i)
    if error is None:
        return
    if isinstance(error, ThrownValue) and error.kind in _DECLARED_KINDS:
        raise error
    print("my_unexpected_func")
    raise _UnexpectedException("exception outside the declared throw list") from error


def level_b(i: int) -> None:
    print("call C ...")
    level_c(i)
    print("After call C")


def level_a(i: int) -> None:
    """Outer level: handles thrown ints and MyError, lets the rest escape."""
    try:
        level_b(i)
    except ThrownValue as exc:
        if exc.kind != "int":
            raise
        print(f"catch int exception {exc.value}")
    except MyError as exc:
        print(exc.what())


def _strtoul(text: str) -> int:
    """Read an unsigned long the way strtoul with base 0 does."""
    s = text.lstrip()
    negative = False
    if s and s[0] in "+-":
        negative = s[0] == "-"
        s = s[1:]
    if s[:2].lower() == "0x" and len(s) > 2 and s[2] in string.hexdigits:
        base, s, alphabet = 16, s[2:], string.hexdigits
    elif s.startswith("0"):
        base, alphabet = 8, string.octdigits
    else:
        base, alphabet = 10, string.digits
    digits = "".join(takewhile(lambda ch: ch in alphabet, s))
    value = int(digits, base) if digits else 0
    if value > _ULONG_MAX:
        return _ULONG_MAX
    return (-value) & _ULONG_MAX if negative else value


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value & 0x80000000 else value


def main(argv: list[str] | None = None) -> int:
    """Run level_a with the number given as the only argument."""
    import sys

    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Usage: ")
        print("objdemos-throwing <0|1|2|3>")
        return -1
    try:
        level_a(_to_int32(_strtoul(args[0])))
    except (ThrownValue, _UnexpectedException):
        print("my_terminate_func")
        return _ABORT_STATUS
    return 0