"""Control sockets handed to a process through its environment."""

from __future__ import annotations

import os
import string
from enum import IntEnum
from itertools import takewhile
from typing import Mapping

SOCKET_ENV_PREFIX = "ANDROID_SOCKET_"
SOCKET_DIR = "/dev/socket"

# The variable name fits a 64-byte buffer, terminator included.
_KEY_CAPACITY = 64
_NAME_LIMIT = _KEY_CAPACITY - (len(SOCKET_ENV_PREFIX) + 1)

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


class SocketNamespace(IntEnum):
    """Where a local socket name lives."""

    ABSTRACT = 0
    RESERVED = 1
    FILESYSTEM = 2


def _parse_long(text: str) -> int:
    """Read a base-10 long the way strtol does; raise OverflowError out of range."""
    rest = text.lstrip(" \t\n\v\f\r")
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(takewhile(lambda ch: ch in string.digits, rest))
    value = int(digits) if digits else 0
    if negative:
        value = -value
    if not _LONG_MIN <= value <= _LONG_MAX:
        raise OverflowError(f"socket descriptor {text!r} is out of range")
    return value


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value & 0x80000000 else value


def get_control_socket(name: str, environ: Mapping[str, str] | None = None) -> int:
    """Return the descriptor of the named control socket from the environment.

    Raises KeyError if the variable is not set and OverflowError if its
    number does not fit.
    """
    env = os.environ if environ is None else environ
    key = SOCKET_ENV_PREFIX + name[:_NAME_LIMIT]
    try:
        value = env[key]
    except KeyError:
        raise KeyError(f"no control socket named {name!r} ({key} is not set)") from None
    return _to_int32(_parse_long(value))