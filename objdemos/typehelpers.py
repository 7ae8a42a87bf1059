"""Ordering, key/value pairs and 32-bit hash codes for basic values."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any

_MASK32 = 0xFFFFFFFF


def strictly_order_type(lhs: Any, rhs: Any) -> int:
    """1 if lhs sorts before rhs, else 0; TypeError if they cannot be ordered."""
    try:
        before = lhs < rhs
    except TypeError as exc:
        raise TypeError(
            f"cannot order {type(lhs).__name__} and {type(rhs).__name__}"
        ) from exc
    return 1 if before else 0


def compare_type(lhs: Any, rhs: Any) -> int:
    """1 if lhs > rhs, -1 if lhs < rhs, 0 otherwise."""
    return strictly_order_type(rhs, lhs) - strictly_order_type(lhs, rhs)


@dataclass
class KeyValuePair:
    """A pair ordered by its key alone."""

    key: Any
    value: Any = None

    def __lt__(self, other: KeyValuePair) -> bool:
        return bool(strictly_order_type(self.key, other.key))


def hash_int32(value: int) -> int:
    """Hash of an integer of at most 32 bits: the value itself, truncated."""
    return value & _MASK32


def hash_int64(value: int) -> int:
    """Hash of a 64-bit integer: high half xor low half."""
    return ((value >> 32) ^ value) & _MASK32


def hash_float(value: float) -> int:
    """Hash of a single-precision float: its bit pattern."""
    return hash_int32(struct.unpack("<I", struct.pack("<f", value))[0])


def hash_double(value: float) -> int:
    """Hash of a double: its 64-bit pattern hashed as an integer."""
    return hash_int64(struct.unpack("<Q", struct.pack("<d", value))[0])