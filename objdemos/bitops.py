"""Fixed-size bitmasks stored as 32-bit words, and population counts."""

from __future__ import annotations

BITS_PER_WORD = 32
_WORD_MASK = (1 << BITS_PER_WORD) - 1
_LONG_MASK = (1 << 64) - 1


class Bitmask:
    """A bitmask of ``num_bits`` bits, all clear at the start."""

    def __init__(self, num_bits: int) -> None:
        if num_bits < 0:
            raise ValueError("number of bits must not be negative")
        self.num_bits = num_bits
        self._words = [0] * -(-num_bits // BITS_PER_WORD)

    @property
    def words(self) -> tuple[int, ...]:
        """The storage words, lowest bits first."""
        return tuple(self._words)

    def _locate(self, bit: int) -> tuple[int, int]:
        if not 0 <= bit < len(self._words) * BITS_PER_WORD:
            raise IndexError(f"bit {bit} is outside the mask")
        return divmod(bit, BITS_PER_WORD)

    def first_zero(self) -> int | None:
        """Index of the lowest clear bit, or None if no bit below num_bits is clear."""
        for index, word in enumerate(self._words):
            free = ~word & _WORD_MASK
            if free:
                result = index * BITS_PER_WORD + (free & -free).bit_length() - 1
                return result if result < self.num_bits else None
        return None

    def weight(self) -> int:
        """Number of set bits."""
        return sum(popcount(word) for word in self._words)

    def set(self, bit: int) -> None:
        word, offset = self._locate(bit)
        self._words[word] |= 1 << offset

    def clear(self, bit: int) -> None:
        word, offset = self._locate(bit)
        self._words[word] &= ~(1 << offset) & _WORD_MASK

    def test(self, bit: int) -> bool:
        word, offset = self._locate(bit)
        return bool(self._words[word] >> offset & 1)


def popcount(x: int) -> int:
    """Set bits in a 32-bit unsigned int."""
    return (x & _WORD_MASK).bit_count()


def popcountl(x: int) -> int:
    """Set bits in a 64-bit unsigned long."""
    return (x & _LONG_MASK).bit_count()


def popcountll(x: int) -> int:
    """Set bits in a 64-bit unsigned long long."""
    return (x & _LONG_MASK).bit_count()