"""Bitsets with containment checks and merging, limited by a highest-bit hint.

Bits are grouped into 32-bit words. Every operation that takes ``max_bit``
only looks at the words needed to hold bits ``0 .. max_bit - 1``. The whole
of the last such word is included.
"""

WORD_BITS = 32


def _word_mask(max_bit):
    words = max(0, 1 + (max_bit - 1) // WORD_BITS)
    return (1 << (words * WORD_BITS)) - 1


class Bitset:
    """A set of small non-negative integers stored as bits."""

    __slots__ = ("_bits", "_capacity")

    def __init__(self, bits):
        if bits <= 0:
            raise ValueError("a bitset needs at least one bit")
        words = 1 + (bits - 1) // WORD_BITS
        self._capacity = words * WORD_BITS
        self._bits = 0

    def __repr__(self):
        members = [i for i in range(self._capacity) if self._bits >> i & 1]
        return f"Bitset(capacity={self._capacity}, bits={members})"

    def __copy__(self):
        clone = Bitset.__new__(Bitset)
        clone._bits = self._bits
        clone._capacity = self._capacity
        return clone

    def _check_same_size(self, other):
        if self._capacity != other._capacity:
            raise ValueError(
                f"bitsets of different size: {self._capacity} and {other._capacity}"
            )

    def equals(self, other, max_bit):
        """Return True if both bitsets agree on the words up to ``max_bit``."""
        self._check_same_size(other)
        mask = _word_mask(max_bit)
        return (self._bits & mask) == (other._bits & mask)

    def contains(self, other, max_bit):
        """Return True if every bit of ``other`` up to ``max_bit`` is set here."""
        self._check_same_size(other)
        inner = other._bits & _word_mask(max_bit)
        return self._bits & inner == inner

    def merge(self, other, max_bit):
        """Return a new bitset holding the union up to ``max_bit``.

        Words beyond ``max_bit`` are taken from this bitset alone.
        """
        self._check_same_size(other)
        result = self.__copy__()
        result._bits |= other._bits & _word_mask(max_bit)
        return result

    def count(self, max_bit):
        """Return the number of set bits in the words up to ``max_bit``."""
        return (self._bits & _word_mask(max_bit)).bit_count()

    def set(self, index):
        """Set the bit at ``index``."""
        if not 0 <= index < self._capacity:
            raise IndexError(f"bit index {index} out of range")
        self._bits |= 1 << index

    @staticmethod
    def union_count(a, b, max_bit):
        """Return the number of set bits in the union of ``a`` and ``b`` up to ``max_bit``."""
        a._check_same_size(b)
        return ((a._bits | b._bits) & _word_mask(max_bit)).bit_count()

    @staticmethod
    def union_contains(a, b, inner, max_bit):
        """Return True if the union of ``a`` and ``b`` contains ``inner`` up to ``max_bit``."""
        a._check_same_size(b)
        a._check_same_size(inner)
        mask = _word_mask(max_bit)
        wanted = inner._bits & mask
        return (a._bits | b._bits) & wanted == wanted