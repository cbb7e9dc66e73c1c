"""
Variable-length bit vector backed by byte storage.

The vector length is counted in bits and kept separately from the storage
size, so a vector may end in the middle of its last byte. Storage is always
exactly ceil(length / 8) bytes; the unused trailing bits of the last byte
are padding and are never observed.

Bit Numbering:
- Bit 0 lives in byte 0, bit 8 in byte 1, and so on
- Inside a byte, the vector's BitOrder decides which physical bit a
  logical position maps to (see floatbits.bits)

Every structural operation (shift, copy, concatenation, reversal) is built
on get_bit() and set_bit() only.
"""

from floatbits.bits import (
    BITS_PER_BYTE,
    DEFAULT_ORDER,
    BitOrder,
    bit_offset,
    byte_index,
    bytes_to_str,
    num_bytes,
)


class BitVector:
    """Fixed-length bit vector using byte storage."""

    def __init__(self, length: int, data: "bytes | None" = None, order: BitOrder = DEFAULT_ORDER) -> None:
        """
        Initialize a bit vector.

        Args:
            length: Number of bits (must be >= 0)
            data: Optional initial bytes; copied, never aliased. Must hold
                at least ceil(length / 8) bytes, extra bytes are ignored.
            order: Bit order used inside each byte

        Raises:
            ValueError: If length is negative or data is too short
            TypeError: If order is not a BitOrder
        """
        if length < 0:
            raise ValueError("length must be non-negative")
        if not isinstance(order, BitOrder):
            raise TypeError(f"order must be a BitOrder, got {type(order).__name__}")

        self.length = length
        self.order = order
        self.num_bytes = num_bytes(length)

        if data is None:
            self._data = bytearray(self.num_bytes)
        else:
            if len(data) < self.num_bytes:
                raise ValueError(
                    f"{len(data)} bytes cannot hold {length} bits "
                    f"({self.num_bytes} bytes needed)"
                )
            self._data = bytearray(data[: self.num_bytes])

    def __len__(self) -> int:
        return self.length

    def __iter__(self):
        for i in range(self.length):
            yield self.get_bit(i)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"BitVector({self.length}, '{self.to_str()}', order={self.order.name})"

    def __str__(self) -> str:
        return self.to_str(" ")

    def get_bit(self, index: int) -> int:
        """
        Get bit value at position.

        Args:
            index: Bit position (0 to length-1)

        Returns:
            Bit value (0 or 1)

        Raises:
            IndexError: If index is out of range
        """
        if index < 0 or index >= self.length:
            raise IndexError(f"Bit position {index} out of range [0, {self.length})")

        return self.order.get_bit(self._data[byte_index(index)], bit_offset(index))

    def set_bit(self, index: int, value: int) -> None:
        """
        Set bit value at position.

        Writes outside [0, length) are ignored.

        Args:
            index: Bit position (0 to length-1)
            value: Bit value (0 or non-zero for 1)
        """
        if index < 0 or index >= self.length:
            return

        i = byte_index(index)
        self._data[i] = self.order.set_bit(self._data[i], bit_offset(index), value)

    def zero(self) -> None:
        """Set all bits to zero."""
        for i in range(self.num_bytes):
            self._data[i] = 0

    def to_str(self, delimiter: str = "") -> str:
        """
        Render the vector as '0'/'1' characters.

        Bits are grouped per storage byte. The trailing padding of a
        non-byte-aligned vector is not rendered.

        Args:
            delimiter: Separator between byte groups ("" or "\\0" for none)

        Returns:
            String of length bits plus separators
        """
        if delimiter == "\0":
            delimiter = ""

        text = bytes_to_str(self._data, delimiter, self.order)

        delim_space = 0
        if delimiter and self.num_bytes > 0:
            delim_space = (self.num_bytes - 1) * len(delimiter)

        # Cut off the padding of the last byte
        if self.length < self.num_bytes * BITS_PER_BYTE:
            text = text[: self.length + delim_space]
        return text

    def to_bytes(self) -> bytes:
        """
        Convert bit vector to bytes.

        Padding bits of the last byte are returned as zero.

        Returns:
            Copy of the backing store
        """
        result = BitVector(self.length, order=self.order)
        result.copy_from(self)
        return bytes(result._data)

    def right_shift(self, shift: int) -> None:
        """
        Shift bits towards higher indices, in place.

        Bit i moves to i + shift; the first shift positions become 0 and
        bits pushed past the end are lost.

        Indices congruent modulo shift never exchange values, so each
        residue class is walked once, moving every element up one slot.

        Args:
            shift: Number of bit positions (>= 0)

        Raises:
            ValueError: If shift is negative
        """
        if shift < 0:
            raise ValueError("shift must be non-negative")

        for start in range(min(shift, self.length)):
            previous = 0
            for i in range(start, self.length, shift):
                current = self.get_bit(i)
                self.set_bit(i, previous)
                previous = current

    def left_shift(self, shift: int) -> None:
        """
        Shift bits towards lower indices, in place.

        Bit i moves to i - shift; bits pushed below index 0 are lost and
        the last shift positions become 0.

        Args:
            shift: Number of bit positions (>= 0)

        Raises:
            ValueError: If shift is negative
        """
        if shift < 0:
            raise ValueError("shift must be non-negative")

        for start in range(self.length - 1, self.length - 1 - min(shift, self.length), -1):
            previous = 0
            for i in range(start, -1, -shift):
                current = self.get_bit(i)
                self.set_bit(i, previous)
                previous = current

    def cat(self, other: "BitVector") -> "BitVector":
        """
        Concatenate two bit vectors.

        Args:
            other: Vector appended after this one

        Returns:
            New BitVector of length self.length + other.length, using
            this vector's bit order
        """
        result = BitVector(self.length + other.length, order=self.order)
        result.copy_from(self, 0)
        result.copy_from(other, self.length)
        return result

    def copy(self) -> "BitVector":
        """
        Create a copy of this bit vector.

        Returns:
            New BitVector with same contents
        """
        return BitVector(self.length, self._data, self.order)

    def copy_from(self, src: "BitVector", offset: int = 0) -> None:
        """
        Copy another vector into this one, starting at a bit offset.

        copy_from(src, 3) overwrites self[3] with src[0], self[4] with
        src[1], and so on. Whatever does not fit before the end of this
        vector is dropped; an offset at or past the end copies nothing.

        Args:
            src: Source bit vector
            offset: First destination position

        Raises:
            ValueError: If offset is negative
        """
        if offset < 0:
            raise ValueError("offset must be non-negative")
        if offset >= self.length:
            return

        for i in range(min(src.length, self.length - offset)):
            self.set_bit(offset + i, src.get_bit(i))

    def reverse(self) -> None:
        """Reverse the bit order of the vector, in place."""
        for i in range(self.length // 2):
            opposite = self.length - i - 1
            tmp = self.get_bit(i)
            self.set_bit(i, self.get_bit(opposite))
            self.set_bit(opposite, tmp)

    def equals(self, other: "BitVector") -> bool:
        """
        Check equality with another bit vector.

        Vectors are equal when they have the same length and the same
        logical bits; padding and bit order are not compared.

        Args:
            other: Other bit vector

        Returns:
            True if equal, False otherwise
        """
        if self.length != other.length:
            return False

        for i in range(self.length):
            if self.get_bit(i) != other.get_bit(i):
                return False

        return True
