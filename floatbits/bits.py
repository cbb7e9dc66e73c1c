"""
Single-byte bit primitives and the bit-ordering policy.

A byte holds eight logical bit positions, numbered 0 to 7. Which physical
bit a logical index refers to depends on the bit order:

- MSB_FIRST: index 0 = 0x80 (most significant bit), index 7 = 0x01
- LSB_FIRST: index 0 = 0x01 (least significant bit), index 7 = 0x80

Only BitOrder.mask() knows about the ordering; everything else is written
in terms of masks and stays order-agnostic.
"""

BITS_PER_BYTE = 8
MAX_BYTE_VALUE = 0xFF


def bit_from_raw(byte: int) -> int:
    """Collapse a raw value to a bit: zero stays 0, anything else is 1."""
    if byte == 0:
        return 0
    return 1


def bit_as_char(byte: int) -> str:
    """Return '0' or '1' for the bit held by a raw value."""
    if bit_from_raw(byte) == 0:
        return "0"
    return "1"


def num_bytes(length: int) -> int:
    """Number of bytes needed to store a vector of the given bit length."""
    return (length + BITS_PER_BYTE - 1) // BITS_PER_BYTE


def byte_index(index: int) -> int:
    """Index of the byte holding the bit at the given vector index."""
    return index // BITS_PER_BYTE


def bit_offset(index: int) -> int:
    """Position of a vector bit inside its byte (0 to 7)."""
    return index % BITS_PER_BYTE


class BitOrder:
    """Mapping from logical bit index to physical bit inside a byte."""

    __slots__ = ("_msb_first",)

    def __init__(self, msb_first: bool) -> None:
        """
        Create a bit-ordering policy.

        Args:
            msb_first: True if index 0 is the most significant bit
        """
        object.__setattr__(self, "_msb_first", bool(msb_first))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("BitOrder is immutable")

    @property
    def msb_first(self) -> bool:
        """True if logical index 0 is the most significant bit."""
        return self._msb_first

    @property
    def name(self) -> str:
        return "msb-first" if self._msb_first else "lsb-first"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitOrder):
            return NotImplemented
        return self._msb_first == other._msb_first

    def __hash__(self) -> int:
        return hash(self._msb_first)

    def __repr__(self) -> str:
        return f"BitOrder(msb_first={self._msb_first})"

    def mask(self, index: int) -> int:
        """
        Return a byte with only the bit at logical index set.

        For index 3:
            index  0 1 2 3 4 5 6 7
            bits   0 0 0 1 0 0 0 0

        which is 0x10 when MSB-first and 0x08 when LSB-first.

        Args:
            index: Logical bit index (0 to 7)

        Returns:
            Single-bit mask

        Raises:
            IndexError: If index is outside 0 to 7
        """
        if index < 0 or index >= BITS_PER_BYTE:
            raise IndexError(f"Bit index {index} out of range [0, {BITS_PER_BYTE})")

        if self._msb_first:
            return 1 << (BITS_PER_BYTE - index - 1)
        return 1 << index

    def inverted_mask(self, index: int) -> int:
        """
        Return a byte with every bit set except the one at logical index.

        Raises:
            IndexError: If index is outside 0 to 7
        """
        return MAX_BYTE_VALUE ^ self.mask(index)

    def get_bit(self, byte: int, index: int) -> int:
        """
        Get the bit at a logical index of a byte.

        Args:
            byte: Byte value (0 to 255)
            index: Logical bit index (0 to 7)

        Returns:
            Bit value (0 or 1)

        Raises:
            IndexError: If index is outside 0 to 7
        """
        return bit_from_raw(byte & self.mask(index))

    def set_bit(self, byte: int, index: int, value: int) -> int:
        """
        Set the bit at a logical index of a byte.

        An out-of-range index leaves the byte unchanged.

        Args:
            byte: Byte value (0 to 255)
            index: Logical bit index (0 to 7)
            value: Bit value (0 or non-zero for 1)

        Returns:
            The updated byte
        """
        if index < 0 or index >= BITS_PER_BYTE:
            return byte

        byte &= self.inverted_mask(index)
        if bit_from_raw(value) == 1:
            byte |= self.mask(index)
        return byte


MSB_FIRST = BitOrder(msb_first=True)
LSB_FIRST = BitOrder(msb_first=False)

DEFAULT_ORDER = MSB_FIRST


def mask(index: int, order: BitOrder = DEFAULT_ORDER) -> int:
    """Single-bit mask for index under the given order."""
    return order.mask(index)


def inverted_mask(index: int, order: BitOrder = DEFAULT_ORDER) -> int:
    """Complement of mask(index) under the given order."""
    return order.inverted_mask(index)


def get_bit(byte: int, index: int, order: BitOrder = DEFAULT_ORDER) -> int:
    """Bit at a logical index of a byte under the given order."""
    return order.get_bit(byte, index)


def set_bit(byte: int, index: int, value: int, order: BitOrder = DEFAULT_ORDER) -> int:
    """Return byte with the bit at a logical index set to value."""
    return order.set_bit(byte, index, value)


def byte_to_str(byte: int, order: BitOrder = DEFAULT_ORDER) -> str:
    """Render a byte as 8 characters of '0'/'1' in logical index order."""
    return "".join(bit_as_char(order.get_bit(byte, i)) for i in range(BITS_PER_BYTE))


def bytes_to_str(data: bytes, delimiter: str = "", order: BitOrder = DEFAULT_ORDER) -> str:
    """
    Render bytes as '0'/'1' characters with a delimiter between bytes.

    Args:
        data: Bytes to render
        delimiter: Separator between byte groups ("" or "\\0" for none)
        order: Bit order used to read each byte

    Returns:
        String of 8 characters per byte plus separators
    """
    if delimiter == "\0":
        delimiter = ""
    return delimiter.join(byte_to_str(byte, order) for byte in data)
