"""
Unsigned varint reader.

Each byte carries 7 data bits, least significant group first. The high
bit is set on every byte except the last one of a value.

Example:
    300 -> 0xAC 0x02
"""

from hearthforge.models.failure import TruncatedInputError, VarintOverflowError

_DATA_MASK = 0x7F
_CONTINUATION_BIT = 0x80


class ByteCursor:
    """
    Read position over an immutable byte buffer.

    Usage:
        cursor = ByteCursor(data)
        value = read_varint(cursor)
    """

    __slots__ = ("_data", "_offset")

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = bytes(data)
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return max(len(self._data) - self._offset, 0)

    @property
    def at_end(self) -> bool:
        return self._offset >= len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def seek(self, offset: int) -> None:
        """Move to an absolute offset. Seeking past the end is allowed; reads then fail."""
        if offset < 0:
            raise ValueError(f"Offset must be non-negative, got {offset}")
        self._offset = offset

    def read_byte(self) -> int:
        """
        Read one byte and advance.

        Raises:
            TruncatedInputError: If the cursor is at or past the end
        """
        if self.at_end:
            raise TruncatedInputError(self._offset, len(self._data))
        value = self._data[self._offset]
        self._offset += 1
        return value


def read_varint(cursor: ByteCursor, bits: int = 64) -> int:
    """
    Read one unsigned varint from the cursor.

    Args:
        cursor: Cursor positioned at the first byte of the value
        bits: Width of the field the value must fit (8 for counts)

    Returns:
        The decoded value

    Raises:
        TruncatedInputError: If the buffer ends before the final byte
        VarintOverflowError: If the value needs more than `bits` bits
    """
    start = cursor.offset
    limit = 1 << bits
    value = 0
    shift = 0

    while True:
        byte = cursor.read_byte()
        value |= (byte & _DATA_MASK) << shift
        if value >= limit:
            raise VarintOverflowError(start, bits)
        if not byte & _CONTINUATION_BIT:
            return value
        shift += 7
        # A continuation past the width can only add zero bits or overflow
        if shift >= bits + 7:
            raise VarintOverflowError(start, bits)


def encode_varint(value: int) -> bytes:
    """
    Encode a non-negative integer as a varint.

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError(f"Varint value must be non-negative, got {value}")

    out = bytearray()
    while True:
        chunk = value & _DATA_MASK
        value >>= 7
        if value:
            out.append(chunk | _CONTINUATION_BIT)
        else:
            out.append(chunk)
            return bytes(out)
