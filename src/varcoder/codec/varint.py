"""Variable-length encoding of unsigned 32-bit integers.

Each byte carries 7 data bits in its low-order bits. Groups are written least
significant first and the high bit marks the *last* byte of a value, so a
reader stops as soon as it sees a byte with the high bit set:

    0x00        -> 80
    0x7F        -> FF
    0x80        -> 00 81
    0x3FFF      -> 7F FF
    0xFFFFFFFF  -> 7F 7F 7F 7F 8F

This is the inverse of the usual LEB128 convention, where the high bit marks
continuation. The two are not wire compatible.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..exceptions import DecodeError, EncodeError, TruncationError

MAX_UINT32 = 0xFFFFFFFF
MAX_VARINT_BYTES = 5

TERMINAL_BIT = 0x80
DATA_MASK = 0x7F
DATA_BITS = 7

# Largest value that fits in 1, 2, 3 and 4 bytes
_LENGTH_LIMITS = (0x7F, 0x3FFF, 0x1FFFFF, 0xFFFFFFF)


def encoded_length(value: int) -> int:
    """Return the number of bytes ``encode_varint(value)`` produces.

    Args:
        value: Unsigned 32-bit integer

    Returns:
        Encoded length in bytes (1-5)

    Raises:
        EncodeError: If value is outside 0..0xFFFFFFFF
    """
    _check_range(value)
    for length, limit in enumerate(_LENGTH_LIMITS, start=1):
        if value <= limit:
            return length
    return MAX_VARINT_BYTES


def encode_varint(value: int) -> bytes:
    """Encode an unsigned 32-bit integer as a VarInt.

    Args:
        value: Integer in 0..0xFFFFFFFF

    Returns:
        1 to 5 bytes, least significant group first, high bit set on the last byte

    Raises:
        EncodeError: If value is outside the unsigned 32-bit range

    Example:
        >>> encode_varint(0x80).hex()
        '0081'
    """
    length = encoded_length(value)
    result = bytearray(length)
    for i in range(length):
        result[i] = (value >> (DATA_BITS * i)) & DATA_MASK
    result[-1] |= TERMINAL_BIT
    return bytes(result)


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode one VarInt from ``data`` starting at ``offset``.

    Bytes after the terminal byte are neither consumed nor inspected, so
    ``data`` may hold further values.

    Args:
        data: Buffer containing the VarInt
        offset: Index of the first byte of the VarInt

    Returns:
        Tuple of (decoded value, number of bytes consumed)

    Raises:
        TruncationError: If the buffer ends before a terminal byte
        DecodeError: If the value is wider than 32 bits

    Example:
        >>> decode_varint(b"\\xff\\xff")
        (127, 1)
    """
    if offset < 0:
        raise ValueError(f"offset must be >= 0, got {offset}")

    decoder = VarIntDecoder()
    for byte in memoryview(data)[offset:]:
        if decoder.feed(byte):
            return decoder.value, decoder.consumed
    raise TruncationError(
        f"VarInt truncated: {decoder.consumed} byte(s) read without a terminal byte"
    )


def iter_decode_varint(source: Iterable[int]) -> int:
    """Decode one VarInt from an iterable of byte values.

    Only the bytes of one value are pulled from the underlying iterator, so the
    same iterator can be passed again to read the next value.

    Args:
        source: Iterable yielding ints in 0..255

    Returns:
        Decoded value

    Raises:
        TruncationError: If the iterable is exhausted before a terminal byte
        DecodeError: If the value is wider than 32 bits
    """
    decoder = VarIntDecoder()
    for byte in source:
        if decoder.feed(byte):
            return decoder.value
    raise TruncationError(
        f"VarInt truncated: {decoder.consumed} byte(s) read without a terminal byte"
    )


class VarIntDecoder:
    """Incremental VarInt decoder.

    State is an accumulator and a shift. Every fed byte folds its low 7 bits
    into the accumulator at the current shift; the shift then advances by 7.
    Decoding ends on the first byte with the high bit set.

    Example:
        >>> decoder = VarIntDecoder()
        >>> decoder.feed(0x00)
        False
        >>> decoder.feed(0x81)
        True
        >>> decoder.value
        128
    """

    def __init__(self) -> None:
        """Initialize a decoder waiting for the first byte."""
        self._accumulator = 0
        self._shift = 0
        self._done = False

    def feed(self, byte: int) -> bool:
        """Consume one byte.

        Args:
            byte: Next byte value (0-255)

        Returns:
            True if this byte completed the value

        Raises:
            DecodeError: If the value grows past 32 bits or a sixth byte follows
                five non-terminal bytes
            RuntimeError: If called after the value is complete
        """
        if self._done:
            raise RuntimeError("VarInt already complete; create a new decoder")
        if self.consumed == MAX_VARINT_BYTES:
            raise DecodeError(
                f"VarInt longer than {MAX_VARINT_BYTES} bytes without a terminal byte"
            )

        self._accumulator |= (byte & DATA_MASK) << self._shift
        self._shift += DATA_BITS

        if byte & TERMINAL_BIT:
            if self._accumulator > MAX_UINT32:
                raise DecodeError(
                    f"VarInt value {self._accumulator:#x} exceeds 32 bits"
                )
            self._done = True
            return True
        return False

    @property
    def done(self) -> bool:
        """Whether a terminal byte has been fed."""
        return self._done

    @property
    def consumed(self) -> int:
        """Number of bytes fed so far."""
        return self._shift // DATA_BITS

    @property
    def value(self) -> int:
        """The decoded value.

        Raises:
            TruncationError: If no terminal byte has been fed yet
        """
        if not self._done:
            raise TruncationError(
                f"VarInt incomplete after {self.consumed} byte(s)"
            )
        return self._accumulator


def _check_range(value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise EncodeError(f"VarInt value must be an int, got {type(value).__name__}")
    if value < 0 or value > MAX_UINT32:
        raise EncodeError(f"VarInt value must be 0-{MAX_UINT32:#x}, got {value}")
