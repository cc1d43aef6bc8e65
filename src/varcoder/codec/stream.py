"""Sequential VarInt-framed writer and reader over binary streams.

Field layouts:

- int:    VarInt(value)
- ascii:  VarInt(len) || one byte per character (0x00-0x7F)
- string: VarInt(2 * units) || UTF-16 code units, big-endian
- bytes:  VarInt(len) || raw bytes

The wrapped stream is owned by the caller. ``close()`` closes it, ``flush()``
forwards to it; neither is required for correct framing.
"""

from __future__ import annotations

from types import TracebackType
from typing import BinaryIO

from ..exceptions import DecodeError, EncodeError, TruncationError
from .varint import VarIntDecoder, encode_varint


class CoderOutputStream:
    """Writes VarInt-framed fields to a binary sink.

    Example:
        >>> import io
        >>> sink = io.BytesIO()
        >>> out = CoderOutputStream(sink)
        >>> out.write_ascii("test")
        >>> sink.getvalue()
        b'\\x84test'
    """

    def __init__(self, sink: BinaryIO) -> None:
        """Initialize a writer.

        Args:
            sink: Binary file-like object with a ``write`` method
        """
        self._sink = sink

    def write_int(self, value: int) -> None:
        """Write an unsigned 32-bit integer as a VarInt.

        Args:
            value: Integer in 0..0xFFFFFFFF

        Raises:
            EncodeError: If value is out of range
        """
        self._sink.write(encode_varint(value))

    def write_ascii(self, text: str) -> None:
        """Write text using one byte per character.

        Args:
            text: Text whose characters are all <= 0x7F

        Raises:
            EncodeError: If text contains a non-ASCII character
        """
        try:
            payload = text.encode("ascii")
        except UnicodeEncodeError as e:
            raise EncodeError(f"write_ascii requires ASCII text: {e}") from e
        self._write_framed(payload)

    def write_string(self, text: str) -> None:
        """Write text using two bytes per UTF-16 code unit, big-endian.

        Args:
            text: Any text; characters outside the BMP become surrogate pairs
        """
        self._write_framed(text.encode("utf-16-be", "surrogatepass"))

    def write_bytes(self, payload: bytes) -> None:
        """Write a length-prefixed byte payload.

        Args:
            payload: Raw bytes
        """
        self._write_framed(bytes(payload))

    def _write_framed(self, payload: bytes) -> None:
        self._sink.write(encode_varint(len(payload)))
        self._sink.write(payload)

    def flush(self) -> None:
        """Flush the wrapped sink."""
        self._sink.flush()

    def close(self) -> None:
        """Close the wrapped sink."""
        self._sink.close()

    def __enter__(self) -> CoderOutputStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


class CoderInputStream:
    """Reads VarInt-framed fields from a binary source.

    Example:
        >>> import io
        >>> stream = CoderInputStream(io.BytesIO(b"\\x00\\x81\\x84test"))
        >>> stream.read_int()
        128
        >>> stream.read_ascii()
        'test'
    """

    def __init__(self, source: BinaryIO) -> None:
        """Initialize a reader.

        Args:
            source: Binary file-like object with a ``read`` method
        """
        self._source = source

    def read_int(self) -> int:
        """Read one VarInt.

        Only the bytes of the VarInt are read from the source.

        Returns:
            Decoded unsigned 32-bit integer

        Raises:
            TruncationError: If the source ends before a terminal byte
            DecodeError: If the value is wider than 32 bits
        """
        decoder = VarIntDecoder()
        while True:
            chunk = self._source.read(1)
            if not chunk:
                raise TruncationError(
                    f"Stream ended after {decoder.consumed} VarInt byte(s)"
                )
            if decoder.feed(chunk[0]):
                return decoder.value

    def read_ascii(self) -> str:
        """Read text written by ``write_ascii``.

        Returns:
            Decoded text

        Raises:
            TruncationError: If the payload is shorter than its prefix
            DecodeError: If the payload holds a byte above 0x7F
        """
        payload = self._read_framed()
        try:
            return payload.decode("ascii")
        except UnicodeDecodeError as e:
            raise DecodeError(f"ASCII payload holds a non-ASCII byte: {e}") from e

    def read_string(self) -> str:
        """Read text written by ``write_string``.

        Returns:
            Decoded text

        Raises:
            TruncationError: If the payload is shorter than its prefix
            DecodeError: If the byte length is odd
        """
        payload = self._read_framed()
        if len(payload) % 2:
            raise DecodeError(
                f"String payload length must be even, got {len(payload)} bytes"
            )
        return payload.decode("utf-16-be", "surrogatepass")

    def read_bytes(self) -> bytes:
        """Read a payload written by ``write_bytes``.

        Returns:
            Raw bytes

        Raises:
            TruncationError: If the payload is shorter than its prefix
        """
        return self._read_framed()

    def _read_framed(self) -> bytes:
        length = self.read_int()
        payload = bytearray()
        # Unbuffered sources may return short reads before EOF
        while len(payload) < length:
            chunk = self._source.read(length - len(payload))
            if not chunk:
                break
            payload += chunk
        if len(payload) != length:
            raise TruncationError(
                f"Payload truncated: prefix says {length} bytes, got {len(payload)}"
            )
        return bytes(payload)

    def close(self) -> None:
        """Close the wrapped source."""
        self._source.close()

    def __enter__(self) -> CoderInputStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
