"""Coder for raw byte sequences.

The base encoding is the identity: bytes go out as they came in, optionally
compressed.
"""

from __future__ import annotations

from ..exceptions import EncodeError
from .base import Coder, Decoder, Encoder


class ByteArrayEncoder(Encoder[bytes]):
    """Passes a byte sequence through unchanged."""

    def encode(self, value: bytes) -> bytes:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise EncodeError(f"expected bytes, got {type(value).__name__}")
        return bytes(value)


class ByteArrayDecoder(Decoder[bytes]):
    """Returns the buffer as an immutable byte string."""

    def decode(self, data: bytes) -> bytes:
        return bytes(data)


class ByteArrayCoder(Coder[bytes]):
    """Coder for ``bytes`` values.

    Properties (with ``from_properties``):
        reservoir.ByteArrayCoder.compress.enabled
        reservoir.ByteArrayCoder.compress.level

    Example:
        >>> coder = ByteArrayCoder()
        >>> coder.create_decoder().decode(coder.create_encoder().encode(b"abc"))
        b'abc'
    """

    def _create_base_encoder(self) -> Encoder[bytes]:
        return ByteArrayEncoder()

    def _create_base_decoder(self) -> Decoder[bytes]:
        return ByteArrayDecoder()
