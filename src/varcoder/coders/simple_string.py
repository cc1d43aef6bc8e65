"""Coder for text using two bytes per UTF-16 code unit.

Each code unit is written big-endian with no length prefix; the buffer holds
exactly one value. ASCII-heavy text encodes to half zero bytes, which a low
compression level removes cheaply.
"""

from __future__ import annotations

from ..exceptions import DecodeError, EncodeError
from .base import Coder, Decoder, Encoder


def encode_utf16(value: str) -> bytes:
    """Encode text as big-endian UTF-16 code units.

    Args:
        value: Text to encode

    Returns:
        ``2 * code_units`` bytes

    Example:
        >>> encode_utf16("aあ").hex()
        '00613042'
    """
    return value.encode("utf-16-be", "surrogatepass")


def decode_utf16(data: bytes) -> str:
    """Decode big-endian UTF-16 code units.

    Args:
        data: Buffer of even length

    Returns:
        Decoded text

    Raises:
        DecodeError: If data has odd length
    """
    if len(data) % 2:
        raise DecodeError(f"UTF-16 buffer length must be even, got {len(data)} bytes")
    return bytes(data).decode("utf-16-be", "surrogatepass")


class SimpleStringEncoder(Encoder[str]):
    def encode(self, value: str) -> bytes:
        if not isinstance(value, str):
            raise EncodeError(f"expected str, got {type(value).__name__}")
        return encode_utf16(value)


class SimpleStringDecoder(Decoder[str]):
    def decode(self, data: bytes) -> str:
        return decode_utf16(data)


class SimpleStringCoder(Coder[str]):
    """Coder for ``str`` values using the fixed-width UTF-16 representation.

    Properties (with ``from_properties``):
        reservoir.SimpleStringCoder.compress.enabled
        reservoir.SimpleStringCoder.compress.level
    """

    def _create_base_encoder(self) -> Encoder[str]:
        return SimpleStringEncoder()

    def _create_base_decoder(self) -> Decoder[str]:
        return SimpleStringDecoder()
