"""VarInt codec and framed streams for varcoder.

This module provides the self-terminating VarInt encoding for unsigned 32-bit
integers and stream wrappers that frame integers, text and byte payloads with it.
"""

from __future__ import annotations

from .stream import CoderInputStream, CoderOutputStream
from .varint import (
    MAX_UINT32,
    MAX_VARINT_BYTES,
    VarIntDecoder,
    decode_varint,
    encode_varint,
    encoded_length,
    iter_decode_varint,
)

__all__ = [
    "encode_varint",
    "decode_varint",
    "iter_decode_varint",
    "encoded_length",
    "VarIntDecoder",
    "CoderOutputStream",
    "CoderInputStream",
    "MAX_UINT32",
    "MAX_VARINT_BYTES",
]
