"""Coders: typed values to bytes, with an optional compression pass.

This module provides the coder contract, its configuration, and concrete
coders for bytes, text and arbitrary objects.
"""

from __future__ import annotations

from .base import Coder, Decoder, Encoder
from .byte_array import ByteArrayCoder
from .compression import (
    CompressingEncoder,
    CompressionSupport,
    DecompressingDecoder,
    compress,
    decompress,
)
from .config import CoderConfig
from .serializable import Marshaller, ModelMarshaller, PickleMarshaller, SerializableCoder
from .simple_string import SimpleStringCoder, decode_utf16, encode_utf16
from .text import StringCoder

__all__ = [
    # Contract
    "Coder",
    "Encoder",
    "Decoder",
    "CoderConfig",
    # Compression
    "CompressionSupport",
    "CompressingEncoder",
    "DecompressingDecoder",
    "compress",
    "decompress",
    # Concrete coders
    "ByteArrayCoder",
    "SimpleStringCoder",
    "StringCoder",
    "SerializableCoder",
    # Marshallers
    "Marshaller",
    "PickleMarshaller",
    "ModelMarshaller",
    # Text helpers
    "encode_utf16",
    "decode_utf16",
]
