"""varcoder: VarInt codec and compressing coders

A Python library for compact, self-terminating encoding of unsigned 32-bit
integers and length-prefixed payloads, plus coders that turn bytes, text and
arbitrary objects into byte buffers with an optional zlib compression pass.

Key Features:
- 1-5 byte VarInt encoding with the terminal marker on the last byte
- Framed stream writer/reader for integers, ASCII, UTF-16 text and bytes
- Coder/Encoder/Decoder contract with a compression decorator
- Pydantic-typed configuration, with a loader for namespaced string properties

Quick Start:
    >>> from varcoder import ByteArrayCoder, CoderConfig, encode_varint
    >>> encode_varint(0x80)
    b'\\x00\\x81'
    >>>
    >>> coder = ByteArrayCoder(CoderConfig(compress_enabled=True))
    >>> data = coder.create_encoder().encode(b"abc" * 100)
    >>> coder.create_decoder().decode(data) == b"abc" * 100
    True

Note:
    Compression settings are not recorded in the encoded bytes. Build the
    decoder from the same configuration as the encoder.
"""

from __future__ import annotations

from .codec import (
    CoderInputStream,
    CoderOutputStream,
    VarIntDecoder,
    decode_varint,
    encode_varint,
    encoded_length,
    iter_decode_varint,
)
from .coders import (
    ByteArrayCoder,
    Coder,
    CoderConfig,
    Decoder,
    Encoder,
    Marshaller,
    ModelMarshaller,
    PickleMarshaller,
    SerializableCoder,
    SimpleStringCoder,
    StringCoder,
)
from .exceptions import (
    ConfigError,
    DecodeError,
    EncodeError,
    TruncationError,
    VarcoderError,
)

__version__ = "0.1.0"

__all__ = [
    # VarInt
    "encode_varint",
    "decode_varint",
    "iter_decode_varint",
    "encoded_length",
    "VarIntDecoder",
    # Streams
    "CoderOutputStream",
    "CoderInputStream",
    # Coders
    "Coder",
    "Encoder",
    "Decoder",
    "CoderConfig",
    "ByteArrayCoder",
    "SimpleStringCoder",
    "StringCoder",
    "SerializableCoder",
    # Marshallers
    "Marshaller",
    "PickleMarshaller",
    "ModelMarshaller",
    # Exceptions
    "VarcoderError",
    "ConfigError",
    "EncodeError",
    "DecodeError",
    "TruncationError",
    # Version
    "__version__",
]
