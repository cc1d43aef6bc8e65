"""Compression pass for coders.

The compressor is zlib (DEFLATE with the zlib header and Adler-32 trailer).
Compression errors are not wrapped: a malformed payload raises ``zlib.error``.
An empty base encoding is passed through as-is in both directions.
"""

from __future__ import annotations

import logging
import zlib
from dataclasses import dataclass
from typing import TypeVar

from .base import Decoder, Encoder
from .config import CoderConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


def compress(data: bytes, level: int = zlib.Z_DEFAULT_COMPRESSION) -> bytes:
    """Compress ``data`` with zlib at ``level``."""
    if not data:
        return b""
    return zlib.compress(data, level)


def decompress(data: bytes) -> bytes:
    """Decompress zlib ``data``.

    Raises:
        zlib.error: If data is not a complete zlib stream
    """
    if not data:
        return b""
    return zlib.decompress(data)


class CompressingEncoder(Encoder[T]):
    """Encoder that compresses the output of a base encoder."""

    def __init__(self, base: Encoder[T], level: int) -> None:
        self._base = base
        self._level = level

    @property
    def base(self) -> Encoder[T]:
        return self._base

    def encode(self, value: T) -> bytes:
        encoded = self._base.encode(value)
        compressed = compress(encoded, self._level)
        logger.debug("Compressed %d -> %d bytes", len(encoded), len(compressed))
        return compressed


class DecompressingDecoder(Decoder[T]):
    """Decoder that decompresses input before a base decoder."""

    def __init__(self, base: Decoder[T]) -> None:
        self._base = base

    @property
    def base(self) -> Decoder[T]:
        return self._base

    def decode(self, data: bytes) -> T:
        return self._base.decode(decompress(data))


@dataclass(frozen=True)
class CompressionSupport:
    """Applies the configured compression pass to encoders and decoders.

    Attributes:
        enabled: Whether to wrap encoders/decoders
        level: zlib compression level used by wrapped encoders
    """

    enabled: bool = False
    level: int = zlib.Z_DEFAULT_COMPRESSION

    @classmethod
    def from_config(cls, config: CoderConfig) -> CompressionSupport:
        return cls(enabled=config.compress_enabled, level=config.compress_level)

    def wrap_encoder(self, encoder: Encoder[T]) -> Encoder[T]:
        """Return ``encoder`` wrapped with compression if enabled."""
        return CompressingEncoder(encoder, self.level) if self.enabled else encoder

    def wrap_decoder(self, decoder: Decoder[T]) -> Decoder[T]:
        """Return ``decoder`` wrapped with decompression if enabled."""
        return DecompressingDecoder(decoder) if self.enabled else decoder
