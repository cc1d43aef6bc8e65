"""Unit tests for the compression pass."""

from __future__ import annotations

import zlib

import pytest

from varcoder.coders.base import Decoder, Encoder
from varcoder.coders.compression import (
    CompressingEncoder,
    CompressionSupport,
    DecompressingDecoder,
    compress,
    decompress,
)
from varcoder.coders.config import CoderConfig


class _UpperEncoder(Encoder[str]):
    def encode(self, value: str) -> bytes:
        return value.upper().encode("ascii")


class _AsciiDecoder(Decoder[str]):
    def decode(self, data: bytes) -> str:
        return data.decode("ascii")


class TestCompressFunctions:
    """Test compress/decompress."""

    def test_roundtrip(self, redundant_bytes: bytes) -> None:
        """Test that decompress inverts compress."""
        compressed = compress(redundant_bytes, 6)
        assert len(compressed) < len(redundant_bytes)
        assert decompress(compressed) == redundant_bytes

    def test_zlib_format(self) -> None:
        """Test output is a standard zlib stream."""
        assert zlib.decompress(compress(b"hello hello hello", 1)) == b"hello hello hello"

    def test_empty_passthrough(self) -> None:
        """Test that empty input stays empty in both directions."""
        assert compress(b"", 9) == b""
        assert decompress(b"") == b""

    def test_malformed_input(self) -> None:
        """Test that zlib errors propagate unchanged."""
        with pytest.raises(zlib.error):
            decompress(b"not a zlib stream")

    def test_truncated_input(self, redundant_bytes: bytes) -> None:
        """Test that an incomplete stream is rejected."""
        compressed = compress(redundant_bytes)
        with pytest.raises(zlib.error):
            decompress(compressed[:-6])


class TestDecorators:
    """Test CompressingEncoder and DecompressingDecoder."""

    def test_encoder_compresses_base_output(self) -> None:
        """Test that the base encoding is compressed."""
        encoder = CompressingEncoder(_UpperEncoder(), level=9)
        data = encoder.encode("abc" * 100)
        assert zlib.decompress(data) == b"ABC" * 100

    def test_decoder_decompresses_first(self) -> None:
        """Test that input is decompressed before base decoding."""
        decoder = DecompressingDecoder(_AsciiDecoder())
        assert decoder.decode(zlib.compress(b"xyz")) == "xyz"

    def test_base_accessors(self) -> None:
        """Test access to the wrapped objects."""
        base_encoder = _UpperEncoder()
        base_decoder = _AsciiDecoder()
        assert CompressingEncoder(base_encoder, 1).base is base_encoder
        assert DecompressingDecoder(base_decoder).base is base_decoder


class TestCompressionSupport:
    """Test CompressionSupport."""

    def test_disabled_returns_base(self) -> None:
        """Test that nothing is wrapped when disabled."""
        support = CompressionSupport.from_config(CoderConfig())
        encoder = _UpperEncoder()
        decoder = _AsciiDecoder()
        assert support.wrap_encoder(encoder) is encoder
        assert support.wrap_decoder(decoder) is decoder

    def test_enabled_wraps(self) -> None:
        """Test wrapping when enabled."""
        support = CompressionSupport.from_config(
            CoderConfig(compress_enabled=True, compress_level=3)
        )
        assert support.enabled is True
        assert support.level == 3
        assert isinstance(support.wrap_encoder(_UpperEncoder()), CompressingEncoder)
        assert isinstance(support.wrap_decoder(_AsciiDecoder()), DecompressingDecoder)

    def test_level_changes_output(self, redundant_bytes: bytes) -> None:
        """Test that the configured level reaches the compressor."""

        class _Identity(Encoder[bytes]):
            def encode(self, value: bytes) -> bytes:
                return value

        stored = CompressionSupport(enabled=True, level=0).wrap_encoder(_Identity())
        best = CompressionSupport(enabled=True, level=9).wrap_encoder(_Identity())
        assert len(stored.encode(redundant_bytes)) > len(redundant_bytes)
        assert len(best.encode(redundant_bytes)) < len(redundant_bytes)
