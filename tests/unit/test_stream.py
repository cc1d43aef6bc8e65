"""Unit tests for the framed stream writer and reader."""

from __future__ import annotations

import io

import pytest

from varcoder.codec.stream import CoderInputStream, CoderOutputStream
from varcoder.exceptions import DecodeError, EncodeError, TruncationError


def _written(write: str, *args: object) -> bytes:
    sink = io.BytesIO()
    out = CoderOutputStream(sink)
    getattr(out, write)(*args)
    out.flush()
    return sink.getvalue()


class TricklingReader(io.RawIOBase):
    """Raw stream that returns at most a few bytes per read."""

    def __init__(self, data: bytes, chunk: int = 3) -> None:
        self._data = io.BytesIO(data)
        self._chunk = chunk

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray) -> int:  # type: ignore[override]
        data = self._data.read(min(len(buffer), self._chunk))
        buffer[: len(data)] = data
        return len(data)


class TestCoderOutputStream:
    """Test CoderOutputStream."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0x00, b"\x80"),
            (0x7F, b"\xff"),
            (0x80, b"\x00\x81"),
            (0x3FFF, b"\x7f\xff"),
            (0x4000, b"\x00\x00\x81"),
            (0x1FFFFF, b"\x7f\x7f\xff"),
            (0x200000, b"\x00\x00\x00\x81"),
            (0xFFFFFFF, b"\x7f\x7f\x7f\xff"),
            (0x10000000, b"\x00\x00\x00\x00\x81"),
            (0xFFFFFFFF, b"\x7f\x7f\x7f\x7f\x8f"),
        ],
    )
    def test_write_int(self, value: int, expected: bytes) -> None:
        """Test integer framing."""
        assert _written("write_int", value) == expected

    def test_write_ascii(self) -> None:
        """Test ASCII framing."""
        assert _written("write_ascii", "test") == b"\x84test"

    def test_write_ascii_empty(self) -> None:
        """Test empty ASCII text is just a zero length."""
        assert _written("write_ascii", "") == b"\x80"

    def test_write_ascii_rejects_non_ascii(self) -> None:
        """Test that non-ASCII text is rejected."""
        with pytest.raises(EncodeError, match="ASCII"):
            _written("write_ascii", "café")

    def test_write_string(self) -> None:
        """Test two-byte-per-character framing."""
        assert _written("write_string", "あいうえお") == bytes(
            [0x8A, 0x30, 0x42, 0x30, 0x44, 0x30, 0x46, 0x30, 0x48, 0x30, 0x4A]
        )

    def test_write_string_ascii_chars(self) -> None:
        """Test that ASCII characters still take two bytes."""
        assert _written("write_string", "ab") == b"\x84\x00a\x00b"

    def test_write_string_astral(self) -> None:
        """Test that characters outside the BMP use a surrogate pair."""
        # U+1F600 -> D83D DE00
        assert _written("write_string", "\U0001f600") == b"\x84\xd8\x3d\xde\x00"

    def test_write_bytes(self) -> None:
        """Test byte payload framing."""
        assert _written("write_bytes", b"\x01\x02\x03") == b"\x83\x01\x02\x03"

    def test_write_long_payload_prefix(self) -> None:
        """Test that a 200-byte payload gets a two-byte prefix."""
        data = _written("write_bytes", b"x" * 200)
        # 200 = 0b1_1001000 -> groups [0x48, 0x01]
        assert data[:2] == b"\x48\x81"
        assert len(data) == 202

    def test_context_manager_closes_sink(self) -> None:
        """Test that leaving the context closes the sink."""
        sink = io.BytesIO()
        with CoderOutputStream(sink) as out:
            out.write_int(1)
        assert sink.closed


class TestCoderInputStream:
    """Test CoderInputStream."""

    def test_read_int(self) -> None:
        """Test integer reading."""
        stream = CoderInputStream(io.BytesIO(b"\x7f\x7f\x7f\x7f\x8f"))
        assert stream.read_int() == 0xFFFFFFFF

    def test_read_int_leaves_trailing_bytes(self) -> None:
        """Test that only the VarInt bytes are consumed."""
        source = io.BytesIO(b"\xff\xff")
        stream = CoderInputStream(source)
        assert stream.read_int() == 0x7F
        assert source.read() == b"\xff"

    def test_read_int_truncated(self) -> None:
        """Test error when the stream ends inside a VarInt."""
        stream = CoderInputStream(io.BytesIO(b"\x00\x00"))
        with pytest.raises(TruncationError, match="ended after 2"):
            stream.read_int()

    def test_read_int_empty(self) -> None:
        """Test error on an empty stream."""
        with pytest.raises(TruncationError):
            CoderInputStream(io.BytesIO(b"")).read_int()

    def test_read_ascii(self) -> None:
        """Test ASCII reading."""
        assert CoderInputStream(io.BytesIO(b"\x84test")).read_ascii() == "test"

    def test_read_ascii_non_ascii_byte(self) -> None:
        """Test error on a byte above 0x7F."""
        with pytest.raises(DecodeError, match="non-ASCII"):
            CoderInputStream(io.BytesIO(b"\x81\xe9")).read_ascii()

    def test_read_string(self) -> None:
        """Test two-byte-per-character reading."""
        data = bytes([0x8A, 0x30, 0x42, 0x30, 0x44, 0x30, 0x46, 0x30, 0x48, 0x30, 0x4A])
        assert CoderInputStream(io.BytesIO(data)).read_string() == "あいうえお"

    def test_read_string_odd_length(self) -> None:
        """Test error on an odd byte length."""
        with pytest.raises(DecodeError, match="even"):
            CoderInputStream(io.BytesIO(b"\x83\x00a\x00")).read_string()

    def test_read_payload_truncated(self) -> None:
        """Test error when the payload is shorter than its prefix."""
        with pytest.raises(TruncationError, match="prefix says 4 bytes, got 2"):
            CoderInputStream(io.BytesIO(b"\x84te")).read_ascii()

    def test_read_payload_from_short_reads(self) -> None:
        """Test payloads delivered across several short reads."""
        data = _written("write_ascii", "hello world") + _written("write_bytes", b"\x00" * 10)
        stream = CoderInputStream(TricklingReader(data))
        assert stream.read_ascii() == "hello world"
        assert stream.read_bytes() == b"\x00" * 10

    def test_read_payload_truncated_after_short_reads(self) -> None:
        """Test truncation is still reported when short reads end early."""
        stream = CoderInputStream(TricklingReader(b"\x8bhello", chunk=2))
        with pytest.raises(TruncationError, match="prefix says 11 bytes, got 5"):
            stream.read_ascii()

    def test_read_empty_payloads(self) -> None:
        """Test zero-length payloads."""
        stream = CoderInputStream(io.BytesIO(b"\x80\x80\x80"))
        assert stream.read_ascii() == ""
        assert stream.read_string() == ""
        assert stream.read_bytes() == b""

    def test_context_manager_closes_source(self) -> None:
        """Test that leaving the context closes the source."""
        source = io.BytesIO(b"\x80")
        with CoderInputStream(source) as stream:
            assert stream.read_int() == 0
        assert source.closed


class TestRoundTrip:
    """Test writing then reading a sequence of fields."""

    def test_mixed_fields(self, mixed_text: str) -> None:
        """Test a record of several field types."""
        sink = io.BytesIO()
        out = CoderOutputStream(sink)
        out.write_int(42)
        out.write_ascii("header")
        out.write_string(mixed_text)
        out.write_bytes(bytes(range(10)))
        out.write_int(0xFFFFFFFF)

        stream = CoderInputStream(io.BytesIO(sink.getvalue()))
        assert stream.read_int() == 42
        assert stream.read_ascii() == "header"
        assert stream.read_string() == mixed_text
        assert stream.read_bytes() == bytes(range(10))
        assert stream.read_int() == 0xFFFFFFFF

    def test_unicode_strings(self) -> None:
        """Test text from several scripts, including astral characters."""
        texts = ["", "x", "Grüße", "日本語テキスト", "emoji \U0001f30a\U0001f41f", "\u0000\uffff"]

        sink = io.BytesIO()
        out = CoderOutputStream(sink)
        for text in texts:
            out.write_string(text)

        stream = CoderInputStream(io.BytesIO(sink.getvalue()))
        assert [stream.read_string() for _ in texts] == texts
