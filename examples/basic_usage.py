#!/usr/bin/env python3
"""Basic usage example for varcoder.

This example demonstrates:
1. Encoding and decoding VarInts
2. Writing and reading a framed record
3. Coders with and without compression
4. Loading coder configuration from properties
"""

from __future__ import annotations

import io

from varcoder import (
    ByteArrayCoder,
    CoderConfig,
    CoderInputStream,
    CoderOutputStream,
    SerializableCoder,
    SimpleStringCoder,
    decode_varint,
    encode_varint,
    encoded_length,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("varcoder Basic Usage Example")
    print("=" * 60)
    print()

    # VarInts
    print("1. VarInt encoding...")
    for value in (0, 0x7F, 0x80, 0x3FFF, 0x4000, 0xFFFFFFFF):
        data = encode_varint(value)
        decoded, consumed = decode_varint(data)
        print(
            f"   {value:#012x} -> {data.hex():<10} "
            f"({encoded_length(value)} bytes, decoded {decoded:#x}, consumed {consumed})"
        )
    print()

    # Framed record
    print("2. Framed record...")
    sink = io.BytesIO()
    out = CoderOutputStream(sink)
    out.write_int(42)
    out.write_ascii("status")
    out.write_string("深度 25m")
    record = sink.getvalue()
    print(f"   Encoded: {record.hex()} ({len(record)} bytes)")

    stream = CoderInputStream(io.BytesIO(record))
    print(f"   Decoded: {stream.read_int()}, {stream.read_ascii()!r}, {stream.read_string()!r}")
    print()

    # Coders
    print("3. Coders...")
    payload = bytes((i + ord(" ")) % 36 for i in range(512))
    plain = ByteArrayCoder()
    compressed = ByteArrayCoder(CoderConfig(compress_enabled=True, compress_level=9))
    plain_size = len(plain.create_encoder().encode(payload))
    compressed_data = compressed.create_encoder().encode(payload)
    print(f"   ByteArrayCoder plain:      {plain_size} bytes")
    print(f"   ByteArrayCoder compressed: {len(compressed_data)} bytes")
    assert compressed.create_decoder().decode(compressed_data) == payload

    text_coder = SimpleStringCoder(CoderConfig(compress_enabled=True))
    text = "ping " * 40
    text_data = text_coder.create_encoder().encode(text)
    print(f"   SimpleStringCoder: {len(text)} chars -> {len(text_data)} bytes")
    print()

    # Properties
    print("4. Configuration from properties...")
    props = {
        "reservoir.SerializableCoder.compress.enabled": "true",
        "reservoir.SerializableCoder.compress.level": "1",
    }
    coder: SerializableCoder[dict[str, object]] = SerializableCoder.from_properties(props)
    value = {"vehicle": 7, "track": [(0.0, 1.5), (2.0, 3.5)]}
    data = coder.create_encoder().encode(value)
    print(f"   {coder.config!r}")
    print(f"   Encoded {len(data)} bytes, decoded {coder.create_decoder().decode(data)}")
    print()

    print("Note: decoders must be built with the same configuration as encoders.")
    print("The encoded bytes do not record whether compression was applied.")


if __name__ == "__main__":
    main()
