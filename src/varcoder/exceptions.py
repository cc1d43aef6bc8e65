"""Exception hierarchy for varcoder.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from VarcoderError for easy catching of any varcoder-specific error.

Errors raised by collaborators (``zlib.error`` from the compressor,
``pickle.UnpicklingError`` or pydantic ``ValidationError`` from a marshaller)
are not wrapped and reach the caller unchanged.
"""

from __future__ import annotations


class VarcoderError(Exception):
    """Base exception for all varcoder errors."""

    pass


class ConfigError(VarcoderError):
    """Raised when a coder configuration is invalid.

    Examples:
        - Compression level outside the compressor's range
        - Boolean-like property that is not a recognised flag
        - Unknown charset name
    """

    pass


class EncodeError(VarcoderError):
    """Raised when encoding a value fails.

    Examples:
        - Integer outside the unsigned 32-bit range
        - Non-ASCII character handed to the ASCII framing
        - Payload of the wrong type for the coder
    """

    pass


class DecodeError(VarcoderError):
    """Raised when decoding binary data fails.

    Examples:
        - VarInt wider than 32 bits
        - Odd-length buffer for the 2-byte-per-character text path
        - Corrupted data structure
    """

    pass


class TruncationError(DecodeError):
    """Raised when input ends before a value is complete.

    Examples:
        - VarInt without a terminal byte
        - Length prefix announcing more bytes than are available
    """

    pass
