"""Coder contract.

A coder is built once with a fixed :class:`CoderConfig` and then hands out any
number of :class:`Encoder` / :class:`Decoder` objects. Encoders and decoders are
stateless, so one instance can be shared between threads.

Design Pattern: Abstract Factory + Decorator
- Coder: factory for a matching encoder/decoder pair
- Encoder/Decoder: value <-> bytes transforms
- CompressingEncoder/DecompressingDecoder: optional compression pass around the base transform
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .config import DEFAULT_PREFIX, CoderConfig

if TYPE_CHECKING:
    from .compression import CompressionSupport

logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C", bound="Coder[Any]")


class Encoder(ABC, Generic[T]):
    """Converts a value to bytes."""

    @abstractmethod
    def encode(self, value: T) -> bytes:
        """Encode ``value``.

        Args:
            value: Value to encode

        Returns:
            Encoded bytes

        Raises:
            EncodeError: If value cannot be encoded
        """


class Decoder(ABC, Generic[T]):
    """Converts bytes back to a value."""

    @abstractmethod
    def decode(self, data: bytes) -> T:
        """Decode ``data``.

        Args:
            data: Bytes produced by the matching encoder

        Returns:
            Decoded value

        Raises:
            DecodeError: If data is malformed
        """


class Coder(ABC, Generic[T]):
    """Factory for a matching Encoder/Decoder pair.

    Subclasses provide the base transforms. When ``config.compress_enabled`` is
    set, ``create_encoder`` compresses the base encoding and ``create_decoder``
    decompresses before the base decoding. The encoded bytes carry no
    compression flag: encoder and decoder must be built from the same
    configuration, otherwise the result is undefined.

    Examples:
        ```python
        from varcoder import ByteArrayCoder, CoderConfig

        coder = ByteArrayCoder(CoderConfig(compress_enabled=True))
        encoder = coder.create_encoder()
        decoder = coder.create_decoder()

        data = encoder.encode(b"abc" * 200)
        assert decoder.decode(data) == b"abc" * 200
        ```
    """

    def __init__(self, config: CoderConfig | None = None) -> None:
        """Initialize the coder.

        Args:
            config: Compression settings; defaults to no compression
        """
        # Import here to avoid circular dependency
        from .compression import CompressionSupport

        self._config = config if config is not None else CoderConfig()
        self._compression = CompressionSupport.from_config(self._config)
        logger.debug(
            "%s configured: compress_enabled=%s compress_level=%d",
            type(self).__name__,
            self._config.compress_enabled,
            self._config.compress_level,
        )

    @classmethod
    def from_properties(
        cls: type[C],
        props: Mapping[str, str],
        prefix: str = DEFAULT_PREFIX,
        **kwargs: Any,
    ) -> C:
        """Build a coder from string properties namespaced by the class name.

        Args:
            props: String-to-string mapping
            prefix: Leading key segment (default "reservoir")
            **kwargs: Extra constructor arguments for the subclass

        Returns:
            Configured coder

        Raises:
            ConfigError: If a property value is invalid
        """
        config = CoderConfig.from_properties(props, cls.__name__, prefix)
        return cls(config, **kwargs)

    @property
    def config(self) -> CoderConfig:
        """The configuration fixed at construction."""
        return self._config

    @property
    def compression(self) -> CompressionSupport:
        """Compression pass derived from the configuration."""
        return self._compression

    def create_encoder(self) -> Encoder[T]:
        """Create an encoder, wrapped with compression when enabled."""
        return self._compression.wrap_encoder(self._create_base_encoder())

    def create_decoder(self) -> Decoder[T]:
        """Create a decoder, wrapped with decompression when enabled."""
        return self._compression.wrap_decoder(self._create_base_decoder())

    @abstractmethod
    def _create_base_encoder(self) -> Encoder[T]:
        """Return the encoder for the uncompressed representation."""

    @abstractmethod
    def _create_base_decoder(self) -> Decoder[T]:
        """Return the decoder for the uncompressed representation."""
