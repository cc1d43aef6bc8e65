"""Coder for text in a configurable charset.

Unencodable characters and undecodable bytes are replaced rather than raising,
so a decoder never fails on a payload of the wrong charset; it returns text
with replacement characters instead.
"""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from typing import Any

from ..exceptions import ConfigError, EncodeError
from .base import Coder, Decoder, Encoder
from .config import DEFAULT_PREFIX, CoderConfig, property_namespace

DEFAULT_CHARSET = "utf-8"
KEY_CHARSET = "charset"


class StringEncoder(Encoder[str]):
    def __init__(self, charset: str) -> None:
        self._charset = charset

    def encode(self, value: str) -> bytes:
        if not isinstance(value, str):
            raise EncodeError(f"expected str, got {type(value).__name__}")
        return value.encode(self._charset, "replace")


class StringDecoder(Decoder[str]):
    def __init__(self, charset: str) -> None:
        self._charset = charset

    def decode(self, data: bytes) -> str:
        return bytes(data).decode(self._charset, "replace")


class StringCoder(Coder[str]):
    """Coder for ``str`` values in a named charset (default UTF-8).

    Properties (with ``from_properties``):
        reservoir.StringCoder.charset
        reservoir.StringCoder.compress.enabled
        reservoir.StringCoder.compress.level
    """

    def __init__(self, config: CoderConfig | None = None, charset: str = DEFAULT_CHARSET) -> None:
        """Initialize the coder.

        Args:
            config: Compression settings
            charset: Any codec name known to :mod:`codecs`

        Raises:
            ConfigError: If charset is unknown
        """
        try:
            self._charset = codecs.lookup(charset).name
        except LookupError as e:
            raise ConfigError(f"Unknown charset: {charset!r}") from e
        super().__init__(config)

    @classmethod
    def from_properties(
        cls,
        props: Mapping[str, str],
        prefix: str = DEFAULT_PREFIX,
        **kwargs: Any,
    ) -> StringCoder:
        key = f"{property_namespace(cls.__name__, prefix)}.{KEY_CHARSET}"
        charset = props.get(key)
        if charset is not None:
            kwargs.setdefault("charset", charset.strip())
        return super().from_properties(props, prefix, **kwargs)

    @property
    def charset(self) -> str:
        """Normalised codec name."""
        return self._charset

    def _create_base_encoder(self) -> Encoder[str]:
        return StringEncoder(self._charset)

    def _create_base_decoder(self) -> Decoder[str]:
        return StringDecoder(self._charset)
