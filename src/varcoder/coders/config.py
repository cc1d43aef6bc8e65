"""Typed configuration for coders.

A coder reads its configuration once, at construction. The configuration does
not travel with the encoded bytes: a decoder built with a configuration that
differs from the encoder's yields corrupted values or a collaborator error.
Keeping the two in agreement is the caller's responsibility.
"""

from __future__ import annotations

import zlib
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import ConfigError

DEFAULT_PREFIX = "reservoir"

KEY_COMPRESS_ENABLED = "compress.enabled"
KEY_COMPRESS_LEVEL = "compress.level"

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES = frozenset({"false", "0", "no", "off"})


class CoderConfig(BaseModel):
    """Compression settings shared by all coders.

    Attributes:
        compress_enabled: Pass the base encoding through the compressor (default False)
        compress_level: zlib level, -1 for the zlib default, 0 (none) to 9 (best)

    Example:
        >>> config = CoderConfig(compress_enabled=True, compress_level=1)
        >>> config.compress_enabled
        True
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    compress_enabled: bool = False
    compress_level: int = Field(default=zlib.Z_DEFAULT_COMPRESSION, ge=-1, le=9)

    @classmethod
    def from_properties(
        cls,
        props: Mapping[str, str],
        coder_name: str,
        prefix: str = DEFAULT_PREFIX,
    ) -> CoderConfig:
        """Resolve a configuration from string properties.

        Keys are namespaced as ``<prefix>.<coder_name>.compress.enabled`` and
        ``<prefix>.<coder_name>.compress.level``. Missing keys take defaults.

        Args:
            props: String-to-string mapping (e.g. a parsed properties file)
            coder_name: Coder type name, usually the class name
            prefix: Leading key segment

        Returns:
            Resolved configuration

        Raises:
            ConfigError: If a value cannot be parsed or is out of range

        Example:
            >>> props = {"reservoir.ByteArrayCoder.compress.enabled": "true"}
            >>> CoderConfig.from_properties(props, "ByteArrayCoder").compress_enabled
            True
        """
        namespace = property_namespace(coder_name, prefix)
        values: dict[str, object] = {}

        enabled = props.get(f"{namespace}.{KEY_COMPRESS_ENABLED}")
        if enabled is not None:
            values["compress_enabled"] = parse_bool(enabled)

        level = props.get(f"{namespace}.{KEY_COMPRESS_LEVEL}")
        if level is not None:
            try:
                values["compress_level"] = int(level.strip())
            except ValueError as e:
                raise ConfigError(
                    f"{namespace}.{KEY_COMPRESS_LEVEL} must be an integer, got {level!r}"
                ) from e

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration for {namespace}: {e}") from e


def property_namespace(coder_name: str, prefix: str = DEFAULT_PREFIX) -> str:
    """Return the key namespace for a coder type."""
    return f"{prefix}.{coder_name}" if prefix else coder_name


def parse_bool(value: str) -> bool:
    """Parse a boolean-like property value.

    Args:
        value: One of true/false, 1/0, yes/no, on/off (case-insensitive)

    Returns:
        Parsed flag

    Raises:
        ConfigError: If value is not a recognised flag
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"Expected a boolean-like value, got {value!r}")
