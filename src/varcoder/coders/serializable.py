"""Coder for arbitrary objects through a pluggable marshaller.

The marshaller turns a value into bytes and back. Its failures (for example
``pickle.UnpicklingError`` or pydantic's ``ValidationError``) reach the caller
unchanged.

Warning:
    :class:`PickleMarshaller` executes code embedded in the payload while
    loading it. Only decode data produced by a trusted encoder.
"""

from __future__ import annotations

import pickle
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel

from .base import Coder, Decoder, Encoder
from .config import CoderConfig

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@runtime_checkable
class Marshaller(Protocol[T]):
    """Capability to convert a value to bytes and back."""

    def serialize(self, value: T) -> bytes: ...

    def deserialize(self, data: bytes) -> T: ...


class PickleMarshaller(Generic[T]):
    """Marshaller backed by :mod:`pickle`.

    Args:
        protocol: Pickle protocol version (default: ``pickle.DEFAULT_PROTOCOL``)
    """

    def __init__(self, protocol: int = pickle.DEFAULT_PROTOCOL) -> None:
        self._protocol = protocol

    def serialize(self, value: T) -> bytes:
        return pickle.dumps(value, protocol=self._protocol)

    def deserialize(self, data: bytes) -> T:
        value: T = pickle.loads(data)
        return value


class ModelMarshaller(Generic[M]):
    """Marshaller for pydantic models, using their JSON form.

    Example:
        >>> class Point(BaseModel):
        ...     x: int
        ...     y: int
        >>> marshaller = ModelMarshaller(Point)
        >>> marshaller.serialize(Point(x=1, y=2))
        b'{"x":1,"y":2}'
    """

    def __init__(self, model_type: type[M]) -> None:
        self._model_type = model_type

    def serialize(self, value: M) -> bytes:
        return value.model_dump_json().encode("utf-8")

    def deserialize(self, data: bytes) -> M:
        return self._model_type.model_validate_json(data)


class SerializableEncoder(Encoder[T]):
    def __init__(self, marshaller: Marshaller[T]) -> None:
        self._marshaller = marshaller

    def encode(self, value: T) -> bytes:
        return self._marshaller.serialize(value)


class SerializableDecoder(Decoder[T]):
    def __init__(self, marshaller: Marshaller[T]) -> None:
        self._marshaller = marshaller

    def decode(self, data: bytes) -> T:
        return self._marshaller.deserialize(bytes(data))


class SerializableCoder(Coder[T]):
    """Coder for arbitrary values.

    Encoding serializes then compresses (when enabled); decoding decompresses
    then deserializes.

    Properties (with ``from_properties``):
        reservoir.SerializableCoder.compress.enabled
        reservoir.SerializableCoder.compress.level

    Examples:
        ```python
        from varcoder import CoderConfig, SerializableCoder

        coder = SerializableCoder(CoderConfig(compress_enabled=True, compress_level=1))
        data = coder.create_encoder().encode({"depth": [1, 2, 3]})
        assert coder.create_decoder().decode(data) == {"depth": [1, 2, 3]}
        ```
    """

    def __init__(
        self,
        config: CoderConfig | None = None,
        marshaller: Marshaller[Any] | None = None,
    ) -> None:
        """Initialize the coder.

        Args:
            config: Compression settings
            marshaller: Value <-> bytes converter (default: PickleMarshaller)
        """
        super().__init__(config)
        self._marshaller: Marshaller[Any] = (
            marshaller if marshaller is not None else PickleMarshaller()
        )

    @property
    def marshaller(self) -> Marshaller[Any]:
        return self._marshaller

    def _create_base_encoder(self) -> Encoder[T]:
        return SerializableEncoder(self._marshaller)

    def _create_base_decoder(self) -> Decoder[T]:
        return SerializableDecoder(self._marshaller)
