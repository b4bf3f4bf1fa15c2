"""Typed value protocol.

A type takes part in a stream by implementing ``encode(encoder)`` and/or a
``decode(decoder)`` classmethod in terms of Encoder/Decoder primitives:

    >>> class Point:
    ...     def __init__(self, x: int, y: int) -> None:
    ...         self.x, self.y = x, y
    ...
    ...     def encode(self, encoder: Encoder) -> None:
    ...         encoder.push_value(self.x, Int32)
    ...         encoder.push_value(self.y, Int32)
    ...
    ...     @classmethod
    ...     def decode(cls, decoder: Decoder) -> Point:
    ...         return cls(decoder.pop_value(Int32), decoder.pop_value(Int32))

Values that cannot carry their own layout (plain ints, floats, bytes) are
handled by codec objects instead, such as UInt16 or Float64, which take the
value as an argument.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .decoder import Decoder
    from .encoder import Encoder

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class BinaryEncodable(Protocol):
    """Value that writes itself to an Encoder."""

    def encode(self, encoder: Encoder) -> None:
        ...


@runtime_checkable
class BinaryDecodable(Protocol):
    """Type that reads an instance of itself from a Decoder."""

    @classmethod
    def decode(cls, decoder: Decoder) -> Any:
        ...


@runtime_checkable
class EncodeCodec(Protocol[T_contra]):
    """Writes values of another type (e.g. UInt16 writes ints)."""

    def encode(self, encoder: Encoder, value: T_contra) -> None:
        ...


@runtime_checkable
class DecodeCodec(Protocol[T_co]):
    """Reads values of another type, or a BinaryDecodable class itself."""

    def decode(self, decoder: Decoder) -> T_co:
        ...


@runtime_checkable
class Codec(EncodeCodec[T], DecodeCodec[T], Protocol[T]):
    """Codec usable in both directions."""
