"""
This module defines the Scalar class, an integer modulo the group order R.

Every secret quantity in the scheme (polynomial coefficients, secret key
shares, identities, Lagrange weights) is a Scalar. Arithmetic on Scalars is
always reduced modulo R, never modulo the coordinate field prime.
"""

from __future__ import annotations

from .constants import R, SCALAR_SIZE
from .encoding import bytes_to_hex, expect_length, hex_to_bytes
from .errors import FormatError, InvalidInput


class Scalar:
    """Immutable integer in [0, R)."""

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidInput("Scalar value must be an integer.")
        object.__setattr__(self, "_value", value % R)

    def __setattr__(self, name, value):
        raise AttributeError("Scalar is immutable.")

    @property
    def value(self) -> int:
        return self._value

    @classmethod
    def from_bytes(cls, data: bytes) -> Scalar:
        """
        Interpret big-endian bytes of any length as an integer and reduce it
        modulo R. Used to turn raw random bytes into a scalar.
        """
        return cls(int.from_bytes(data, "big"))

    @classmethod
    def deserialize(cls, data: bytes) -> Scalar:
        """
        Decode a canonical scalar encoding.

        Raises:
        FormatError: If data is not SCALAR_SIZE bytes or encodes a value >= R.
        """
        expect_length(data, SCALAR_SIZE, "Scalar")
        value = int.from_bytes(data, "big")
        if value >= R:
            raise FormatError("Scalar encoding is not reduced modulo R.")
        return cls(value)

    def serialize(self) -> bytes:
        return self._value.to_bytes(SCALAR_SIZE, "big")

    @classmethod
    def deserialize_hex_str(cls, s: str) -> Scalar:
        return cls.deserialize(hex_to_bytes(s))

    def serialize_to_hex_str(self) -> str:
        return bytes_to_hex(self.serialize())

    def __add__(self, other: Scalar) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar(self._value + other._value)

    def __sub__(self, other: Scalar) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar(self._value - other._value)

    def __mul__(self, other: Scalar) -> Scalar:
        if not isinstance(other, Scalar):
            return NotImplemented
        return Scalar(self._value * other._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Scalar):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Scalar, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value})"
