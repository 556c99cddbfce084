"""
This module defines the ID class, which labels a participant by the point at
which the master polynomial is evaluated for it.

The encoding of an ID is the canonical 32-byte big-endian encoding of its
scalar, so ID <-> bytes <-> hex is a bijection and ID.from_index(i) always
decodes back to the same i.
"""

from __future__ import annotations

from .constants import R
from .encoding import bytes_to_hex, hex_to_bytes
from .errors import InvalidInput
from .scalar import Scalar


class ID:
    """Class representing a participant identity."""

    __slots__ = ("v",)

    def __init__(self, v: Scalar):
        if not isinstance(v, Scalar):
            raise InvalidInput("ID must wrap a Scalar.")
        self.v = v

    @classmethod
    def from_index(cls, index: int) -> ID:
        """
        Build the identity for a small sequential participant number.

        Parameters:
        index (int): A non-negative integer below R.

        Raises:
        InvalidInput: If index is not an integer in [0, R).
        """
        if not isinstance(index, int) or isinstance(index, bool):
            raise InvalidInput("Participant index must be an integer.")
        if not 0 <= index < R:
            raise InvalidInput("Participant index must be in [0, R).")
        return cls(Scalar(index))

    @classmethod
    def deserialize(cls, data: bytes) -> ID:
        return cls(Scalar.deserialize(data))

    def serialize(self) -> bytes:
        return self.v.serialize()

    @classmethod
    def set_hex_string(cls, s: str) -> ID:
        return cls.deserialize(hex_to_bytes(s))

    def get_hex_string(self) -> str:
        return bytes_to_hex(self.serialize())

    def get_index(self) -> int:
        return self.v.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ID):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __hash__(self) -> int:
        return hash(self.serialize())

    def __repr__(self) -> str:
        return f"ID({self.v.value})"
