"""
This module defines the Signature class: a point of G1 that is either a
partial signature produced by one secret key share, a full signature
recovered from enough partial signatures, or an ordinary BLS signature.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from .constants import G1_SIZE
from .curve import CURVE, CurvePrimitives, Point
from .encoding import bytes_to_hex, hex_to_bytes
from .errors import InvalidInput
from .identity import ID
from .sharing import interpolate_in_exponent

if TYPE_CHECKING:
    from .keys import PublicKey

logger = logging.getLogger(__name__)


def check_recovery_set(values: Sequence, ids: Sequence[ID]) -> None:
    """
    Validate the shape of a recovery set before any interpolation happens.

    Raises:
    InvalidInput: If the set is empty or values and ids differ in length.
    """
    if not values:
        raise InvalidInput("Recovery needs at least one share.")
    if len(values) != len(ids):
        raise InvalidInput(
            f"Got {len(values)} shares but {len(ids)} identities."
        )
    if not all(isinstance(id_, ID) for id_ in ids):
        raise InvalidInput("Identities must be ID instances.")


class Signature:
    """Class representing a BLS signature in G1."""

    curve: CurvePrimitives = CURVE
    SIZE = G1_SIZE

    def __init__(self, v: Point):
        self.v = v

    @classmethod
    def recover(cls, signatures: Sequence[Signature], ids: Sequence[ID]) -> Signature:
        """
        Recover the signature of the master secret from partial signatures
        by Lagrange interpolation in the exponent.

        Any set of at least threshold partial signatures, made on the same
        message at distinct identities, yields the same result. A set of one
        returns that signature unchanged.

        Parameters:
        signatures (Sequence[Signature]): Partial signatures.
        ids (Sequence[ID]): The identity that produced each partial signature.

        Raises:
        InvalidInput: If the set is empty or the lengths differ.
        DuplicateIdentity: If an identity appears twice.
        """
        check_recovery_set(signatures, ids)
        logger.debug("Recovering signature from %d partial signatures", len(ids))
        return cls(
            interpolate_in_exponent(
                [(id_.get_index(), sig.v) for id_, sig in zip(ids, signatures)],
                cls.curve,
            )
        )

    @classmethod
    def aggregate(cls, signatures: Iterable[Signature]) -> Signature:
        """
        Sum independent signatures on the same message (multi-signature).
        This is not threshold recovery.
        """
        result = cls(cls.curve.g1_zero())
        for signature in signatures:
            result = result + signature
        return result

    def verify(self, public_key: PublicKey, message: bytes) -> bool:
        """
        Check e(signature, g2) == e(H(message), public_key).

        Returns False for a mismatched signature and for a public key at
        infinity; never raises for a well-formed but wrong signature.

        Raises:
        InvalidInput: If message is not bytes.
        """
        if not isinstance(message, bytes):
            raise InvalidInput("Message must be bytes.")
        curve = self.curve
        if curve.is_zero(public_key.v):
            return False
        return curve.pairing_check(
            self.v,
            curve.g2_generator(),
            curve.hash_to_g1(message),
            public_key.v,
        )

    def __add__(self, other: Signature) -> Signature:
        if not isinstance(other, Signature):
            return NotImplemented
        return self.__class__(self.curve.add(self.v, other.v))

    @classmethod
    def deserialize(cls, data: bytes) -> Signature:
        """
        Raises:
        FormatError: If data is not G1_SIZE bytes.
        DecodeFailure: If data does not encode a point of G1.
        """
        return cls(cls.curve.decode_g1(data))

    def serialize(self) -> bytes:
        return self.curve.encode_g1(self.v)

    @classmethod
    def deserialize_hex_str(cls, s: str) -> Signature:
        return cls.deserialize(hex_to_bytes(s))

    def serialize_to_hex_str(self) -> str:
        return bytes_to_hex(self.serialize())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self.curve.eq(self.v, other.v)

    def __hash__(self) -> int:
        return hash(self.serialize())

    def __repr__(self) -> str:
        return f"Signature({self.serialize_to_hex_str()})"
