"""
This module defines SecretKey and PublicKey.

A SecretKey is a scalar: a master polynomial coefficient, a participant's
secret key share, or an ordinary BLS secret key. A PublicKey is the matching
point of G2, secret * g2. Both are immutable; "+" returns a new value.

Share evaluation exists in both domains and the two must agree:

    SecretKey.evaluate(msk, id).get_public_key() ==
        PublicKey.evaluate(get_master_public_key(msk), id)
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from .constants import G2_SIZE, RANDOM_SCALAR_SIZE, SCALAR_SIZE
from .curve import CURVE, CurvePrimitives, Point
from .encoding import bytes_to_hex, hex_to_bytes
from .errors import InvalidInput
from .identity import ID
from .randomness import RandomSource, SystemRandomSource
from .scalar import Scalar
from .sharing import (
    evaluate_commitments,
    evaluate_polynomial,
    interpolate_in_exponent,
    lagrange_coefficients,
)
from .signature import Signature, check_recovery_set


class SecretKey:
    """Class representing a BLS secret key or secret key share."""

    curve: CurvePrimitives = CURVE
    SIZE = SCALAR_SIZE

    def __init__(self, v: Scalar):
        if not isinstance(v, Scalar):
            raise InvalidInput("SecretKey must wrap a Scalar.")
        self.v = v

    @classmethod
    def generate(cls, random_source: Optional[RandomSource] = None) -> SecretKey:
        """
        Draw a fresh secret key.

        RANDOM_SCALAR_SIZE bytes are read and reduced modulo R.

        Raises:
        RandomSourceFailure: If the random source cannot deliver.
        """
        if random_source is None:
            random_source = SystemRandomSource()
        return cls(Scalar.from_bytes(random_source.read(RANDOM_SCALAR_SIZE)))

    @classmethod
    def evaluate(cls, msk: Sequence[SecretKey], id_: ID) -> SecretKey:
        """
        Compute the secret key share for id_ from the master secret key.

        Parameters:
        msk (Sequence[SecretKey]): Polynomial coefficients a_0, ..., a_(k-1).
        id_ (ID): The participant's identity.

        Returns:
        SecretKey: f(id_) mod R. With a single coefficient this is a_0 for
        every identity.

        Raises:
        InvalidInput: If msk is empty.
        """
        if not msk:
            raise InvalidInput("Master secret key is empty.")
        return cls(
            Scalar(
                evaluate_polynomial(
                    [sk.v.value for sk in msk], id_.get_index(), cls.curve.order
                )
            )
        )

    @classmethod
    def recover(cls, shares: Sequence[SecretKey], ids: Sequence[ID]) -> SecretKey:
        """
        Reconstruct a_0 from at least threshold secret key shares.

        Raises:
        InvalidInput: If the set is empty or the lengths differ.
        DuplicateIdentity: If an identity appears twice.
        """
        check_recovery_set(shares, ids)
        weights = lagrange_coefficients(
            [id_.get_index() for id_ in ids], cls.curve.order
        )
        secret = Scalar(0)
        for weight, share in zip(weights, shares):
            secret = secret + Scalar(weight) * share.v
        return cls(secret)

    @classmethod
    def aggregate(cls, secret_keys: Iterable[SecretKey]) -> SecretKey:
        result = cls(Scalar(0))
        for secret_key in secret_keys:
            result = result + secret_key
        return result

    def get_public_key(self) -> PublicKey:
        return PublicKey(
            self.curve.scalar_mul(self.curve.g2_generator(), self.v.value)
        )

    def sign(self, message: bytes) -> Signature:
        """
        Sign message: H(message) * secret. Deterministic.

        With a share of the master secret the result is a partial signature.
        """
        if not isinstance(message, bytes):
            raise InvalidInput("Message must be bytes.")
        return Signature(
            self.curve.scalar_mul(self.curve.hash_to_g1(message), self.v.value)
        )

    def __add__(self, other: SecretKey) -> SecretKey:
        if not isinstance(other, SecretKey):
            return NotImplemented
        return self.__class__(self.v + other.v)

    @classmethod
    def deserialize(cls, data: bytes) -> SecretKey:
        return cls(Scalar.deserialize(data))

    def serialize(self) -> bytes:
        return self.v.serialize()

    @classmethod
    def deserialize_hex_str(cls, s: str) -> SecretKey:
        return cls.deserialize(hex_to_bytes(s))

    def serialize_to_hex_str(self) -> str:
        return bytes_to_hex(self.serialize())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretKey):
            return NotImplemented
        return self.v == other.v

    def __hash__(self) -> int:
        return hash(self.v)

    def __repr__(self) -> str:
        return "SecretKey(<hidden>)"


class PublicKey:
    """Class representing a BLS public key or public key share in G2."""

    curve: CurvePrimitives = CURVE
    SIZE = G2_SIZE

    def __init__(self, v: Point):
        self.v = v

    @classmethod
    def evaluate(cls, mpk: Sequence[PublicKey], id_: ID) -> PublicKey:
        """
        Compute the public key share for id_ from the master public key.

        Parameters:
        mpk (Sequence[PublicKey]): Commitments a_0 * g2, ..., a_(k-1) * g2.
        id_ (ID): The participant's identity.

        Raises:
        InvalidInput: If mpk is empty.
        """
        if not mpk:
            raise InvalidInput("Master public key is empty.")
        return cls(
            evaluate_commitments([pk.v for pk in mpk], id_.get_index(), cls.curve)
        )

    @classmethod
    def recover(cls, shares: Sequence[PublicKey], ids: Sequence[ID]) -> PublicKey:
        """Reconstruct a_0 * g2 from at least threshold public key shares."""
        check_recovery_set(shares, ids)
        return cls(
            interpolate_in_exponent(
                [(id_.get_index(), pk.v) for id_, pk in zip(ids, shares)], cls.curve
            )
        )

    @classmethod
    def aggregate(cls, public_keys: Iterable[PublicKey]) -> PublicKey:
        """Sum independent public keys (multi-signature key aggregation)."""
        result = cls(cls.curve.g2_zero())
        for public_key in public_keys:
            result = result + public_key
        return result

    def __add__(self, other: PublicKey) -> PublicKey:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.__class__(self.curve.add(self.v, other.v))

    @classmethod
    def deserialize(cls, data: bytes) -> PublicKey:
        """
        Raises:
        FormatError: If data is not G2_SIZE bytes.
        DecodeFailure: If data does not encode a point of G2.
        """
        return cls(cls.curve.decode_g2(data))

    def serialize(self) -> bytes:
        return self.curve.encode_g2(self.v)

    @classmethod
    def deserialize_hex_str(cls, s: str) -> PublicKey:
        return cls.deserialize(hex_to_bytes(s))

    def serialize_to_hex_str(self) -> str:
        return bytes_to_hex(self.serialize())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PublicKey):
            return NotImplemented
        return self.curve.eq(self.v, other.v)

    def __hash__(self) -> int:
        return hash(self.serialize())

    def __repr__(self) -> str:
        return f"PublicKey({self.serialize_to_hex_str()[:18]}...)"


def get_master_public_key(msk: Sequence[SecretKey]) -> Tuple[PublicKey, ...]:
    """Commit to every coefficient of the master secret key."""
    return tuple(sk.get_public_key() for sk in msk)
