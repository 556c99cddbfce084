"""
This module defines the curve primitives the threshold scheme is built on.

CurvePrimitives is the narrow interface the sharing and recovery algebra
depends on: group addition, scalar multiplication reduced modulo the group
order, the pairing, hashing to G1, and canonical point encodings. BLS12381
implements it on top of py_ecc's optimized BLS12-381 arithmetic. Points are
opaque values to everything outside this module.
"""

from abc import ABC, abstractmethod
from hashlib import sha256
from typing import Any

from py_ecc.bls.hash_to_curve import hash_to_G1
from py_ecc.optimized_bls12_381 import (
    FQ,
    FQ2,
    G1,
    G2,
    Z1,
    Z2,
    add,
    b,
    b2,
    eq,
    is_inf,
    is_on_curve,
    multiply,
    neg,
    normalize,
    pairing,
)

from .constants import DST, FIELD_SIZE, G1_SIZE, G2_SIZE, P, R
from .encoding import expect_length
from .errors import DecodeFailure

Point = Any


class CurvePrimitives(ABC):
    """Primitive operations of a pairing-friendly curve."""

    order: int

    @abstractmethod
    def add(self, p: Point, q: Point) -> Point:
        """Add two points of the same group."""

    @abstractmethod
    def scalar_mul(self, p: Point, n: int) -> Point:
        """Multiply a point by n, reduced modulo the group order."""

    @abstractmethod
    def eq(self, p: Point, q: Point) -> bool:
        """Compare two points of the same group."""

    @abstractmethod
    def is_zero(self, p: Point) -> bool:
        """Check whether a point is the group identity."""

    @abstractmethod
    def g1_generator(self) -> Point:
        pass

    @abstractmethod
    def g2_generator(self) -> Point:
        pass

    @abstractmethod
    def g1_zero(self) -> Point:
        pass

    @abstractmethod
    def g2_zero(self) -> Point:
        pass

    @abstractmethod
    def hash_to_g1(self, message: bytes) -> Point:
        """Map arbitrary bytes to a point of G1."""

    @abstractmethod
    def pairing_check(self, p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
        """Return e(p1, q1) == e(p2, q2) for p1, p2 in G1 and q1, q2 in G2."""

    @abstractmethod
    def encode_g1(self, p: Point) -> bytes:
        pass

    @abstractmethod
    def decode_g1(self, data: bytes) -> Point:
        pass

    @abstractmethod
    def encode_g2(self, p: Point) -> bytes:
        pass

    @abstractmethod
    def decode_g2(self, data: bytes) -> Point:
        pass


def _fq_bytes(x: int) -> bytes:
    return x.to_bytes(FIELD_SIZE, "big")


def _fq_from_bytes(data: bytes) -> int:
    x = int.from_bytes(data, "big")
    if x >= P:
        raise DecodeFailure("Coordinate is not reduced modulo the field prime.")
    return x


class BLS12381(CurvePrimitives):
    """
    BLS12-381 through py_ecc, in the "minimal signature size" arrangement:
    signatures and message hashes in G1, public keys in G2.

    G1 points are encoded compressed (0x02/0x03 parity prefix + x), G2 points
    uncompressed (0x04 prefix + x.c1, x.c0, y.c1, y.c0). The identity of
    either group encodes as all zero bytes.
    """

    order = R

    def add(self, p: Point, q: Point) -> Point:
        return add(p, q)

    def scalar_mul(self, p: Point, n: int) -> Point:
        # py_ecc's multiply does not reduce the scalar by the group order
        return multiply(p, n % R)

    def eq(self, p: Point, q: Point) -> bool:
        return eq(p, q)

    def is_zero(self, p: Point) -> bool:
        return is_inf(p)

    def g1_generator(self) -> Point:
        return G1

    def g2_generator(self) -> Point:
        return G2

    def g1_zero(self) -> Point:
        return Z1

    def g2_zero(self) -> Point:
        return Z2

    def hash_to_g1(self, message: bytes) -> Point:
        return hash_to_G1(message, DST, sha256)

    def pairing_check(self, p1: Point, q1: Point, p2: Point, q2: Point) -> bool:
        # py_ecc takes the G2 argument first
        return pairing(q1, p1) == pairing(q2, p2)

    def _in_subgroup(self, p: Point) -> bool:
        # [r - 1]P == -P holds iff P has order dividing r
        return eq(multiply(p, R - 1), neg(p))

    def encode_g1(self, p: Point) -> bytes:
        if is_inf(p):
            return bytes(G1_SIZE)
        x, y = normalize(p)
        prefix = b"\x03" if y.n % 2 else b"\x02"
        return prefix + _fq_bytes(x.n)

    def decode_g1(self, data: bytes) -> Point:
        expect_length(data, G1_SIZE, "G1 point")
        if data == bytes(G1_SIZE):
            return Z1
        if data[0] not in (2, 3):
            raise DecodeFailure("Invalid compressed G1 prefix.")

        x = _fq_from_bytes(data[1:])
        y_squared = (pow(x, 3, P) + b.n) % P
        y = pow(y_squared, (P + 1) // 4, P)
        if y * y % P != y_squared:
            raise DecodeFailure("x-coordinate is not on the curve.")
        if y % 2 != data[0] - 2:
            y = P - y

        point = (FQ(x), FQ(y), FQ.one())
        if not self._in_subgroup(point):
            raise DecodeFailure("G1 point is not in the prime-order subgroup.")
        return point

    def encode_g2(self, p: Point) -> bytes:
        if is_inf(p):
            return bytes(G2_SIZE)
        x, y = normalize(p)
        x0, x1 = x.coeffs
        y0, y1 = y.coeffs
        return b"\x04" + b"".join(_fq_bytes(int(c)) for c in (x1, x0, y1, y0))

    def decode_g2(self, data: bytes) -> Point:
        expect_length(data, G2_SIZE, "G2 point")
        if data == bytes(G2_SIZE):
            return Z2
        if data[0] != 4:
            raise DecodeFailure("Invalid uncompressed G2 prefix.")

        x1, x0, y1, y0 = (
            _fq_from_bytes(data[1 + i * FIELD_SIZE : 1 + (i + 1) * FIELD_SIZE])
            for i in range(4)
        )
        point = (FQ2([x0, x1]), FQ2([y0, y1]), FQ2.one())
        if not is_on_curve(point, b2):
            raise DecodeFailure("G2 point is not on the curve.")
        if not self._in_subgroup(point):
            raise DecodeFailure("G2 point is not in the prime-order subgroup.")
        return point


CURVE: CurvePrimitives = BLS12381()
