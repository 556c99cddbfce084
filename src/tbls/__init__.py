"""
Copyright (c) 2021-2024 Jesse Posner

Distributed under the MIT software license, see the accompanying file LICENSE
or http://www.opensource.org/licenses/mit-license.php.

This code is currently a work in progress. It has not been audited and the
underlying pairing arithmetic is not constant time. DO NOT USE IT TO PROTECT
REAL KEYS.

This package provides (t, n)-threshold BLS signatures on BLS12-381 with a
trusted dealer.

Modules:
- curve: The CurvePrimitives interface and its py_ecc BLS12-381 implementation.
- scalar, identity: Integers modulo the group order and participant identities.
- sharing: Polynomial evaluation and Lagrange interpolation, in the scalar
  field and in the exponent.
- keys: SecretKey (scalar) and PublicKey (G2) with share evaluation.
- signature: Signature (G1) with verification and threshold recovery.
- polynomial, dealer: Master polynomial generation and distribution of shares.
- participant, aggregator: Signing with a share and combining partial
  signatures.

A typical 3-of-5 flow:

    dealer = Dealer(threshold=3, participants=5)
    dealer.init_keygen()
    participants = dealer.deal()
    agg = Aggregator(dealer.public_key, b"hello", 3, dealer.master_public_key)
    for p in participants[:3]:
        agg.add_partial_signature(p.id, p.sign(b"hello"))
    signature = agg.signature()
"""

from .aggregator import Aggregator
from .constants import G1_SIZE, G2_SIZE, R, SCALAR_SIZE
from .curve import BLS12381, CURVE, CurvePrimitives
from .dealer import Dealer
from .errors import (
    BLSError,
    DecodeFailure,
    DuplicateIdentity,
    FormatError,
    InvalidInput,
    RandomSourceFailure,
)
from .identity import ID
from .keys import PublicKey, SecretKey, get_master_public_key
from .participant import Participant
from .polynomial import MasterPolynomialGenerator
from .randomness import RandomSource, StreamRandomSource, SystemRandomSource
from .scalar import Scalar
from .signature import Signature
