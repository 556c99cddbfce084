"""
This module defines the Dealer class, the trusted party that creates a
(t, n) sharing of a BLS secret key.

The dealer draws the master polynomial, publishes its commitments (the master
public key, whose constant term is the group public key), evaluates one
secret key share per participant, and should then discard the polynomial.
"""

import logging
from typing import Optional, Tuple

from .errors import InvalidInput
from .identity import ID
from .keys import PublicKey, SecretKey, get_master_public_key
from .participant import Participant
from .polynomial import MasterPolynomialGenerator
from .randomness import RandomSource

logger = logging.getLogger(__name__)


class Dealer:
    """Class representing a trusted dealer."""

    def __init__(
        self,
        threshold: int,
        participants: int,
        random_source: Optional[RandomSource] = None,
    ):
        """
        Initialize a dealer for a threshold-of-participants sharing.

        Parameters:
        threshold (int): The number of partial signatures needed to sign.
        participants (int): The number of shares handed out.
        random_source (Optional[RandomSource]): Source of coefficient
            randomness. Defaults to the operating system CSPRNG.

        Raises:
        InvalidInput: If the arguments are not integers with
        1 <= threshold <= participants.
        """
        if not all(
            isinstance(arg, int) and not isinstance(arg, bool)
            for arg in (threshold, participants)
        ):
            raise InvalidInput("Threshold and participants must be integers.")
        if not 1 <= threshold <= participants:
            raise InvalidInput("Threshold must be between 1 and participants.")

        self.threshold = threshold
        self.participants = participants
        self.generator = MasterPolynomialGenerator(random_source)
        self.master_secret_key: Optional[Tuple[SecretKey, ...]] = None
        self.master_public_key: Optional[Tuple[PublicKey, ...]] = None
        self.ids = tuple(ID.from_index(i) for i in range(1, participants + 1))

    def init_keygen(self, secret_key: Optional[SecretKey] = None) -> None:
        """
        Draw the master polynomial and commit to it.

        Parameters:
        secret_key (Optional[SecretKey]): Use this as the shared secret a_0
            instead of drawing it.
        """
        if secret_key is None:
            self.master_secret_key = self.generator.generate(self.threshold)
        else:
            self.master_secret_key = self.generator.from_secret(
                secret_key, self.threshold
            )
        self.master_public_key = get_master_public_key(self.master_secret_key)
        logger.debug(
            "Dealt %d-of-%d master polynomial", self.threshold, self.participants
        )

    @property
    def public_key(self) -> PublicKey:
        if self.master_public_key is None:
            raise ValueError("Master public key has not been initialized.")
        return self.master_public_key[0]

    def generate_shares(self) -> Tuple[SecretKey, ...]:
        """Evaluate the master polynomial at each participant's identity."""
        if self.master_secret_key is None:
            raise ValueError(
                "Master polynomial must be initialized before generating shares."
            )
        return tuple(
            SecretKey.evaluate(self.master_secret_key, id_) for id_ in self.ids
        )

    def public_key_shares(self) -> Tuple[PublicKey, ...]:
        """Evaluate the master public key at each participant's identity."""
        if self.master_public_key is None:
            raise ValueError("Master public key has not been initialized.")
        return tuple(
            PublicKey.evaluate(self.master_public_key, id_) for id_ in self.ids
        )

    def deal(self) -> Tuple[Participant, ...]:
        """
        Hand out one Participant per identity, then forget the master secret
        key. The master public key is kept for verifying shares.
        """
        shares = self.generate_shares()
        self.master_secret_key = None
        return tuple(
            Participant(id_, share, self.threshold)
            for id_, share in zip(self.ids, shares)
        )
