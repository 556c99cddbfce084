"""
This module defines the Participant class: the holder of one secret key share
of a threshold BLS key.
"""

from typing import Sequence

from .errors import InvalidInput
from .identity import ID
from .keys import PublicKey, SecretKey
from .signature import Signature


class Participant:
    """Class representing a share holder."""

    def __init__(self, id_: ID, secret_key_share: SecretKey, threshold: int):
        self.id = id_
        self.secret_key_share = secret_key_share
        self.threshold = threshold

    @property
    def index(self) -> int:
        return self.id.get_index()

    def public_key_share(self) -> PublicKey:
        return self.secret_key_share.get_public_key()

    def verify_share(self, master_public_key: Sequence[PublicKey]) -> bool:
        """
        Check the secret key share against the dealer's published commitments.

        Raises:
        InvalidInput: If the number of commitments does not match the threshold.
        """
        if len(master_public_key) != self.threshold:
            raise InvalidInput(
                "The number of coefficient commitments must match the threshold."
            )
        return self.public_key_share() == PublicKey.evaluate(
            master_public_key, self.id
        )

    def sign(self, message: bytes) -> Signature:
        """Produce this participant's partial signature on message."""
        return self.secret_key_share.sign(message)
