"""
This module defines the Aggregator class, which combines partial signatures
from at least threshold participants into one signature verifiable against
the group public key.

When the dealer's master public key is known, every partial signature is
checked against its participant's public key share as it arrives, so a bad
share is rejected individually instead of spoiling the recovered signature.
"""

import logging
from typing import Dict, Optional, Sequence

from .errors import DuplicateIdentity, InvalidInput
from .identity import ID
from .keys import PublicKey
from .signature import Signature

logger = logging.getLogger(__name__)


class Aggregator:
    """Class representing the signature combiner."""

    def __init__(
        self,
        public_key: PublicKey,
        message: bytes,
        threshold: int,
        master_public_key: Optional[Sequence[PublicKey]] = None,
    ):
        """
        Initialize the Aggregator for one message.

        Parameters:
        public_key (PublicKey): The group public key the result must verify under.
        message (bytes): The message that is being signed.
        threshold (int): The minimum number of partial signatures.
        master_public_key (Optional[Sequence[PublicKey]]): The dealer's
            commitments. If given, partial signatures are checked on arrival.
        """
        if master_public_key is not None and len(master_public_key) != threshold:
            raise InvalidInput(
                "The number of coefficient commitments must match the threshold."
            )
        self.public_key = public_key
        self.message = message
        self.threshold = threshold
        self.master_public_key = master_public_key
        self.partial_signatures: Dict[ID, Signature] = {}

    def verify_partial_signature(self, id_: ID, signature: Signature) -> bool:
        """Check a partial signature against the public key share of id_."""
        if self.master_public_key is None:
            raise ValueError("Master public key is required to verify partials.")
        public_key_share = PublicKey.evaluate(self.master_public_key, id_)
        return signature.verify(public_key_share, self.message)

    def add_partial_signature(self, id_: ID, signature: Signature) -> bool:
        """
        Collect a partial signature.

        Returns:
        bool: False if the partial signature was checked and rejected.

        Raises:
        DuplicateIdentity: If id_ already contributed.
        """
        if id_ in self.partial_signatures:
            raise DuplicateIdentity(f"{id_!r} already contributed a partial signature.")
        if self.master_public_key is not None and not self.verify_partial_signature(
            id_, signature
        ):
            logger.warning("Rejected invalid partial signature from %r", id_)
            return False
        self.partial_signatures[id_] = signature
        return True

    def signature(self) -> Signature:
        """
        Recover the group signature from the collected partial signatures.

        Raises:
        InvalidInput: If fewer than threshold partial signatures were
        collected, or the recovered signature does not verify.
        """
        if len(self.partial_signatures) < self.threshold:
            raise InvalidInput(
                f"Need {self.threshold} partial signatures, have "
                f"{len(self.partial_signatures)}."
            )

        ids = list(self.partial_signatures)
        signature = Signature.recover([self.partial_signatures[i] for i in ids], ids)
        if not signature.verify(self.public_key, self.message):
            raise InvalidInput("Recovered signature does not verify.")
        return signature
