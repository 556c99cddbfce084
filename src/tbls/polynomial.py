"""
Generation of the dealer's master polynomial.

The master secret key is the tuple of k coefficients a_0, ..., a_(k-1) of a
random polynomial of degree k - 1; a_0 is the shared secret. The master
public key commits to each coefficient in G2.
"""

import logging
from typing import Optional, Tuple

from .errors import InvalidInput
from .keys import SecretKey
from .randomness import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


class MasterPolynomialGenerator:
    """Draws master secret keys from an injected random source."""

    def __init__(self, random_source: Optional[RandomSource] = None):
        self.random_source = (
            random_source if random_source is not None else SystemRandomSource()
        )

    def generate(self, k: int) -> Tuple[SecretKey, ...]:
        """
        Draw k random coefficients.

        Raises:
        InvalidInput: If k is not a positive integer.
        RandomSourceFailure: If the random source fails; nothing is returned.
        """
        self._check_threshold(k)
        logger.debug("Generating master polynomial with threshold %d", k)
        return tuple(SecretKey.generate(self.random_source) for _ in range(k))

    def from_secret(self, secret_key: SecretKey, k: int) -> Tuple[SecretKey, ...]:
        """
        Build a master secret key whose constant term is secret_key and
        whose other k - 1 coefficients are random.
        """
        self._check_threshold(k)
        logger.debug("Extending secret key to master polynomial with threshold %d", k)
        return (secret_key,) + tuple(
            SecretKey.generate(self.random_source) for _ in range(k - 1)
        )

    @staticmethod
    def _check_threshold(k: int) -> None:
        if not isinstance(k, int) or isinstance(k, bool) or k < 1:
            raise InvalidInput("Threshold must be a positive integer.")
