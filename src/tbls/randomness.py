"""
Random byte sources for key and polynomial generation.

A random source is passed explicitly to whatever generates key material.
SystemRandomSource is the default; StreamRandomSource reads from any binary
file-like object, which makes generation reproducible in tests.
"""

import secrets
from abc import ABC, abstractmethod
from typing import BinaryIO

from .errors import RandomSourceFailure


class RandomSource(ABC):
    """Supplier of random bytes."""

    @abstractmethod
    def read(self, n: int) -> bytes:
        """
        Return exactly n random bytes.

        Raises:
        RandomSourceFailure: If n bytes cannot be produced.
        """


class SystemRandomSource(RandomSource):
    """The operating system CSPRNG."""

    def read(self, n: int) -> bytes:
        try:
            return secrets.token_bytes(n)
        except OSError as e:
            raise RandomSourceFailure("Operating system CSPRNG failed.") from e


class StreamRandomSource(RandomSource):
    """Random bytes read from a binary stream, such as io.BytesIO or a file."""

    def __init__(self, stream: BinaryIO):
        self.stream = stream

    def read(self, n: int) -> bytes:
        try:
            data = self.stream.read(n)
        except OSError as e:
            raise RandomSourceFailure("Could not read from the random stream.") from e
        if data is None or len(data) != n:
            raise RandomSourceFailure(
                f"Random stream exhausted: wanted {n} bytes, got {len(data or b'')}."
            )
        return data
