"""
Exceptions raised by this package.

Every error except RandomSourceFailure is recoverable: the caller gets a
distinguished exception and may retry with corrected input. A failing random
source is fatal, and no key material is produced after one.
"""


class BLSError(Exception):
    """Base class for all errors raised by this package."""


class FormatError(BLSError, ValueError):
    """Odd-length hex, wrong byte count, or a non-canonical scalar."""


class InvalidInput(BLSError, ValueError):
    """Structurally invalid arguments, such as an empty coefficient list."""


class DuplicateIdentity(InvalidInput):
    """Two identities in a recovery set are equal modulo R."""


class DecodeFailure(BLSError, ValueError):
    """Bytes of the right length that do not encode a valid group element."""


class RandomSourceFailure(BLSError, RuntimeError):
    """The random source failed or was exhausted during generation."""
