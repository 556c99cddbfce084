"""Hex helpers shared by the serializable value types."""

import binascii

from .errors import FormatError


def hex_to_bytes(s: str) -> bytes:
    """
    Decode a hex string, rejecting odd lengths and non-hex characters.

    Raises:
    FormatError: If the string is not valid, even-length hex.
    """
    if len(s) & 1:
        raise FormatError("Hex string has odd length.")
    try:
        return binascii.unhexlify(s)
    except (binascii.Error, ValueError) as e:
        raise FormatError("Invalid hex string.") from e


def bytes_to_hex(b: bytes) -> str:
    return binascii.hexlify(b).decode("ascii")


def expect_length(data: bytes, size: int, what: str) -> bytes:
    if len(data) != size:
        raise FormatError(f"{what} must be exactly {size} bytes, got {len(data)}.")
    return data
