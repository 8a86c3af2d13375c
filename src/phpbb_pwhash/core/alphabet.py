"""The 64-character alphabet shared by the phpass family of hashes."""

from __future__ import annotations

ITOA64 = "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
ITOA64_BYTES = ITOA64.encode("ascii")

# RFC 4648 ordering, used to hand the work to the stdlib base64 engine
STANDARD64 = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


def char_value(byte: int) -> int | None:
    """Return the 0-63 value of *byte*, or ``None`` if it is not in the alphabet."""
    offset = ITOA64_BYTES.find(byte)
    return None if offset < 0 else offset
