"""The phpass flavour of base64 ("hash64").

phpass emits 6-bit groups least-significant first and uses its own
alphabet, so a field is the little-endian base-64 expansion of the
digest. Reversing the field makes it big-endian, which the stdlib
base64 engine can decode once the alphabet is translated; the decoded
bytes then come out reversed.
"""

from __future__ import annotations

import base64

from phpbb_pwhash.core.alphabet import ITOA64_BYTES, STANDARD64, char_value
from phpbb_pwhash.exceptions import Base64DecodeError

DIGEST_LENGTH = 16

_TO_STANDARD = bytes.maketrans(ITOA64_BYTES, STANDARD64.encode("ascii"))
_FROM_STANDARD = bytes.maketrans(STANDARD64.encode("ascii"), ITOA64_BYTES)


def decode64(field: str | bytes, length: int = DIGEST_LENGTH) -> bytes:
    """Decode a hash64 *field*, returning at most *length* bytes.

    Raises :class:`Base64DecodeError` if *field* holds a byte outside the
    alphabet.
    """
    if isinstance(field, str):
        field = field.encode("utf-8")

    for offset, byte in enumerate(field):
        if char_value(byte) is None:
            raise Base64DecodeError(offset, byte)

    # Pad with zero-valued characters up to a 3-byte boundary
    padded = b"." * (-len(field) % 4) + bytes(field[::-1])
    raw = base64.b64decode(padded.translate(_TO_STANDARD))

    return raw[::-1][:length]


def encode64(raw: bytes) -> str:
    """Encode *raw* the way phpass does; the inverse of :func:`decode64`."""
    if not raw:
        return ""
    pad = -len(raw) % 3
    standard = base64.b64encode(b"\x00" * pad + bytes(raw[::-1]))
    n_chars = (len(raw) * 8 + 5) // 6
    return standard.translate(_FROM_STANDARD)[-n_chars:][::-1].decode("ascii")
