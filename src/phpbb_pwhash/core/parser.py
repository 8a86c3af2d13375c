"""Parsing of phpBB3 ``$H$`` hash strings."""

from __future__ import annotations

from phpbb_pwhash.core.alphabet import char_value
from phpbb_pwhash.core.types import InvalidHashReason, PhpbbHash
from phpbb_pwhash.exceptions import InvalidHashError

HASH_TYPE = "$H$"
HASH_LENGTH = 34
SALT_LENGTH = 8
MIN_ROUNDS_OFFSET = 7
MAX_ROUNDS_OFFSET = 30


def parse_hash(encoded: str | bytes) -> PhpbbHash:
    """Split *encoded* into its hash type, rounds, salt and digest field.

    A hash for the password "pass1234" looks like this::

        $H$9/O41.qQjQNlleivjbckbSNpfS4xgh0

    - Bytes 0-2 are the hash type, always ``$H$``.
    - Byte 3 is the rounds count as a power of two: its offset in the
      alphabet (``'9'`` is 11, so ``1 << 11`` rounds). The offset must be
      between 7 and 30.
    - Bytes 4-11 are the salt, used as-is.
    - Bytes 12-33 are the encoded MD5 digest.

    Raises :class:`InvalidHashError` when any of these constraints fail.
    """
    if isinstance(encoded, str):
        encoded = encoded.encode("utf-8")
    elif not isinstance(encoded, (bytes, bytearray)):
        raise TypeError(f"encoded hash must be str or bytes, not {type(encoded).__name__}")

    # Also rejects unsalted 32-char MD5 hashes
    if len(encoded) != HASH_LENGTH:
        raise InvalidHashError(InvalidHashReason.bad_length)

    if encoded[:3] != HASH_TYPE.encode("ascii"):
        raise InvalidHashError(InvalidHashReason.unsupported_hash_type)

    offset = char_value(encoded[3])
    if offset is None or not MIN_ROUNDS_OFFSET <= offset <= MAX_ROUNDS_OFFSET:
        raise InvalidHashError(InvalidHashReason.invalid_rounds)

    return PhpbbHash(
        hash_type=HASH_TYPE,
        rounds=1 << offset,
        salt=bytes(encoded[4 : 4 + SALT_LENGTH]),
        digest_field=bytes(encoded[4 + SALT_LENGTH :]),
    )
