"""Password verification against phpBB3 ``$H$`` hashes."""

from __future__ import annotations

import hashlib
import logging

from phpbb_pwhash.config import PwhashConfig
from phpbb_pwhash.core.hash64 import decode64
from phpbb_pwhash.core.parser import parse_hash
from phpbb_pwhash.core.types import CheckHashResult, InvalidHashReason
from phpbb_pwhash.exceptions import InvalidHashError

log = logging.getLogger(__name__)


def _as_bytes(password: str | bytes) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray)):
        return bytes(password)
    raise TypeError(f"password must be str or bytes, not {type(password).__name__}")


def _iterated_md5(salt: bytes, password: bytes, rounds: int) -> bytes:
    digest = hashlib.md5(salt + password).digest()
    for _ in range(rounds):
        digest = hashlib.md5(digest + password).digest()
    return digest


class HashVerifier:
    """Checks passwords against phpBB3 salted MD5 hashes.

    >>> verifier = HashVerifier()
    >>> verifier.check("$H$9/O41.qQjQNlleivjbckbSNpfS4xgh0", "pass1234").is_valid
    True
    """

    def __init__(self, config: PwhashConfig | None = None):
        self._config = config or PwhashConfig()

    @property
    def config(self) -> PwhashConfig:
        return self._config

    def check(self, encoded: str | bytes, password: str | bytes) -> CheckHashResult:
        """Validate *password* against the salted hash *encoded*.

        Malformed hashes are reported through the returned
        :class:`CheckHashResult`, never raised.
        """
        password_bytes = _as_bytes(password)

        # Bound the per-round cost before touching the hash
        if len(password_bytes) > self._config.max_password_length:
            log.debug("Rejected password of %d bytes", len(password_bytes))
            return CheckHashResult.password_too_long()

        try:
            parsed = parse_hash(encoded)
        except InvalidHashError as exc:
            log.debug("Rejected hash: %s", exc.reason.value)
            return CheckHashResult.invalid_hash(exc.reason)

        max_rounds = self._config.max_rounds
        if max_rounds is not None and parsed.rounds > max_rounds:
            log.debug("Rejected hash: %d rounds exceeds limit of %d", parsed.rounds, max_rounds)
            return CheckHashResult.invalid_hash(InvalidHashReason.invalid_rounds)

        try:
            expected = decode64(parsed.digest_field)
        except InvalidHashError as exc:
            log.debug("Rejected hash: %s", exc)
            return CheckHashResult.invalid_hash(exc.reason, exc.detail)

        log.debug("Checking password with %d rounds", parsed.rounds)
        if _iterated_md5(parsed.salt, password_bytes, parsed.rounds) == expected:
            return CheckHashResult.valid()
        return CheckHashResult.invalid()


def check_hash(
    encoded: str | bytes,
    password: str | bytes,
    *,
    config: PwhashConfig | None = None,
) -> CheckHashResult:
    """Validate *password* against a phpBB3 salted hash.

    >>> check_hash("$H$9/O41.qQjQNlleivjbckbSNpfS4xgh0", "pass1235").is_valid
    False
    """
    return HashVerifier(config).check(encoded, password)
