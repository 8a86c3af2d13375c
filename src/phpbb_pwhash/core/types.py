"""Core Pydantic models for phpbb-pwhash."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CheckStatus(str, Enum):
    """Outcome of a password check."""

    valid = "valid"
    invalid = "invalid"
    password_too_long = "password_too_long"
    invalid_hash = "invalid_hash"


class InvalidHashReason(str, Enum):
    """Why an encoded hash was rejected before any hashing took place."""

    bad_length = "bad_length"
    unsupported_hash_type = "unsupported_hash_type"
    invalid_rounds = "invalid_rounds"
    invalid_base64 = "invalid_base64"


class PhpbbHash(BaseModel):
    """A parsed ``$H$`` hash.

    ``salt`` and ``digest_field`` are kept as raw bytes; the salt is fed to
    MD5 verbatim and the digest field still needs :func:`decode64`.
    """

    model_config = ConfigDict(frozen=True)

    hash_type: str
    rounds: int = Field(ge=1 << 7, le=1 << 30)
    salt: bytes = Field(min_length=8, max_length=8)
    digest_field: bytes


class CheckHashResult(BaseModel):
    """Result of :func:`~phpbb_pwhash.verifier.check_hash`.

    ``reason`` is only set when ``status`` is ``invalid_hash``; ``detail``
    only for ``invalid_base64``.
    """

    model_config = ConfigDict(frozen=True)

    status: CheckStatus
    reason: InvalidHashReason | None = None
    detail: str | None = None

    @classmethod
    def valid(cls) -> CheckHashResult:
        return cls(status=CheckStatus.valid)

    @classmethod
    def invalid(cls) -> CheckHashResult:
        return cls(status=CheckStatus.invalid)

    @classmethod
    def password_too_long(cls) -> CheckHashResult:
        return cls(status=CheckStatus.password_too_long)

    @classmethod
    def invalid_hash(cls, reason: InvalidHashReason, detail: str | None = None) -> CheckHashResult:
        return cls(status=CheckStatus.invalid_hash, reason=reason, detail=detail)

    @property
    def is_valid(self) -> bool:
        return self.status is CheckStatus.valid

    def __bool__(self) -> bool:
        return self.is_valid
