"""phpbb-pwhash exceptions."""

from __future__ import annotations

from phpbb_pwhash.core.types import InvalidHashReason


class PwhashError(Exception):
    """Base exception for all phpbb-pwhash errors."""


class InvalidHashError(PwhashError):
    """Raised when an encoded hash cannot be parsed."""

    def __init__(self, reason: InvalidHashReason, detail: str | None = None):
        self.reason = reason
        self.detail = detail
        msg = f"Invalid hash ({reason.value})"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


class Base64DecodeError(InvalidHashError):
    """Raised when a digest field holds a byte outside the hash64 alphabet."""

    def __init__(self, offset: int, byte: int):
        self.offset = offset
        self.byte = byte
        super().__init__(
            InvalidHashReason.invalid_base64,
            f"invalid byte {bytes([byte])!r} at offset {offset}",
        )
