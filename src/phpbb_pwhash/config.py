"""Verification policy."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PwhashConfig(BaseModel):
    """Policy knobs applied by :class:`~phpbb_pwhash.verifier.HashVerifier`."""

    max_password_length: int = Field(default=4096, ge=1)
    # None keeps the scheme's own bound of 2**30
    max_rounds: int | None = Field(default=None, ge=128)
