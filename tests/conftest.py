"""Shared fixtures for building phpBB3 hashes in tests."""

from __future__ import annotations

import hashlib
from typing import Callable

import pytest

from phpbb_pwhash.core.alphabet import ITOA64
from phpbb_pwhash.core.hash64 import encode64


def _make_hash(password: str | bytes, salt: str = "abcdefgh", offset: int = 7) -> str:
    if isinstance(password, str):
        password = password.encode("utf-8")
    digest = hashlib.md5(salt.encode("ascii") + password).digest()
    for _ in range(1 << offset):
        digest = hashlib.md5(digest + password).digest()
    return f"$H${ITOA64[offset]}{salt}{encode64(digest)}"


@pytest.fixture()
def make_hash() -> Callable[..., str]:
    """Build a ``$H$`` hash the way phpBB does (cheapest rounds by default)."""
    return _make_hash


@pytest.fixture()
def known_hash() -> str:
    return "$H$9/O41.qQjQNlleivjbckbSNpfS4xgh0"
