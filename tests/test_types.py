"""Tests for result and parsed-hash models."""

import pytest
from pydantic import ValidationError

from phpbb_pwhash.core.types import CheckHashResult, CheckStatus, InvalidHashReason, PhpbbHash


class TestCheckHashResult:
    def test_constructors(self):
        assert CheckHashResult.valid().status is CheckStatus.valid
        assert CheckHashResult.invalid().status is CheckStatus.invalid
        assert CheckHashResult.password_too_long().status is CheckStatus.password_too_long
        r = CheckHashResult.invalid_hash(InvalidHashReason.bad_length)
        assert r.status is CheckStatus.invalid_hash
        assert r.reason is InvalidHashReason.bad_length
        assert r.detail is None

    def test_only_valid_is_truthy(self):
        assert CheckHashResult.valid()
        assert not CheckHashResult.invalid()
        assert not CheckHashResult.password_too_long()
        assert not CheckHashResult.invalid_hash(InvalidHashReason.invalid_rounds)

    def test_structural_equality(self):
        a = CheckHashResult.invalid_hash(InvalidHashReason.invalid_base64, "x")
        b = CheckHashResult.invalid_hash(InvalidHashReason.invalid_base64, "x")
        assert a == b
        assert a != CheckHashResult.invalid_hash(InvalidHashReason.invalid_base64, "y")
        assert CheckHashResult.valid() != CheckHashResult.invalid()

    def test_frozen(self):
        result = CheckHashResult.invalid()
        with pytest.raises(ValidationError):
            result.status = CheckStatus.valid

    def test_serializes_to_plain_values(self):
        dumped = CheckHashResult.invalid_hash(InvalidHashReason.bad_length).model_dump(mode="json")
        assert dumped == {"status": "invalid_hash", "reason": "bad_length", "detail": None}


class TestPhpbbHash:
    def test_rounds_bounds(self):
        with pytest.raises(ValidationError):
            PhpbbHash(hash_type="$H$", rounds=64, salt=b"abcdefgh", digest_field=b"")
        with pytest.raises(ValidationError):
            PhpbbHash(hash_type="$H$", rounds=1 << 31, salt=b"abcdefgh", digest_field=b"")

    def test_salt_length(self):
        with pytest.raises(ValidationError):
            PhpbbHash(hash_type="$H$", rounds=128, salt=b"short", digest_field=b"")
