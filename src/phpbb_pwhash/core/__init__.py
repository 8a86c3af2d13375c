"""phpbb-pwhash core types and codecs."""

from phpbb_pwhash.core.types import CheckHashResult, CheckStatus, InvalidHashReason, PhpbbHash

__all__ = ["CheckHashResult", "CheckStatus", "InvalidHashReason", "PhpbbHash"]
