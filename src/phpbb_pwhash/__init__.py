"""phpbb-pwhash — verify passwords against phpBB3 salted MD5 hashes."""

from phpbb_pwhash.config import PwhashConfig
from phpbb_pwhash.core.types import CheckHashResult, CheckStatus, InvalidHashReason, PhpbbHash
from phpbb_pwhash.verifier import HashVerifier, check_hash

__version__ = "0.1.0"
__all__ = [
    "check_hash",
    "HashVerifier",
    "PwhashConfig",
    "CheckHashResult",
    "CheckStatus",
    "InvalidHashReason",
    "PhpbbHash",
]
