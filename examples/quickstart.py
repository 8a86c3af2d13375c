"""phpbb-pwhash Quickstart — check a password against a phpBB3 hash."""

import logging

from phpbb_pwhash import CheckStatus, HashVerifier, PwhashConfig, check_hash

logging.basicConfig(level=logging.DEBUG)

stored = "$H$9/O41.qQjQNlleivjbckbSNpfS4xgh0"

# 1. One-off check
print(check_hash(stored, "pass1234").status.value)  # valid
print(check_hash(stored, "pass1235").status.value)  # invalid

# 2. Results are falsy unless the password matched
if check_hash(stored, "pass1234"):
    print("Welcome back!")

# 3. Tell malformed data apart from a wrong password
result = check_hash("$X$9/O41.qQjQNlleivjbckbSNpfS4xgh0", "pass1234")
if result.status is CheckStatus.invalid_hash:
    print(f"Cannot verify: {result.reason.value}")

# 4. Cap the work factor you are willing to pay per login
verifier = HashVerifier(PwhashConfig(max_rounds=1 << 16))
print(verifier.check(stored, "pass1234").status.value)
