"""Feature flags for WasteProof.

New behavior starts DISABLED so the default matches the reference ledger.
Components read these at call time; a constructor argument overrides them.
"""

# =============================================================================
# Claim lifecycle
# =============================================================================

# Terminal-state guard: refuse verify/reject on a claim that is no longer
# PENDING (returns INVALID_TRANSITION). Off means a resolved claim can be
# resolved again and a second verification counts into the stats twice.
FEATURE_TERMINAL_CLAIM_GUARD_ENABLED = False

# =============================================================================
# Receipt trail
# =============================================================================

# Recompute payload_hash for every receipt before replaying it
FEATURE_RECEIPT_VERIFY_ON_REPLAY_ENABLED = True
