"""Claim lifecycle - PENDING -> (VERIFIED | REJECTED).

Single state machine for claim status. No ad-hoc state tracking.
"""
from .models import ClaimStatus

VALID_TRANSITIONS = {
    ClaimStatus.PENDING: {ClaimStatus.VERIFIED, ClaimStatus.REJECTED},
    ClaimStatus.VERIFIED: set(),  # Terminal state
    ClaimStatus.REJECTED: set(),  # Terminal state
}


def is_terminal(status: ClaimStatus) -> bool:
    """Check if a status has no outgoing transitions."""
    return not VALID_TRANSITIONS[status]


def can_transition(from_status: ClaimStatus, to_status: ClaimStatus, guarded: bool) -> bool:
    """Check whether a resolution may be applied.

    Unguarded, any resolution is allowed from any status, matching the
    reference ledger. Guarded, only the transitions in VALID_TRANSITIONS are.
    """
    if not guarded:
        return to_status in (ClaimStatus.VERIFIED, ClaimStatus.REJECTED)
    return to_status in VALID_TRANSITIONS[from_status]
