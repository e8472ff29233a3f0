"""Claims subpackage: recycling claim registry and its lifecycle."""
from .lifecycle import VALID_TRANSITIONS, can_transition, is_terminal
from .models import BusinessRecyclingStats, ClaimStatus, RecyclingClaim
from .registry import ClaimRegistry, diversion_rate

__all__ = [
    "ClaimRegistry",
    "ClaimStatus",
    "RecyclingClaim",
    "BusinessRecyclingStats",
    "VALID_TRANSITIONS",
    "can_transition",
    "is_terminal",
    "diversion_rate",
]
