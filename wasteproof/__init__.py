"""WasteProof: recycling claim verification and waste volume ledgers.

Public API:
- Core: dual_hash, emit_receipt, merkle, StopRule, ErrorCode, LedgerResult
- Claims: ClaimRegistry, ClaimStatus, RecyclingClaim, BusinessRecyclingStats
- Volume: VolumeLedger, WasteRecord, BusinessTotals
- Ledger: LedgerStore, replay, write_genesis, ledger_status
"""
from .claims import BusinessRecyclingStats, ClaimRegistry, ClaimStatus, RecyclingClaim
from .core import ErrorCode, LedgerResult, StopRule, dual_hash, emit_receipt, merkle
from .core.component import FixedClock
from .ledger import LedgerStore, ledger_status, replay, write_genesis
from .volume import BusinessTotals, VolumeLedger, WasteRecord

__version__ = "1.0.0"

__all__ = [
    # Core
    "dual_hash",
    "emit_receipt",
    "merkle",
    "StopRule",
    "ErrorCode",
    "LedgerResult",
    "FixedClock",
    # Claims
    "ClaimRegistry",
    "ClaimStatus",
    "RecyclingClaim",
    "BusinessRecyclingStats",
    # Volume
    "VolumeLedger",
    "WasteRecord",
    "BusinessTotals",
    # Ledger
    "LedgerStore",
    "replay",
    "write_genesis",
    "ledger_status",
]
