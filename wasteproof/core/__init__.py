"""Core subpackage for WasteProof receipt primitives and results."""
from .receipt import (
    StopRule,
    build_receipt,
    dual_hash,
    emit_receipt,
    merkle,
    verify_payload_hash,
)
from .result import ErrorCode, LedgerResult

__all__ = [
    "dual_hash",
    "build_receipt",
    "emit_receipt",
    "verify_payload_hash",
    "merkle",
    "StopRule",
    "ErrorCode",
    "LedgerResult",
]
