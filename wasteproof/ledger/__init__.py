"""Ledger subpackage: receipt storage, replay and status."""
from ..core.receipt import emit_receipt, merkle
from .replay import GENESIS_TYPE, find_genesis, open_ledger, replay, write_genesis
from .store import LedgerStore


def ledger_status(store: LedgerStore) -> dict:
    """Summarize a receipt trail and emit a ledger_status receipt.

    Args:
        store: LedgerStore to summarize

    Returns:
        Status dict with receipt_count, by_type, merkle_root, latest_ts
    """
    receipts = store.read_all()

    by_type: dict[str, int] = {}
    for r in receipts:
        rt = r.get("receipt_type", "unknown")
        by_type[rt] = by_type.get(rt, 0) + 1

    status = {
        "ledger_path": str(store.path),
        "receipt_count": len(receipts),
        "by_type": by_type,
        "merkle_root": merkle(receipts),
        "initialized": find_genesis(receipts) is not None,
        "latest_ts": receipts[-1].get("ts") if receipts else None,
    }

    emit_receipt("ledger_status", status)
    return status


__all__ = [
    "LedgerStore",
    "replay",
    "open_ledger",
    "write_genesis",
    "find_genesis",
    "ledger_status",
    "GENESIS_TYPE",
]
