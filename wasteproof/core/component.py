"""Shared plumbing for the ledger components: clock, receipts, locking."""
import threading
import time
from typing import Callable

from ..constants import DEFAULT_TENANT_ID
from .receipt import emit_receipt
from .result import ErrorCode, LedgerResult

Clock = Callable[[], int]
Emitter = Callable[[str, dict], dict]


def system_clock() -> int:
    """Wall-clock seconds, used when the host supplies no block height."""
    return int(time.time())


class FixedClock:
    """Clock that returns a settable height. Used by replay and tests."""

    def __init__(self, height: int = 0):
        self.height = height

    def __call__(self) -> int:
        return self.height


class LedgerComponent:
    """Base for ClaimRegistry and VolumeLedger.

    Holds the injected clock, the receipt emitter, an optional receipt store
    and the lock that serializes every read-then-write on the tables.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        store=None,
        emitter: Emitter = emit_receipt,
        tenant_id: str = DEFAULT_TENANT_ID,
    ):
        self.clock = clock if clock is not None else system_clock
        self.store = store
        self.emitter = emitter
        self.tenant_id = tenant_id
        self._lock = threading.RLock()

    def _emit(self, receipt_type: str, data: dict) -> dict:
        receipt = self.emitter(receipt_type, {"tenant_id": self.tenant_id, **data})
        if self.store is not None:
            self.store.append(receipt)
        return receipt

    def _deny(self, operation: str, caller: str, error: ErrorCode, **details) -> LedgerResult:
        receipt = self._emit("operation_denied", {
            "operation": operation,
            "caller": caller,
            "error": error.value,
            "reason": error.name,
            **details,
        })
        return LedgerResult.failure(error, receipt)
