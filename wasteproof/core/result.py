"""Typed operation outcomes.

Business-rule failures are returned, never raised.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Failure codes, numbered as the reference ledger numbers them."""
    INVALID_VOLUME = 2        # recycled volume exceeds reported volume
    UNAUTHORIZED = 403        # caller is not the current authority
    NOT_FOUND = 404           # claim id was never issued
    INVALID_TRANSITION = 409  # claim already resolved (guard enabled only)


@dataclass
class LedgerResult:
    """Result of a ledger operation."""
    ok: bool
    value: Any = None
    error: ErrorCode | None = None
    receipt: dict | None = None

    @classmethod
    def success(cls, value: Any, receipt: dict | None = None) -> "LedgerResult":
        return cls(ok=True, value=value, receipt=receipt)

    @classmethod
    def failure(cls, error: ErrorCode, receipt: dict | None = None) -> "LedgerResult":
        return cls(ok=False, error=error, receipt=receipt)
