"""Claim Registry - recycling claims and their verification.

Businesses submit claims; the single authority verifies or rejects them.
Each verification folds the claim's volumes into the business's running
statistics (diversion rate, carbon offset).

Receipts:
    claim_submitted, claim_verified, claim_rejected,
    business_stats_updated, authority_transferred, operation_denied
"""
from dataclasses import replace

from ..config import features
from ..constants import BASIS_POINTS, CARBON_OFFSET_PER_UNIT, FIRST_CLAIM_ID
from ..core.component import LedgerComponent
from ..core.result import ErrorCode, LedgerResult
from .lifecycle import can_transition
from .models import BusinessRecyclingStats, ClaimStatus, RecyclingClaim


def diversion_rate(total_recycled: int, total_waste: int) -> int:
    """Recycled share of total waste in basis points, truncated."""
    if total_waste == 0:
        return 0
    return (total_recycled * BASIS_POINTS) // total_waste


class ClaimRegistry(LedgerComponent):
    """Claim table, per-business stats table, id counter and authority."""

    def __init__(self, authority: str, terminal_guard: bool | None = None, **kwargs):
        """Initialize ClaimRegistry.

        Args:
            authority: Identity allowed to resolve claims
            terminal_guard: Refuse to resolve non-PENDING claims. None defers
                to FEATURE_TERMINAL_CLAIM_GUARD_ENABLED.
            **kwargs: clock, store, emitter, tenant_id (see LedgerComponent)
        """
        super().__init__(**kwargs)
        self.authority = authority
        self.terminal_guard = terminal_guard
        self._claims: dict[int, RecyclingClaim] = {}
        self._stats: dict[str, BusinessRecyclingStats] = {}
        self._next_id = FIRST_CLAIM_ID

    @property
    def next_claim_id(self) -> int:
        return self._next_id

    def _guarded(self) -> bool:
        if self.terminal_guard is not None:
            return self.terminal_guard
        return features.FEATURE_TERMINAL_CLAIM_GUARD_ENABLED

    def submit_claim(
        self,
        caller: str,
        date: int,
        waste_type: str,
        volume: int,
        recycled_volume: int,
        evidence_hash: bytes,
    ) -> LedgerResult:
        """Store a new PENDING claim for the calling business.

        Returns:
            LedgerResult with the new claim id, or INVALID_VOLUME when the
            recycled volume exceeds the reported volume.
        """
        with self._lock:
            if recycled_volume > volume:
                return self._deny(
                    "submit_claim", caller, ErrorCode.INVALID_VOLUME,
                    volume=volume, recycled_volume=recycled_volume,
                )

            claim_id = self._next_id
            self._claims[claim_id] = RecyclingClaim(
                claim_id=claim_id,
                business=caller,
                date=date,
                waste_type=waste_type,
                volume=volume,
                recycled_volume=recycled_volume,
                evidence_hash=bytes(evidence_hash),
            )
            self._next_id += 1

            receipt = self._emit("claim_submitted", {
                "claim_id": claim_id,
                "business": caller,
                "date": date,
                "waste_type": waste_type,
                "volume": volume,
                "recycled_volume": recycled_volume,
                "evidence_hash": bytes(evidence_hash).hex(),
            })
            return LedgerResult.success(claim_id, receipt)

    def _check_resolution(
        self,
        operation: str,
        caller: str,
        claim_id: int,
        to_status: ClaimStatus,
    ) -> LedgerResult | None:
        """Run every precondition of verify/reject. Returns a failure or None."""
        claim = self._claims.get(claim_id)
        if claim is None:
            return self._deny(operation, caller, ErrorCode.NOT_FOUND, claim_id=claim_id)
        if caller != self.authority:
            return self._deny(operation, caller, ErrorCode.UNAUTHORIZED, claim_id=claim_id)
        if not can_transition(claim.status, to_status, self._guarded()):
            return self._deny(
                operation, caller, ErrorCode.INVALID_TRANSITION,
                claim_id=claim_id, status=claim.status.name,
            )
        return None

    def verify_claim(self, caller: str, claim_id: int) -> LedgerResult:
        """Mark a claim VERIFIED and fold it into the business stats."""
        with self._lock:
            failure = self._check_resolution("verify_claim", caller, claim_id, ClaimStatus.VERIFIED)
            if failure is not None:
                return failure

            now = self.clock()
            claim = self._claims[claim_id]
            claim.status = ClaimStatus.VERIFIED
            claim.verifier = caller
            claim.verification_time = now

            receipt = self._emit("claim_verified", {
                "claim_id": claim_id,
                "business": claim.business,
                "verifier": caller,
                "block_height": now,
            })
            self._apply_verification(claim, now)
            return LedgerResult.success(True, receipt)

    def _apply_verification(self, claim: RecyclingClaim, now: int) -> None:
        """Add a verified claim to its business's running stats."""
        stats = self._stats.get(claim.business, BusinessRecyclingStats())
        total_waste = stats.total_waste + claim.volume
        total_recycled = stats.total_recycled + claim.recycled_volume

        updated = BusinessRecyclingStats(
            total_waste=total_waste,
            total_recycled=total_recycled,
            diversion_rate=diversion_rate(total_recycled, total_waste),
            carbon_offset=stats.carbon_offset + claim.recycled_volume * CARBON_OFFSET_PER_UNIT,
            last_updated=now,
        )
        self._stats[claim.business] = updated

        self._emit("business_stats_updated", {
            "business": claim.business,
            "claim_id": claim.claim_id,
            **updated.to_dict(),
        })

    def reject_claim(self, caller: str, claim_id: int) -> LedgerResult:
        """Mark a claim REJECTED. Business stats are not touched."""
        with self._lock:
            failure = self._check_resolution("reject_claim", caller, claim_id, ClaimStatus.REJECTED)
            if failure is not None:
                return failure

            now = self.clock()
            claim = self._claims[claim_id]
            claim.status = ClaimStatus.REJECTED
            claim.verifier = caller
            claim.verification_time = now

            receipt = self._emit("claim_rejected", {
                "claim_id": claim_id,
                "business": claim.business,
                "verifier": caller,
                "block_height": now,
            })
            return LedgerResult.success(True, receipt)

    def get_claim(self, claim_id: int) -> RecyclingClaim | None:
        """Get a copy of a claim by id, or None."""
        with self._lock:
            claim = self._claims.get(claim_id)
            return replace(claim) if claim is not None else None

    def get_business_stats(self, business: str) -> BusinessRecyclingStats:
        """Get a business's stats; all zeros if it has no verified claim."""
        with self._lock:
            stats = self._stats.get(business)
            return replace(stats) if stats is not None else BusinessRecyclingStats()

    def transfer_authority(self, caller: str, new_authority: str) -> LedgerResult:
        """Hand the authority role to another identity."""
        with self._lock:
            if caller != self.authority:
                return self._deny(
                    "transfer_authority", caller, ErrorCode.UNAUTHORIZED,
                    new_authority=new_authority,
                )

            previous = self.authority
            self.authority = new_authority

            receipt = self._emit("authority_transferred", {
                "caller": caller,
                "previous_authority": previous,
                "new_authority": new_authority,
            })
            return LedgerResult.success(True, receipt)

    def claim_count(self) -> int:
        with self._lock:
            return len(self._claims)
