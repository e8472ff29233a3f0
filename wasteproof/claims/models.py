"""Recycling claim records and per-business statistics."""
from dataclasses import dataclass
from enum import Enum


class ClaimStatus(Enum):
    """Claim lifecycle states."""
    PENDING = 0
    VERIFIED = 1
    REJECTED = 2


@dataclass
class RecyclingClaim:
    """A business's recycling claim, awaiting or past authority review."""
    claim_id: int
    business: str
    date: int
    waste_type: str
    volume: int
    recycled_volume: int
    evidence_hash: bytes
    status: ClaimStatus = ClaimStatus.PENDING
    verifier: str | None = None
    verification_time: int = 0

    def to_dict(self) -> dict:
        return {
            "claim_id": self.claim_id,
            "business": self.business,
            "date": self.date,
            "waste_type": self.waste_type,
            "volume": self.volume,
            "recycled_volume": self.recycled_volume,
            "evidence_hash": self.evidence_hash.hex(),
            "status": self.status.name,
            "verifier": self.verifier,
            "verification_time": self.verification_time,
        }


@dataclass
class BusinessRecyclingStats:
    """Running totals over every verified claim of one business.

    diversion_rate is in basis points.
    """
    total_waste: int = 0
    total_recycled: int = 0
    diversion_rate: int = 0
    carbon_offset: int = 0
    last_updated: int = 0

    def to_dict(self) -> dict:
        return {
            "total_waste": self.total_waste,
            "total_recycled": self.total_recycled,
            "diversion_rate": self.diversion_rate,
            "carbon_offset": self.carbon_offset,
            "last_updated": self.last_updated,
        }
