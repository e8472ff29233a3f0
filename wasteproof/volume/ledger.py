"""Volume Ledger - per-pickup waste volumes and running category totals.

Records are keyed by (business, date) and a repeat key overwrites the stored
snapshot. Totals are additive over every call, so a repeat key still adds its
amounts on top of what the overwritten record contributed.

Receipts:
    waste_volume_recorded
"""
from dataclasses import replace

from ..constants import BASIS_POINTS
from ..core.component import LedgerComponent
from ..core.result import LedgerResult
from .models import BusinessTotals, WasteRecord


def recycling_percentage(recyclable_total: int, total_waste: int) -> int:
    """Recyclable share of total waste in basis points, truncated."""
    if total_waste == 0:
        return 0
    return (recyclable_total * BASIS_POINTS) // total_waste


class VolumeLedger(LedgerComponent):
    """Record table keyed by (business, date) and per-business totals."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._records: dict[tuple[str, int], WasteRecord] = {}
        self._totals: dict[str, BusinessTotals] = {}

    def record_waste_volume(
        self,
        caller: str,
        business: str,
        date: int,
        general: int,
        recyclable: int,
        organic: int,
        hazardous: int,
    ) -> LedgerResult:
        """Store a pickup snapshot and add it to the business totals.

        Always succeeds; amounts are trusted as supplied.
        """
        with self._lock:
            now = self.clock()
            self._records[(business, date)] = WasteRecord(
                general=general,
                recyclable=recyclable,
                organic=organic,
                hazardous=hazardous,
                collector=caller,
                timestamp=now,
            )

            totals = self._totals.get(business, BusinessTotals())
            self._totals[business] = BusinessTotals(
                general_total=totals.general_total + general,
                recyclable_total=totals.recyclable_total + recyclable,
                organic_total=totals.organic_total + organic,
                hazardous_total=totals.hazardous_total + hazardous,
                last_updated=now,
            )

            receipt = self._emit("waste_volume_recorded", {
                "collector": caller,
                "business": business,
                "date": date,
                "general": general,
                "recyclable": recyclable,
                "organic": organic,
                "hazardous": hazardous,
                "block_height": now,
            })
            return LedgerResult.success(True, receipt)

    def get_waste_record(self, business: str, date: int) -> WasteRecord | None:
        with self._lock:
            record = self._records.get((business, date))
            return replace(record) if record is not None else None

    def get_business_totals(self, business: str) -> BusinessTotals:
        """Get a business's totals; all zeros if nothing was recorded."""
        with self._lock:
            totals = self._totals.get(business)
            return replace(totals) if totals is not None else BusinessTotals()

    def get_total_waste(self, business: str) -> int:
        return self.get_business_totals(business).total_waste

    def get_recycling_percentage(self, business: str) -> int:
        """Recyclable share of everything recorded for a business, in basis points."""
        totals = self.get_business_totals(business)
        return recycling_percentage(totals.recyclable_total, totals.total_waste)

    def record_count(self) -> int:
        with self._lock:
            return len(self._records)
