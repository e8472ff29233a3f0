"""Volume subpackage: waste pickup ledger."""
from .ledger import VolumeLedger, recycling_percentage
from .models import BusinessTotals, WasteRecord

__all__ = [
    "VolumeLedger",
    "WasteRecord",
    "BusinessTotals",
    "recycling_percentage",
]
