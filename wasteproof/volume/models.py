"""Waste pickup records and per-business category totals."""
from dataclasses import dataclass


@dataclass
class WasteRecord:
    """Snapshot of one pickup, keyed by business and date."""
    general: int
    recyclable: int
    organic: int
    hazardous: int
    collector: str
    timestamp: int

    def to_dict(self) -> dict:
        return {
            "general": self.general,
            "recyclable": self.recyclable,
            "organic": self.organic,
            "hazardous": self.hazardous,
            "collector": self.collector,
            "timestamp": self.timestamp,
        }


@dataclass
class BusinessTotals:
    """Category sums over every recording for a business."""
    general_total: int = 0
    recyclable_total: int = 0
    organic_total: int = 0
    hazardous_total: int = 0
    last_updated: int = 0

    @property
    def total_waste(self) -> int:
        return self.general_total + self.recyclable_total + self.organic_total + self.hazardous_total

    def to_dict(self) -> dict:
        return {
            "general_total": self.general_total,
            "recyclable_total": self.recyclable_total,
            "organic_total": self.organic_total,
            "hazardous_total": self.hazardous_total,
            "last_updated": self.last_updated,
        }
