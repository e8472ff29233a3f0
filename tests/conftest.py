"""Pytest fixtures for WasteProof tests."""
import pytest

from wasteproof.claims.registry import ClaimRegistry
from wasteproof.core.component import FixedClock
from wasteproof.ledger.store import LedgerStore
from wasteproof.volume.ledger import VolumeLedger

ADMIN = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
BUSINESS1 = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
BUSINESS2 = "ST2JHG361ZXG51QTKY2NQCVBPPRRE2KZB1HR05NNC"
COLLECTOR = "ST3AM1A56AK2C1XAFJ4115ZSV26EB49BVQ10MGCS0"


@pytest.fixture
def evidence_hash():
    """Provide a 32-byte evidence blob."""
    return bytes([1] * 32)


@pytest.fixture
def claim_clock():
    """Clock pinned at block height 400."""
    return FixedClock(400)


@pytest.fixture
def volume_clock():
    """Clock pinned at block height 300."""
    return FixedClock(300)


@pytest.fixture
def registry(claim_clock):
    """Provide a fresh ClaimRegistry with ADMIN as authority."""
    return ClaimRegistry(ADMIN, clock=claim_clock)


@pytest.fixture
def volumes(volume_clock):
    """Provide a fresh VolumeLedger."""
    return VolumeLedger(clock=volume_clock)


@pytest.fixture
def temp_ledger(tmp_path):
    """Provide temporary LedgerStore with tmp_path."""
    return LedgerStore(str(tmp_path / "test_receipts.jsonl"))
