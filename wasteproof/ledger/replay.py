"""Rebuild registry and volume state from a receipt trail.

Every state-changing receipt carries the caller and the clock value it ran
at, so feeding them back through fresh components reproduces the same
tables, ids and timestamps. Replay is silent: receipts are rebuilt with
build_receipt and never printed or re-appended.
"""
from ..claims.registry import ClaimRegistry
from ..config import features
from ..constants import DEFAULT_TENANT_ID
from ..core.component import FixedClock, system_clock
from ..core.receipt import StopRule, build_receipt, emit_receipt, verify_payload_hash
from ..volume.ledger import VolumeLedger
from .store import LedgerStore

GENESIS_TYPE = "registry_genesis"

# Receipts that record outcomes rather than inputs
INFORMATIONAL_TYPES = {
    "operation_denied",
    "business_stats_updated",
    "ledger_status",
}


def write_genesis(store: LedgerStore, authority: str, tenant_id: str = DEFAULT_TENANT_ID) -> dict:
    """Append the receipt naming the initial authority.

    Raises:
        StopRule: If the trail already has a genesis receipt
    """
    if find_genesis(store.read_all()) is not None:
        raise StopRule(f"Already initialized: {store.path}")

    receipt = emit_receipt(GENESIS_TYPE, {
        "tenant_id": tenant_id,
        "authority": authority,
    })
    store.append(receipt)
    return receipt


def find_genesis(receipts: list[dict]) -> dict | None:
    for r in receipts:
        if r.get("receipt_type") == GENESIS_TYPE:
            return r
    return None


def _expect(result, receipt: dict) -> None:
    if not result.ok:
        raise StopRule(
            f"Replay of {receipt['receipt_type']} failed with "
            f"{result.error.name}: {receipt.get('payload_hash', '')[:16]}"
        )


def replay(
    receipts: list[dict],
    tenant_id: str | None = None,
    verify_hashes: bool | None = None,
) -> tuple[ClaimRegistry, VolumeLedger]:
    """Rebuild a ClaimRegistry and VolumeLedger from receipts in order.

    Args:
        receipts: Receipt trail in append order
        tenant_id: Only replay this tenant's receipts (None: all)
        verify_hashes: Check payload hashes. None defers to
            FEATURE_RECEIPT_VERIFY_ON_REPLAY_ENABLED.

    Returns:
        (ClaimRegistry, VolumeLedger)

    Raises:
        StopRule: Missing or duplicate genesis, tampered receipt, unknown
            receipt type, or an operation that no longer replays cleanly
    """
    if verify_hashes is None:
        verify_hashes = features.FEATURE_RECEIPT_VERIFY_ON_REPLAY_ENABLED
    if tenant_id is not None:
        receipts = [r for r in receipts if r.get("tenant_id") == tenant_id]

    genesis = find_genesis(receipts)
    if genesis is None:
        raise StopRule("No registry_genesis receipt; run init first")

    clock = FixedClock()
    common = {
        "clock": clock,
        "emitter": build_receipt,
        "tenant_id": genesis.get("tenant_id", DEFAULT_TENANT_ID),
    }
    # Resolutions already accepted into the trail are replayed as they happened
    registry = ClaimRegistry(genesis["authority"], terminal_guard=False, **common)
    volumes = VolumeLedger(**common)

    for r in receipts:
        rt = r.get("receipt_type")

        if verify_hashes and not verify_payload_hash(r):
            raise StopRule(f"Hash mismatch in {rt} receipt {r.get('payload_hash', '')[:16]}")

        if rt in INFORMATIONAL_TYPES:
            continue

        if rt == GENESIS_TYPE:
            if r is not genesis:
                raise StopRule("Duplicate registry_genesis receipt")

        elif rt == "claim_submitted":
            result = registry.submit_claim(
                r["business"], r["date"], r["waste_type"],
                r["volume"], r["recycled_volume"], bytes.fromhex(r["evidence_hash"]),
            )
            _expect(result, r)
            if result.value != r["claim_id"]:
                raise StopRule(f"Claim id drift: trail has {r['claim_id']}, replay issued {result.value}")

        elif rt == "claim_verified":
            clock.height = r["block_height"]
            _expect(registry.verify_claim(r["verifier"], r["claim_id"]), r)

        elif rt == "claim_rejected":
            clock.height = r["block_height"]
            _expect(registry.reject_claim(r["verifier"], r["claim_id"]), r)

        elif rt == "authority_transferred":
            _expect(registry.transfer_authority(r["caller"], r["new_authority"]), r)

        elif rt == "waste_volume_recorded":
            clock.height = r["block_height"]
            _expect(volumes.record_waste_volume(
                r["collector"], r["business"], r["date"],
                r["general"], r["recyclable"], r["organic"], r["hazardous"],
            ), r)

        else:
            raise StopRule(f"Unknown receipt type in trail: {rt}")

    return registry, volumes


def open_ledger(
    path: str,
    clock=None,
    tenant_id: str | None = None,
) -> tuple[LedgerStore, ClaimRegistry, VolumeLedger]:
    """Replay the trail at path and return live components bound to it.

    New operations on the returned components emit receipts to stdout and
    append them to the same store. The store remembers how many receipts were
    replayed, so if another writer extends the trail first the next append
    raises StopRule instead of reusing ids. Wrap the call and the operations
    in LedgerStore(path).session() to wait for other writers instead.
    """
    store = LedgerStore(path)
    receipts = store.read_all()
    registry, volumes = replay(receipts, tenant_id=tenant_id)
    store.expected_count = len(receipts)

    for component in (registry, volumes):
        component.store = store
        component.emitter = emit_receipt
        component.clock = clock if clock is not None else system_clock
    registry.terminal_guard = None

    return store, registry, volumes
