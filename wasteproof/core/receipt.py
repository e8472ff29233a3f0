"""Receipt primitives shared by every WasteProof component.

Functions:
    dual_hash: SHA256:BLAKE3 dual-hash format
    build_receipt: Assemble a receipt with the required fields
    emit_receipt: Build a receipt and print it to stdout
    verify_payload_hash: Recompute a stored receipt's payload_hash
    merkle: Compute Merkle root from item list
    StopRule: Exception for stoprule triggers
"""
import hashlib
import json
from datetime import datetime, timezone

import blake3

from ..constants import DEFAULT_TENANT_ID

# Envelope fields added by build_receipt on top of the payload
ENVELOPE_FIELDS = ("receipt_type", "ts", "payload_hash")


class StopRule(Exception):
    """Raised when stoprule triggers. Never catch silently."""
    pass


def dual_hash(data: bytes | str | dict) -> str:
    """Compute dual hash in format 'sha256hex:blake3hex'.

    Pure function with no side effects.

    Args:
        data: Bytes, string, or dict to hash

    Returns:
        String in format 'sha256hex:blake3hex' (both 64 hex chars)
    """
    if isinstance(data, dict):
        data = json.dumps(data, sort_keys=True, separators=(",", ":"))
    if isinstance(data, str):
        data = data.encode("utf-8")

    sha256_hex = hashlib.sha256(data).hexdigest()
    blake3_hex = blake3.blake3(data).hexdigest()

    return f"{sha256_hex}:{blake3_hex}"


def build_receipt(receipt_type: str, data: dict, tenant_id: str = DEFAULT_TENANT_ID) -> dict:
    """Build a receipt with standard required fields without printing it.

    Args:
        receipt_type: Type of receipt (claim_submitted, operation_denied, ...)
        data: Receipt payload data
        tenant_id: Tenant identifier used when data carries none

    Returns:
        Complete receipt dict with receipt_type, ts, tenant_id, payload_hash
    """
    tenant_id = data.get("tenant_id", tenant_id)

    payload_bytes = json.dumps(data, sort_keys=True).encode("utf-8")
    payload_hash = dual_hash(payload_bytes)

    return {
        "receipt_type": receipt_type,
        "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "tenant_id": tenant_id,
        "payload_hash": payload_hash,
        **data
    }


def emit_receipt(receipt_type: str, data: dict, tenant_id: str = DEFAULT_TENANT_ID) -> dict:
    """Emit a receipt with standard required fields.

    Prints JSON to stdout with flush=True.

    Returns:
        Complete receipt dict
    """
    receipt = build_receipt(receipt_type, data, tenant_id)
    print(json.dumps(receipt, sort_keys=True), flush=True)
    return receipt


def verify_payload_hash(receipt: dict) -> bool:
    """Check that a stored receipt still hashes to its payload_hash.

    Only holds for receipts whose payload carried its own tenant_id, which is
    the case for everything WasteProof components emit.
    """
    payload = {k: v for k, v in receipt.items() if k not in ENVELOPE_FIELDS}
    payload_bytes = json.dumps(payload, sort_keys=True).encode("utf-8")
    return dual_hash(payload_bytes) == receipt.get("payload_hash")


def merkle(items: list) -> str:
    """Compute Merkle root from list of items.

    - Empty list: return dual_hash(b"empty")
    - Hash each item: dual_hash(json.dumps(item, sort_keys=True))
    - Odd count: duplicate last hash
    - Pairwise combine until single root
    """
    if not items:
        return dual_hash(b"empty")

    hashes = [dual_hash(json.dumps(item, sort_keys=True).encode("utf-8"))
              for item in items]

    while len(hashes) > 1:
        if len(hashes) % 2 == 1:
            hashes.append(hashes[-1])

        hashes = [
            dual_hash((hashes[i] + hashes[i + 1]).encode("utf-8"))
            for i in range(0, len(hashes), 2)
        ]

    return hashes[0]
