"""WasteProof constants.

All magic numbers live here. No exceptions.
"""

# Fixed-point percentages (basis points, 1/10000)
BASIS_POINTS = 10000

# Carbon offset units credited per unit of recycled volume
CARBON_OFFSET_PER_UNIT = 120

# Evidence hashes are opaque blobs of this length (stored verbatim, not checked)
EVIDENCE_HASH_BYTES = 32

# First claim id handed out by a fresh registry
FIRST_CLAIM_ID = 1

# Receipt trail
DEFAULT_LEDGER_PATH = "receipts.jsonl"
DEFAULT_TENANT_ID = "default"
