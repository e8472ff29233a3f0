"""Ledger commands: init, status."""
import sys

import click

from wasteproof.core.receipt import StopRule
from wasteproof.ledger import LedgerStore, ledger_status, write_genesis

from .output import error_box, success_box


@click.command()
@click.option('--authority', required=True, help='Initial claim authority')
@click.pass_context
def init(ctx, authority: str):
    """Start a new receipt trail naming the claim authority."""
    try:
        store = LedgerStore(ctx.obj["ledger_path"])
        ctx.with_resource(store.session())
        receipt = write_genesis(store, authority, tenant_id=ctx.obj["tenant"])
        success_box("Ledger Init: SUCCESS", [
            ("Ledger", str(store.path)),
            ("Authority", authority),
            ("Hash", receipt["payload_hash"][:16]),
        ], "wasteproof claim submit --help")
    except StopRule as e:
        error_box("Ledger Init: FAILED", str(e))
        sys.exit(1)
    except Exception as e:
        error_box("Ledger Init: ERROR", str(e))
        sys.exit(2)


@click.group()
def ledger():
    """Receipt trail operations."""
    pass


@ledger.command()
@click.pass_context
def status(ctx):
    """Show receipt counts and Merkle root."""
    try:
        result = ledger_status(LedgerStore(ctx.obj["ledger_path"]))
        rows = [
            ("Ledger", result["ledger_path"]),
            ("Receipts", str(result["receipt_count"])),
            ("Initialized", str(result["initialized"])),
            ("Merkle root", result["merkle_root"][:32]),
        ]
        rows.extend((rt, str(n)) for rt, n in sorted(result["by_type"].items()))
        success_box("Ledger Status", rows, "wasteproof claim stats <business>")
    except Exception as e:
        error_box("Ledger Status: ERROR", str(e))
        sys.exit(2)
