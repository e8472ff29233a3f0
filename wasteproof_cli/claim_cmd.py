"""Claim commands: submit, verify, reject, show, stats, transfer."""
import sys

import click

from .output import error_box, print_json, success_box
from .state import load


def _denied(title: str, result) -> None:
    error_box(f"{title}: DENIED", f"{result.error.name} (code {result.error.value})")
    sys.exit(1)


@click.group()
def claim():
    """Recycling claim registry operations."""
    pass


@claim.command()
@click.option('--caller', required=True, help='Submitting business')
@click.option('--date', 'date_key', required=True, type=int, help='Date key, e.g. 20230501')
@click.option('--waste-type', required=True, help='Waste category label')
@click.option('--volume', required=True, type=int, help='Total reported volume')
@click.option('--recycled', required=True, type=int, help='Recycled volume')
@click.option('--evidence', required=True, help='Evidence hash as hex')
@click.pass_context
def submit(ctx, caller: str, date_key: int, waste_type: str, volume: int,
           recycled: int, evidence: str):
    """Submit a recycling claim."""
    try:
        evidence_hash = bytes.fromhex(evidence)
    except ValueError:
        raise click.BadParameter("must be hex", param_hint="--evidence")

    try:
        _, registry, _ = load(ctx)
        result = registry.submit_claim(caller, date_key, waste_type, volume, recycled, evidence_hash)
        if not result.ok:
            _denied("Claim Submit", result)

        success_box("Claim Submit: PENDING", [
            ("Claim", str(result.value)),
            ("Business", caller),
            ("Volume", f"{recycled}/{volume}"),
        ], f"wasteproof claim verify {result.value} --caller <authority>")
    except Exception as e:
        error_box("Claim Submit: ERROR", str(e))
        sys.exit(2)


def _resolve(ctx, action: str, claim_id: int, caller: str) -> None:
    title = f"Claim {action.capitalize()}"
    try:
        _, registry, _ = load(ctx)
        operation = registry.verify_claim if action == "verify" else registry.reject_claim
        result = operation(caller, claim_id)
        if not result.ok:
            _denied(title, result)

        resolved = registry.get_claim(claim_id)
        success_box(f"{title}: {resolved.status.name}", [
            ("Claim", str(claim_id)),
            ("Verifier", caller),
            ("Time", str(resolved.verification_time)),
        ], f"wasteproof claim stats {resolved.business}")
    except Exception as e:
        error_box(f"{title}: ERROR", str(e))
        sys.exit(2)


@claim.command()
@click.argument('claim_id', type=int)
@click.option('--caller', required=True, help='Authority identity')
@click.pass_context
def verify(ctx, claim_id: int, caller: str):
    """Verify a claim and update business stats."""
    _resolve(ctx, "verify", claim_id, caller)


@claim.command()
@click.argument('claim_id', type=int)
@click.option('--caller', required=True, help='Authority identity')
@click.pass_context
def reject(ctx, claim_id: int, caller: str):
    """Reject a claim."""
    _resolve(ctx, "reject", claim_id, caller)


@claim.command()
@click.argument('claim_id', type=int)
@click.pass_context
def show(ctx, claim_id: int):
    """Show a claim as JSON."""
    try:
        _, registry, _ = load(ctx)
        found = registry.get_claim(claim_id)
        if found is None:
            error_box("Claim Show: NOT FOUND", f"No claim {claim_id}")
            sys.exit(1)
        print_json(found.to_dict())
    except Exception as e:
        error_box("Claim Show: ERROR", str(e))
        sys.exit(2)


@claim.command()
@click.argument('business')
@click.pass_context
def stats(ctx, business: str):
    """Show a business's recycling stats as JSON."""
    try:
        _, registry, _ = load(ctx)
        print_json(registry.get_business_stats(business).to_dict())
    except Exception as e:
        error_box("Claim Stats: ERROR", str(e))
        sys.exit(2)


@claim.command()
@click.argument('new_authority')
@click.option('--caller', required=True, help='Current authority')
@click.pass_context
def transfer(ctx, new_authority: str, caller: str):
    """Transfer the authority role."""
    try:
        _, registry, _ = load(ctx)
        result = registry.transfer_authority(caller, new_authority)
        if not result.ok:
            _denied("Authority Transfer", result)

        success_box("Authority Transfer: SUCCESS", [
            ("From", caller),
            ("To", new_authority),
        ], "wasteproof ledger status")
    except Exception as e:
        error_box("Authority Transfer: ERROR", str(e))
        sys.exit(2)
