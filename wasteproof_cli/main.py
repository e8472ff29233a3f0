"""WasteProof CLI entry point - assembles all command groups."""
import click

from wasteproof.constants import DEFAULT_LEDGER_PATH, DEFAULT_TENANT_ID

from . import __version__
from .claim_cmd import claim
from .ledger_cmd import init, ledger
from .volume_cmd import volume


@click.group()
@click.version_option(version=__version__)
@click.option('--ledger', 'ledger_path', default=DEFAULT_LEDGER_PATH,
              envvar='WASTEPROOF_LEDGER', show_default=True,
              help='Receipt trail to replay and append to')
@click.option('--height', type=int, default=None,
              help='Block height for this call (default: wall clock)')
@click.option('--tenant', default=DEFAULT_TENANT_ID, show_default=True,
              help='Tenant ID')
@click.pass_context
def cli(ctx: click.Context, ledger_path: str, height: int | None, tenant: str):
    """WasteProof: recycling claims and waste volumes, with receipts."""
    ctx.ensure_object(dict)
    ctx.obj["ledger_path"] = ledger_path
    ctx.obj["height"] = height
    ctx.obj["tenant"] = tenant


cli.add_command(init)
cli.add_command(claim)
cli.add_command(volume)
cli.add_command(ledger)


if __name__ == "__main__":
    cli()
