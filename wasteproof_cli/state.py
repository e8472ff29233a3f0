"""Load live components for a CLI call from the context options."""
import click

from wasteproof.core.component import FixedClock
from wasteproof.ledger import LedgerStore, open_ledger


def load(ctx: click.Context):
    """Replay the configured ledger. Returns (store, registry, volumes).

    The trail stays locked until the command's context closes, so concurrent
    invocations on one ledger run one after another.
    """
    ctx.with_resource(LedgerStore(ctx.obj["ledger_path"]).session())
    height = ctx.obj.get("height")
    clock = FixedClock(height) if height is not None else None
    return open_ledger(ctx.obj["ledger_path"], clock=clock, tenant_id=ctx.obj.get("tenant"))
