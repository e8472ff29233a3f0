"""Volume commands: record, show, totals, percentage."""
import sys

import click

from .output import error_box, print_json, success_box
from .state import load


@click.group()
def volume():
    """Waste volume ledger operations."""
    pass


@volume.command()
@click.option('--caller', required=True, help='Collector identity')
@click.option('--business', required=True, help='Business the pickup belongs to')
@click.option('--date', 'date_key', required=True, type=int, help='Date key, e.g. 20230501')
@click.option('--general', default=0, type=int)
@click.option('--recyclable', default=0, type=int)
@click.option('--organic', default=0, type=int)
@click.option('--hazardous', default=0, type=int)
@click.pass_context
def record(ctx, caller: str, business: str, date_key: int, general: int,
           recyclable: int, organic: int, hazardous: int):
    """Record a waste pickup."""
    try:
        _, _, volumes = load(ctx)
        volumes.record_waste_volume(caller, business, date_key, general, recyclable, organic, hazardous)

        success_box("Volume Record: SUCCESS", [
            ("Business", business),
            ("Date", str(date_key)),
            ("Total waste", str(volumes.get_total_waste(business))),
        ], f"wasteproof volume percentage {business}")
    except Exception as e:
        error_box("Volume Record: ERROR", str(e))
        sys.exit(2)


@volume.command()
@click.argument('business')
@click.argument('date_key', type=int)
@click.pass_context
def show(ctx, business: str, date_key: int):
    """Show the stored pickup record for a business and date."""
    try:
        _, _, volumes = load(ctx)
        found = volumes.get_waste_record(business, date_key)
        if found is None:
            error_box("Volume Show: NOT FOUND", f"No record for {business} on {date_key}")
            sys.exit(1)
        print_json(found.to_dict())
    except Exception as e:
        error_box("Volume Show: ERROR", str(e))
        sys.exit(2)


@volume.command()
@click.argument('business')
@click.pass_context
def totals(ctx, business: str):
    """Show a business's category totals as JSON."""
    try:
        _, _, volumes = load(ctx)
        data = volumes.get_business_totals(business).to_dict()
        data["total_waste"] = volumes.get_total_waste(business)
        print_json(data)
    except Exception as e:
        error_box("Volume Totals: ERROR", str(e))
        sys.exit(2)


@volume.command()
@click.argument('business')
@click.pass_context
def percentage(ctx, business: str):
    """Show a business's recycling percentage in basis points."""
    try:
        _, _, volumes = load(ctx)
        bps = volumes.get_recycling_percentage(business)
        success_box("Recycling Percentage", [
            ("Business", business),
            ("Basis points", str(bps)),
            ("Percent", f"{bps / 100:.2f}%"),
        ], f"wasteproof volume totals {business}")
    except Exception as e:
        error_box("Recycling Percentage: ERROR", str(e))
        sys.exit(2)
