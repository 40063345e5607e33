"""CLI commands for inventory units."""

from __future__ import annotations

import click

from warehouse.application.register_inventory import RegisterInventoryHandler
from warehouse.application.show_inventory import ShowInventoryHandler
from warehouse.domain.exceptions import DomainException
from warehouse.infrastructure.bootstrap import bootstrap


@click.command("add")
@click.option("--location", "location_id", required=True, type=int, help="Location ID.")
@click.option("--gtin", required=True, help="GTIN of the unit.")
def inventory_add(location_id: int, gtin: str) -> None:
    """Register one physical unit at a location and pair it."""
    services = bootstrap()
    handler = RegisterInventoryHandler(services.uow_factory(), services.queue)

    try:
        unit = handler.handle(location_id=location_id, gtin=gtin)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    services.worker.run_pending()
    click.echo(f"Inventory #{unit.id} ({unit.gtin}) registered")


@click.command("show")
@click.option("--all", "include_removed", is_flag=True, default=False, help="Include removed units.")
def inventory_show(include_removed: bool) -> None:
    """Show inventory units and whether they are reserved."""
    services = bootstrap()
    units = ShowInventoryHandler(services.uow_factory()).handle(include_removed=include_removed)

    if not units:
        click.echo("No inventory found.")
        return

    click.echo(f"{'ID':<6} {'GTIN':<15} {'Location':<15} {'Reserved':>9} {'Removed':>8}")
    click.echo("-" * 57)
    for unit in units:
        click.echo(
            f"{unit.id:<6} {unit.gtin:<15} {unit.location or '-':<15} "
            f"{'yes' if unit.reserved else 'no':>9} {'yes' if unit.removed else 'no':>8}"
        )
