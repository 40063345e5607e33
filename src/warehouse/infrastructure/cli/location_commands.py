"""CLI commands for locations."""

from __future__ import annotations

import click

from warehouse.application.add_location import AddLocationHandler
from warehouse.domain.exceptions import DomainException
from warehouse.infrastructure.bootstrap import bootstrap


@click.command("add")
@click.option("--name", required=True, help="Location name.")
def location_add(name: str) -> None:
    """Add a storage location."""
    services = bootstrap()
    handler = AddLocationHandler(services.uow_factory())

    try:
        location = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Location #{location.id} '{location.name}' added")
