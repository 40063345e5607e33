"""CLI commands for order lines."""

from __future__ import annotations

import click

from warehouse.application.delete_order_line import DeleteOrderLineHandler
from warehouse.application.replace_order_line import ReplaceOrderLineHandler
from warehouse.domain.exceptions import DomainException
from warehouse.infrastructure.bootstrap import bootstrap


@click.command("replace")
@click.option("--id", "line_id", required=True, type=int, help="Order line ID.")
def line_replace(line_id: int) -> None:
    """Replace a fulfilled line, writing off its inventory unit."""
    services = bootstrap()
    handler = ReplaceOrderLineHandler(services.uow_factory(), services.dispatcher)

    try:
        new_line = handler.handle(line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    services.worker.run_pending()
    click.echo(f"Line #{line_id} replaced by line #{new_line.id}.")


@click.command("delete")
@click.option("--id", "line_id", required=True, type=int, help="Order line ID.")
def line_delete(line_id: int) -> None:
    """Delete a line; a paired unit is offered to other demand."""
    services = bootstrap()
    handler = DeleteOrderLineHandler(services.uow_factory(), services.queue)

    try:
        handler.handle(line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    services.worker.run_pending()
    click.echo(f"Line #{line_id} deleted.")
