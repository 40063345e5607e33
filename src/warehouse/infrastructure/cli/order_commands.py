"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from warehouse.application.add_order_line import AddOrderLineHandler
from warehouse.application.create_order import CreateOrderHandler
from warehouse.application.delete_order import DeleteOrderHandler
from warehouse.application.dto import OrderDTO
from warehouse.application.fulfill_order import FulfillOrderHandler
from warehouse.application.process_order import ProcessOrderHandler
from warehouse.application.show_order import ShowOrderHandler
from warehouse.application.unhold_orders import UnholdOrdersHandler
from warehouse.domain.exceptions import DomainException
from warehouse.infrastructure.bootstrap import bootstrap


@click.command("create")
def order_create() -> None:
    """Create a new, empty order."""
    services = bootstrap()
    order = CreateOrderHandler(services.uow_factory()).handle()
    click.echo(f"Order #{order.id} created  (status={order.status.value})")


@click.command("add-line")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--gtin", required=True, help="GTIN of the demanded product.")
def order_add_line(order_id: int, gtin: str) -> None:
    """Add one unit of demand to an order."""
    services = bootstrap()
    handler = AddOrderLineHandler(services.uow_factory(), services.dispatcher)

    try:
        line = handler.handle(order_id=order_id, gtin=gtin)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    services.worker.run_pending()
    click.echo(f"Line #{line.id} ({line.gtin}) added to order #{order_id}")


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at}")
    if dto.removed_at:
        click.echo(f"Removed:  {dto.removed_at}")
    click.echo()

    click.echo(f"  {'Line':<6} {'GTIN':<15} {'Fulfilled':>9} {'Inventory':>10} {'Location':<15}")
    click.echo(f"  {'-'*59}")
    for line in dto.lines:
        click.echo(
            f"  {line.id:<6} {line.gtin:<15} {'yes' if line.fulfilled else 'no':>9} "
            f"{line.inventory_id or '-':>10} {line.location or '-':<15}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show an order with the pairing state of every line."""
    services = bootstrap()
    handler = ShowOrderHandler(services.uow_factory())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("process")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to process.")
def order_process(order_id: int) -> None:
    """Evaluate all lines and settle the order status."""
    services = bootstrap()
    handler = ProcessOrderHandler(services.uow_factory())

    try:
        status = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} processed, status {status.value}.")


@click.command("fulfill")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to fulfill.")
def order_fulfill(order_id: int) -> None:
    """Mark an open order as fulfilled."""
    services = bootstrap()
    handler = FulfillOrderHandler(services.uow_factory())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} fulfilled.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete an order and release its inventory."""
    services = bootstrap()
    handler = DeleteOrderHandler(services.uow_factory(), services.queue)

    try:
        freed = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    services.worker.run_pending()
    click.echo(f"Order #{order_id} deleted, {len(freed)} unit(s) released.")


@click.command("unhold")
def order_unhold() -> None:
    """Process every order left on hold."""
    services = bootstrap()
    processed = UnholdOrdersHandler(services.uow_factory()).handle()
    click.echo(f"{len(processed)} order(s) taken off hold.")
