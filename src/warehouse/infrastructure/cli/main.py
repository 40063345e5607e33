import logging

import click

from warehouse.infrastructure.cli.inventory_commands import inventory_add, inventory_show
from warehouse.infrastructure.cli.line_commands import line_delete, line_replace
from warehouse.infrastructure.cli.location_commands import location_add
from warehouse.infrastructure.cli.order_commands import (
    order_add_line,
    order_create,
    order_delete,
    order_fulfill,
    order_process,
    order_show,
    order_unhold,
)
from warehouse.infrastructure.cli.worker_commands import worker_run
from warehouse.infrastructure.config import Settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """Warehouse inventory reservation and pairing."""
    level = "DEBUG" if verbose else Settings().log_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def location() -> None:
    """Manage locations."""


@cli.group()
def inventory() -> None:
    """Manage inventory units."""


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def line() -> None:
    """Manage order lines."""


@cli.group()
def worker() -> None:
    """Run pairing workers."""


# Register subcommands
location.add_command(location_add)
inventory.add_command(inventory_add)
inventory.add_command(inventory_show)
order.add_command(order_add_line)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_fulfill)
order.add_command(order_process)
order.add_command(order_show)
order.add_command(order_unhold)
line.add_command(line_delete)
line.add_command(line_replace)
worker.add_command(worker_run)
