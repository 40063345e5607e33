"""CLI commands for the pairing worker pool."""

from __future__ import annotations

import click

from warehouse.application.show_inventory import ShowInventoryHandler
from warehouse.application.work_items import PairInventory
from warehouse.infrastructure.bootstrap import bootstrap


@click.command("run")
@click.option("--workers", type=int, default=None, help="Number of worker threads.")
def worker_run(workers: int | None) -> None:
    """Offer every unreserved unit to the pairing workers."""
    services = bootstrap()
    units = ShowInventoryHandler(services.uow_factory()).handle()
    for unit in units:
        if not unit.reserved:
            services.queue.put(PairInventory(inventory_id=unit.id))

    processed = services.worker.run(workers or services.settings.pairing_workers)
    click.echo(f"Processed {processed} pairing item(s).")
