"""Integration tests for the ReplaceOrderLine use case."""

import pytest

from warehouse.application.replace_order_line import ReplaceOrderLineHandler
from warehouse.application.work_items import PairOrderLine
from warehouse.domain.events import LineReplaced
from warehouse.domain.exceptions import (
    EntityNotFoundError,
    LineNotFulfilledForReplace,
    ValidationError,
)
from warehouse.domain.model.order import OrderStatus
from tests.fakes import (
    FakeDatabase,
    FakeReservationRepository,
    FakeUnitOfWork,
    assert_reservation_invariants,
    make_services,
    seed_inventory,
    seed_line,
    seed_location,
    seed_order,
)

GTIN = "1300000000000"


def _replace(db, services, line_id):
    return ReplaceOrderLineHandler(FakeUnitOfWork(db), services.dispatcher).handle(line_id)


def _recorder(services):
    published = []
    services.dispatcher.subscribe(LineReplaced, published.append)
    return published


class TestReplaceSucceeds:

    def test_new_line_takes_the_spare_unit(self):
        db = FakeDatabase()
        services = make_services(db)
        published = _recorder(services)
        location = seed_location(db)
        unit_a = seed_inventory(db, GTIN, location)
        unit_b = seed_inventory(db, GTIN, location)
        order = seed_order(db)
        line = seed_line(db, order, GTIN, inventory=unit_a)

        new_line = _replace(db, services, line.id)

        reservations = FakeReservationRepository(db)
        assert reservations.for_line(new_line.id).inventory_id == unit_b.id
        assert new_line.gtin == GTIN
        assert line.id not in db.lines
        assert db.inventory[unit_a.id].is_removed
        assert not reservations.for_inventory(unit_a.id).exists
        assert db.orders[order.id].status is OrderStatus.CREATED

        assert len(published) == 1
        assert published[0].inventory.id == unit_a.id
        assert published[0].line.id == new_line.id
        assert published[0].order.id == order.id
        assert_reservation_invariants(db)

    def test_open_order_is_reopened_after_the_hold(self):
        db = FakeDatabase()
        services = make_services(db)
        location = seed_location(db)
        unit_a = seed_inventory(db, GTIN, location)
        seed_inventory(db, GTIN, location)
        order = seed_order(db, OrderStatus.OPEN)
        line = seed_line(db, order, GTIN, inventory=unit_a)

        _replace(db, services, line.id)

        assert db.orders[order.id].status is OrderStatus.OPEN
        assert_reservation_invariants(db)


class TestReplaceCausesBackorder:

    def test_only_unit_written_off(self):
        db = FakeDatabase()
        services = make_services(db)
        published = _recorder(services)
        unit = seed_inventory(db, GTIN, seed_location(db))
        order = seed_order(db, OrderStatus.OPEN)
        line = seed_line(db, order, GTIN, inventory=unit)

        new_line = _replace(db, services, line.id)

        assert not FakeReservationRepository(db).for_line(new_line.id).is_fulfilled
        assert db.inventory[unit.id].is_removed
        assert db.orders[order.id].status is OrderStatus.BACKORDER
        assert published[0].order.status is OrderStatus.BACKORDER
        assert_reservation_invariants(db)

    def test_later_stock_reopens_the_order(self):
        db = FakeDatabase()
        services = make_services(db)
        location = seed_location(db)
        unit = seed_inventory(db, GTIN, location)
        order = seed_order(db, OrderStatus.OPEN)
        line = seed_line(db, order, GTIN, inventory=unit)
        new_line = _replace(db, services, line.id)

        restock = seed_inventory(db, GTIN, location)
        services.worker.dispatch(PairOrderLine(line_id=new_line.id))

        assert FakeReservationRepository(db).for_line(new_line.id).inventory_id == restock.id
        assert db.orders[order.id].status is OrderStatus.OPEN


class TestReplaceRejected:

    def test_unpaired_line(self):
        db = FakeDatabase()
        services = make_services(db)
        published = _recorder(services)
        line = seed_line(db, seed_order(db), GTIN)

        with pytest.raises(LineNotFulfilledForReplace, match="This order line can not be replaced."):
            _replace(db, services, line.id)

        assert list(db.lines) == [line.id]
        assert published == []

    def test_fulfilled_order_is_left_untouched(self):
        db = FakeDatabase()
        services = make_services(db)
        published = _recorder(services)
        location = seed_location(db)
        unit = seed_inventory(db, GTIN, location)
        seed_inventory(db, GTIN, location)
        order = seed_order(db, OrderStatus.FULFILLED)
        line = seed_line(db, order, GTIN, inventory=unit)
        before = db.snapshot()

        with pytest.raises(ValidationError):
            _replace(db, services, line.id)

        assert db.snapshot() == before
        assert published == []

    def test_unknown_line(self):
        db = FakeDatabase()
        with pytest.raises(EntityNotFoundError):
            _replace(db, make_services(db), 3)


class TestReplaceUnderContention:

    def test_lost_inline_race_is_retried_by_the_worker(self):
        db = FakeDatabase()
        services = make_services(db)
        location = seed_location(db)
        unit_a = seed_inventory(db, GTIN, location)
        unit_b = seed_inventory(db, GTIN, location)
        order = seed_order(db)
        line = seed_line(db, order, GTIN, inventory=unit_a)
        db.locked.add(("inventory", unit_b.id))

        new_line = _replace(db, services, line.id)

        reservations = FakeReservationRepository(db)
        assert not reservations.for_line(new_line.id).is_fulfilled
        assert db.inventory[unit_a.id].is_removed
        assert services.queue.get_nowait() == PairOrderLine(line_id=new_line.id, attempt=2)

        db.locked.clear()
        services.worker.dispatch(PairOrderLine(line_id=new_line.id, attempt=2))
        assert reservations.for_line(new_line.id).inventory_id == unit_b.id
        assert_reservation_invariants(db)
