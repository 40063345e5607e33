"""Unit tests for the Order aggregate, its status machine and order lines."""

import pytest

from warehouse.domain.exceptions import (
    IllegalStatusTransition,
    ImmutableFieldMutation,
    InvalidGtin,
    ValidationError,
)
from warehouse.domain.model.order import (
    LINE_DELETABLE_STATUSES,
    Order,
    OrderLine,
    OrderStatus,
    can_transition,
)


def _order_with_lines(status: OrderStatus, *line_ids: int) -> Order:
    lines = [OrderLine(id=i, order_id=1, gtin="1300000000000") for i in line_ids]
    return Order(id=1, status=status, lines=lines)


class TestTransitionTable:

    @pytest.mark.parametrize(
        "current, target",
        [
            (OrderStatus.CREATED, OrderStatus.OPEN),
            (OrderStatus.CREATED, OrderStatus.BACKORDER),
            (OrderStatus.OPEN, OrderStatus.HOLD),
            (OrderStatus.OPEN, OrderStatus.FULFILLED),
            (OrderStatus.HOLD, OrderStatus.OPEN),
            (OrderStatus.HOLD, OrderStatus.BACKORDER),
            (OrderStatus.BACKORDER, OrderStatus.OPEN),
            (OrderStatus.OPEN, OrderStatus.DELETED),
            (OrderStatus.FULFILLED, OrderStatus.DELETED),
        ],
    )
    def test_allowed(self, current, target):
        assert can_transition(current, target)

    @pytest.mark.parametrize(
        "current, target",
        [
            (OrderStatus.CREATED, OrderStatus.FULFILLED),
            (OrderStatus.BACKORDER, OrderStatus.FULFILLED),
            (OrderStatus.HOLD, OrderStatus.FULFILLED),
            (OrderStatus.FULFILLED, OrderStatus.OPEN),
            (OrderStatus.DELETED, OrderStatus.OPEN),
            (OrderStatus.FULFILLED, OrderStatus.HOLD),
        ],
    )
    def test_forbidden(self, current, target):
        assert not can_transition(current, target)

    def test_deleted_is_terminal(self):
        for target in OrderStatus:
            assert not can_transition(OrderStatus.DELETED, target)

    def test_fulfilled_only_leaves_by_deletion(self):
        exits = [t for t in OrderStatus if can_transition(OrderStatus.FULFILLED, t)]
        assert exits == [OrderStatus.DELETED]

    def test_illegal_transition_raises_and_keeps_status(self):
        order = Order(id=1, status=OrderStatus.CREATED)
        with pytest.raises(IllegalStatusTransition, match="from created to fulfilled"):
            order.transition_to(OrderStatus.FULFILLED)
        assert order.status is OrderStatus.CREATED


class TestProcess:

    def test_all_lines_paired_opens_order(self):
        order = _order_with_lines(OrderStatus.CREATED, 1, 2)
        assert order.process({1: True, 2: True}) is OrderStatus.OPEN

    def test_one_unpaired_line_backorders(self):
        order = _order_with_lines(OrderStatus.CREATED, 1, 2)
        assert order.process({1: True, 2: False}) is OrderStatus.BACKORDER

    def test_missing_snapshot_entry_counts_as_unpaired(self):
        order = _order_with_lines(OrderStatus.CREATED, 1)
        assert order.process({}) is OrderStatus.BACKORDER

    def test_order_without_lines_opens(self):
        order = _order_with_lines(OrderStatus.CREATED)
        assert order.process({}) is OrderStatus.OPEN

    def test_backorder_moves_to_open_once_paired(self):
        order = _order_with_lines(OrderStatus.BACKORDER, 1)
        assert order.process({1: True}) is OrderStatus.OPEN

    def test_hold_is_resettled(self):
        order = _order_with_lines(OrderStatus.HOLD, 1)
        assert order.process({1: False}) is OrderStatus.BACKORDER

    def test_processing_again_without_change_is_a_no_op(self):
        order = _order_with_lines(OrderStatus.OPEN, 1)
        assert order.process({1: True}) is OrderStatus.OPEN

    @pytest.mark.parametrize("status", [OrderStatus.FULFILLED, OrderStatus.DELETED])
    def test_terminal_orders_can_not_be_processed(self, status):
        order = _order_with_lines(status, 1)
        with pytest.raises(IllegalStatusTransition, match="can not be processed"):
            order.process({1: True})


class TestFulfillAndDelete:

    def test_fulfill_open_order(self):
        order = _order_with_lines(OrderStatus.OPEN, 1)
        order.fulfill({1: True})
        assert order.status is OrderStatus.FULFILLED

    def test_fulfill_requires_open(self):
        order = _order_with_lines(OrderStatus.CREATED, 1)
        with pytest.raises(IllegalStatusTransition):
            order.fulfill({1: True})

    def test_fulfill_requires_every_line_paired(self):
        order = _order_with_lines(OrderStatus.OPEN, 1, 2)
        with pytest.raises(ValidationError, match="unpaired lines"):
            order.fulfill({1: True, 2: False})
        assert order.status is OrderStatus.OPEN

    def test_delete_is_a_soft_removal(self):
        order = _order_with_lines(OrderStatus.CREATED, 1)
        order.delete()
        assert order.status is OrderStatus.DELETED
        assert order.is_removed

    def test_fulfilled_order_can_be_deleted(self):
        order = _order_with_lines(OrderStatus.FULFILLED, 1)
        order.delete()
        assert order.status is OrderStatus.DELETED
        assert order.is_removed

    def test_deleted_order_can_not_be_deleted_again(self):
        order = _order_with_lines(OrderStatus.DELETED, 1)
        with pytest.raises(IllegalStatusTransition):
            order.delete()


class TestLineDeletionGate:

    @pytest.mark.parametrize(
        "status", [OrderStatus.CREATED, OrderStatus.BACKORDER, OrderStatus.HOLD]
    )
    def test_allowed(self, status):
        assert Order(id=1, status=status).allows_line_deletion

    @pytest.mark.parametrize(
        "status", [OrderStatus.OPEN, OrderStatus.FULFILLED, OrderStatus.DELETED]
    )
    def test_forbidden(self, status):
        assert status not in LINE_DELETABLE_STATUSES
        assert not Order(id=1, status=status).allows_line_deletion


class TestOrderLine:

    def test_create_validates_gtin(self):
        line = OrderLine.create(1, "1300000000000")
        assert line.id is None
        assert line.gtin == "1300000000000"

    @pytest.mark.parametrize("gtin", [None, "", "not-a-gtin", "1300000000001"])
    def test_create_with_bad_gtin(self, gtin):
        with pytest.raises(InvalidGtin):
            OrderLine.create(1, gtin)

    def test_gtin_can_not_be_reassigned(self):
        line = OrderLine(id=5, order_id=1, gtin="1300000000000")
        with pytest.raises(ImmutableFieldMutation, match="An order line can not be updated."):
            line.gtin = "14000000000003"
        assert line.gtin == "1300000000000"

    def test_order_can_not_be_reassigned(self):
        line = OrderLine(id=5, order_id=1, gtin="1300000000000")
        with pytest.raises(ImmutableFieldMutation):
            line.order_id = 999
        assert line.order_id == 1

    def test_update_rejects_identity_changes_before_applying_any(self):
        line = OrderLine(id=5, order_id=111, gtin="1300000000000")
        with pytest.raises(ImmutableFieldMutation):
            line.update(order_id=111, gtin="14000000000003")
        assert line.gtin == "1300000000000"
        assert line.order_id == 111

    def test_update_with_same_values_is_allowed(self):
        line = OrderLine(id=5, order_id=111, gtin="1300000000000")
        line.update(gtin="1300000000000", order_id=111)
        assert line.gtin == "1300000000000"

    def test_update_unknown_field(self):
        line = OrderLine(id=5, order_id=111, gtin="1300000000000")
        with pytest.raises(ValidationError, match="no attribute 'quantity'"):
            line.update(quantity=2)

    def test_id_is_assignable(self):
        line = OrderLine.create(1, "1300000000000")
        line.id = 42
        assert line.id == 42
