"""Tests for the order aggregation stage."""

from decimal import Decimal

from mrp.config.schema import MrpConfig
from mrp.engine.orders import OrderAggregator, OutstandingOrder
from mrp.models.orders import ProductionOrder


def _order(order_id="1", bom="B", ordered=10, completed=0, status="planned"):
    return ProductionOrder(
        id=order_id,
        bom_template_id=bom,
        ordered_qty=ordered,
        completed_qty=completed,
        status=status,
    )


class TestOrderAggregator:
    """Tests for OrderAggregator."""

    def test_outstanding_quantity(self):
        """Each active order is paired with its remaining quantity."""
        result = OrderAggregator().aggregate([_order(ordered=10, completed=4)])

        assert result == [OutstandingOrder(order_id="1", bom_template_id="B", outstanding_qty=Decimal("6"))]

    def test_inactive_statuses_excluded(self):
        """Completed and cancelled orders produce no demand."""
        orders = [
            _order("1", status="planned"),
            _order("2", status="in_progress"),
            _order("3", status="completed"),
            _order("4", status="cancelled"),
        ]
        result = OrderAggregator().aggregate(orders)

        assert [o.order_id for o in result] == ["1", "2"]

    def test_fully_produced_orders_excluded(self):
        """Orders with nothing left to produce are dropped."""
        orders = [
            _order("1", ordered=5, completed=5),
            _order("2", ordered=5, completed=8),
            _order("3", ordered=0, completed=0),
        ]
        assert OrderAggregator().aggregate(orders) == []

    def test_orders_without_bom_excluded(self):
        """Orders with no BOM template are skipped without error."""
        orders = [_order("1", bom=None), _order("2", bom="")]
        assert OrderAggregator().aggregate(orders) == []

    def test_input_order_preserved(self):
        """Output keeps the order of the input."""
        orders = [_order("3"), _order("1"), _order("2")]
        result = OrderAggregator().aggregate(orders)

        assert [o.order_id for o in result] == ["3", "1", "2"]

    def test_custom_active_statuses(self):
        """Configured statuses decide which orders participate."""
        config = MrpConfig.from_dict({"orders": {"active_statuses": ["in_progress"]}})
        orders = [_order("1", status="planned"), _order("2", status="in_progress")]

        result = OrderAggregator(config).aggregate(orders)
        assert [o.order_id for o in result] == ["2"]

    def test_empty_input(self):
        assert OrderAggregator().aggregate([]) == []

    def test_active_includes_orders_without_demand(self):
        """Active orders count by status alone."""
        orders = [
            _order("1"),
            _order("2", ordered=5, completed=5),
            _order("3", bom=None),
            _order("4", status="completed"),
        ]
        active = OrderAggregator().active(orders)

        assert [o.id for o in active] == ["1", "2", "3"]
