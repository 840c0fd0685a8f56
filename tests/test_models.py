"""Tests for MRP data models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from mrp.models import (
    BOMLine,
    DataIssue,
    MaterialRequirement,
    MrpSnapshot,
    MrpSummary,
    OrderStatus,
    PendingSupply,
    ProductionOrder,
    PurchaseOrderStatus,
    StockRecord,
)


class TestProductionOrder:
    """Tests for ProductionOrder model."""

    def test_outstanding_quantity(self):
        """Outstanding is ordered minus completed."""
        order = ProductionOrder(id="1", ordered_qty=10, completed_qty=3, status="planned")
        assert order.outstanding_qty == Decimal("7")

    def test_outstanding_clamped_at_zero(self):
        """Over-completion never yields negative outstanding."""
        order = ProductionOrder(id="1", ordered_qty=10, completed_qty=12, status="in_progress")
        assert order.outstanding_qty == 0

    def test_completed_defaults_to_zero(self):
        """Completed quantity is optional."""
        order = ProductionOrder(id="1", ordered_qty=4, status="planned")
        assert order.completed_qty == 0
        assert order.outstanding_qty == 4

    def test_negative_quantities_rejected(self):
        """Negative ordered or completed quantities fail validation."""
        with pytest.raises(ValidationError):
            ProductionOrder(id="1", ordered_qty=-1, status="planned")
        with pytest.raises(ValidationError):
            ProductionOrder(id="1", ordered_qty=5, completed_qty=-2, status="planned")

    def test_unknown_status_rejected(self):
        """Status must be one of the known lifecycle states."""
        with pytest.raises(ValidationError):
            ProductionOrder(id="1", ordered_qty=5, status="shipped")

    def test_numeric_identifiers_become_strings(self):
        """Integer ids from the storage layer are accepted."""
        order = ProductionOrder(id=42, bom_template_id=7, ordered_qty=1, status="planned")
        assert order.id == "42"
        assert order.bom_template_id == "7"

    def test_is_active(self):
        """Only planned and in-progress orders are active by default."""
        assert ProductionOrder(id="1", ordered_qty=1, status="planned").is_active()
        assert ProductionOrder(id="1", ordered_qty=1, status="in_progress").is_active()
        assert not ProductionOrder(id="1", ordered_qty=1, status="completed").is_active()
        assert not ProductionOrder(id="1", ordered_qty=1, status="cancelled").is_active()

    def test_is_active_custom_statuses(self):
        """Active statuses can be narrowed."""
        order = ProductionOrder(id="1", ordered_qty=1, status=OrderStatus.PLANNED)
        assert not order.is_active(["in_progress"])

    def test_orders_are_immutable(self):
        """Input snapshots cannot be mutated by the engine."""
        order = ProductionOrder(id="1", ordered_qty=1, status="planned")
        with pytest.raises(ValidationError):
            order.ordered_qty = Decimal("5")


class TestBOMModels:
    """Tests for BOM template and line models."""

    def test_line_quantity_must_be_positive(self):
        """Zero and negative per-unit quantities are rejected."""
        with pytest.raises(ValidationError):
            BOMLine(bom_template_id="B", material_id="M", qty_per_unit=0)
        with pytest.raises(ValidationError):
            BOMLine(bom_template_id="B", material_id="M", qty_per_unit=-1)

    def test_line_accepts_fractional_quantity(self):
        """Quantities are exact decimals."""
        line = BOMLine(bom_template_id="B", material_id="M", qty_per_unit="0.125")
        assert line.qty_per_unit == Decimal("0.125")

    def test_line_requires_material(self):
        """An empty material id is rejected."""
        with pytest.raises(ValidationError):
            BOMLine(bom_template_id="B", material_id="", qty_per_unit=1)


class TestSupplyModels:
    """Tests for stock and pending supply models."""

    def test_reserved_may_exceed_on_hand(self):
        """Over-commitment is a valid state."""
        record = StockRecord(material_id="M", on_hand_qty=5, reserved_qty=9)
        assert record.reserved_qty > record.on_hand_qty

    def test_negative_stock_rejected(self):
        """Negative stock quantities are malformed."""
        with pytest.raises(ValidationError):
            StockRecord(material_id="M", on_hand_qty=-1)

    def test_pending_supply_without_status_is_open(self):
        """Lines pre-filtered by the caller count as open."""
        assert PendingSupply(material_id="M", qty=5).is_open()

    def test_pending_supply_open_statuses(self):
        """Draft, sent and confirmed purchase orders are open."""
        for status in ("draft", "sent", "confirmed"):
            assert PendingSupply(material_id="M", qty=1, status=status).is_open()
        for status in ("received", "closed", "cancelled"):
            assert not PendingSupply(material_id="M", qty=1, status=status).is_open()

    def test_purchase_order_status_values(self):
        """Status enum covers the purchase order lifecycle."""
        assert PurchaseOrderStatus("sent") == PurchaseOrderStatus.SENT


class TestMaterialRequirement:
    """Tests for MaterialRequirement derived quantities."""

    def test_available_and_net(self):
        """available = on_hand - reserved + on_order; net = gross - available."""
        req = MaterialRequirement(
            material_id="M", material_name="M", unit="kg",
            gross_required=20, on_hand=15, reserved=5, on_order=0,
        )
        assert req.available == 10
        assert req.net_requirement == 10
        assert req.is_shortage

    def test_available_may_be_negative(self):
        """Heavy over-reservation shows as negative availability."""
        req = MaterialRequirement(
            material_id="M", material_name="M", unit="kg",
            gross_required=5, on_hand=2, reserved=10, on_order=1,
        )
        assert req.available == -7
        assert req.net_requirement == 12

    def test_net_never_negative(self):
        """Surplus supply clamps the net requirement at zero."""
        req = MaterialRequirement(
            material_id="M", material_name="M", unit="kg",
            gross_required=5, on_hand=100,
        )
        assert req.net_requirement == 0
        assert not req.is_shortage

    def test_derived_fields_serialized(self):
        """available and net_requirement appear in the serialized row."""
        req = MaterialRequirement(
            material_id="M", material_name="M", unit="kg", gross_required=3,
        )
        data = req.model_dump()
        assert data["available"] == 0
        assert data["net_requirement"] == 3


class TestSummaryAndIssues:
    """Tests for summary and data issue models."""

    def test_mixes_units(self):
        """A summary spanning several units flags mixed totals."""
        summary = MrpSummary(
            active_orders=1, material_count=2, shortage_count=2,
            total_net=Decimal("5"), total_required=Decimal("9"), units=["kg", "pcs"],
        )
        assert summary.mixes_units

    def test_single_unit_not_mixed(self):
        summary = MrpSummary(
            active_orders=1, material_count=1, shortage_count=1,
            total_net=Decimal("5"), total_required=Decimal("5"), units=["kg"],
        )
        assert not summary.mixes_units

    def test_data_issue_str(self):
        """Issues render with dataset, position and record id."""
        issue = DataIssue(dataset="orders", index=3, record_id="PO-9", message="bad qty")
        assert str(issue) == "orders[3] (PO-9): bad qty"


class TestSnapshot:
    """Tests for MrpSnapshot."""

    def test_snapshot_is_frozen(self):
        """A snapshot cannot be changed once validated."""
        snapshot = MrpSnapshot(orders=[
            ProductionOrder(id="1", bom_template_id="B", ordered_qty=1, status="planned"),
        ])
        with pytest.raises(ValidationError):
            snapshot.orders = []
