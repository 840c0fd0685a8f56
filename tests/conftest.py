"""
Pytest configuration and fixtures for MRP tests.
"""

import json
from pathlib import Path
from typing import Any

import pytest


def make_order(
    order_id: str = "PO-1",
    bom: str | None = "BOM-A",
    ordered: Any = 10,
    completed: Any = 0,
    status: str = "in_progress",
) -> dict[str, Any]:
    """Build a raw production order record."""
    return {
        "id": order_id,
        "bom_template_id": bom,
        "ordered_qty": ordered,
        "completed_qty": completed,
        "status": status,
    }


def make_line(
    material: str = "M",
    qty: Any = 2,
    bom: str = "BOM-A",
    name: str | None = None,
    unit: str | None = "kg",
) -> dict[str, Any]:
    """Build a raw BOM line record."""
    return {
        "bom_template_id": bom,
        "material_id": material,
        "material_name": name if name is not None else f"Material {material}",
        "qty_per_unit": qty,
        "unit": unit,
    }


def make_stock(material: str = "M", on_hand: Any = 0, reserved: Any = 0, **extra: Any) -> dict[str, Any]:
    """Build a raw stock record."""
    return {"material_id": material, "on_hand_qty": on_hand, "reserved_qty": reserved, **extra}


def make_supply(material: str = "M", qty: Any = 0, **extra: Any) -> dict[str, Any]:
    """Build a raw pending supply record."""
    return {"material_id": material, "qty": qty, **extra}


@pytest.fixture
def sample_inputs() -> dict[str, list[dict[str, Any]]]:
    """A small plant: two templates sharing steel, one order finished."""
    return {
        "orders": [
            make_order("PO-1", "BOM-CHAIR", ordered=10, completed=0, status="planned"),
            make_order("PO-2", "BOM-TABLE", ordered=5, completed=2, status="in_progress"),
            make_order("PO-3", "BOM-TABLE", ordered=4, completed=4, status="in_progress"),
            make_order("PO-4", "BOM-CHAIR", ordered=50, completed=0, status="cancelled"),
        ],
        "bom_lines": [
            make_line("STEEL", 2, bom="BOM-CHAIR", name="Steel tube"),
            make_line("SCREW", 8, bom="BOM-CHAIR", name="Screw", unit="pcs"),
            make_line("STEEL", 5, bom="BOM-TABLE", name="Steel tube"),
            make_line("TOP", 1, bom="BOM-TABLE", name="Table top", unit="pcs"),
        ],
        "stock": [
            make_stock("STEEL", on_hand=20, reserved=5, warehouse_id="WH-1"),
            make_stock("STEEL", on_hand=10, reserved=0, warehouse_id="WH-2"),
            make_stock("SCREW", on_hand=100, reserved=0),
            make_stock("GLUE", on_hand=7, reserved=0),
        ],
        "pending_supply": [
            make_supply("STEEL", 4),
            make_supply("TOP", 1, status="confirmed"),
            make_supply("TOP", 9, status="received"),
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path: Path, sample_inputs: dict[str, Any]) -> Path:
    """Write the sample inputs to a JSON snapshot file."""
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(sample_inputs), encoding="utf-8")
    return path
