"""
Data models for the MRP engine.

This module contains Pydantic models representing:
- Production orders
- Bills of materials
- Stock and pending purchase supply
- Planning results (material requirements, summary, data issues)
"""

from mrp.models.orders import (
    Identifier,
    OrderStatus,
    ProductionOrder,
)
from mrp.models.bom import (
    BOMLine,
)
from mrp.models.supply import (
    PendingSupply,
    PurchaseOrderStatus,
    StockRecord,
)
from mrp.models.requirements import (
    DataIssue,
    MaterialRequirement,
    MrpResult,
    MrpSummary,
)
from mrp.models.snapshot import MrpSnapshot

__all__ = [
    # Orders
    "Identifier",
    "OrderStatus",
    "ProductionOrder",
    # BOM
    "BOMLine",
    # Supply
    "PendingSupply",
    "PurchaseOrderStatus",
    "StockRecord",
    # Results
    "DataIssue",
    "MaterialRequirement",
    "MrpResult",
    "MrpSummary",
    # Snapshot
    "MrpSnapshot",
]
