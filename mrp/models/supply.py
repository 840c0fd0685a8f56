"""
Supply-side models: stock on hand and open purchase order lines.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mrp.models.orders import Identifier


class PurchaseOrderStatus(str, Enum):
    """Purchase order states."""

    DRAFT = "draft"
    SENT = "sent"
    CONFIRMED = "confirmed"
    RECEIVED = "received"
    CLOSED = "closed"
    CANCELLED = "cancelled"


class StockRecord(BaseModel):
    """Stock of one material, optionally for a single warehouse.

    ``reserved_qty`` may exceed ``on_hand_qty``; over-commitment is a
    reportable state rather than an error.
    """

    model_config = ConfigDict(frozen=True)

    material_id: Identifier = Field(min_length=1, description="Material product")
    on_hand_qty: Decimal = Field(default=Decimal("0"), ge=0, description="Quantity on hand")
    reserved_qty: Decimal = Field(
        default=Decimal("0"), ge=0, description="Quantity committed to other demand"
    )
    warehouse_id: Optional[Identifier] = Field(default=None, description="Warehouse")


class PendingSupply(BaseModel):
    """Quantity of a material on an open purchase order line."""

    model_config = ConfigDict(frozen=True)

    material_id: Identifier = Field(min_length=1, description="Material product")
    qty: Decimal = Field(ge=0, description="Quantity ordered, not yet received")
    status: Optional[PurchaseOrderStatus] = Field(
        default=None,
        description="Purchase order status (None = already filtered to open orders)",
    )

    def is_open(self, open_statuses: Optional[list[str]] = None) -> bool:
        """Check if the line still counts as incoming supply."""
        if self.status is None:
            return True
        if open_statuses is None:
            open_statuses = ["draft", "sent", "confirmed"]
        return self.status.value in open_statuses
