"""
Production order models for the MRP engine.

Production orders are owned by order management; the engine only reads
them to work out how much of each order is still to be produced.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _to_identifier(value: Any) -> Any:
    """Accept numeric identifiers from the storage layer as strings."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


Identifier = Annotated[str, BeforeValidator(_to_identifier)]


class OrderStatus(str, Enum):
    """Lifecycle states of a production order."""

    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ProductionOrder(BaseModel):
    """A production order as seen by the planner.

    Quantities are validated at construction; negative values never
    reach the aggregation stage.
    """

    model_config = ConfigDict(frozen=True)

    id: Identifier = Field(description="Order identifier")
    bom_template_id: Optional[Identifier] = Field(
        default=None, description="BOM template used to produce the order"
    )
    ordered_qty: Decimal = Field(ge=0, description="Quantity to produce")
    completed_qty: Decimal = Field(
        default=Decimal("0"), ge=0, description="Quantity already produced"
    )
    status: OrderStatus = Field(description="Current order status")

    @property
    def outstanding_qty(self) -> Decimal:
        """Quantity still to be produced, never below zero."""
        return max(Decimal("0"), self.ordered_qty - self.completed_qty)

    def is_active(self, statuses: Optional[list[str]] = None) -> bool:
        """Check if the order is in one of the demand-generating statuses."""
        if statuses is None:
            statuses = [OrderStatus.PLANNED.value, OrderStatus.IN_PROGRESS.value]
        return self.status.value in statuses
