"""
Input snapshot for a planning run.

The four datasets are read independently by the caller and may not be
mutually consistent; the engine treats them as a best-effort view.
"""

from pydantic import BaseModel, ConfigDict, Field

from mrp.models.bom import BOMLine
from mrp.models.orders import ProductionOrder
from mrp.models.supply import PendingSupply, StockRecord


class MrpSnapshot(BaseModel):
    """Validated, typed inputs for the planning pipeline."""

    model_config = ConfigDict(frozen=True)

    orders: list[ProductionOrder] = Field(default_factory=list)
    bom_lines: list[BOMLine] = Field(default_factory=list)
    stock: list[StockRecord] = Field(default_factory=list)
    pending_supply: list[PendingSupply] = Field(default_factory=list)
