"""
Bill of materials models.

Only one level is modelled: the lines of a template list the materials
needed to produce one unit of its finished product. Templates are
versioned upstream; the planner only reads the current line set, so a
template appears here only as the id its lines and orders share.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mrp.models.orders import Identifier


class BOMLine(BaseModel):
    """One material line of a BOM template."""

    model_config = ConfigDict(frozen=True)

    bom_template_id: Identifier = Field(description="Owning template")
    material_id: Identifier = Field(min_length=1, description="Material product")
    material_name: Optional[str] = Field(default=None, description="Display name")
    qty_per_unit: Decimal = Field(gt=0, description="Quantity per finished unit")
    unit: Optional[str] = Field(default=None, description="Unit of measure")
