"""
Planning result models.

A MaterialRequirement is derived on every run and never persisted:
``available`` and ``net_requirement`` are computed from the stored
quantities so they can never disagree with them.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class DataIssue(BaseModel):
    """A data-integrity problem found in one input record."""

    model_config = ConfigDict(frozen=True)

    dataset: str = Field(description="Input dataset (orders, bom_lines, stock, pending_supply)")
    index: Optional[int] = Field(default=None, description="Position in the dataset")
    record_id: Optional[str] = Field(default=None, description="Identifier of the record")
    message: str = Field(description="What is wrong with the record")

    def __str__(self) -> str:
        location = self.dataset
        if self.index is not None:
            location += f"[{self.index}]"
        if self.record_id:
            location += f" ({self.record_id})"
        return f"{location}: {self.message}"


class MaterialRequirement(BaseModel):
    """Gross and net requirement for one material."""

    model_config = ConfigDict(frozen=True)

    material_id: str
    material_name: str
    unit: str
    gross_required: Decimal = Field(ge=0)
    on_hand: Decimal = Decimal("0")
    reserved: Decimal = Decimal("0")
    on_order: Decimal = Decimal("0")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def available(self) -> Decimal:
        """Free supply; negative when reservations exceed stock and orders."""
        return self.on_hand - self.reserved + self.on_order

    @computed_field  # type: ignore[prop-decorator]
    @property
    def net_requirement(self) -> Decimal:
        """Quantity still missing after all supply is counted."""
        return max(Decimal("0"), self.gross_required - self.available)

    @property
    def is_shortage(self) -> bool:
        return self.net_requirement > 0


class MrpSummary(BaseModel):
    """Headline counters for a planning run.

    ``total_net`` and ``total_required`` add quantities across materials
    regardless of unit. They indicate severity only; check ``units`` (or
    ``mixes_units``) before reading them as a quantity.
    """

    active_orders: int = Field(ge=0, description="Orders in an active status")
    material_count: int = Field(ge=0, description="Distinct materials required")
    shortage_count: int = Field(ge=0, description="Materials with a net requirement")
    total_net: Decimal = Field(description="Sum of net requirements (mixed units)")
    total_required: Decimal = Field(description="Sum of gross requirements (mixed units)")
    units: list[str] = Field(
        default_factory=list, description="Distinct units among the shortages"
    )

    @property
    def mixes_units(self) -> bool:
        """Check if total_net adds up quantities of different units."""
        return len(self.units) > 1


class MrpResult(BaseModel):
    """Complete output of one planning run."""

    requirements: list[MaterialRequirement] = Field(default_factory=list)
    shortages: list[MaterialRequirement] = Field(default_factory=list)
    summary: MrpSummary
    warnings: list[DataIssue] = Field(default_factory=list)

    def get_requirement(self, material_id: str) -> Optional[MaterialRequirement]:
        """Look up the requirement row for a material."""
        for requirement in self.requirements:
            if requirement.material_id == material_id:
                return requirement
        return None

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize the result to JSON."""
        return self.model_dump_json(indent=indent)
