"""
BOM expansion for MRP.

Explodes each outstanding order one level through its BOM template and
sums the resulting material demand across all orders. A material needed
by several templates ends up as a single gross requirement.

Expansion of a large order set can be split into partitions; each
partition builds its own per-material map and the maps are merged in
partition order, so the result matches a sequential run exactly.
"""

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, Optional, Sequence

from mrp.config.schema import MixedUnitPolicy, MrpConfig, get_default_config
from mrp.engine.orders import OutstandingOrder
from mrp.engine.validation import ValidationResult
from mrp.models.bom import BOMLine
from mrp.models.requirements import DataIssue

logger = logging.getLogger(__name__)


@dataclass
class GrossRequirement:
    """Total demand for one material before netting."""

    material_id: str
    material_name: str
    unit: str
    gross_required: Decimal


@dataclass
class _PartialDemand:
    """Per-partition accumulator for one material."""

    names: set[str] = field(default_factory=set)
    qty_by_unit: dict[str, Decimal] = field(default_factory=dict)

    def add(self, name: Optional[str], unit: str, qty: Decimal) -> None:
        if name is not None:
            self.names.add(name)
        self.qty_by_unit[unit] = self.qty_by_unit.get(unit, Decimal("0")) + qty

    def absorb(self, other: "_PartialDemand") -> None:
        self.names |= other.names
        for unit, qty in other.qty_by_unit.items():
            self.qty_by_unit[unit] = self.qty_by_unit.get(unit, Decimal("0")) + qty


@dataclass
class ExpansionResult:
    """Result of expanding outstanding orders through their BOMs."""

    requirements: dict[str, GrossRequirement]  # Material id -> demand
    validation: ValidationResult = field(default_factory=ValidationResult)


def index_bom_lines(bom_lines: Iterable[BOMLine]) -> dict[str, list[BOMLine]]:
    """Group BOM lines by template, keeping line order."""
    by_template: dict[str, list[BOMLine]] = {}
    for line in bom_lines:
        by_template.setdefault(line.bom_template_id, []).append(line)
    return by_template


class BOMExpander:
    """Turns outstanding orders into gross material requirements.

    gross(material) = sum over orders and their BOM lines of
    qty_per_unit * outstanding_qty
    """

    def __init__(self, config: Optional[MrpConfig] = None):
        """Initialize the expander.

        Args:
            config: Engine configuration (uses defaults if None)
        """
        self.config = config or get_default_config()

    def expand(
        self,
        orders: Sequence[OutstandingOrder],
        bom_lines: Iterable[BOMLine],
    ) -> ExpansionResult:
        """Expand orders into gross requirements.

        Args:
            orders: Outstanding orders from the OrderAggregator
            bom_lines: BOM lines for (at least) the referenced templates

        Returns:
            ExpansionResult with one GrossRequirement per material
        """
        lines_by_template = index_bom_lines(bom_lines)

        merged: dict[str, _PartialDemand] = {}
        for partial in self._expand_partitions(orders, lines_by_template):
            for material_id, demand in partial.items():
                if material_id in merged:
                    merged[material_id].absorb(demand)
                else:
                    merged[material_id] = demand

        validation = ValidationResult()
        requirements = {
            material_id: self._resolve_units(material_id, demand, validation)
            for material_id, demand in merged.items()
        }

        return ExpansionResult(
            requirements=requirements,
            validation=validation,
        )

    def _expand_partitions(
        self,
        orders: Sequence[OutstandingOrder],
        lines_by_template: dict[str, list[BOMLine]],
    ) -> list[dict[str, _PartialDemand]]:
        """Expand orders sequentially or across worker threads."""
        parallel = self.config.parallel
        if parallel.max_workers <= 1 or len(orders) <= parallel.min_orders_per_chunk:
            return [self._expand_chunk(orders, lines_by_template)]

        chunk_size = max(
            parallel.min_orders_per_chunk,
            math.ceil(len(orders) / parallel.max_workers),
        )
        chunks = [orders[i:i + chunk_size] for i in range(0, len(orders), chunk_size)]
        logger.debug("Expanding %d orders in %d partitions", len(orders), len(chunks))

        with ThreadPoolExecutor(max_workers=parallel.max_workers) as pool:
            # map() yields in submission order, which keeps the merge deterministic
            return list(pool.map(
                lambda chunk: self._expand_chunk(chunk, lines_by_template),
                chunks,
            ))

    def _expand_chunk(
        self,
        orders: Sequence[OutstandingOrder],
        lines_by_template: dict[str, list[BOMLine]],
    ) -> dict[str, _PartialDemand]:
        default_unit = self.config.defaults.unit
        demand: dict[str, _PartialDemand] = {}

        for order in orders:
            for line in lines_by_template.get(order.bom_template_id, []):
                entry = demand.get(line.material_id)
                if entry is None:
                    entry = demand[line.material_id] = _PartialDemand()
                entry.add(
                    line.material_name,
                    line.unit or default_unit,
                    line.qty_per_unit * order.outstanding_qty,
                )

        return demand

    def _resolve_units(
        self,
        material_id: str,
        demand: _PartialDemand,
        validation: ValidationResult,
    ) -> GrossRequirement:
        """Collapse per-unit totals into one requirement per material.

        The reported unit is the one carrying the largest quantity, ties
        going to the alphabetically first unit, so record order never
        changes the outcome.
        """
        units = sorted(demand.qty_by_unit, key=lambda u: (-demand.qty_by_unit[u], u))
        unit = units[0]
        policy = self.config.units.mixed_unit_policy

        if len(units) > 1 and policy == MixedUnitPolicy.REJECT:
            gross = demand.qty_by_unit[unit]
            validation.add_issue(DataIssue(
                dataset="bom_lines",
                record_id=material_id,
                message=(
                    f"Material required in mixed units {units}; "
                    f"only demand in '{unit}' was counted"
                ),
            ))
        else:
            gross = sum(demand.qty_by_unit.values(), Decimal("0"))
            if len(units) > 1 and policy == MixedUnitPolicy.FLAG:
                validation.add_issue(DataIssue(
                    dataset="bom_lines",
                    record_id=material_id,
                    message=(
                        f"Material required in mixed units {units}; "
                        f"quantities were summed as '{unit}'"
                    ),
                ))

        name = min(demand.names) if demand.names else self.config.defaults.material_name
        return GrossRequirement(
            material_id=material_id,
            material_name=name,
            unit=unit,
            gross_required=gross,
        )
