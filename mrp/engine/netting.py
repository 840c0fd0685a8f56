"""
Supply netting for MRP.

Combines gross requirements with stock on hand, reserved stock and
quantities already on open purchase orders:

    available       = on_hand - reserved + on_order
    net_requirement = max(0, gross_required - available)

``available`` is left unclamped so over-reservation stays visible; only
the net requirement is clamped at zero. A material with no stock or
supply records nets against zero, i.e. it is reported fully short.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from mrp.config.schema import MrpConfig, get_default_config
from mrp.engine.bom import GrossRequirement
from mrp.models.requirements import MaterialRequirement
from mrp.models.supply import PendingSupply, StockRecord

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


@dataclass
class SupplyPosition:
    """Aggregated supply for one material across warehouses and POs."""

    on_hand: Decimal = ZERO
    reserved: Decimal = ZERO
    on_order: Decimal = ZERO


class SupplyNettingEngine:
    """Nets gross requirements against available supply."""

    def __init__(self, config: Optional[MrpConfig] = None):
        """Initialize the netting engine.

        Args:
            config: Engine configuration (uses defaults if None)
        """
        self.config = config or get_default_config()

    def supply_positions(
        self,
        material_ids: Iterable[str],
        stock: Iterable[StockRecord],
        pending_supply: Iterable[PendingSupply],
    ) -> dict[str, SupplyPosition]:
        """Aggregate stock and open supply for the given materials.

        Records for materials outside ``material_ids`` are ignored; the
        planner reports requirement-driven rows only.

        Args:
            material_ids: Materials with a gross requirement
            stock: Stock records, possibly several per material
            pending_supply: Open purchase order lines

        Returns:
            Dictionary of material id -> supply position
        """
        positions = {material_id: SupplyPosition() for material_id in material_ids}

        for record in stock:
            position = positions.get(record.material_id)
            if position is None:
                continue
            position.on_hand += record.on_hand_qty
            position.reserved += record.reserved_qty

        open_statuses = self.config.supply.open_statuses
        for line in pending_supply:
            position = positions.get(line.material_id)
            if position is None or not line.is_open(open_statuses):
                continue
            position.on_order += line.qty

        return positions

    def net(
        self,
        gross: dict[str, GrossRequirement],
        stock: Iterable[StockRecord],
        pending_supply: Iterable[PendingSupply],
    ) -> list[MaterialRequirement]:
        """Compute net requirements for every material with demand.

        Args:
            gross: Material id -> gross requirement from the BOMExpander
            stock: Stock records
            pending_supply: Open purchase order lines

        Returns:
            One MaterialRequirement per material in ``gross``, in the
            same order
        """
        required = {
            material_id: requirement
            for material_id, requirement in gross.items()
            if requirement.gross_required > 0
        }
        positions = self.supply_positions(required, stock, pending_supply)

        requirements = []
        for material_id, requirement in required.items():
            position = positions[material_id]
            requirements.append(MaterialRequirement(
                material_id=material_id,
                material_name=requirement.material_name,
                unit=requirement.unit,
                gross_required=requirement.gross_required,
                on_hand=position.on_hand,
                reserved=position.reserved,
                on_order=position.on_order,
            ))

        short = sum(1 for r in requirements if r.is_shortage)
        logger.debug("Netted %d materials, %d short", len(requirements), short)
        return requirements
