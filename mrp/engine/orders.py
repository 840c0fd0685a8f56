"""
Order aggregation for MRP.

Selects the production orders that still generate material demand and
works out how much of each remains to be produced.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from mrp.config.schema import MrpConfig, get_default_config
from mrp.models.orders import ProductionOrder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutstandingOrder:
    """An active order paired with its un-produced quantity."""

    order_id: str
    bom_template_id: str
    outstanding_qty: Decimal


class OrderAggregator:
    """Filters production orders down to those with outstanding demand.

    An order participates when:
    1. Its status is one of the configured active statuses
    2. It references a BOM template
    3. Ordered minus completed quantity is above zero
    """

    def __init__(self, config: Optional[MrpConfig] = None):
        """Initialize the aggregator.

        Args:
            config: Engine configuration (uses defaults if None)
        """
        self.config = config or get_default_config()

    def active(self, orders: Iterable[ProductionOrder]) -> list[ProductionOrder]:
        """Return the orders whose status is active, finished or not.

        This is the headline "active orders" count; it includes orders
        that have no BOM template or nothing left to produce.
        """
        statuses = self.config.orders.active_statuses
        return [order for order in orders if order.is_active(statuses)]

    def aggregate(self, orders: Iterable[ProductionOrder]) -> list[OutstandingOrder]:
        """Return outstanding orders in input order.

        Args:
            orders: Production orders from order management

        Returns:
            One entry per order that still needs materials
        """
        statuses = self.config.orders.active_statuses
        outstanding: list[OutstandingOrder] = []
        skipped_without_bom = 0

        for order in orders:
            if not order.is_active(statuses):
                continue
            template_id = order.bom_template_id
            if not template_id:
                skipped_without_bom += 1
                continue
            remaining = order.outstanding_qty
            if remaining <= 0:
                continue
            outstanding.append(OutstandingOrder(
                order_id=order.id,
                bom_template_id=template_id,
                outstanding_qty=remaining,
            ))

        if skipped_without_bom:
            logger.debug("Skipped %d active orders without a BOM template", skipped_without_bom)
        logger.debug("Aggregated %d outstanding orders", len(outstanding))
        return outstanding
