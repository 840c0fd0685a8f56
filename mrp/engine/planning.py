"""
MRP planning pipeline.

Runs the four stages in order over one input snapshot:

    orders -> OrderAggregator -> outstanding orders
           -> BOMExpander      -> gross requirements
           -> SupplyNettingEngine -> net requirements
           -> ShortageReporter -> MrpResult

Every stage is a pure function of its inputs. The engine holds no
state between runs, so one instance can serve many tenants and runs
can execute in parallel.
"""

import logging
from typing import Any, Optional, Sequence

from mrp.config.schema import MrpConfig, get_default_config
from mrp.engine.bom import BOMExpander
from mrp.engine.fetching import SnapshotSource, fetch_snapshot
from mrp.engine.netting import SupplyNettingEngine
from mrp.engine.orders import OrderAggregator
from mrp.engine.reporting import ShortageReporter
from mrp.engine.validation import ValidationResult, parse_snapshot
from mrp.models.requirements import MrpResult
from mrp.models.snapshot import MrpSnapshot

logger = logging.getLogger(__name__)


class MrpEngine:
    """Material requirements planning over production orders.

    Example:
        engine = MrpEngine()
        result = engine.run(orders, bom_lines, stock, pending_supply)
        for shortage in result.shortages:
            print(shortage.material_name, shortage.net_requirement)
    """

    def __init__(self, config: Optional[MrpConfig] = None):
        """Initialize the engine and its stages.

        Args:
            config: Engine configuration (uses defaults if None)
        """
        self.config = config or get_default_config()
        self.aggregator = OrderAggregator(self.config)
        self.expander = BOMExpander(self.config)
        self.netting = SupplyNettingEngine(self.config)
        self.reporter = ShortageReporter()

    def plan(
        self,
        snapshot: MrpSnapshot,
        validation: Optional[ValidationResult] = None,
        strict: bool = False,
    ) -> MrpResult:
        """Run the pipeline on a typed snapshot.

        Args:
            snapshot: Validated inputs
            validation: Issues already found while reading the inputs
            strict: If True, raise instead of reporting data issues

        Returns:
            MrpResult

        Raises:
            DataIntegrityError: In strict mode, if any data issue exists
        """
        issues = ValidationResult()
        if validation is not None:
            issues.merge(validation)

        outstanding = self.aggregator.aggregate(snapshot.orders)
        expansion = self.expander.expand(outstanding, snapshot.bom_lines)
        issues.merge(expansion.validation)

        if strict:
            issues.raise_if_invalid()

        requirements = self.netting.net(
            expansion.requirements, snapshot.stock, snapshot.pending_supply
        )
        result = self.reporter.report(
            requirements,
            active_orders=len(self.aggregator.active(snapshot.orders)),
            warnings=issues.issues,
        )

        logger.info(
            "MRP run: %d active orders, %d materials, %d shortages, %d data issues",
            result.summary.active_orders,
            result.summary.material_count,
            result.summary.shortage_count,
            len(result.warnings),
        )
        return result

    def run(
        self,
        orders: Optional[Sequence[Any]],
        bom_lines: Optional[Sequence[Any]],
        stock: Optional[Sequence[Any]],
        pending_supply: Optional[Sequence[Any]],
        strict: bool = False,
    ) -> MrpResult:
        """Validate raw inputs and run the pipeline.

        Args:
            orders: Production order records
            bom_lines: BOM line records
            stock: Stock records
            pending_supply: Open purchase order lines
            strict: If True, raise instead of reporting data issues

        Returns:
            MrpResult

        Raises:
            IncompleteSnapshotError: If any of the four datasets is None
            DataIntegrityError: In strict mode, if any data issue exists
        """
        snapshot, validation = parse_snapshot(
            orders, bom_lines, stock, pending_supply
        )
        return self.plan(snapshot, validation, strict=strict)

    async def run_from_source(
        self,
        source: SnapshotSource,
        strict: bool = False,
    ) -> MrpResult:
        """Fetch the inputs concurrently, then run the pipeline.

        Raises:
            FetchError: If any input read fails
        """
        raw = await fetch_snapshot(source, timeout=self.config.fetch.timeout_seconds)
        return self.run(
            raw.orders, raw.bom_lines, raw.stock, raw.pending_supply, strict=strict
        )


def run_mrp(
    orders: Optional[Sequence[Any]],
    bom_lines: Optional[Sequence[Any]],
    stock: Optional[Sequence[Any]],
    pending_supply: Optional[Sequence[Any]],
    config: Optional[MrpConfig] = None,
    strict: bool = False,
) -> MrpResult:
    """Run material requirements planning on one input snapshot.

    Args:
        orders: Production order records
        bom_lines: BOM line records
        stock: Stock records
        pending_supply: Open purchase order lines
        config: Engine configuration (uses defaults if None)
        strict: If True, raise instead of reporting data issues

    Returns:
        MrpResult
    """
    engine = MrpEngine(config)
    return engine.run(orders, bom_lines, stock, pending_supply, strict=strict)
