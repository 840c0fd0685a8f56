"""
MRP planning engine.

This module contains the planning stages:
- Order aggregation (outstanding production)
- BOM expansion (gross requirements)
- Supply netting (net requirements)
- Shortage reporting (sorted shortages and summary)
- Input validation and concurrent fetching
- The pipeline that runs them in order
"""

from mrp.engine.bom import (
    BOMExpander,
    ExpansionResult,
    GrossRequirement,
    index_bom_lines,
)
from mrp.engine.fetching import (
    FetchError,
    InMemorySource,
    RawSnapshot,
    SnapshotSource,
    fetch_snapshot,
)
from mrp.engine.netting import (
    SupplyNettingEngine,
    SupplyPosition,
)
from mrp.engine.orders import (
    OrderAggregator,
    OutstandingOrder,
)
from mrp.engine.reporting import (
    ShortageReporter,
    shortage_sort_key,
)
from mrp.engine.validation import (
    DataIntegrityError,
    IncompleteSnapshotError,
    ValidationResult,
    parse_records,
    parse_snapshot,
)
from mrp.engine.planning import (
    MrpEngine,
    run_mrp,
)

__all__ = [
    # Orders
    "OrderAggregator",
    "OutstandingOrder",
    # BOM
    "BOMExpander",
    "ExpansionResult",
    "GrossRequirement",
    "index_bom_lines",
    # Netting
    "SupplyNettingEngine",
    "SupplyPosition",
    # Reporting
    "ShortageReporter",
    "shortage_sort_key",
    # Validation
    "DataIntegrityError",
    "IncompleteSnapshotError",
    "ValidationResult",
    "parse_records",
    "parse_snapshot",
    # Fetching
    "FetchError",
    "InMemorySource",
    "RawSnapshot",
    "SnapshotSource",
    "fetch_snapshot",
    # Pipeline
    "MrpEngine",
    "run_mrp",
]
