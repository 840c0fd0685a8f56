"""
MRP - Material Requirements Planning engine

Works out which materials are short for the open production orders of
one tenant, given their bills of materials, current stock and the
quantities already on open purchase orders.

This package provides:
- The planning pipeline (orders -> BOM -> netting -> shortage report)
- Typed input and result models
- Snapshot file I/O (JSON/YAML in, JSON out)
- CLI interface for running plans from snapshot files
"""

__version__ = "0.1.0"

from mrp.config.schema import MrpConfig, get_default_config
from mrp.engine.planning import MrpEngine, run_mrp
from mrp.models.requirements import MaterialRequirement, MrpResult, MrpSummary

__all__ = [
    "__version__",
    "MaterialRequirement",
    "MrpConfig",
    "MrpEngine",
    "MrpResult",
    "MrpSummary",
    "get_default_config",
    "run_mrp",
]
