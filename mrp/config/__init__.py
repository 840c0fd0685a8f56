"""
Configuration management for the MRP engine.

This module provides:
- Configuration schema and validation
- Support for custom configuration files (JSON/YAML)
"""

from mrp.config.schema import (
    DefaultsConfig,
    FetchConfig,
    MixedUnitPolicy,
    MrpConfig,
    OrdersConfig,
    ParallelConfig,
    SupplyConfig,
    UnitsConfig,
    get_default_config,
)

__all__ = [
    "DefaultsConfig",
    "FetchConfig",
    "MixedUnitPolicy",
    "MrpConfig",
    "OrdersConfig",
    "ParallelConfig",
    "SupplyConfig",
    "UnitsConfig",
    "get_default_config",
]
