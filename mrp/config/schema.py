"""
Configuration schema for the MRP engine.

Provides Pydantic models for configuration validation and type safety.
Defaults mirror the behaviour of the production planning screen the
engine was extracted from.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class MixedUnitPolicy(str, Enum):
    """How to treat BOM lines for one material that carry different units."""

    TRUST = "trust"  # sum raw quantities, no warning
    FLAG = "flag"  # sum raw quantities, report a data issue
    REJECT = "reject"  # count only the dominant unit, report a data issue


class OrdersConfig(BaseModel):
    """Production order selection."""

    active_statuses: list[str] = Field(
        default=["planned", "in_progress"],
        description="Order statuses that generate material demand",
    )

    @field_validator("active_statuses")
    @classmethod
    def validate_statuses(cls, v: list[str]) -> list[str]:
        """Reject statuses the order model does not know about."""
        from mrp.models.orders import OrderStatus

        known = {s.value for s in OrderStatus}
        unknown = [s for s in v if s not in known]
        if unknown:
            raise ValueError(f"Unknown order statuses: {unknown}")
        return v


class SupplyConfig(BaseModel):
    """Pending supply selection."""

    open_statuses: list[str] = Field(
        default=["draft", "sent", "confirmed"],
        description="Purchase order statuses counted as on-order supply",
    )


class DefaultsConfig(BaseModel):
    """Fallback values for incomplete reference data."""

    material_name: str = Field(
        default="?",
        description="Display name used when a BOM line has no material name",
    )
    unit: str = Field(
        default="pcs",
        description="Unit of measure used when a BOM line has no unit",
    )


class UnitsConfig(BaseModel):
    """Unit of measure handling."""

    mixed_unit_policy: MixedUnitPolicy = Field(
        default=MixedUnitPolicy.FLAG,
        description="Treatment of one material required in different units",
    )


class ParallelConfig(BaseModel):
    """Parallel BOM expansion."""

    max_workers: int = Field(
        default=1,
        ge=1,
        description=(
            "Worker threads for BOM expansion (1 = sequential). Expansion is "
            "pure Python, so threads only overlap work on a free-threaded "
            "interpreter; under the GIL they add no speedup"
        ),
    )
    min_orders_per_chunk: int = Field(
        default=500,
        ge=1,
        description="Smallest order partition handed to a worker",
    )


class FetchConfig(BaseModel):
    """Input fetching."""

    timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0.0,
        description="Upper bound for fetching all four datasets (None = no limit)",
    )


class MrpConfig(BaseModel):
    """Complete MRP engine configuration.

    This is the top-level configuration object passed to every stage
    of the planning pipeline.
    """

    orders: OrdersConfig = Field(default_factory=OrdersConfig)
    supply: SupplyConfig = Field(default_factory=SupplyConfig)
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    units: UnitsConfig = Field(default_factory=UnitsConfig)
    parallel: ParallelConfig = Field(default_factory=ParallelConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MrpConfig":
        """Create configuration from a dictionary.

        Args:
            data: Configuration dictionary (can be partial)

        Returns:
            MrpConfig with defaults for any missing values
        """
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "MrpConfig":
        """Load configuration from a JSON or YAML file.

        Args:
            path: Path to configuration file (.json or .yaml/.yml)

        Returns:
            Parsed configuration

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is not supported or the content is
                not a valid configuration
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        suffix = path.suffix.lower()

        if suffix == ".json":
            import json

            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        elif suffix in (".yaml", ".yml"):
            import yaml

            with open(path, encoding="utf-8") as f:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ValueError(f"Invalid YAML in {path}: {e}") from e
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. "
                "Use .json or .yaml/.yml"
            )

        return cls.from_dict(data or {})

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return self.model_dump(mode="json")

    def to_file(self, path: str | Path) -> None:
        """Save configuration to a JSON or YAML file.

        Args:
            path: Path to save configuration to

        Raises:
            ValueError: If file format is not supported
        """
        path = Path(path)
        suffix = path.suffix.lower()
        data = self.to_dict()

        if suffix == ".json":
            import json

            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        elif suffix in (".yaml", ".yml"):
            import yaml

            with open(path, "w", encoding="utf-8") as f:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. "
                "Use .json or .yaml/.yml"
            )


def get_default_config() -> MrpConfig:
    """Get the default MRP configuration.

    Returns:
        MrpConfig with all default values
    """
    return MrpConfig()
