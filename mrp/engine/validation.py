"""
Input validation for the MRP engine.

Turns raw records (mappings from the storage layer) into typed models.
A malformed record is reported once as a DataIssue and left out of the
run; it never aborts planning for the rest of the data.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from mrp.models.bom import BOMLine
from mrp.models.orders import ProductionOrder
from mrp.models.requirements import DataIssue
from mrp.models.snapshot import MrpSnapshot
from mrp.models.supply import PendingSupply, StockRecord

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Quantity columns the storage layer may return as null; read as zero.
_NULLABLE_QUANTITIES: dict[str, tuple[str, ...]] = {
    "orders": ("ordered_qty", "completed_qty"),
    "bom_lines": (),
    "stock": ("on_hand_qty", "reserved_qty"),
    "pending_supply": ("qty",),
}

_ID_FIELDS: dict[str, str] = {
    "orders": "id",
    "bom_lines": "material_id",
    "stock": "material_id",
    "pending_supply": "material_id",
}


class IncompleteSnapshotError(Exception):
    """Raised when a whole input dataset is missing.

    An absent dataset cannot be told apart from an empty one, so planning
    on it would report false shortages.
    """

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(f"Input datasets missing: {', '.join(missing)}")


class DataIntegrityError(Exception):
    """Raised in strict mode when any input record is malformed."""

    def __init__(self, issues: list[DataIssue]):
        self.issues = issues
        lines = "\n".join(f"  - {issue}" for issue in issues)
        super().__init__(f"{len(issues)} malformed input record(s):\n{lines}")


@dataclass
class ValidationResult:
    """Data issues collected while reading a snapshot."""

    issues: list[DataIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues

    @classmethod
    def success(cls) -> "ValidationResult":
        """Create a result with no issues."""
        return cls()

    def add_issue(self, issue: DataIssue) -> None:
        """Record an issue and log it."""
        logger.warning("Data issue: %s", issue)
        self.issues.append(issue)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)

    def raise_if_invalid(self) -> None:
        """Raise DataIntegrityError if any issue was recorded."""
        if self.issues:
            raise DataIntegrityError(list(self.issues))


def _describe(error: PydanticValidationError) -> str:
    """Flatten a pydantic error into a single readable message."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "record"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def _record_id(dataset: str, record: Mapping[str, Any]) -> Optional[str]:
    value = record.get(_ID_FIELDS[dataset])
    return None if value is None else str(value)


def parse_records(
    dataset: str,
    records: Sequence[Any],
    model: type[ModelT],
) -> tuple[list[ModelT], ValidationResult]:
    """Parse one dataset, skipping and reporting malformed records.

    Args:
        dataset: Dataset name used in issue reports
        records: Raw mappings (or already-built models)
        model: Model class to build

    Returns:
        Tuple of (parsed models, validation result)
    """
    result = ValidationResult()
    parsed: list[ModelT] = []

    for index, record in enumerate(records):
        if isinstance(record, model):
            parsed.append(record)
            continue

        if not isinstance(record, Mapping):
            result.add_issue(DataIssue(
                dataset=dataset,
                index=index,
                message=f"Expected a mapping, got {type(record).__name__}",
            ))
            continue

        data = dict(record)
        for name in _NULLABLE_QUANTITIES[dataset]:
            if data.get(name) is None:
                data[name] = 0

        try:
            parsed.append(model.model_validate(data))
        except PydanticValidationError as e:
            result.add_issue(DataIssue(
                dataset=dataset,
                index=index,
                record_id=_record_id(dataset, record),
                message=_describe(e),
            ))

    return parsed, result


def parse_snapshot(
    orders: Optional[Sequence[Any]],
    bom_lines: Optional[Sequence[Any]],
    stock: Optional[Sequence[Any]],
    pending_supply: Optional[Sequence[Any]],
) -> tuple[MrpSnapshot, ValidationResult]:
    """Build a typed snapshot from the four raw input datasets.

    Args:
        orders: Production order records
        bom_lines: BOM line records for the referenced templates
        stock: Stock records (any number per material)
        pending_supply: Open purchase order lines

    Returns:
        Tuple of (snapshot, validation result)

    Raises:
        IncompleteSnapshotError: If any of the four datasets is None
    """
    datasets = {
        "orders": orders,
        "bom_lines": bom_lines,
        "stock": stock,
        "pending_supply": pending_supply,
    }
    missing = [name for name, value in datasets.items() if value is None]
    if missing:
        raise IncompleteSnapshotError(missing)

    result = ValidationResult()

    parsed_orders, r = parse_records("orders", orders or [], ProductionOrder)
    result.merge(r)
    parsed_lines, r = parse_records("bom_lines", bom_lines or [], BOMLine)
    result.merge(r)
    parsed_stock, r = parse_records("stock", stock or [], StockRecord)
    result.merge(r)
    parsed_supply, r = parse_records("pending_supply", pending_supply or [], PendingSupply)
    result.merge(r)

    snapshot = MrpSnapshot(
        orders=parsed_orders,
        bom_lines=parsed_lines,
        stock=parsed_stock,
        pending_supply=parsed_supply,
    )
    return snapshot, result
