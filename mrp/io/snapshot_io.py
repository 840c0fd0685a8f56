"""
Snapshot and result files for the MRP engine.

A snapshot file holds the four input datasets captured by the caller:

    {
      "orders": [...],
      "bom_lines": [...],
      "stock": [...],
      "pending_supply": [...]
    }

Snapshots may be JSON or YAML. Results are always written as JSON.
"""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from mrp.models.requirements import MrpResult


class SnapshotLoadError(Exception):
    """Exception raised when a snapshot file cannot be read."""

    pass


class ResultSaveError(Exception):
    """Exception raised when a result cannot be written."""

    pass


class SnapshotDocument(BaseModel):
    """Raw snapshot as stored on disk.

    Records are kept untyped here; the engine validates them so that a
    malformed record is reported rather than failing the whole load.
    A dataset left out of the file stays None.
    """

    orders: Optional[list[Any]] = None
    bom_lines: Optional[list[Any]] = None
    stock: Optional[list[Any]] = None
    pending_supply: Optional[list[Any]] = None

    @property
    def missing_datasets(self) -> list[str]:
        """Names of the required datasets absent from the file."""
        return [
            name
            for name in ("orders", "bom_lines", "stock", "pending_supply")
            if getattr(self, name) is None
        ]


def _read_data(path: Path) -> Any:
    suffix = path.suffix.lower()

    if suffix == ".json":
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    if suffix in (".yaml", ".yml"):
        import yaml

        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)

    raise SnapshotLoadError(
        f"Unsupported snapshot format: {suffix}. Use .json or .yaml/.yml"
    )


def load_snapshot(path: str | Path) -> SnapshotDocument:
    """Load a snapshot file.

    Args:
        path: Path to a .json or .yaml/.yml snapshot

    Returns:
        SnapshotDocument with the raw datasets

    Raises:
        SnapshotLoadError: If the file is missing, unreadable or not a
            snapshot
    """
    path = Path(path)

    if not path.exists():
        raise SnapshotLoadError(f"Snapshot file not found: {path}")

    try:
        data = _read_data(path)
    except SnapshotLoadError:
        raise
    except Exception as e:
        raise SnapshotLoadError(f"Corrupt snapshot file {path}: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotLoadError(f"Snapshot file {path} must contain a mapping")

    try:
        return SnapshotDocument.model_validate(data)
    except PydanticValidationError as e:
        raise SnapshotLoadError(f"Invalid snapshot file {path}: {e}") from e


def save_result(result: MrpResult, path: str | Path) -> Path:
    """Write a planning result as JSON.

    Args:
        result: Result to save
        path: Destination file

    Returns:
        Path written to

    Raises:
        ResultSaveError: If writing fails
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(result.to_json())
    except OSError as e:
        raise ResultSaveError(f"Failed to write result: {e}") from e
    return path
