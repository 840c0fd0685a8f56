"""
File I/O for the MRP engine.

This module handles reading and writing of:
- Input snapshots (JSON/YAML)
- Planning results (JSON)
"""

from mrp.io.snapshot_io import (
    ResultSaveError,
    SnapshotDocument,
    SnapshotLoadError,
    load_snapshot,
    save_result,
)

__all__ = [
    "ResultSaveError",
    "SnapshotDocument",
    "SnapshotLoadError",
    "load_snapshot",
    "save_result",
]
