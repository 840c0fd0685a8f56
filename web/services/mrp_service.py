"""
MRP service for the web interface.

Wraps the mrp.engine.MrpEngine class for request handlers. The service
keeps no per-tenant state or cache; every request plans from the
snapshot it carries.
"""

from typing import Optional

from mrp.config.schema import MrpConfig, get_default_config
from mrp.engine.fetching import InMemorySource
from mrp.engine.planning import MrpEngine
from mrp.engine.validation import IncompleteSnapshotError
from mrp.io.snapshot_io import SnapshotDocument
from mrp.models.requirements import MrpResult


class MrpService:
    """Service for running MRP from request payloads."""

    def __init__(self, config: Optional[MrpConfig] = None):
        """Initialize the MRP service.

        Args:
            config: Optional configuration. Uses defaults if not provided.
        """
        self.config = config or get_default_config()
        self.engine = MrpEngine(self.config)

    async def run(self, document: SnapshotDocument, strict: bool = False) -> MrpResult:
        """Plan from a request snapshot.

        Args:
            document: The four datasets sent by the caller
            strict: If True, malformed records fail the request

        Returns:
            MrpResult

        Raises:
            IncompleteSnapshotError: If a dataset is missing from the body
            DataIntegrityError: In strict mode, if any data issue exists
        """
        missing = document.missing_datasets
        if missing:
            raise IncompleteSnapshotError(missing)

        source = InMemorySource(
            orders=document.orders or [],
            bom_lines=document.bom_lines or [],
            stock=document.stock or [],
            pending_supply=document.pending_supply or [],
        )
        return await self.engine.run_from_source(source, strict=strict)


# Global service instance
_mrp_service: Optional[MrpService] = None


def get_mrp_service() -> MrpService:
    """Get or create the global MRP service instance."""
    global _mrp_service
    if _mrp_service is None:
        from web.config import get_settings

        _mrp_service = MrpService(get_settings().load_engine_config())
    return _mrp_service
