"""
MRP routes for the web interface.

Exposes the planning engine as a single JSON endpoint.
"""

from fastapi import APIRouter, Depends, HTTPException

from mrp.engine.fetching import FetchError
from mrp.engine.validation import DataIntegrityError, IncompleteSnapshotError
from mrp.io.snapshot_io import SnapshotDocument
from mrp.models.requirements import MrpResult
from web.services.mrp_service import MrpService, get_mrp_service

router = APIRouter(prefix="/api/mrp", tags=["mrp"])


@router.post("/run", response_model=MrpResult)
async def run_mrp(
    document: SnapshotDocument,
    strict: bool = False,
    service: MrpService = Depends(get_mrp_service),
) -> MrpResult:
    """Compute material requirements for the posted snapshot."""
    try:
        return await service.run(document, strict=strict)
    except IncompleteSnapshotError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except DataIntegrityError as e:
        raise HTTPException(
            status_code=422,
            detail=[issue.model_dump() for issue in e.issues],
        )
    except FetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
