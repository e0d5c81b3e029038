"""Health check endpoint.

Returns service status and the number of candidates currently held.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from candidate_tracker.db.store import CandidateStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(store: CandidateStore = Depends(get_store)) -> dict[str, Any]:
    """Return ``status`` and the current store size."""
    return {"status": "ok", "candidates": store.count()}
