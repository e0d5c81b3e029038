"""Candidate CRUD endpoints.

GET    /candidates          -- list all candidates.
POST   /candidates          -- create a candidate (201).
PUT    /candidates          -- replace the editable fields of a candidate.
DELETE /candidates?id=<id>  -- remove a candidate.

Validation failures return 400, unknown ids 404, and unexpected service
errors 500.  Error bodies are rendered by ``core.errors``.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query

from candidate_tracker.core.constants import MSG_DELETED, MSG_ID_REQUIRED, MSG_NOT_FOUND
from candidate_tracker.db.store import CandidateStore, get_store
from candidate_tracker.models.candidate import Candidate, CandidateCreate, CandidateUpdate
from candidate_tracker.services.candidates import (
    create_candidate,
    delete_candidate,
    list_candidates,
    update_candidate,
)
from candidate_tracker.services.validation import format_errors, validate_candidate

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_valid(payload: dict[str, Any]) -> None:
    """Raise 400 with the joined validation messages if *payload* is invalid."""
    errors = validate_candidate(payload)
    if errors:
        raise HTTPException(status_code=400, detail=format_errors(errors))


@router.get("/candidates", status_code=200, response_model=list[Candidate])
async def get_candidates(
    store: CandidateStore = Depends(get_store),
) -> list[Candidate]:
    """Return the full candidate list."""
    try:
        return list_candidates(store)
    except Exception as exc:
        logger.error("list_candidates_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to fetch candidates") from exc


@router.post("/candidates", status_code=201, response_model=Candidate)
async def post_candidate(
    payload: dict[str, Any] = Body(...),
    store: CandidateStore = Depends(get_store),
) -> Candidate:
    """Create a candidate; ``id`` and ``dateAdded`` are assigned here."""
    _require_valid(payload)

    try:
        return create_candidate(store, CandidateCreate.model_validate(payload))
    except Exception as exc:
        logger.error("create_candidate_failed", extra={"error_message": str(exc)})
        raise HTTPException(status_code=500, detail="Failed to create candidate") from exc


@router.put("/candidates", status_code=200, response_model=Candidate)
async def put_candidate(
    payload: dict[str, Any] = Body(...),
    store: CandidateStore = Depends(get_store),
) -> Candidate:
    """Replace the editable fields of the candidate identified by ``id``."""
    candidate_id = payload.get("id")
    if not candidate_id:
        raise HTTPException(status_code=400, detail=MSG_ID_REQUIRED)
    _require_valid(payload)

    try:
        updated = update_candidate(
            store, CandidateUpdate.model_validate({**payload, "id": str(candidate_id)})
        )
    except Exception as exc:
        logger.error(
            "update_candidate_failed",
            extra={"candidate_id": candidate_id, "error_message": str(exc)},
        )
        raise HTTPException(status_code=500, detail="Failed to update candidate") from exc

    if updated is None:
        raise HTTPException(status_code=404, detail=MSG_NOT_FOUND)
    return updated


@router.delete("/candidates", status_code=200)
async def remove_candidate(
    candidate_id: str | None = Query(None, alias="id"),
    store: CandidateStore = Depends(get_store),
) -> dict[str, str]:
    """Delete the candidate named by the ``id`` query parameter."""
    if not candidate_id:
        raise HTTPException(status_code=400, detail=MSG_ID_REQUIRED)

    try:
        removed = delete_candidate(store, candidate_id)
    except Exception as exc:
        logger.error(
            "delete_candidate_failed",
            extra={"candidate_id": candidate_id, "error_message": str(exc)},
        )
        raise HTTPException(status_code=500, detail="Failed to delete candidate") from exc

    if not removed:
        raise HTTPException(status_code=404, detail=MSG_NOT_FOUND)
    return {"message": MSG_DELETED}
