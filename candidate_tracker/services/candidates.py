"""Candidate CRUD service.

Thin layer over a ``CandidateStore``: assigns identifiers and creation
timestamps, and keeps ``id`` / ``date_added`` immutable on update.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import uuid4

from candidate_tracker.db.store import CandidateStore
from candidate_tracker.models.candidate import Candidate, CandidateCreate, CandidateUpdate

logger = logging.getLogger(__name__)


def list_candidates(store: CandidateStore) -> list[Candidate]:
    """Return every stored candidate in insertion order."""
    return store.list_all()


def create_candidate(store: CandidateStore, data: CandidateCreate) -> Candidate:
    """Create and store a candidate with a fresh id and the current UTC time."""
    candidate = Candidate(
        id=str(uuid4()),
        date_added=datetime.now(timezone.utc),
        **data.model_dump(),
    )
    store.insert(candidate)
    logger.info("candidate_created", extra={"candidate_id": candidate.id})
    return candidate


def update_candidate(store: CandidateStore, data: CandidateUpdate) -> Candidate | None:
    """Replace the editable fields of an existing candidate.

    Returns the updated record, or None if no candidate has ``data.id``.
    """
    existing = store.get(data.id)
    if existing is None:
        logger.info("candidate_update_not_found", extra={"candidate_id": data.id})
        return None

    updated = existing.model_copy(update=data.model_dump(exclude={"id"}))
    store.replace(updated)
    logger.info("candidate_updated", extra={"candidate_id": updated.id})
    return updated


def delete_candidate(store: CandidateStore, candidate_id: str) -> bool:
    """Remove the candidate with *candidate_id*; return whether one was removed."""
    removed = store.remove(candidate_id)
    logger.info(
        "candidate_deleted" if removed else "candidate_delete_not_found",
        extra={"candidate_id": candidate_id},
    )
    return removed
