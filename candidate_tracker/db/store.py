"""In-memory candidate storage.

``CandidateStore`` is the storage interface the API layer depends on.
``get_store()`` returns a lazily-initialized, process-wide
``InMemoryCandidateStore`` seeded from ``constants.SEED_CANDIDATES``; it is
volatile and reset on every process start.  The store does no locking and
assumes one request at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Protocol

from candidate_tracker.core.config import settings
from candidate_tracker.core.constants import SEED_CANDIDATES
from candidate_tracker.models.candidate import Candidate

logger = logging.getLogger(__name__)


class CandidateStore(Protocol):
    """Storage operations required by the candidate service."""

    def list_all(self) -> list[Candidate]: ...

    def get(self, candidate_id: str) -> Candidate | None: ...

    def insert(self, candidate: Candidate) -> None: ...

    def replace(self, candidate: Candidate) -> bool: ...

    def remove(self, candidate_id: str) -> bool: ...

    def count(self) -> int: ...


class InMemoryCandidateStore:
    """Ordered list of candidates; lookups return the first id match."""

    def __init__(self, candidates: Iterable[Candidate] | None = None) -> None:
        self._candidates: list[Candidate] = list(candidates or [])

    def _index_of(self, candidate_id: str) -> int:
        for index, candidate in enumerate(self._candidates):
            if candidate.id == candidate_id:
                return index
        return -1

    def list_all(self) -> list[Candidate]:
        """Return a snapshot of all candidates in insertion order."""
        return list(self._candidates)

    def get(self, candidate_id: str) -> Candidate | None:
        index = self._index_of(candidate_id)
        return self._candidates[index] if index >= 0 else None

    def insert(self, candidate: Candidate) -> None:
        self._candidates.append(candidate)

    def replace(self, candidate: Candidate) -> bool:
        """Swap in *candidate* for the record with the same id.

        Returns False if no such record exists.
        """
        index = self._index_of(candidate.id)
        if index < 0:
            return False
        self._candidates[index] = candidate
        return True

    def remove(self, candidate_id: str) -> bool:
        index = self._index_of(candidate_id)
        if index < 0:
            return False
        del self._candidates[index]
        return True

    def count(self) -> int:
        return len(self._candidates)


def seed_candidates() -> list[Candidate]:
    """Build fresh ``Candidate`` objects from the seed constants."""
    return [Candidate.model_validate(row) for row in SEED_CANDIDATES]


_store: InMemoryCandidateStore | None = None


def get_store() -> CandidateStore:
    """Return the singleton store, creating it on first call."""
    global _store
    if _store is None:
        seed = seed_candidates() if settings.SEED_CANDIDATES else []
        _store = InMemoryCandidateStore(seed)
        logger.info("candidate_store_initialized", extra={"seeded": len(seed)})
    return _store


def reset_store() -> None:
    """Drop the singleton so the next ``get_store()`` starts from the seed."""
    global _store
    _store = None
