"""Search, sort and CSV export over a local candidate list."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Any, Literal

from candidate_tracker.core.constants import CSV_HEADERS
from candidate_tracker.models.candidate import Candidate

SortKey = Literal["name", "email", "phone", "role", "status", "dateAdded"]
SortOrder = Literal["asc", "desc"]

SORT_KEYS: tuple[str, ...] = ("name", "email", "phone", "role", "status", "dateAdded")


def _search_values(candidate: Candidate) -> tuple[str, ...]:
    return (
        candidate.name,
        candidate.email,
        candidate.role,
        candidate.phone,
        candidate.status.value,
    )


def filter_candidates(candidates: Iterable[Candidate], term: str) -> list[Candidate]:
    """Keep candidates with *term* in any text field or status, ignoring case."""
    needle = term.strip().casefold()
    if not needle:
        return list(candidates)
    return [
        candidate
        for candidate in candidates
        if any(needle in value.casefold() for value in _search_values(candidate))
    ]


def _sort_value(candidate: Candidate, key: str) -> Any:
    if key == "dateAdded":
        return candidate.date_added
    if key == "status":
        return candidate.status.value.casefold()
    return getattr(candidate, key).casefold()


def sort_candidates(
    candidates: Iterable[Candidate],
    key: SortKey,
    order: SortOrder = "asc",
) -> list[Candidate]:
    """Return a new list sorted by *key*; ``dateAdded`` sorts chronologically."""
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {key}")
    return sorted(
        candidates,
        key=lambda candidate: _sort_value(candidate, key),
        reverse=order == "desc",
    )


@dataclass
class ListingState:
    """Search term and sort column of the candidate table."""
    search_term: str = ""
    sort_key: SortKey = "dateAdded"
    sort_order: SortOrder = "desc"

    def toggle_sort(self, key: SortKey) -> None:
        """Flip the order for the current column, or switch to *key* ascending."""
        if key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {key}")
        if key == self.sort_key:
            self.sort_order = "desc" if self.sort_order == "asc" else "asc"
        else:
            self.sort_key = key
            self.sort_order = "asc"

    def apply(self, candidates: Iterable[Candidate]) -> list[Candidate]:
        return sort_candidates(
            filter_candidates(candidates, self.search_term),
            self.sort_key,
            self.sort_order,
        )

    def summary(self, visible: int, total: int) -> str | None:
        """``Showing X of Y candidates`` while a search is active."""
        if not self.search_term.strip():
            return None
        return f"Showing {visible} of {total} candidates"


def export_csv(candidates: Iterable[Candidate]) -> str:
    """Render candidates as CSV: plain header row, fully quoted data rows."""
    buffer = io.StringIO()
    buffer.write(",".join(CSV_HEADERS) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for candidate in candidates:
        writer.writerow([
            candidate.name,
            candidate.email,
            candidate.phone,
            candidate.role,
            candidate.status.value,
            candidate.date_added.date().isoformat(),
        ])
    return buffer.getvalue()


def csv_filename(day: date) -> str:
    return f"candidates_{day.isoformat()}.csv"
