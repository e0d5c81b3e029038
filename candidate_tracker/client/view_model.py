"""Client-side state for the candidate screen.

``CandidateViewModel`` mirrors the server's candidate list and the UI flags
around it.  The local list is only changed after a successful API response;
``refresh()`` reloads it from the server.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import date

from candidate_tracker.client.api import ApiError, CandidateApiClient
from candidate_tracker.client.listing import ListingState, SortKey, csv_filename, export_csv
from candidate_tracker.core.config import settings
from candidate_tracker.core.constants import (
    MSG_ADDED_OK,
    MSG_CONFIRM_DELETE,
    MSG_DELETED_OK,
    MSG_UPDATED_OK,
)
from candidate_tracker.models.candidate import Candidate, CandidateCreate, CandidateUpdate
from candidate_tracker.models.enums import CandidateStatus
from candidate_tracker.services.validation import validate_candidate

logger = logging.getLogger(__name__)


def empty_form() -> dict[str, str]:
    return {
        "name": "",
        "email": "",
        "phone": "",
        "role": "",
        "status": CandidateStatus.applied.value,
    }


class CandidateViewModel:
    """State and actions behind the candidate list and form.

    *confirm* is asked before every delete and defaults to always yes.
    *clock* supplies monotonic seconds for success-message expiry.
    """

    def __init__(
        self,
        api: CandidateApiClient,
        confirm: Callable[[str], bool] | None = None,
        clock: Callable[[], float] = time.monotonic,
        success_ttl: float | None = None,
    ) -> None:
        self.api = api
        self.confirm = confirm or (lambda _message: True)
        self.clock = clock
        self.success_ttl = settings.SUCCESS_MESSAGE_SECONDS if success_ttl is None else success_ttl

        self.candidates: list[Candidate] = []
        self.is_loading = True
        self.is_submitting = False
        self.deleting_id: str | None = None
        self.error: str | None = None
        self.editing: Candidate | None = None
        self.form: dict[str, str] = empty_form()
        self.form_errors: dict[str, str] = {}
        self.listing = ListingState()

        self._mounted = False
        self._success: str | None = None
        self._success_at = 0.0

    # -- messages -----------------------------------------------------------

    @property
    def success(self) -> str | None:
        if self._success and self.clock() - self._success_at >= self.success_ttl:
            self._success = None
        return self._success

    def _set_success(self, message: str) -> None:
        self._success = message
        self._success_at = self.clock()

    # -- loading ------------------------------------------------------------

    def mount(self) -> None:
        """Fetch the list the first time the screen is shown."""
        if self._mounted:
            return
        self._mounted = True
        self.refresh()

    def refresh(self) -> None:
        self.is_loading = True
        self.error = None
        try:
            self.candidates = self.api.list_candidates()
        except ApiError as exc:
            self.error = exc.message
        finally:
            self.is_loading = False

    # -- form ---------------------------------------------------------------

    def update_form(self, **fields: str) -> None:
        """Set form values and clear the errors of the edited fields."""
        for name, value in fields.items():
            if name not in self.form:
                raise KeyError(name)
            self.form[name] = value
            self.form_errors.pop(name, None)

    def start_edit(self, candidate: Candidate) -> None:
        self.editing = candidate
        self.form = candidate.editable_fields()
        self.form_errors = {}

    def cancel_edit(self) -> None:
        self.editing = None
        self.form = empty_form()
        self.form_errors = {}

    def submit(self) -> bool:
        """Validate the form and create or update the candidate.

        Returns True when the server accepted the change.
        """
        self.form_errors = validate_candidate(self.form)
        if self.form_errors:
            return False

        self.is_submitting = True
        self.error = None
        try:
            if self.editing is not None:
                updated = self.api.update_candidate(
                    CandidateUpdate.model_validate({**self.form, "id": self.editing.id})
                )
                self.candidates = [
                    updated if candidate.id == updated.id else candidate
                    for candidate in self.candidates
                ]
                self._set_success(MSG_UPDATED_OK)
                self.cancel_edit()
            else:
                created = self.api.create_candidate(CandidateCreate.model_validate(self.form))
                self.candidates = [*self.candidates, created]
                self._set_success(MSG_ADDED_OK)
                self.form = empty_form()
        except ApiError as exc:
            self.error = exc.message
            return False
        finally:
            self.is_submitting = False
        return True

    # -- delete -------------------------------------------------------------

    def delete(self, candidate_id: str) -> bool:
        """Delete after confirmation; returns True when a candidate was removed."""
        if not self.confirm(MSG_CONFIRM_DELETE):
            return False

        self.deleting_id = candidate_id
        self.error = None
        try:
            self.api.delete_candidate(candidate_id)
        except ApiError as exc:
            self.error = exc.message
            return False
        finally:
            self.deleting_id = None

        self.candidates = [c for c in self.candidates if c.id != candidate_id]
        self._set_success(MSG_DELETED_OK)
        if self.editing is not None and self.editing.id == candidate_id:
            self.cancel_edit()
        return True

    # -- listing ------------------------------------------------------------

    def search(self, term: str) -> None:
        self.listing.search_term = term

    def sort_by(self, key: SortKey) -> None:
        self.listing.toggle_sort(key)

    @property
    def visible(self) -> list[Candidate]:
        """Candidates after the current search and sort."""
        return self.listing.apply(self.candidates)

    @property
    def summary(self) -> str | None:
        return self.listing.summary(len(self.visible), len(self.candidates))

    def export(self, today: date | None = None) -> tuple[str, str] | None:
        """Return ``(filename, csv_text)`` for the visible rows, or None if empty."""
        rows = self.visible
        if not rows:
            return None
        logger.info("candidates_exported", extra={"rows": len(rows)})
        return csv_filename(today or date.today()), export_csv(rows)
