"""Candidate field validation shared by the API and the client view-model.

The rules are declared on ``CandidateBase``; ``validate_candidate`` runs them
and returns a field-keyed map of human-readable messages.  An empty map means
the payload is valid.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from candidate_tracker.core.constants import FIELD_LABELS
from candidate_tracker.models.candidate import CandidateCreate, is_valid_email

__all__ = ["format_errors", "is_valid_email", "validate_candidate"]


def validate_candidate(data: Mapping[str, Any]) -> dict[str, str]:
    """Validate the editable fields of a candidate payload.

    Unknown keys (``id``, ``dateAdded``, ...) are ignored.  Only the first
    message per field is kept.
    """
    try:
        CandidateCreate.model_validate(dict(data))
    except ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            field = str(error["loc"][0]) if error["loc"] else "__root__"
            if field in errors:
                continue
            if error["type"] == "missing" and field in FIELD_LABELS:
                errors[field] = f"{FIELD_LABELS[field]} is required"
            else:
                errors[field] = error["msg"]
        return errors
    return {}


def format_errors(errors: Mapping[str, str]) -> str:
    """Collapse a field-keyed error map into a single message."""
    return "; ".join(errors.values())
