"""Pydantic models for candidate records.

``id`` and ``dateAdded`` are assigned by the server and are therefore absent
from the create payload.  ``dateAdded`` is exposed on the wire in camelCase;
Python code uses ``date_added``.

The field rules live on ``CandidateBase`` so every model built from it,
including stored records, carries non-empty text, minimum lengths, a
``local@domain.tld`` email and a known status.  Each rule raises a
``PydanticCustomError`` whose message is the user-facing text.
"""

import re
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

from candidate_tracker.core.constants import EMAIL_PATTERN, FIELD_LABELS, MIN_LENGTHS
from candidate_tracker.models.enums import CandidateStatus

_EMAIL_RE = re.compile(EMAIL_PATTERN)

STATUS_VALUES: tuple[str, ...] = tuple(status.value for status in CandidateStatus)


def is_valid_email(value: str) -> bool:
    """Check for a basic ``local@domain.tld`` shape."""
    return bool(_EMAIL_RE.match(value))


def _rule_error(message: str) -> PydanticCustomError:
    return PydanticCustomError("candidate_field", message)


class CandidateBase(BaseModel):
    """Editable candidate fields."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=MIN_LENGTHS["name"])
    email: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=MIN_LENGTHS["phone"])
    role: str = Field(..., min_length=MIN_LENGTHS["role"])
    status: CandidateStatus

    @field_validator("name", "email", "phone", "role", mode="before")
    @classmethod
    def check_text_fields(cls, value: Any, info: ValidationInfo) -> str:
        label = FIELD_LABELS[info.field_name]
        if value is None:
            raise _rule_error(f"{label} is required")
        if not isinstance(value, str):
            raise _rule_error(f"{label} must be text")

        text = value.strip()
        if not text:
            raise _rule_error(f"{label} is required")

        min_length = MIN_LENGTHS.get(info.field_name)
        if min_length and len(text) < min_length:
            raise _rule_error(f"{label} must be at least {min_length} characters")

        if info.field_name == "email" and not is_valid_email(text):
            raise _rule_error("Please enter a valid email address")
        return text

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, value: Any) -> Any:
        if isinstance(value, CandidateStatus):
            return value
        if value is None or (isinstance(value, str) and not value.strip()):
            raise _rule_error("Status is required")
        if value not in STATUS_VALUES:
            raise _rule_error(f"Status must be one of: {', '.join(STATUS_VALUES)}")
        return value


class CandidateCreate(CandidateBase):
    """Payload for creating a candidate."""


class CandidateUpdate(CandidateBase):
    """Payload for replacing the editable fields of an existing candidate."""
    id: str


class Candidate(CandidateBase):
    """Full candidate record as stored and returned by the API."""
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: str
    date_added: datetime = Field(alias="dateAdded")

    def editable_fields(self) -> dict[str, str]:
        """Return the editable fields as plain strings (form state)."""
        return {
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "role": self.role,
            "status": self.status.value,
        }
