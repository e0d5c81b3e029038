"""Application constants.

Contains the seed candidate list, user-facing messages, and CSV export layout.
"""

from datetime import datetime, timezone
from typing import Any

# ---------------------------------------------------------------------------
# Seed data (loaded into the in-memory store on every process start)
# ---------------------------------------------------------------------------
SEED_CANDIDATES: list[dict[str, Any]] = [
    {
        "id": "1",
        "name": "Krish Kumar",
        "email": "krish@example.com",
        "phone": "+1 (555) 123-4567",
        "role": "Frontend Developer",
        "status": "Hired",
        "dateAdded": datetime(2026, 1, 15, tzinfo=timezone.utc),
    },
    {
        "id": "2",
        "name": "Kush",
        "email": "kush@example.com",
        "phone": "+1 (555) 234-5678",
        "role": "Backend Developer",
        "status": "Interviewing",
        "dateAdded": datetime(2026, 2, 1, tzinfo=timezone.utc),
    },
    {
        "id": "3",
        "name": "Naman",
        "email": "naman@example.com",
        "phone": "+1 (555) 345-6789",
        "role": "Full Stack Developer",
        "status": "Applied",
        "dateAdded": datetime(2026, 2, 10, tzinfo=timezone.utc),
    },
]

# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
EMAIL_PATTERN: str = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"

# Minimum stripped length per text field
MIN_LENGTHS: dict[str, int] = {
    "name": 2,
    "phone": 10,
    "role": 2,
}

FIELD_LABELS: dict[str, str] = {
    "name": "Name",
    "email": "Email",
    "phone": "Phone",
    "role": "Role",
    "status": "Status",
}

# ---------------------------------------------------------------------------
# API messages
# ---------------------------------------------------------------------------
MSG_ID_REQUIRED = "Candidate ID is required"
MSG_NOT_FOUND = "Candidate not found"
MSG_DELETED = "Candidate deleted successfully"
MSG_INVALID_BODY = "Request body must be a JSON object"
MSG_INTERNAL_ERROR = "Internal server error"

# ---------------------------------------------------------------------------
# Client messages
# ---------------------------------------------------------------------------
MSG_CONFIRM_DELETE = "Are you sure you want to delete this candidate?"
MSG_ADDED_OK = "Candidate added successfully!"
MSG_UPDATED_OK = "Candidate updated successfully!"
MSG_DELETED_OK = "Candidate deleted successfully!"

# ---------------------------------------------------------------------------
# CSV export
# ---------------------------------------------------------------------------
CSV_HEADERS: list[str] = ["Name", "Email", "Phone", "Role", "Status", "Date Added"]
