"""Enum types shared by the API and the client."""

from enum import Enum


class CandidateStatus(str, Enum):
    """Hiring pipeline stage of a candidate."""
    applied = "Applied"
    interviewing = "Interviewing"
    offered = "Offered"
    hired = "Hired"
    rejected = "Rejected"
