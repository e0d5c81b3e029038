"""HTTP client for the candidate API.

Wraps an ``httpx.Client``.  Non-2xx responses, transport failures and
success bodies that do not decode into the expected shape are all raised as
``ApiError``, carrying the server's ``error`` message when present.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx
from pydantic import ValidationError

from candidate_tracker.core.config import settings
from candidate_tracker.models.candidate import Candidate, CandidateCreate, CandidateUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T")

CANDIDATES_PATH = "/api/candidates"


class ApiError(Exception):
    """A failed API call, with the message suitable for display."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class CandidateApiClient:
    """Synchronous client for ``/api/candidates``.

    Pass *http* to reuse an existing ``httpx.Client`` (e.g. FastAPI's
    ``TestClient``); otherwise one is created from ``settings.API_BASE_URL``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        http: httpx.Client | None = None,
    ) -> None:
        self._owns_http = http is None
        self._http = http or httpx.Client(
            base_url=base_url or settings.API_BASE_URL,
            timeout=settings.API_TIMEOUT_SECONDS,
        )

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> CandidateApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _request(
        self,
        method: str,
        fallback: str,
        parse: Callable[[Any], T],
        **kwargs: Any,
    ) -> T:
        """Send *method* to the candidates path and ``parse`` the JSON body.

        Transport failures, error statuses and undecodable success bodies all
        become ``ApiError``.
        """
        try:
            response = self._http.request(method, CANDIDATES_PATH, **kwargs)
        except httpx.HTTPError as exc:
            logger.error(
                "candidate_api_transport_failed",
                extra={"method": method, "error_message": str(exc)},
            )
            raise ApiError(fallback) from exc

        if response.is_success:
            try:
                return parse(response.json())
            except (ValueError, TypeError, ValidationError) as exc:
                logger.error(
                    "candidate_api_bad_response",
                    extra={
                        "method": method,
                        "status_code": response.status_code,
                        "error_message": str(exc),
                    },
                )
                raise ApiError(fallback, status_code=response.status_code) from exc

        message = fallback
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            message = str(body["error"])
        logger.warning(
            "candidate_api_request_failed",
            extra={"method": method, "status_code": response.status_code, "error_message": message},
        )
        raise ApiError(message, status_code=response.status_code)

    def list_candidates(self) -> list[Candidate]:
        return self._request("GET", "Failed to fetch candidates", _parse_candidate_list)

    def create_candidate(self, data: CandidateCreate) -> Candidate:
        return self._request(
            "POST",
            "Failed to add candidate",
            Candidate.model_validate,
            json=data.model_dump(mode="json"),
        )

    def update_candidate(self, data: CandidateUpdate) -> Candidate:
        return self._request(
            "PUT",
            "Failed to update candidate",
            Candidate.model_validate,
            json=data.model_dump(mode="json"),
        )

    def delete_candidate(self, candidate_id: str) -> str:
        return self._request(
            "DELETE",
            "Failed to delete candidate",
            _parse_message,
            params={"id": candidate_id},
        )


def _parse_candidate_list(body: Any) -> list[Candidate]:
    if not isinstance(body, list):
        raise TypeError(f"expected a JSON array, got {type(body).__name__}")
    return [Candidate.model_validate(item) for item in body]


def _parse_message(body: Any) -> str:
    if not isinstance(body, dict):
        raise TypeError(f"expected a JSON object, got {type(body).__name__}")
    return str(body.get("message", ""))
