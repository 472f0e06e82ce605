"""HTTP client for the homework scheduler API, used by presentation code."""

from __future__ import annotations

import logging
from typing import Any, Iterable

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as ModelValidationError

from homework_scheduler.domain.errors import (
    ConnectivityError,
    NotFoundError,
    SchemaError,
    StoreError,
    ValidationError,
)
from homework_scheduler.domain.models import (
    ConflictCheckRequest,
    ConflictWarning,
    Homework,
    HomeworkDraft,
    HomeworkUpdate,
)
from homework_scheduler.services.conflicts import ConflictCandidate, preview_conflicts
from homework_scheduler.services.validation import display_date

logger = logging.getLogger(__name__)

_HOMEWORK = TypeAdapter(Homework)
_HOMEWORK_LIST = TypeAdapter(list[Homework])
_WARNING_LIST = TypeAdapter(list[ConflictWarning])

_STATUS_ERRORS = {
    400: ValidationError,
    404: NotFoundError,
    422: ValidationError,
    500: SchemaError,
    503: ConnectivityError,
}


class HomeworkClient:
    """Thin wrapper over an ``httpx.Client`` pointed at the service."""

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        try:
            response = self._http.request(method, url, **kwargs)
        except httpx.DecodingError as exc:
            raise SchemaError(f"Unreadable response body: {exc}") from exc
        except httpx.RequestError as exc:
            raise ConnectivityError(f"Cannot reach homework service: {exc}") from exc

        if response.is_success:
            try:
                return response.json()
            except ValueError as exc:
                raise SchemaError(f"Unexpected response shape: {exc}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None
        detail = payload.get("detail") if isinstance(payload, dict) else None
        message = detail if isinstance(detail, str) else response.reason_phrase
        raise _STATUS_ERRORS.get(response.status_code, StoreError)(message)

    def _parse(self, adapter: TypeAdapter, payload: Any) -> Any:
        try:
            return adapter.validate_python(payload)
        except ModelValidationError as exc:
            raise SchemaError(f"Unexpected response shape: {exc}") from exc

    def list_homeworks(self) -> list[Homework]:
        return self._parse(_HOMEWORK_LIST, self._request("GET", "/homeworks"))

    def get_homework(self, homework_id: str) -> Homework:
        return self._parse(_HOMEWORK, self._request("GET", f"/homeworks/{homework_id}"))

    def create_homework(self, draft: HomeworkDraft) -> Homework:
        body = draft.model_dump(mode="json", by_alias=True)
        return self._parse(_HOMEWORK, self._request("POST", "/homeworks", json=body))

    def update_homework(self, homework_id: str, changes: HomeworkUpdate) -> Homework:
        body = changes.model_dump(mode="json", by_alias=True, exclude_unset=True)
        return self._parse(
            _HOMEWORK, self._request("PUT", f"/homeworks/{homework_id}", json=body)
        )

    def delete_homework(self, homework_id: str) -> None:
        self._request("DELETE", f"/homeworks/{homework_id}")

    def check_conflicts(
        self, candidate: ConflictCandidate, exclude_id: str | None = None
    ) -> list[ConflictWarning]:
        """Run the authoritative conflict check on the server."""
        due_date = getattr(candidate, "due_date", None)
        request = ConflictCheckRequest(
            due_date=None if due_date is None else display_date(due_date),
            id=exclude_id,
        )
        body = request.model_dump(mode="json", by_alias=True, exclude_none=True)
        return self._parse(
            _WARNING_LIST, self._request("POST", "/homeworks/check-conflicts", json=body)
        )

    def preview_conflicts(
        self,
        candidate: ConflictCandidate,
        existing: Iterable[Homework],
        exclude_id: str | None = None,
    ) -> list[ConflictWarning]:
        """Conflict check for a form preview; falls back to *existing* if the server fails."""
        return preview_conflicts(
            candidate,
            existing,
            lambda: self.check_conflicts(candidate, exclude_id),
            exclude_id,
        )
