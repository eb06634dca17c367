"""
HTTP client for the checklist API.

Thin wrapper over requests that sends and receives JSON, raises
ChecklistAPIError for failed calls, and implements the optimistic toggle
used for ticking off tasks.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import requests
from urllib.parse import quote

from checklist.app.core.config import settings

logger = logging.getLogger(__name__)

RESOURCES = ("tasks", "artists", "guests")

RecordId = Union[int, str]


class ChecklistAPIError(Exception):
    """A checklist API call failed (transport error or non-2xx response)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ChecklistClient:
    def __init__(self, base_url: Optional[str] = None, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT

    def request(self, resource: str, method: str = "GET", body: Optional[Dict[str, Any]] = None, record_id: Optional[RecordId] = None):
        """
        Call the API and return the decoded JSON body.

        The record id is only used for PUT and DELETE. Returns None for
        204 No Content or an empty body.
        """
        method = method.upper()
        url = f"{self.base_url}/{resource}/"
        if method in ("PUT", "DELETE") and record_id is not None:
            url = f"{self.base_url}/{resource}/{quote(str(record_id), safe='')}"

        kwargs: Dict[str, Any] = {"timeout": self.timeout}
        if body is not None and method in ("POST", "PUT"):
            kwargs["json"] = body

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error("API request failed: %s %s (%s)", method, url, e)
            raise ChecklistAPIError(f"Request failed: {e}") from e

        if not response.ok:
            message = self._error_message(response)
            logger.error("API request failed: %s %s -> %s", method, url, message)
            raise ChecklistAPIError(message, status_code=response.status_code)

        if response.status_code == 204 or not response.text:
            return None
        return response.json()

    @staticmethod
    def _error_message(response) -> str:
        message = f"HTTP error! status: {response.status_code}"
        try:
            payload = response.json()
        except ValueError:
            if response.text:
                message += f" - {response.text}"
            return message

        if isinstance(payload, dict):
            detail = payload.get("error") or payload.get("detail")
            if isinstance(detail, str) and detail:
                return detail
            if detail:
                message += f" - {detail}"
        return message

    # --- Per resource helpers ---

    def list(self, resource: str) -> List[Dict[str, Any]]:
        return self.request(resource) or []

    def create(self, resource: str, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self.request(resource, "POST", data)

    def update(self, resource: str, record_id: RecordId, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self.request(resource, "PUT", data, record_id)

    def delete(self, resource: str, record_id: RecordId) -> None:
        self.request(resource, "DELETE", record_id=record_id)

    def load_all(self) -> Dict[str, List[Dict[str, Any]]]:
        """Fetch tasks, artists and guests. Any failure aborts the whole load."""
        return {resource: self.list(resource) for resource in RESOURCES}

    def toggle_task_complete(self, tasks: List[Dict[str, Any]], task_id: RecordId) -> List[Dict[str, Any]]:
        """
        Flip a task's `complete` flag optimistically.

        Returns the new task list. The toggle is applied locally before the
        PUT; if the server returns the updated task it is merged in. On
        failure `tasks` is left untouched and the error is re-raised.
        """
        target = next((t for t in tasks if t.get("id") == task_id), None)
        if target is None:
            raise KeyError(f"Task {task_id} not in list")

        new_status = not target.get("complete")
        updated = [dict(t, complete=new_status) if t.get("id") == task_id else dict(t) for t in tasks]

        try:
            from_server = self.update("tasks", task_id, {"complete": new_status})
        except ChecklistAPIError:
            logger.warning("Reverting completion toggle for task %s", task_id)
            raise

        if from_server:
            updated = [dict(t, **from_server) if t.get("id") == from_server.get("id") else t for t in updated]
        else:
            logger.info("API did not return task %s on toggle, keeping optimistic state", task_id)
        return updated
