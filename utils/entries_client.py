"""
HTTP client for the entries CRUD endpoint.

The entry table controller never talks to the database directly; it goes
through this client so that it only depends on the documented
request/response contract of /api/entries.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."
NETWORK_ERROR_MESSAGE = "Could not reach the server. Please try again."


class EntryServiceError(Exception):
    """A request to the entries service failed."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class EntryNotFoundError(EntryServiceError):
    """The entry addressed by an edit or delete no longer exists."""
    pass


class EntryRequestError(EntryServiceError):
    """The service rejected the request (4xx other than 404)."""
    pass


def _error_message(response, fallback: str) -> str:
    try:
        payload = response.json()
    except ValueError:
        return fallback
    if isinstance(payload, dict):
        return payload.get('error') or payload.get('message') or fallback
    return fallback


class EntriesClient:
    """
    Thin wrapper around requests for the entries endpoint.

    Args:
        base_url: URL of the collection, e.g. http://host/api/entries
        timeout: per-request timeout in seconds
        session: optional requests.Session (tests inject a mock)
    """

    def __init__(self, base_url: str, timeout: float = 10, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, fallback: str, payload: Optional[Dict] = None):
        try:
            response = self.session.request(
                method,
                self.base_url,
                json=payload,
                headers={'Accept': 'application/json'},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"{method} {self.base_url} failed: {str(e)}")
            raise EntryServiceError(NETWORK_ERROR_MESSAGE) from e

        status = response.status_code
        if 200 <= status < 300:
            if status == 204 or not response.content:
                return None
            try:
                return response.json()
            except ValueError as e:
                raise EntryServiceError(fallback, status) from e

        message = _error_message(response, fallback)
        logger.warning("%s %s -> %s: %s", method, self.base_url, status, message)
        if status == 404:
            raise EntryNotFoundError(message, status)
        if 400 <= status < 500:
            raise EntryRequestError(message, status)
        raise EntryServiceError(message, status)

    def list_entries(self) -> List[Dict[str, Any]]:
        result = self._request('GET', 'Failed to fetch entries')
        return list(result or [])

    def create_entry(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('POST', 'Failed to save entry', fields)

    def update_entry(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        return self._request('PUT', 'Failed to save entry', fields)

    def delete_entry(self, entry_id: str) -> None:
        self._request('DELETE', 'Failed to delete entry', {'id': entry_id})
