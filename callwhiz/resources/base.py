"""
CallWhiz Python SDK - Base Resource

This module contains the base class for all API resources.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

from callwhiz.config import Limits
from callwhiz.exceptions import ValidationError

if TYPE_CHECKING:
    from callwhiz.client import BaseClient


class BaseResource:
    """
    Base class for all API resources.

    Resources build and validate payloads, then hand them to the client's
    dispatcher. They work unchanged with both the sync and the async client:
    pre-flight checks raise immediately, and with the async client the
    returned value is a coroutine to await.
    """

    def __init__(self, client: "BaseClient") -> None:
        """
        Initialize the resource.

        Args:
            client: The CallWhiz client instance
        """
        self._client = client

    def _get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a GET request."""
        return self._client.request("GET", path, params=params)

    def _post(
        self,
        path: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a POST request."""
        return self._client.request("POST", path, json=json)

    def _put(
        self,
        path: str,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a PUT request."""
        return self._client.request("PUT", path, json=json)

    def _delete(self, path: str) -> Any:
        """Make a DELETE request. Resolves to True on success."""
        return self._client._delete(path)

    @staticmethod
    def _require_id(value: Optional[str], label: str) -> str:
        """Fail before any network call if an identifier is missing."""
        if not value:
            raise ValidationError(f"{label} ID is required")
        return value

    @staticmethod
    def _compact(**fields: Any) -> Dict[str, Any]:
        """Collect the provided fields, dropping the ones left as None."""
        return {k: v for k, v in fields.items() if v is not None}

    def _build_pagination_params(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        **filters: Any,
    ) -> Dict[str, Any]:
        """Build pagination query parameters."""
        params: Dict[str, Any] = {
            "page": Limits.DEFAULT_PAGE if page is None else page,
            "limit": Limits.DEFAULT_PAGE_SIZE if limit is None else limit,
        }
        # Filters are only sent when given a value
        params.update({k: v for k, v in filters.items() if v is not None and v != ""})
        return params
