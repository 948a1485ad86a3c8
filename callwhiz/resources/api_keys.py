"""
CallWhiz Python SDK - API Keys Resource

This module provides methods for managing API keys.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from callwhiz.config import Endpoints
from callwhiz.models import validate
from callwhiz.resources.base import BaseResource


class APIKeysResource(BaseResource):
    """
    Resource for managing API keys.

    Example:
        >>> key = client.api_keys.create(
        ...     name="Production API Key",
        ...     permissions=["agents:read", "calls:write"],
        ... )
        >>> print(f"New key: {key['key']}")  # Only shown once!
    """

    def create(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        permissions: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """
        Create a new API key.

        Important: The full key is only returned once during creation.
        Make sure to save it securely.

        Args:
            name: Name of the key, 1 to 100 characters (required)
            description: What the key is used for
            permissions: Permission scopes granted to the key

        Returns:
            Created key data including the full key
        """
        data = self._compact(name=name, description=description, permissions=permissions)
        payload = validate("api_key", "create", data)
        return self._post(Endpoints.API_KEYS, json=payload)

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """
        List API keys.

        Note: The full key is not returned.
        """
        params = self._build_pagination_params(page=page, limit=limit)
        return self._get(Endpoints.API_KEYS, params=params)
