"""
CallWhiz Python SDK - Calls Resource

This module provides methods for starting and inspecting calls.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from callwhiz.config import Endpoints
from callwhiz.models import validate
from callwhiz.resources.base import BaseResource


class CallsResource(BaseResource):
    """
    Resource for managing voice calls.

    Example:
        >>> call = client.calls.start(
        ...     agent_id="agent_abc123",
        ...     phone_number="+15551234567",
        ... )
        >>> transcript = client.calls.get_transcript(call["id"])
    """

    def start(
        self,
        agent_id: Optional[str] = None,
        phone_number: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        webhook_url: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Start an outbound call.

        Args:
            agent_id: Agent that handles the call (required)
            phone_number: Number to dial, E.164 style, e.g. "+15551234567"
                (required)
            context: Data made available to the agent during the call
            webhook_url: http(s) URL notified about this call's events
            metadata: Arbitrary key/value data stored with the call

        Returns:
            The created call

        Raises:
            ValidationError: If the agent ID or phone number is invalid
        """
        data = self._compact(
            agent_id=agent_id,
            phone_number=phone_number,
            context=context,
            webhook_url=webhook_url,
            metadata=metadata,
        )
        payload = validate("call", "create", data)
        return self._post(Endpoints.CALLS, json=payload)

    def get(self, call_id: str) -> Dict[str, Any]:
        """
        Get call status and details.

        Args:
            call_id: The call's unique identifier

        Returns:
            The call
        """
        self._require_id(call_id, "Call")
        return self._get(Endpoints.CALL.format(call_id=call_id))

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        agent_id: Optional[str] = None,
        status: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> Any:
        """
        List calls.

        Args:
            page: Page number (1-indexed, defaults to 1)
            limit: Number of items per page (defaults to 20)
            agent_id: Filter by agent
            status: Filter by call status
            from_date: Only calls on or after this date (ISO format)
            to_date: Only calls on or before this date (ISO format)

        Returns:
            The page of calls as returned by the API
        """
        params = self._build_pagination_params(
            page=page,
            limit=limit,
            agent_id=agent_id,
            status=status,
            from_date=from_date,
            to_date=to_date,
        )
        return self._get(Endpoints.CALLS, params=params)

    def get_transcript(self, call_id: str) -> Any:
        """Get the transcript of a call."""
        self._require_id(call_id, "Call")
        return self._get(Endpoints.CALL_TRANSCRIPT.format(call_id=call_id))

    def get_recording(self, call_id: str) -> Any:
        """Get the recording URL of a call."""
        self._require_id(call_id, "Call")
        return self._get(Endpoints.CALL_RECORDING.format(call_id=call_id))
