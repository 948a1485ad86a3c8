"""
CallWhiz Python SDK - Webhooks Resource

This module provides methods for managing webhooks.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from callwhiz.config import Endpoints
from callwhiz.models import validate
from callwhiz.resources.base import BaseResource


class WebhooksResource(BaseResource):
    """
    Resource for managing webhooks.

    Webhooks deliver call and agent events to your own HTTP endpoint. Use
    verify_webhook_signature to check incoming deliveries.

    Example:
        >>> webhook = client.webhooks.create(
        ...     url="https://example.com/webhooks/callwhiz",
        ...     events=["call.started", "call.completed"],
        ... )
    """

    def create(
        self,
        url: Optional[str] = None,
        events: Optional[List[str]] = None,
        description: Optional[str] = None,
        agent_ids: Optional[List[str]] = None,
        active: bool = True,
        retry_policy: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Create a webhook.

        Args:
            url: http(s) endpoint receiving the events (required)
            events: Event names to subscribe to, at least one (required)
            description: Description of the webhook
            agent_ids: Only deliver events for these agents
            active: Whether deliveries are enabled
            retry_policy: Delivery retry settings
            headers: Extra headers sent with each delivery
            metadata: Arbitrary key/value data stored with the webhook

        Returns:
            The created webhook
        """
        data = self._compact(
            url=url,
            events=events,
            description=description,
            agent_ids=agent_ids,
            active=active,
            retry_policy=retry_policy,
            headers=headers,
            metadata=metadata,
        )
        payload = validate("webhook", "create", data)
        return self._post(Endpoints.WEBHOOKS, json=payload)

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """List webhooks."""
        params = self._build_pagination_params(page=page, limit=limit)
        return self._get(Endpoints.WEBHOOKS, params=params)

    def get(self, webhook_id: str) -> Dict[str, Any]:
        """
        Get a webhook by ID.

        Args:
            webhook_id: The webhook's unique identifier

        Returns:
            The webhook
        """
        self._require_id(webhook_id, "Webhook")
        return self._get(Endpoints.WEBHOOK.format(webhook_id=webhook_id))

    def update(
        self,
        webhook_id: str,
        url: Optional[str] = None,
        events: Optional[List[str]] = None,
        description: Optional[str] = None,
        agent_ids: Optional[List[str]] = None,
        active: Optional[bool] = None,
        retry_policy: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Update a webhook.

        Only the fields passed are sent; at least one is required.

        Args:
            webhook_id: The webhook's unique identifier
            url: New endpoint URL
            events: New list of events
            description: New description
            agent_ids: New agent filter
            active: Enable or disable deliveries
            retry_policy: New retry settings
            headers: New custom headers
            metadata: New metadata

        Returns:
            The updated webhook
        """
        self._require_id(webhook_id, "Webhook")
        data = self._compact(
            url=url,
            events=events,
            description=description,
            agent_ids=agent_ids,
            active=active,
            retry_policy=retry_policy,
            headers=headers,
            metadata=metadata,
        )
        payload = validate("webhook", "update", data)
        return self._put(Endpoints.WEBHOOK.format(webhook_id=webhook_id), json=payload)

    def delete(self, webhook_id: str) -> bool:
        """
        Delete a webhook.

        Args:
            webhook_id: The webhook's unique identifier

        Returns:
            True once the API confirmed the deletion
        """
        self._require_id(webhook_id, "Webhook")
        return self._delete(Endpoints.WEBHOOK.format(webhook_id=webhook_id))

    def list_events(self) -> Any:
        """Get the names of all events a webhook can subscribe to."""
        return self._get(Endpoints.WEBHOOK_EVENTS)
