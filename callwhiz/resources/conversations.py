"""
CallWhiz Python SDK - Conversations Resource

This module provides read access to conversation history.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from callwhiz.config import Endpoints
from callwhiz.resources.base import BaseResource


class ConversationsResource(BaseResource):
    """
    Resource for reading conversations.

    A conversation is the dialogue between an agent and the person on the
    other end of a call.
    """

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        agent_id: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> Any:
        """
        List conversations.

        Args:
            page: Page number (1-indexed, defaults to 1)
            limit: Number of items per page (defaults to 20)
            agent_id: Filter by agent
            from_date: Filter by start date (ISO format)
            to_date: Filter by end date (ISO format)

        Returns:
            The page of conversations as returned by the API
        """
        params = self._build_pagination_params(
            page=page,
            limit=limit,
            agent_id=agent_id,
            from_date=from_date,
            to_date=to_date,
        )
        return self._get(Endpoints.CONVERSATIONS, params=params)

    def get(self, conversation_id: str) -> Dict[str, Any]:
        """
        Get a conversation by ID.

        Args:
            conversation_id: The conversation's unique identifier

        Returns:
            The conversation with its messages
        """
        self._require_id(conversation_id, "Conversation")
        return self._get(Endpoints.CONVERSATION.format(conversation_id=conversation_id))
