"""
CallWhiz Python SDK - Agents Resource

This module provides methods for managing voice agents.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from callwhiz.config import Endpoints
from callwhiz.models import validate
from callwhiz.resources.base import BaseResource


class AgentsResource(BaseResource):
    """
    Resource for managing voice agents.

    An agent combines a voice, a language model and a prompt into something
    that can take part in a phone call.

    Example:
        >>> client = CallWhiz(api_key="...")
        >>> agent = client.agents.create(
        ...     name="Support Agent",
        ...     voice={"provider": "openai", "voice_id": "alloy"},
        ...     llm={"provider": "openai", "model": "gpt-4"},
        ...     prompt="You are a helpful support agent.",
        ... )
        >>> print(agent["id"])
    """

    def create(
        self,
        name: Optional[str] = None,
        voice: Optional[Dict[str, Any]] = None,
        llm: Optional[Dict[str, Any]] = None,
        prompt: Optional[str] = None,
        description: Optional[str] = None,
        first_message: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Create a new agent.

        Args:
            name: Display name of the agent (required)
            voice: Voice settings with provider and voice_id (required).
                speed and pitch default to 1.
            llm: Language model settings with provider and model (required).
                temperature defaults to 0.7 and max_tokens to 150.
            prompt: System prompt (required)
            description: Description of the agent
            first_message: What the agent says when the call connects
            settings: Call behaviour settings. Missing values default to
                max_call_duration=1800, enable_interruptions=True,
                silence_timeout=5 and response_delay=0.5.
            metadata: Arbitrary key/value data stored with the agent

        Returns:
            The created agent

        Raises:
            ValidationError: If a required field is missing or invalid
        """
        data = self._compact(
            name=name,
            voice=voice,
            llm=llm,
            prompt=prompt,
            description=description,
            first_message=first_message,
            settings=settings,
            metadata=metadata,
        )
        payload = validate("agent", "create", data)
        return self._post(Endpoints.AGENTS, json=payload)

    def get(self, agent_id: str) -> Dict[str, Any]:
        """
        Get an agent by ID.

        Args:
            agent_id: The agent's unique identifier

        Returns:
            The agent
        """
        self._require_id(agent_id, "Agent")
        return self._get(Endpoints.AGENT.format(agent_id=agent_id))

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[str] = None,
    ) -> Any:
        """
        List agents.

        Args:
            page: Page number (1-indexed, defaults to 1)
            limit: Number of items per page (defaults to 20)
            status: Filter by agent status

        Returns:
            The page of agents as returned by the API
        """
        params = self._build_pagination_params(page=page, limit=limit, status=status)
        return self._get(Endpoints.AGENTS, params=params)

    def update(
        self,
        agent_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        voice: Optional[Dict[str, Any]] = None,
        llm: Optional[Dict[str, Any]] = None,
        prompt: Optional[str] = None,
        first_message: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
        status: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Update an agent.

        Only the fields passed are sent; at least one is required.

        Args:
            agent_id: The agent's unique identifier
            name: New name
            description: New description
            voice: Voice settings to change
            llm: Language model settings to change
            prompt: New system prompt
            first_message: New greeting
            settings: Call behaviour settings to change
            status: New status
            metadata: New metadata

        Returns:
            The updated agent
        """
        self._require_id(agent_id, "Agent")
        data = self._compact(
            name=name,
            description=description,
            voice=voice,
            llm=llm,
            prompt=prompt,
            first_message=first_message,
            settings=settings,
            status=status,
            metadata=metadata,
        )
        payload = validate("agent", "update", data)
        return self._put(Endpoints.AGENT.format(agent_id=agent_id), json=payload)

    def delete(self, agent_id: str) -> bool:
        """
        Delete an agent.

        The agent is deactivated rather than erased on the server.

        Args:
            agent_id: The agent's unique identifier

        Returns:
            True once the API confirmed the deletion
        """
        self._require_id(agent_id, "Agent")
        return self._delete(Endpoints.AGENT.format(agent_id=agent_id))
