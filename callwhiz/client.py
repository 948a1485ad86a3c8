"""
CallWhiz Python SDK - Main Client

This module provides the CallWhiz and AsyncCallWhiz client classes that serve
as the entry point for all API interactions.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

import httpx

from callwhiz import __version__
from callwhiz.config import (
    API_KEY_ENV_VAR,
    API_KEY_HEADER,
    BASE_URL_ENV_VAR,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientConfig,
    Limits,
)
from callwhiz.exceptions import (
    APIError,
    AuthenticationError,
    RateLimitError,
    ValidationError,
)
from callwhiz.resources.agents import AgentsResource
from callwhiz.resources.api_keys import APIKeysResource
from callwhiz.resources.calls import CallsResource
from callwhiz.resources.conversations import ConversationsResource
from callwhiz.resources.usage import UsageResource
from callwhiz.resources.webhooks import WebhooksResource
from callwhiz.signature import verify_webhook_signature

logger = logging.getLogger("callwhiz")


class BaseClient:
    """
    Functionality shared by the sync and async clients.

    Holds the configuration and the resources, classifies responses, and
    exposes every API operation as a method. With AsyncCallWhiz the
    operation methods return coroutines.
    """

    verify_webhook_signature = staticmethod(verify_webhook_signature)

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
    ) -> None:
        # Get API key from parameter or environment
        api_key = api_key or os.environ.get(API_KEY_ENV_VAR)
        if not api_key:
            raise ValidationError("API key is required")

        base_url = base_url or os.environ.get(BASE_URL_ENV_VAR) or DEFAULT_BASE_URL

        self._config = ClientConfig(
            api_key=api_key,
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            debug=debug,
        )

        if debug:
            logging.basicConfig(level=logging.DEBUG)
            logger.setLevel(logging.DEBUG)

        self._closed = False
        self._init_resources()

    def _init_resources(self) -> None:
        """Initialize all API resources."""
        self.agents = AgentsResource(self)
        self.calls = CallsResource(self)
        self.webhooks = WebhooksResource(self)
        self.conversations = ConversationsResource(self)
        self.usage = UsageResource(self)
        self.api_keys = APIKeysResource(self)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _default_headers(self) -> Dict[str, str]:
        return {
            API_KEY_HEADER: self._config.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"callwhiz-python/{__version__}",
        }

    def _check_open(self) -> None:
        if self._closed:
            raise APIError("Client has been closed")

    # =========================================================================
    # Response handling
    # =========================================================================

    def _handle_response(self, response: httpx.Response) -> Any:
        """
        Classify an API response.

        The HTTP status is checked first; a successful response must then
        carry a {"success": true, "data": ...} envelope.

        Returns:
            The envelope's data

        Raises:
            AuthenticationError: On 401
            ValidationError: On 400 and 422
            RateLimitError: On 429
            APIError: On any other error status or an unsuccessful envelope
        """
        logger.debug(f"Response status: {response.status_code}")

        if not response.is_success:
            self._raise_for_status(response)

        # No content
        if response.status_code == 204:
            return None

        try:
            envelope = response.json()
        except ValueError:
            raise APIError("Unknown error", response=response.text) from None

        if not isinstance(envelope, dict) or not envelope.get("success"):
            raise APIError(_error_message(envelope) or "Unknown error", response=envelope)

        return envelope.get("data")

    def _raise_for_status(self, response: httpx.Response) -> None:
        status = response.status_code

        try:
            body: Any = response.json()
        except ValueError:
            body = response.text

        message = (
            _error_message(body)
            or response.reason_phrase
            or f"Request failed with status code {status}"
        )

        if status == 401:
            raise AuthenticationError("Invalid API key")
        elif status == 404:
            raise APIError("Resource not found", status_code=status)
        elif status in (400, 422):
            raise ValidationError(message)
        elif status == 429:
            raise RateLimitError(
                "Rate limit exceeded",
                retry_after=response.headers.get("Retry-After"),
            )
        else:
            raise APIError(f"HTTP {status}: {message}", status_code=status, response=body)

    # =========================================================================
    # Agents
    # =========================================================================

    def create_agent(
        self,
        name: Optional[str] = None,
        voice: Optional[Dict[str, Any]] = None,
        llm: Optional[Dict[str, Any]] = None,
        prompt: Optional[str] = None,
        description: Optional[str] = None,
        first_message: Optional[str] = None,
        settings: Optional[Dict[str, Any]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Create a new voice agent. See AgentsResource.create."""
        return self.agents.create(
            name=name,
            voice=voice,
            llm=llm,
            prompt=prompt,
            description=description,
            first_message=first_message,
            settings=settings,
            metadata=metadata,
        )

    def get_agent(self, agent_id: str) -> Any:
        """Get an agent by ID."""
        return self.agents.get(agent_id)

    def list_agents(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[str] = None,
    ) -> Any:
        """List agents."""
        return self.agents.list(page=page, limit=limit, status=status)

    def update_agent(
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
    ) -> Any:
        """Update an agent with the fields given. See AgentsResource.update."""
        return self.agents.update(
            agent_id,
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

    def delete_agent(self, agent_id: str) -> Any:
        """Delete an agent. Returns True."""
        return self.agents.delete(agent_id)

    # =========================================================================
    # Calls
    # =========================================================================

    def start_call(
        self,
        agent_id: Optional[str] = None,
        phone_number: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        webhook_url: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Start an outbound call. See CallsResource.start."""
        return self.calls.start(
            agent_id=agent_id,
            phone_number=phone_number,
            context=context,
            webhook_url=webhook_url,
            metadata=metadata,
        )

    def get_call(self, call_id: str) -> Any:
        """Get call status and details."""
        return self.calls.get(call_id)

    def list_calls(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        agent_id: Optional[str] = None,
        status: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> Any:
        """List calls with optional filters."""
        return self.calls.list(
            page=page,
            limit=limit,
            agent_id=agent_id,
            status=status,
            from_date=from_date,
            to_date=to_date,
        )

    def get_call_transcript(self, call_id: str) -> Any:
        return self.calls.get_transcript(call_id)

    def get_call_recording(self, call_id: str) -> Any:
        return self.calls.get_recording(call_id)

    # =========================================================================
    # Webhooks
    # =========================================================================

    def create_webhook(
        self,
        url: Optional[str] = None,
        events: Optional[List[str]] = None,
        description: Optional[str] = None,
        agent_ids: Optional[List[str]] = None,
        active: bool = True,
        retry_policy: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Create a webhook. See WebhooksResource.create."""
        return self.webhooks.create(
            url=url,
            events=events,
            description=description,
            agent_ids=agent_ids,
            active=active,
            retry_policy=retry_policy,
            headers=headers,
            metadata=metadata,
        )

    def list_webhooks(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        return self.webhooks.list(page=page, limit=limit)

    def get_webhook(self, webhook_id: str) -> Any:
        return self.webhooks.get(webhook_id)

    def update_webhook(
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
    ) -> Any:
        """Update a webhook with the fields given. See WebhooksResource.update."""
        return self.webhooks.update(
            webhook_id,
            url=url,
            events=events,
            description=description,
            agent_ids=agent_ids,
            active=active,
            retry_policy=retry_policy,
            headers=headers,
            metadata=metadata,
        )

    def delete_webhook(self, webhook_id: str) -> Any:
        """Delete a webhook. Returns True."""
        return self.webhooks.delete(webhook_id)

    def get_available_webhook_events(self) -> Any:
        return self.webhooks.list_events()

    # =========================================================================
    # Conversations
    # =========================================================================

    def list_conversations(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        agent_id: Optional[str] = None,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> Any:
        """List conversation history."""
        return self.conversations.list(
            page=page,
            limit=limit,
            agent_id=agent_id,
            from_date=from_date,
            to_date=to_date,
        )

    def get_conversation(self, conversation_id: str) -> Any:
        return self.conversations.get(conversation_id)

    # =========================================================================
    # Usage
    # =========================================================================

    def get_usage(
        self,
        period: Optional[str] = Limits.DEFAULT_USAGE_PERIOD,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
    ) -> Any:
        """Get API usage statistics."""
        return self.usage.get(period=period, from_date=from_date, to_date=to_date)

    def get_credit_balance(self) -> Any:
        return self.usage.get_credit_balance()

    def get_account_limits(self) -> Any:
        return self.usage.get_account_limits()

    # =========================================================================
    # API Keys
    # =========================================================================

    def create_api_key(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        permissions: Optional[List[str]] = None,
    ) -> Any:
        """Create a new API key. The secret key is only returned here."""
        return self.api_keys.create(name=name, description=description, permissions=permissions)

    def list_api_keys(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> Any:
        return self.api_keys.list(page=page, limit=limit)


class CallWhiz(BaseClient):
    """
    Main client for interacting with the CallWhiz API.

    Args:
        api_key: Your CallWhiz API key. If not provided, will look for
            the CALLWHIZ_API_KEY environment variable.
        base_url: The base URL for the API. Falls back to CALLWHIZ_BASE_URL,
            then to the default.
        timeout: Request timeout in seconds. Defaults to 30.
        debug: Enable debug logging. Defaults to False.
        transport: Optional httpx transport to send requests through.

    Example:
        >>> with CallWhiz(api_key="your-api-key") as client:
        ...     agents = client.list_agents(limit=50)
        ...     agent = client.get_agent("agent_abc123")

    Attributes:
        agents: Resource for managing agents
        calls: Resource for starting and inspecting calls
        webhooks: Resource for managing webhooks
        conversations: Resource for reading conversations
        usage: Resource for usage, credits and limits
        api_keys: Resource for managing API keys
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        super().__init__(api_key=api_key, base_url=base_url, timeout=timeout, debug=debug)

        self._http_client = httpx.Client(
            base_url=self._config.base_url,
            headers=self._default_headers(),
            timeout=httpx.Timeout(self._config.timeout),
            transport=transport,
            follow_redirects=True,
        )

        logger.debug(f"CallWhiz client initialized with base URL: {self._config.base_url}")

    def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Make an HTTP request to the API.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            path: API endpoint path
            params: Query parameters
            json: JSON body data

        Returns:
            The data carried by the response envelope

        Raises:
            AuthenticationError: If authentication fails
            ValidationError: If the API rejects the request data
            RateLimitError: If rate limit is exceeded
            APIError: For every other failure, including network errors
        """
        self._check_open()

        logger.debug(f"Making {method} request to {path}")
        logger.debug(f"Params: {params}")

        try:
            response = self._http_client.request(
                method=method,
                url=path,
                params=params,
                json=json,
            )
        except httpx.RequestError as e:
            raise APIError(f"Request failed: {e}") from e

        return self._handle_response(response)

    def _delete(self, path: str) -> bool:
        self.request("DELETE", path)
        return True

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._http_client.close()
        self._closed = True
        logger.debug("CallWhiz client closed")

    def __enter__(self) -> "CallWhiz":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def __repr__(self) -> str:
        return f"CallWhiz(base_url='{self._config.base_url}')"


class AsyncCallWhiz(BaseClient):
    """
    Async client for interacting with the CallWhiz API.

    Takes the same arguments as CallWhiz; transport must be an
    httpx.AsyncBaseTransport. Every operation returns a coroutine.

    Local checks run when the operation is called, not when it is awaited:
    a missing ID or an invalid payload raises ValidationError at the call
    site. When building coroutines up front, for example for
    asyncio.gather, call the operations inside the try block that handles
    their errors.

    Example:
        >>> async with AsyncCallWhiz(api_key="your-api-key") as client:
        ...     agent = await client.get_agent("agent_abc123")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        debug: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(api_key=api_key, base_url=base_url, timeout=timeout, debug=debug)

        self._http_client = httpx.AsyncClient(
            base_url=self._config.base_url,
            headers=self._default_headers(),
            timeout=httpx.Timeout(self._config.timeout),
            transport=transport,
            follow_redirects=True,
        )

        logger.debug(f"AsyncCallWhiz client initialized with base URL: {self._config.base_url}")

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make an async HTTP request to the API. See CallWhiz.request."""
        self._check_open()

        logger.debug(f"Making async {method} request to {path}")
        logger.debug(f"Params: {params}")

        try:
            response = await self._http_client.request(
                method=method,
                url=path,
                params=params,
                json=json,
            )
        except httpx.RequestError as e:
            raise APIError(f"Request failed: {e}") from e

        return self._handle_response(response)

    async def _delete(self, path: str) -> bool:
        await self.request("DELETE", path)
        return True

    async def close(self) -> None:
        """Close the async HTTP client."""
        await self._http_client.aclose()
        self._closed = True
        logger.debug("AsyncCallWhiz client closed")

    async def __aenter__(self) -> "AsyncCallWhiz":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return f"AsyncCallWhiz(base_url='{self._config.base_url}')"


def _error_message(body: Any) -> Optional[str]:
    """Pull an error message out of a response body, if it has one."""
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    return body.get("message") or None
