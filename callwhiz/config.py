"""
CallWhiz Python SDK - Configuration

This module contains configuration classes and defaults for the SDK.
"""

from dataclasses import dataclass


DEFAULT_BASE_URL = "http://localhost:8000/v1/api/developer/v1"
DEFAULT_TIMEOUT = 30.0

# Environment variables read when the client is built without explicit values
API_KEY_ENV_VAR = "CALLWHIZ_API_KEY"
BASE_URL_ENV_VAR = "CALLWHIZ_BASE_URL"

API_KEY_HEADER = "X-API-Key"


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration for the CallWhiz client.

    Attributes:
        api_key: API key sent in the X-API-Key header
        base_url: Base URL for the API, without a trailing slash
        timeout: Request timeout in seconds
        debug: Enable debug logging
    """
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False


# Endpoints
class Endpoints:
    """API endpoint paths, relative to the configured base URL."""

    # Agents
    AGENTS = "/agents"
    AGENT = "/agents/{agent_id}"

    # Calls
    CALLS = "/calls"
    CALL = "/calls/{call_id}"
    CALL_TRANSCRIPT = "/calls/{call_id}/transcript"
    CALL_RECORDING = "/calls/{call_id}/recording"

    # Webhooks
    WEBHOOKS = "/webhooks"
    WEBHOOK = "/webhooks/{webhook_id}"
    WEBHOOK_EVENTS = "/webhooks/events"

    # Conversations
    CONVERSATIONS = "/conversations"
    CONVERSATION = "/conversations/{conversation_id}"

    # Usage
    USAGE = "/usage"
    USAGE_CREDITS = "/usage/credits"
    USAGE_LIMITS = "/usage/limits"

    # API Keys
    API_KEYS = "/api-keys"


class Limits:
    """Request defaults and constraints."""

    # Pagination
    DEFAULT_PAGE = 1
    DEFAULT_PAGE_SIZE = 20

    # Usage reports
    DEFAULT_USAGE_PERIOD = "month"

    # API keys
    MAX_API_KEY_NAME_LENGTH = 100
