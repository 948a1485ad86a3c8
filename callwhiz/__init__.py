"""
CallWhiz Python SDK

A Python client for the CallWhiz voice agent platform. Provides access to
agents, calls, webhooks, conversations, usage reporting and API keys, with
request payloads validated before they are sent.

Example:
    >>> from callwhiz import CallWhiz
    >>> client = CallWhiz(api_key="your-api-key")
    >>> agent = client.create_agent(
    ...     name="Sales Agent",
    ...     voice={"provider": "openai", "voice_id": "alloy"},
    ...     llm={"provider": "openai", "model": "gpt-4"},
    ...     prompt="You are a friendly sales assistant.",
    ... )
    >>> call = client.start_call(
    ...     agent_id=agent["id"],
    ...     phone_number="+1234567890"
    ... )
"""

__version__ = "1.0.0"
__author__ = "CallWhiz Team"
__license__ = "MIT"

from callwhiz.client import AsyncCallWhiz, CallWhiz
from callwhiz.config import ClientConfig
from callwhiz.models import (
    Agent,
    AgentCreate,
    AgentSettings,
    AgentUpdate,
    ApiKey,
    ApiKeyCreate,
    Call,
    CallCreate,
    Conversation,
    LLMConfig,
    VoiceConfig,
    Webhook,
    WebhookCreate,
    WebhookUpdate,
    validate,
)
from callwhiz.exceptions import (
    APIError,
    AuthenticationError,
    CallWhizError,
    ErrorKind,
    RateLimitError,
    ValidationError,
)
from callwhiz.signature import compute_webhook_signature, verify_webhook_signature

__all__ = [
    # Main client
    "CallWhiz",
    "AsyncCallWhiz",
    "ClientConfig",

    # Models
    "Agent",
    "Call",
    "Webhook",
    "ApiKey",
    "Conversation",

    # Request schemas
    "AgentCreate",
    "AgentUpdate",
    "AgentSettings",
    "VoiceConfig",
    "LLMConfig",
    "CallCreate",
    "WebhookCreate",
    "WebhookUpdate",
    "ApiKeyCreate",
    "validate",

    # Exceptions
    "CallWhizError",
    "ErrorKind",
    "AuthenticationError",
    "ValidationError",
    "RateLimitError",
    "APIError",

    # Webhook signatures
    "compute_webhook_signature",
    "verify_webhook_signature",
]
