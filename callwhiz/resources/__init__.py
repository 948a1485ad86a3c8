"""
CallWhiz Python SDK - Resources

This module contains all API resource classes.
"""

from callwhiz.resources.base import BaseResource
from callwhiz.resources.agents import AgentsResource
from callwhiz.resources.calls import CallsResource
from callwhiz.resources.webhooks import WebhooksResource
from callwhiz.resources.conversations import ConversationsResource
from callwhiz.resources.usage import UsageResource
from callwhiz.resources.api_keys import APIKeysResource

__all__ = [
    "BaseResource",
    "AgentsResource",
    "CallsResource",
    "WebhooksResource",
    "ConversationsResource",
    "UsageResource",
    "APIKeysResource",
]
