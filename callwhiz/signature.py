"""
CallWhiz Python SDK - Webhook Signatures

Utilities for verifying that a webhook request was sent by CallWhiz.

Example:
    >>> body = request.body  # raw bytes, before any JSON parsing
    >>> if not verify_webhook_signature(body, signature, webhook_secret):
    ...     return 401
"""

import hashlib
import hmac
from typing import Union


SIGNATURE_PREFIX = "sha256="


def _to_bytes(value: Union[bytes, str]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


def compute_webhook_signature(payload: Union[bytes, str], secret: Union[bytes, str]) -> str:
    """
    Compute the signature CallWhiz sends for a payload.

    Args:
        payload: Raw request body
        secret: Webhook signing secret

    Returns:
        Signature in the form "sha256=<hex digest>"
    """
    digest = hmac.new(
        _to_bytes(secret),
        _to_bytes(payload),
        hashlib.sha256,
    ).hexdigest()
    return f"{SIGNATURE_PREFIX}{digest}"


def verify_webhook_signature(
    payload: Union[bytes, str],
    signature: str,
    secret: Union[bytes, str],
) -> bool:
    """
    Verify a webhook signature.

    No timestamp check is done, so a captured request can be replayed.

    Args:
        payload: Raw request body
        signature: Signature header value
        secret: Webhook signing secret

    Returns:
        True if the signature matches the payload
    """
    if not isinstance(signature, str):
        return False

    expected = compute_webhook_signature(payload, secret)

    # Compare signatures (constant-time comparison)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
