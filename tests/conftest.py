"""Shared pytest fixtures for testing."""

from typing import AsyncGenerator, Generator
from uuid import uuid4

import pytest
import pytest_asyncio
import respx

from callwhiz import AsyncCallWhiz, CallWhiz


BASE_URL = "https://api.callwhiz.test/v1"
API_KEY = "cw_test_0123456789abcdef"


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the developer's own CallWhiz settings out of the tests."""
    monkeypatch.delenv("CALLWHIZ_API_KEY", raising=False)
    monkeypatch.delenv("CALLWHIZ_BASE_URL", raising=False)


@pytest.fixture
def client() -> Generator[CallWhiz, None, None]:
    """Create a sync client pointed at the mocked API."""
    with CallWhiz(api_key=API_KEY, base_url=BASE_URL) as c:
        yield c


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncCallWhiz, None]:
    """Create an async client pointed at the mocked API."""
    async with AsyncCallWhiz(api_key=API_KEY, base_url=BASE_URL) as c:
        yield c


@pytest.fixture
def mock_api() -> Generator[respx.MockRouter, None, None]:
    """
    Mock the HTTP layer.

    Any request without a matching route fails the test, so a test that
    registers no routes also proves nothing was sent.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# =============================================================================
# Test Data Fixtures
# =============================================================================


@pytest.fixture
def agent_id() -> str:
    """Generate a test agent ID."""
    return f"agt_{uuid4().hex}"


@pytest.fixture
def agent_payload() -> dict:
    """Minimal valid agent creation payload."""
    return {
        "name": "Support Agent",
        "voice": {"provider": "openai", "voice_id": "alloy"},
        "llm": {"provider": "openai", "model": "gpt-4"},
        "prompt": "You are a helpful customer support agent.",
    }
