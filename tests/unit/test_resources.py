"""
Unit Tests for API Resources

Tests for the paths, query parameters and payloads each operation sends.
"""

import json

import httpx
import pytest

from callwhiz.exceptions import APIError, ValidationError


def ok(data):
    """Build a successful response envelope."""
    return {"success": True, "data": data}


def sent_json(route):
    return json.loads(route.calls.last.request.content)


def sent_params(route):
    return dict(route.calls.last.request.url.params)


# =============================================================================
# Agents
# =============================================================================


class TestAgents:
    """Tests for agent operations."""

    def test_create_agent(self, client, mock_api, agent_payload):
        """Test that the validated payload, defaults included, is posted."""
        route = mock_api.post(path="/v1/agents").mock(
            return_value=httpx.Response(201, json=ok({"id": "agt_1", **agent_payload}))
        )

        result = client.create_agent(**agent_payload, first_message="Hello!")

        assert result["id"] == "agt_1"
        body = sent_json(route)
        assert body["first_message"] == "Hello!"
        assert body["voice"]["speed"] == 1
        assert body["llm"]["max_tokens"] == 150
        assert "description" not in body
        assert "settings" not in body

    def test_create_agent_missing_voice_sends_nothing(self, client, mock_api, agent_payload):
        """Test that invalid payloads never reach the API."""
        del agent_payload["voice"]

        with pytest.raises(ValidationError):
            client.create_agent(**agent_payload)

        assert mock_api.calls.call_count == 0

    def test_get_agent(self, client, mock_api, agent_id):
        """Test fetching an agent."""
        mock_api.get(path=f"/v1/agents/{agent_id}").mock(
            return_value=httpx.Response(200, json=ok({"id": agent_id, "name": "Support"}))
        )

        assert client.get_agent(agent_id) == {"id": agent_id, "name": "Support"}

    def test_list_agents_defaults(self, client, mock_api):
        """Test that listing defaults to page 1 and 20 items."""
        route = mock_api.get(path="/v1/agents").mock(
            return_value=httpx.Response(200, json=ok([]))
        )

        client.list_agents()

        assert sent_params(route) == {"page": "1", "limit": "20"}

    def test_list_agents_with_status(self, client, mock_api):
        """Test that the status filter is sent when given."""
        route = mock_api.get(path="/v1/agents").mock(
            return_value=httpx.Response(200, json=ok([]))
        )

        client.list_agents(page=3, limit=50, status="active")

        assert sent_params(route) == {"page": "3", "limit": "50", "status": "active"}

    def test_list_agents_ignores_empty_filter(self, client, mock_api):
        """Test that an empty filter value is left out."""
        route = mock_api.get(path="/v1/agents").mock(
            return_value=httpx.Response(200, json=ok([]))
        )

        client.list_agents(status="")

        assert "status" not in sent_params(route)

    def test_update_agent_sends_only_given_fields(self, client, mock_api, agent_id):
        """Test partial updates."""
        route = mock_api.put(path=f"/v1/agents/{agent_id}").mock(
            return_value=httpx.Response(200, json=ok({"id": agent_id, "name": "Renamed"}))
        )

        client.update_agent(agent_id, name="Renamed", llm={"temperature": 0.2})

        assert sent_json(route) == {"name": "Renamed", "llm": {"temperature": 0.2}}

    def test_update_agent_without_fields(self, client, mock_api, agent_id):
        """Test that an empty update is rejected locally."""
        with pytest.raises(ValidationError, match="at least one field"):
            client.update_agent(agent_id)

        assert mock_api.calls.call_count == 0

    def test_update_agent_with_empty_string(self, client, mock_api, agent_id):
        """Test that an explicitly empty value is validated, not dropped."""
        with pytest.raises(ValidationError) as exc_info:
            client.update_agent(agent_id, description="")

        assert "description" in exc_info.value.field_errors
        assert mock_api.calls.call_count == 0

    def test_delete_agent(self, client, mock_api, agent_id):
        """Test that delete returns True instead of the response data."""
        route = mock_api.delete(path=f"/v1/agents/{agent_id}").mock(
            return_value=httpx.Response(200, json=ok({"id": agent_id, "status": "inactive"}))
        )

        assert client.delete_agent(agent_id) is True
        assert route.called

    def test_delete_agent_failure(self, client, mock_api, agent_id):
        """Test that a failed delete raises instead of returning."""
        mock_api.delete(path=f"/v1/agents/{agent_id}").mock(
            return_value=httpx.Response(200, json={"success": False, "error": {"message": "in use"}})
        )

        with pytest.raises(APIError, match="in use"):
            client.delete_agent(agent_id)

    def test_resource_style_access(self, client, mock_api, agent_id):
        """Test that operations are reachable through client.agents too."""
        mock_api.get(path=f"/v1/agents/{agent_id}").mock(
            return_value=httpx.Response(200, json=ok({"id": agent_id}))
        )

        assert client.agents.get(agent_id) == {"id": agent_id}


# =============================================================================
# Identifier Checks
# =============================================================================


@pytest.mark.parametrize(
    "operation, label",
    [
        ("get_agent", "Agent"),
        ("delete_agent", "Agent"),
        ("get_call", "Call"),
        ("get_call_transcript", "Call"),
        ("get_call_recording", "Call"),
        ("get_webhook", "Webhook"),
        ("delete_webhook", "Webhook"),
        ("get_conversation", "Conversation"),
    ],
)
@pytest.mark.parametrize("missing", ["", None])
def test_missing_id_fails_before_request(client, mock_api, operation, label, missing):
    """Test that operations on a single resource need its ID."""
    with pytest.raises(ValidationError) as exc_info:
        getattr(client, operation)(missing)

    assert exc_info.value.message == f"{label} ID is required"
    assert mock_api.calls.call_count == 0


@pytest.mark.parametrize(
    "operation, fields",
    [
        ("update_agent", {"name": "Renamed"}),
        ("update_webhook", {"active": False}),
    ],
)
def test_update_without_id_fails_before_request(client, mock_api, operation, fields):
    """Test that updates check the ID before the payload."""
    with pytest.raises(ValidationError, match="ID is required"):
        getattr(client, operation)("", **fields)

    assert mock_api.calls.call_count == 0


# =============================================================================
# Calls
# =============================================================================


class TestCalls:
    """Tests for call operations."""

    def test_start_call(self, client, mock_api):
        """Test starting a call."""
        route = mock_api.post(path="/v1/calls").mock(
            return_value=httpx.Response(201, json=ok({"id": "call_1", "status": "queued"}))
        )

        result = client.start_call(
            agent_id="agt_1",
            phone_number="+1234567890",
            context={"customer": "Ada"},
        )

        assert result == {"id": "call_1", "status": "queued"}
        assert sent_json(route) == {
            "agent_id": "agt_1",
            "phone_number": "+1234567890",
            "context": {"customer": "Ada"},
        }

    def test_start_call_invalid_number(self, client, mock_api):
        """Test that a bad phone number is caught locally."""
        with pytest.raises(ValidationError) as exc_info:
            client.start_call(agent_id="agt_1", phone_number="0123456789")

        assert "phone_number" in exc_info.value.field_errors
        assert mock_api.calls.call_count == 0

    def test_list_calls_filters(self, client, mock_api):
        """Test that only the given filters are sent."""
        route = mock_api.get(path="/v1/calls").mock(
            return_value=httpx.Response(200, json=ok([]))
        )

        client.list_calls(agent_id="agt_1", from_date="2024-01-01")

        assert sent_params(route) == {
            "page": "1",
            "limit": "20",
            "agent_id": "agt_1",
            "from_date": "2024-01-01",
        }

    def test_get_call(self, client, mock_api):
        """Test fetching a call."""
        mock_api.get(path="/v1/calls/call_1").mock(
            return_value=httpx.Response(200, json=ok({"id": "call_1", "status": "completed"}))
        )

        assert client.get_call("call_1")["status"] == "completed"

    def test_transcript_and_recording(self, client, mock_api):
        """Test the transcript and recording sub-resources."""
        mock_api.get(path="/v1/calls/call_1/transcript").mock(
            return_value=httpx.Response(200, json=ok({"messages": []}))
        )
        mock_api.get(path="/v1/calls/call_1/recording").mock(
            return_value=httpx.Response(200, json=ok({"url": "https://cdn.example.com/r.mp3"}))
        )

        assert client.get_call_transcript("call_1") == {"messages": []}
        assert client.get_call_recording("call_1") == {"url": "https://cdn.example.com/r.mp3"}


# =============================================================================
# Webhooks
# =============================================================================


class TestWebhooks:
    """Tests for webhook operations."""

    def test_create_webhook_is_active_by_default(self, client, mock_api):
        """Test that new webhooks are sent as active."""
        route = mock_api.post(path="/v1/webhooks").mock(
            return_value=httpx.Response(201, json=ok({"id": "wh_1"}))
        )

        client.create_webhook(url="https://example.com/hook", events=["call.completed"])

        assert sent_json(route) == {
            "url": "https://example.com/hook",
            "events": ["call.completed"],
            "active": True,
        }

    def test_create_webhook_with_options(self, client, mock_api):
        """Test the optional webhook fields."""
        route = mock_api.post(path="/v1/webhooks").mock(
            return_value=httpx.Response(201, json=ok({"id": "wh_1"}))
        )

        client.create_webhook(
            url="https://example.com/hook",
            events=["call.started"],
            agent_ids=["agt_1"],
            retry_policy={"max_attempts": 3},
            headers={"X-Tenant": "acme"},
        )

        body = sent_json(route)
        assert body["agent_ids"] == ["agt_1"]
        assert body["retry_policy"] == {"max_attempts": 3}
        assert body["headers"] == {"X-Tenant": "acme"}

    def test_create_webhook_rejects_ftp(self, client, mock_api):
        """Test that non-http URLs are caught locally."""
        with pytest.raises(ValidationError):
            client.create_webhook(url="ftp://example.com", events=["call.started"])

        assert mock_api.calls.call_count == 0

    def test_list_webhooks(self, client, mock_api):
        """Test listing webhooks."""
        route = mock_api.get(path="/v1/webhooks").mock(
            return_value=httpx.Response(200, json=ok([{"id": "wh_1"}]))
        )

        assert client.list_webhooks() == [{"id": "wh_1"}]
        assert sent_params(route) == {"page": "1", "limit": "20"}

    def test_get_webhook(self, client, mock_api):
        """Test fetching a webhook."""
        mock_api.get(path="/v1/webhooks/wh_1").mock(
            return_value=httpx.Response(200, json=ok({"id": "wh_1"}))
        )

        assert client.get_webhook("wh_1") == {"id": "wh_1"}

    def test_update_webhook(self, client, mock_api):
        """Test disabling a webhook."""
        route = mock_api.put(path="/v1/webhooks/wh_1").mock(
            return_value=httpx.Response(200, json=ok({"id": "wh_1", "active": False}))
        )

        client.update_webhook("wh_1", active=False)

        assert sent_json(route) == {"active": False}

    def test_update_webhook_without_fields(self, client, mock_api):
        """Test that an empty webhook update is rejected locally."""
        with pytest.raises(ValidationError):
            client.update_webhook("wh_1")

        assert mock_api.calls.call_count == 0

    def test_delete_webhook(self, client, mock_api):
        """Test deleting a webhook."""
        mock_api.delete(path="/v1/webhooks/wh_1").mock(
            return_value=httpx.Response(200, json=ok(None))
        )

        assert client.delete_webhook("wh_1") is True

    def test_available_events(self, client, mock_api):
        """Test listing the event names."""
        events = ["call.started", "call.completed", "call.failed"]
        mock_api.get(path="/v1/webhooks/events").mock(
            return_value=httpx.Response(200, json=ok(events))
        )

        assert client.get_available_webhook_events() == events


# =============================================================================
# Conversations
# =============================================================================


class TestConversations:
    """Tests for conversation operations."""

    def test_list_conversations(self, client, mock_api):
        """Test listing conversations with a date range."""
        route = mock_api.get(path="/v1/conversations").mock(
            return_value=httpx.Response(200, json=ok([]))
        )

        client.list_conversations(agent_id="agt_1", from_date="2024-01-01", to_date="2024-01-31")

        assert sent_params(route) == {
            "page": "1",
            "limit": "20",
            "agent_id": "agt_1",
            "from_date": "2024-01-01",
            "to_date": "2024-01-31",
        }

    def test_get_conversation(self, client, mock_api):
        """Test fetching a conversation."""
        mock_api.get(path="/v1/conversations/conv_1").mock(
            return_value=httpx.Response(200, json=ok({"id": "conv_1", "messages": []}))
        )

        assert client.get_conversation("conv_1") == {"id": "conv_1", "messages": []}


# =============================================================================
# Usage
# =============================================================================


class TestUsage:
    """Tests for usage operations."""

    def test_usage_defaults_to_month(self, client, mock_api):
        """Test the default usage period."""
        route = mock_api.get(path="/v1/usage").mock(
            return_value=httpx.Response(200, json=ok({"calls": 12}))
        )

        assert client.get_usage() == {"calls": 12}
        assert sent_params(route) == {"period": "month"}

    def test_usage_with_range(self, client, mock_api):
        """Test the usage date range."""
        route = mock_api.get(path="/v1/usage").mock(
            return_value=httpx.Response(200, json=ok({}))
        )

        client.get_usage(period="day", to_date="2024-02-01")

        assert sent_params(route) == {"period": "day", "to_date": "2024-02-01"}

    def test_usage_without_period(self, client, mock_api):
        """Test that a period of None falls back to the monthly report."""
        route = mock_api.get(path="/v1/usage").mock(
            return_value=httpx.Response(200, json=ok({}))
        )

        client.get_usage(period=None)

        assert sent_params(route) == {"period": "month"}

    def test_credits_and_limits(self, client, mock_api):
        """Test the credit balance and account limits."""
        mock_api.get(path="/v1/usage/credits").mock(
            return_value=httpx.Response(200, json=ok({"balance": 42.5}))
        )
        mock_api.get(path="/v1/usage/limits").mock(
            return_value=httpx.Response(200, json=ok({"max_concurrent_calls": 5}))
        )

        assert client.get_credit_balance() == {"balance": 42.5}
        assert client.get_account_limits() == {"max_concurrent_calls": 5}


# =============================================================================
# API Keys
# =============================================================================


class TestApiKeys:
    """Tests for API key operations."""

    def test_create_api_key(self, client, mock_api):
        """Test that the secret key comes back on creation."""
        route = mock_api.post(path="/v1/api-keys").mock(
            return_value=httpx.Response(
                201, json=ok({"id": "key_1", "name": "CI", "key": "cw_live_secret"})
            )
        )

        result = client.create_api_key(name="CI", permissions=["agents:read"])

        assert result["key"] == "cw_live_secret"
        assert sent_json(route) == {"name": "CI", "permissions": ["agents:read"]}

    def test_create_api_key_name_too_long(self, client, mock_api):
        """Test the name length limit."""
        with pytest.raises(ValidationError):
            client.create_api_key(name="k" * 101)

        assert mock_api.calls.call_count == 0

    def test_list_api_keys(self, client, mock_api):
        """Test listing API keys."""
        mock_api.get(path="/v1/api-keys").mock(
            return_value=httpx.Response(200, json=ok([{"id": "key_1", "name": "CI"}]))
        )

        assert client.list_api_keys() == [{"id": "key_1", "name": "CI"}]
