"""Unit tests for email dispatch clients."""

import json

import httpx
import pytest

from gate.adapter.email import MockEmailDispatchClient, RealEmailDispatchClient
from gate.domain.service import EmailMessage


def make_message(to: str = "alice@example.com") -> EmailMessage:
    return EmailMessage(
        to=to,
        from_email="invites@curry2cakes.com",
        subject="Your Exclusive Curry2Cakes Invite Code",
        html="<p>C2CABCD12345</p>",
    )


def make_client(handler) -> RealEmailDispatchClient:
    return RealEmailDispatchClient(
        api_url="https://email.test/v1/send",
        api_key="key",
        api_secret="secret",
        timeout_seconds=2.0,
        transport=httpx.MockTransport(handler),
    )


class TestRealEmailDispatchClient:
    """Tests for RealEmailDispatchClient."""

    @pytest.mark.asyncio
    async def test_posts_message_with_credentials(self):
        """Should POST the message as JSON with the sso-key header."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["method"] = request.method
            captured["url"] = str(request.url)
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"messageId": "msg-1"})

        result = await make_client(handler).send(make_message())

        assert result.success is True
        assert result.message_id == "msg-1"
        assert captured["method"] == "POST"
        assert captured["url"] == "https://email.test/v1/send"
        assert captured["auth"] == "sso-key key:secret"
        assert captured["body"] == {
            "to": "alice@example.com",
            "from": "invites@curry2cakes.com",
            "subject": "Your Exclusive Curry2Cakes Invite Code",
            "html": "<p>C2CABCD12345</p>",
        }

    @pytest.mark.asyncio
    async def test_empty_success_body(self):
        """A 2xx without a body still counts as sent."""
        result = await make_client(lambda request: httpx.Response(202)).send(
            make_message()
        )

        assert result.success is True
        assert result.message_id is None

    @pytest.mark.asyncio
    async def test_error_status_is_failure(self):
        """Non-2xx responses are reported, not raised."""
        result = await make_client(
            lambda request: httpx.Response(401, text="bad credentials")
        ).send(make_message())

        assert result.success is False
        assert "401" in result.error
        assert "bad credentials" in result.error

    @pytest.mark.asyncio
    async def test_transport_error_is_failure(self):
        """Connection problems and timeouts are reported, not raised."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        result = await make_client(handler).send(make_message())

        assert result.success is False
        assert "timed out" in result.error


class TestMockEmailDispatchClient:
    """Tests for MockEmailDispatchClient."""

    @pytest.mark.asyncio
    async def test_records_messages(self):
        client = MockEmailDispatchClient()

        result = await client.send(make_message("alice@example.com"))
        await client.send(make_message("bob@example.com"))

        assert result.success is True
        assert result.message_id.startswith("mock-")
        assert [m.to for m in client.sent] == ["alice@example.com", "bob@example.com"]
        assert client.last_message_to("bob@example.com").to == "bob@example.com"
        assert client.last_message_to("carol@example.com") is None

    @pytest.mark.asyncio
    async def test_failure_mode(self):
        client = MockEmailDispatchClient(should_fail=True)

        result = await client.send(make_message())

        assert result.success is False
        assert client.sent == []
