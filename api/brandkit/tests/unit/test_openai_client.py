"""Unit tests for the OpenAI chat-completions client."""

import json

import httpx
import pytest

from brandkit.core.config import Settings
from brandkit.models.exceptions import ProviderError, UnexpectedError
from brandkit.services.openai_client import OpenAIChatClient, extract_message_text
from brandkit.services.prompts import BRAND_DESIGNER_SYSTEM


def _client_with(handler, **kwargs) -> OpenAIChatClient:
    return OpenAIChatClient(api_key="sk-test", transport=httpx.MockTransport(handler), **kwargs)


class TestComplete:
    """Test cases for OpenAIChatClient.complete."""

    async def test_sends_single_chat_request(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"choices": [{"message": {"content": '{"colors": []}'}}]})

        client = _client_with(handler)
        result = await client.complete("describe the brand")

        assert result == '{"colors": []}'
        assert len(seen) == 1
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "https://api.openai.com/v1/chat/completions"
        assert request.headers["Authorization"] == "Bearer sk-test"
        assert request.headers["Content-Type"] == "application/json"

        body = json.loads(request.content)
        assert body["model"] == "gpt-4o-mini"
        assert body["temperature"] == 0.7
        assert body["messages"] == [
            {"role": "system", "content": BRAND_DESIGNER_SYSTEM},
            {"role": "user", "content": "describe the brand"},
        ]

    async def test_custom_base_url_and_model(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"choices": [{"message": {"content": "{}"}}]})

        client = _client_with(handler, base_url="https://proxy.example.com/v1/", model="gpt-4o")
        await client.complete("x")

        assert str(seen[0].url) == "https://proxy.example.com/v1/chat/completions"
        assert json.loads(seen[0].content)["model"] == "gpt-4o"

    async def test_non_success_status_raises_provider_error(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            return httpx.Response(429, text="Rate limit exceeded")

        client = _client_with(handler)

        with pytest.raises(ProviderError) as exc_info:
            await client.complete("x")

        assert exc_info.value.provider_status == 429
        assert "Rate limit exceeded" in exc_info.value.message
        assert exc_info.value.public_message == "Failed to generate brand kit"
        assert len(calls) == 1

    async def test_transport_failure_raises_provider_error(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(request)
            raise httpx.ConnectError("connection refused", request=request)

        client = _client_with(handler)

        with pytest.raises(ProviderError) as exc_info:
            await client.complete("x")

        assert exc_info.value.provider_status is None
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert len(calls) == 1

    async def test_timeout_raises_provider_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(ProviderError):
            await _client_with(handler).complete("x")

    async def test_non_json_body_raises_unexpected_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>gateway</html>")

        with pytest.raises(UnexpectedError) as exc_info:
            await _client_with(handler).complete("x")

        assert exc_info.value.public_message == "Unexpected server error"
        assert "<html>gateway</html>" in exc_info.value.message

    async def test_non_object_body_returns_empty_string(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"message": {"content": "{}"}}])

        assert await _client_with(handler).complete("x") == ""

    async def test_missing_content_returns_empty_string(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": None}}]})

        assert await _client_with(handler).complete("x") == ""


class TestFromSettings:
    """Test cases for settings wiring."""

    def test_from_settings(self):
        settings = Settings(
            openai_api_key="sk-abc",
            openai_model="gpt-4o",
            openai_temperature=0.2,
            openai_timeout=12.0,
            openai_base_url="https://example.com/v1",
        )

        client = OpenAIChatClient.from_settings(settings)

        assert client.api_key == "sk-abc"
        assert client.model == "gpt-4o"
        assert client.temperature == 0.2
        assert client.timeout == 12.0
        assert client.base_url == "https://example.com/v1"


class TestHealthCheck:
    """Test cases for the provider health probe."""

    async def test_healthy_when_models_listing_succeeds(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/v1/models"
            return httpx.Response(200, json={"data": []})

        assert await _client_with(handler).health_check() is True

    async def test_unhealthy_on_auth_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"error": "bad key"})

        assert await _client_with(handler).health_check() is False

    async def test_unhealthy_without_key(self):
        client = OpenAIChatClient(api_key="")

        assert await client.health_check() is False


class TestExtractMessageText:
    """Test cases for extract_message_text."""

    def test_string_content(self):
        response = {"choices": [{"message": {"content": "Simple text response"}}]}

        assert extract_message_text(response) == "Simple text response"

    def test_list_content(self):
        response = {
            "choices": [
                {
                    "message": {
                        "content": [
                            {"text": "First part"},
                            {"text": "Second part"},
                            {"type": "image"},
                        ]
                    }
                }
            ]
        }

        assert extract_message_text(response) == "First part\nSecond part"

    def test_empty_choices(self):
        assert extract_message_text({"choices": []}) == ""

    def test_missing_choices(self):
        assert extract_message_text({}) == ""

    def test_missing_message(self):
        assert extract_message_text({"choices": [{}]}) == ""
