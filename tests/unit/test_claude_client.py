"""
Unit tests for the lesson generator.

Uses a fake Messages client, so no API key or network is needed.
"""

from types import SimpleNamespace
from unittest.mock import Mock, patch

import anthropic
import httpx
import pytest

from src.generation.claude_client import DEFAULT_MAX_TOKENS, DEFAULT_MODEL, LessonGenerator
from src.lessons.errors import GenerationError


class TestLessonGeneratorInit:
    """Tests for generator construction."""

    def test_defaults(self):
        generator = LessonGenerator(api_key="sk-test")
        assert generator.model_name == DEFAULT_MODEL == "claude-3-5-sonnet-20241022"
        assert generator.max_tokens == DEFAULT_MAX_TOKENS == 2048
        assert generator.request_count == 0

    def test_client_is_lazy(self):
        with patch("src.generation.claude_client.anthropic.Anthropic") as mock_cls:
            generator = LessonGenerator(api_key="sk-test")
            mock_cls.assert_not_called()
            _ = generator.client
            _ = generator.client
            mock_cls.assert_called_once_with(api_key="sk-test", max_retries=0, http_client=None)

    def test_missing_api_key_raises_generation_error(self, monkeypatch):
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        generator = LessonGenerator(api_key=None)

        with pytest.raises(GenerationError, match="ANTHROPIC_API_KEY"):
            generator.generate("prompt")
        assert generator._client is None


class TestGenerate:
    """Tests for a single generation request."""

    def test_request_shape(self, messages_client, reply):
        client = messages_client(reply('{"title": "x"}'))
        generator = LessonGenerator(api_key="k", model_name="m-1", max_tokens=100, client=client)

        assert generator.generate("Teach me") == '{"title": "x"}'
        client.messages.create.assert_called_once_with(
            model="m-1",
            max_tokens=100,
            messages=[{"role": "user", "content": "Teach me"}],
        )
        assert generator.request_count == 1

    def test_non_text_block_raises(self, messages_client):
        tool_block = SimpleNamespace(type="tool_use", id="t1", name="x", input={})
        client = messages_client(SimpleNamespace(content=[tool_block]))
        generator = LessonGenerator(client=client)

        with pytest.raises(GenerationError, match="Unexpected response type"):
            generator.generate("prompt")

    def test_empty_content_raises(self, messages_client):
        generator = LessonGenerator(client=messages_client(SimpleNamespace(content=[])))
        with pytest.raises(GenerationError):
            generator.generate("prompt")

    def test_only_first_block_checked(self, messages_client, reply):
        response = reply("first")
        response.content.append(SimpleNamespace(type="tool_use"))
        generator = LessonGenerator(client=messages_client(response))
        assert generator.generate("prompt") == "first"

    def test_api_error_wrapped(self):
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        client = Mock()
        client.messages.create.side_effect = anthropic.APIConnectionError(request=request)
        generator = LessonGenerator(client=client)

        with pytest.raises(GenerationError) as exc_info:
            generator.generate("prompt")
        assert exc_info.value.stage == "generation"
        assert isinstance(exc_info.value.__cause__, anthropic.APIConnectionError)

    def test_no_retry_on_failure(self):
        client = Mock()
        client.messages.create.side_effect = anthropic.APIConnectionError(
            request=httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        )
        generator = LessonGenerator(client=client)
        with pytest.raises(GenerationError):
            generator.generate("prompt")
        assert client.messages.create.call_count == 1

    def test_server_error_sends_single_request(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(
                500, json={"type": "error", "error": {"type": "api_error", "message": "overloaded"}}
            )

        generator = LessonGenerator(
            api_key="sk-test",
            http_client=httpx.Client(transport=httpx.MockTransport(handler)),
        )

        with pytest.raises(GenerationError) as exc_info:
            generator.generate("prompt")
        assert isinstance(exc_info.value.__cause__, anthropic.InternalServerError)
        assert len(requests) == 1
        assert requests[0].url.path == "/v1/messages"
