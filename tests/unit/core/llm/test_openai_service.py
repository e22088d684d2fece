"""
Unit tests for OpenAI service text generation.

Tests verify:
- generate_text sends the configured model and messages
- Empty or malformed completions yield None
- Transient API errors are retried, others propagate immediately
- Rate-limit headers are turned into wait times
"""
import pytest
from unittest.mock import MagicMock, patch

import httpx
import openai

from core.llm.openai_service import (
    OpenAIService,
    MAX_ATTEMPTS,
    _parse_reset_duration,
    _wait_from_rate_limit_headers,
)


def _completion(content):
    mock_message = MagicMock()
    mock_message.content = content
    mock_choice = MagicMock()
    mock_choice.message = mock_message
    mock_response = MagicMock()
    mock_response.choices = [mock_choice]
    return mock_response


class TestGenerateText:
    """Tests for generate_text method."""

    @pytest.fixture
    def service(self):
        """Create service with mocked client."""
        svc = OpenAIService(
            api_key="test",
            model_config={"model": "gpt-4o-mini", "temperature": 0.5, "max_tokens": 200}
        )
        svc.client = MagicMock()
        svc.client.chat.completions.create.return_value = _completion("  Great advice.  ")
        return svc

    def test_returns_stripped_content(self, service):
        assert service.generate_text("Tell me about nursing") == "Great advice."

    def test_request_uses_model_config(self, service):
        service.generate_text("prompt")

        kwargs = service.client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0.5
        assert kwargs["max_tokens"] == 200
        assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]

    def test_system_prompt_goes_first(self, service):
        service.generate_text("prompt", system_prompt="You are a coach.")

        messages = service.client.chat.completions.create.call_args.kwargs["messages"]
        assert messages[0] == {"role": "system", "content": "You are a coach."}
        assert messages[1]["role"] == "user"

    def test_max_tokens_omitted_when_unset(self):
        svc = OpenAIService(api_key="test", model_config={"max_tokens": None})
        svc.client = MagicMock()
        svc.client.chat.completions.create.return_value = _completion("ok")

        svc.generate_text("prompt")

        assert "max_tokens" not in svc.client.chat.completions.create.call_args.kwargs

    @pytest.mark.parametrize("content", [None, "", "   "])
    def test_empty_content_returns_none(self, service, content):
        service.client.chat.completions.create.return_value = _completion(content)
        assert service.generate_text("prompt") is None

    def test_missing_choices_returns_none(self, service):
        response = MagicMock()
        response.choices = []
        service.client.chat.completions.create.return_value = response
        assert service.generate_text("prompt") is None

    def test_connection_error_is_retried(self, service):
        error = openai.APIConnectionError(request=httpx.Request("POST", "http://llm.test"))
        service.client.chat.completions.create.side_effect = [error, _completion("Recovered")]

        with patch("time.sleep"):
            assert service.generate_text("prompt") == "Recovered"

        assert service.client.chat.completions.create.call_count == 2

    def test_retries_stop_after_max_attempts(self, service):
        error = openai.APIConnectionError(request=httpx.Request("POST", "http://llm.test"))
        service.client.chat.completions.create.side_effect = error

        with patch("time.sleep"):
            with pytest.raises(openai.APIConnectionError):
                service.generate_text("prompt")

        assert service.client.chat.completions.create.call_count == MAX_ATTEMPTS

    def test_non_retryable_error_propagates(self, service):
        service.client.chat.completions.create.side_effect = ValueError("bad request")

        with pytest.raises(ValueError):
            service.generate_text("prompt")

        assert service.client.chat.completions.create.call_count == 1


class TestRateLimitHeaders:

    @pytest.mark.parametrize("value,expected", [
        ("1s", 1.0),
        ("500ms", 0.5),
        ("1m30s", 90.0),
        ("2h", 7200.0),
        ("", 0.0),
    ])
    def test_parse_reset_duration(self, value, expected):
        assert _parse_reset_duration(value) == pytest.approx(expected)

    def _rate_limit_error(self, headers):
        request = httpx.Request("POST", "http://llm.test")
        response = httpx.Response(429, headers=headers, request=request)
        return openai.RateLimitError("rate limited", response=response, body=None)

    def test_longest_declared_wait_wins(self):
        error = self._rate_limit_error({
            "retry-after": "2",
            "x-ratelimit-reset-requests": "1s",
            "x-ratelimit-reset-tokens": "6s",
        })
        assert _wait_from_rate_limit_headers(error) == pytest.approx(6.0)

    def test_non_numeric_retry_after_ignored(self):
        error = self._rate_limit_error({"retry-after": "soon"})
        assert _wait_from_rate_limit_headers(error) == 0.0
