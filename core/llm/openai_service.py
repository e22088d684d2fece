"""
OpenAI Service - LLM implementation using the OpenAI API.

Works with any OpenAI-compatible chat completions endpoint.
"""
from typing import Any, Dict, Optional
import logging
import re

import openai
from openai import OpenAI
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity import RetryCallState
from core.llm.interfaces import TextGenerationProvider

logger = logging.getLogger(__name__)

RETRYABLE_ERRORS = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,
)

MAX_ATTEMPTS = 5


# ---------------------------------------------------------------------------
# Retry helpers
# ---------------------------------------------------------------------------

def _log_retry(retry_state: RetryCallState) -> None:
    """Log a warning before each retry sleep."""
    exc = retry_state.outcome.exception()
    wait = retry_state.next_action.sleep if retry_state.next_action else 0
    logger.warning(
        "%s on attempt %s. Waiting %.1fs before retry. Details: %s",
        type(exc).__name__, retry_state.attempt_number, wait, exc,
    )


def _parse_reset_duration(value: str) -> float:
    """Parse a reset-timer header value like '1s', '500ms', '1m30s' into seconds."""
    total = 0.0
    for amount, unit in re.findall(r"([\d.]+)(ms|s|m|h)", value):
        a = float(amount)
        if unit == "ms":
            total += a / 1000
        elif unit == "s":
            total += a
        elif unit == "m":
            total += a * 60
        else:  # h
            total += a * 3600
    return total


def _wait_from_rate_limit_headers(exc: openai.RateLimitError) -> float:
    """Longest wait declared by ``retry-after`` or the OpenAI reset headers; 0.0 if none."""
    headers = getattr(getattr(exc, "response", None), "headers", None)
    if not headers:
        return 0.0

    candidates = []
    retry_after = headers.get("retry-after", "")
    if retry_after:
        try:
            candidates.append(float(retry_after))
        except ValueError:
            logger.debug("Ignoring non-numeric retry-after header %r", retry_after)

    for header in ("x-ratelimit-reset-requests", "x-ratelimit-reset-tokens"):
        parsed = _parse_reset_duration(headers.get(header, ""))
        if parsed > 0:
            candidates.append(parsed)

    return max(candidates) if candidates else 0.0


def _wait_respecting_retry_after(retry_state: RetryCallState) -> float:
    exc = retry_state.outcome.exception()
    if isinstance(exc, openai.RateLimitError):
        wait = _wait_from_rate_limit_headers(exc)
        if wait > 0:
            return min(wait, 60)

    # Fallback: exponential backoff 1 -> 2 -> 4 ... capped at 30s
    exp = wait_exponential(multiplier=1, min=1, max=30)
    return exp(retry_state)


def _llm_retry(**kwargs):
    """Return a tenacity @retry decorator for LLM API calls."""
    return retry(
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        wait=_wait_respecting_retry_after,
        stop=stop_after_attempt(MAX_ATTEMPTS),
        before_sleep=_log_retry,
        reraise=True,
        **kwargs,
    )


class OpenAIService(TextGenerationProvider):
    """
    OpenAI LLM Service.

    Generates free text for the advice and job-description enrichments.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model_config: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None
    ):
        client_kwargs = {}
        if api_key:
            client_kwargs['api_key'] = api_key
        if base_url:
            client_kwargs['base_url'] = base_url
        if timeout:
            client_kwargs['timeout'] = timeout

        self.client = OpenAI(**client_kwargs)

        self.model_config = model_config or {}
        self.model = self.model_config.get('model', 'gpt-4o-mini')
        self.temperature = self.model_config.get('temperature', 0.7)
        self.max_tokens = self.model_config.get('max_tokens')

    @_llm_retry()
    def generate_text(self, prompt: str, system_prompt: Optional[str] = None) -> Optional[str]:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        request: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
        }
        if self.max_tokens:
            request["max_tokens"] = self.max_tokens

        response = self.client.chat.completions.create(**request)

        try:
            content = response.choices[0].message.content
        except (IndexError, AttributeError) as e:
            logger.error(f"Unexpected completion structure from {self.model}: {e}")
            return None

        if not content or not content.strip():
            logger.error(f"{self.model} returned no content")
            return None

        logger.debug(f"Generated {len(content)} characters with {self.model}")
        return content.strip()
