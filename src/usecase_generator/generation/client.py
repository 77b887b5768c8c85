"""Minimal client for an OpenAI-compatible chat-completions endpoint."""
from __future__ import annotations
import logging
from typing import Any

import httpx

from usecase_generator.common.config import MAX_TOKENS, TEMPERATURE, Settings

LOGGER = logging.getLogger("usecase.generation.client")


class UpstreamError(RuntimeError):
    """The text-generation service failed or returned something unusable."""


class UpstreamTimeoutError(UpstreamError):
    """The text-generation service did not answer within the configured timeout."""


def build_payload(model: str, prompt: str) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": TEMPERATURE,
        "max_tokens": MAX_TOKENS,
        "stream": False,
    }


def chat_completion(settings: Settings, prompt: str) -> dict[str, Any]:
    """
    Send one user message and return the decoded JSON reply.

    Args:
        settings: Endpoint, credentials, model and timeout.
        prompt: Augmented prompt sent as the single user message.

    Raises:
        UpstreamTimeoutError: The call exceeded settings.timeout.
        UpstreamError: Transport, HTTP status or JSON decoding failure.
    """
    url = f"{settings.base_url}/v1/chat/completions"
    headers = {"Authorization": f"Bearer {settings.api_key}"}
    payload = build_payload(settings.model, prompt)

    try:
        with httpx.Client(timeout=settings.timeout) as client:
            r = client.post(url, headers=headers, json=payload)
            r.raise_for_status()
            data = r.json()
    except httpx.TimeoutException as e:
        LOGGER.error("Upstream request timed out after %ss: %s", settings.timeout, e)
        raise UpstreamTimeoutError(f"No reply within {settings.timeout}s") from e
    except Exception as e:
        LOGGER.error("Upstream request failed: %s", e)
        raise UpstreamError("Upstream request failed") from e

    if not isinstance(data, dict):
        raise UpstreamError("Upstream reply is not a JSON object")
    return data
