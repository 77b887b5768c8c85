"""Prompt -> single upstream call -> parsed use cases with metrics."""
from __future__ import annotations
import logging
import time
from typing import Any

from usecase_generator.common.config import Settings
from usecase_generator.common.schema import GenerationMetrics, GenerationResult
from usecase_generator.common.templates import DEFAULT_TEMPLATE, render_prompt
from usecase_generator.generation.client import UpstreamError, chat_completion
from usecase_generator.parsing.usecases import parse_use_cases

LOGGER = logging.getLogger("usecase.generation.pipeline")


class MalformedResponseError(UpstreamError):
    """The reply lacks choices[0].message."""


def _usage_count(usage: dict[str, Any], key: str) -> int:
    try:
        return int(usage.get(key) or 0)
    except (TypeError, ValueError):
        return 0


def extract_content(data: dict[str, Any]) -> str:
    """Return choices[0].message.content, treating a null content as empty."""
    try:
        message = data["choices"][0]["message"]
    except (KeyError, IndexError, TypeError) as e:
        raise MalformedResponseError("Reply has no choices[0].message") from e
    if not isinstance(message, dict):
        raise MalformedResponseError("choices[0].message is not an object")
    return str(message.get("content") or "")


def build_metrics(data: dict[str, Any], elapsed: float) -> GenerationMetrics:
    usage = data.get("usage") or {}
    if not isinstance(usage, dict):
        usage = {}
    return GenerationMetrics(
        response_time_seconds=f"{elapsed:.2f}",
        prompt_tokens=_usage_count(usage, "prompt_tokens"),
        completion_tokens=_usage_count(usage, "completion_tokens"),
        total_tokens=_usage_count(usage, "total_tokens"),
    )


def generate_use_cases(
    website: str | None,
    settings: Settings,
    template: str | None = None,
) -> GenerationResult:
    """
    Run one generation for a website.

    Args:
        website: Website embedded into the augmented prompt.
        settings: Upstream configuration.
        template: Prompt template; the built-in one when omitted.

    Raises:
        UpstreamError: Upstream failure or unusable reply.
    """
    prompt = render_prompt(template or DEFAULT_TEMPLATE, website)

    start = time.perf_counter()
    data = chat_completion(settings, prompt)
    elapsed = time.perf_counter() - start

    content = extract_content(data)
    metrics = build_metrics(data, elapsed)
    use_cases = parse_use_cases(content)
    LOGGER.info(
        "Generated %d use cases in %ss | in=%s out=%s",
        len(use_cases),
        metrics.response_time_seconds,
        metrics.prompt_tokens,
        metrics.completion_tokens,
    )
    return GenerationResult(
        use_cases=use_cases,
        metrics=metrics,
        content=content,
        response_object=data,
    )
