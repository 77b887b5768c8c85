"""Dataclasses shared by the parser, the pipeline and the HTTP layer."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class UseCase:
    """One "AI Can ..." suggestion extracted from generated text."""
    id: int
    title: str
    description: str


@dataclass(frozen=True)
class GenerationMetrics:
    """Latency and token usage of a single upstream call."""
    response_time_seconds: str
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class GenerationResult:
    use_cases: list[UseCase]
    metrics: GenerationMetrics
    content: str
    response_object: dict[str, Any] = field(default_factory=dict)
