"""FastAPI service generating AI use cases for a business website.

Endpoints:
- GET /health
- POST /api/generateUsecase  { "prompt": "...", "website": "...", "email": "..." }
"""
from __future__ import annotations
import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from usecase_generator.common.config import get_settings
from usecase_generator.common.logging_setup import setup_logging
from usecase_generator.common.templates import load_prompt_template
from usecase_generator.generation.client import UpstreamTimeoutError
from usecase_generator.generation.pipeline import generate_use_cases

LOGGER = logging.getLogger("usecase.serve.app")

SETTINGS = get_settings()
setup_logging(SETTINGS.log_level)

PROMPT_REQUIRED = "Prompt is required"
PROCESSING_FAILED = "Failed to process request"
UPSTREAM_TIMEOUT = "Upstream request timed out"


class ApiError(Exception):
    """Error rendered to the caller as {"error": message}."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerateIn(BaseModel):
    # Any JSON value; only falsy ones count as missing.
    prompt: Any = None
    website: str | None = None
    email: str | None = None


class UseCaseOut(_CamelModel):
    id: int
    title: str
    description: str


class MetricsOut(_CamelModel):
    response_time_seconds: str
    prompt_tokens: int
    completion_tokens: int
    total_tokens: int


class RawResponseOut(_CamelModel):
    content: str
    response_object: dict[str, Any]


class GenerateOut(_CamelModel):
    use_cases: list[UseCaseOut]
    metrics: MetricsOut
    raw_response: RawResponseOut


app = FastAPI(title="AI Use Case Generator")


@app.exception_handler(ApiError)
def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    LOGGER.error("Unreadable request body: %s", exc.errors())
    return JSONResponse(status_code=500, content={"error": PROCESSING_FAILED})


@app.on_event("startup")
def _validate_template_on_startup() -> None:
    """Warn early if the configured prompt template is unusable."""
    load_prompt_template(SETTINGS.template_path)
    if not SETTINGS.api_key:
        LOGGER.warning("OPENAI_API_KEY is not set; upstream calls will be rejected")


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "model": SETTINGS.model}


@app.post("/api/generateUsecase", response_model=GenerateOut)
def generate_usecase(body: GenerateIn) -> GenerateOut:
    if not body.prompt:
        raise ApiError(400, PROMPT_REQUIRED)

    try:
        result = generate_use_cases(body.website, SETTINGS, load_prompt_template(SETTINGS.template_path))
        return GenerateOut(
            use_cases=[
                UseCaseOut(id=uc.id, title=uc.title, description=uc.description)
                for uc in result.use_cases
            ],
            metrics=MetricsOut(
                response_time_seconds=result.metrics.response_time_seconds,
                prompt_tokens=result.metrics.prompt_tokens,
                completion_tokens=result.metrics.completion_tokens,
                total_tokens=result.metrics.total_tokens,
            ),
            raw_response=RawResponseOut(
                content=result.content,
                response_object=result.response_object,
            ),
        )
    except UpstreamTimeoutError as e:
        LOGGER.error("Error generating AI use cases: %s", e)
        raise ApiError(504, UPSTREAM_TIMEOUT) from e
    except Exception as e:
        LOGGER.exception("Error generating AI use cases: %s", e)
        raise ApiError(500, PROCESSING_FAILED) from e
