from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

import usecase_generator.generation.client as client_mod

SAMPLE_CONTENT = (
    "HEADING: AI Can Boost Sales\nDESCRIPTION: Personalizes offers.\n\n"
    "HEADING: AI Can Cut Costs\nDESCRIPTION: Automates support.\n\n"
    "HEADING: AI Can Predict Demand\nDESCRIPTION: Forecasts inventory."
)


def completion(content: str | None = SAMPLE_CONTENT, usage: dict[str, Any] | None = None) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": "chatcmpl-test",
        "choices": [
            {"message": {"role": "assistant", "content": content}, "index": 0}
        ],
    }
    if usage is not None:
        data["usage"] = usage
    return data


class _FakeResponse:
    def __init__(self, json_data: Any, status_code: int = 200) -> None:
        self._json = json_data
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            request = httpx.Request("POST", "http://upstream.test/v1/chat/completions")
            response = httpx.Response(self.status_code, request=request)
            raise httpx.HTTPStatusError("upstream error", request=request, response=response)

    def json(self) -> Any:
        return self._json


class FakeUpstream:
    """Stands in for httpx.Client and records every request it receives."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.reply: Any = completion(usage={"prompt_tokens": 10, "completion_tokens": 5, "total_tokens": 15})
        self.status_code = 200
        self.error: Exception | None = None

    def factory(self) -> Callable[..., "_FakeClient"]:
        upstream = self

        class _FakeClient:
            def __init__(self, timeout: float | int | None = None) -> None:
                self.timeout = timeout

            def __enter__(self) -> "_FakeClient":
                return self

            def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
                return None

            def post(self, url: str, headers: dict[str, str] | None = None, json: dict[str, Any] | None = None) -> _FakeResponse:  # noqa: A002
                upstream.calls.append({"url": url, "headers": headers, "json": json, "timeout": self.timeout})
                if upstream.error is not None:
                    raise upstream.error
                return _FakeResponse(upstream.reply, upstream.status_code)

        return _FakeClient


@pytest.fixture
def fake_upstream(monkeypatch: pytest.MonkeyPatch) -> FakeUpstream:
    upstream = FakeUpstream()
    monkeypatch.setattr(client_mod.httpx, "Client", upstream.factory())
    return upstream
