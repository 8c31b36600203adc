"""Pytest fixtures for SpamGuard tests."""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from spamguard.core.checker import CheckerParams


@pytest.fixture
def params() -> CheckerParams:
    """A harmless comment."""
    return CheckerParams(
        user_name="alice",
        user_email="alice@example.com",
        content="Great article, thanks for writing it!",
    )


@pytest.fixture
def chat_response():
    """Factory for chat completion response bodies."""

    def _make_response(content: str = "PASS", model: str = "gpt-4o-mini") -> Dict[str, Any]:
        return {
            "id": "chatcmpl-123",
            "object": "chat.completion",
            "model": model,
            "choices": [
                {
                    "index": 0,
                    "message": {"role": "assistant", "content": content},
                    "finish_reason": "stop",
                }
            ],
            "usage": {
                "prompt_tokens": 10,
                "completion_tokens": 1,
                "total_tokens": 11,
            },
        }

    return _make_response


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(
        self,
        body: Any = None,
        *,
        raw: Optional[bytes] = None,
        status_code: int = 200,
        exc: Optional[Exception] = None,
    ):
        self.requests: List[httpx.Request] = []
        self._body = body
        self._raw = raw
        self._status_code = status_code
        self._exc = exc
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._exc is not None:
            raise self._exc
        content = self._raw if self._raw is not None else json.dumps(self._body).encode()
        return httpx.Response(
            self._status_code,
            content=content,
            headers={"Content-Type": "application/json"},
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last_request.content)


@pytest.fixture
def make_transport():
    """Factory for RecordingTransport instances."""
    return RecordingTransport
