import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient
from openai import AsyncOpenAI

from go_outing.dependencies import get_completion_client
from go_outing.main import app

UPSTREAM_BASE_URL = "https://api.openai.test/v1"


def completion_body(content: Optional[str]) -> Dict[str, Any]:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 10, "completion_tokens": 10, "total_tokens": 20},
    }


class FakeUpstream:
    """Records outbound completion calls and answers them from a canned handler."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json=completion_body('{"suggestions": []}')
        )

    def reply_with(self, content: Optional[str]) -> None:
        self.responder = lambda request: httpx.Response(200, json=completion_body(content))

    def fail_with(self, status_code: int, body: str) -> None:
        self.responder = lambda request: httpx.Response(
            status_code, text=body, headers={"content-type": "application/json"}
        )

    def raise_error(self, exc_factory: Callable[[httpx.Request], Exception]) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc_factory(request)

        self.responder = _raise

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    def last_payload(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def client(self) -> AsyncOpenAI:
        return AsyncOpenAI(
            api_key="sk-test",
            base_url=UPSTREAM_BASE_URL,
            max_retries=0,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(self.handle)),
        )


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def client(upstream):
    completion_client = upstream.client()
    app.dependency_overrides[get_completion_client] = lambda: completion_client
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def outing_request():
    return {
        "location": "Hyderabad",
        "date": "2024-11-01",
        "budget": 800,
        "mode": "car",
        "type": "cultural",
    }
