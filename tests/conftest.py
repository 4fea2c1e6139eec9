"""Pytest configuration and fixtures."""
import json
import os
from collections import deque
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit

import pytest
import requests

# Set test environment variables
os.environ["POSTY5_ENV"] = "test"
os.environ["POSTY5_BASE_URL"] = "https://api.posty5.test"

API_KEY = "test-key"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test sees settings built from the current environment."""
    from src.posty5.config import reset_settings

    reset_settings()
    yield
    reset_settings()


def make_response(
    status: int = 200,
    json_body: Any = None,
    text: Optional[str] = None,
    url: str = "",
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status
    response.reason = "OK" if status < 400 else "Error"
    response.encoding = "utf-8"
    response.url = url
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
    elif text is not None:
        response._content = text.encode("utf-8")
    else:
        response._content = b""
    return response


class RecordedCall:
    """One call made through requests.request."""

    def __init__(self, method: str, url: str, **kwargs: Any) -> None:
        self.method = method
        self.url = url
        self.params = kwargs.get("params")
        self.json = kwargs.get("json")
        self.data = kwargs.get("data")
        self.headers = kwargs.get("headers") or {}
        self.timeout = kwargs.get("timeout")

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    def __repr__(self) -> str:
        return f"<{self.method} {self.url} params={self.params} json={self.json}>"


class FakePosty5Api:
    """
    Recording stand-in for requests.request.

    Routes are matched on method plus path (relative routes) or the full
    URL (absolute routes). A route registered with several responses
    serves them in order and then keeps repeating the last one.
    """

    def __init__(self) -> None:
        self.calls: List[RecordedCall] = []
        self._routes: Dict[tuple, deque] = {}

    def add(
        self,
        method: str,
        route: str,
        json_body: Any = None,
        status: int = 200,
        text: Optional[str] = None,
        exc: Optional[Exception] = None,
    ) -> "FakePosty5Api":
        self._routes.setdefault((method, route), deque()).append((status, json_body, text, exc))
        return self

    def __call__(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        call = RecordedCall(method, url, **kwargs)
        self.calls.append(call)

        responses = self._routes.get((method, url)) or self._routes.get((method, call.path))
        if not responses:
            raise AssertionError(f"Unexpected request: {call!r}")

        status, json_body, text, exc = responses[0] if len(responses) == 1 else responses.popleft()
        if exc is not None:
            raise exc
        return make_response(status, json_body, text, url)


@pytest.fixture
def fake_api(monkeypatch):
    """Fake Posty5 API installed in place of requests.request."""
    api = FakePosty5Api()
    monkeypatch.setattr(requests, "request", api)
    return api


@pytest.fixture
def run_node():
    """Execute a node class against the given parameters and input items."""
    from src.node_sdk import NodeExecutionContext

    def _run(
        node_class,
        parameters: Dict[str, Any],
        input_data: Optional[List[Dict[str, Any]]] = None,
        item_parameters: Optional[List[Dict[str, Any]]] = None,
        continue_on_fail: bool = False,
        credentials: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        node = node_class()
        node.set_context(
            NodeExecutionContext(
                parameters=parameters,
                credentials=credentials if credentials is not None else {"posty5Api": {"apiKey": API_KEY}},
                input_data=input_data if input_data is not None else [{"json": {}}],
                workflow_id="wf-test",
                node_name="Posty5",
                item_parameters=item_parameters,
                continue_on_fail=continue_on_fail,
            )
        )
        return node.execute()[0]

    return _run


@pytest.fixture
def http_response():
    """Factory for offline requests.Response objects."""
    return make_response
