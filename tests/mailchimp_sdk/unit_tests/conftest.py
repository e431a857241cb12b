import json
import threading
from typing import Any, Callable, List, Optional

import pytest
from requests import Response

API_KEY = "0123456789abcdef-us11"
API_URL = "https://us11.api.mailchimp.com/3.0"


class TrackedResponse(Response):
    def __init__(self, status_code: int, content: bytes):
        super().__init__()
        self.status_code = status_code
        self._content = content
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1


class FakeSession:
    def __init__(
        self,
        responder: Callable[[str, str, Optional[bytes]], TrackedResponse],
    ):
        self._responder = responder
        self._lock = threading.Lock()
        self.calls: List[dict] = []
        self.responses: List[TrackedResponse] = []

    def request(self, method: str, url: str, **kwargs: Any) -> TrackedResponse:
        response = self._responder(method, url, kwargs.get("data"))
        with self._lock:
            self.calls.append({"method": method, "url": url, **kwargs})
            self.responses.append(response)
        return response


def static_responder(
    status_code: int, content: bytes
) -> Callable[[str, str, Optional[bytes]], TrackedResponse]:
    def respond(method: str, url: str, data: Optional[bytes]) -> TrackedResponse:
        return TrackedResponse(status_code=status_code, content=content)

    return respond


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def api_url() -> str:
    return API_URL


@pytest.fixture
def fake_session_factory() -> Callable[[int, Any], FakeSession]:
    def create(status_code: int, body: Any) -> FakeSession:
        content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        return FakeSession(responder=static_responder(status_code, content))

    return create


@pytest.fixture
def echo_session() -> FakeSession:
    def respond(method: str, url: str, data: Optional[bytes]) -> TrackedResponse:
        payload = {
            "method": method,
            "url": url,
            "body": json.loads(data) if data is not None else None,
        }
        return TrackedResponse(
            status_code=200, content=json.dumps(payload).encode("utf-8")
        )

    return FakeSession(responder=respond)
