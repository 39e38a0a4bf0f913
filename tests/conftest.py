import json
from typing import Any, Dict, List, Optional

import httpx
import pytest
import respx
from monday_client import MondayClient
from monday_client.core.config import reset_config

API_URL = "https://api.monday.com/v2"
FILES_URL = "https://api.monday.com/v2/file"


class FakeMondayApi:
    """Records what was posted and answers with a queued or default payload."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.bodies: List[bytes] = []
        self.status = 200
        self.payload: Dict[str, Any] = {"data": {}, "account_id": 1}

    def respond(self, status: int = 200, payload: Optional[Dict[str, Any]] = None):
        self.status = status
        self.payload = payload if payload is not None else {}

    def handle(self, request: httpx.Request) -> httpx.Response:
        # Read while upload file handles are still open
        self.bodies.append(request.read())
        self.requests.append(request)
        return httpx.Response(self.status, json=self.payload)

    @property
    def queries(self) -> List[str]:
        return [json.loads(body)["query"] for body in self.bodies]

    @property
    def last_query(self) -> str:
        return self.queries[-1]


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch):
    # A developer's .env must not leak into tests
    monkeypatch.setattr("monday_client.core.config.load_dotenv", lambda *a, **k: None)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def api():
    fake = FakeMondayApi()
    with respx.mock:
        respx.post(API_URL).mock(side_effect=fake.handle)
        respx.post(FILES_URL).mock(side_effect=fake.handle)
        yield fake


@pytest.fixture
def client():
    with MondayClient(token="test-token") as c:
        yield c
