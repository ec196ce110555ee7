"""
Pytest configuration and fixtures
"""

import json

import pytest
from botocore.credentials import Credentials


class FakeResponse:
    """Stand-in for a requests/aiohttp response"""

    def __init__(self, payload):
        self.content = json.dumps(payload).encode("utf-8")

    def raise_for_status(self):
        pass

    async def read(self):
        return self.content


class FakeSession:
    """Records outbound requests instead of sending them"""

    def __init__(self, result="0x10"):
        self.result = result
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        request_id = json.loads(kwargs["data"])["id"]
        return FakeResponse({"jsonrpc": "2.0", "id": request_id, "result": self.result})


class FakeAsyncSession(FakeSession):
    closed = False

    async def request(self, **kwargs):
        return FakeSession.request(self, **kwargs)

    async def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ambient AMB_* configuration out of tests"""
    for name in ("AMB_NODE_ID", "AMB_NODE_REGION", "AMB_BILLING_TOKEN", "AMB_NETWORK"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def credentials():
    return Credentials("AKIDEXAMPLE", "wJalrXUtnFEMI/K7MDENG+bPxRfiCYEXAMPLEKEY")


@pytest.fixture
def session_credentials():
    return Credentials("ASIAEXAMPLE", "secret", token="session-token")


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def fake_async_session():
    return FakeAsyncSession()
