import json

import pytest
import requests


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self.text = payload if isinstance(payload, str) else json.dumps(payload)
        self.content = self.text.encode("utf-8")
        self.status_code = status_code


@pytest.fixture
def fake_github(monkeypatch):
    """Patch ``requests.get``; returns the list of requested URLs."""
    calls = []
    state = {"response": FakeResponse({"tag_name": "1.0.0"})}

    def fake_get(url, headers=None, timeout=None):
        calls.append({"url": url, "headers": headers, "timeout": timeout})
        if isinstance(state["response"], Exception):
            raise state["response"]
        return state["response"]

    def respond(payload, status_code=200):
        state["response"] = FakeResponse(payload, status_code)

    def fail(exc):
        state["response"] = exc

    monkeypatch.setattr(requests, "get", fake_get)
    fake_get.calls = calls
    fake_get.respond = respond
    fake_get.fail = fail
    return fake_get


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")
