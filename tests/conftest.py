"""Shared fixtures for packetids tests."""

import pytest
import requests


def make_phase(to_client: dict[str, str], to_server: dict[str, str]) -> dict:
    """A phase entry shaped like minecraft-data's protocol.json."""

    def side(mappings):
        packet = [
            "container",
            [
                {"name": "name", "type": ["mapper", {"type": "varint", "mappings": mappings}]},
                {"name": "params", "type": ["switch", {"compareTo": "name", "fields": {}}]},
            ],
        ]
        return {"types": {"packet": packet}}

    return {"toClient": side(to_client), "toServer": side(to_server)}


@pytest.fixture
def protocol() -> dict:
    return {
        "handshaking": make_phase({}, {"0x00": "set_protocol"}),
        "login": make_phase(
            {"0x00": "disconnect", "0x01": "encryption_begin", "0x02": "success"},
            {"0x00": "login_start", "0x01": "encryption_begin"},
        ),
        "play": make_phase(
            {"0x00": "spawn_entity", "0x0e": "chat", "0x1f": "keep_alive"},
            {"0x03": "chat", "0x10": "keep_alive", "0x2e": "use_item"},
        ),
        "status": make_phase(
            {"0x00": "server_info", "0x01": "ping"},
            {"0x00": "ping_start", "0x01": "ping"},
        ),
    }


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body=None):
        self.payload = payload
        self.status_code = status_code
        self.body = body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self.body is not None:
            raise requests.exceptions.JSONDecodeError("Expecting value", self.body, 0)
        return self.payload


@pytest.fixture
def fake_get(monkeypatch):
    """Replace requests.get; returns the list of requested URLs."""
    calls: list[str] = []

    def install(response=None, error=None):
        def get(url, *args, **kwargs):
            calls.append(url)
            if error is not None:
                raise error
            return response

        monkeypatch.setattr(requests, "get", get)
        return calls

    return install
