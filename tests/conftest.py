"""Shared fixtures and markers for the heurist-mesh test suite."""

import json

import httpx
import pytest

from heurist_mesh.mesh.client import MeshClient

API_KEY = "test-key"
BASE_URL = "https://mesh.test"


def pytest_configure(config):
    config.addinivalue_line("markers", "remote: marks tests that hit the live mesh service (deselect with '-m \"not remote\"')")


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request and its decoded JSON body."""

    def __init__(self, handler):
        self.requests = []
        self.bodies = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            self.bodies.append(json.loads(request.content) if request.content else None)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def make_client():
    """Build (client, transport) around a request handler."""

    def _make(handler=None, **kwargs):
        if handler is None:
            handler = lambda request: httpx.Response(200, json={"response": "ok", "success": True})
        transport = RecordingTransport(handler)
        client = MeshClient(API_KEY, base_url=BASE_URL, transport=transport, **kwargs)
        return client, transport

    return _make
