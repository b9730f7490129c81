"""
Shared fixtures: an in-process fake Ergo node served through httpx.MockTransport.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from ergo_node import NodeClient

NODE_URL = "http://node.test:9053"
API_KEY = "hello"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeNode:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, handler: Handler) -> None:
        self.routes[(method, path)] = handler

    def reply(self, method: str, path: str, json: Any = None, status: int = 200) -> None:
        self.on(method, path, lambda _request: httpx.Response(status, json=json))

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(
                404,
                json={"error": 404, "reason": "not-found", "detail": f"no route {request.url.path}"},
            )
        return handler(request)


def box_json(index: int = 0, value: int = 1_000_000_000, **extra: Any) -> dict[str, Any]:
    """A node-shaped ErgoBox JSON object."""
    data = {
        "boxId": f"{index + 1:064x}",
        "value": value,
        "ergoTree": "0008cd" + "02" + "11" * 32,
        "creationHeight": 1_000_000,
        "assets": [],
        "additionalRegisters": {},
        "transactionId": "ab" * 32,
        "index": 0,
    }
    data.update(extra)
    return data


def signed_tx_json(tx_id: str = "cd" * 32) -> dict[str, Any]:
    return {
        "id": tx_id,
        "inputs": [
            {"boxId": "01" * 32, "spendingProof": {"proofBytes": "beef", "extension": {}}}
        ],
        "dataInputs": [],
        "outputs": [box_json(0, 900_000_000, transactionId=tx_id)],
        "size": 212,
    }


def unsigned_tx_json() -> dict[str, Any]:
    return {
        "inputs": [{"boxId": "01" * 32, "extension": {}}],
        "dataInputs": [],
        "outputs": [
            {
                "value": 900_000_000,
                "ergoTree": "0008cd" + "02" + "11" * 32,
                "creationHeight": 1_000_000,
                "assets": [],
                "additionalRegisters": {},
            }
        ],
    }


@pytest.fixture
def fake_node() -> FakeNode:
    return FakeNode()


@pytest.fixture
def client(fake_node: FakeNode) -> NodeClient:
    """NodeClient wired to the fake node; MockTransport holds no sockets."""
    return NodeClient.from_url(NODE_URL, api_key=API_KEY, transport=httpx.MockTransport(fake_node))


@pytest.fixture
def make_box() -> Callable[..., dict[str, Any]]:
    return box_json


@pytest.fixture
def signed_tx() -> dict[str, Any]:
    return signed_tx_json()


@pytest.fixture
def unsigned_tx() -> dict[str, Any]:
    return unsigned_tx_json()
