"""
Pytest fixtures for ethwatch tests. An in-process fake JSON-RPC transport
stands in for the upstream Ethereum node.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from ethwatch.core.exceptions import RpcTransportError


class FakeTransport:
    """
    Canned JSON-RPC responses keyed by method (and block number for blocks).

    Unknown blocks answer with ``"result": null``. Every call is recorded in
    ``calls`` as (method, params).
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[Any]]] = []
        self._head: bytes | Exception = self.result(None)
        self._blocks: dict[int, bytes | Exception] = {}

    @staticmethod
    def result(value: Any) -> bytes:
        return json.dumps({"jsonrpc": "2.0", "id": 1, "result": value}).encode()

    def set_head(self, block_hex: str) -> None:
        self._head = self.result(block_hex)

    def set_head_raw(self, body: bytes | Exception) -> None:
        self._head = body

    def set_block(self, block_number: int, transactions: list[Any]) -> None:
        self._blocks[block_number] = self.result(
            {"number": hex(block_number), "transactions": transactions}
        )

    def set_block_raw(self, block_number: int, body: bytes | Exception) -> None:
        self._blocks[block_number] = body

    def requested_blocks(self) -> list[int]:
        return [int(params[0], 16) for method, params in self.calls if method == "eth_getBlockByNumber"]

    def request(self, method: str, params: list[Any]) -> bytes:
        self.calls.append((method, list(params)))
        if method == "eth_blockNumber":
            body = self._head
        elif method == "eth_getBlockByNumber":
            body = self._blocks.get(int(params[0], 16), self.result(None))
        else:
            raise RpcTransportError(method, "method not supported by fake")
        if isinstance(body, Exception):
            raise body
        return body


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def parser(fake_transport):
    from ethwatch.eth_listener.parser import EthereumParser

    return EthereumParser(fake_transport)


@pytest.fixture
def client(parser):
    """FastAPI TestClient over an app wired to the fake transport."""
    from fastapi.testclient import TestClient

    from ethwatch.api_server.server import create_app

    with TestClient(create_app(parser)) as test_client:
        yield test_client
