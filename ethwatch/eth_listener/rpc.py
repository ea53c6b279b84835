"""
Ethereum JSON-RPC transport.

Responsibilities:
- Define the narrow transport capability used by the block fetcher:
  "issue a JSON-RPC method with params, return the raw response body or fail".
- Provide the default httpx-backed implementation against a node URL.
- Decode hex quantities and encode block numbers for RPC params.

Any object with a matching ``request`` method can stand in for the real
transport (tests use an in-process fake).
"""

from __future__ import annotations

import string
from typing import Any, Protocol

import httpx

from ethwatch.core.exceptions import RpcTransportError
from ethwatch.ethwatch_logging import get_logger

logger = get_logger(__name__)

JSONRPC_VERSION = "2.0"
JSONRPC_REQUEST_ID = 1


class JsonRpcTransport(Protocol):
    """Issue one JSON-RPC call; return raw response bytes or raise RpcTransportError."""

    def request(self, method: str, params: list[Any]) -> bytes:
        ...


def build_rpc_body(method: str, params: list[Any]) -> dict[str, Any]:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "method": method,
        "params": params,
        "id": JSONRPC_REQUEST_ID,
    }


def parse_hex_quantity(value: str) -> int:
    """
    Decode an Ethereum hex quantity ("0x1a" -> 26).

    The ``0x`` prefix is optional. Raises ValueError for empty, signed or
    non-hex input.
    """
    text = value.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    if not text or any(c not in string.hexdigits for c in text):
        raise ValueError(f"invalid hex quantity: {value!r}")
    return int(text, 16)


def to_hex_block(block_number: int) -> str:
    """Encode a block number as an RPC block parameter (26 -> "0x1a")."""
    if block_number < 0:
        raise ValueError(f"block number must be non-negative, got {block_number}")
    return hex(block_number)


class HttpxJsonRpcTransport:
    """
    JSON-RPC over HTTP POST using a pooled httpx.Client.

    Only transport-level failures are raised here (connection errors, timeouts,
    non-2xx status). Interpreting the body is left to the caller.
    """

    def __init__(
        self,
        rpc_url: str,
        *,
        timeout_sec: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        if not rpc_url.strip():
            raise ValueError("rpc_url must be non-empty")
        self._rpc_url = rpc_url.strip()
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout_sec))

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    def request(self, method: str, params: list[Any]) -> bytes:
        body = build_rpc_body(method, params)
        try:
            resp = self._client.post(self._rpc_url, json=body)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RpcTransportError(
                method, f"HTTP {e.response.status_code} from upstream"
            ) from e
        except httpx.HTTPError as e:
            raise RpcTransportError(method, str(e) or type(e).__name__) from e
        logger.debug("rpc_request_ok", method=method, bytes=len(resp.content))
        return resp.content

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
