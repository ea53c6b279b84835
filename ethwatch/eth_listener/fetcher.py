"""
Block fetcher: eth_blockNumber and eth_getBlockByNumber.

All upstream failures stop here: a failed chain-height lookup falls back to
the last known good value, a failed block fetch yields no transactions for
that block. Callers never see an RPC exception.
"""

from __future__ import annotations

import json
import threading
from typing import Any

from ethwatch.core.exceptions import RpcError, RpcResponseError
from ethwatch.eth_listener.models import Transaction
from ethwatch.eth_listener.rpc import JsonRpcTransport, parse_hex_quantity, to_hex_block
from ethwatch.ethwatch_logging import get_logger

logger = get_logger(__name__)

METHOD_BLOCK_NUMBER = "eth_blockNumber"
METHOD_GET_BLOCK_BY_NUMBER = "eth_getBlockByNumber"


def decode_rpc_result(method: str, body: bytes) -> Any:
    """
    Decode a JSON-RPC response body and return its ``result`` member.

    Raises RpcResponseError for invalid JSON, a non-object payload, or a
    JSON-RPC error object. A missing result is returned as None.
    """
    try:
        data = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        raise RpcResponseError(method, f"invalid JSON response: {e}") from e
    if not isinstance(data, dict):
        raise RpcResponseError(method, f"expected JSON object, got {type(data).__name__}")
    err = data.get("error")
    if err is not None:
        if isinstance(err, dict):
            raise RpcResponseError(method, str(err.get("message", err)), code=err.get("code"))
        raise RpcResponseError(method, str(err))
    return data.get("result")


class BlockFetcher:
    """Reads chain height and full blocks through a JsonRpcTransport."""

    def __init__(self, transport: JsonRpcTransport, lock: threading.Lock | None = None) -> None:
        self._transport = transport
        self._lock = lock or threading.Lock()
        self._current_block = 0

    @property
    def current_block(self) -> int:
        """Last known good chain height (0 until the first successful lookup)."""
        with self._lock:
            return self._current_block

    def get_current_block(self) -> int:
        """Fetch the chain height; on any failure return the cached value."""
        try:
            body = self._transport.request(METHOD_BLOCK_NUMBER, [])
            result = decode_rpc_result(METHOD_BLOCK_NUMBER, body)
            if not isinstance(result, str):
                raise RpcResponseError(
                    METHOD_BLOCK_NUMBER,
                    f"expected hex string result, got {type(result).__name__}",
                )
            try:
                block_number = parse_hex_quantity(result)
            except ValueError as e:
                raise RpcResponseError(METHOD_BLOCK_NUMBER, str(e)) from e
        except RpcError as e:
            cached = self.current_block
            logger.warning(
                "current_block_fetch_failed",
                error=str(e),
                error_type=type(e).__name__,
                cached_block=cached,
            )
            return cached

        with self._lock:
            self._current_block = block_number
        return block_number

    def get_block_transactions(self, block_number: int) -> list[Transaction]:
        """Fetch one full block; on any failure return an empty list."""
        try:
            body = self._transport.request(
                METHOD_GET_BLOCK_BY_NUMBER, [to_hex_block(block_number), True]
            )
            result = decode_rpc_result(METHOD_GET_BLOCK_BY_NUMBER, body)
            return self._parse_block(block_number, result)
        except RpcError as e:
            logger.warning(
                "block_fetch_failed",
                block_number=block_number,
                error=str(e),
                error_type=type(e).__name__,
            )
            return []

    def _parse_block(self, block_number: int, result: Any) -> list[Transaction]:
        if result is None:
            logger.debug("block_not_found", block_number=block_number)
            return []
        if not isinstance(result, dict):
            raise RpcResponseError(
                METHOD_GET_BLOCK_BY_NUMBER,
                f"expected block object, got {type(result).__name__}",
            )
        items = result.get("transactions")
        if items is None:
            return []
        if not isinstance(items, list):
            raise RpcResponseError(
                METHOD_GET_BLOCK_BY_NUMBER,
                f"expected transactions list, got {type(items).__name__}",
            )
        txs: list[Transaction] = []
        for item in items:
            # Hash-only entries appear when the node ignores the full-tx flag
            if not isinstance(item, dict):
                logger.debug("block_skip_non_object_tx", block_number=block_number)
                continue
            txs.append(Transaction.from_rpc_item(item))
        return txs
