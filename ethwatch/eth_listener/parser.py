"""
EthereumParser: the owned context object behind the HTTP API.

Holds the registry, block fetcher and scanner, plus the single lock that
guards every piece of shared mutable state (subscriptions and the cached
chain height). One instance per application; handlers receive it through
dependency injection.
"""

from __future__ import annotations

import threading

from ethwatch.config.env import DEFAULT_ETH_RPC_URL, DEFAULT_RPC_TIMEOUT_SEC
from ethwatch.eth_listener.fetcher import BlockFetcher
from ethwatch.eth_listener.models import Transaction
from ethwatch.eth_listener.registry import SubscriptionRegistry
from ethwatch.eth_listener.rpc import HttpxJsonRpcTransport, JsonRpcTransport
from ethwatch.eth_listener.scanner import BLOCK_LOOKBACK, TransactionScanner
from ethwatch.ethwatch_logging import get_logger

logger = get_logger(__name__)


class EthereumParser:
    def __init__(
        self,
        transport: JsonRpcTransport | None = None,
        *,
        rpc_url: str = DEFAULT_ETH_RPC_URL,
        timeout_sec: float = DEFAULT_RPC_TIMEOUT_SEC,
        lookback: int = BLOCK_LOOKBACK,
    ) -> None:
        """
        Args:
            transport: JSON-RPC transport; defaults to HttpxJsonRpcTransport(rpc_url).
            rpc_url: Upstream node URL, used only when no transport is given.
            timeout_sec: HTTP timeout for the default transport.
            lookback: Number of blocks scanned per transactions query.
        """
        self._owned_transport: HttpxJsonRpcTransport | None = None
        if transport is None:
            self._owned_transport = HttpxJsonRpcTransport(rpc_url, timeout_sec=timeout_sec)
            transport = self._owned_transport
            logger.info("parser_transport_created", rpc_url=rpc_url, timeout_sec=timeout_sec)
        self._lock = threading.Lock()
        self.registry = SubscriptionRegistry(self._lock)
        self.fetcher = BlockFetcher(transport, self._lock)
        self.scanner = TransactionScanner(self.registry, self.fetcher, lookback)

    def get_current_block(self) -> int:
        return self.fetcher.get_current_block()

    def subscribe(self, address: str) -> bool:
        return self.registry.subscribe(address)

    def is_subscribed(self, address: str) -> bool:
        return self.registry.is_subscribed(address)

    def get_transactions(self, address: str) -> list[Transaction]:
        return self.scanner.get_transactions(address)

    def subscription_count(self) -> int:
        return len(self.registry)

    def close(self) -> None:
        """Release the default transport's connection pool, if this parser created it."""
        if self._owned_transport is not None:
            self._owned_transport.close()
