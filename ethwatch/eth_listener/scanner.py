"""
Transaction scanner: pull-and-filter over the most recent blocks.

For a subscribed address, walks from the current block down through the
lookback window and keeps transactions where the address is sender or
recipient. Results are newest block first; in-block order is as returned
upstream.
"""

from __future__ import annotations

from ethwatch.eth_listener.fetcher import BlockFetcher
from ethwatch.eth_listener.models import Transaction
from ethwatch.eth_listener.registry import SubscriptionRegistry, normalize_address
from ethwatch.ethwatch_logging import bind_address

BLOCK_LOOKBACK = 10


def scan_range(current_block: int, lookback: int = BLOCK_LOOKBACK) -> range:
    """Block numbers to scan, descending, never below genesis."""
    lowest = max(current_block - (lookback - 1), 0)
    return range(current_block, lowest - 1, -1)


class TransactionScanner:
    def __init__(
        self,
        registry: SubscriptionRegistry,
        fetcher: BlockFetcher,
        lookback: int = BLOCK_LOOKBACK,
    ) -> None:
        if lookback < 1:
            raise ValueError("lookback must be at least 1")
        self._registry = registry
        self._fetcher = fetcher
        self._lookback = lookback

    def get_transactions(self, address: str) -> list[Transaction]:
        """
        Return transactions involving address in the lookback window.

        Unsubscribed addresses get an empty list without any upstream call and
        are not subscribed implicitly.
        """
        target = normalize_address(address)
        log = bind_address(target)
        if not self._registry.is_subscribed(target):
            log.info("transactions_address_not_subscribed")
            return []

        current_block = self._fetcher.get_current_block()
        blocks = scan_range(current_block, self._lookback)
        matches: list[Transaction] = []
        for block_number in blocks:
            for tx in self._fetcher.get_block_transactions(block_number):
                if tx.involves(target):
                    matches.append(tx)

        log.info(
            "transactions_scanned",
            current_block=current_block,
            blocks_scanned=len(blocks),
            match_count=len(matches),
        )
        return matches
