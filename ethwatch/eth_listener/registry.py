"""
Subscription registry: the in-memory set of watched addresses.

Addresses are lowercased before insertion and lookup. Membership lives for the
process lifetime only; there is no removal.
"""

from __future__ import annotations

import threading

from ethwatch.ethwatch_logging import get_logger

logger = get_logger(__name__)


def normalize_address(address: str) -> str:
    return address.strip().lower()


class SubscriptionRegistry:
    """Set of subscribed addresses guarded by a lock (shared with the owning context)."""

    def __init__(self, lock: threading.Lock | None = None) -> None:
        self._lock = lock or threading.Lock()
        self._observers: dict[str, bool] = {}

    def subscribe(self, address: str) -> bool:
        """Add address to the registry. Idempotent; always returns True."""
        normalized = normalize_address(address)
        with self._lock:
            is_new = normalized not in self._observers
            self._observers[normalized] = True
        if is_new:
            logger.info("address_subscribed", address=normalized)
        else:
            logger.debug("address_already_subscribed", address=normalized)
        return True

    def is_subscribed(self, address: str) -> bool:
        normalized = normalize_address(address)
        with self._lock:
            return self._observers.get(normalized, False)

    def addresses(self) -> list[str]:
        """Sorted snapshot of subscribed addresses."""
        with self._lock:
            return sorted(self._observers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)
