"""
Subscription registry: case-insensitive membership, idempotent subscribe.
"""

from __future__ import annotations

import threading

import pytest

from ethwatch.eth_listener.registry import SubscriptionRegistry, normalize_address

ADDRESS = "0x123456789abcdef"


@pytest.mark.parametrize(
    "stored, queried",
    [
        ("0xABCdef", "0xabcdef"),
        ("0xabcdef", "0XABCDEF"),
        ("0xAbCdEf", "0xaBcDeF"),
    ],
)
def test_subscribe_then_is_subscribed_ignores_case(stored, queried):
    registry = SubscriptionRegistry()
    assert registry.subscribe(stored) is True
    assert registry.is_subscribed(queried) is True


def test_unsubscribed_address_is_not_subscribed():
    registry = SubscriptionRegistry()
    registry.subscribe(ADDRESS)
    assert registry.is_subscribed("0xdeadbeef") is False


def test_subscribe_is_idempotent():
    registry = SubscriptionRegistry()
    assert registry.subscribe(ADDRESS) is True
    assert registry.subscribe(ADDRESS.upper()) is True
    assert len(registry) == 1
    assert registry.addresses() == [ADDRESS]


def test_addresses_are_stored_lowercase():
    registry = SubscriptionRegistry()
    registry.subscribe("0xABC")
    registry.subscribe(" 0xDEF ")
    assert registry.addresses() == ["0xabc", "0xdef"]


def test_normalize_address():
    assert normalize_address("  0xAbC ") == "0xabc"


def test_concurrent_subscribes_all_land():
    registry = SubscriptionRegistry()
    addresses = [f"0x{i:040X}" for i in range(200)]

    def worker(chunk: list[str]) -> None:
        for a in chunk:
            registry.subscribe(a)

    threads = [threading.Thread(target=worker, args=(addresses[i::4],)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(registry) == 200
    assert all(registry.is_subscribed(a.lower()) for a in addresses)
