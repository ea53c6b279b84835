"""
Transaction model: pass-through serialization and address matching.
"""

from __future__ import annotations

from ethwatch.eth_listener.models import Transaction


def test_to_dict_passes_through_upstream_fields():
    item = {
        "hash": "0xfeed",
        "from": "0xA",
        "to": "0xB",
        "value": "0x2386f26fc10000",
        "gas": "0x5208",
        "blockNumber": "0x1a",
    }
    tx = Transaction.from_rpc_item(item)
    assert tx.to_dict() == item


def test_null_recipient_renders_as_empty_string():
    tx = Transaction.from_rpc_item({"from": "0xa", "to": None, "value": "0x0", "creates": "0xc"})
    out = tx.to_dict()
    assert out["to"] == ""
    assert out["creates"] == "0xc"


def test_involves_matches_sender_or_recipient():
    tx = Transaction.from_rpc_item({"from": "0xAbC", "to": "0xDeF", "value": "1"})
    assert tx.involves("0xabc")
    assert tx.involves("0XDEF".lower())
    assert not tx.involves("0x123")


def test_involves_empty_address_never_matches_contract_creation():
    tx = Transaction.from_rpc_item({"from": "0xabc", "to": None, "value": "1"})
    assert not tx.involves("")


def test_raw_is_a_copy():
    item = {"from": "0xa", "to": "0xb", "value": "1"}
    tx = Transaction.from_rpc_item(item)
    item["from"] = "0xzzz"
    assert tx.raw["from"] == "0xa"
