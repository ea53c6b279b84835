"""
Data models for Ethereum listener output.

Transactions mirror the upstream eth_getBlockByNumber transaction objects;
only from/to/value are read, everything else is carried through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _as_str(value: Any) -> str:
    # Contract creations carry "to": null
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Transaction:
    """
    One transaction from a full block (eth_getBlockByNumber with full=true).

    ``raw`` holds the upstream object as received; ``to_dict`` re-emits it so
    clients see every field the node returned.
    """

    from_address: str
    to: str
    value: str
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_rpc_item(cls, item: dict[str, Any]) -> "Transaction":
        """Build from a single entry of a block's ``transactions`` list."""
        return cls(
            from_address=_as_str(item.get("from")),
            to=_as_str(item.get("to")),
            value=_as_str(item.get("value")),
            raw=dict(item),
        )

    def involves(self, address: str) -> bool:
        """True if address is the sender or the recipient (case-insensitive)."""
        target = address.lower()
        if not target:
            return False
        return self.from_address.lower() == target or self.to.lower() == target

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.raw)
        out["from"] = self.from_address
        out["to"] = self.to
        out["value"] = self.value
        return out
