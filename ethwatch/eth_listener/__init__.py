"""
Ethereum listener package.

Reads chain height and full blocks from an Ethereum JSON-RPC node and filters
block transactions for subscribed addresses.
"""

from ethwatch.eth_listener.models import Transaction
from ethwatch.eth_listener.parser import EthereumParser
from ethwatch.eth_listener.rpc import HttpxJsonRpcTransport, JsonRpcTransport

__all__ = [
    "EthereumParser",
    "HttpxJsonRpcTransport",
    "JsonRpcTransport",
    "Transaction",
]
