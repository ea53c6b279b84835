"""
Application-level exceptions.

Upstream failures are raised as RpcError subclasses by the transport and the
response parsers, and absorbed at the block fetcher boundary.
"""

from __future__ import annotations


class EthWatchError(Exception):
    """Base class for ethwatch errors."""


class RpcError(EthWatchError):
    """An upstream JSON-RPC call did not produce a usable result."""

    def __init__(self, method: str, message: str) -> None:
        super().__init__(f"{method}: {message}")
        self.method = method


class RpcTransportError(RpcError):
    """Network failure or non-2xx HTTP status reaching the upstream node."""


class RpcResponseError(RpcError):
    """Malformed JSON, a JSON-RPC error object, or an unexpected result shape."""

    def __init__(self, method: str, message: str, code: int | None = None) -> None:
        super().__init__(method, message)
        self.code = code
