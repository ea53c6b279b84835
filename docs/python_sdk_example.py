"""
ethwatch API Python client example.

Uses the requests library. Mirrors the endpoints in ethwatch.api_server.routes.

Usage:
    from docs.python_sdk_example import EthWatchClient
    client = EthWatchClient("http://localhost:3000")
    client.subscribe("0xde0B295669a9FD93d5F28D9Ec85E40f4cb697BAe")
    txs = client.transactions("0xde0b295669a9fd93d5f28d9ec85e40f4cb697bae")
"""

from __future__ import annotations

from typing import Any

import requests


class EthWatchClientError(Exception):
    """Raised when the API returns an error response."""

    def __init__(self, message: str, status_code: int | None = None, response: requests.Response | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class EthWatchClient:
    """Client for the ethwatch subscription API."""

    def __init__(self, base_url: str = "http://localhost:3000", timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        resp = self._session.request(method, url, params=params, json=json, timeout=self.timeout)
        if not resp.ok:
            # Server errors are plain text
            raise EthWatchClientError(
                f"API error: {resp.text.strip()}",
                status_code=resp.status_code,
                response=resp,
            )
        return resp

    def current_block(self) -> int:
        r = self._request("GET", "/current_block")
        return int(r.json()["current_block"])

    def subscribe(self, address: str) -> str:
        """Subscribe an address; returns the server's confirmation message."""
        r = self._request("POST", "/subscribe", json={"address": address})
        return r.json()["message"]

    def transactions(self, address: str) -> list[dict[str, Any]]:
        """Transactions from the last 10 blocks involving a subscribed address."""
        r = self._request("GET", "/transactions", params={"address": address})
        return r.json().get("transactions") or []

    def health(self) -> dict[str, Any]:
        """Liveness probe."""
        r = self._request("GET", "/health")
        return r.json()

    def close(self) -> None:
        self._session.close()


if __name__ == "__main__":
    client = EthWatchClient("http://localhost:3000")
    address = "0xde0B295669a9FD93d5F28D9Ec85E40f4cb697BAe"

    print("Health:", client.health())
    print("Current block:", client.current_block())
    print("Subscribe:", client.subscribe(address))
    for tx in client.transactions(address):
        print(tx.get("hash"), tx["from"], "->", tx["to"], tx["value"])
