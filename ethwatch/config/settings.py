"""
Application settings.

Responsibilities:
- Collect configuration from environment variables (see config.env).
- Expose typed settings (RPC URL, RPC timeout, API host/port, log level
  and format) for the API server, main entrypoint and logging setup.
"""

from __future__ import annotations

from dataclasses import dataclass

from ethwatch.config.env import (
    get_api_host,
    get_api_port,
    get_eth_rpc_url,
    get_log_format,
    get_log_level,
    get_rpc_timeout_sec,
)


@dataclass(frozen=True)
class Settings:
    eth_rpc_url: str
    rpc_timeout_sec: float
    api_host: str
    api_port: int
    log_level: str
    log_format: str


def get_settings() -> Settings:
    """Return the current application settings read from the environment."""
    return Settings(
        eth_rpc_url=get_eth_rpc_url(),
        rpc_timeout_sec=get_rpc_timeout_sec(),
        api_host=get_api_host(),
        api_port=get_api_port(),
        log_level=get_log_level(),
        log_format=get_log_format(),
    )
