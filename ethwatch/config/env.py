"""
Environment variable loading for ethwatch.

- ETH_RPC_URL: upstream Ethereum JSON-RPC endpoint
- ETH_RPC_TIMEOUT_SEC: HTTP timeout for each RPC request
- API_HOST / API_PORT: bind address for the HTTP server
- LOG_LEVEL / LOG_FORMAT: structlog threshold and renderer (json | console)
- Loads .env from project root when available.

Imported by ethwatch_logging at configure time, so logging is imported lazily here.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is ethwatch/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_ROOT = _CONFIG_DIR.parent.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_ETH_RPC_URL = "https://ethereum-rpc.publicnode.com"
DEFAULT_RPC_TIMEOUT_SEC = 30.0
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 3000
DEFAULT_LOG_LEVEL = "info"
DEFAULT_LOG_FORMAT = "json"

# Names uvicorn and the stdlib both accept
LOG_LEVELS = ("critical", "error", "warning", "info", "debug")
_LOG_LEVEL_ALIASES = {"warn": "warning", "fatal": "critical"}
LOG_FORMATS = ("json", "console")


def load_ethwatch_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    load_dotenv(_ENV_PATH, override=False)


def _warn_invalid(name: str, value: str, default: object) -> None:
    from ethwatch.ethwatch_logging import get_logger

    get_logger(__name__).warning("config_invalid_value", name=name, value=value, default=default)


def _env_str(name: str, default: str) -> str:
    return (os.getenv(name) or "").strip() or default


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        _warn_invalid(name, raw, default)
        return default
    if value <= 0:
        _warn_invalid(name, raw, default)
        return default
    return value


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _warn_invalid(name, raw, default)
        return default


def get_eth_rpc_url() -> str:
    """Resolve the upstream JSON-RPC URL: ETH_RPC_URL or the public node default."""
    load_ethwatch_env()
    return _env_str("ETH_RPC_URL", DEFAULT_ETH_RPC_URL)


def get_rpc_timeout_sec() -> float:
    load_ethwatch_env()
    return _env_float("ETH_RPC_TIMEOUT_SEC", DEFAULT_RPC_TIMEOUT_SEC)


def get_api_host() -> str:
    load_ethwatch_env()
    return _env_str("API_HOST", DEFAULT_API_HOST)


def get_api_port() -> int:
    load_ethwatch_env()
    return _env_int("API_PORT", DEFAULT_API_PORT)


def get_log_level() -> str:
    """
    LOG_LEVEL as a lowercase name from LOG_LEVELS ("WARN" -> "warning").

    Unknown names fall back to "info" without logging: this runs while
    logging itself is being configured.
    """
    load_ethwatch_env()
    raw = _env_str("LOG_LEVEL", DEFAULT_LOG_LEVEL).lower()
    level = _LOG_LEVEL_ALIASES.get(raw, raw)
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def get_log_format() -> str:
    load_ethwatch_env()
    fmt = _env_str("LOG_FORMAT", DEFAULT_LOG_FORMAT).lower()
    return fmt if fmt in LOG_FORMATS else DEFAULT_LOG_FORMAT
