"""
Settings from environment variables.
"""

from __future__ import annotations

import pytest

from ethwatch.config import get_settings
from ethwatch.config.env import (
    DEFAULT_API_PORT,
    DEFAULT_ETH_RPC_URL,
    DEFAULT_RPC_TIMEOUT_SEC,
    LOG_LEVELS,
)

ENV_VARS = ("ETH_RPC_URL", "ETH_RPC_TIMEOUT_SEC", "API_HOST", "API_PORT", "LOG_LEVEL", "LOG_FORMAT")


def _clear(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")


def test_defaults(monkeypatch):
    _clear(monkeypatch)
    settings = get_settings()
    assert settings.eth_rpc_url == DEFAULT_ETH_RPC_URL
    assert settings.rpc_timeout_sec == DEFAULT_RPC_TIMEOUT_SEC
    assert settings.api_host == "0.0.0.0"
    assert settings.api_port == DEFAULT_API_PORT
    assert settings.log_level == "info"
    assert settings.log_format == "json"


def test_env_overrides(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("ETH_RPC_URL", " https://node.example.test ")
    monkeypatch.setenv("ETH_RPC_TIMEOUT_SEC", "2.5")
    monkeypatch.setenv("API_PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    settings = get_settings()
    assert settings.eth_rpc_url == "https://node.example.test"
    assert settings.rpc_timeout_sec == 2.5
    assert settings.api_port == 8080
    assert settings.log_level == "debug"


def test_invalid_numbers_fall_back(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("ETH_RPC_TIMEOUT_SEC", "soon")
    monkeypatch.setenv("API_PORT", "eighty")
    settings = get_settings()
    assert settings.rpc_timeout_sec == DEFAULT_RPC_TIMEOUT_SEC
    assert settings.api_port == DEFAULT_API_PORT


def test_non_positive_timeout_falls_back(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("ETH_RPC_TIMEOUT_SEC", "0")
    assert get_settings().rpc_timeout_sec == DEFAULT_RPC_TIMEOUT_SEC


@pytest.mark.parametrize(
    "raw, expected",
    [("WARN", "warning"), ("warning", "warning"), ("Debug", "debug"), ("fatal", "critical"), ("verbose", "info")],
)
def test_log_level_names_uvicorn_accepts(monkeypatch, raw, expected):
    """Settings.log_level is passed to uvicorn.run, which only knows LOG_LEVELS names."""
    _clear(monkeypatch)
    monkeypatch.setenv("LOG_LEVEL", raw)
    level = get_settings().log_level
    assert level == expected
    assert level in LOG_LEVELS


@pytest.mark.parametrize("raw, expected", [("CONSOLE", "console"), ("json", "json"), ("xml", "json")])
def test_log_format(monkeypatch, raw, expected):
    _clear(monkeypatch)
    monkeypatch.setenv("LOG_FORMAT", raw)
    assert get_settings().log_format == expected
