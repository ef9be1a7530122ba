"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from wardrobe.core.config import AppSettings, OracleConfig, ScanConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.oracle.provider == "mock"
    assert settings.ingestion.key_prefix == "wardrobe:"


def test_scan_config_defaults():
    config = ScanConfig()
    assert config.batch_size == 100
    assert config.max_iterations == 100


def test_oracle_api_key_read_from_openai_env(monkeypatch):
    monkeypatch.delenv("WARDROBE_ORACLE_API_KEY", raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    assert OracleConfig().api_key == "sk-test"


def test_redis_env_prefix(monkeypatch):
    monkeypatch.setenv("WARDROBE_REDIS_PORT", "6380")
    from wardrobe.core.config import RedisConfig

    assert RedisConfig().port == 6380
