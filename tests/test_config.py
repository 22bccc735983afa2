"""Tests for configuration management."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from taskflow_api.config import Config, ConfigManager, get_config_manager


def test_default_config():
    config = Config()
    assert config.server.port == 3001
    assert config.server.host == "0.0.0.0"
    assert config.server.max_content_length == 10 * 1024 * 1024
    assert config.api.endpoint == "http://localhost:3001"
    assert config.output.format == "table"


def test_config_save_load(isolate_dirs):
    manager = ConfigManager(profile="test")
    manager.set("api.endpoint", "http://tasks.internal:9000")
    assert manager.get("api.endpoint") == "http://tasks.internal:9000"

    reloaded = ConfigManager(profile="test")
    assert reloaded.get("api.endpoint") == "http://tasks.internal:9000"
    assert (isolate_dirs / "config" / "test.json").exists()


def test_invalid_value_is_rejected_and_not_saved():
    manager = ConfigManager(profile="test")
    with pytest.raises(ValidationError):
        manager.set("server.port", "not-a-port")
    assert ConfigManager(profile="test").get("server.port") == 3001


def test_corrupted_config_falls_back_to_defaults(isolate_dirs):
    manager = ConfigManager()
    manager.config_file.write_text("{broken")
    assert manager.load_config() == Config()


def test_reset_single_key():
    manager = ConfigManager()
    manager.set("server.port", 4000)
    manager.reset("server.port")
    assert manager.get("server.port") == 3001


def test_get_unknown_key_returns_none():
    assert ConfigManager().get("server.nope") is None


def test_server_port_prefers_environment(monkeypatch):
    manager = ConfigManager()
    monkeypatch.delenv("PORT", raising=False)
    assert manager.server_port() == 3001
    monkeypatch.setenv("PORT", "5050")
    assert manager.server_port() == 5050


def test_list_profiles():
    ConfigManager("default").save_config()
    ConfigManager("staging").save_config()
    assert ConfigManager().list_profiles() == ["default", "staging"]


def test_get_config_manager_is_cached_per_profile():
    assert get_config_manager() is get_config_manager()
    assert get_config_manager("other").profile == "other"
