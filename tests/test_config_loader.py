"""Tests for settings resolution and environment overrides."""

import pytest

from auth_priority.core.config import ConfigLoader
from auth_priority.core.types import GatewayConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "AUTH_PRIORITY_CONFIG",
        "AUTH_PRIORITY_AUTH_DIR",
        "AUTH_PRIORITY_FILE_SUFFIX",
    ):
        monkeypatch.delenv(key, raising=False)


def test_defaults():
    settings = ConfigLoader().load_settings()
    assert settings.config_path == "config.yaml"
    assert settings.auth_dir is None
    assert settings.auth_file_suffix == ".json"


def test_document_auth_dir():
    settings = ConfigLoader("gw.yaml").load_settings(GatewayConfig(auth_dir="/srv/a"))
    assert settings.config_path == "gw.yaml"
    assert settings.auth_dir == "/srv/a"


def test_env_overrides_document(monkeypatch):
    monkeypatch.setenv("AUTH_PRIORITY_CONFIG", "/etc/gw/config.yaml")
    monkeypatch.setenv("AUTH_PRIORITY_AUTH_DIR", "/env/auths")
    monkeypatch.setenv("AUTH_PRIORITY_FILE_SUFFIX", ".cred")

    settings = ConfigLoader("gw.yaml").load_settings(GatewayConfig(auth_dir="/srv/a"))

    assert settings.config_path == "/etc/gw/config.yaml"
    assert settings.auth_dir == "/env/auths"
    assert settings.auth_file_suffix == ".cred"


def test_invalid_suffix_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("AUTH_PRIORITY_FILE_SUFFIX", "json")

    settings = ConfigLoader().load_settings()

    assert settings.auth_file_suffix == ".json"
    assert "Invalid AUTH_PRIORITY_FILE_SUFFIX" in caplog.text


def test_settings_are_cached(monkeypatch):
    loader = ConfigLoader()
    first = loader.load_settings()
    monkeypatch.setenv("AUTH_PRIORITY_AUTH_DIR", "/late")

    assert loader.load_settings() is first
    assert loader.load_settings(force_reload=True).auth_dir == "/late"
