"""Tests for client construction and configuration resolution."""
from __future__ import annotations

import dataclasses
import json

import pytest

from openai_rest import DEFAULT_BASE_URL, AsyncClient, Client, ClientConfig, ConfigurationError, read_config_file


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("OPENAI_REST_CONFIG", "OPENAI_API_KEY", "OPENAI_BASE_URL", "OPENAI_ORG"):
        monkeypatch.delenv(name, raising=False)


def test_client_config_is_frozen():
    config = ClientConfig(api_key="k", base_url="https://example.com/v1/")

    assert config.base_url == "https://example.com/v1"
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.api_key = "other"  # type: ignore[misc]


def test_empty_base_url_uses_default():
    assert Client("k", "").base_url == DEFAULT_BASE_URL


def test_from_config_reads_environment(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "env-key")
    monkeypatch.setenv("OPENAI_BASE_URL", "https://proxy.example.com/v1")
    monkeypatch.setenv("OPENAI_ORG", "org-9")

    client = Client.from_config()

    assert client.config.api_key == "env-key"
    assert client.base_url == "https://proxy.example.com/v1"
    assert client.config.organization == "org-9"


def test_from_config_reads_yaml_file_with_env_expansion(monkeypatch, tmp_path):
    monkeypatch.setenv("SECRET_TOKEN", "from-env")
    path = tmp_path / "client.yaml"
    path.write_text(
        "api_key: ${SECRET_TOKEN}\n"
        "base_url: https://yaml.example.com/v1\n"
        "timeout: 5\n"
        "extra_headers:\n"
        "  X-Trace: yaml\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("OPENAI_REST_CONFIG", str(path))

    client = AsyncClient.from_config()

    assert isinstance(client, AsyncClient)
    assert client.config.api_key == "from-env"
    assert client.config.timeout == 5.0
    assert client.config.extra_headers == {"X-Trace": "yaml"}


def test_from_config_reads_json_file(monkeypatch, tmp_path):
    path = tmp_path / "client.json"
    path.write_text(json.dumps({"api_key": "json-key"}), encoding="utf-8")
    monkeypatch.setenv("OPENAI_REST_CONFIG", str(path))

    client = Client.from_config()

    assert client.config.api_key == "json-key"
    assert client.base_url == DEFAULT_BASE_URL


def test_explicit_mapping_wins(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "env-key")

    client = Client.from_config({"api_key": "explicit", "organization": "org-1"})

    assert client.config.api_key == "explicit"
    assert client.config.organization == "org-1"


def test_missing_api_key_raises():
    with pytest.raises(ConfigurationError, match="No API key configured"):
        Client.from_config()


def test_missing_config_file_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("OPENAI_REST_CONFIG", str(tmp_path / "absent.yaml"))

    with pytest.raises(ConfigurationError, match="not found"):
        Client.from_config()


def test_non_mapping_config_file_raises(monkeypatch, tmp_path):
    path = tmp_path / "client.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("OPENAI_REST_CONFIG", str(path))

    with pytest.raises(ConfigurationError, match="must be a mapping"):
        Client.from_config()


def test_unreadable_config_path_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="Could not read"):
        read_config_file(tmp_path)


def test_non_utf8_config_file_raises(monkeypatch, tmp_path):
    path = tmp_path / "client.yaml"
    path.write_bytes(b"api_key: \xff\xfe\n")
    monkeypatch.setenv("OPENAI_REST_CONFIG", str(path))

    with pytest.raises(ConfigurationError, match="Could not read"):
        Client.from_config()


def test_facades_share_one_dispatcher():
    client = Client("k")

    assert client.threads._transport is client.files._transport
    assert repr(client) == f"Client(base_url={DEFAULT_BASE_URL!r})"
