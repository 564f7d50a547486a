"""Typed client binding for an OpenAI-style REST API.

:class:`Client` and :class:`AsyncClient` expose one façade per resource
(``completions``, ``images``, ``threads`` and so on).  Every operation returns
a :class:`~openai_rest.core.Success` holding the decoded JSON body or a
:class:`~openai_rest.core.Failure`; nothing is raised for remote errors.

Settings can be passed explicitly or resolved by :meth:`Client.from_config`
in the following order:

1. An explicit dictionary passed to ``from_config``.
2. A YAML/JSON file referenced via the ``OPENAI_REST_CONFIG`` environment variable.
3. The environment variables ``OPENAI_API_KEY``, ``OPENAI_BASE_URL`` and ``OPENAI_ORG``.

The YAML/JSON configuration supports the shape::

    api_key: ${OPENAI_API_KEY}
    base_url: https://api.openai.com/v1
    organization: ${OPENAI_ORG}
    timeout: 30
    extra_headers:
      X-Trace: cli

Creating a client never performs network I/O.  The sync and async clients
share the same façades; only the dispatcher underneath differs.
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import httpx
import yaml

from .core import APIError, ErrorKind, Failure, JSONValue, Result, Success, accumulate
from .descriptors import *  # noqa: F401,F403
from .descriptors import __all__ as _descriptor_names
from .resources import (
    Assistants,
    Audio,
    Completions,
    Embeddings,
    Files,
    FineTunes,
    FineTuning,
    Images,
    Models,
    Moderations,
    Projects,
    Threads,
    VectorStores,
)
from .transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, ClientConfig, SyncTransport

__all__ = [
    "APIError",
    "AsyncClient",
    "Client",
    "ClientConfig",
    "ConfigurationError",
    "DEFAULT_BASE_URL",
    "ErrorKind",
    "Failure",
    "JSONValue",
    "Result",
    "Success",
    "accumulate",
    "load_configuration",
    "read_config_file",
    *_descriptor_names,
]

CONFIG_ENV_VAR = "OPENAI_REST_CONFIG"

_C = TypeVar("_C", bound="_ClientBase")


class ConfigurationError(RuntimeError):
    """Raised when client settings cannot be resolved."""


class _ClientBase:
    """Wires every façade to one shared dispatcher."""

    def __init__(self, config: ClientConfig, transport: Any) -> None:
        self._config = config
        self._transport = transport
        self.completions = Completions(transport)
        self.embeddings = Embeddings(transport)
        self.moderations = Moderations(transport)
        self.images = Images(transport)
        self.audio = Audio(transport)
        self.files = Files(transport)
        self.fine_tunes = FineTunes(transport)
        self.fine_tuning = FineTuning(transport)
        self.models = Models(transport)
        self.assistants = Assistants(transport)
        self.threads = Threads(transport)
        self.vector_stores = VectorStores(transport)
        self.projects = Projects(transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @classmethod
    def from_config(cls: Type[_C], config: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> _C:
        """Build a client from a settings mapping, a config file or the environment."""

        settings = _client_settings(config if config is not None else load_configuration())
        return cls(**settings, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base_url={self._config.base_url!r})"


class Client(_ClientBase):
    """Blocking client; every façade method returns a ``Result``."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        organization: Optional[str] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        config = ClientConfig(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            extra_headers=extra_headers or {},
            timeout=timeout,
        )
        super().__init__(config, SyncTransport(config, transport=transport, client=http_client))

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncClient(_ClientBase):
    """Asynchronous client; every façade method returns an awaitable ``Result``."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        *,
        organization: Optional[str] = None,
        extra_headers: Optional[Mapping[str, str]] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        config = ClientConfig(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            extra_headers=extra_headers or {},
            timeout=timeout,
        )
        super().__init__(config, AsyncTransport(config, transport=transport, client=http_client))

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "AsyncClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()


# Configuration ----------------------------------------------------
def load_configuration() -> Dict[str, Any]:
    """Resolve raw settings from ``OPENAI_REST_CONFIG`` or the environment."""

    config_path = os.getenv(CONFIG_ENV_VAR)
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Configured {CONFIG_ENV_VAR} file not found: {config_path}")
        return read_config_file(path)
    return _env_configuration()


def read_config_file(path: Path) -> Dict[str, Any]:
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Could not read configuration file {path}: {exc}") from exc
    if not content.strip():
        return {}
    # Try JSON first; YAML is a superset but slower and looser.
    try:
        data = json.loads(content)
    except json.JSONDecodeError:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Could not parse configuration file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root in {path} must be a mapping")
    return _expand_env(data)


def _env_configuration() -> Dict[str, Any]:
    return {
        "api_key": os.getenv("OPENAI_API_KEY"),
        "base_url": os.getenv("OPENAI_BASE_URL", DEFAULT_BASE_URL),
        "organization": os.getenv("OPENAI_ORG"),
    }


def _client_settings(config: Mapping[str, Any]) -> Dict[str, Any]:
    api_key = config.get("api_key")
    if not api_key:
        raise ConfigurationError(
            "No API key configured. Set OPENAI_API_KEY or provide api_key in the configuration file."
        )
    return accumulate(
        {"api_key": str(api_key)},
        [
            ("base_url", config.get("base_url") or None),
            ("organization", config.get("organization") or None),
            ("extra_headers", config.get("extra_headers") or None),
            ("timeout", float(config["timeout"]) if config.get("timeout") is not None else None),
        ],
    )


def _expand_env(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _expand_env(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    if isinstance(value, str):
        return os.path.expandvars(value)
    return value
