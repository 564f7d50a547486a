"""HTTP dispatchers shared by every endpoint façade.

:class:`SyncTransport` and :class:`AsyncTransport` are the only places that
perform network I/O.  Each call issues exactly one request and hands the
outcome to :func:`openai_rest.core.normalize_response`; nothing is retried,
cached or rate limited.  Both dispatchers are immutable after construction and
safe to share between concurrent callers.
"""
from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import httpx

from .core import Result, io_failure, normalize_response, transport_failure
from .descriptors import MultipartDescriptor, RequestDescriptor

_LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TIMEOUT = 60.0

Body = Union[RequestDescriptor, Mapping[str, Any], None]
FileParts = Dict[str, Tuple[str, bytes]]


@dataclass(frozen=True)
class ClientConfig:
    """Credential and connection settings fixed for the lifetime of a client."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    organization: Optional[str] = None
    extra_headers: Mapping[str, str] = field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        base_url = (self.base_url or DEFAULT_BASE_URL).rstrip("/")
        object.__setattr__(self, "base_url", base_url)
        object.__setattr__(self, "extra_headers", dict(self.extra_headers or {}))


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    return json.dumps(value)


class _BaseTransport:
    """Request preparation common to the sync and async dispatchers."""

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    def url(self, path: str) -> str:
        return f"{self._config.base_url}/{path.lstrip('/')}"

    def headers(self, extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {"Authorization": f"Bearer {self._config.api_key}"}
        if self._config.organization:
            headers["OpenAI-Organization"] = self._config.organization
        headers.update(self._config.extra_headers)
        if extra:
            headers.update(extra)
        return headers

    @staticmethod
    def _payload(body: Body) -> Optional[Dict[str, Any]]:
        if body is None:
            return None
        if isinstance(body, RequestDescriptor):
            return body.seal().to_payload()
        return dict(body)

    def _json_request(self, body: Body, query: Body, headers: Optional[Mapping[str, str]]) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {"headers": self.headers(headers)}
        payload = self._payload(body)
        if payload is not None:
            kwargs["json"] = payload
        params = self._payload(query)
        if params:
            kwargs["params"] = {key: _form_value(value) for key, value in params.items()}
        return kwargs

    @staticmethod
    def _read_files(descriptor: MultipartDescriptor) -> FileParts:
        """Read every file field; raises ``OSError`` for unreadable paths."""

        parts: FileParts = {}
        for name, raw_path in descriptor.file_paths().items():
            path = Path(raw_path)
            parts[name] = (path.name, path.read_bytes())
        return parts

    def _multipart_request(
        self, descriptor: MultipartDescriptor, files: FileParts, headers: Optional[Mapping[str, str]]
    ) -> Dict[str, Any]:
        data = {key: _form_value(value) for key, value in descriptor.text_fields().items()}
        return {"headers": self.headers(headers), "data": data, "files": files}

    @staticmethod
    def _classify(response: httpx.Response) -> Result:
        return normalize_response(response.status_code, response.content, response.reason_phrase)


class SyncTransport(_BaseTransport):
    """Blocking dispatcher backed by :class:`httpx.Client`."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(config)
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=config.timeout, transport=transport)

    def send(
        self,
        method: str,
        path: str,
        body: Body = None,
        *,
        query: Body = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Result:
        return self._dispatch(method, path, self._json_request(body, query, headers))

    def send_multipart(
        self,
        method: str,
        path: str,
        descriptor: MultipartDescriptor,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Result:
        descriptor.seal()
        try:
            files = self._read_files(descriptor)
        except OSError as exc:
            return io_failure(exc)
        return self._dispatch(method, path, self._multipart_request(descriptor, files, headers))

    def _dispatch(self, method: str, path: str, kwargs: Dict[str, Any]) -> Result:
        _LOGGER.debug("dispatching %s %s", method, path)
        # httpx encodes header values as ASCII while building the request.
        try:
            response = self._client.request(method, self.url(path), **kwargs)
        except (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            _LOGGER.debug("%s %s failed before a response arrived", method, path, exc_info=exc)
            return transport_failure(exc)
        _LOGGER.debug("%s %s -> %s", method, path, response.status_code)
        return self._classify(response)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SyncTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


class AsyncTransport(_BaseTransport):
    """Asynchronous companion for :class:`SyncTransport`."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(config)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=config.timeout, transport=transport)

    async def send(
        self,
        method: str,
        path: str,
        body: Body = None,
        *,
        query: Body = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Result:
        return await self._dispatch(method, path, self._json_request(body, query, headers))

    async def send_multipart(
        self,
        method: str,
        path: str,
        descriptor: MultipartDescriptor,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Result:
        descriptor.seal()
        try:
            files = await asyncio.to_thread(self._read_files, descriptor)
        except OSError as exc:
            return io_failure(exc)
        return await self._dispatch(method, path, self._multipart_request(descriptor, files, headers))

    async def _dispatch(self, method: str, path: str, kwargs: Dict[str, Any]) -> Result:
        _LOGGER.debug("dispatching %s %s", method, path)
        # httpx encodes header values as ASCII while building the request.
        try:
            response = await self._client.request(method, self.url(path), **kwargs)
        except (httpx.RequestError, httpx.InvalidURL, UnicodeEncodeError) as exc:
            _LOGGER.debug("%s %s failed before a response arrived", method, path, exc_info=exc)
            return transport_failure(exc)
        _LOGGER.debug("%s %s -> %s", method, path, response.status_code)
        return self._classify(response)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
