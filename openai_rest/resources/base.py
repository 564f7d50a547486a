"""Façade abstractions shared by every resource."""
from __future__ import annotations

from typing import Any, Generic, Mapping, Optional, Protocol, TypeVar
from urllib.parse import quote

from ..descriptors import ListQuery, MultipartDescriptor

_R = TypeVar("_R")
_R_co = TypeVar("_R_co", covariant=True)

ASSISTANTS_BETA = {"OpenAI-Beta": "assistants=v2"}


class Transport(Protocol[_R_co]):
    """What a façade needs from a dispatcher.

    ``SyncTransport`` returns a ``Result``; ``AsyncTransport`` returns an
    awaitable of one.  Façades pass that value straight through.
    """

    def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        query: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> _R_co:
        ...

    def send_multipart(
        self,
        method: str,
        path: str,
        descriptor: MultipartDescriptor,
        *,
        headers: Optional[Mapping[str, str]] = None,
    ) -> _R_co:
        ...


def segment(value: str) -> str:
    """Quote a path parameter so it cannot escape its path segment."""

    return quote(str(value), safe="")


class Resource(Generic[_R]):
    """Base façade holding the shared dispatcher."""

    headers: Optional[Mapping[str, str]] = None

    def __init__(self, transport: Transport[_R]) -> None:
        self._transport = transport

    def _get(self, path: str, query: Optional[ListQuery] = None) -> _R:
        return self._transport.send("GET", path, query=query, headers=self.headers)

    def _post(self, path: str, body: Any = None) -> _R:
        return self._transport.send("POST", path, {} if body is None else body, headers=self.headers)

    def _delete(self, path: str) -> _R:
        return self._transport.send("DELETE", path, headers=self.headers)

    def _upload(self, path: str, descriptor: MultipartDescriptor) -> _R:
        return self._transport.send_multipart("POST", path, descriptor, headers=self.headers)
