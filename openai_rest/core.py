"""Core data structures and helpers for the REST binding.

This module provides the pydantic models that describe call results, the
optional-field accumulator shared by every request descriptor, and the
normalizer that turns a raw HTTP outcome into a :class:`Success` or a
:class:`Failure`.  Nothing here performs network I/O.
"""
from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict

_LOGGER = logging.getLogger(__name__)

JSONValue = Union[None, bool, int, float, str, List["JSONValue"], Dict[str, "JSONValue"]]

_M = TypeVar("_M", bound=BaseModel)


class ImmutableModel(BaseModel):
    """Base class that freezes result models."""

    model_config = ConfigDict(frozen=True)


class ErrorKind(str, Enum):
    """Failure categories surfaced by every operation."""

    TRANSPORT = "transport"
    HTTP = "http"
    DECODE = "decode"
    IO = "io"


class APIError(RuntimeError):
    """Raised by :meth:`Failure.unwrap` for callers who prefer exceptions."""

    def __init__(self, kind: ErrorKind, message: str, status: Optional[int] = None) -> None:
        self.kind = kind
        self.message = message
        self.status = status
        label = f"{kind.value} {status}" if status is not None else kind.value
        super().__init__(f"[{label}] {message}")


class Success(ImmutableModel):
    """The remote call completed with a 2xx response and a decodable body."""

    value: Any = None

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> JSONValue:
        return self.value

    def parse(self, model: Type[_M]) -> _M:
        """Project the generic value onto a pydantic model."""

        return model.model_validate(self.value)


class Failure(ImmutableModel):
    """The remote call failed; ``status`` is set only for HTTP failures."""

    kind: ErrorKind
    message: str
    status: Optional[int] = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> JSONValue:
        raise APIError(self.kind, self.message, self.status)


Result = Union[Success, Failure]


def accumulate(base: Mapping[str, Any], pairs: Iterable[Tuple[str, Any]]) -> Dict[str, Any]:
    """Return ``base`` plus every pair whose value is present.

    ``None`` marks an absent optional value.  The inputs are left untouched.
    """

    payload: Dict[str, Any] = dict(base)
    payload.update((key, value) for key, value in pairs if value is not None)
    return payload


def _error_message(body: Any) -> Optional[str]:
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return str(message) if message else None
    if isinstance(error, str) and error:
        return error
    return None


def normalize_response(status: int, content: bytes, reason: str = "") -> Result:
    """Classify a completed HTTP exchange.

    Args:
        status: HTTP status code.
        content: Raw response body.
        reason: Reason phrase used when the body carries no message.

    Returns:
        Result: ``Success`` with the decoded body for 2xx responses, otherwise
        a ``Failure`` of kind ``HTTP`` or ``DECODE``.
    """

    if 200 <= status < 300:
        if status == 204 or not content.strip():
            return Success(value=None)
        # UnicodeDecodeError is a ValueError; deep nesting raises RecursionError.
        try:
            return Success(value=json.loads(content.decode("utf-8")))
        except (ValueError, RecursionError) as exc:
            _LOGGER.debug("failed to decode json payload", exc_info=True)
            return Failure(kind=ErrorKind.DECODE, message=f"invalid JSON in response body: {exc}")

    text = content.decode("utf-8", errors="replace") if content else ""
    try:
        body: Any = json.loads(text) if text.strip() else None
    except (ValueError, RecursionError):
        body = None
    message = _error_message(body) or text.strip() or f"{status} {reason}".strip()
    return Failure(kind=ErrorKind.HTTP, message=message, status=status)


def transport_failure(error: Exception) -> Failure:
    message = str(error).strip() or error.__class__.__name__
    return Failure(kind=ErrorKind.TRANSPORT, message=message)


def io_failure(error: OSError) -> Failure:
    path = getattr(error, "filename", None)
    detail = error.strerror or str(error)
    message = f"{detail}: {path}" if path else detail
    return Failure(kind=ErrorKind.IO, message=message)
