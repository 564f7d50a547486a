"""Optional typed projections over generic response values.

Every operation returns a plain JSON value.  Callers who want stronger
guarantees can project a :class:`~openai_rest.core.Success` onto one of these
models with :meth:`~openai_rest.core.Success.parse`.  Unknown fields are kept
so nothing the server sends is dropped.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class ModelObject(ResponseModel):
    id: str
    object: str = "model"
    created: Optional[int] = None
    owned_by: Optional[str] = None


class ListPage(ResponseModel):
    """Paginated collection returned by every list endpoint."""

    object: str = "list"
    data: List[Dict[str, Any]] = Field(default_factory=list)
    first_id: Optional[str] = None
    last_id: Optional[str] = None
    has_more: bool = False


class DeletionStatus(ResponseModel):
    id: str
    object: Optional[str] = None
    deleted: bool


class ChatMessage(ResponseModel):
    role: str
    content: Optional[Any] = None
    tool_calls: List[Dict[str, Any]] = Field(default_factory=list)


class ChatChoice(ResponseModel):
    index: int = 0
    message: ChatMessage
    finish_reason: Optional[str] = None


class ChatCompletion(ResponseModel):
    id: Optional[str] = None
    model: Optional[str] = None
    choices: List[ChatChoice] = Field(default_factory=list)
    usage: Dict[str, Any] = Field(default_factory=dict)

    @property
    def text(self) -> str:
        """Content of the first choice, or an empty string."""

        if not self.choices:
            return ""
        content = self.choices[0].message.content
        return content if isinstance(content, str) else ""


class Embedding(ResponseModel):
    index: int = 0
    embedding: Any


class EmbeddingList(ResponseModel):
    model: Optional[str] = None
    data: List[Embedding] = Field(default_factory=list)
    usage: Dict[str, Any] = Field(default_factory=dict)
