"""Assistants façade."""
from __future__ import annotations

from typing import Optional

from ..descriptors import AssistantRequest, AssistantUpdate, ListQuery
from .base import ASSISTANTS_BETA, Resource, _R, segment


class Assistants(Resource[_R]):
    headers = ASSISTANTS_BETA

    def create(self, request: AssistantRequest) -> _R:
        return self._post("/assistants", request)

    def list(self, query: Optional[ListQuery] = None) -> _R:
        return self._get("/assistants", query)

    def retrieve(self, assistant_id: str) -> _R:
        return self._get(f"/assistants/{segment(assistant_id)}")

    def modify(self, assistant_id: str, request: AssistantUpdate) -> _R:
        return self._post(f"/assistants/{segment(assistant_id)}", request)

    def delete(self, assistant_id: str) -> _R:
        return self._delete(f"/assistants/{segment(assistant_id)}")
