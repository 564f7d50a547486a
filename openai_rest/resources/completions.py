"""Chat and text completion façade."""
from __future__ import annotations

from ..descriptors import ChatCompletionRequest, CompletionRequest
from .base import Resource, _R


class Completions(Resource[_R]):
    def create_chat(self, request: ChatCompletionRequest) -> _R:
        return self._post("/chat/completions", request)

    def create(self, request: CompletionRequest) -> _R:
        """Legacy text completion against ``/completions``."""

        return self._post("/completions", request)
