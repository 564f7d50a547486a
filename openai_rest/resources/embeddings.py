"""Embeddings façade."""
from __future__ import annotations

from ..descriptors import EmbeddingRequest
from .base import Resource, _R


class Embeddings(Resource[_R]):
    def create(self, request: EmbeddingRequest) -> _R:
        return self._post("/embeddings", request)
