"""Moderation façade."""
from __future__ import annotations

from ..descriptors import ModerationRequest
from .base import Resource, _R


class Moderations(Resource[_R]):
    def create(self, request: ModerationRequest) -> _R:
        return self._post("/moderations", request)
