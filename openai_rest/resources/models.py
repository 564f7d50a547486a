"""Model catalogue façade."""
from __future__ import annotations

from .base import Resource, _R, segment


class Models(Resource[_R]):
    def list(self) -> _R:
        return self._get("/models")

    def retrieve(self, model: str) -> _R:
        return self._get(f"/models/{segment(model)}")

    def delete(self, model: str) -> _R:
        """Delete a fine-tuned model owned by the caller's organization."""

        return self._delete(f"/models/{segment(model)}")
