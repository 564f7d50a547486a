"""Uploaded file façade."""
from __future__ import annotations

from typing import Optional

from ..descriptors import FileUploadRequest, ListQuery
from .base import Resource, _R, segment


class Files(Resource[_R]):
    def list(self, query: Optional[ListQuery] = None) -> _R:
        return self._get("/files", query)

    def upload(self, request: FileUploadRequest) -> _R:
        return self._upload("/files", request)

    def retrieve(self, file_id: str) -> _R:
        return self._get(f"/files/{segment(file_id)}")

    def delete(self, file_id: str) -> _R:
        return self._delete(f"/files/{segment(file_id)}")
