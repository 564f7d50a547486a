"""Vector store façade."""
from __future__ import annotations

from typing import Optional

from ..descriptors import ListQuery, VectorStoreFileRequest, VectorStoreRequest, VectorStoreUpdate
from .base import ASSISTANTS_BETA, Resource, _R, segment


class VectorStores(Resource[_R]):
    headers = ASSISTANTS_BETA

    def create(self, request: Optional[VectorStoreRequest] = None) -> _R:
        return self._post("/vector_stores", request)

    def list(self, query: Optional[ListQuery] = None) -> _R:
        return self._get("/vector_stores", query)

    def retrieve(self, vector_store_id: str) -> _R:
        return self._get(f"/vector_stores/{segment(vector_store_id)}")

    def modify(self, vector_store_id: str, request: VectorStoreUpdate) -> _R:
        return self._post(f"/vector_stores/{segment(vector_store_id)}", request)

    def delete(self, vector_store_id: str) -> _R:
        return self._delete(f"/vector_stores/{segment(vector_store_id)}")

    def create_file(self, vector_store_id: str, request: VectorStoreFileRequest) -> _R:
        """Attach an already uploaded file to a vector store."""

        return self._post(f"/vector_stores/{segment(vector_store_id)}/files", request)

    def list_files(self, vector_store_id: str, query: Optional[ListQuery] = None) -> _R:
        return self._get(f"/vector_stores/{segment(vector_store_id)}/files", query)

    def retrieve_file(self, vector_store_id: str, file_id: str) -> _R:
        return self._get(f"/vector_stores/{segment(vector_store_id)}/files/{segment(file_id)}")

    def delete_file(self, vector_store_id: str, file_id: str) -> _R:
        return self._delete(f"/vector_stores/{segment(vector_store_id)}/files/{segment(file_id)}")
