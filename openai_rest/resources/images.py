"""Image generation façade.

Generation takes a JSON body; edits and variations upload the source image
(and optional mask) as multipart form data.
"""
from __future__ import annotations

from ..descriptors import ImageEditRequest, ImageGenerationRequest, ImageVariationRequest
from .base import Resource, _R


class Images(Resource[_R]):
    def generate(self, request: ImageGenerationRequest) -> _R:
        return self._post("/images/generations", request)

    def edit(self, request: ImageEditRequest) -> _R:
        return self._upload("/images/edits", request)

    def create_variation(self, request: ImageVariationRequest) -> _R:
        return self._upload("/images/variations", request)
