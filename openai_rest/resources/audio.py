"""Speech-to-text façade."""
from __future__ import annotations

from ..descriptors import TranscriptionRequest, TranslationRequest
from .base import Resource, _R


class Audio(Resource[_R]):
    def transcribe(self, request: TranscriptionRequest) -> _R:
        return self._upload("/audio/transcriptions", request)

    def translate(self, request: TranslationRequest) -> _R:
        """Transcribe into English regardless of the spoken language."""

        return self._upload("/audio/translations", request)
