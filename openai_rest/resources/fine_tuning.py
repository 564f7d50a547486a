"""Fine-tuning façades.

The API exposes the legacy ``/fine-tunes`` family next to the newer
``/fine_tuning/jobs`` family.  They overlap but are not interchangeable, so
each gets its own façade.
"""
from __future__ import annotations

from typing import Optional

from ..descriptors import FineTuneRequest, FineTuningJobRequest, ListQuery
from .base import Resource, _R, segment


class FineTunes(Resource[_R]):
    """Legacy ``/fine-tunes`` endpoints."""

    def create(self, request: FineTuneRequest) -> _R:
        return self._post("/fine-tunes", request)

    def list(self, query: Optional[ListQuery] = None) -> _R:
        return self._get("/fine-tunes", query)

    def retrieve(self, fine_tune_id: str) -> _R:
        return self._get(f"/fine-tunes/{segment(fine_tune_id)}")

    def cancel(self, fine_tune_id: str) -> _R:
        return self._post(f"/fine-tunes/{segment(fine_tune_id)}/cancel")

    def list_events(self, fine_tune_id: str, query: Optional[ListQuery] = None) -> _R:
        return self._get(f"/fine-tunes/{segment(fine_tune_id)}/events", query)


class FineTuning(Resource[_R]):
    """``/fine_tuning/jobs`` endpoints."""

    def create_job(self, request: FineTuningJobRequest) -> _R:
        return self._post("/fine_tuning/jobs", request)

    def list_jobs(self, query: Optional[ListQuery] = None) -> _R:
        return self._get("/fine_tuning/jobs", query)

    def retrieve_job(self, job_id: str) -> _R:
        return self._get(f"/fine_tuning/jobs/{segment(job_id)}")

    def cancel_job(self, job_id: str) -> _R:
        return self._post(f"/fine_tuning/jobs/{segment(job_id)}/cancel")

    def list_events(self, job_id: str, query: Optional[ListQuery] = None) -> _R:
        return self._get(f"/fine_tuning/jobs/{segment(job_id)}/events", query)

    def list_checkpoints(self, job_id: str, query: Optional[ListQuery] = None) -> _R:
        return self._get(f"/fine_tuning/jobs/{segment(job_id)}/checkpoints", query)
