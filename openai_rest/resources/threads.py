"""Threads façade, including messages, runs and run steps.

Every method maps to exactly one endpoint; path parameters are quoted into
their own segment::

    client.threads.create_run("thread_abc", RunRequest("asst_123").stream(False))
    client.threads.list_run_steps("thread_abc", "run_456", ListQuery().limit(5))
"""
from __future__ import annotations

from typing import Optional

from ..descriptors import (
    ListQuery,
    MessageRequest,
    MessageUpdate,
    RunRequest,
    RunUpdate,
    ThreadRequest,
    ToolOutputsRequest,
)
from .base import ASSISTANTS_BETA, Resource, _R, segment


class Threads(Resource[_R]):
    headers = ASSISTANTS_BETA

    # Threads ----------------------------------------------------------
    def create(self, request: Optional[ThreadRequest] = None) -> _R:
        return self._post("/threads", request)

    def retrieve(self, thread_id: str) -> _R:
        return self._get(self._thread(thread_id))

    def modify(self, thread_id: str, request: ThreadRequest) -> _R:
        return self._post(self._thread(thread_id), request)

    def delete(self, thread_id: str) -> _R:
        return self._delete(self._thread(thread_id))

    # Messages ---------------------------------------------------------
    def create_message(self, thread_id: str, request: MessageRequest) -> _R:
        return self._post(f"{self._thread(thread_id)}/messages", request)

    def list_messages(self, thread_id: str, query: Optional[ListQuery] = None) -> _R:
        return self._get(f"{self._thread(thread_id)}/messages", query)

    def retrieve_message(self, thread_id: str, message_id: str) -> _R:
        return self._get(f"{self._thread(thread_id)}/messages/{segment(message_id)}")

    def modify_message(self, thread_id: str, message_id: str, request: MessageUpdate) -> _R:
        return self._post(f"{self._thread(thread_id)}/messages/{segment(message_id)}", request)

    def delete_message(self, thread_id: str, message_id: str) -> _R:
        return self._delete(f"{self._thread(thread_id)}/messages/{segment(message_id)}")

    # Runs -------------------------------------------------------------
    def create_run(self, thread_id: str, request: RunRequest) -> _R:
        return self._post(f"{self._thread(thread_id)}/runs", request)

    def create_thread_and_run(self, request: RunRequest) -> _R:
        return self._post("/threads/runs", request)

    def list_runs(self, thread_id: str, query: Optional[ListQuery] = None) -> _R:
        return self._get(f"{self._thread(thread_id)}/runs", query)

    def retrieve_run(self, thread_id: str, run_id: str) -> _R:
        return self._get(self._run(thread_id, run_id))

    def modify_run(self, thread_id: str, run_id: str, request: RunUpdate) -> _R:
        return self._post(self._run(thread_id, run_id), request)

    def submit_tool_outputs(self, thread_id: str, run_id: str, request: ToolOutputsRequest) -> _R:
        return self._post(f"{self._run(thread_id, run_id)}/submit_tool_outputs", request)

    def cancel_run(self, thread_id: str, run_id: str) -> _R:
        return self._post(f"{self._run(thread_id, run_id)}/cancel")

    def delete_run(self, thread_id: str, run_id: str) -> _R:
        return self._delete(self._run(thread_id, run_id))

    # Run steps --------------------------------------------------------
    def list_run_steps(self, thread_id: str, run_id: str, query: Optional[ListQuery] = None) -> _R:
        return self._get(f"{self._run(thread_id, run_id)}/steps", query)

    def retrieve_run_step(self, thread_id: str, run_id: str, step_id: str) -> _R:
        return self._get(f"{self._run(thread_id, run_id)}/steps/{segment(step_id)}")

    @staticmethod
    def _thread(thread_id: str) -> str:
        return f"/threads/{segment(thread_id)}"

    @classmethod
    def _run(cls, thread_id: str, run_id: str) -> str:
        return f"{cls._thread(thread_id)}/runs/{segment(run_id)}"
