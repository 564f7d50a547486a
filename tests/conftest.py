"""Pytest configuration file for test suite setup.

This module ensures the project root is added to sys.path for proper module
imports during testing and provides an in-memory HTTP recorder shared by the
transport and façade tests.
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest


def ensure_project_root_on_path() -> None:
    """Add the project root directory to sys.path if not already present."""
    project_root = Path(__file__).resolve().parent.parent
    if str(project_root) not in sys.path:
        sys.path.insert(0, str(project_root))


def pytest_sessionstart(session):  # type: ignore[override]
    """Pytest hook called at the start of the test session.

    Ensures the project root is on sys.path before tests run.
    """
    ensure_project_root_on_path()


BASE_URL = "https://api.test/v1"


class Recorder:
    """Captures every request and answers with a canned response."""

    def __init__(self, respond: Optional[Callable[[httpx.Request], httpx.Response]] = None) -> None:
        self.requests: List[httpx.Request] = []
        self._respond = respond or (lambda request: httpx.Response(200, json={"ok": True}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._respond(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture()
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture()
def client(recorder: Recorder):
    from openai_rest import Client

    with Client("secret", BASE_URL, transport=recorder.transport()) as instance:
        yield instance
