"""
Pytest configuration and shared fixtures for docreview tests.
"""

import json
import logging
from typing import Callable

import httpx
import pytest

from docreview.clients.DocumentStoreClient import DocumentStoreClient
from docreview.helper.HelperConfig import HelperConfig
from docreview.models.permission import UserPermissionOverride

BASE_URL = "http://store.test"


# =========================================================================
# Configuration
# =========================================================================


@pytest.fixture
def store_env(monkeypatch) -> None:
    """Minimal environment for the document store client."""
    monkeypatch.setenv("STORE_BASE_URL", BASE_URL)
    monkeypatch.setenv("STORE_API_TOKEN", "secret-token")
    monkeypatch.delenv("STORE_SUCCESS_STATUSES", raising=False)
    monkeypatch.delenv("STORE_TIMEOUT", raising=False)
    monkeypatch.delenv("REVIEW_DEFAULT_PERMISSION", raising=False)
    monkeypatch.delenv("REVIEW_MIN_QUERY_LENGTH", raising=False)


@pytest.fixture
def helper_config() -> HelperConfig:
    return HelperConfig(logger=logging.getLogger("docreview.tests"))


# =========================================================================
# HTTP stubbing
# =========================================================================


class RecordingHandler:
    """httpx.MockTransport handler that records requests and answers from a route table."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def add(self, method: str, path: str, status_code: int = 200, body: dict | None = None) -> None:
        self.routes[(method, path)] = lambda request: httpx.Response(status_code, json=body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"status": "ERROR", "error": {"code": "NOT_FOUND", "message": "no route"}})
        return route(request)

    @property
    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
async def store_client(store_env, helper_config, handler):
    client = DocumentStoreClient(helper_config=helper_config)
    await client.boot(transport=httpx.MockTransport(handler))
    yield client
    await client.close()


# =========================================================================
# Sample data
# =========================================================================


@pytest.fixture
def comment_payload() -> dict:
    return {
        "id": "c-1",
        "documentId": "d1",
        "fileId": "doc-42",
        "fileVersion": 3,
        "comment": "Looks good",
        "marker": {"pageNumber": 2, "position": {"x": 0.5, "y": 0.8}},
        "authorId": "u1",
        "authorName": "Ada",
        "createdAt": "2024-05-01T10:00:00Z",
        "isResolved": False,
    }


@pytest.fixture
def overrides() -> list[UserPermissionOverride]:
    return [
        UserPermissionOverride(user_id="u1", document_id="d1", permission="COMMENT"),
        UserPermissionOverride(user_id="u1", document_id="d2", permission="NONE"),
        UserPermissionOverride(user_id="u1", document_id="d3", permission="DECIDE"),
    ]
