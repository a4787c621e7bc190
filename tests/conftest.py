"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - config: Client configuration pinned to a fake base URL
    - backend: Recording mock backend with queued responses
    - controller: Controller wired to the recording backend
    - stub_service: In-process FastAPI stand-in for the remote RAG service
    - service_controller: Controller wired to the stub service over ASGI
"""

import json
from collections.abc import Awaitable, Callable

import httpx
import pytest
from fastapi import FastAPI, File, UploadFile
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from notes_client.client.config import ClientConfig, TopKPolicy
from notes_client.client.rag_client import RagServiceClient
from notes_client.controller.session import InteractionController

BASE_URL = "http://test"

Outcome = httpx.Response | Exception | Callable[[httpx.Request], Awaitable[httpx.Response]]


class RecordingBackend:
    """Serves queued outcomes per path and records every request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._queued: dict[str, list[Outcome]] = {}

    def queue(self, path: str, outcome: Outcome) -> None:
        self._queued.setdefault(path, []).append(outcome)

    def queue_json(self, path: str, body: object, status_code: int = 200) -> None:
        self.queue(path, httpx.Response(status_code, json=body))

    def queue_text(self, path: str, text: str, status_code: int) -> None:
        self.queue(path, httpx.Response(status_code, text=text))

    def requests_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    def json_body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queued = self._queued.get(request.url.path)
        if not queued:
            return httpx.Response(404, text=f"no stub for {request.url.path}")
        outcome = queued.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        if callable(outcome):
            return await outcome(request)
        return outcome

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def config() -> ClientConfig:
    """Return configuration independent of the environment."""
    return ClientConfig(
        base_url=BASE_URL,
        timeout=5.0,
        top_k_policy=TopKPolicy.PASSTHROUGH,
        clear_on_failed_reset=True,
    )


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def client(config: ClientConfig, backend: RecordingBackend) -> RagServiceClient:
    return RagServiceClient(config, transport=backend.transport)


@pytest.fixture
def controller(config: ClientConfig, client: RagServiceClient) -> InteractionController:
    return InteractionController(client=client, config=config)


class StubQuery(BaseModel):
    question: str
    top_k: int


def create_stub_service() -> FastAPI:
    """Build a minimal in-memory service honoring the /api contract.

    Files are split into chunks on blank lines. Queries rank chunks by
    word overlap with the question and answer with the best one.
    """
    service = FastAPI()
    service.state.chunks = []

    @service.post("/api/ingest")
    async def ingest(files: list[UploadFile] = File(...)) -> dict[str, int]:
        created = 0
        for upload in files:
            text = (await upload.read()).decode("utf-8", errors="ignore")
            pieces = [p.strip() for p in text.split("\n\n") if p.strip()]
            service.state.chunks.extend(pieces)
            created += len(pieces)
        return {"chunks": created}

    @service.post("/api/query", response_model=None)
    async def query(request: StubQuery) -> dict | PlainTextResponse:
        if not service.state.chunks:
            return PlainTextResponse("index not built", status_code=500)
        words = set(request.question.lower().split())
        ranked = sorted(
            service.state.chunks,
            key=lambda chunk: -len(words & set(chunk.lower().split())),
        )
        contexts = ranked[: max(request.top_k, 0)]
        return {"answer": contexts[0] if contexts else "", "contexts": contexts}

    @service.post("/api/reset")
    async def reset() -> dict[str, str]:
        service.state.chunks.clear()
        return {"status": "ok"}

    return service


@pytest.fixture
def stub_service() -> FastAPI:
    return create_stub_service()


@pytest.fixture
def service_controller(config: ClientConfig, stub_service: FastAPI) -> InteractionController:
    """Controller talking to the stub service through ASGI transport."""
    transport = httpx.ASGITransport(app=stub_service)
    return InteractionController(
        client=RagServiceClient(config, transport=transport),
        config=config,
    )
