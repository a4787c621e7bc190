"""Async HTTP client for the remote RAG service.

Thin typed wrapper over the three REST endpoints. Every failure is raised
as a ClientError subclass; the controller decides what to do with it.

Endpoints:
    - POST /api/ingest: multipart upload, one part per file under "files"
    - POST /api/query: JSON question with top_k
    - POST /api/reset: empty body, response ignored
"""

import logging
from collections.abc import Sequence
from typing import TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from notes_client.client.config import ClientConfig, get_client_config
from notes_client.client.errors import MalformedResponseError, RemoteError, TransportError
from notes_client.models.schemas import IngestResponse, QueryRequest, QueryResponse, SelectedFile

logger = logging.getLogger(__name__)

INGEST_PATH = "/api/ingest"
QUERY_PATH = "/api/query"
RESET_PATH = "/api/reset"

ModelT = TypeVar("ModelT", bound=BaseModel)


class RagServiceClient:
    """Client for the remote ingest/query/reset contract.

    A fresh httpx.AsyncClient is opened per request. Pass a transport to
    route requests somewhere other than the network (mock or ASGI app).
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def ingest(self, files: Sequence[SelectedFile]) -> IngestResponse:
        """Upload files for indexing.

        Args:
            files: Files to send, each as its own multipart part.

        Returns:
            IngestResponse with the number of chunks created.

        Raises:
            TransportError: Service unreachable.
            RemoteError: Non-success status.
            MalformedResponseError: Body is not a valid ingest response.
        """
        parts = [("files", (f.name, f.content, f.content_type)) for f in files]
        response = await self._post(INGEST_PATH, files=parts)
        return _parse(response, IngestResponse, INGEST_PATH)

    async def query(self, question: str, top_k: int) -> QueryResponse:
        """Ask a question against the index.

        Args:
            question: Question text, sent unmodified.
            top_k: Number of passages to retrieve.

        Returns:
            QueryResponse with answer and contexts.

        Raises:
            TransportError: Service unreachable.
            RemoteError: Non-success status.
            MalformedResponseError: Body is not a valid query response.
        """
        payload = QueryRequest(question=question, top_k=top_k)
        response = await self._post(QUERY_PATH, json=payload.model_dump())
        return _parse(response, QueryResponse, QUERY_PATH)

    async def reset(self) -> None:
        """Clear the remote index. The response body is ignored."""
        await self._post(RESET_PATH)

    async def _post(self, path: str, **kwargs: object) -> httpx.Response:
        url = f"{self._config.base_url}{path}"
        logger.debug(f"POST {url}")
        async with httpx.AsyncClient(
            timeout=self._config.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.post(url, **kwargs)
            except (httpx.RequestError, httpx.InvalidURL) as e:
                raise TransportError(str(e) or f"Connection failed: {type(e).__name__}") from e

        if not response.is_success:
            logger.debug(f"POST {url} returned HTTP {response.status_code}")
            raise RemoteError(response.text, response.status_code)
        return response


def _parse(response: httpx.Response, model: type[ModelT], path: str) -> ModelT:
    try:
        return model.model_validate_json(response.content)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(p) for p in first["loc"]) or "body"
        raise MalformedResponseError(
            f"Malformed response from {path}: {location}: {first['msg']}"
        ) from e
