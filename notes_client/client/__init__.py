"""Typed HTTP access to the remote RAG service.

Responsibilities:
    - Backend configuration from environment (.env supported)
    - Multipart ingest, JSON query and reset requests
    - Mapping transport faults, HTTP errors and bad bodies to ClientError types

Holds no session state. The controller owns all state.
"""

from notes_client.client.config import ClientConfig, TopKPolicy, get_client_config
from notes_client.client.errors import (
    ClientError,
    MalformedResponseError,
    RemoteError,
    TransportError,
    ValidationError,
)
from notes_client.client.rag_client import RagServiceClient

__all__ = [
    "ClientConfig",
    "ClientError",
    "MalformedResponseError",
    "RagServiceClient",
    "RemoteError",
    "TopKPolicy",
    "TransportError",
    "ValidationError",
    "get_client_config",
]
