"""Pydantic models for the remote RAG contract and controller state.

Provides type safety and validation for everything crossing the wire.

Models:
    - SelectedFile: File staged for ingestion
    - IngestResponse: Chunk count returned by the ingest endpoint
    - QueryRequest: Outgoing question payload
    - QueryResponse: Answer with supporting contexts
    - ControllerState: Read-only snapshot handed to the presentation layer
"""

from notes_client.models.schemas import (
    ControllerState,
    IngestResponse,
    QueryRequest,
    QueryResponse,
    SelectedFile,
)

__all__ = [
    "ControllerState",
    "IngestResponse",
    "QueryRequest",
    "QueryResponse",
    "SelectedFile",
]
