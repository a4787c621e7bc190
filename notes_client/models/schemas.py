from pydantic import BaseModel, ConfigDict, Field, field_validator


class SelectedFile(BaseModel):
    """A file staged for ingestion.

    Attributes:
        name: Original file name sent as the multipart filename.
        content: Raw file bytes.
        content_type: MIME type reported by the browser or caller.
    """

    name: str
    content: bytes
    content_type: str = "application/octet-stream"


class IngestResponse(BaseModel):
    """Response from POST /api/ingest.

    Attributes:
        chunks: Number of index fragments created by this ingest.
    """

    chunks: int = Field(default=0, ge=0)

    @field_validator("chunks", mode="before")
    @classmethod
    def missing_chunks_count_as_zero(cls, v: object) -> object:
        """Treat an explicit null count the same as an absent one."""
        if v is None:
            return 0
        return v


class QueryRequest(BaseModel):
    """Request payload for POST /api/query.

    Attributes:
        question: Natural-language question, sent as-is (may be empty).
        top_k: Number of passages to retrieve.
    """

    question: str
    top_k: int


class QueryResponse(BaseModel):
    """Response from POST /api/query.

    Attributes:
        answer: Generated answer text.
        contexts: Supporting passages in retrieval order.
    """

    answer: str
    contexts: list[str]


class ControllerState(BaseModel):
    """Immutable snapshot of the controller's session state.

    Attributes:
        selected_files: Names of the files staged for ingestion.
        is_busy: Whether a remote operation is outstanding.
        total_chunks_indexed: Running chunk count since the last reset.
        question: Current question text.
        top_k: Raw Top K value as last entered.
        answer: Most recent answer.
        contexts: Passages supporting the most recent answer.
        error: Most recent failure message, empty when none.
    """

    model_config = ConfigDict(frozen=True)

    selected_files: tuple[str, ...] = ()
    is_busy: bool = False
    total_chunks_indexed: int = Field(default=0, ge=0)
    question: str = ""
    top_k: int | float | str | None = 4
    answer: str = ""
    contexts: tuple[str, ...] = ()
    error: str = ""
