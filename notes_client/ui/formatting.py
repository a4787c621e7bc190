"""Display helpers for the notes page."""

EXCERPT_LENGTH = 280


def excerpt(text: str, limit: int = EXCERPT_LENGTH) -> str:
    """Shorten a context passage for display, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit] + "…"


def backend_label(base_url: str) -> str:
    return base_url or "not set"


def chunks_label(total: int) -> str:
    return f"Total chunks indexed: {total}"
