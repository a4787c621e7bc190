"""Session controller for the notes assistant.

Owns all transient UI state and orchestrates ingest, ask and reset.

Responsibilities:
    - Request validation before dispatch
    - Mutual exclusion between remote operations
    - Mapping remote outcomes into session state and error text
    - Immutable snapshots for the presentation layer

Never raises to the caller. Failures end up in the snapshot's error field.
"""

from notes_client.controller.session import (
    DEFAULT_QUESTION,
    NO_FILES_MESSAGE,
    InteractionController,
    apply_top_k_policy,
    coerce_top_k,
)

__all__ = [
    "DEFAULT_QUESTION",
    "NO_FILES_MESSAGE",
    "InteractionController",
    "apply_top_k_policy",
    "coerce_top_k",
]
