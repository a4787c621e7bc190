"""Interaction controller for the notes assistant.

Owns all transient session state and runs the three remote operations.
Every operation follows the same order: clear error, mark busy, await the
remote call, apply the success or failure effect, clear busy.

Only one operation may be outstanding at a time. A second one started
while busy is rejected without touching state. The check and the busy
flag are set with no await in between, so this holds on a single event
loop without a lock.
"""

import logging
import math
from collections.abc import Callable, Sequence

from notes_client.client.config import ClientConfig, TopKPolicy, get_client_config
from notes_client.client.errors import ClientError, ValidationError
from notes_client.client.rag_client import RagServiceClient
from notes_client.models.schemas import ControllerState, SelectedFile

logger = logging.getLogger(__name__)

DEFAULT_QUESTION = "What are the key topics covered?"
NO_FILES_MESSAGE = "please select one or more files"
BUSY_MESSAGE = "another operation is already in progress"

_UNSET = object()


def coerce_top_k(value: object, default: int = 4) -> int:
    """Read a raw Top K entry as a number.

    Unparseable, non-finite and zero values fall back to ``default``.
    Fractions are truncated toward zero. Range is not checked here.
    """
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return int(number) or default


def apply_top_k_policy(top_k: int, config: ClientConfig) -> int:
    """Apply the configured range policy to a coerced top_k.

    Raises:
        ValidationError: If the policy is REJECT and top_k is out of range.
    """
    low, high = config.top_k_min, config.top_k_max
    if low <= top_k <= high or config.top_k_policy == TopKPolicy.PASSTHROUGH:
        return top_k
    if config.top_k_policy == TopKPolicy.CLAMP:
        return max(low, min(high, top_k))
    raise ValidationError(f"top_k must be between {low} and {high}")


class InteractionController:
    """Session state plus the ingest, ask and reset operations.

    The presentation layer reads ``snapshot()`` and submits intents; it
    never touches the fields directly. Operations return True on success
    and False on failure or rejection; errors are stored, never raised.
    """

    def __init__(
        self,
        client: RagServiceClient | None = None,
        config: ClientConfig | None = None,
        on_change: Callable[[ControllerState], None] | None = None,
    ) -> None:
        self._config = config or get_client_config()
        self._client = client or RagServiceClient(self._config)
        self.on_change = on_change

        self._selected_files: list[SelectedFile] = []
        self._busy = False
        self._total_chunks = 0
        self._question = DEFAULT_QUESTION
        self._top_k: object = self._config.default_top_k
        self._answer = ""
        self._contexts: list[str] = []
        self._error = ""

    @property
    def base_url(self) -> str:
        return self._client.base_url

    def snapshot(self) -> ControllerState:
        """Return an immutable copy of the current state."""
        top_k = self._top_k if isinstance(self._top_k, int | float | str) else None
        return ControllerState(
            selected_files=tuple(f.name for f in self._selected_files),
            is_busy=self._busy,
            total_chunks_indexed=self._total_chunks,
            question=self._question,
            top_k=top_k,
            answer=self._answer,
            contexts=tuple(self._contexts),
            error=self._error,
        )

    # Intents

    def select_files(self, files: Sequence[SelectedFile]) -> None:
        """Replace the staged selection."""
        self._selected_files = list(files)
        self._notify()

    def set_question(self, text: str) -> None:
        self._question = text
        self._notify()

    def set_top_k(self, value: object) -> None:
        self._top_k = value
        self._notify()

    # Operations

    async def ingest(self, files: Sequence[SelectedFile] | None = None) -> bool:
        """Upload files and add the reported chunk count to the total.

        Args:
            files: Files to ingest. Defaults to the staged selection.

        Returns:
            True if the remote ingest succeeded.
        """
        if self._rejected("ingest"):
            return False
        batch = list(self._selected_files if files is None else files)
        if not batch:
            self._fail("ingest", ValidationError(NO_FILES_MESSAGE))
            return False

        self._begin()
        try:
            result = await self._client.ingest(batch)
        except ClientError as e:
            self._fail("ingest", e)
            return False
        else:
            self._total_chunks += result.chunks
            logger.info(
                f"Ingested {len(batch)} file(s): {result.chunks} chunks "
                f"(total {self._total_chunks})"
            )
            return True
        finally:
            self._end()

    async def ask(self, question: str | None = None, top_k: object = _UNSET) -> bool:
        """Submit a question and replace the answer and contexts.

        The question is sent as-is, empty included. Defaults come from the
        current question and Top K fields.

        Returns:
            True if an answer was received.
        """
        if self._rejected("ask"):
            return False
        text = self._question if question is None else question
        raw_top_k = self._top_k if top_k is _UNSET else top_k
        try:
            k = apply_top_k_policy(
                coerce_top_k(raw_top_k, self._config.default_top_k), self._config
            )
        except ValidationError as e:
            self._fail("ask", e)
            return False

        self._begin()
        try:
            result = await self._client.query(text, k)
        except ClientError as e:
            self._fail("ask", e)
            return False
        else:
            self._answer = result.answer
            self._contexts = list(result.contexts)
            logger.info(f"Answered question with {len(result.contexts)} context(s), top_k={k}")
            return True
        finally:
            self._end()

    async def reset(self) -> bool:
        """Reset the remote index and clear local results.

        Local results are cleared even when the remote call fails unless
        ``clear_on_failed_reset`` is turned off.

        Returns:
            True if the remote reset succeeded.
        """
        if self._rejected("reset"):
            return False

        self._begin()
        try:
            await self._client.reset()
        except ClientError as e:
            if self._config.clear_on_failed_reset:
                self._clear_results()
            self._fail("reset", e)
            return False
        else:
            self._clear_results()
            logger.info("Index reset")
            return True
        finally:
            self._end()

    # Internals

    def _rejected(self, operation: str) -> bool:
        if not self._busy:
            return False
        logger.warning(f"Rejected {operation}: {BUSY_MESSAGE}")
        return True

    def _begin(self) -> None:
        self._error = ""
        self._busy = True
        self._notify()

    def _end(self) -> None:
        self._busy = False
        self._notify()

    def _fail(self, operation: str, error: ClientError) -> None:
        self._error = str(error)
        logger.warning(f"{operation} failed ({type(error).__name__}): {self._error}")
        self._notify()

    def _clear_results(self) -> None:
        self._total_chunks = 0
        self._answer = ""
        self._contexts = []

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self.snapshot())
