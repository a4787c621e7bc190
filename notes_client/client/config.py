"""Client configuration with environment variable loading.

Pydantic-based configuration for the remote RAG service client.
The backend base URL comes from BACKEND_URL; empty means same-origin.
"""

import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

# Load environment variables from .env file
load_dotenv()


class TopKPolicy(str, Enum):
    """How an out-of-range top_k is handled before dispatch."""

    PASSTHROUGH = "passthrough"
    CLAMP = "clamp"
    REJECT = "reject"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class ClientConfig(BaseModel):
    """Configuration for the RAG service client and controller.

    Attributes:
        base_url: Backend base URL ("" for same-origin relative paths).
        timeout: Transport timeout in seconds.
        default_top_k: Value used when top_k cannot be coerced.
        top_k_min: Lower bound of the documented top_k range.
        top_k_max: Upper bound of the documented top_k range.
        top_k_policy: What to do with values outside the range.
        clear_on_failed_reset: Clear local results even if remote reset fails.
    """

    base_url: str = Field(
        default_factory=lambda: os.getenv("BACKEND_URL", ""),
        validate_default=True,
        description="Backend base URL (empty for same-origin)",
    )
    timeout: float = Field(
        default_factory=lambda: os.getenv("BACKEND_TIMEOUT", "120"),
        validate_default=True,
        gt=0.0,
        description="Transport timeout in seconds",
    )
    default_top_k: int = Field(default=4, ge=1)
    top_k_min: int = Field(default=1, ge=1)
    top_k_max: int = Field(default=10, ge=1)
    top_k_policy: TopKPolicy = Field(
        default_factory=lambda: os.getenv("TOP_K_POLICY", "passthrough").strip().lower(),
        validate_default=True,
        description="Handling of top_k values outside [top_k_min, top_k_max]",
    )
    clear_on_failed_reset: bool = Field(
        default_factory=lambda: _env_flag("CLEAR_ON_FAILED_RESET", True),
        description="Clear chunks, answer and contexts when remote reset fails",
    )

    @field_validator("base_url")
    @classmethod
    def strip_base_url(cls, v: str) -> str:
        """Strip whitespace and trailing slashes so paths join cleanly."""
        return v.strip().rstrip("/")

    @model_validator(mode="after")
    def check_top_k_range(self) -> "ClientConfig":
        """Ensure the documented range is not inverted."""
        if self.top_k_min > self.top_k_max:
            raise ValueError("top_k_min must not exceed top_k_max")
        return self


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If an environment value is invalid.
    """
    return ClientConfig()
