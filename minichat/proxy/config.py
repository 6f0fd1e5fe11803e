"""Proxy configuration with environment variable loading.

Pydantic-based configuration for the upstream completion API.
Supports OpenAI and OpenAI-compatible APIs via custom base URL.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "gpt-4o-mini"


class ProxyConfig(BaseModel):
    """Configuration for the chat proxy.

    Built once at startup and handed to the completion service. The API key
    never leaves the server.

    Attributes:
        api_key: API key for the upstream provider. May be empty, in which
            case the upstream call fails with an authentication error.
        base_url: API base URL (None for OpenAI default).
        model_name: Model identifier used for every completion.
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    api_key: str = Field(
        default_factory=lambda: os.getenv("OPENAI_API_KEY", ""),
        description="API key for the upstream provider",
        repr=False,
    )
    base_url: str | None = Field(
        default_factory=lambda: os.getenv("OPENAI_API_BASE_URL") or None,
        description="API base URL (None for OpenAI default)",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("CHAT_MODEL", DEFAULT_MODEL),
        min_length=1,
        description="Model to use",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace from the API key."""
        return v.strip()


def get_proxy_config() -> ProxyConfig:
    """Create proxy configuration from environment.

    Returns:
        Configured ProxyConfig instance.
    """
    return ProxyConfig()
