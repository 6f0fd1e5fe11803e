"""Chat view configuration with environment variable loading."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

load_dotenv()

DEFAULT_API_PORT = 8000


class ClientConfig(BaseModel):
    """Configuration for the chat pages.

    Attributes:
        api_base_url: Where the proxy endpoint is served.
        request_timeout: Seconds to wait for one round trip.
        reveal_interval: Seconds between revealed characters.
    """

    model_config = ConfigDict(frozen=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", f"http://localhost:{DEFAULT_API_PORT}"),
        description="Base URL of the chat proxy",
    )
    request_timeout: float = Field(default=120.0, ge=1.0, le=600.0)
    reveal_interval: float = Field(default=0.02, ge=0.0, le=1.0)


def get_client_config(port: int | None = None) -> ClientConfig:
    """Create chat view configuration from environment.

    Args:
        port: Port the proxy listens on locally. Used for the base URL when
            API_BASE_URL is unset, so pages served next to the proxy reach it.
    """
    if port is not None and not os.getenv("API_BASE_URL"):
        return ClientConfig(api_base_url=f"http://localhost:{port}")
    return ClientConfig()
