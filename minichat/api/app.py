"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from minichat.api.chat import chat_validation_handler
from minichat.api.chat import router as chat_router
from minichat.proxy.config import ProxyConfig, get_proxy_config
from minichat.proxy.upstream import CompletionService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info(f"Starting minichat API (model: {app.state.completion_service.model})")
    yield
    await app.state.completion_service.close()
    logger.info("Shutting down minichat API...")


def create_app(
    config: ProxyConfig | None = None,
    service: CompletionService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Proxy configuration. Loads from environment if not provided.
        service: Optional completion service, built from config otherwise.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="minichat API",
        description=(
            "Thin proxy between the minichat pages and a hosted chat-completion "
            "API. Forwards the full conversation and returns a single reply."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.state.completion_service = service or CompletionService(
        config or get_proxy_config()
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(chat_router)
    application.add_exception_handler(RequestValidationError, chat_validation_handler)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "minichat"}

    return application


app = create_app()
