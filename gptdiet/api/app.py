"""FastAPI application factory and configuration.

Host application for the chat page, with lifespan management, middleware,
and a health route.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gptdiet import __version__
from gptdiet.client.config import get_client_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    config = get_client_config()
    logger.info(f"Starting GPT Diet UI (chat service: {config.api_base_url})")
    yield
    # Shutdown
    logger.info("Shutting down GPT Diet UI...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="GPT Diet",
        description=(
            "Diet and exercise recommendation chat. Hosts the chat page and "
            "forwards messages to the remote chat completion service."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "gptdiet-ui"}

    return application
