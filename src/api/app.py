"""FastAPI host for the chat widget.

The NiceGUI page is mounted onto this app by the entry point; the app
itself only adds CORS and a health check.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)

SERVICE_NAME = "gemini-chat"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log when the chat host starts and stops.

    Conversations and their Gemini sessions live with each page visit,
    so there is nothing to open or close here.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting Gemini Chat...")
    yield
    logger.info("Shutting down Gemini Chat...")


def create_app() -> FastAPI:
    """Create the FastAPI app the chat page is mounted on.

    Returns:
        FastAPI app exposing GET /health.
    """
    application = FastAPI(
        title="Gemini Chat",
        description="Web chat widget streaming replies from Google Gemini.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url=None,
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
        return {"status": "healthy", "service": SERVICE_NAME}

    return application
