"""Main application entry point.

Runs FastAPI with the NiceGUI chat page mounted on the same server.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    Refuses to start when the chat configuration is invalid, so no page is
    ever served without a usable credential.
    """
    import uvicorn
    from nicegui import ui

    from src.agent.config import ConfigError, load_chat_config
    from src.api.app import create_app
    from src.ui.chat_page import register_pages

    config = load_chat_config()
    if isinstance(config, ConfigError):
        logger.error(config.message)
        sys.exit(1)

    app = create_app()
    register_pages(config)

    ui.run_with(
        app,
        title="AI Assistant",
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "gemini-chat-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting Gemini Chat with model {config.model_name}")
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
