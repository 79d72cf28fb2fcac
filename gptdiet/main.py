"""Main application entry point.

Runs FastAPI (port 8000) with the NiceGUI chat page mounted on it, or the
chat page alone. Environment variables are loaded from .env file.
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


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server."""
    import uvicorn
    from nicegui import ui

    from gptdiet.api.app import create_app
    from gptdiet.ui.chat_page import PAGE_TITLE, chat_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(
        app,
        title=PAGE_TITLE,
        favicon="🥗",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "gptdiet-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run only the NiceGUI chat page on its own server (port 8080)."""
    from gptdiet.ui.chat_page import main as run_page

    run_page()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to serve the chat page without the FastAPI host.
    Default is integrated mode.
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting GPT Diet in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
