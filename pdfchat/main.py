"""Main application entry point.

Serves the NiceGUI client; the backend it talks to is configured through
API_BASE_URL. Environment variables are loaded from .env file.
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
    """Application entry point."""
    from nicegui import ui

    from pdfchat.config import get_client_config
    from pdfchat.ui.pages import index  # noqa: F401 - Registers the page

    config = get_client_config()

    logger.info(f"Starting PDF Chat on http://{config.host}:{config.port}")
    logger.info(f"Backend API at {config.api_base_url}")

    ui.run(
        title=config.title,
        host=config.host,
        port=config.port,
        storage_secret=config.storage_secret,
        reload=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
