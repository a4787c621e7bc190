"""Main application entry point.

Serves the notes page with NiceGUI (port 8080 by default).
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
    """Application entry point."""
    from nicegui import ui

    from notes_client.client.config import get_client_config
    from notes_client.ui.formatting import backend_label
    from notes_client.ui.notes_page import notes_page  # noqa: F401 - Registers the page

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))

    logger.info(f"Backend URL: {backend_label(get_client_config().base_url)}")
    logger.info(f"Notes UI available at http://localhost:{port}/")

    ui.run(
        title="Course Notes RAG Chatbot",
        host=host,
        port=port,
        reload=False,
        show=False,
    )


if __name__ == "__main__":
    main()
