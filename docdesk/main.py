"""Main application entry point.

Runs the FastAPI host (port 8000) with the NiceGUI pages mounted on it.
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


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI serves /health, NiceGUI serves every page.
    """
    import uvicorn
    from nicegui import ui

    from docdesk.api.app import create_app
    from docdesk.config import get_config
    from docdesk.ui import pages  # noqa: F401 - Registers the pages

    config = get_config()
    app = create_app(config)

    ui.run_with(
        app,
        title="DocDesk",
        favicon="📄",
        storage_secret=config.storage_secret,
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"Document backend at {config.api_base_url}")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run NiceGUI on its own server, without the FastAPI host.

    Useful during UI development with auto-reload.
    """
    from nicegui import ui

    from docdesk.config import get_config
    from docdesk.ui import pages  # noqa: F401 - Registers the pages

    config = get_config()
    logger.info(f"Starting NiceGUI on http://localhost:8080 against {config.api_base_url}")
    ui.run(
        title="DocDesk",
        port=int(os.getenv("PORT", "8080")),
        storage_secret=config.storage_secret,
        reload=False,
    )


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to run NiceGUI without the FastAPI host.
    Default is integrated mode.
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting DocDesk in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ in {"__main__", "__mp_main__"}:
    main()
