"""Command-line entry point for the PDF form extractor.

Serves the FastAPI host endpoints and the NiceGUI drop page from one
uvicorn process. Settings come from the environment (and a ``.env`` file)
through ``ServerConfig``.
"""

import logging
import sys

from src.api.config import ServerConfig, get_server_config

logger = logging.getLogger(__name__)


def configure_logging(config: ServerConfig) -> None:
    """Send log records to stdout at the configured level."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def serve(config: ServerConfig) -> None:
    """Mount the drop page onto the API app and run it until interrupted."""
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.ui.drop_page import drop_page  # noqa: F401 - Registers the page

    app = create_app()
    ui.run_with(
        app,
        title="PDF Form Extractor",
        favicon="📄",
        storage_secret=config.storage_secret,
    )

    logger.info(f"Drop page on http://{config.host}:{config.port}/")
    logger.info(f"API docs on http://{config.host}:{config.port}/docs")
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


def main() -> None:
    """Load settings, set up logging and start the server."""
    config = get_server_config()
    configure_logging(config)
    logger.info("Starting PDF Form Extractor")
    serve(config)


if __name__ == "__main__":
    main()
