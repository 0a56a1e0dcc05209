"""Command-line launcher for the jsonresponse demo service."""

import os

import uvicorn
from loguru import logger

from jsonresponse.api.main import app
from jsonresponse.core.config import Settings, get_settings
from jsonresponse.core.logging import setup_logging

APP_IMPORT_PATH = "jsonresponse.api.main:app"


def resolve_port(settings: Settings) -> int:
    """Prefer the platform-provided PORT over the configured API port."""
    return int(os.environ.get("PORT", settings.api_port))


def main() -> None:
    """Serve the demo app, reloading from the import path in debug mode."""
    settings = get_settings()
    setup_logging(settings)

    port = resolve_port(settings)
    mode = "debug, auto-reload" if settings.debug else "production"
    logger.info(
        "Serving {} on http://{}:{} ({})",
        settings.app_name,
        settings.api_host,
        port,
        mode,
    )

    # log_config=None keeps the uvicorn loggers setup_logging routed to Loguru
    uvicorn.run(
        APP_IMPORT_PATH if settings.debug else app,
        host=settings.api_host,
        port=port,
        reload=settings.debug,
        log_config=None,
    )


if __name__ == "__main__":
    main()
