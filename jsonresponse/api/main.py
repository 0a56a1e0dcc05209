"""Demo FastAPI application showing the response helpers in a real service.

It handles:
- Application lifecycle logging (startup/shutdown)
- ``EnvelopeResponse`` as the default response class
- Handlers writing through ``ResponseRecorder`` for status shortcuts,
  body-less responses and the generic message path
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI
from loguru import logger
from starlette.responses import Response

from jsonresponse import generic
from jsonresponse.api.responses import EnvelopeResponse
from jsonresponse.core.config import Settings, get_settings
from jsonresponse.core.logging import setup_logging
from jsonresponse.envelope import Envelope
from jsonresponse.writer import ResponseRecorder

# In-memory catalogue served by the demo
ITEMS: dict[int, dict[str, Any]] = {
    1: {"id": 1, "name": "Teapot", "price": 42.5},
    2: {"id": 2, "name": "Kettle", "price": 19.9},
}


@asynccontextmanager
async def lifespan(app_instance: FastAPI) -> AsyncGenerator[None]:
    """Log application lifespan events.

    Args:
        app_instance: The FastAPI application instance.

    Yields:
        None: Nothing is yielded, this is just a lifespan context.
    """
    logger.info(
        "Application startup complete - {} v{}",
        app_instance.title,
        app_instance.version,
    )
    yield
    logger.info("Application shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the demo application.

    Args:
        settings: Optional settings instance. If not provided, will use get_settings().

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings)

    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        default_response_class=EnvelopeResponse,
        lifespan=lifespan,
    )

    @application.get("/")
    async def root() -> dict[str, str]:
        """Root endpoint, wrapped by the active transformer."""
        return {"message": "Hello from jsonresponse!"}

    @application.get("/info")
    async def info(
        app_settings: Annotated[Settings, Depends(get_settings)],
    ) -> dict[str, Any]:
        """Get application information.

        Args:
            app_settings: Application settings injected via dependency.

        Returns:
            dict[str, Any]: Application name, version and environment.
        """
        return {
            "app_name": app_settings.app_name,
            "version": app_settings.app_version,
            "environment": app_settings.environment,
        }

    @application.get("/items/{item_id}")
    async def get_item(item_id: int) -> Response:
        """Return an item, or the generic 404 message body."""
        recorder = ResponseRecorder()
        item = ITEMS.get(item_id)
        if item is None:
            generic.not_found(recorder)
        else:
            Envelope(item).with_header("X-Item-Id", str(item_id)).ok(recorder)
        return recorder.to_response()

    @application.delete("/items/{item_id}")
    async def delete_item(item_id: int) -> Response:
        """Pretend to delete an item; answers without body."""
        logger.info("Deleting item {}", item_id)
        recorder = ResponseRecorder()
        Envelope.empty().no_content(recorder)
        return recorder.to_response()

    @application.get("/broken")
    async def broken() -> Response:
        """Fail with a programming excuse attached."""
        recorder = ResponseRecorder()
        Envelope({"status": "broken"}).with_programming_excuse().internal_server_error(
            recorder
        )
        return recorder.to_response()

    @application.get("/coffee")
    async def coffee() -> Response:
        """Refuse to brew coffee."""
        recorder = ResponseRecorder()
        generic.teapot(recorder)
        return recorder.to_response()

    return application


app = create_app()
