"""Structured logging built on Loguru.

The library itself only emits a handful of records: configuration changes
at DEBUG and serialization failures at ERROR. Applications embedding it
(the bundled demo service included) call ``setup_logging`` once at startup
to get consistent output.

Formatter types:
- **console**: Human-readable with inline context (development)
- **json**: Generic structured format (production, managed platforms)

Standard library logging (uvicorn, starlette) is intercepted and forwarded
to Loguru so every record shares the same format.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Final, Protocol, cast

import orjson
from loguru import logger


class _LoggingState:
    """Simple state holder to track if logging has been configured."""

    def __init__(self) -> None:
        self.configured = False


_state = _LoggingState()


class SettingsProtocol(Protocol):
    """Protocol for settings objects that setup_logging can accept."""

    @property
    def debug(self) -> bool:
        """Debug mode flag."""
        ...

    @property
    def log_config(self) -> LogConfigProtocol:
        """Log configuration."""
        ...


class LogConfigProtocol(Protocol):
    """Protocol for log configuration objects."""

    @property
    def log_level(self) -> str:
        """Logging level."""
        ...

    @property
    def log_formatter_type(self) -> str | None:
        """Log formatter type."""
        ...


# Constants
DEFAULT_LOG_FORMAT: Final[str] = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "{message}"
)
MAX_FIELD_VALUE_LENGTH: Final[int] = 100


def _format_extra_field(key: str, value: object) -> str | None:
    """Format an extra field for display.

    Args:
        key: The field name.
        value: The field value.

    Returns:
        str | None: Formatted field or None if formatting fails.
    """
    try:
        str_value = str(value)
        if len(str_value) > MAX_FIELD_VALUE_LENGTH:
            str_value = str_value[: MAX_FIELD_VALUE_LENGTH - 3] + "..."

        # Escape braces to prevent format string errors
        str_value = str_value.replace("{", "{{").replace("}", "}}")
        safe_key = str(key).replace("{", "{{").replace("}", "}}")
    except (AttributeError, TypeError, ValueError) as e:
        logger.trace(f"Failed to format extra field {key}: {e}")
        return None
    else:
        return f"{safe_key}={str_value}"


def format_console_with_context(record: dict[str, Any]) -> str:
    """Format log record for console with all context fields visible.

    Args:
        record: Loguru record to format.

    Returns:
        str: Formatted log string with context.
    """
    try:
        parts = [
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green>",
            "<level>{level: <8}</level>",
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>",
        ]

        context_parts = []
        for key, value in record.get("extra", {}).items():
            if key.startswith("_") or value is None:
                continue
            formatted = _format_extra_field(key, value)
            if formatted:
                context_parts.append(f"<dim>{formatted}</dim>")
        if context_parts:
            parts.append(" ".join(f"[{part}]" for part in context_parts))

        parts.append("{message}")
        line = " | ".join(parts)
        if record.get("exception"):
            line += "\n{exception}"
        return line + "\n"
    except (AttributeError, TypeError, ValueError, KeyError) as e:
        logger.trace(f"Failed to format log record: {e}")
        return DEFAULT_LOG_FORMAT + "\n"


class InterceptHandler(logging.Handler):
    """Intercept standard logging and redirect to Loguru.

    This handler captures logs from libraries using standard logging
    and forwards them to Loguru for consistent formatting.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """Forward log record to Loguru.

        Args:
            record: Standard library LogRecord to forward.
        """
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        try:
            frame, depth = sys._getframe(6), 6
        except ValueError:
            # _getframe can fail if there aren't enough frames
            frame, depth = None, 1
        while frame and frame.f_code.co_filename == logging.__file__:
            next_frame = frame.f_back
            if next_frame is None:
                break
            frame = next_frame
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def serialize_for_json(record: dict[str, Any]) -> str:
    """Format log record as a single JSON line.

    Args:
        record: Loguru record to format.

    Returns:
        str: JSON-formatted log entry with newline.
    """
    log_entry: dict[str, Any] = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "logger": record["name"],
        "function": record["function"],
        "line": record["line"],
    }

    if extra := record.get("extra", {}):
        filtered_extra = {k: v for k, v in extra.items() if not k.startswith("_")}
        if filtered_extra:
            log_entry.update(filtered_extra)

    if exc := record.get("exception"):
        log_entry["exception"] = {
            "type": exc.type.__name__ if exc.type else None,
            "value": str(exc.value) if exc.value else None,
        }

    return orjson.dumps(log_entry, default=str).decode("utf-8") + "\n"


def setup_logging(settings: SettingsProtocol) -> None:
    """Configure Loguru for the host application.

    Args:
        settings: Application settings containing log configuration.
            The formatter is the one the settings resolved; an unset
            formatter selects the console one.

    Note:
        This function ensures it's only called once using module state.
    """
    if _state.configured:
        return

    logger.remove()

    formatter_type = settings.log_config.log_formatter_type or "console"

    if formatter_type == "json":

        def structured_sink(message: object) -> None:
            """Custom sink that writes one JSON document per record."""
            if hasattr(message, "record"):
                sys.stdout.write(serialize_for_json(message.record))
                sys.stdout.flush()

        logger.add(
            structured_sink,
            level=settings.log_config.log_level,
            enqueue=True,
            diagnose=False,
            backtrace=False,
        )
    else:
        logger.add(
            sys.stdout,
            format=cast("Any", format_console_with_context),
            level=settings.log_config.log_level,
            enqueue=True,
            colorize=True,
            diagnose=settings.debug,
            backtrace=settings.debug,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for logger_name in ["uvicorn", "uvicorn.error", "uvicorn.access"]:
        uvicorn_logger = logging.getLogger(logger_name)
        uvicorn_logger.handlers = [InterceptHandler()]
        uvicorn_logger.propagate = False

    logger.info(
        "Logging configured with {} formatter",
        formatter_type,
        formatter_type=formatter_type,
        log_level=settings.log_config.log_level,
    )

    _state.configured = True
