"""Runtime response options shared by every emit operation.

``ResponseOptions`` holds the three settings that shape emitted responses:

- the active transformer
- the default Content-Type header value
- the indent flag (tab-indented JSON instead of the compact form)

Each setting is guarded by its own lock, so a reader always observes the
value from before or after a concurrent write. Every emit operation accepts
an explicit ``options`` argument; when it is omitted the process-wide
instance returned by ``get_options()`` is used, which is built once from
``Settings.response_config``.

The module-level ``set_transformer``, ``reset_transformer``,
``set_default_content_type`` and ``set_indent`` functions act on that
process-wide instance.
"""

import threading
from functools import lru_cache

from loguru import logger

from jsonresponse.core.config import ResponseConfig, get_settings
from jsonresponse.core.constants import DEFAULT_CONTENT_TYPE
from jsonresponse.transformers import (
    DefaultTransformer,
    ResponseTransformer,
    TransformerFunc,
    as_transformer,
    transformer_from_config,
)


class ResponseOptions:
    """Independently locked transformer, content type and indent settings.

    Args:
        transformer: Initial transformer, ``DefaultTransformer`` if omitted.
        default_content_type: Content-Type used when a response sets none.
        indent: Whether bodies are emitted in indented form.
    """

    def __init__(
        self,
        transformer: ResponseTransformer | TransformerFunc | None = None,
        default_content_type: str = DEFAULT_CONTENT_TYPE,
        *,
        indent: bool = False,
    ) -> None:
        self._transformer_lock = threading.Lock()
        self._content_type_lock = threading.Lock()
        self._indent_lock = threading.Lock()

        self._transformer = (
            DefaultTransformer() if transformer is None else as_transformer(transformer)
        )
        self._default_content_type = default_content_type
        self._indent = indent

    @classmethod
    def from_config(cls, config: ResponseConfig) -> "ResponseOptions":
        """Build options from the response section of the settings.

        Args:
            config: Response configuration.

        Returns:
            ResponseOptions: New options instance.
        """
        return cls(
            transformer_from_config(config),
            config.default_content_type,
            indent=config.indent,
        )

    @property
    def transformer(self) -> ResponseTransformer:
        """The transformer applied to envelope payloads."""
        with self._transformer_lock:
            return self._transformer

    @property
    def default_content_type(self) -> str:
        """The Content-Type used when a response does not set one."""
        with self._content_type_lock:
            return self._default_content_type

    @property
    def indent(self) -> bool:
        """Whether bodies are serialized in indented form."""
        with self._indent_lock:
            return self._indent

    def set_transformer(
        self, transformer: ResponseTransformer | TransformerFunc
    ) -> None:
        """Install a new transformer for all subsequent responses.

        Args:
            transformer: Transformer instance or plain callable returning
                ``(headers, body)``.

        Raises:
            TransformerError: If the transformer is not callable.
        """
        resolved = as_transformer(transformer)
        with self._transformer_lock:
            self._transformer = resolved
        logger.debug("Response transformer set to {!r}", resolved)

    def reset_transformer(self) -> None:
        """Restore the default transformer."""
        with self._transformer_lock:
            self._transformer = DefaultTransformer()
        logger.debug("Response transformer reset to default")

    def set_default_content_type(self, content_type: str) -> None:
        """Set the Content-Type used when a response does not set one.

        An empty string disables the header on the generic emit path only;
        the envelope path still writes it (with an empty value).

        Args:
            content_type: The header value.
        """
        with self._content_type_lock:
            self._default_content_type = content_type
        logger.debug("Default Content-Type set to {!r}", content_type)

    def set_indent(self, flag: bool) -> None:  # noqa: FBT001 - mirrors a toggle
        """Toggle indented output, useful when a developer reads the responses.

        Args:
            flag: True for tab-indented bodies, False for compact ones.
        """
        with self._indent_lock:
            self._indent = flag
        logger.debug("Indented JSON output {}", "enabled" if flag else "disabled")

    def __repr__(self) -> str:
        return (
            f"ResponseOptions(transformer={self.transformer!r}, "
            f"default_content_type={self.default_content_type!r}, "
            f"indent={self.indent})"
        )


@lru_cache
def get_options() -> ResponseOptions:
    """Get the cached process-wide options built from settings."""
    return ResponseOptions.from_config(get_settings().response_config)


def resolve_options(options: ResponseOptions | None) -> ResponseOptions:
    """Return the given options, falling back to the process-wide ones."""
    return get_options() if options is None else options


def set_transformer(transformer: ResponseTransformer | TransformerFunc) -> None:
    """Install a transformer on the process-wide options."""
    get_options().set_transformer(transformer)


def reset_transformer() -> None:
    """Restore the default transformer on the process-wide options."""
    get_options().reset_transformer()


def set_default_content_type(content_type: str) -> None:
    """Set the default Content-Type on the process-wide options."""
    get_options().set_default_content_type(content_type)


def set_indent(flag: bool) -> None:  # noqa: FBT001 - mirrors a toggle
    """Toggle indented output on the process-wide options."""
    get_options().set_indent(flag)
