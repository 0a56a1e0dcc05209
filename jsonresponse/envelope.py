"""Envelope builder: the per-response value sent through the transformer.

An ``Envelope`` holds the payload, explicit header overrides and an optional
programming excuse. It has value semantics: every ``with_*`` method returns
a new envelope and never touches the original.

Example:
    >>> recorder = ResponseRecorder()
    >>> Envelope({"id": 1}).with_header("X-Custom-Header", "yes").ok(recorder)
    >>> recorder.json()
    {'data': {'id': 1}}

A ``None`` payload is the explicit "no body" state: the transformer is
skipped and only headers and the status line are written, which is what
``Envelope.empty().no_content(writer)`` relies on.

One shortcut per status code (``ok``, ``created``, ``not_found``,
``teapot``...) is generated from ``jsonresponse.status.STATUS_METHODS``.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Self

from jsonresponse.core.types import Payload
from jsonresponse.excuses import random_excuse
from jsonresponse.options import ResponseOptions, resolve_options
from jsonresponse.pipeline import emit, resolve_headers
from jsonresponse.status import STATUS_METHODS, status_method_doc
from jsonresponse.transformers import apply_transformer
from jsonresponse.writer import ResponseWriter


@dataclass(frozen=True)
class Envelope:
    """Payload, header overrides and excuse of a single response.

    Envelopes compare by value but are unhashable, since payloads and
    headers are usually mutable containers.

    Attributes:
        payload: Any JSON-serializable value, ``None`` for no body.
        headers: Read-only header overrides, winning over transformer headers.
        excuse: Auxiliary message for transformers that surface it.
    """

    payload: Payload = None
    headers: Mapping[str, str] = field(default_factory=dict)
    excuse: str = ""

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def new(cls, payload: Payload) -> Self:
        """Create an envelope carrying the given payload."""
        return cls(payload)

    @classmethod
    def empty(cls) -> Self:
        """Create an envelope without payload, for body-less responses."""
        return cls()

    def with_header(self, key: str, value: str) -> Self:
        """Return a copy with one more header override.

        Args:
            key: Header name.
            value: Header value.

        Returns:
            Self: New envelope; the original keeps its headers.
        """
        return replace(self, headers={**self.headers, key: value})

    def with_headers(self, headers: Mapping[str, str]) -> Self:
        """Return a copy with several header overrides added."""
        return replace(self, headers={**self.headers, **headers})

    def with_excuse(self, excuse: str) -> Self:
        """Return a copy carrying the given excuse (empty string unsets it)."""
        return replace(self, excuse=excuse)

    def with_programming_excuse(self) -> Self:
        """Return a copy carrying a random programming excuse.

        Surfaced by the default transformer and by
        ``MessageCodeExcuseTransformer``; custom transformers must read
        ``excuse`` themselves.
        """
        return self.with_excuse(random_excuse())

    def respond(
        self,
        writer: ResponseWriter,
        status_code: int,
        options: ResponseOptions | None = None,
    ) -> None:
        """Transform, resolve headers, serialize and write this envelope.

        Args:
            writer: Destination response writer.
            status_code: Status to send; any integer is accepted.
            options: Options to use instead of the process-wide ones.

        Raises:
            SerializationError: If the transformed body is not serializable.
            TransformerError: If the transformer returns a malformed result.
        """
        opts = resolve_options(options)
        transformer_headers, body = apply_transformer(
            opts.transformer, self, status_code
        )
        headers = resolve_headers(
            transformer_headers, self.headers, opts.default_content_type
        )
        emit(writer, status_code, headers, body, indent=opts.indent)


def _status_method(name: str, status_code: int) -> Callable[..., None]:
    def method(
        self: Envelope,
        writer: ResponseWriter,
        options: ResponseOptions | None = None,
    ) -> None:
        self.respond(writer, status_code, options)

    method.__name__ = name
    method.__qualname__ = f"Envelope.{name}"
    method.__doc__ = status_method_doc(status_code)
    return method


for _name, _code in STATUS_METHODS.items():
    setattr(Envelope, _name, _status_method(_name, _code))
del _name, _code


def new(payload: Payload) -> Envelope:
    """Create an envelope carrying the given payload."""
    return Envelope(payload)


def empty() -> Envelope:
    """Create an envelope without payload."""
    return Envelope()
