"""Pluggable transformers shaping a response body before serialization.

A transformer receives the caller's ``Envelope`` and the status code about
to be sent, and returns the headers it wants on the response together with
the body that will be serialized. Exactly one transformer is active per
``ResponseOptions``; swapping it affects every response emitted afterwards.

Shipped variants:
- **DefaultTransformer**: ``{"data": payload}`` plus the programming excuse
- **PassthroughTransformer**: the payload as-is
- **MessageCodeTransformer**: payload and status code under chosen names
- **MessageCodeExcuseTransformer**: same, plus the programming excuse
- **FunctionTransformer**: adapter for caller-supplied callables

Transformers are never called for an envelope without payload: an absent
payload means the caller wants to send no body at all.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, NamedTuple

from jsonresponse.core.config import ResponseConfig
from jsonresponse.core.constants import (
    DEFAULT_CODE_FIELD,
    DEFAULT_DATA_FIELD,
    PROGRAMMING_EXCUSE_FIELD,
)
from jsonresponse.core.exceptions import ConfigurationError, TransformerError
from jsonresponse.core.types import Headers, Payload

if TYPE_CHECKING:
    from jsonresponse.envelope import Envelope

type TransformerFunc = Callable[["Envelope", int], tuple[Mapping[str, str], Any]]


class TransformResult(NamedTuple):
    """Headers and body produced by a transformer."""

    headers: Headers
    body: Payload


class ResponseTransformer(ABC):
    """Something that can reshape a response body.

    Subclasses implement ``transform``. Instances are callable so they can
    be used anywhere a plain transformer function is expected.
    """

    @abstractmethod
    def transform(self, envelope: Envelope, status_code: int) -> TransformResult:
        """Reshape the envelope payload for the given status code.

        Args:
            envelope: The envelope as built by the caller.
            status_code: The HTTP status about to be sent.

        Returns:
            TransformResult: Fresh headers (may be empty) and the body.
        """

    def __call__(self, envelope: Envelope, status_code: int) -> TransformResult:
        return self.transform(envelope, status_code)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class DefaultTransformer(ResponseTransformer):
    """Wrap the payload under ``data``, adding the excuse when present."""

    def transform(self, envelope: Envelope, status_code: int) -> TransformResult:
        body: dict[str, Any] = {DEFAULT_DATA_FIELD: envelope.payload}
        if envelope.excuse:
            body[PROGRAMMING_EXCUSE_FIELD] = envelope.excuse
        return TransformResult({}, body)


class PassthroughTransformer(ResponseTransformer):
    """Return the payload unmodified."""

    def transform(self, envelope: Envelope, status_code: int) -> TransformResult:
        return TransformResult({}, envelope.payload)


class MessageCodeTransformer(ResponseTransformer):
    """Wrap the payload and the status code under two configurable fields.

    Args:
        data_field: Name of the field holding the payload.
        code_field: Name of the field holding the status code.
    """

    def __init__(
        self,
        data_field: str = DEFAULT_DATA_FIELD,
        code_field: str = DEFAULT_CODE_FIELD,
    ) -> None:
        self.data_field = data_field
        self.code_field = code_field

    def transform(self, envelope: Envelope, status_code: int) -> TransformResult:
        return TransformResult(
            {},
            {self.data_field: envelope.payload, self.code_field: status_code},
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(data_field={self.data_field!r}, "
            f"code_field={self.code_field!r})"
        )


class MessageCodeExcuseTransformer(MessageCodeTransformer):
    """Same as ``MessageCodeTransformer`` plus the programming excuse."""

    def transform(self, envelope: Envelope, status_code: int) -> TransformResult:
        result = super().transform(envelope, status_code)
        if envelope.excuse:
            result.body[PROGRAMMING_EXCUSE_FIELD] = envelope.excuse
        return result


class FunctionTransformer(ResponseTransformer):
    """Adapt a plain ``(envelope, status_code) -> (headers, body)`` callable.

    Args:
        func: The caller-supplied transformer function.
    """

    def __init__(self, func: TransformerFunc) -> None:
        self.func = func

    def transform(self, envelope: Envelope, status_code: int) -> TransformResult:
        return _to_result(self.func(envelope, status_code), self.func)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"{self.__class__.__name__}({name})"


def _to_result(result: object, source: object) -> TransformResult:
    """Validate a transformer result and copy its headers.

    Args:
        result: Whatever the transformer returned.
        source: The transformer, for error context.

    Returns:
        TransformResult: Fresh headers and the body.

    Raises:
        TransformerError: If the result is not a (headers, body) pair or the
            headers are not a mapping.
    """
    try:
        headers, body = result  # type: ignore[misc]
    except (TypeError, ValueError) as e:
        msg = "Transformer must return a (headers, body) pair"
        raise TransformerError(
            msg,
            context={
                "transformer": repr(source),
                "result_type": type(result).__name__,
            },
            cause=e,
        ) from e
    return TransformResult(_coerce_headers(headers, source), body)


def _coerce_headers(headers: object, source: object) -> Headers:
    """Copy transformer headers into a fresh dict, rejecting non-mappings."""
    if headers is None:
        return {}
    if not isinstance(headers, Mapping):
        msg = "Transformer headers must be a mapping"
        raise TransformerError(
            msg,
            context={
                "transformer": repr(source),
                "headers_type": type(headers).__name__,
            },
        )
    return {str(key): str(value) for key, value in headers.items()}


def as_transformer(
    candidate: ResponseTransformer | TransformerFunc,
) -> ResponseTransformer:
    """Turn a transformer or a plain callable into a ``ResponseTransformer``.

    Args:
        candidate: Transformer instance or callable.

    Returns:
        ResponseTransformer: The instance itself, or a ``FunctionTransformer``.

    Raises:
        TransformerError: If the candidate is not callable.
    """
    if isinstance(candidate, ResponseTransformer):
        return candidate
    if not callable(candidate):
        msg = f"Transformer must be callable, got {type(candidate).__name__}"
        raise TransformerError(msg, context={"transformer": repr(candidate)})
    return FunctionTransformer(candidate)


def apply_transformer(
    transformer: ResponseTransformer,
    envelope: Envelope,
    status_code: int,
) -> TransformResult:
    """Run the transformer unless the envelope carries no payload.

    Args:
        transformer: The active transformer.
        envelope: The envelope being emitted.
        status_code: The HTTP status about to be sent.

    Returns:
        TransformResult: Transformer output, or empty headers and no body
            when the payload is absent.

    Raises:
        TransformerError: If the transformer returns anything but a
            (headers, body) pair with mapping headers.
    """
    if envelope.payload is None:
        return TransformResult({}, None)
    return _to_result(transformer(envelope, status_code), transformer)


def transformer_from_config(config: ResponseConfig) -> ResponseTransformer:
    """Build the transformer named in the response configuration.

    Args:
        config: Response configuration section of the settings.

    Returns:
        ResponseTransformer: A new transformer instance.

    Raises:
        ConfigurationError: If the transformer name is unknown.
    """
    match config.transformer:
        case "default":
            return DefaultTransformer()
        case "passthrough":
            return PassthroughTransformer()
        case "message_code":
            return MessageCodeTransformer(config.data_field, config.code_field)
        case "message_code_excuse":
            return MessageCodeExcuseTransformer(config.data_field, config.code_field)
        case _:
            msg = f"Unknown transformer: {config.transformer}"
            raise ConfigurationError(msg, context={"transformer": config.transformer})
