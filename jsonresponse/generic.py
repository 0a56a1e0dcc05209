"""Generic emit path that bypasses the transformer.

``respond(writer, status_code, value)`` serializes ``value`` directly. When
no value is given, a ``MessageResponse`` carrying the status code and its
reason phrase is sent instead, which makes this path convenient for error
responses:

    >>> not_found(writer)
    # body: {"code":404,"message":"Not Found"}

Header handling differs from the envelope path on purpose: the default
Content-Type is only set when the writer has none yet and the default is
not empty. No header merging takes place.

One function per status code (``ok``, ``created``, ``not_found``...) is
generated from ``jsonresponse.status.STATUS_METHODS``.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

from jsonresponse.core.constants import BODY_TERMINATOR, CONTENT_TYPE_HEADER
from jsonresponse.options import ResponseOptions, resolve_options
from jsonresponse.pipeline import has_header
from jsonresponse.serialization import serialize
from jsonresponse.status import STATUS_METHODS, status_method_doc, status_text
from jsonresponse.writer import ResponseWriter


class MessageResponse(BaseModel):
    """Minimal message value sent by the generic emit path.

    Zero ``code`` and empty ``message`` are left out of the serialized form.
    """

    code: int = Field(default=0, description="HTTP status code")
    message: str = Field(default="", description="Human-readable message")

    @model_serializer(mode="wrap")
    def omit_empty(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        return {key: value for key, value in data.items() if value not in (0, "")}


def _with_defaults(message: MessageResponse, status_code: int) -> MessageResponse:
    """Fill an unset code or message from the status code."""
    updates: dict[str, Any] = {}
    if message.code == 0:
        updates["code"] = status_code
    if not message.message:
        updates["message"] = status_text(status_code)
    return message.model_copy(update=updates) if updates else message


def respond(
    writer: ResponseWriter,
    status_code: int,
    value: Any = None,  # noqa: ANN401 - any JSON-serializable value
    options: ResponseOptions | None = None,
) -> None:
    """Serialize a value directly and write it with the given status.

    Args:
        writer: Destination response writer.
        status_code: Status to send; any integer is accepted.
        value: Value to send. ``None`` sends a ``MessageResponse``.
        options: Options to use instead of the process-wide ones.

    Raises:
        SerializationError: If the value cannot be represented as JSON.
    """
    opts = resolve_options(options)

    if value is None:
        value = MessageResponse()
    if isinstance(value, MessageResponse):
        value = _with_defaults(value, status_code)

    payload = serialize(value, indent=opts.indent)

    content_type = opts.default_content_type
    if content_type and not has_header(writer.headers, CONTENT_TYPE_HEADER):
        writer.headers[CONTENT_TYPE_HEADER] = content_type
    writer.write_header(status_code)
    writer.write(payload + BODY_TERMINATOR)


def _status_function(name: str, status_code: int) -> Callable[..., None]:
    def function(
        writer: ResponseWriter,
        value: Any = None,  # noqa: ANN401 - any JSON-serializable value
        options: ResponseOptions | None = None,
    ) -> None:
        respond(writer, status_code, value, options)

    function.__name__ = name
    function.__qualname__ = name
    function.__doc__ = status_method_doc(status_code)
    return function


for _name, _code in STATUS_METHODS.items():
    globals()[_name] = _status_function(_name, _code)
del _name, _code

__all__ = ["MessageResponse", "respond", *STATUS_METHODS]
