"""Header resolution and emission of a transformed response.

Header precedence: explicit per-response overrides always win over headers
produced by the transformer, key by key; unrelated keys from both sources
are kept. When neither source sets Content-Type, the default one is added.
"""

from collections.abc import Mapping

from jsonresponse.core.constants import BODY_TERMINATOR, CONTENT_TYPE_HEADER
from jsonresponse.core.types import Headers, Payload
from jsonresponse.serialization import serialize
from jsonresponse.writer import ResponseWriter


def has_header(headers: Mapping[str, str], name: str) -> bool:
    """Check for a header name, ignoring case."""
    wanted = name.lower()
    return any(key.lower() == wanted for key in headers)


def resolve_headers(
    transformer_headers: Mapping[str, str],
    overrides: Mapping[str, str],
    default_content_type: str,
) -> Headers:
    """Merge transformer headers with explicit overrides.

    The default Content-Type is inserted whenever the merged set has none,
    even if it is the empty string. The generic emit path does not go
    through here and skips an empty default instead.

    Args:
        transformer_headers: Headers produced by the transformer.
        overrides: Headers set explicitly on the envelope.
        default_content_type: Fallback Content-Type value.

    Returns:
        Headers: The final header set.
    """
    headers: Headers = {**transformer_headers, **overrides}
    if not has_header(headers, CONTENT_TYPE_HEADER):
        headers[CONTENT_TYPE_HEADER] = default_content_type
    return headers


def emit(
    writer: ResponseWriter,
    status_code: int,
    headers: Mapping[str, str],
    body: Payload,
    *,
    indent: bool = False,
) -> None:
    """Write headers, status line and body to the writer, in that order.

    The body is serialized before anything is written, so a serialization
    failure leaves the writer untouched. A ``None`` body writes nothing
    after the status line.

    Args:
        writer: Destination response writer.
        status_code: Status to send, not validated.
        headers: Final headers.
        body: Value to serialize, or ``None`` for no body.
        indent: Serialize in tab-indented form.

    Raises:
        SerializationError: If the body cannot be represented as JSON.
    """
    payload = None if body is None else serialize(body, indent=indent)

    for name, value in headers.items():
        writer.headers[name] = value
    writer.write_header(status_code)

    if payload is not None:
        writer.write(payload + BODY_TERMINATOR)
