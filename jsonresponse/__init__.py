"""jsonresponse - JSON response helpers for HTTP servers.

Serialize any value to JSON, wrap it in a configurable envelope, set
headers and status codes, with one shortcut per standard HTTP status.

Typical use inside a FastAPI/Starlette handler:

    >>> recorder = ResponseRecorder()
    >>> Envelope(obj).with_header("X-Custom-Header", "this is cool").ok(recorder)
    >>> return recorder.to_response()

or simply ``return EnvelopeResponse(obj)`` from ``jsonresponse.api``.

Key components:
- **envelope**: the per-response value and its per-status shortcuts
- **transformers**: pluggable body shaping (default, passthrough, message+code)
- **options**: independently locked transformer, content type and indent
- **generic**: transformer-free emit path with a minimal message body
- **writer**: the response-writer protocol and the in-memory recorder
"""

from jsonresponse.core.exceptions import (
    ConfigurationError,
    JsonResponseError,
    SerializationError,
    TransformerError,
)
from jsonresponse.envelope import Envelope, empty, new
from jsonresponse.generic import MessageResponse, respond
from jsonresponse.options import (
    ResponseOptions,
    get_options,
    reset_transformer,
    set_default_content_type,
    set_indent,
    set_transformer,
)
from jsonresponse.transformers import (
    DefaultTransformer,
    FunctionTransformer,
    MessageCodeExcuseTransformer,
    MessageCodeTransformer,
    PassthroughTransformer,
    ResponseTransformer,
    TransformResult,
)
from jsonresponse.writer import ResponseRecorder, ResponseWriter

__all__ = [
    "ConfigurationError",
    "DefaultTransformer",
    "Envelope",
    "FunctionTransformer",
    "JsonResponseError",
    "MessageCodeExcuseTransformer",
    "MessageCodeTransformer",
    "MessageResponse",
    "PassthroughTransformer",
    "ResponseOptions",
    "ResponseRecorder",
    "ResponseTransformer",
    "ResponseWriter",
    "SerializationError",
    "TransformResult",
    "TransformerError",
    "empty",
    "get_options",
    "new",
    "reset_transformer",
    "respond",
    "set_default_content_type",
    "set_indent",
    "set_transformer",
]
