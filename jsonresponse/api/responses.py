"""FastAPI response class running content through the envelope pipeline.

``EnvelopeResponse`` can be returned from handlers directly or installed as
the application's ``default_response_class``. Its content is wrapped in an
``Envelope``, transformed by the active transformer, serialized with orjson
(honouring the indent flag) and terminated by a newline, exactly as
``Envelope.respond`` would write it.
"""

from collections.abc import Mapping
from typing import Any

from starlette.background import BackgroundTask
from starlette.responses import Response

from jsonresponse.core.constants import CONTENT_TYPE_HEADER
from jsonresponse.envelope import Envelope
from jsonresponse.options import ResponseOptions
from jsonresponse.pipeline import has_header
from jsonresponse.writer import ResponseRecorder


class EnvelopeResponse(Response):
    """Starlette/FastAPI response wrapping its content in an envelope.

    A ``None`` content produces a response without body. Headers passed to
    the constructor are envelope overrides and win over transformer headers.

    Attributes:
        media_type: Advertised media type (for OpenAPI); the actual
            Content-Type header comes from the response options.
    """

    media_type = "application/json"

    def __init__(
        self,
        content: Any = None,  # noqa: ANN401 - accepts any JSON-serializable content
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
        *,
        excuse: str = "",
        options: ResponseOptions | None = None,
    ) -> None:
        overrides = dict(headers or {})
        if media_type is not None and not has_header(overrides, CONTENT_TYPE_HEADER):
            overrides[CONTENT_TYPE_HEADER] = media_type

        recorder = ResponseRecorder()
        Envelope(content, overrides, excuse).respond(recorder, status_code, options)

        super().__init__(
            content=bytes(recorder.body),
            status_code=status_code,
            headers=dict(recorder.headers),
            background=background,
        )
