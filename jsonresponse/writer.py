"""Response writers: the handle emit operations write to.

A ``ResponseWriter`` receives, in this fixed order, a series of header sets,
one status line (``write_header``) and optionally one body (``write``).
Host frameworks adapt their own response objects to this protocol.

``ResponseRecorder`` is the in-memory implementation. It records what was
written and converts the result into a Starlette ``Response`` for FastAPI
handlers, and doubles as the inspection tool in tests.
"""

from collections.abc import MutableMapping
from http import HTTPStatus
from typing import Any, Protocol, runtime_checkable

import orjson
from loguru import logger
from starlette.datastructures import MutableHeaders
from starlette.responses import Response


@runtime_checkable
class ResponseWriter(Protocol):
    """Minimal interface of an HTTP response being built."""

    @property
    def headers(self) -> MutableMapping[str, str]:
        """Response headers, set before the status line is written."""
        ...

    def write_header(self, status_code: int) -> None:
        """Write the status line."""
        ...

    def write(self, data: bytes) -> int:
        """Write body bytes, returning the number of bytes written."""
        ...


class ResponseRecorder:
    """In-memory ``ResponseWriter`` recording status, headers and body.

    Writing the body before the status line implies ``200 OK``. The status
    line can only be written once; later calls are ignored with a warning.

    Attributes:
        headers: Case-insensitive response headers.
        status_code: Recorded status, ``None`` until written.
        body: Accumulated body bytes.
    """

    def __init__(self) -> None:
        self.headers: MutableHeaders = MutableHeaders()
        self.status_code: int | None = None
        self.body = bytearray()
        self.wrote_header = False

    def write_header(self, status_code: int) -> None:
        """Record the status line.

        Args:
            status_code: Status to record, passed through unvalidated.
        """
        if self.wrote_header:
            logger.warning(
                "Superfluous write_header call with status {} (already {})",
                status_code,
                self.status_code,
            )
            return
        self.status_code = status_code
        self.wrote_header = True

    def write(self, data: bytes) -> int:
        """Append body bytes.

        Args:
            data: Bytes to append.

        Returns:
            int: Number of bytes written.
        """
        if not self.wrote_header:
            self.write_header(HTTPStatus.OK)
        self.body.extend(data)
        return len(data)

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8")

    def json(self) -> Any:  # noqa: ANN401 - decoded JSON can be any value
        """Decode the recorded body as JSON.

        Returns:
            Any: The decoded value.
        """
        return orjson.loads(self.body)

    def to_response(self) -> Response:
        """Build a Starlette response from what was recorded.

        Returns:
            Response: Response carrying the recorded status, headers and body.
        """
        return Response(
            content=bytes(self.body),
            status_code=self.status_code or HTTPStatus.OK,
            headers=dict(self.headers),
        )
