"""Unit tests for the response writer protocol and recorder."""

import pytest
from pytest_mock import MockerFixture

from jsonresponse.writer import ResponseRecorder, ResponseWriter


@pytest.mark.unit
class TestResponseRecorder:
    """Test the in-memory writer."""

    def test_initial_state(self, recorder: ResponseRecorder) -> None:
        """Test a new recorder holds nothing."""
        assert recorder.status_code is None
        assert recorder.body == b""
        assert len(recorder.headers) == 0
        assert recorder.wrote_header is False

    def test_satisfies_protocol(self, recorder: ResponseRecorder) -> None:
        """Test the recorder is a ResponseWriter."""
        assert isinstance(recorder, ResponseWriter)

    def test_write_header_once(
        self, recorder: ResponseRecorder, mocker: MockerFixture
    ) -> None:
        """Test later status lines are ignored with a warning."""
        mock_logger = mocker.patch("jsonresponse.writer.logger")

        recorder.write_header(201)
        recorder.write_header(500)

        assert recorder.status_code == 201
        mock_logger.warning.assert_called_once()

    def test_write_implies_ok(self, recorder: ResponseRecorder) -> None:
        """Test writing a body first records 200."""
        written = recorder.write(b"hello")

        assert written == 5
        assert recorder.status_code == 200
        assert recorder.text == "hello"

    def test_write_accumulates(self, recorder: ResponseRecorder) -> None:
        """Test successive writes are concatenated."""
        recorder.write_header(200)
        recorder.write(b'{"a":')
        recorder.write(b"1}")

        assert recorder.json() == {"a": 1}

    def test_headers_case_insensitive(self, recorder: ResponseRecorder) -> None:
        """Test header lookups ignore case."""
        recorder.headers["X-Custom"] = "yes"
        assert recorder.headers["x-custom"] == "yes"

    def test_to_response(self, recorder: ResponseRecorder) -> None:
        """Test conversion into a Starlette response."""
        recorder.headers["Content-Type"] = "application/json"
        recorder.headers["X-Custom"] = "yes"
        recorder.write_header(202)
        recorder.write(b"[]\n")

        response = recorder.to_response()

        assert response.status_code == 202
        assert response.body == b"[]\n"
        assert response.headers["content-type"] == "application/json"
        assert response.headers["x-custom"] == "yes"
        assert response.headers["content-length"] == "3"

    def test_to_response_defaults_to_ok(self, recorder: ResponseRecorder) -> None:
        """Test an unwritten recorder converts into an empty 200."""
        response = recorder.to_response()

        assert response.status_code == 200
        assert response.body == b""
