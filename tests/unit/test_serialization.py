"""Unit tests for JSON serialization of response bodies."""

import datetime
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any

import orjson
import pytest
from pydantic import BaseModel
from pytest_mock import MockerFixture

from jsonresponse.core.exceptions import SerializationError, Severity
from jsonresponse.serialization import serialize


class Color(Enum):
    """Sample enum."""

    RED = "red"


@dataclass
class Point:
    """Sample dataclass."""

    x: int
    y: int


@dataclass
class Measurement:
    """Sample dataclass holding a float."""

    value: float


class Tag(BaseModel):
    """Sample nested model."""

    label: str


@pytest.mark.unit
class TestCompactSerialization:
    """Test the default compact form."""

    def test_compact_output(self) -> None:
        """Test no whitespace is emitted."""
        assert serialize({"a": [1, 2], "b": None}) == b'{"a":[1,2],"b":null}'

    def test_keys_sorted(self) -> None:
        """Test dict keys come out sorted."""
        assert serialize({"b": 1, "a": 2}) == b'{"a":2,"b":1}'

    def test_no_trailing_newline(self) -> None:
        """Test the terminator is left to the emitter."""
        assert not serialize("x").endswith(b"\n")

    def test_sample_payloads_decode(self, sample_payloads: list[Any]) -> None:
        """Test every sample payload survives serialization."""
        for payload in sample_payloads:
            assert orjson.loads(serialize(payload)) == payload

    def test_unicode_is_kept(self) -> None:
        """Test non-ASCII text is written as UTF-8."""
        assert serialize("café") == '"café"'.encode()

    def test_native_types(self) -> None:
        """Test types orjson handles natively."""
        value = {
            "when": datetime.datetime(2024, 1, 2, 3, 4, 5, tzinfo=datetime.UTC),
            "id": uuid.UUID("12345678-1234-5678-1234-567812345678"),
            "color": Color.RED,
            "point": Point(1, 2),
        }

        assert orjson.loads(serialize(value)) == {
            "when": "2024-01-02T03:04:05+00:00",
            "id": "12345678-1234-5678-1234-567812345678",
            "color": "red",
            "point": {"x": 1, "y": 2},
        }

    def test_non_string_keys(self) -> None:
        """Test int keys are written as strings."""
        assert serialize({1: "a"}) == b'{"1":"a"}'
        assert orjson.loads(serialize({"data": {2: "b", 1: "a"}})) == {
            "data": {"1": "a", "2": "b"}
        }

    def test_non_string_keys_sorted(self) -> None:
        """Test stringified keys are sorted with the rest."""
        assert serialize({2: "b", 1: "a"}) == b'{"1":"a","2":"b"}'

    def test_top_level_model(self, invoice: BaseModel) -> None:
        """Test Pydantic models are dumped."""
        assert orjson.loads(serialize(invoice)) == {
            "number": "INV-1",
            "total": 99.5,
            "paid": True,
        }

    def test_nested_models(self) -> None:
        """Test models nested inside containers are dumped."""
        value = {"data": [Tag(label="a"), Tag(label="b")]}
        assert serialize(value) == b'{"data":[{"label":"a"},{"label":"b"}]}'


@pytest.mark.unit
class TestIndentedSerialization:
    """Test the tab-indented form."""

    def test_tab_indentation(self) -> None:
        """Test one tab per nesting level."""
        assert serialize({"a": {"b": [1]}}, indent=True) == (
            b'{\n\t"a": {\n\t\t"b": [\n\t\t\t1\n\t\t]\n\t}\n}'
        )

    def test_scalar_has_no_indentation(self) -> None:
        """Test scalars render identically in both forms."""
        assert serialize(5, indent=True) == b"5"

    def test_spaces_inside_strings_untouched(self) -> None:
        """Test only structural indentation is converted."""
        rendered = serialize({"text": "  two leading spaces"}, indent=True)
        assert b'"  two leading spaces"' in rendered

    def test_same_value_as_compact(self, sample_payloads: list[Any]) -> None:
        """Test both forms decode to the same value."""
        for payload in sample_payloads:
            compact = orjson.loads(serialize(payload))
            indented = orjson.loads(serialize(payload, indent=True))
            assert compact == indented


@pytest.mark.unit
class TestSerializationErrors:
    """Test failures raise SerializationError."""

    @pytest.mark.parametrize(
        "content",
        [{1, 2}, object(), {"nested": {"bad": b"bytes"}}, 2**70],
        ids=["set", "object", "bytes", "big-int"],
    )
    def test_unserializable(self, content: object) -> None:
        """Test unsupported values raise with context."""
        with pytest.raises(SerializationError) as exc_info:
            serialize(content)

        error = exc_info.value
        assert error.error_code == "SERIALIZATION_ERROR"
        assert error.severity == Severity.CRITICAL
        assert error.context["body_type"] == type(content).__name__
        assert isinstance(error.__cause__, orjson.JSONEncodeError)

    @pytest.mark.parametrize(
        "content",
        [
            float("nan"),
            {"data": float("inf")},
            {"data": {"x": float("-inf")}},
            [1.0, [2.0, float("nan")]],
            (float("inf"),),
            {float("nan"): "key"},
            Measurement(float("nan")),
        ],
        ids=["nan", "inf", "nested-neg-inf", "list", "tuple", "key", "dataclass"],
    )
    def test_non_finite_floats_rejected(self, content: object) -> None:
        """Test NaN and infinities fail instead of being written as null."""
        with pytest.raises(SerializationError, match="not JSON compliant"):
            serialize(content)

    def test_non_finite_float_in_model(self) -> None:
        """Test non-finite floats inside Pydantic models are rejected."""

        class Reading(BaseModel):
            value: float

        with pytest.raises(SerializationError):
            serialize({"readings": [Reading(value=1.0), Reading(value=float("nan"))]})

    def test_finite_floats_accepted(self) -> None:
        """Test ordinary floats, including zero and extremes, still encode."""
        assert orjson.loads(serialize([0.0, -1.5, 1e308])) == [0.0, -1.5, 1e308]

    def test_cyclic_structure(self) -> None:
        """Test cyclic structures are rejected."""
        cyclic: dict[str, Any] = {}
        cyclic["self"] = cyclic

        with pytest.raises(SerializationError):
            serialize(cyclic)

    def test_failure_logged(self, mocker: MockerFixture) -> None:
        """Test failures are logged at error level."""
        mock_logger = mocker.patch("jsonresponse.serialization.logger")

        with pytest.raises(SerializationError):
            serialize({1})

        mock_logger.error.assert_called_once()
