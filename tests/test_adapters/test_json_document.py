"""Tests for the dynamic JSON document reader."""

import pytest

from adapters.json_document import JsonDocument
from core.domain.errors import MalformedResponseError


@pytest.fixture
def doc():
    return JsonDocument.parse(
        '{"count": 5, "ratio": 0.5, "flag": true, "name": "x", "nested": {"inner": {"n": "7"}},'
        ' "items": [{"id": 1}, {"id": 2}], "nothing": null, "as_text": "true"}'
    )


class TestGetValue:
    """Tests for typed path access."""

    def test_scalars(self, doc):
        assert doc.get_value("count", int) == 5
        assert doc.get_value("flag", bool) is True
        assert doc.get_value("name", str) == "x"
        assert doc.get_value("ratio", float) == 0.5

    def test_dotted_path_and_coercion(self, doc):
        """Numeric strings coerce to int."""
        assert doc.get_value("nested.inner.n", int) == 7

    def test_list_path_with_index(self, doc):
        assert doc.get_value(["items", 1, "id"], int) == 2
        assert doc.get_value("items.0.id", int) == 1

    def test_missing_and_null_use_defaults(self, doc):
        assert doc.get_value("missing", int) == 0
        assert doc.get_value("nothing", bool) is False
        assert doc.get_value("nothing", str) is None
        assert doc.get_value("items.9.id", int) == 0

    def test_bool_from_text(self, doc):
        assert doc.get_value("as_text", bool) is True

    def test_str_from_number(self, doc):
        assert doc.get_value("count", str) == "5"

    def test_uncoercible_raises(self, doc):
        with pytest.raises(MalformedResponseError):
            doc.get_value("name", int)
        with pytest.raises(MalformedResponseError):
            doc.get_value("nested", str)
        with pytest.raises(MalformedResponseError):
            doc.get_value("flag", int)

    def test_digit_keys_on_objects(self):
        """All-digit segments still read object keys."""
        doc = JsonDocument({"1": 7, "nested": {"2": {"0": "x"}}})
        assert doc.get_value("1", int) == 7
        assert doc.get_value("nested.2.0", str) == "x"

    def test_non_digit_segment_on_array(self, doc):
        assert doc.get_value("items.first.id", int) == 0

    def test_sub_document(self, doc):
        inner = doc.get_value("nested", JsonDocument)
        assert inner.get_value("inner.n", str) == "7"


class TestNavigation:
    """Tests for sub-documents and arrays."""

    def test_get_returns_none_for_null(self, doc):
        assert doc.get("nothing") is None
        assert doc.get("missing") is None

    def test_array_access(self, doc):
        items = doc.get("items")
        assert items.is_array()
        assert len(items) == 2
        assert items[0].get_value("id", int) == 1

    def test_indexing_non_array_raises(self, doc):
        with pytest.raises(MalformedResponseError):
            doc.get("nested")[0]

    def test_scalar_document_is_truthy(self, doc):
        assert doc.get("name")


class TestParse:
    """Tests for JsonDocument.parse."""

    def test_invalid_json(self):
        with pytest.raises(MalformedResponseError):
            JsonDocument.parse("{not json")

    def test_require_object(self):
        with pytest.raises(MalformedResponseError):
            JsonDocument.parse("[1]").require_object()
        assert JsonDocument.parse("{}").require_object().is_object()
