"""Tests for the metadata value model and its serialization."""

from __future__ import annotations

import json
from datetime import UTC, datetime

from docmeta.metadata.base import (
    MetadataRecord,
    Timestamp,
    TypedValue,
    ValueKind,
    custom_properties_to_dict,
)


class TestTypedValue:
    """Tests for TypedValue."""

    def test_constructors_set_kind(self) -> None:
        assert TypedValue.text("a").kind is ValueKind.TEXT
        assert TypedValue.number(1).kind is ValueKind.NUMBER
        assert TypedValue.boolean(True).kind is ValueKind.BOOLEAN
        assert TypedValue.timestamp(datetime(2024, 1, 1)).kind is ValueKind.TIMESTAMP

    def test_kinds_never_compare_equal(self) -> None:
        assert TypedValue.boolean(True) != TypedValue.number(1)
        assert TypedValue.text("1") != TypedValue.number(1)

    def test_to_json(self) -> None:
        assert TypedValue.text("x").to_json() == "x"
        assert TypedValue.number(2.5).to_json() == 2.5
        assert TypedValue.boolean(False).to_json() is False
        stamp = TypedValue.timestamp(datetime(2024, 3, 1, 12, tzinfo=UTC))
        assert stamp.to_json() == "2024-03-01T12:00:00+00:00"


class TestTimestamp:
    """Tests for scalar Timestamp values."""

    def test_valid(self) -> None:
        ts = Timestamp("2024-01-01", datetime(2024, 1, 1))
        assert ts.is_valid
        assert ts.to_json() == "2024-01-01T00:00:00"

    def test_invalid_serializes_raw_text(self) -> None:
        ts = Timestamp("garbage")
        assert not ts.is_valid
        assert ts.to_json() == "garbage"


class TestMetadataRecord:
    """Tests for MetadataRecord."""

    def test_empty_record(self) -> None:
        record = MetadataRecord()
        assert record.is_empty()
        assert record.to_dict() == {}

    def test_to_dict_omits_absent_fields(self) -> None:
        record = MetadataRecord(title="T", last_modified_by="Editor")
        assert record.to_dict() == {"title": "T", "lastModifiedBy": "Editor"}

    def test_to_dict_full(self) -> None:
        record = MetadataRecord(
            title="T",
            author="A",
            description="D",
            subject="S",
            created=Timestamp("2024-01-15T10:30:00Z", datetime(2024, 1, 15, 10, 30, tzinfo=UTC)),
            modified=Timestamp("bad date"),
            custom_properties={"Count": TypedValue.number(3), "Flag": TypedValue.boolean(True)},
        )
        data = record.to_dict()
        assert data == {
            "title": "T",
            "author": "A",
            "description": "D",
            "subject": "S",
            "created": "2024-01-15T10:30:00+00:00",
            "modified": "bad date",
            "customProperties": {"Count": 3, "Flag": True},
        }
        json.dumps(data)

    def test_structural_equality(self) -> None:
        a = MetadataRecord(title="T", custom_properties={"k": TypedValue.text("v")})
        b = MetadataRecord(title="T", custom_properties={"k": TypedValue.text("v")})
        assert a == b
        assert a is not b


class TestCustomPropertiesToDict:
    def test_serializes_each_value(self) -> None:
        data = custom_properties_to_dict(
            {
                "Name": TypedValue.text("x"),
                "When": TypedValue.timestamp(datetime(2024, 1, 1, tzinfo=UTC)),
            }
        )
        assert data == {"Name": "x", "When": "2024-01-01T00:00:00+00:00"}
