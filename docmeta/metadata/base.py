"""Metadata value model.

All decoders produce these immutable value types. Records are created
fresh per decode call and compare structurally.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any


class ValueKind(enum.StrEnum):
    """Variant tag of a decoded custom property value."""

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class TypedValue:
    """A decoded property value tagged with its variant.

    Attributes:
        kind: Which variant is active.
        value: ``str`` for TEXT, ``int | float`` for NUMBER, ``bool`` for
            BOOLEAN, ``datetime`` for TIMESTAMP.
    """

    kind: ValueKind
    value: str | int | float | bool | datetime

    @classmethod
    def text(cls, value: str) -> TypedValue:
        return cls(ValueKind.TEXT, value)

    @classmethod
    def number(cls, value: int | float) -> TypedValue:
        return cls(ValueKind.NUMBER, value)

    @classmethod
    def boolean(cls, value: bool) -> TypedValue:
        return cls(ValueKind.BOOLEAN, value)

    @classmethod
    def timestamp(cls, value: datetime) -> TypedValue:
        return cls(ValueKind.TIMESTAMP, value)

    def to_json(self) -> str | int | float | bool:
        """Return a JSON-compatible rendering; timestamps become ISO 8601."""
        if isinstance(self.value, datetime):
            return self.value.isoformat()
        return self.value


@dataclass(frozen=True)
class Timestamp:
    """A created/modified timestamp as found in the document.

    ``value`` is None when ``raw`` is not a parseable calendar string. Such
    invalid timestamps are still carried in records unless strict timestamp
    handling is enabled.
    """

    raw: str
    value: datetime | None = None

    @property
    def is_valid(self) -> bool:
        return self.value is not None

    def to_json(self) -> str:
        return self.value.isoformat() if self.value is not None else self.raw


CustomPropertiesMap = dict[str, TypedValue]


def custom_properties_to_dict(properties: CustomPropertiesMap) -> dict[str, Any]:
    """Convert a typed property map to plain JSON-serializable values."""
    return {name: value.to_json() for name, value in properties.items()}


@dataclass(frozen=True)
class MetadataRecord:
    """Document metadata decoded from a single dialect.

    Attributes:
        title: Document title.
        author: Document creator.
        last_modified_by: Last editor (core properties only).
        description: Free-text description or comments.
        subject: Document subject.
        created: Creation timestamp.
        modified: Last modification timestamp.
        custom_properties: User-defined properties (ODF meta only), present
            only when at least one entry decoded.
    """

    title: str | None = None
    author: str | None = None
    last_modified_by: str | None = None
    description: str | None = None
    subject: str | None = None
    created: Timestamp | None = None
    modified: Timestamp | None = None
    custom_properties: CustomPropertiesMap | None = None

    def is_empty(self) -> bool:
        return self == MetadataRecord()

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary.

        Absent fields are omitted rather than emitted as null.
        """
        result: dict[str, Any] = {}
        for key, value in (
            ("title", self.title),
            ("author", self.author),
            ("lastModifiedBy", self.last_modified_by),
            ("description", self.description),
            ("subject", self.subject),
        ):
            if value is not None:
                result[key] = value
        if self.created is not None:
            result["created"] = self.created.to_json()
        if self.modified is not None:
            result["modified"] = self.modified.to_json()
        if self.custom_properties is not None:
            result["customProperties"] = custom_properties_to_dict(self.custom_properties)
        return result
