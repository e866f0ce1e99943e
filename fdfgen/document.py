"""
FDF Document - In-memory representation of the form data to export.

A document is an ordered list of fields. Order is preserved exactly and
duplicate names are kept as separate fields, so a document can express
things a plain mapping cannot.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from fdfgen.errors import InvalidInputError


@dataclass
class FDFField:
    """A single form field: raw name and raw value, not yet encoded."""

    name: Any
    value: Any = None


def ensure_mapping(data: Any) -> Mapping:
    """Return ``data`` if it is a mapping, otherwise raise InvalidInputError."""
    if data is None or not isinstance(data, Mapping):
        raise InvalidInputError()
    return data


class FDFDocument:
    """
    Ordered collection of form fields.

    Usage:
        doc = FDFDocument.from_mapping({"name": "José", "age": 42})
        doc.add_field("name", "Second José")  # duplicates are allowed
        data = doc.to_bytes()
        doc.write("out.fdf")
    """

    def __init__(self, fields: list[FDFField] | None = None) -> None:
        self.fields: list[FDFField] = list(fields) if fields else []

    @classmethod
    def from_mapping(cls, data: Mapping) -> FDFDocument:
        """Build a document from a mapping, keeping its iteration order."""
        data = ensure_mapping(data)
        return cls([FDFField(name, value) for name, value in data.items()])

    def add_field(self, name: Any, value: Any = None) -> FDFField:
        field = FDFField(name=name, value=value)
        self.fields.append(field)
        return field

    def get_field(self, name: Any) -> FDFField | None:
        """Get the first field with the given name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def get_fields(self, name: Any) -> list[FDFField]:
        """Get all fields with the given name."""
        return [f for f in self.fields if f.name == name]

    @property
    def field_names(self) -> list[Any]:
        return [f.name for f in self.fields]

    def to_dict(self) -> dict[Any, Any]:
        """Flatten to a dict. The last value wins for duplicate names."""
        return {f.name: f.value for f in self.fields}

    def to_bytes(self) -> bytes:
        from fdfgen.writer import FDFWriter
        return FDFWriter.serialize(self)

    def write(self, path: str | Path) -> int:
        """Write to disk. Returns bytes written."""
        from fdfgen.writer import FDFWriter
        return FDFWriter.write(self, path)

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[FDFField]:
        return iter(self.fields)

    def __repr__(self) -> str:
        names = ", ".join(str(n) for n in self.field_names)
        return f"FDFDocument(fields=[{names}])"
