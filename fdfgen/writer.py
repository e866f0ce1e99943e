"""
FDF Writer - Serializes FDFDocument to bytes.

Every field becomes one record:

    <<
    /T (<encoded name>)
    /V (<encoded value>)
    >>

Records are concatenated with no separator and wrapped between the fixed
HEADER and FOOTER.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from fdfgen.document import FDFDocument, FDFField
from fdfgen.encoding import encode_scalar
from fdfgen.errors import InvalidPathError
from fdfgen.spec import HEADER, FOOTER, FIELD_OPEN, NAME_OPEN, VALUE_OPEN, FIELD_CLOSE

logger = logging.getLogger(__name__)


def validate_path(path: Any) -> str:
    """Return ``path`` as a string, or raise InvalidPathError if it is not usable."""
    if isinstance(path, os.PathLike):
        path = os.fspath(path)
    if not isinstance(path, str) or not path:
        raise InvalidPathError()
    return path


def write_bytes(path: str, data: bytes) -> int:
    """Create or truncate ``path`` and write ``data`` in one go."""
    with open(path, "wb") as f:
        f.write(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)


class FDFWriter:
    """Serializes FDFDocument to the FDF binary format."""

    @staticmethod
    def serialize_field(field: FDFField) -> bytes:
        return b"".join([
            FIELD_OPEN,
            NAME_OPEN,
            encode_scalar(field.name),
            VALUE_OPEN,
            encode_scalar(field.value),
            FIELD_CLOSE,
        ])

    @classmethod
    def serialize(cls, doc: FDFDocument) -> bytes:
        """Serialize a document to bytes: header, one record per field, footer."""
        body = b"".join(cls.serialize_field(f) for f in doc.fields)
        return HEADER + body + FOOTER

    @classmethod
    def write(cls, doc: FDFDocument, path: str | Path) -> int:
        """Write document to disk. Returns bytes written."""
        target = validate_path(path)
        return write_bytes(target, cls.serialize(doc))
