"""
FDF API - Entry points for turning a mapping into an FDF document.

    data = encode({"name": "José García", "city": "東京"})
    write({"name": "John"}, "form.fdf")
    await generator({"name": "John"}, "form.fdf")

``encode``, ``generate_fdf`` and ``generate_fdf_buffer`` are the same pure
function under the names callers know it by.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from fdfgen.document import FDFDocument
from fdfgen.writer import FDFWriter, validate_path, write_bytes

logger = logging.getLogger(__name__)


def encode(data: Mapping[Any, Any]) -> bytes:
    """
    Encode a name -> value mapping as an FDF document.

    Raises InvalidInputError if ``data`` is None or not a mapping.
    """
    return FDFWriter.serialize(FDFDocument.from_mapping(data))


generate_fdf = encode


def generate_fdf_buffer(data: Mapping[Any, Any]) -> bytes:
    """Return the FDF document for ``data`` without touching the filesystem."""
    return encode(data)


def write(data: Mapping[Any, Any], path: str | Path) -> int:
    """
    Encode ``data`` and write it to ``path``. Returns bytes written.

    Both arguments are validated before any I/O. OSError from the write
    propagates unchanged.
    """
    buffer = encode(data)
    target = validate_path(path)
    return write_bytes(target, buffer)


async def generator(data: Mapping[Any, Any], path: str | Path) -> None:
    """
    Async variant of :func:`write`. The blocking write runs in a worker thread.

    One write per call, no retry.
    """
    buffer = encode(data)
    target = validate_path(path)
    logger.debug("Writing %d fields to %s", len(data), target)
    await asyncio.to_thread(write_bytes, target, buffer)
