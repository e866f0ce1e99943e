"""
FDF Format Specification (Forms Data Format 1.2)
================================================

Layout:
    %FDF-1.2                     <- Magic line (format + version)
    <E2 E3 CF D3>                <- Binary marker (tells tools the file is not plain text)
    1 0 obj                      <- The single indirect object carrying the form data
    <<
    /FDF
    <<
    /Fields [
    <<                           <- One field record per entry
    /T (<name>)
    /V (<value>)
    >>
    ...
    ]
    >>
    >>
    endobj
    trailer

    <<
    /Root 1 0 R
    >>
    %%EOF                        <- EOF marker

Design Decisions:
    - Names and values are PDF literal strings: \\, ( and ) are backslash-escaped
    - ASCII text is written byte-for-byte
    - Anything else is UTF-16BE with a FE FF byte-order mark (PDF text string rules)
    - Header and footer never change, so they are built once at import
"""

from __future__ import annotations

import codecs
from pathlib import Path

# Magic bytes - first line of every .fdf file
MAGIC = "%FDF"
EOF_MARKER = "%%EOF"

# Format version
FORMAT_VERSION = "1.2"

# Four high-bit bytes on the second line (latin-1 "âãÏÓ")
BINARY_MARKER = bytes([0xE2, 0xE3, 0xCF, 0xD3])

# Prefix for UTF-16BE encoded strings
UTF16BE_BOM = codecs.BOM_UTF16_BE

# File extension
EXTENSION = ".fdf"

# Max magic line scan (for fast identification)
MAX_MAGIC_SCAN_BYTES = 16

HEADER = b"".join([
    f"{MAGIC}-{FORMAT_VERSION}\n".encode("ascii"),
    BINARY_MARKER + b"\n",
    b"1 0 obj \n",
    b"<<\n",
    b"/FDF \n",
    b"<<\n",
    b"/Fields [\n",
])

FOOTER = b"".join([
    b"]\n",
    b">>\n",
    b">>\n",
    b"endobj \n",
    b"trailer\n",
    b"\n",
    b"<<\n",
    b"/Root 1 0 R\n",
    b">>\n",
    f"{EOF_MARKER}\n".encode("ascii"),
])

# Field record framing
FIELD_OPEN = b"<<\n"
NAME_OPEN = b"/T ("
VALUE_OPEN = b")\n/V ("
FIELD_CLOSE = b")\n>>\n"


def is_fdf_bytes(data: bytes) -> bool:
    """Fast check if bytes look like an FDF document."""
    return data[:len(MAGIC)] == MAGIC.encode("ascii")


def is_fdf(path: str | Path) -> bool:
    """Fast check if a file is FDF. Reads only the first few bytes."""
    with open(path, "rb") as f:
        head = f.read(MAX_MAGIC_SCAN_BYTES)
    return is_fdf_bytes(head)
