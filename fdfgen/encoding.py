"""
FDF Scalar Encoding - Turn one field name or value into literal-string bytes.

Steps, in order:
  1. Coerce to text (None -> "", True -> "true", 3.0 -> "3", ...)
  2. Escape \\ then ( and ) so the text can sit between parentheses
  3. ASCII text is written as-is, everything else as FE FF + UTF-16BE

Escaping only ever adds ASCII backslashes, so classifying after escaping
gives the same answer as classifying before.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from fdfgen.spec import UTF16BE_BOM


def to_text(value: Any) -> str:
    """Coerce a field name or value to its canonical text form. Never raises."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool before int: True is an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float_to_text(value)
    return str(value)


def _float_to_text(value: float) -> str:
    """Format a float the way JavaScript's String(number) does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    sign = "-" if value < 0 else ""
    # repr gives the shortest round-tripping digits
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    k = len(digits)
    n = exponent + k  # position of the decimal point

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits
    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def escape(text: str) -> str:
    """Backslash-escape the characters that delimit a PDF literal string."""
    return (
        text.replace("\\", "\\\\")
        .replace("(", "\\(")
        .replace(")", "\\)")
    )


def is_ascii(text: str) -> bool:
    return text.isascii()


def encode_utf16be(text: str) -> bytes:
    """
    Encode text as a PDF UTF-16BE text string: BOM + big-endian code units.

    Characters outside the BMP become surrogate pairs. A lone surrogate is
    written as its own code unit rather than rejected.
    """
    return UTF16BE_BOM + text.encode("utf-16-be", "surrogatepass")


def encode_scalar(value: Any) -> bytes:
    """Encode one name or value for placement between ( and ) in a field record."""
    text = escape(to_text(value))
    if is_ascii(text):
        return text.encode("ascii")
    return encode_utf16be(text)
