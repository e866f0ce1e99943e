"""
fdfgen - UTF-8 aware FDF (Forms Data Format) generator.

Fills PDF form fields from a plain mapping. Non-ASCII names and values are
written as UTF-16BE so viewers display them correctly.
"""

__version__ = "1.0.0"
__format_version__ = "1.2"

from fdfgen.spec import MAGIC, FORMAT_VERSION, HEADER, FOOTER
from fdfgen.errors import FDFError, InvalidInputError, InvalidPathError
from fdfgen.encoding import encode_scalar
from fdfgen.document import FDFDocument, FDFField
from fdfgen.writer import FDFWriter
from fdfgen.api import encode, generate_fdf, generate_fdf_buffer, write, generator
