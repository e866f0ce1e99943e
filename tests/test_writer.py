"""
Writer Tests - Document layout, field records, and whole-document properties.
"""

import tempfile
from pathlib import Path

import pytest

from fdfgen.document import FDFDocument, FDFField
from fdfgen.errors import InvalidInputError, InvalidPathError
from fdfgen.api import encode, generate_fdf, generate_fdf_buffer
from fdfgen.spec import HEADER, FOOTER, UTF16BE_BOM, BINARY_MARKER
from fdfgen.writer import FDFWriter, validate_path


def record(name: bytes, value: bytes) -> bytes:
    return b"<<\n/T (" + name + b")\n/V (" + value + b")\n>>\n"


# =============================================================================
# FDFWriter
# =============================================================================

class TestFDFWriter:

    def test_serialize_field(self):
        assert FDFWriter.serialize_field(FDFField("a", "b")) == record(b"a", b"b")

    def test_serialize_empty(self):
        assert FDFWriter.serialize(FDFDocument()) == HEADER + FOOTER

    def test_serialize_records_in_order(self):
        doc = FDFDocument.from_mapping({"field1": "value1", "field2": "value2"})
        assert FDFWriter.serialize(doc) == (
            HEADER + record(b"field1", b"value1") + record(b"field2", b"value2") + FOOTER
        )

    def test_duplicate_names_emitted_twice(self):
        doc = FDFDocument()
        doc.add_field("name", "a")
        doc.add_field("name", "b")
        data = FDFWriter.serialize(doc)
        assert data.count(b"/T (") == 2
        assert record(b"name", b"a") + record(b"name", b"b") in data

    def test_write_returns_size(self):
        doc = FDFDocument.from_mapping({"x": "y"})
        with tempfile.NamedTemporaryFile(suffix=".fdf", delete=False) as f:
            path = f.name
        written = doc.write(path)
        assert written == len(doc.to_bytes())
        assert Path(path).read_bytes() == doc.to_bytes()
        Path(path).unlink()

    def test_write_rejects_bad_path(self):
        with pytest.raises(InvalidPathError):
            FDFWriter.write(FDFDocument(), "")


class TestValidatePath:

    def test_accepts_str(self):
        assert validate_path("out.fdf") == "out.fdf"

    def test_accepts_pathlike(self):
        assert validate_path(Path("out.fdf")) == "out.fdf"

    @pytest.mark.parametrize("bad", [None, "", 123, b"out.fdf", ["out.fdf"]])
    def test_rejects(self, bad):
        with pytest.raises(InvalidPathError):
            validate_path(bad)


# =============================================================================
# encode / generate_fdf / generate_fdf_buffer
# =============================================================================

class TestEncode:

    def test_valid_structure(self):
        content = encode({"field1": "value1"})
        assert content.startswith(b"%FDF-1.2")
        assert b"/Fields [" in content
        assert b"/T (" in content
        assert b"/V (" in content
        assert content.endswith(b"%%EOF\n")

    def test_empty_mapping_is_skeleton(self):
        assert encode({}) == HEADER + FOOTER

    def test_binary_marker_present(self):
        assert BINARY_MARKER in encode({"test": "value"})

    def test_footer_structure(self):
        content = encode({"test": "value"})
        assert b"endobj" in content
        assert b"trailer" in content
        assert b"/Root 1 0 R" in content

    def test_field_count(self):
        data = {f"field{i}": f"value{i}" for i in range(100)}
        assert encode(data).count(b"/T (") == 100

    def test_preserves_insertion_order(self):
        content = encode({"zeta": 1, "alpha": 2, "mid": 3})
        assert content.index(b"(zeta)") < content.index(b"(alpha)") < content.index(b"(mid)")

    def test_aliases_agree(self):
        data = {"field1": "value1", "field2": "ñoño"}
        assert generate_fdf(data) == generate_fdf_buffer(data) == encode(data)

    def test_pure(self):
        data = {"a": "x", "b": "ü", "c": None}
        assert encode(data) == encode(dict(data))

    @pytest.mark.parametrize("bad", [None, "x", 42, ["a"], ("a", "b")])
    def test_rejects_non_mapping(self, bad):
        with pytest.raises(InvalidInputError, match="Data must be a non-null object"):
            encode(bad)

    def test_empty_value(self):
        assert b"/V ()" in encode({"emptyField": ""})

    def test_none_value(self):
        assert record(b"nullField", b"") in encode({"nullField": None})

    def test_numbers_and_booleans(self):
        content = encode({"age": 42, "active": True, "disabled": False})
        assert record(b"age", b"42") in content
        assert record(b"active", b"true") in content
        assert record(b"disabled", b"false") in content

    def test_long_name_and_value(self):
        content = encode({"a" * 1000: "x" * 10000})
        assert record(b"a" * 1000, b"x" * 10000) in content


# =============================================================================
# Escaping inside documents
# =============================================================================

class TestEscaping:

    def test_parens_in_value(self):
        content = encode({"note": "test (with parens)"})
        assert record(b"note", b"test \\(with parens\\)") in content

    def test_backslashes_in_value(self):
        content = encode({"path": "C:\\Users\\test"})
        assert record(b"path", b"C:\\\\Users\\\\test") in content

    def test_complex_value(self):
        content = encode({"complex": "test\\path\\to\\(file).txt"})
        assert record(b"complex", b"test\\\\path\\\\to\\\\\\(file\\).txt") in content

    def test_parens_in_name(self):
        content = encode({"field(1)": "value"})
        assert record(b"field\\(1\\)", b"value") in content


# =============================================================================
# Unicode / UTF-16BE
# =============================================================================

class TestUnicode:

    def test_ascii_has_no_bom(self):
        content = encode({"name": "John Doe", "note": "a (b) \\ c"})
        assert UTF16BE_BOM not in content

    def test_one_bom_per_unicode_value(self):
        content = encode({"city": "東京", "greeting": "こんにちは"})
        assert content.count(UTF16BE_BOM) == 2

    def test_unicode_name_and_value(self):
        content = encode({"ciudad": "México", "número": "5"})
        assert content.count(UTF16BE_BOM) == 2

    def test_jose_garcia_tokyo(self):
        content = encode({"name": "José García", "city": "東京"})
        assert content.count(UTF16BE_BOM) == 2
        assert b"/T (name)" in content
        assert record(b"name", UTF16BE_BOM + "José García".encode("utf-16-be")) in content
        assert record(b"city", b"\xfe\xff\x67\x71\x4e\xac") in content

    def test_mixed_fields(self):
        content = encode({
            "asciiField": "plain english",
            "unicodeField": "café résumé",
            "mixedField": "Hello 世界",
        })
        assert b"plain english" in content
        assert content.count(UTF16BE_BOM) == 2

    @pytest.mark.parametrize("text", ["张三", "محمد", "Москва", "Ciudad Juárez, México"])
    def test_scripts(self, text):
        content = encode({"value": text})
        assert record(b"value", UTF16BE_BOM + text.encode("utf-16-be")) in content

    def test_emoji(self):
        content = encode({"mood": "😀", "status": "Working 🚀"})
        assert record(b"mood", b"\xfe\xff\xd8\x3d\xde\x00") in content
        assert content.count(UTF16BE_BOM) == 2
