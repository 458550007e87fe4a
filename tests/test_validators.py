import pytest

from roman_converter.common.validators import validate_document_format, validate_file


def test_validate_file(tmp_path):
    existing = tmp_path / "numerals.txt"
    existing.write_text("X")

    validate_file(existing)
    with pytest.raises(ValueError, match="Document not found"):
        validate_file(tmp_path / "missing.txt", "Document")
    with pytest.raises(ValueError):
        validate_file(tmp_path)


@pytest.mark.parametrize(
    "content, format, valid",
    [
        ("Chapter XIV", "txt", True),
        ("year\n1990", "csv", True),
        ("year", "csv", False),
        ('{"year": "MCMXC"}', "json", True),
        ("{year", "json", False),
        ("Chapter XIV", "pdf", False),
        ("", "txt", False),
        ("  \n ", "csv", False),
    ],
)
def test_validate_document_format(content, format, valid):
    result, errors = validate_document_format(content, format)
    assert result is valid
    assert (errors == []) is valid


def test_validate_document_format_messages():
    assert validate_document_format("", "txt") == (False, ["Document is empty"])
    assert validate_document_format("x", "pdf") == (False, ["Unsupported format: pdf"])
