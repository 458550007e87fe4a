"""Validation utilities for the Roman numeral converter.

This module provides the input checks run before a file is processed: that a
path points to an existing file, and that a document's content matches the
format it claims to be in.
"""
import json
from pathlib import Path
from typing import List, Tuple

SUPPORTED_DOCUMENT_FORMATS = ("txt", "csv", "json")


def validate_file(path: Path, name: str = "File") -> None:
    """Validate that a path exists and is a file.

    Args:
        path: Path object to validate
        name: Descriptive name for the file, used in error messages
              (e.g., "Batch input file", "Document")

    Raises:
        ValueError: If path does not exist or is not a file

    Example:
        >>> from pathlib import Path
        >>> validate_file(Path("./numerals.txt"), "Batch input file")
        # Raises ValueError if numerals.txt doesn't exist
    """
    if not path.is_file():
        raise ValueError(f"Error: {name} not found: {path}")


def validate_document_format(content: str, format: str) -> Tuple[bool, List[str]]:
    """Check that document content is usable in the given format.

    Rules per format:
        txt:  any non-empty text
        csv:  at least a header line and one data line
        json: must parse as JSON

    Args:
        content: Full text of the document
        format: One of "txt", "csv" or "json"

    Returns:
        Tuple of (valid, errors) where errors lists every problem found.
        An empty document or an unsupported format is never valid.
    """
    errors = []

    if not content or not content.strip():
        errors.append("Document is empty")
        return False, errors

    if format == "csv":
        if len(content.split("\n")) < 2:
            errors.append("CSV must have at least a header and one data row")
    elif format == "json":
        try:
            json.loads(content)
        except json.JSONDecodeError:
            errors.append("Invalid JSON format")
    elif format not in SUPPORTED_DOCUMENT_FORMATS:
        errors.append(f"Unsupported format: {format}")

    return len(errors) == 0, errors
