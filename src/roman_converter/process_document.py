"""Convert every Roman numeral or integer found in a text document.

This module scans free text for numeral-shaped or integer-shaped words,
replaces each one with its conversion in place, and summarizes the run in a
plain-text report. A word that cannot be converted is left as it is and the
failure is recorded, so one bad match never stops the rest of the document.

Typical use is modernizing the chapter and year numbers of a transcribed
historical document, or going the other way for typesetting.
"""
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel

from .common.config import CONVERTED_SUFFIX, REPORT_SUFFIX
from .common.roman_numerals import (
    MAX_VALUE,
    MIN_VALUE,
    ROMAN_TO_INT,
    INT_TO_ROMAN,
    Direction,
    RomanNumeralError,
    integer_to_numeral,
    is_valid_numeral,
    numeral_to_integer,
)
from .common.validators import SUPPORTED_DOCUMENT_FORMATS, validate_document_format, validate_file

# Uppercase numerals in canonical shape, as whole words. The closing
# lookbehind keeps the all-optional groups from matching the empty string.
ROMAN_PATTERN = re.compile(r"\bM{0,3}(?:CM|CD|D?C{0,3})(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3})\b(?<=[MDCLXVI])")

# Whole-word integers of up to four digits without leading zeros
INTEGER_PATTERN = re.compile(r"\b[1-9]\d{0,3}\b")


class ProcessingResult(BaseModel):
    """Outcome of processing one document.

    Attributes:
        original_text: Text before conversion
        processed_text: Text with every convertible match replaced
        conversions: Number of replacements made
        errors: One message per match that failed to convert
    """
    original_text: str
    processed_text: str
    conversions: int
    errors: List[str]


def process_document(text: str, mode: Direction) -> ProcessingResult:
    """Replace numerals (or integers) in text with their conversions.

    Args:
        text: Document content
        mode: "roman-to-int" replaces valid numerals with integers,
              "int-to-roman" replaces integers 1-3999 with numerals

    Returns:
        ProcessingResult with the converted text, conversion count and errors

    Raises:
        ValueError: If mode is not a supported direction

    Example:
        >>> process_document("Chapter XIV, year MCMLIV", "roman-to-int").processed_text
        'Chapter 14, year 1954'
    """
    if mode not in (ROMAN_TO_INT, INT_TO_ROMAN):
        raise ValueError(f"Unknown conversion direction: {mode!r}")

    errors = []
    conversions = 0

    def convert_numeral(match: re.Match) -> str:
        nonlocal conversions
        numeral = match.group(0)
        try:
            if not is_valid_numeral(numeral):
                return numeral
            converted = str(numeral_to_integer(numeral))
        except RomanNumeralError as e:
            errors.append(f'Failed to convert "{numeral}": {e}')
            return numeral
        conversions += 1
        return converted

    def convert_integer(match: re.Match) -> str:
        nonlocal conversions
        number = match.group(0)
        try:
            value = int(number)
            if not MIN_VALUE <= value <= MAX_VALUE:
                return number
            converted = integer_to_numeral(value)
        except RomanNumeralError as e:
            errors.append(f'Failed to convert "{number}": {e}')
            return number
        conversions += 1
        return converted

    if mode == ROMAN_TO_INT:
        processed_text = ROMAN_PATTERN.sub(convert_numeral, text)
    else:
        processed_text = INTEGER_PATTERN.sub(convert_integer, text)

    return ProcessingResult(
        original_text=text,
        processed_text=processed_text,
        conversions=conversions,
        errors=errors,
    )


def extract_roman_numerals(text: str) -> List[str]:
    """Return the valid numerals found in text, in order of appearance."""
    return [m.group(0) for m in ROMAN_PATTERN.finditer(text) if is_valid_numeral(m.group(0))]


def extract_integers(text: str) -> List[int]:
    """Return the integers in range 1-3999 found in text, in order of appearance."""
    values = [int(m.group(0)) for m in INTEGER_PATTERN.finditer(text)]
    return [v for v in values if MIN_VALUE <= v <= MAX_VALUE]


def generate_report(result: ProcessingResult, generated_at: Optional[datetime] = None) -> str:
    """Format a processing result as a human-readable report.

    Args:
        result: Result of process_document()
        generated_at: Date shown in the report, defaults to now

    Returns:
        Multi-line report text
    """
    generated_at = generated_at or datetime.now()

    report = [
        "=== Document Processing Report ===",
        f"Date: {generated_at:%Y-%m-%d %H:%M:%S}",
        f"Conversions made: {result.conversions}",
        f"Errors encountered: {len(result.errors)}",
        "",
    ]

    if result.errors:
        report.append("Errors:")
        for i, error in enumerate(result.errors):
            report.append(f"{i + 1}. {error}")
        report.append("")

    report.append("Processing completed successfully.")
    return "\n".join(report)


def process_document_file(input_path: str, mode: Direction, output_path: Optional[str] = None) -> str:
    """Convert a document file and write the result and a report next to it.

    The document format is taken from the file extension (.txt, .csv, .json);
    any other extension is treated as plain text.

    Args:
        input_path: Document to process
        mode: Conversion direction, see process_document()
        output_path: Where to write the converted document. Defaults to
                     "<name>_converted<ext>" in the input's folder.

    Returns:
        str: Path to the converted document. The report is written to
        "<name>_report.txt" beside it.

    Raises:
        ValueError: If the file does not exist or its content is not valid
                    for its format
    """
    input_path = Path(input_path)
    validate_file(input_path, "Document")

    content = input_path.read_text(encoding="utf-8")
    document_format = input_path.suffix.lstrip(".").lower()
    if document_format not in SUPPORTED_DOCUMENT_FORMATS:
        document_format = "txt"

    valid, format_errors = validate_document_format(content, document_format)
    if not valid:
        raise ValueError(f"Error: {input_path} is not a valid {document_format} document: {'; '.join(format_errors)}")

    if output_path is None:
        output_path = input_path.parent / f"{input_path.stem}{CONVERTED_SUFFIX}{input_path.suffix}"
    else:
        output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    result = process_document(content, mode)
    output_path.write_text(result.processed_text, encoding="utf-8")

    report_path = output_path.parent / f"{input_path.stem}{REPORT_SUFFIX}.txt"
    report_path.write_text(generate_report(result), encoding="utf-8")

    print(f"Conversions made: {result.conversions}")
    if result.errors:
        print(f"Warning: {len(result.errors)} matches could not be converted, see {report_path}")

    return str(output_path)
