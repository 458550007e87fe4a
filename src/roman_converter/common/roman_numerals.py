"""Roman numeral conversion engine.

This module provides bidirectional conversion between Roman numerals and
integers in the range 1-3999, validation of numeral well-formedness, detection
and normalization of historical additive variants (IIII, XXXX, ...), and batch
conversion with per-item error isolation.

Everything here is pure: the lookup tables are built once at import time and
never modified, and no function performs I/O. Console output, persistence and
file handling live in the modules that call into this one.
"""
import re
from numbers import Integral
from types import MappingProxyType
from typing import Iterable, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict


MIN_VALUE = 1
MAX_VALUE = 3999

# Batch conversion directions
ROMAN_TO_INT = "roman-to-int"
INT_TO_ROMAN = "int-to-roman"
Direction = Literal["roman-to-int", "int-to-roman"]

ROMAN_SYMBOL_VALUES = MappingProxyType({
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
})

# Greedy decomposition table. Subtractive pairs must sit between the pure
# symbols they fall between, otherwise the greedy walk emits IIII, VIIII, ...
CANONICAL_DECOMPOSITION: Tuple[Tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),   # 1000 - 100
    (500, "D"),
    (400, "CD"),   # 500 - 100
    (100, "C"),
    (90, "XC"),    # 100 - 10
    (50, "L"),
    (40, "XL"),    # 50 - 10
    (10, "X"),
    (9, "IX"),     # 10 - 1
    (5, "V"),
    (4, "IV"),     # 5 - 1
    (1, "I"),
)

# Additive spellings found in older documents. Searched in this order:
# longest pattern first, then by value, so VIIII wins over the IIII it contains.
HISTORICAL_PATTERNS: Tuple[Tuple[str, int], ...] = (
    ("DCCCC", 900),
    ("LXXXX", 90),
    ("VIIII", 9),
    ("CCCC", 400),
    ("XXXX", 40),
    ("IIII", 4),
)

_ROMAN_CHARACTERS = re.compile(r"[IVXLCDM]+")
_INTEGER_TEXT = re.compile(r"[+-]?\d+")

# Standard grammar. Any match makes a numeral invalid.
_GRAMMAR_RULES = (
    re.compile(r"([IVXLCDM])\1{3,}"),  # four or more of the same symbol
    re.compile(r"I[LCDM]"),             # I only precedes V or X
    re.compile(r"V[LCDM]"),             # V is never subtracted
    re.compile(r"X[DM]"),               # X only precedes L or C
    re.compile(r"L[CDM]"),              # L is never subtracted
    re.compile(r"DM"),                  # D is never subtracted
)


class RomanNumeralError(ValueError):
    """Base class for conversion errors raised by this module."""


class InvalidNumeral(RomanNumeralError):
    """The text is not a Roman numeral (bad character or malformed)."""


class EmptyInput(InvalidNumeral):
    """The text is empty or whitespace only."""


class OutOfRange(RomanNumeralError):
    """The value is not an integer between MIN_VALUE and MAX_VALUE."""


class ConversionOutcome(BaseModel):
    """Result of converting a single batch item.

    Attributes:
        input: The raw item exactly as it was given
        output: Converted value as text, empty when the conversion failed
        success: Whether the conversion succeeded
        error: Description of the failure, None on success
    """
    model_config = ConfigDict(frozen=True)

    input: str
    output: str
    success: bool
    error: Optional[str] = None


class NumeralAnalysis(BaseModel):
    """Historical context report produced by analyze_numeral()."""
    model_config = ConfigDict(frozen=True)

    is_historical: bool
    period: str
    variations: List[str]
    modern_equivalent: str


def _clean(roman) -> str:
    if not isinstance(roman, str):
        raise InvalidNumeral(f"Roman numeral must be a string, got {type(roman).__name__}")
    cleaned = roman.strip().upper()
    if not cleaned:
        raise EmptyInput("Roman numeral must be a non-empty string")
    return cleaned


def _find_historical_pattern(roman: str) -> Optional[Tuple[str, int]]:
    for pattern, value in HISTORICAL_PATTERNS:
        if pattern in roman:
            return pattern, value
    return None


def numeral_to_integer(roman: str, historical_mode: bool = False) -> int:
    """Convert a Roman numeral string to an integer.

    Symbols are read right to left: a symbol is added when it is at least as
    large as the one read just before it and subtracted otherwise, which
    handles subtractive pairs (IV, XC, CM, ...) without matching them
    explicitly. Input is case-insensitive and surrounding whitespace is ignored.

    Args:
        roman: Roman numeral string (e.g., "XIV", "mcmliv")
        historical_mode: Accept additive variants such as "IIII" for 4. The
            first pattern from HISTORICAL_PATTERNS found in the numeral is
            rewritten to its standard spelling before conversion.

    Returns:
        Integer value of the numeral. The result is not range checked, use
        is_valid_numeral() when the value has to lie in 1-3999.

    Raises:
        EmptyInput: If the string is empty or whitespace only
        InvalidNumeral: If the input is not a string or contains a character
            that is not a Roman numeral symbol

    Examples:
        >>> numeral_to_integer("MCMLIV")
        1954
        >>> numeral_to_integer("MCMXCIIII", historical_mode=True)
        1994
    """
    roman = _clean(roman)

    if historical_mode:
        match = _find_historical_pattern(roman)
        if match is not None:
            pattern, value = match
            standard = roman.replace(pattern, integer_to_numeral(value), 1)
            return numeral_to_integer(standard, historical_mode=False)

    total = 0
    previous = 0
    for symbol in reversed(roman):
        value = ROMAN_SYMBOL_VALUES.get(symbol)
        if value is None:
            raise InvalidNumeral(f"Invalid Roman numeral character: {symbol}")

        if value < previous:
            total -= value
        else:
            total += value
        previous = value

    return total


def integer_to_numeral(num: int) -> str:
    """Convert an integer to its canonical uppercase Roman numeral.

    Walks CANONICAL_DECOMPOSITION from the largest value down, appending each
    glyph group as long as it still fits into the remaining amount.

    Args:
        num: Integer between 1 and 3999

    Returns:
        Canonical Roman numeral (standard subtractive form, never IIII)

    Raises:
        OutOfRange: If num is not an integer or lies outside 1-3999

    Examples:
        >>> integer_to_numeral(1990)
        'MCMXC'
        >>> integer_to_numeral(444)
        'CDXLIV'
    """
    if isinstance(num, bool) or not isinstance(num, Integral):
        raise OutOfRange(f"Number must be an integer between {MIN_VALUE} and {MAX_VALUE}, got {num!r}")
    if not MIN_VALUE <= num <= MAX_VALUE:
        raise OutOfRange(f"Number must be an integer between {MIN_VALUE} and {MAX_VALUE}, got {num}")

    remaining = int(num)
    result = []
    for value, glyphs in CANONICAL_DECOMPOSITION:
        while remaining >= value:
            result.append(glyphs)
            remaining -= value

    return "".join(result)


def is_valid_numeral(roman: str, historical_mode: bool = False) -> bool:
    """Check whether a string is a well-formed Roman numeral in 1-3999.

    The check runs in two stages. The syntactic stage rejects unknown
    characters and the forbidden constructions in _GRAMMAR_RULES. The
    semantic stage converts the numeral and requires the value to be in
    range, so it has the final word.

    In historical mode any numeral containing one of HISTORICAL_PATTERNS is
    accepted as soon as its characters are valid, skipping both stages.

    Args:
        roman: Candidate string, case-insensitive, surrounding whitespace ignored
        historical_mode: Accept additive variants such as "IIII"

    Returns:
        True if the numeral is valid, False otherwise. Never raises.
    """
    if not isinstance(roman, str):
        return False

    roman = roman.strip().upper()
    if not roman or not _ROMAN_CHARACTERS.fullmatch(roman):
        return False

    if historical_mode and _find_historical_pattern(roman) is not None:
        return True

    if any(rule.search(roman) for rule in _GRAMMAR_RULES):
        return False

    try:
        value = numeral_to_integer(roman, historical_mode)
    except RomanNumeralError:
        return False
    return MIN_VALUE <= value <= MAX_VALUE


def analyze_numeral(roman: str) -> NumeralAnalysis:
    """Report the historical context of a numeral.

    This is an advisory helper rather than a validator: anything that cannot
    be converted produces an "Unknown" analysis instead of an exception.

    Args:
        roman: Roman numeral, standard or additive

    Returns:
        NumeralAnalysis with
        - is_historical: whether any additive pattern occurs in the numeral
        - period: "Medieval" if so, "Classical" otherwise
        - variations: one description per pattern found, a pattern that
          only occurs inside a longer one (IIII in VIIII) is not repeated
        - modern_equivalent: canonical spelling of the numeral's value

    Example:
        >>> analyze_numeral("MDCCCCIIII").modern_equivalent
        'MCMIV'
    """
    try:
        roman = _clean(roman)
        variations = []
        # Blank out each match so CCCC is not reported again inside DCCCC
        remaining = roman
        for pattern, value in HISTORICAL_PATTERNS:
            if pattern in remaining:
                variations.append(f"Additive notation for {value}")
                remaining = remaining.replace(pattern, "|")
        modern_equivalent = integer_to_numeral(numeral_to_integer(roman, historical_mode=True))
    except RomanNumeralError:
        return NumeralAnalysis(is_historical=False, period="Unknown", variations=[], modern_equivalent="Invalid")

    return NumeralAnalysis(
        is_historical=bool(variations),
        period="Medieval" if variations else "Classical",
        variations=variations,
        modern_equivalent=modern_equivalent,
    )


def _failed(raw, message: str) -> ConversionOutcome:
    return ConversionOutcome(input=str(raw), output="", success=False, error=message)


def _convert_item(raw, direction: Direction, historical_mode: bool) -> ConversionOutcome:
    text = str(raw).strip()
    if not text:
        return _failed(raw, "Empty input")

    if direction == ROMAN_TO_INT:
        if not is_valid_numeral(text, historical_mode):
            return _failed(raw, "Invalid Roman numeral")
        value = numeral_to_integer(text, historical_mode)
        return ConversionOutcome(input=str(raw), output=str(value), success=True)

    if not _INTEGER_TEXT.fullmatch(text):
        return _failed(raw, f"Invalid number ({MIN_VALUE}-{MAX_VALUE})")
    num = int(text)
    if not MIN_VALUE <= num <= MAX_VALUE:
        return _failed(raw, f"Invalid number ({MIN_VALUE}-{MAX_VALUE})")
    return ConversionOutcome(input=str(raw), output=integer_to_numeral(num), success=True)


def batch_convert(inputs: Iterable[str], direction: Direction,
                  historical_mode: bool = False) -> List[ConversionOutcome]:
    """Convert a sequence of inputs, one outcome per input, in input order.

    Every item is converted on its own. An item that fails (blank, not a
    numeral, out of range, or any unexpected error) produces an outcome with
    success=False and an error message, and the remaining items are still
    converted.

    Args:
        inputs: Raw strings to convert, typically lines of user input
        direction: ROMAN_TO_INT ("roman-to-int") or INT_TO_ROMAN ("int-to-roman")
        historical_mode: Accept additive variants when reading numerals

    Returns:
        List of ConversionOutcome, same length and order as inputs

    Raises:
        ValueError: If direction is not one of the two supported directions

    Example:
        >>> [o.success for o in batch_convert(["MCMXC", "", "INVALID"], ROMAN_TO_INT)]
        [True, False, False]
    """
    if direction not in (ROMAN_TO_INT, INT_TO_ROMAN):
        raise ValueError(f"Unknown conversion direction: {direction!r}")

    outcomes = []
    for raw in inputs:
        try:
            outcomes.append(_convert_item(raw, direction, historical_mode))
        except Exception as e:
            outcomes.append(_failed(raw, str(e) or "Conversion failed"))
    return outcomes
