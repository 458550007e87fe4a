"""Configuration constants for the Roman numeral converter.

This module contains the settings shared by the console tool and the history
store:
- where the conversion history is kept and how much of it
- whether historical (additive) numerals are accepted by default
- naming of files written next to processed inputs

Environment Variables:
    ROMAN_CONVERTER_HISTORY: Path of the JSON history file
    ROMAN_CONVERTER_HISTORICAL_MODE: Set to "1" to accept IIII-style numerals by default
"""
import os
from pathlib import Path

# Conversion history
# Only the most recent entries are kept, newest first
HISTORY_PATH = Path(os.getenv("ROMAN_CONVERTER_HISTORY", Path.home() / ".roman_converter" / "history.json"))
MAX_HISTORY_ITEMS = 100

# Historical mode default for the console menu
DEFAULT_HISTORICAL_MODE = os.getenv("ROMAN_CONVERTER_HISTORICAL_MODE", "0") == "1"

# Suffixes for files written next to the input file
CONVERTED_SUFFIX = "_converted"
REPORT_SUFFIX = "_report"
