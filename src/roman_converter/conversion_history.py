"""Keep a history of conversions made from the console tool.

Each single conversion can be stored as a ConversionRecord in a JSON file.
The history is kept newest first and capped at MAX_HISTORY_ITEMS entries. It
can be exported as CSV and summarized into simple usage statistics.

Storage problems never interrupt a conversion: a history that cannot be read
or written produces a warning on the console and is treated as empty.
"""
from csv import QUOTE_ALL
from datetime import datetime, timedelta
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd
from pydantic import BaseModel, TypeAdapter, ValidationError

from .common.config import HISTORY_PATH, MAX_HISTORY_ITEMS
from .common.roman_numerals import ROMAN_TO_INT, INT_TO_ROMAN, Direction


class ConversionRecord(BaseModel):
    """A single stored conversion.

    Attributes:
        input: Text the user entered
        output: Converted result
        mode: Conversion direction, "roman-to-int" or "int-to-roman"
        timestamp: When the conversion was made
    """
    input: str
    output: str
    mode: Direction
    timestamp: datetime


_RECORD_LIST = TypeAdapter(List[ConversionRecord])


def _as_local(timestamp: datetime) -> datetime:
    # Naive timestamps are already local
    if timestamp.tzinfo is None:
        return timestamp
    return timestamp.astimezone().replace(tzinfo=None)


class ConversionHistory:
    """JSON file backed conversion history.

    Attributes:
        history_path: Location of the JSON file holding the records
        max_items: Number of most recent records kept
    """

    def __init__(self, history_path: Optional[str] = None, max_items: int = MAX_HISTORY_ITEMS):
        self.history_path = Path(history_path) if history_path is not None else HISTORY_PATH
        self.max_items = max_items

    def save_conversion(self, record: ConversionRecord) -> None:
        """Add a record in front of the history and drop the oldest overflow.

        Args:
            record: Conversion to store
        """
        updated = [record, *self.get_conversions()][:self.max_items]

        try:
            self.history_path.parent.mkdir(parents=True, exist_ok=True)
            self.history_path.write_bytes(_RECORD_LIST.dump_json(updated, indent=2))
        except OSError as e:
            print(f"Warning: Failed to save conversion to history: {e}")

    def get_conversions(self) -> List[ConversionRecord]:
        """Load all stored records, most recent first.

        Returns:
            List of records, empty if there is no history file yet or the
            file could not be read
        """
        if not self.history_path.exists():
            return []

        try:
            return _RECORD_LIST.validate_json(self.history_path.read_bytes())
        except (OSError, ValidationError) as e:
            print(f"Warning: Failed to load conversion history: {e}")
            return []

    def clear_history(self) -> None:
        try:
            self.history_path.unlink(missing_ok=True)
        except OSError as e:
            print(f"Warning: Failed to clear history: {e}")

    def get_conversion_stats(self, now: Optional[datetime] = None) -> Dict[str, int]:
        """Count stored conversions by direction and by age.

        Args:
            now: Reference time, defaults to the current local time

        Returns:
            Dictionary with keys:
            - total: number of stored records
            - roman_to_int / int_to_roman: records per direction
            - today: records made since midnight
            - this_week: records made since midnight seven days ago
        """
        conversions = self.get_conversions()
        now = _as_local(now) if now is not None else datetime.now()
        today = now.replace(hour=0, minute=0, second=0, microsecond=0)
        week_ago = today - timedelta(days=7)

        timestamps = [_as_local(c.timestamp) for c in conversions]
        return {
            "total": len(conversions),
            "roman_to_int": sum(1 for c in conversions if c.mode == ROMAN_TO_INT),
            "int_to_roman": sum(1 for c in conversions if c.mode == INT_TO_ROMAN),
            "today": sum(1 for t in timestamps if t >= today),
            "this_week": sum(1 for t in timestamps if t >= week_ago),
        }


def record_conversion(history: ConversionHistory, text: str, output: str, mode: Direction) -> ConversionRecord:
    """Store a conversion stamped with the current time and return the record."""
    record = ConversionRecord(input=text, output=output, mode=mode, timestamp=datetime.now())
    history.save_conversion(record)
    return record


def export_to_csv(conversions: List[ConversionRecord]) -> str:
    """Serialize records as CSV text with every field quoted.

    Args:
        conversions: Records to export, written in the given order

    Returns:
        CSV text with the columns Input, Output, Mode, Timestamp

    Example:
        >>> print(export_to_csv([record]), end="")
        "Input","Output","Mode","Timestamp"
        "XIV","14","roman-to-int","2024-03-01T10:15:00"
    """
    rows = [[c.input, c.output, c.mode, c.timestamp.isoformat()] for c in conversions]
    df = pd.DataFrame(rows, columns=["Input", "Output", "Mode", "Timestamp"])
    return df.to_csv(index=False, quoting=QUOTE_ALL, lineterminator="\n")


def export_history_csv(history: ConversionHistory, output_path: str) -> str:
    """Write the whole history to a CSV file.

    Args:
        history: History to export
        output_path: Destination CSV file, parent folders are created

    Returns:
        str: Path to the written file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    conversions = history.get_conversions()
    output_path.write_text(export_to_csv(conversions), encoding="utf-8")

    print(f"Exported {len(conversions)} conversions to {output_path}")
    return str(output_path)
