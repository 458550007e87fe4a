"""Convert a file of numerals or integers, one per line, into a results CSV.

Each non-blank line of the input file is converted independently. Lines that
fail are kept in the output with their error message, so the CSV always has
one row per input line and can be checked and corrected in a spreadsheet.
"""
from pathlib import Path
from typing import List, Optional

import pandas as pd

from .common.config import CONVERTED_SUFFIX
from .common.progress import ProgressPrinter
from .common.roman_numerals import Direction, batch_convert
from .common.validators import validate_file


def read_batch_inputs(input_path: str) -> List[str]:
    """Read the non-blank lines of a text file, trimmed."""
    input_path = Path(input_path)
    validate_file(input_path, "Batch input file")

    lines = input_path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]


def convert_batch_file(input_path: str, direction: Direction, output_path: Optional[str] = None,
                       historical_mode: bool = False, show_progress: bool = True) -> str:
    """Convert every line of a text file and save the outcomes as CSV.

    Args:
        input_path: Text file with one numeral or integer per line
        direction: "roman-to-int" or "int-to-roman"
        output_path: Optional output CSV path. Defaults to
                     "<name>_converted.csv" in the input's folder.
        historical_mode: Accept additive numerals such as IIII
        show_progress: Print a progress counter while converting

    Returns:
        str: Path to the written CSV file

    Output format:
        Columns input, output, success, error with one row per non-blank
        input line, in input order.

    Raises:
        ValueError: If the input file does not exist, contains no entries,
                    or direction is not supported
    """
    input_path = Path(input_path)
    inputs = read_batch_inputs(input_path)
    if not inputs:
        raise ValueError(f"Error: No entries found in {input_path}")

    if output_path is None:
        output_path = input_path.parent / f"{input_path.stem}{CONVERTED_SUFFIX}.csv"
    else:
        output_path = Path(output_path)

    outcomes = []
    progress = ProgressPrinter("Converting entries", len(inputs), enabled=show_progress)

    for i, raw in enumerate(inputs):
        outcomes.extend(batch_convert([raw], direction, historical_mode))
        progress.update(i + 1)

    progress.done()

    df = pd.DataFrame([outcome.model_dump() for outcome in outcomes], columns=["input", "output", "success", "error"])
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)

    failed = int((~df["success"]).sum())
    print(f"Converted {len(df) - failed} of {len(df)} entries")
    if failed:
        print(f"Warning: {failed} entries could not be converted")

    return str(output_path)
