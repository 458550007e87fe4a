"""Main entry point for the Roman numeral converter."""
import sys
import json
import argparse
from pathlib import Path

from .common.config import DEFAULT_HISTORICAL_MODE
from .common.roman_numerals import (
    ROMAN_TO_INT,
    INT_TO_ROMAN,
    analyze_numeral,
    integer_to_numeral,
    is_valid_numeral,
    numeral_to_integer,
)
from .conversion_history import ConversionHistory, export_history_csv, record_conversion
from .convert_batch_file import convert_batch_file
from .process_document import process_document_file


def print_menu(historical_mode: bool):
    """Print the main menu."""
    print("\n=== Roman Numeral Converter ===\n")
    print(f"Historical mode: {'on' if historical_mode else 'off'}\n")
    print("1. Convert Roman numeral to integer")
    print("2. Convert integer to Roman numeral")
    print("3. Analyze Roman numeral")
    print("4. Batch convert a file")
    print("5. Process a document")
    print("6. Show history")
    print("7. Show statistics")
    print("8. Export history to CSV")
    print("9. Clear history")
    print("10. Toggle historical mode")
    print("0. Exit")


def load_config(config_path: str) -> dict:
    """Load configuration from JSON file."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        return json.load(f)


def ask_direction() -> str:
    """Ask which way to convert, defaulting to Roman to integer."""
    choice = input("Direction - 1: Roman to integer, 2: integer to Roman [1]: ").strip()
    return INT_TO_ROMAN if choice == "2" else ROMAN_TO_INT


def main(argv=None):
    """Main menu for converter functions."""
    # Parse command line arguments
    parser = argparse.ArgumentParser(description='Roman Numeral Converter')
    parser.add_argument('--config', help='Path to configuration JSON file')
    args = parser.parse_args(argv)

    # Load configuration
    config = {}
    if args.config:
        try:
            config = load_config(args.config)
            print(f"Loaded configuration from: {args.config}")
        except Exception as e:
            print(f"Error loading config: {e}")
            sys.exit(1)

    history = ConversionHistory(config.get('history_path'))
    settings = {'historical_mode': bool(config.get('historical_mode', DEFAULT_HISTORICAL_MODE))}

    while True:
        print_menu(settings['historical_mode'])
        try:
            choice = input("\nEnter your choice (0-10): ").strip()
        except (KeyboardInterrupt, EOFError):
            sys.exit(0)

        if choice == "0":
            sys.exit(0)
        elif choice == "1":
            run_roman_to_int(settings, history)
        elif choice == "2":
            run_int_to_roman(history)
        elif choice == "3":
            run_analyze()
        elif choice == "4":
            run_batch_file(settings)
        elif choice == "5":
            run_process_document()
        elif choice == "6":
            run_show_history(history)
        elif choice == "7":
            run_show_stats(history)
        elif choice == "8":
            run_export_history(history)
        elif choice == "9":
            run_clear_history(history)
        elif choice == "10":
            settings['historical_mode'] = not settings['historical_mode']
            print(f"Historical mode {'enabled' if settings['historical_mode'] else 'disabled'}")
        else:
            print("Invalid choice. Please try again.")


def run_roman_to_int(settings, history):
    """Convert a single numeral and store it in the history."""
    print("\n--- Convert Roman numeral to integer ---")

    try:
        numeral = input("Roman numeral: ").strip()
        if not is_valid_numeral(numeral, settings['historical_mode']):
            print(f"Error: Invalid Roman numeral: {numeral}")
            return
        value = numeral_to_integer(numeral, settings['historical_mode'])
        record_conversion(history, numeral, str(value), ROMAN_TO_INT)
        print(f"Success! {numeral.upper()} = {value}")
    except Exception as e:
        print(f"Error: {e}")


def run_int_to_roman(history):
    """Convert a single integer and store it in the history."""
    print("\n--- Convert integer to Roman numeral ---")

    try:
        text = input("Integer (1-3999): ").strip()
        numeral = integer_to_numeral(int(text))
        record_conversion(history, text, numeral, INT_TO_ROMAN)
        print(f"Success! {text} = {numeral}")
    except Exception as e:
        print(f"Error: {e}")


def run_analyze():
    """Show the historical analysis of a numeral."""
    print("\n--- Analyze Roman numeral ---")

    try:
        analysis = analyze_numeral(input("Roman numeral: "))
        print(f"Period: {analysis.period}")
        print(f"Historical notation: {'yes' if analysis.is_historical else 'no'}")
        for variation in analysis.variations:
            print(f"  - {variation}")
        print(f"Modern equivalent: {analysis.modern_equivalent}")
    except Exception as e:
        print(f"Error: {e}")


def run_batch_file(settings):
    """Run the batch file conversion."""
    print("\n--- Batch convert a file ---")

    try:
        input_path = input("Input file (one entry per line): ").strip()
        direction = ask_direction()
        output_file = convert_batch_file(input_path, direction, historical_mode=settings['historical_mode'])
        print(f"Success! Results written to: {output_file}")
    except Exception as e:
        print(f"Error: {e}")


def run_process_document():
    """Run the document processing."""
    print("\n--- Process a document ---")

    try:
        input_path = input("Document path: ").strip()
        direction = ask_direction()
        output_file = process_document_file(input_path, direction)
        print(f"Success! Converted document: {output_file}")
    except Exception as e:
        print(f"Error: {e}")


def run_show_history(history):
    """Print the stored conversions, newest first."""
    print("\n--- Conversion history ---")

    conversions = history.get_conversions()
    if not conversions:
        print("No conversions saved yet")
        return

    for record in conversions:
        print(f"{record.timestamp:%Y-%m-%d %H:%M}  {record.input} -> {record.output}  ({record.mode})")


def run_show_stats(history):
    """Print history statistics."""
    print("\n--- Statistics ---")

    stats = history.get_conversion_stats()
    print(f"Total conversions: {stats['total']}")
    print(f"  Roman to integer: {stats['roman_to_int']}")
    print(f"  Integer to Roman: {stats['int_to_roman']}")
    print(f"Today: {stats['today']}")
    print(f"This week: {stats['this_week']}")


def run_export_history(history):
    """Export the history to a CSV file."""
    print("\n--- Export history to CSV ---")

    try:
        output_path = input("Output CSV path [conversion_history.csv]: ").strip() or "conversion_history.csv"
        output_file = export_history_csv(history, output_path)
        print(f"Success! Exported to: {output_file}")
    except Exception as e:
        print(f"Error: {e}")


def run_clear_history(history):
    """Clear the history after confirmation."""
    print("\n--- Clear history ---")

    if input("Delete all saved conversions? (y/N): ").strip().lower() == "y":
        history.clear_history()
        print("History cleared")
    else:
        print("Cancelled")


if __name__ == "__main__":
    main()
