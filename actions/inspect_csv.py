#!/usr/bin/env python3
"""
Print a summary and the first rows of a CSV file.

**Usage**:
    # Comma-separated file, show the first 10 rows
    python actions/inspect_csv.py data/scores.csv

    # Semicolon-separated file with "//" comments, show 25 rows
    python actions/inspect_csv.py data/export.csv --separator ";" --comment "//" --rows 25

**Output**:
    - Row count and the narrowest/widest row
    - The first N rows, one line each, fields joined with " | "

**Exit codes**:
    - 0: File loaded and printed
    - 2: File could not be read
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path so we can import csvgrid modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from csvgrid.table.table import Table


def non_negative_int(value: str) -> int:
    """argparse type for counts: an integer >= 0."""
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got: {value}")
    if count < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got: {count}")
    return count


def summarize_table(table: Table) -> dict:
    """
    Collect row and column counts for a loaded table.

    Returns:
        Dict with keys 'rows', 'min_cols', 'max_cols' (0/0/0 for an empty table).
    """
    widths = [row.size() for row in table]
    return {
        'rows': len(widths),
        'min_cols': min(widths, default=0),
        'max_cols': max(widths, default=0),
    }


def format_preview(table: Table, max_rows: int) -> list[str]:
    """Render up to max_rows rows as numbered ' | '-joined lines."""
    lines = []
    for i, row in enumerate(table):
        if i >= max_rows:
            break
        lines.append(f"{i:>5}: " + " | ".join(row))
    return lines


def main():
    """
    Main entry point for the CSV inspection script.

    **Workflow**:
      1. Parse command-line arguments
      2. Load the file with the requested dialect
      3. Print summary and preview
    """
    parser = argparse.ArgumentParser(
        description="Print a summary and the first rows of a CSV file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("path", type=str, help="CSV file to inspect.")

    parser.add_argument(
        "--separator",
        type=str,
        default=None,
        help="Field separator. Default: CSVGRID_FIELD_SEPARATOR or ','.",
    )

    parser.add_argument(
        "--comment",
        type=str,
        default=None,
        help="Comment line prefix. Default: CSVGRID_COMMENT_PREFIX or '#'.",
    )

    parser.add_argument(
        "--rows",
        type=non_negative_int,
        default=10,
        help="Number of rows to print. Default: 10.",
    )

    args = parser.parse_args()

    table = Table()
    if not table.load(args.path, args.separator, args.comment):
        print(f"ERROR: Could not read {args.path}.")
        sys.exit(2)

    summary = summarize_table(table)

    print("=" * 60)
    print(f"CSV: {table.path}")
    print("=" * 60)
    print(f"Separator:      {table.field_separator!r}")
    print(f"Comment prefix: {table.comment_prefix!r}")
    print(f"Rows:           {summary['rows']}")
    print(f"Columns:        {summary['min_cols']} to {summary['max_cols']}")
    print("-" * 60)
    for line in format_preview(table, args.rows):
        print(line)
    if summary['rows'] > args.rows:
        print(f"  ... {summary['rows'] - args.rows} more row(s)")
    print("=" * 60)

    sys.exit(0)


if __name__ == "__main__":
    main()
