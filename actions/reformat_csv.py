#!/usr/bin/env python3
"""
Convert a CSV file from one dialect to another.

**Conceptual**: Loads SRC with one separator/comment prefix and writes DST with
another separator, optionally quoting every field and trimming whitespace.
Comment lines in SRC are dropped (they are never written on save).

**Usage**:
    # Semicolon file -> comma file
    python actions/reformat_csv.py in.csv out.csv --separator ";" --out-separator ","

    # Quote every field and trim whitespace
    python actions/reformat_csv.py in.csv out/clean.csv --quote --trim

**Safety**:
    - DST folders are created if missing
    - DST may equal SRC (the whole file is read before writing)
    - Unquoted output is not escaped; use --quote if fields contain the
      output separator or quotes
    - Newlines inside a field are never preserved, with or without --quote

**Exit codes**:
    - 0: DST written
    - 2: SRC could not be read or DST could not be written
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path so we can import csvgrid modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from csvgrid.table.table import Table


def reformat_csv(
    src: Path | str,
    dst: Path | str,
    separator: str | None = None,
    comment_prefix: str | None = None,
    out_separator: str | None = None,
    quote: bool = False,
    trim: bool = False,
    table: Table | None = None,
) -> dict | None:
    """
    Load src and save it to dst in the requested dialect.

    Args:
        src: File to read.
        dst: File to write.
        separator: Input field separator (default: table's current one).
        comment_prefix: Input comment prefix (default: table's current one).
        out_separator: Output field separator (default: same as input).
        quote: Quote every output field.
        trim: Strip whitespace from every field before writing.
        table: Table to use (default: new Table()). Injected in tests.

    Returns:
        Dict with keys 'rows', 'src', 'dst' on success, None on failure.
    """
    if table is None:
        table = Table()

    if not table.load(src, separator, comment_prefix):
        print(f"  ✗ Could not read {src}")
        return None

    if trim:
        table.trim()

    if not table.save(dst, quote=quote, separator=out_separator):
        print(f"  ✗ Could not write {dst}")
        return None

    return {
        'rows': table.get_num_rows(),
        'src': str(src),
        'dst': str(dst),
    }


def main():
    """Main entry point for the CSV reformat script."""
    parser = argparse.ArgumentParser(
        description="Convert a CSV file from one dialect to another",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("src", type=str, help="CSV file to read.")
    parser.add_argument("dst", type=str, help="CSV file to write.")

    parser.add_argument(
        "--separator",
        type=str,
        default=None,
        help="Input field separator. Default: CSVGRID_FIELD_SEPARATOR or ','.",
    )

    parser.add_argument(
        "--comment",
        type=str,
        default=None,
        help="Input comment line prefix. Default: CSVGRID_COMMENT_PREFIX or '#'.",
    )

    parser.add_argument(
        "--out-separator",
        type=str,
        default=None,
        help="Output field separator. Default: same as input.",
    )

    parser.add_argument(
        "--quote",
        action="store_true",
        help="Quote every output field.",
    )

    parser.add_argument(
        "--trim",
        action="store_true",
        help="Strip leading/trailing whitespace from every field.",
    )

    args = parser.parse_args()

    result = reformat_csv(
        src=args.src,
        dst=args.dst,
        separator=args.separator,
        comment_prefix=args.comment,
        out_separator=args.out_separator,
        quote=args.quote,
        trim=args.trim,
    )

    if result is None:
        sys.exit(2)

    print(f"  ✓ {result['src']} -> {result['dst']}  {result['rows']} rows")
    sys.exit(0)


if __name__ == "__main__":
    main()
