"""
Conversions between Table and pandas DataFrames / numpy arrays.

**Conceptual**: A Table is deliberately loose (ragged rows, strings only), while
DataFrames and arrays are rectangular and typed. These helpers are the bridge:
  - Ragged rows are padded with "" to the widest row.
  - Typed arrays use the same parse-with-default rules as Row getters, so a
    cell that is missing or not a number becomes the zero value.

The Table itself is never modified by an export.
"""

import numpy as np
import pandas as pd

from csvgrid.parsing.values import (
    ZERO_VALUES,
    parse_bool,
    parse_float,
    parse_int,
)
from csvgrid.table.table import Table

# kind -> (parser, numpy dtype)
_ARRAY_KINDS = {
    "int": (parse_int, np.int64),
    "float": (parse_float, np.float64),
    "bool": (parse_bool, np.bool_),
    "string": (str, object),
}


def _padded_rows(table: Table) -> list[list[str]]:
    rows = table.to_lists()
    width = max((len(r) for r in rows), default=0)
    return [r + [""] * (width - len(r)) for r in rows]


def table_to_frame(table: Table, header: bool = False) -> pd.DataFrame:
    """
    Export a Table as a DataFrame of strings.

    Args:
        table: Table to export.
        header: If True, the first row supplies the column names and is not
               part of the data. Missing header names become "column_<i>".

    Returns:
        DataFrame with one string column per table column. Empty table ->
        empty DataFrame.

    Example:
        >>> t = Table()
        >>> t.load_text("name,score\\nann,3\\nbob")
        >>> table_to_frame(t, header=True)
          name score
        0  ann     3
        1  bob
    """
    rows = _padded_rows(table)
    if not rows:
        return pd.DataFrame()

    if header:
        columns = [name if name else f"column_{i}" for i, name in enumerate(rows[0])]
        return pd.DataFrame(rows[1:], columns=columns, dtype=object)
    return pd.DataFrame(rows, dtype=object)


def table_from_frame(
    frame: pd.DataFrame,
    header: bool = True,
    table: Table | None = None,
) -> Table:
    """
    Load a DataFrame into a Table, replacing its rows.

    Every cell is converted with str(); missing values (NaN, None, NaT)
    become "".

    Args:
        frame: DataFrame to import.
        header: If True, the column names are written as the first row.
        table: Table to fill. A new Table (default settings) if omitted.

    Returns:
        The filled Table.
    """
    if table is None:
        table = Table()

    rows: list[list[str]] = []
    if header:
        rows.append([str(c) for c in frame.columns])
    for values in frame.itertuples(index=False, name=None):
        rows.append(["" if pd.isna(v) else str(v) for v in values])

    table.load_fields(rows)
    return table


def table_to_array(table: Table, kind: str = "float") -> np.ndarray:
    """
    Export a Table as a 2-D typed numpy array.

    Args:
        table: Table to export.
        kind: One of "int", "float", "bool", "string".

    Returns:
        Array of shape (num_rows, widest_row). Cells that are missing, do
        not parse, or parse to an int too large for int64 hold the zero
        value for `kind`.

    Raises:
        ValueError: If kind is not one of the supported names.
    """
    if kind not in _ARRAY_KINDS:
        raise ValueError(
            f"Unsupported array kind {kind!r}. Expected one of: {sorted(_ARRAY_KINDS)}"
        )
    parse, dtype = _ARRAY_KINDS[kind]

    rows = table.to_lists()
    width = max((len(r) for r in rows), default=0)
    out = np.full((len(rows), width), ZERO_VALUES[kind], dtype=dtype)
    for i, row in enumerate(rows):
        for j, text in enumerate(row):
            try:
                out[i, j] = parse(text)
            except OverflowError:
                # outside int64; cell keeps the zero value
                continue
    return out
