"""
Table: rows of string fields loaded from and saved to CSV text.

**Conceptual**: A Table is an ordered list of Rows plus the dialect it was
loaded with (file path, field separator, comment prefix, quote-on-save flag).
It owns its rows outright: rows passed in are copied, and rows handed out by
`get_row()`/`get_data()` are copies. Only iteration yields the live rows.

**Load/save flow**:
  - load: TextStore.read_text -> split lines -> drop comment lines ->
    tokenize each line -> replace rows.
  - save: join each row -> join lines with "\\n" -> TextStore.ensure_directory
    -> TextStore.write_text.

**Settings asymmetry**:
  - Arguments passed to `load()` become the new current separator and comment
    prefix ("used going forward").
  - Arguments passed to `save()` are used for that one call only.

**Failure policy**:
  - IO problems (missing file, permissions, undecodable text, write errors)
    are logged and reported as a False result. The rows are untouched on a
    failed load or save: rows are replaced only after the read succeeds.
  - Bad data is never an error. Out-of-range reads return zero values and
    writes grow the table to fit.

Not thread-safe. Share a Table between threads only with external locking.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from csvgrid.config.settings import TableSettings, get_settings
from csvgrid.parsing.tokenizer import (
    format_lines,
    join_fields,
    parse_lines,
    split_fields,
)
from csvgrid.storage.base import TextStore
from csvgrid.storage.local import LocalTextStore
from csvgrid.table.row import Row

logger = logging.getLogger(__name__)

# Errors a TextStore may raise for an unreadable or unwritable document
IO_ERRORS = (OSError, UnicodeError)


class Table:
    """
    Ordered rows of string fields with CSV load/save and typed cell access.

    **Usage**:
        table = Table()
        if table.load("data/scores.csv"):
            for row in table:
                print(row.get_string(0), row.get_int(1))

        table.set_float(3, 2, 9.5)   # grows to 4 rows, row 3 gets 3 columns
        table.save("out/scores.csv", quote=True)
    """

    def __init__(
        self,
        settings: TableSettings | None = None,
        store: TextStore | None = None,
    ):
        """
        Initialize an empty table.

        Args:
            settings: Default separator, comment prefix, quoting and encoding.
                     Defaults to get_settings() (environment / .env).
            store: TextStore used by load/save/create_file. Defaults to a
                  LocalTextStore using the settings' encoding.
        """
        if settings is None:
            settings = get_settings()

        self._rows: list[Row] = []
        self._path = ""
        self._field_separator = settings.field_separator
        self._comment_prefix = settings.comment_prefix
        self._quote_fields = settings.quote_fields
        self._store: TextStore = store if store is not None else LocalTextStore(settings.encoding)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def path(self) -> str:
        """Current file path ("" until a load/create_file sets it)."""
        return self._path

    @property
    def field_separator(self) -> str:
        return self._field_separator

    @property
    def comment_prefix(self) -> str:
        return self._comment_prefix

    @property
    def quote_fields(self) -> bool:
        """Whether save() quotes fields when its `quote` argument is omitted."""
        return self._quote_fields

    @quote_fields.setter
    def quote_fields(self, value: bool) -> None:
        self._quote_fields = bool(value)

    # ------------------------------------------------------------------
    # File IO
    # ------------------------------------------------------------------

    def load(
        self,
        path: Path | str | None = None,
        separator: str | None = None,
        comment_prefix: str | None = None,
    ) -> bool:
        """
        Load a CSV file, replacing all rows.

        **Functionally**:
          - Omitted arguments fall back to the current path, separator and
            comment prefix (so `load()` reloads the current file).
          - Reads the whole file through the TextStore first. Only if the read
            succeeds are the rows replaced and the path/separator/comment
            prefix stored as the new current values.

        Args:
            path: File to load. Omit to reload the current file.
            separator: Field separator string, e.g. "," or ";" or "::".
            comment_prefix: Lines starting with this are skipped.

        Returns:
            True if the file was read, False if it could not be (the table is
            left exactly as it was).
        """
        path = str(path) if path else self._path
        separator = self._field_separator if separator is None else separator
        comment_prefix = self._comment_prefix if comment_prefix is None else comment_prefix

        if not path:
            logger.warning("Cannot load CSV: no file path given and no current path set")
            return False

        try:
            text = self._store.read_text(path)
        except IO_ERRORS as e:
            logger.warning("Cannot load CSV %s: %s", path, e)
            return False

        self._path = path
        self.load_text(text, separator, comment_prefix)
        logger.debug("Loaded %d rows from %s", len(self._rows), path)
        return True

    def save(
        self,
        path: Path | str | None = None,
        quote: bool | None = None,
        separator: str | None = None,
    ) -> bool:
        """
        Save all rows to a CSV file, creating folders as needed.

        Explicit `quote` and `separator` values apply to this call only; they
        do not change the table's stored defaults.

        Args:
            path: File to write. Omit to save to the current file.
            quote: Quote every field? Omit to use `quote_fields`.
            separator: Field separator string. Omit to use the current one.

        Returns:
            True if the file was written, False otherwise.
        """
        path = str(path) if path else self._path
        if not path:
            logger.warning("Cannot save CSV: no file path given and no current path set")
            return False

        text = self.to_text(quote=quote, separator=separator)
        try:
            self._store.ensure_directory(path)
            self._store.write_text(path, text)
        except IO_ERRORS as e:
            logger.warning("Cannot save CSV %s: %s", path, e)
            return False

        logger.debug("Saved %d rows to %s", len(self._rows), path)
        return True

    def create_file(self, path: Path | str) -> bool:
        """
        Create an empty CSV file and make it the current file.

        Creates any missing folders. On success the rows are cleared, so the
        table matches the (empty) file; on failure nothing changes.

        Returns:
            True if the file was created, False otherwise.
        """
        path = str(path)
        try:
            self._store.ensure_directory(path)
            self._store.write_text(path, "")
        except IO_ERRORS as e:
            logger.warning("Cannot create CSV %s: %s", path, e)
            return False

        self._path = path
        self._rows = []
        return True

    # ------------------------------------------------------------------
    # Text IO
    # ------------------------------------------------------------------

    def load_text(
        self,
        text: str,
        separator: str | None = None,
        comment_prefix: str | None = None,
    ) -> None:
        """
        Load rows from CSV text, replacing all rows.

        Like load(), explicit separator/comment prefix become the current
        values. The current path is not changed. Parsing never fails.
        """
        if separator is not None:
            self._field_separator = separator
        if comment_prefix is not None:
            self._comment_prefix = comment_prefix

        self._rows = [
            Row(fields)
            for fields in parse_lines(text, self._field_separator, self._comment_prefix)
        ]

    def to_text(self, quote: bool | None = None, separator: str | None = None) -> str:
        """Render all rows as CSV text (no trailing newline)."""
        quote = self._quote_fields if quote is None else quote
        separator = self._field_separator if separator is None else separator
        return format_lines(self._rows, separator, quote)

    # ------------------------------------------------------------------
    # Data IO
    # ------------------------------------------------------------------

    def load_rows(self, rows: Iterable[Row]) -> None:
        """Replace all rows with copies of the given Rows."""
        self._rows = [row.copy() for row in rows]

    def load_fields(self, rows: Iterable[Sequence[str]]) -> None:
        """Replace all rows; each inner sequence of strings becomes one Row."""
        self._rows = [Row(fields) for fields in rows]

    def add_row(self, row: Row | None = None) -> None:
        """Append a copy of `row`, or an empty row if omitted."""
        self._rows.append(Row() if row is None else row.copy())

    def set_row(self, index: int, row: Row) -> None:
        """Replace the row at `index`, adding empty rows first if needed."""
        self._check_index(index, "row")
        self.expand(index + 1, 0)
        self._rows[index] = row.copy()

    def get_row(self, index: int) -> Row:
        """Copy of the row at `index`, or an empty Row if out of range."""
        if not 0 <= index < len(self._rows):
            return Row()
        return self._rows[index].copy()

    def insert_row(self, index: int, row: Row) -> None:
        """
        Insert a copy of `row` at `index`, shifting later rows down.

        If `index` is past the end, empty rows are added so the new row lands
        exactly at `index`.
        """
        self._check_index(index, "row")
        self.expand(index, 0)
        self._rows.insert(index, row.copy())

    def remove_row(self, index: int) -> None:
        """Remove the row at `index`, shifting later rows up. No-op if out of range."""
        if 0 <= index < len(self._rows):
            del self._rows[index]

    def expand(self, rows: int, cols: int) -> None:
        """
        Grow to at least `rows` rows, each of the first `rows` having at least
        `cols` fields. New fields are empty strings. Never truncates.
        """
        while len(self._rows) < rows:
            self._rows.append(Row())
        for row in self._rows[:rows]:
            row.expand(cols)

    def clear(self) -> None:
        """Remove all rows. Path and dialect settings are kept."""
        self._rows = []

    # ------------------------------------------------------------------
    # Data access
    # ------------------------------------------------------------------

    def get_num_rows(self) -> int:
        return len(self._rows)

    def get_num_cols(self, row: int = 0) -> int:
        """Number of fields in `row`, or 0 if the row does not exist."""
        if not 0 <= row < len(self._rows):
            return 0
        return self._rows[row].size()

    def get_string(self, row: int, col: int) -> str:
        return self._read_row(row).get_string(col)

    def get_int(self, row: int, col: int) -> int:
        return self._read_row(row).get_int(col)

    def get_float(self, row: int, col: int) -> float:
        return self._read_row(row).get_float(col)

    def get_bool(self, row: int, col: int) -> bool:
        return self._read_row(row).get_bool(col)

    def set_string(self, row: int, col: int, value: str) -> None:
        self._write_row(row, col).set_string(col, value)

    def set_int(self, row: int, col: int, value: int) -> None:
        self._write_row(row, col).set_int(col, value)

    def set_float(self, row: int, col: int, value: float) -> None:
        self._write_row(row, col).set_float(col, value)

    def set_bool(self, row: int, col: int, value: bool) -> None:
        self._write_row(row, col).set_bool(col, value)

    def add_string(self, value: str) -> None:
        """Append a field to the last row (a row is created if the table is empty)."""
        self._last_row().add_string(value)

    def add_int(self, value: int) -> None:
        self._last_row().add_int(value)

    def add_float(self, value: float) -> None:
        self._last_row().add_float(value)

    def add_bool(self, value: bool) -> None:
        self._last_row().add_bool(value)

    def _read_row(self, row: int) -> Row:
        # reads never expand the table
        if not 0 <= row < len(self._rows):
            return _EMPTY_ROW
        return self._rows[row]

    def _write_row(self, row: int, col: int) -> Row:
        self._check_index(row, "row")
        self._check_index(col, "column")
        self.expand(row + 1, col + 1)
        return self._rows[row]

    def _last_row(self) -> Row:
        if not self._rows:
            self._rows.append(Row())
        return self._rows[-1]

    @staticmethod
    def _check_index(index: int, what: str) -> None:
        if index < 0:
            raise IndexError(f"Negative {what} index {index} is not allowed")

    # ------------------------------------------------------------------
    # Raw data access
    # ------------------------------------------------------------------

    def get_data(self) -> list[Row]:
        """Copies of all rows, in order."""
        return [row.copy() for row in self._rows]

    def to_lists(self) -> list[list[str]]:
        """All rows as plain lists of strings."""
        return [row.fields for row in self._rows]

    def at(self, index: int) -> Row:
        """Alias for get_row()."""
        return self.get_row(index)

    def front(self) -> Row:
        """Copy of the first row, or an empty Row if the table is empty."""
        return self.get_row(0)

    def back(self) -> Row:
        """Copy of the last row, or an empty Row if the table is empty."""
        return self.get_row(len(self._rows) - 1)

    def size(self) -> int:
        return len(self._rows)

    def empty(self) -> bool:
        return not self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def __reversed__(self) -> Iterator[Row]:
        return reversed(self._rows)

    def __repr__(self) -> str:
        return (
            f"Table(path={self._path!r}, rows={len(self._rows)}, "
            f"separator={self._field_separator!r}, comment_prefix={self._comment_prefix!r})"
        )

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------

    def trim(self) -> None:
        """Strip leading/trailing whitespace from every field of every row."""
        for row in self._rows:
            row.trim()

    def split_fields(self, line: str, separator: str | None = None) -> list[str]:
        """Split a line into fields using the current separator by default."""
        return split_fields(line, self._field_separator if separator is None else separator)

    def join_fields(
        self,
        fields: Iterable[str],
        separator: str | None = None,
        quote: bool = False,
    ) -> str:
        """
        Join fields into a line using the current separator by default.

        Fields are quoted only when `quote=True`, whether or not a separator
        is passed. Passing a separator alone does not switch quoting on.
        """
        return join_fields(fields, self._field_separator if separator is None else separator, quote)


# Shared read-only stand-in for missing rows; never handed out or mutated
_EMPTY_ROW = Row()
