"""
A single table row: an ordered list of string fields with typed accessors.

**Conceptual**: Fields are always stored as strings, exactly as they were read
(or as the typed setters formatted them). Typed getters parse on demand and
fall back to the type's zero value, so reading never fails:
  - Out-of-range index -> 0, 0.0, False or "".
  - Text that is not a valid number/boolean -> the zero value.

Writes are different: a Row does not grow on its own, so `set_*` on a missing
index raises IndexError. Table pre-expands rows before delegating writes, which
is how table-level writes always succeed.

No width invariant is enforced here; a row is as wide as its caller made it.
"""

from typing import Iterable, Iterator

from csvgrid.parsing.values import (
    format_bool,
    format_float,
    format_int,
    format_string,
    parse_bool,
    parse_float,
    parse_int,
)


class Row:
    """
    Ordered, index-addressable sequence of string fields.

    **Usage**:
        row = Row(["id", "3.5", "true"])
        row.get_float(1)   # 3.5
        row.get_bool(2)    # True
        row.get_int(9)     # 0 (out of range)
        row.add_int(42)    # appends "42"
    """

    def __init__(self, fields: Iterable[str] | None = None):
        """
        Args:
            fields: Initial field values. Non-string values are converted with
                   str(). The iterable is copied; the Row never shares storage
                   with its caller.
        """
        self._fields: list[str] = [] if fields is None else [format_string(f) for f in fields]

    # -- size and raw access ------------------------------------------------

    def size(self) -> int:
        """Number of fields in this row."""
        return len(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __eq__(self, other) -> bool:
        if isinstance(other, Row):
            return self._fields == other._fields
        return NotImplemented

    def __repr__(self) -> str:
        return f"Row({self._fields!r})"

    @property
    def fields(self) -> list[str]:
        """Copy of the field values."""
        return list(self._fields)

    def copy(self) -> "Row":
        return Row(self._fields)

    def clear(self) -> None:
        self._fields.clear()

    def expand(self, cols: int) -> None:
        """Pad with empty strings until the row has at least `cols` fields."""
        missing = cols - len(self._fields)
        if missing > 0:
            self._fields.extend([""] * missing)

    def trim(self) -> None:
        """Strip leading and trailing whitespace from every field in place."""
        self._fields = [f.strip() for f in self._fields]

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._fields)

    def _set(self, index: int, text: str) -> None:
        if not self._in_range(index):
            raise IndexError(
                f"Field index {index} out of range for row with {len(self._fields)} fields"
            )
        self._fields[index] = text

    # -- typed getters ------------------------------------------------------

    def get_string(self, index: int) -> str:
        """Field text, or "" if index is out of range."""
        if not self._in_range(index):
            return ""
        return self._fields[index]

    def get_int(self, index: int) -> int:
        """Field as int, or 0 if out of range or not a number."""
        if not self._in_range(index):
            return 0
        return parse_int(self._fields[index])

    def get_float(self, index: int) -> float:
        """Field as float, or 0.0 if out of range or not a number."""
        if not self._in_range(index):
            return 0.0
        return parse_float(self._fields[index])

    def get_bool(self, index: int) -> bool:
        """Field as bool ("1"/"true", any case), or False if out of range."""
        if not self._in_range(index):
            return False
        return parse_bool(self._fields[index])

    # -- typed setters ------------------------------------------------------

    def set_string(self, index: int, value: str) -> None:
        self._set(index, format_string(value))

    def set_int(self, index: int, value: int) -> None:
        self._set(index, format_int(value))

    def set_float(self, index: int, value: float) -> None:
        self._set(index, format_float(value))

    def set_bool(self, index: int, value: bool) -> None:
        self._set(index, format_bool(value))

    # -- append -------------------------------------------------------------

    def add_string(self, value: str) -> None:
        self._fields.append(format_string(value))

    def add_int(self, value: int) -> None:
        self._fields.append(format_int(value))

    def add_float(self, value: float) -> None:
        self._fields.append(format_float(value))

    def add_bool(self, value: bool) -> None:
        self._fields.append(format_bool(value))
