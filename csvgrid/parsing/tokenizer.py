"""
Field tokenizer: converts between raw text lines and lists of field strings.

**Conceptual**: This module is the only place that knows the CSV text format.
Tables, actions and tests all go through these functions, so quoting rules
live in one spot.

**Parsing rules** (lenient, never raises):
  - Whitespace is preserved verbatim, inside and outside quotes.
  - A field is quoted only when its first character is `"`. The opening and
    closing quotes are removed; `""` inside a quoted field is one literal `"`.
  - Quoted content may contain the separator.
  - Excel writes a field whose value is wrapped in quotes as `""hello""`.
    A field starting with `""` followed by an ordinary character is read
    unquoted, with each `""` in that field collapsing to `"`, giving
    `"hello"`. In any other unquoted field quotes are kept verbatim, so
    `say ""hi""` stays `say ""hi""`.
  - An empty line is one empty field, never zero fields.

**Writing rules**:
  - Quoting is all-or-nothing per call: every field is wrapped in `"` with
    inner quotes doubled, or fields are written as-is.
  - Unquoted output is not escaped. A separator or quote inside a field
    survives a reload only when written with quote=True.
  - Newlines inside a field never survive a reload, quoted or not: documents
    are split into lines before fields are tokenized, so the field is broken
    across two rows.

See https://en.wikipedia.org/wiki/Comma-separated_values for format info.
"""

from typing import Iterable, Sequence

QUOTE = '"'
ESCAPED_QUOTE = '""'


def _starts_excel_literal(line: str, start: int, separator: str) -> bool:
    """True if the field at `start` is an unquoted Excel `""value""` field."""
    if not line.startswith(ESCAPED_QUOTE, start):
        return False
    after = start + 2
    if after >= len(line):
        return False
    if line[after] == QUOTE:
        return False
    if separator and line.startswith(separator, after):
        return False
    return True


def split_fields(line: str, separator: str = ",") -> list[str]:
    """
    Split one line into its fields.

    **Functionally**:
      - Scans the line once, tracking whether the scan is inside quotes.
      - Outside quotes the separator (which may be several characters long)
        ends the current field; it is never part of the field content.
      - An empty separator disables splitting: the whole line is one field.

    Args:
        line: Raw text line without its trailing newline.
        separator: Field separator string, default comma ",".

    Returns:
        List of field strings. Always contains at least one field.

    Example:
        >>> split_fields('a,"b,c",d')
        ['a', 'b,c', 'd']
        >>> split_fields('a,""x""')
        ['a', '"x"']
        >>> split_fields('')
        ['']
    """
    if not separator:
        return [line]

    fields: list[str] = []
    field: list[str] = []
    in_quotes = False
    excel_literal = False
    at_field_start = True
    i = 0
    n = len(line)

    while i < n:
        if at_field_start:
            at_field_start = False
            excel_literal = _starts_excel_literal(line, i, separator)
            if line[i] == QUOTE and not excel_literal:
                in_quotes = True
                i += 1
                continue

        c = line[i]
        if in_quotes:
            if c == QUOTE:
                if line.startswith(ESCAPED_QUOTE, i):
                    field.append(QUOTE)
                    i += 2
                else:
                    in_quotes = False
                    i += 1
                continue
            field.append(c)
            i += 1
        elif line.startswith(separator, i):
            fields.append("".join(field))
            field = []
            at_field_start = True
            i += len(separator)
        elif excel_literal and line.startswith(ESCAPED_QUOTE, i):
            field.append(QUOTE)
            i += 2
        else:
            field.append(c)
            i += 1

    fields.append("".join(field))
    return fields


def quote_field(field: str) -> str:
    """Wrap a field in double quotes, doubling any quotes inside it."""
    return QUOTE + field.replace(QUOTE, ESCAPED_QUOTE) + QUOTE


def join_fields(fields: Iterable[str], separator: str = ",", quote: bool = False) -> str:
    """
    Join fields into one line.

    Args:
        fields: Field strings, in column order.
        separator: Field separator string, default comma ",".
        quote: Quote every field (True) or write fields as-is (False).

    Returns:
        The row as a single line, without a trailing newline.

    Example:
        >>> join_fields(["a", "b,c"], quote=True)
        '"a","b,c"'
        >>> join_fields(["a", 'x"y'], quote=True)
        '"a","x""y"'
    """
    if quote:
        return separator.join(quote_field(field) for field in fields)
    return separator.join(fields)


def split_lines(text: str) -> list[str]:
    """
    Split text into lines on `\\n`.

    One trailing `\\r` is removed from each line so CRLF files read the same
    as LF files. A newline at the very end of the text does not produce an
    extra empty line, and empty text has no lines at all.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def is_comment_line(line: str, comment_prefix: str) -> bool:
    """True if the line starts with the comment prefix (empty prefix: never)."""
    return bool(comment_prefix) and line.startswith(comment_prefix)


def parse_lines(text: str, separator: str = ",", comment_prefix: str = "#") -> list[list[str]]:
    """
    Tokenize a whole document.

    Comment lines are dropped before tokenizing. Blank lines are kept and
    become a row with one empty field.

    Args:
        text: Document text.
        separator: Field separator string.
        comment_prefix: Comment line prefix; empty disables comments.

    Returns:
        One list of fields per kept line, in document order.
    """
    return [
        split_fields(line, separator)
        for line in split_lines(text)
        if not is_comment_line(line, comment_prefix)
    ]


def format_lines(rows: Iterable[Sequence[str]], separator: str = ",", quote: bool = False) -> str:
    """Join rows into document text, one line per row, separated by `\\n`."""
    return "\n".join(join_fields(row, separator, quote) for row in rows)
