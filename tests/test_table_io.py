"""
Tests for Table load/save orchestration (csvgrid/table/table.py).

Covers:
  - Loading files and text (comments, blank lines, separators).
  - Saving with and without quotes, folder creation.
  - The load-sets-defaults / save-uses-once asymmetry.
  - Failure handling: failed loads and saves leave the table unchanged.
  - Round-trip correctness.

All tests use temporary directories (via tmp_path fixture) or a mocked
TextStore.
"""

from unittest.mock import Mock

import pytest

from csvgrid.config.settings import TableSettings
from csvgrid.table.table import Table


@pytest.fixture
def table():
    return Table(settings=TableSettings())


def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


# ============================================================================
# load
# ============================================================================

def test_load_reads_rows(table, tmp_path):
    path = write(tmp_path / "data.csv", "a,b,c\n1,2,3\n")

    assert table.load(path) is True
    assert table.to_lists() == [["a", "b", "c"], ["1", "2", "3"]]
    assert table.path == str(path)


def test_load_skips_comment_lines(table, tmp_path):
    path = write(tmp_path / "data.csv", "# comment, with, fields\na,b\n#another\nc,d")

    table.load(path)
    assert table.to_lists() == [["a", "b"], ["c", "d"]]


def test_load_keeps_blank_lines_as_empty_rows(table, tmp_path):
    path = write(tmp_path / "data.csv", "a\n\nb\n")

    table.load(path)
    assert table.to_lists() == [["a"], [""], ["b"]]


def test_load_handles_crlf(table, tmp_path):
    path = write(tmp_path / "data.csv", "a,b\r\nc,d\r\n")

    table.load(path)
    assert table.to_lists() == [["a", "b"], ["c", "d"]]


def test_load_sets_separator_and_comment_prefix(table, tmp_path):
    path = write(tmp_path / "data.csv", "// note\na;b\n")

    table.load(path, ";", "//")
    assert table.to_lists() == [["a", "b"]]
    assert table.field_separator == ";"
    assert table.comment_prefix == "//"


def test_load_without_arguments_reloads_current_file(table, tmp_path):
    path = write(tmp_path / "data.csv", "a;b\n")
    table.load(path, ";")
    write(path, "c;d\n")

    assert table.load() is True
    assert table.to_lists() == [["c", "d"]]


def test_load_replaces_existing_rows(table, tmp_path):
    table.load_fields([["old"], ["rows"]])
    path = write(tmp_path / "data.csv", "new")

    table.load(path)
    assert table.to_lists() == [["new"]]


def test_load_missing_file_preserves_state(table, tmp_path):
    good = write(tmp_path / "good.csv", "a,b\n")
    table.load(good)

    assert table.load(tmp_path / "missing.csv", ";", "//") is False
    assert table.to_lists() == [["a", "b"]]
    assert table.path == str(good)
    assert table.field_separator == ","
    assert table.comment_prefix == "#"


def test_load_without_any_path_fails(table):
    assert table.load() is False


def test_load_permission_error_preserves_state():
    store = Mock()
    store.read_text.side_effect = PermissionError("denied")
    table = Table(settings=TableSettings(), store=store)
    table.load_fields([["keep"]])

    assert table.load("locked.csv") is False
    assert table.to_lists() == [["keep"]]
    assert table.path == ""


def test_load_undecodable_file_fails(tmp_path):
    path = tmp_path / "latin.csv"
    path.write_bytes(b"caf\xe9,1\n")
    table = Table(settings=TableSettings(encoding="utf-8"))

    assert table.load(path) is False

    latin = Table(settings=TableSettings(encoding="latin-1"))
    assert latin.load(path) is True
    assert latin.get_string(0, 0) == "café"


def test_load_text_never_touches_store():
    store = Mock()
    table = Table(settings=TableSettings(), store=store)

    table.load_text("x|y\n# c\n", separator="|")
    assert table.to_lists() == [["x", "y"]]
    assert table.field_separator == "|"
    store.read_text.assert_not_called()


# ============================================================================
# save
# ============================================================================

def test_save_writes_unquoted_by_default(table, tmp_path):
    table.load_fields([["a", "b"], ["1", "2"]])
    path = tmp_path / "out.csv"

    assert table.save(path) is True
    assert path.read_bytes() == b"a,b\n1,2"


def test_save_with_quotes(table, tmp_path):
    table.load_fields([["1.23", 'say "hi"']])
    path = tmp_path / "out.csv"

    table.save(path, quote=True)
    assert path.read_text(encoding="utf-8") == '"1.23","say ""hi"""'


def test_save_creates_missing_directories(table, tmp_path):
    table.load_fields([["a"]])
    path = tmp_path / "nested" / "deeper" / "out.csv"

    assert table.save(path) is True
    assert path.exists()


def test_save_without_path_uses_current_file(table, tmp_path):
    path = write(tmp_path / "data.csv", "a,b\n")
    table.load(path)
    table.set_string(0, 1, "z")

    assert table.save() is True
    assert path.read_text(encoding="utf-8") == "a,z"


def test_save_without_any_path_fails(table):
    table.load_fields([["a"]])
    assert table.save() is False


def test_save_separator_is_used_once(table, tmp_path):
    table.load_fields([["a", "b"]])

    table.save(tmp_path / "semi.csv", separator=";")
    table.save(tmp_path / "default.csv")

    assert (tmp_path / "semi.csv").read_text(encoding="utf-8") == "a;b"
    assert (tmp_path / "default.csv").read_text(encoding="utf-8") == "a,b"
    assert table.field_separator == ","


def test_save_quote_is_used_once(table, tmp_path):
    table.load_fields([["a"]])

    table.save(tmp_path / "q.csv", quote=True)
    table.save(tmp_path / "plain.csv")

    assert (tmp_path / "q.csv").read_text(encoding="utf-8") == '"a"'
    assert (tmp_path / "plain.csv").read_text(encoding="utf-8") == "a"
    assert table.quote_fields is False


def test_save_uses_quote_fields_default(tmp_path):
    table = Table(settings=TableSettings(quote_fields=True))
    table.load_fields([["a", "b"]])

    table.save(tmp_path / "out.csv")
    assert (tmp_path / "out.csv").read_text(encoding="utf-8") == '"a","b"'


def test_save_does_not_change_current_path(table, tmp_path):
    path = write(tmp_path / "data.csv", "a\n")
    table.load(path)

    table.save(tmp_path / "copy.csv")
    assert table.path == str(path)


def test_save_write_failure_returns_false_and_keeps_rows():
    store = Mock()
    store.write_text.side_effect = OSError("disk full")
    table = Table(settings=TableSettings(), store=store)
    table.load_fields([["a", "b"]])

    assert table.save("out.csv") is False
    assert table.to_lists() == [["a", "b"]]
    store.ensure_directory.assert_called_once_with("out.csv")


def test_save_directory_failure_returns_false():
    store = Mock()
    store.ensure_directory.side_effect = PermissionError("read-only")
    table = Table(settings=TableSettings(), store=store)
    table.load_fields([["a"]])

    assert table.save("ro/out.csv") is False
    store.write_text.assert_not_called()


def test_to_text_matches_saved_text(table):
    table.load_fields([["a", "b"], ["c"]])
    assert table.to_text() == "a,b\nc"
    assert table.to_text(quote=True, separator="\t") == '"a"\t"b"\n"c"'


# ============================================================================
# create_file
# ============================================================================

def test_create_file_writes_empty_file_and_sets_path(table, tmp_path):
    table.load_fields([["old"]])
    path = tmp_path / "new" / "empty.csv"

    assert table.create_file(path) is True
    assert path.read_text(encoding="utf-8") == ""
    assert table.path == str(path)
    assert table.get_num_rows() == 0


def test_create_file_failure_keeps_state():
    store = Mock()
    store.write_text.side_effect = PermissionError("denied")
    table = Table(settings=TableSettings(), store=store)
    table.load_fields([["keep"]])

    assert table.create_file("x.csv") is False
    assert table.to_lists() == [["keep"]]
    assert table.path == ""


# ============================================================================
# Round trips
# ============================================================================

def test_round_trip_plain_values(table, tmp_path):
    rows = [["id", "name", "score"], ["1", "ann", "3.5"], ["2", " bob ", ""]]
    table.load_fields(rows)
    path = tmp_path / "rt.csv"

    table.save(path)
    reloaded = Table(settings=TableSettings())
    reloaded.load(path)

    assert reloaded.to_lists() == rows


def test_round_trip_quoted_values(table, tmp_path):
    rows = [['a,b', 'say "hi"', '"', ''], ['#not a comment', 'x']]
    table.load_fields(rows)
    path = tmp_path / "rt.csv"

    table.save(path, quote=True)
    reloaded = Table(settings=TableSettings())
    reloaded.load(path)

    assert reloaded.to_lists() == rows


def test_round_trip_multi_character_separator(tmp_path):
    table = Table(settings=TableSettings(field_separator="::"))
    rows = [["a", "b:c"], ["d", ""]]
    table.load_fields(rows)
    path = tmp_path / "rt.csv"

    table.save(path)
    reloaded = Table(settings=TableSettings())
    reloaded.load(path, "::")

    assert reloaded.to_lists() == rows


def test_unquoted_separator_in_field_is_lossy(table):
    """Fields are not escaped when quote=False; a separator splits on reload."""
    table.load_fields([["a,b"]])
    text = table.to_text()

    reloaded = Table(settings=TableSettings())
    reloaded.load_text(text)
    assert reloaded.to_lists() == [["a", "b"]]


def test_newline_in_field_is_lossy_even_when_quoted(table):
    """Lines are split before fields are tokenized, so quoting cannot keep a newline."""
    table.load_fields([["a\nb", "c"]])
    text = table.to_text(quote=True)
    assert text == '"a\nb","c"'

    reloaded = Table(settings=TableSettings())
    reloaded.load_text(text)
    assert reloaded.to_lists() == [["a"], ['b"', "c"]]
    assert reloaded.get_num_rows() == 2
