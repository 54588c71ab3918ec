"""
Tests for csvgrid/parsing/values.py

Parsing never raises: invalid text reads as the zero value.
"""

import math

import pytest

from csvgrid.parsing.values import (
    ZERO_VALUES,
    format_bool,
    format_float,
    format_int,
    parse_bool,
    parse_float,
    parse_int,
)


@pytest.mark.parametrize("text,expected", [
    ("42", 42),
    ("-7", -7),
    ("  12 ", 12),
    ("3.7", 3),
    ("-2.5", -2),
    ("1e3", 1000),
    ("", 0),
    ("abc", 0),
    ("12abc", 0),
    ("nan", 0),
    ("inf", 0),
])
def test_parse_int(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text,expected", [
    ("3.5", 3.5),
    (" -0.25 ", -0.25),
    ("10", 10.0),
    ("1e-3", 0.001),
    ("", 0.0),
    ("x1.0", 0.0),
])
def test_parse_float(text, expected):
    assert parse_float(text) == expected


def test_parse_float_accepts_infinity():
    assert math.isinf(parse_float("inf"))


@pytest.mark.parametrize("text", ["1", "true", "TRUE", "True", " true ", "tRuE"])
def test_parse_bool_true_tokens(text):
    assert parse_bool(text) is True


@pytest.mark.parametrize("text", ["0", "false", "", "yes", "on", "2", "truthy", "t"])
def test_parse_bool_everything_else_is_false(text):
    assert parse_bool(text) is False


def test_format_values():
    assert format_int(42) == "42"
    assert format_float(0.1) == "0.1"
    assert format_float(2) == "2.0"
    assert format_bool(True) == "1"
    assert format_bool(False) == "0"


def test_formatted_values_parse_back():
    assert parse_int(format_int(-99)) == -99
    assert parse_float(format_float(1 / 3)) == 1 / 3
    assert parse_bool(format_bool(True)) is True
    assert parse_bool(format_bool(False)) is False


def test_zero_values():
    assert ZERO_VALUES == {"int": 0, "float": 0.0, "bool": False, "string": ""}
