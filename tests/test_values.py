import math

import pytest

from martini.values import infer, type_name


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", 42),
        ("007", 7),
        ("-3", -3),
        ("+5", 5),
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
    ],
)
def test_infer_integer(text, expected):
    value = infer(text)
    assert type(value) is int
    assert value == expected


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0.5", 0.5),
        (".5", 0.5),
        ("5.", 5.0),
        ("-1.25", -1.25),
        ("1e3", 1000.0),
        ("2.5E-1", 0.25),
        # Out of 64-bit range.
        ("9223372036854775808", 9223372036854775808.0),
    ],
)
def test_infer_float(text, expected):
    value = infer(text)
    assert type(value) is float
    assert value == expected


def test_infer_float_special():
    assert infer("inf") == math.inf
    assert infer("-Infinity") == -math.inf
    assert math.isnan(infer("NaN"))


@pytest.mark.parametrize(
    "text",
    ["bob", "", "1_000", " 1", "1.2.3", "0x10", "١٢", "1e", "true"],
)
def test_infer_string(text):
    assert infer(text) == text


def test_type_name():
    assert type_name(1) == "integer"
    assert type_name(1.0) == "float"
    assert type_name("1") == "string"


def test_infer_very_long_integer():
    # Too long for a 64-bit integer, and longer than int() accepts.
    value = infer("1" * 5000)
    assert value == math.inf


def test_infer_zero_padded_integer():
    value = infer("0" * 5000 + "7")
    assert type(value) is int
    assert value == 7

    assert infer("-" + "0" * 5000 + "42") == -42
    assert infer("0" * 30) == 0


def test_infer_twenty_digits():
    value = infer("10000000000000000000")
    assert type(value) is float
    assert value == 1e19
