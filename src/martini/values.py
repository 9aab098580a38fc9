import re

Value = int | float | str

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
# Digits in INT64_MIN, the longest 64-bit integer.
INT64_DIGITS = 19

RE_INTEGER = re.compile(r"[+-]?[0-9]+", flags=re.ASCII)
RE_FLOAT = re.compile(
    r"""
    [+-]?
    (?:
        # Decimal notation with an optional exponent (1.5, .5, 5., 1e10).
        (?: [0-9]+ \.? [0-9]* | \. [0-9]+ ) (?: [eE] [+-]? [0-9]+ )?
        # or special values.
        | inf | infinity | nan
    )
    """,
    flags=re.ASCII | re.IGNORECASE | re.VERBOSE,
)


def infer(text: str) -> Value:
    """Convert a raw property value into an int, float or str, in that order of preference.

    Integers must fit in a signed 64-bit range, otherwise they are parsed as floats.
    Unlike int() and float(), underscores and surrounding whitespace are not accepted.

    Args:
        text: The value, already trimmed and with quotes stripped.

    Returns:
        The typed value.
    """

    if RE_INTEGER.fullmatch(text):
        sign = "-" if text.startswith("-") else ""
        digits = text.lstrip("+-").lstrip("0") or "0"

        # Longer numbers cannot fit, and int() refuses very long strings.
        if len(digits) <= INT64_DIGITS:
            number = int(sign + digits)
            if INT64_MIN <= number <= INT64_MAX:
                return number

    if RE_FLOAT.fullmatch(text):
        return float(text)

    return text


def type_name(value: Value) -> str:
    """Get the INI type name of a value (integer, float or string)."""

    if isinstance(value, int):
        return "integer"
    elif isinstance(value, float):
        return "float"

    return "string"
