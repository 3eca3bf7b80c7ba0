"""Number formatting driven by a small format pattern such as '#,###.##'."""

import math
import sys

__all__ = ["format_float", "format_integer"]

_MULTIPLIERS = (
    1.0,
    10.0,
    100.0,
    1000.0,
    10000.0,
    100000.0,
    1000000.0,
    10000000.0,
    100000000.0,
    1000000000.0,
)

_ROUNDERS = (
    0.5,
    0.05,
    0.005,
    0.0005,
    0.00005,
    0.000005,
    0.0000005,
    0.00000005,
    0.000000005,
    0.0000000005,
)

_MAX_FLOAT = sys.float_info.max


def _insert_separators(digits: str, separator: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    return separator.join(groups)


def format_float(fmt: str, n: float) -> str:
    """Format ``n`` according to ``fmt``.

    The pattern sets the thousands separator, the decimal separator and
    the precision; '#' and '0' are digit placeholders and a leading '+'
    asks for an explicit positive sign. Given 12345.6789:

    ``"#,###.##"`` gives ``"12,345.68"``, ``"#,###."`` gives ``"12,346"``,
    ``"#.###,######"`` gives ``"12.345,678900"`` and the empty pattern
    gives ``"12,345.68"``. At most 9 decimal places are allowed.

    Raises ValueError for a malformed pattern.
    """
    if math.isnan(n):
        return "NaN"
    if n > _MAX_FLOAT:
        return "Infinity"
    if n < -_MAX_FLOAT:
        return "-Infinity"

    precision = 2
    decimal_str = "."
    thousand_str = ","
    positive_str = ""
    negative_str = "-"

    if fmt:
        precision = 9
        thousand_str = ""

        directives = [i for i, char in enumerate(fmt) if char not in "#0"]
        if directives:
            if directives[0] == 0:
                if fmt[0] != "+":
                    raise ValueError("format_float(): invalid positive sign directive")
                positive_str = "+"
                directives = directives[1:]

            if len(directives) == 2:
                if directives[1] - directives[0] != 4:
                    raise ValueError(
                        "format_float(): thousands separator directive must be "
                        "followed by 3 digit-specifiers"
                    )
                thousand_str = fmt[directives[0]]
                directives = directives[1:]

            if len(directives) == 1:
                decimal_str = fmt[directives[0]]
                precision = len(fmt) - directives[0] - 1

    if precision >= len(_ROUNDERS):
        raise ValueError(f"format_float(): precision {precision} exceeds 9 digits")

    if n >= 0.000000001:
        sign_str = positive_str
    elif n <= -0.000000001:
        sign_str = negative_str
        n = -n
    else:
        sign_str = ""
        n = 0.0

    fraction, integer = math.modf(n + _ROUNDERS[precision])

    int_str = str(int(integer))
    if thousand_str:
        int_str = _insert_separators(int_str, thousand_str)

    if precision == 0:
        return sign_str + int_str

    frac_str = str(int(fraction * _MULTIPLIERS[precision])).rjust(precision, "0")
    return sign_str + int_str + decimal_str + frac_str


def format_integer(fmt: str, n: int) -> str:
    """Format an integer with :func:`format_float`."""
    return format_float(fmt, float(n))