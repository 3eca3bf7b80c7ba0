"""Thousands separators for integers, floats and exact decimals."""

import itertools
import math
from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from fractions import Fraction

from .ftoa import strip_trailing_digits

__all__ = ["comma", "commaf", "commaf_with_digits", "big_comma", "big_commaf"]

_BIG_FLOAT_PRECISION = 53


def _group_thousands(digits: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i : i + 3] for i in range(head, len(digits), 3))
    return ",".join(groups)


def _strip_fraction_zeros(text: str) -> str:
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _group_number_text(sign: str, text: str) -> str:
    integer, point, fraction = text.partition(".")
    result = sign + _group_thousands(integer)
    if point:
        result += "." + fraction
    return result


def comma(v: int) -> str:
    """Format an integer with commas every three digits, e.g. 834142 -> '834,142'."""
    return f"{int(v):,}"


def _shortest_float_text(v: float) -> str:
    """Shortest fixed-point text that reads back as the same float."""
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "+Inf" if v > 0 else "-Inf"
    return _strip_fraction_zeros(format(Decimal(repr(v)), "f"))


def commaf(v: float) -> str:
    """Format a float with commas every three integer digits, e.g. 834142.32 -> '834,142.32'."""
    v = float(v)
    sign = ""
    if v < 0:
        sign = "-"
        v = -v
    return _group_number_text(sign, _shortest_float_text(v))


def commaf_with_digits(f: float, decimals: int) -> str:
    """Like :func:`commaf` but keeps at most ``decimals`` decimal places."""
    return strip_trailing_digits(commaf(f), decimals)


def big_comma(n: int) -> str:
    """Format an integer of any size with commas every three digits."""
    return f"{int(n):,}"


def _shortest_binary_decimal(x: float, precision: int) -> Decimal:
    """Shortest decimal that rounds back to ``x`` held with ``precision`` mantissa bits."""
    if x == 0:
        return Decimal(0)
    mantissa, exponent = math.frexp(x)
    # One bit more than the precision, so the lowest bit stands for half an ulp.
    scaled = int(mantissa * (1 << (precision + 1)))
    unit = Fraction(2) ** (exponent - precision - 1)
    lower = (scaled - 1) * unit
    upper = (scaled + 1) * unit
    inclusive = scaled & 2 == 0
    exact = Decimal(x)
    for digits in itertools.count(1):
        with localcontext() as ctx:
            ctx.prec = digits
            ctx.rounding = ROUND_HALF_EVEN
            candidate = +exact
        value = Fraction(candidate)
        if lower < value < upper or (inclusive and value in (lower, upper)):
            return candidate
    raise AssertionError("unreachable")


def _big_float_text(v) -> str:
    if isinstance(v, Decimal):
        if not v.is_finite():
            raise ValueError(f"cannot format non-finite value: {v}")
        return _strip_fraction_zeros(format(v, "f"))
    if isinstance(v, int):
        return str(v)
    v = float(v)
    if not math.isfinite(v):
        raise ValueError(f"cannot format non-finite value: {v}")
    decimal_value = _shortest_binary_decimal(v, _BIG_FLOAT_PRECISION)
    return _strip_fraction_zeros(format(decimal_value, "f"))


def big_commaf(v) -> str:
    """Format an arbitrary-precision number with commas every three integer digits.

    Floats are treated as 53-bit binary values and printed with the
    shortest digits that identify them at that precision; Decimals and
    ints are printed exactly.
    """
    sign = ""
    if v < 0:
        sign = "-"
        v = -v
    return _group_number_text(sign, _big_float_text(v))