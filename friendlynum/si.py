"""SI prefixes: choosing, formatting and parsing them."""

import math
import re

from .ftoa import ftoa, ftoa_with_digits

__all__ = ["compute_si", "si", "si_with_digits", "parse_si"]

_PREFIXES = {
    -30: "q",  # quecto
    -27: "r",  # ronto
    -24: "y",  # yocto
    -21: "z",  # zepto
    -18: "a",  # atto
    -15: "f",  # femto
    -12: "p",  # pico
    -9: "n",  # nano
    -6: "µ",  # micro
    -3: "m",  # milli
    0: "",
    3: "k",  # kilo
    6: "M",  # mega
    9: "G",  # giga
    12: "T",  # tera
    15: "P",  # peta
    18: "E",  # exa
    21: "Z",  # zetta
    24: "Y",  # yotta
    27: "R",  # ronna
    30: "Q",  # quetta
}

_MULTIPLIERS = {prefix: 10.0**exponent for exponent, prefix in _PREFIXES.items()}

_PARSE = re.compile(r"([\-0-9.]+)[\t\n\f\r ]?([" + "".join(_PREFIXES.values()) + r"]?)(.*)")


def _scale(magnitude: float, exponent: int) -> float:
    power = 10.0**exponent
    return magnitude / power if power else math.inf


def compute_si(value: float) -> tuple[float, str]:
    """Pick the SI prefix for ``value`` and scale the value to it.

    e.g. 2.2345e-12 -> (2.2345, 'p')
    """
    if value == 0:
        return 0.0, ""
    if not math.isfinite(value):
        return math.copysign(math.nan, value), ""
    magnitude = abs(value)
    exponent = math.floor(math.log(magnitude) / math.log(10))
    exponent = (exponent // 3) * 3
    scaled = _scale(magnitude, exponent)
    # Exactly 1000 belongs to the next prefix up: 1 M rather than 1000 k.
    if scaled == 1000.0:
        exponent += 3
        scaled = _scale(magnitude, exponent)
    return math.copysign(scaled, value), _PREFIXES.get(exponent, "")


def si(value: float, unit: str) -> str:
    """Format ``value`` with an SI prefix, e.g. (2.2345e-12, 'F') -> '2.2345 pF'."""
    scaled, prefix = compute_si(value)
    return f"{ftoa(scaled)} {prefix}{unit}"


def si_with_digits(value: float, decimals: int, unit: str) -> str:
    """Like :func:`si` with at most ``decimals`` decimal places, e.g. (2.2345e-12, 2, 'F') -> '2.23 pF'."""
    scaled, prefix = compute_si(value)
    return f"{ftoa_with_digits(scaled, decimals)} {prefix}{unit}"


def parse_si(text: str) -> tuple[float, str]:
    """Parse SI text back into the number and its unit, e.g. '2.2345 pF' -> (2.2345e-12, 'F').

    Raises ValueError when the text does not start with a number.
    """
    found = _PARSE.match(text)
    if found is None:
        raise ValueError("invalid input")
    number, prefix, unit = found.groups()
    try:
        base = float(number)
    except ValueError:
        raise ValueError(f"invalid number: {number!r}") from None
    return base * _MULTIPLIERS[prefix], unit