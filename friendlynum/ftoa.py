"""Float-to-string helpers that drop trailing zeros and excess digits."""

import math

__all__ = ["ftoa", "ftoa_with_digits", "strip_trailing_digits", "strip_trailing_zeros"]


def _format_fixed(num: float) -> str:
    """Render ``num`` with six decimal places, spelling out NaN and infinities."""
    if math.isnan(num):
        return "NaN"
    if math.isinf(num):
        return "+Inf" if num > 0 else "-Inf"
    return f"{num:.6f}"


def strip_trailing_zeros(s: str) -> str:
    """Remove zeros after the decimal point, and the point itself if nothing is left."""
    if "." not in s:
        return s
    stripped = s.rstrip("0")
    if stripped.endswith("."):
        stripped = stripped[:-1]
    # The first character is always kept.
    return stripped or s[:1]


def strip_trailing_digits(s: str, digits: int) -> str:
    """Keep at most ``digits`` characters after the decimal point."""
    point = s.find(".")
    if point < 0:
        return s
    if digits <= 0:
        return s[:point]
    end = point + 1 + digits
    if end >= len(s):
        return s
    return s[:end]


def ftoa(num: float) -> str:
    """Convert a float to a string with no trailing zeros."""
    return strip_trailing_zeros(_format_fixed(num))


def ftoa_with_digits(num: float, digits: int) -> str:
    """Convert a float to a string with at most ``digits`` decimals and no trailing zeros."""
    return strip_trailing_zeros(strip_trailing_digits(_format_fixed(num), digits))