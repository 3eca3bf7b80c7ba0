"""Ordinal numbers: 1st, 2nd, 3rd and so on."""

__all__ = ["ordinal"]

_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def ordinal(x: int) -> str:
    """Return ``x`` with its English ordinal suffix, e.g. 3 -> '3rd'."""
    suffix = "th"
    # Negative numbers always take "th".
    if x >= 0 and x % 100 not in (11, 12, 13):
        suffix = _SUFFIXES.get(x % 10, "th")
    return f"{x}{suffix}"