"""Byte sizes in SI and IEC units, to and from human-readable text."""

import itertools
import math
import re
from decimal import Decimal
from fractions import Fraction

__all__ = [
    "format_bytes",
    "format_bytes_n",
    "format_ibytes",
    "format_ibytes_n",
    "parse_bytes",
    "big_bytes",
    "big_ibytes",
    "parse_big_bytes",
]

BYTE = 1

KIBYTE = 1 << 10
MIBYTE = 1 << 20
GIBYTE = 1 << 30
TIBYTE = 1 << 40
PIBYTE = 1 << 50
EIBYTE = 1 << 60
ZIBYTE = 1 << 70
YIBYTE = 1 << 80
RIBYTE = 1 << 90
QIBYTE = 1 << 100

KBYTE = 10**3
MBYTE = 10**6
GBYTE = 10**9
TBYTE = 10**12
PBYTE = 10**15
EBYTE = 10**18
ZBYTE = 10**21
YBYTE = 10**24
RBYTE = 10**27
QBYTE = 10**30

_SI_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB", "RB", "QB")
_IEC_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB", "RiB", "QiB")

# Fixed-width sizes stop at exa; arbitrary-size ones go up to quetta.
_FIXED_UNIT_COUNT = 7
_MAX_FIXED = 1 << 64

_PREFIX_LETTERS = "kmgtpezyrq"


def _size_table(letters: str) -> dict[str, int]:
    table = {"b": BYTE, "": BYTE}
    for power, letter in enumerate(letters, start=1):
        iec = 1024**power
        si = 1000**power
        table[f"{letter}ib"] = iec
        table[f"{letter}i"] = iec
        table[f"{letter}b"] = si
        table[letter] = si
    return table


_BYTES_TABLE = _size_table(_PREFIX_LETTERS[: _FIXED_UNIT_COUNT - 1])
_BIG_BYTES_TABLE = _size_table(_PREFIX_LETTERS)

_NUMBER = re.compile(r"\d+\.?\d*|\.\d+", re.ASCII)


def _split_size(s: str) -> tuple[str, str]:
    """Split text into its numeric part (commas removed) and its lower-cased unit."""
    length = sum(1 for _ in itertools.takewhile(lambda ch: ch.isdecimal() or ch in ".,", s))
    number = s[:length].replace(",", "")
    if not _NUMBER.fullmatch(number):
        raise ValueError(f"invalid number: {number!r}")
    unit = s[length:].strip().lower()
    return number, unit


def _check_fixed(s: int) -> int:
    s = int(s)
    if not 0 <= s < _MAX_FIXED:
        raise ValueError(f"size out of range for 64 bits: {s}")
    return s


def _count_digits(n: int) -> int:
    return 0 if n == 0 else len(str(abs(n)))


def _humanate_bytes(s: int, base: float, min_digits: int, units: tuple[str, ...]) -> str:
    if s < 10:
        return f"{s} B"
    exponent = math.floor(math.log(s) / math.log(base))
    unit = units[exponent]
    rounding = 10.0 ** (min_digits - 1)
    value = math.floor(s / base**exponent * rounding + 0.5) / rounding
    decimals = max(min_digits - _count_digits(int(value)), 0)
    return f"{value:.{decimals}f} {unit}"


def format_bytes(s: int) -> str:
    """SI size as text, e.g. 82854982 -> '83 MB'."""
    return _humanate_bytes(_check_fixed(s), 1000.0, 2, _SI_UNITS[:_FIXED_UNIT_COUNT])


def format_bytes_n(s: int, n: int) -> str:
    """SI size as text with ``n`` significant digits in all, e.g. (82854982, 3) -> '82.9 MB'."""
    return _humanate_bytes(_check_fixed(s), 1000.0, n, _SI_UNITS[:_FIXED_UNIT_COUNT])


def format_ibytes(s: int) -> str:
    """IEC size as text, e.g. 82854982 -> '79 MiB'."""
    return _humanate_bytes(_check_fixed(s), 1024.0, 2, _IEC_UNITS[:_FIXED_UNIT_COUNT])


def format_ibytes_n(s: int, n: int) -> str:
    """IEC size as text with ``n`` digits in all, e.g. (123456789, 6) -> '117.738 MiB'."""
    return _humanate_bytes(_check_fixed(s), 1024.0, n, _IEC_UNITS[:_FIXED_UNIT_COUNT])


def parse_bytes(s: str) -> int:
    """Parse a size such as '42 MB' or '42 mib' into a byte count below 2**64.

    Raises ValueError for a malformed number, an unknown unit or a result
    that does not fit in 64 bits.
    """
    number, unit = _split_size(s)
    value = float(number)
    multiplier = _BYTES_TABLE.get(unit)
    if multiplier is None:
        raise ValueError(f"unhandled size name: {unit}")
    value *= float(multiplier)
    if value >= float(_MAX_FIXED):
        raise ValueError(f"too large: {s}")
    return int(value)


def _order_of_magnitude(n: int, base: int, max_magnitude: int) -> tuple[float, int]:
    magnitude = 0
    remainder = 0
    while n >= base:
        n, remainder = divmod(n, base)
        magnitude += 1
        if magnitude == max_magnitude and max_magnitude >= 0:
            break
    return float(n) + remainder / base, magnitude


def _humanate_big_bytes(s: int, base: int, units: tuple[str, ...]) -> str:
    if s < 10:
        return f"{s} B"
    value, magnitude = _order_of_magnitude(s, base, len(units) - 1)
    decimals = 1 if value < 10 else 0
    return f"{value:.{decimals}f} {units[magnitude]}"


def big_bytes(s: int) -> str:
    """SI size of any magnitude as text, e.g. 82854982 -> '83 MB'."""
    return _humanate_big_bytes(int(s), 1000, _SI_UNITS)


def big_ibytes(s: int) -> str:
    """IEC size of any magnitude as text, e.g. 82854982 -> '79 MiB'."""
    return _humanate_big_bytes(int(s), 1024, _IEC_UNITS)


def parse_big_bytes(s: str) -> int:
    """Parse a size such as '16.5 ZiB' exactly into a byte count of any magnitude.

    Raises ValueError for a malformed number or an unknown unit.
    """
    number, unit = _split_size(s)
    value = Fraction(Decimal(number))
    multiplier = _BIG_BYTES_TABLE.get(unit)
    if multiplier is None:
        raise ValueError(f"unhandled size name: {unit}")
    value *= multiplier
    return value.numerator // value.denominator