# friendlynum

Small helpers that turn numbers, sizes and times into strings people like to
read, and parse some of them back. Pure Python, no dependencies.

## Installing

```
pip install friendlynum
```

## Sizes (`friendlynum.sizes`)

```python
from friendlynum.sizes import format_bytes, format_ibytes, format_ibytes_n, parse_bytes

format_bytes(82854982)          # '83 MB'
format_ibytes(82854982)         # '79 MiB'
format_ibytes_n(123456789, 6)   # '117.738 MiB'
parse_bytes("42 MiB")           # 44040192
parse_bytes("1,005.03 MB")      # 1005030000
```

`format_bytes`, `format_bytes_n`, `format_ibytes` and `format_ibytes_n` take
sizes from 0 up to 2**64 - 1 and use units up to EB / EiB; other values raise
`ValueError`. `parse_bytes` raises `ValueError` for a malformed number, an
unknown unit, or a result that does not fit in 64 bits. Units are
case-insensitive and the trailing "B" may be left out (`"42 mi"`, `"42M"`).

`big_bytes`, `big_ibytes` and `parse_big_bytes` work with integers of any
size and units up to QB / QiB. `parse_big_bytes` computes exactly
(`"16.5 ZiB"` gives `19479761741837286506496`) and raises `ValueError` only
for a malformed number or an unknown unit.

## Thousands separators (`friendlynum.comma`)

```python
from friendlynum.comma import comma, commaf, commaf_with_digits, big_comma, big_commaf

comma(834142)                     # '834,142'
commaf(834142.32)                 # '834,142.32'
commaf_with_digits(834142.32, 1)  # '834,142.3'
big_comma(-84889279597249724975972597249849757294578485)
# '-84,889,279,597,249,724,975,972,597,249,849,757,294,578,485'
```

`big_commaf` accepts floats, ints and `Decimal` values; Decimals and ints are
printed exactly, non-finite values raise `ValueError`.

## Trimmed floats (`friendlynum.ftoa`)

```python
from friendlynum.ftoa import ftoa, ftoa_with_digits

ftoa(200.02)                # '200.02'
ftoa(20.0)                  # '20'
ftoa_with_digits(1.23, 1)   # '1.2'
```

`strip_trailing_zeros` and `strip_trailing_digits` are the string helpers
behind these.

## SI prefixes (`friendlynum.si`)

```python
from friendlynum.si import compute_si, si, si_with_digits, parse_si

compute_si(2.2345e-12)              # (2.2345, 'p')
si(2.2345e-12, "F")                 # '2.2345 pF'
si_with_digits(2.2345e-12, 2, "F")  # '2.23 pF'
parse_si("2.2345 pF")               # (about 2.2345e-12, 'F')
```

Prefixes run from q (1e-30) to Q (1e30). `parse_si` raises `ValueError`
when the text does not start with a number.

## Custom number formats (`friendlynum.number`)

```python
from friendlynum.number import format_float, format_integer

format_float("#,###.##", 12345.6789)      # '12,345.68'
format_float("#.###,######", 12345.6789)  # '12.345,678900'
format_float("", 12345.6789)              # '12,345.68'
format_integer("#", 12345)                # '12345.000000000'
```

`#` and `0` are digit placeholders, a leading `+` asks for an explicit
positive sign, and at most 9 decimal places are allowed. A malformed
pattern raises `ValueError`.

## Ordinals (`friendlynum.ordinals`)

```python
from friendlynum.ordinals import ordinal

ordinal(3)    # '3rd'
ordinal(112)  # '112th'
```

## Relative times (`friendlynum.times`)

```python
from datetime import datetime, timedelta
from friendlynum.times import time_ago, rel_time, DAY

time_ago(datetime.now() - 3 * DAY)   # '3 days ago'
rel_time(datetime(2020, 1, 1), datetime(2020, 1, 8), "earlier", "later")
# '1 week earlier'
```

`custom_rel_time` takes your own ascending sequence of `RelTimeMagnitude`
entries (`d`, `format`, `div_by`); `DEFAULT_MAGNITUDES` is the table the other
functions use, and `DAY`, `WEEK`, `MONTH`, `YEAR` and `LONG_TIME` are provided
as `timedelta` constants.

## English words (`friendlynum.english.words`)

```python
from friendlynum.english.words import plural, plural_word, word_series, oxford_word_series

plural_word(2, "lady")                            # 'ladies'
plural(1234567, "object")                         # '1,234,567 objects'
word_series(["foo", "bar", "baz"], "and")         # 'foo, bar and baz'
oxford_word_series(["foo", "bar", "baz"], "and")  # 'foo, bar, and baz'
```

## What it does not do

The package is a library only: it has no command-line tool, and it does not
localise its output beyond the English words and separators shown above.

## Running the tests

```
pip install -e ".[test]"
pytest
```