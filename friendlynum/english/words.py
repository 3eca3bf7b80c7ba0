"""More natural English output: plurals and word series."""

from collections.abc import Sequence

from ..comma import comma

__all__ = ["plural_word", "plural", "word_series", "oxford_word_series"]

# Common technical terms with irregular plurals.
_SPECIAL_PLURALS = {
    "index": "indices",
    "matrix": "matrices",
    "vertex": "vertices",
}

_SIBILANT_ENDINGS = ("s", "sh", "tch", "x")

_VOWELS = frozenset("AEIOUaeiou")


def plural_word(quantity: int, singular: str, plural: str = "") -> str:
    """Return the form of a word that goes with ``quantity``.

    When ``plural`` is empty, it is guessed from the simple regular
    English rules and a few common special cases.
    """
    if quantity == 1:
        return singular
    if plural:
        return plural
    special = _SPECIAL_PLURALS.get(singular)
    if special:
        return special
    if singular.endswith(_SIBILANT_ENDINGS):
        return singular + "es"
    if len(singular) >= 2 and singular[-2] not in _VOWELS:
        if singular[-1] == "o":
            return singular + "es"
        if singular[-1] == "y":
            return singular[:-1] + "ies"
    return singular + "s"


def plural(quantity: int, singular: str, plural: str = "") -> str:
    """Format a count with the matching word form, e.g. (1234567, 'object') -> '1,234,567 objects'."""
    return f"{comma(quantity)} {plural_word(quantity, singular, plural)}"


def word_series(words: Sequence[str], conjunction: str) -> str:
    """Join words as 'a, b and c', without a serial comma."""
    words = list(words)
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    return f"{', '.join(words[:-1])} {conjunction} {words[-1]}"


def oxford_word_series(words: Sequence[str], conjunction: str) -> str:
    """Join words as 'a, b, and c', with a serial comma."""
    words = list(words)
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f" {conjunction} ".join(words)
    return f"{', '.join(words[:-1])}, {conjunction} {words[-1]}"