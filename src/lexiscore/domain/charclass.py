"""Character classification used by the scoring rules.

Classification is pinned to explicit ASCII sets instead of `str.isupper` /
`str.isalnum`, so scores do not change with the interpreter's Unicode
database. The consequences for non-Latin input are:

- Case-less scripts (e.g. CJK) and non-ASCII cased letters (e.g. ``É``) are
  never uppercase.
- Every code point outside ``A-Z``, ``a-z`` and ``0-9`` is special, including
  whitespace, control characters, accented letters and emoji.
"""

import string

UPPERCASE = frozenset(string.ascii_uppercase)
LOWERCASE = frozenset(string.ascii_lowercase)
DIGITS = frozenset(string.digits)
ALPHANUMERIC = UPPERCASE | LOWERCASE | DIGITS


def is_special(character: str) -> bool:
    """Return True if *character* is outside the ASCII alphanumeric set."""
    return character not in ALPHANUMERIC


def has_uppercase(text: str) -> bool:
    """Return True if *text* contains at least one ASCII uppercase letter."""
    return any(c in UPPERCASE for c in text)


def has_digit(text: str) -> bool:
    """Return True if *text* contains at least one ASCII digit."""
    return any(c in DIGITS for c in text)


def has_special(text: str) -> bool:
    """Return True if *text* contains at least one special character."""
    return any(is_special(c) for c in text)
