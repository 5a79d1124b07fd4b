"""String exercises: small text transformations and two lookup puzzles.

Most functions are a single call into :class:`str`. The two with real logic
are :func:`get_rectangle_string` (box-drawing output) and
:func:`get_card_id` (position of a card in a fresh 52-card deck).
"""

from __future__ import annotations

import codecs
from typing import Any, Final

from .enums import Suit
from .errors import InvalidCardError, InvalidDimensionsError

GREETING_PREFIX: Final[str] = "Hello, "
GREETING_SUFFIX: Final[str] = "!"

#: Ranks in deck order; the index is the column of a card within its suit row.
RANKS: Final[tuple[str, ...]] = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")

#: (left, fill, right) characters for the top, inner and bottom rows.
_TOP_ROW: Final[tuple[str, str, str]] = ("┌", "─", "┐")
_INNER_ROW: Final[tuple[str, str, str]] = ("│", " ", "│")
_BOTTOM_ROW: Final[tuple[str, str, str]] = ("└", "─", "┘")


def concatenate_strings(value1: str, value2: str) -> str:
    """Return ``value1`` followed by ``value2``.

    >>> concatenate_strings("aa", "bb")
    'aabb'
    """
    return value1 + value2


def get_string_length(value: str) -> int:
    """Return the number of characters in *value*."""
    return len(value)


def get_string_from_template(first_name: str, last_name: str) -> str:
    """Return ``'Hello, <first> <last>!'``.

    >>> get_string_from_template("John", "Doe")
    'Hello, John Doe!'
    """
    return f"{GREETING_PREFIX}{first_name} {last_name}{GREETING_SUFFIX}"


def extract_name_from_template(value: str) -> str:
    """Extract the name from a ``'Hello, <name>!'`` greeting.

    >>> extract_name_from_template("Hello, Chuck Norris!")
    'Chuck Norris'
    """
    return value.removeprefix(GREETING_PREFIX).removesuffix(GREETING_SUFFIX)


def get_first_char(value: str) -> str:
    """Return the first character, or ``''`` for an empty string."""
    return value[:1]


def remove_leading_and_trailing_whitespaces(value: str) -> str:
    """Strip surrounding whitespace, tabs and newlines included."""
    return value.strip()


def repeat_string(value: str, count: int) -> str:
    """Return *value* repeated *count* times."""
    return value * count


def remove_first_occurrences(text: str, value: str) -> str:
    """Remove the first occurrence of *value* from *text*.

    When the removal leaves an empty word between two spaces, one of the
    spaces goes with it so the sentence keeps single spacing.

    >>> remove_first_occurrences("To be or not to be", "not")
    'To be or to be'
    >>> remove_first_occurrences("I like legends", "end")
    'I like legs'
    >>> remove_first_occurrences("ABABAB", "BA")
    'ABAB'
    """
    if not value:
        return text
    start = text.find(value)
    if start == -1:
        return text
    end = start + len(value)
    before, after = text[:start], text[end:]
    if before.endswith(" ") and (after.startswith(" ") or not after):
        before = before[:-1]
    elif after.startswith(" ") and not before:
        after = after[1:]
    return before + after


def unbracket_tag(tag: str) -> str:
    """Drop the enclosing angle brackets of a tag.

    >>> unbracket_tag("<span>")
    'span'
    """
    return tag[1:-1]


def convert_to_upper_case(text: str) -> str:
    """Return *text* in upper case."""
    return text.upper()


def extract_emails(text: str) -> list[str]:
    """Split a semicolon-delimited list of addresses.

    >>> extract_emails("angus.young@gmail.com;bon.scott@yahoo.com")
    ['angus.young@gmail.com', 'bon.scott@yahoo.com']
    """
    return text.split(";")


def _render_row(width: int, row: tuple[str, str, str]) -> str:
    left, fill, right = row
    return f"{left}{fill * (width - 2)}{right}\n"


def get_rectangle_string(width: int, height: int) -> str:
    """Draw a *width* x *height* rectangle with box-drawing characters.

    Every row, the last one included, ends with a newline.

    Raises:
        InvalidDimensionsError: If either side is shorter than 2.

    >>> print(get_rectangle_string(6, 4), end="")
    ┌────┐
    │    │
    │    │
    └────┘
    >>> get_rectangle_string(2, 2)
    '┌┐\\n└┘\\n'
    """
    for label, size in (("width", width), ("height", height)):
        if size < 2:
            raise InvalidDimensionsError(f"{label} must be at least 2, got {size}")
    inner = _render_row(width, _INNER_ROW) * (height - 2)
    return _render_row(width, _TOP_ROW) + inner + _render_row(width, _BOTTOM_ROW)


def encode_to_rot13(text: str) -> str:
    """Encode *text* with ROT13; only ASCII letters are rotated.

    >>> encode_to_rot13("Why did the chicken cross the road?")
    'Jul qvq gur puvpxra pebff gur ebnq?'
    """
    return codecs.encode(text, "rot13")


def is_string(value: Any) -> bool:
    """Return ``True`` when *value* is a :class:`str` (subclasses included).

    >>> is_string("test"), is_string(None), is_string([])
    (True, False, False)
    """
    return isinstance(value, str)


def get_card_id(card: str) -> int:
    """Return the zero-based position of *card* in a fresh deck.

    The deck runs ``A♣ 2♣ ... K♣ A♦ ... K♦ A♥ ... K♥ A♠ ... K♠``, so the id is
    ``suit_row * 13 + rank_column``.

    Raises:
        InvalidCardError: If the rank or suit is not recognised.

    >>> get_card_id("A♣"), get_card_id("10♦"), get_card_id("K♠")
    (0, 22, 51)
    """
    rank, suit_symbol = card[:-1], card[-1:]
    try:
        suit = Suit(suit_symbol)
    except ValueError as exc:
        raise InvalidCardError(f"Unknown suit in card {card!r}") from exc
    if rank not in RANKS:
        raise InvalidCardError(f"Unknown rank in card {card!r}")
    return list(Suit).index(suit) * len(RANKS) + RANKS.index(rank)


__all__ = [
    "RANKS",
    "concatenate_strings",
    "convert_to_upper_case",
    "encode_to_rot13",
    "extract_emails",
    "extract_name_from_template",
    "get_card_id",
    "get_first_char",
    "get_rectangle_string",
    "get_string_from_template",
    "get_string_length",
    "is_string",
    "remove_first_occurrences",
    "remove_leading_and_trailing_whitespaces",
    "repeat_string",
    "unbracket_tag",
]
