"""Type-safe domain enums for retry policy, card suits and output formats."""

from __future__ import annotations

from enum import Enum


class OnExhausted(str, Enum):
    """What a retry wrapper does once every attempt has failed.

    Attributes:
        RAISE: Re-raise the exception of the last attempt.
        NONE: Swallow the failure and return ``None``.

    Example:
        >>> OnExhausted.RAISE.value
        'raise'
        >>> OnExhausted.NONE == "none"
        True
    """

    RAISE = "raise"
    NONE = "none"


class Suit(str, Enum):
    """Card suits in the order they appear in a fresh deck.

    Member order is significant: :func:`list` over the enum yields the deck
    rows, so ``list(Suit).index(suit)`` is the row of a suit.

    Example:
        >>> [suit.value for suit in Suit]
        ['♣', '♦', '♥', '♠']
        >>> Suit("♥").name
        'HEARTS'
    """

    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "OnExhausted",
    "OutputFormat",
    "Suit",
]
