"""Domain layer - pure exercise functions with no I/O or framework dependencies.

Contents:
    * :mod:`.closures` - Composition, numeric builders and call wrappers
    * :mod:`.strings` - String exercises and the card-index lookup
    * :mod:`.enums` - Domain enumerations (OnExhausted, Suit, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .closures import (
    get_composition,
    get_id_generator_function,
    get_polynom,
    get_power_function,
    logger,
    memoize,
    partial_using_arguments,
    render_call,
    retry,
)
from .enums import OnExhausted, OutputFormat, Suit
from .errors import ConfigurationError, InvalidCardError, InvalidDimensionsError
from .strings import (
    concatenate_strings,
    convert_to_upper_case,
    encode_to_rot13,
    extract_emails,
    extract_name_from_template,
    get_card_id,
    get_first_char,
    get_rectangle_string,
    get_string_from_template,
    get_string_length,
    is_string,
    remove_first_occurrences,
    remove_leading_and_trailing_whitespaces,
    repeat_string,
    unbracket_tag,
)

__all__ = [
    # Closures
    "get_composition",
    "get_id_generator_function",
    "get_polynom",
    "get_power_function",
    "logger",
    "memoize",
    "partial_using_arguments",
    "render_call",
    "retry",
    # Strings
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
    # Enums
    "OnExhausted",
    "OutputFormat",
    "Suit",
    # Errors
    "ConfigurationError",
    "InvalidCardError",
    "InvalidDimensionsError",
]
