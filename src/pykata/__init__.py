"""Public package surface exposing the exercises, metadata, and configuration.

Imports are routed through the architectural layers:
- Domain exports: closure builders, call wrappers and string exercises
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.closures import (
    get_composition,
    get_id_generator_function,
    get_polynom,
    get_power_function,
    logger,
    memoize,
    partial_using_arguments,
    retry,
)
from .domain.enums import OnExhausted
from .domain.errors import InvalidCardError, InvalidDimensionsError
from .domain.strings import (
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
    "InvalidCardError",
    "InvalidDimensionsError",
    "OnExhausted",
    "concatenate_strings",
    "convert_to_upper_case",
    "encode_to_rot13",
    "extract_emails",
    "extract_name_from_template",
    "get_card_id",
    "get_composition",
    "get_config",
    "get_first_char",
    "get_id_generator_function",
    "get_polynom",
    "get_power_function",
    "get_rectangle_string",
    "get_string_from_template",
    "get_string_length",
    "is_string",
    "logger",
    "memoize",
    "partial_using_arguments",
    "print_info",
    "remove_first_occurrences",
    "remove_leading_and_trailing_whitespaces",
    "repeat_string",
    "retry",
    "unbracket_tag",
]
