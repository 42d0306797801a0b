"""
Numeral resolution for hour and minute tokens.

Converts Arabic digits (ASCII or full-width) and the language-specific
numerals of a :class:`~schedparser.languages.LanguageTable` into integers.
Composite tens such as "二十三", "십이" or "열두" are split on the tens
marker. Unmapped input raises :class:`~schedparser.errors.InvalidNumeral`;
there is no zero default.
"""

import logging
from typing import Union

import regex as re

from .errors import InvalidNumeral
from .languages import LanguageCode, LanguageTable, get_language_table

logger = logging.getLogger(__name__)

ARABIC_DIGITS = re.compile(r"^[0-9０-９]+$")


def _lookup(token: str, table: LanguageTable) -> int:
    value = table.numerals.get(token.casefold())
    if value is None:
        raise InvalidNumeral(token, table.code, "not in numeral table")
    return value


def _resolve_tens(token: str, marker: str, table: LanguageTable) -> int:
    tens_part, _, ones_part = token.partition(marker)

    tens = _lookup(tens_part, table) if tens_part else 1
    ones = _lookup(ones_part, table) if ones_part else 0

    if not 1 <= tens <= 9:
        raise InvalidNumeral(token, table.code, "tens digit out of range")
    if not 0 <= ones <= 9:
        raise InvalidNumeral(token, table.code, "ones digit out of range")
    return tens * 10 + ones


def resolve_numeral(token: str, language: Union[LanguageCode, str, LanguageTable]) -> int:
    """
    Convert a numeral token to an unsigned integer.

    Args:
        token: The numeral text, e.g. "8", "八", "十二", "열두", "three".
        language: A LanguageCode, its string value, or a LanguageTable.

    Returns:
        The integer value.

    Raises:
        InvalidNumeral: The token is empty or not expressible in the
            language's numeral alphabet.
    """
    table = language if isinstance(language, LanguageTable) else get_language_table(language)

    if not token:
        raise InvalidNumeral(token, table.code, "empty token")

    if ARABIC_DIGITS.match(token):
        return int(token)

    if token.casefold() in table.numerals:
        return table.numerals[token.casefold()]

    for marker in table.tens_markers:
        if marker in token:
            value = _resolve_tens(token, marker, table)
            logger.debug(f"Resolved composite numeral {token!r} -> {value}")
            return value

    raise InvalidNumeral(token, table.code)
