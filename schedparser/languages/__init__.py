"""
Per-language pattern tables.

Each language module defines a single immutable ``TABLE``; tables are
looked up by :class:`LanguageCode` (or its string value).
"""

from typing import Union

from .table import LanguageCode, LanguageTable
from . import en, ja, ko, zh

LANGUAGE_TABLES = {
    LanguageCode.EN: en.TABLE,
    LanguageCode.ZH: zh.TABLE,
    LanguageCode.JA: ja.TABLE,
    LanguageCode.KO: ko.TABLE,
}


def get_language_table(language: Union[LanguageCode, str]) -> LanguageTable:
    """Return the table for a language code, e.g. ``LanguageCode.ZH`` or ``"zh"``."""
    return LANGUAGE_TABLES[LanguageCode(language)]


__all__ = [
    "LanguageCode",
    "LanguageTable",
    "LANGUAGE_TABLES",
    "get_language_table",
]
