"""
Detection Module

Classifies input text by script before any pattern table is applied.

Usage:
    from schedparser.detection import detect_language

    detect_language("明天下午三点开会")   # LanguageCode.ZH
    detect_language("today 3pm meeting")  # LanguageCode.EN
"""

from .language import (
    detect_language,
    CJK_PATTERN,
    KANA_PATTERN,
    HANGUL_PATTERN,
)

__all__ = [
    "detect_language",
    "CJK_PATTERN",
    "KANA_PATTERN",
    "HANGUL_PATTERN",
]
