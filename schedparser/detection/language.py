"""
Character-class language detection.

The checks run in a fixed priority order: any CJK unified ideograph makes the
text Chinese, then any kana makes it Japanese, then any Hangul makes it
Korean. Everything else is English. Japanese sentences that contain kanji are
therefore reported as Chinese; pass an explicit language to the parser to
override this.
"""

import logging

import regex as re

from ..languages import LanguageCode

logger = logging.getLogger(__name__)

CJK_PATTERN = re.compile(r"[\u4e00-\u9fff\u3400-\u4dbf]")
KANA_PATTERN = re.compile(r"[\u3040-\u309f\u30a0-\u30ff]")
HANGUL_PATTERN = re.compile(r"[\uac00-\ud7af\u1100-\u11ff\u3130-\u318f]")

_PRIORITY = (
    (CJK_PATTERN, LanguageCode.ZH),
    (KANA_PATTERN, LanguageCode.JA),
    (HANGUL_PATTERN, LanguageCode.KO),
)


def detect_language(text: str) -> LanguageCode:
    """
    Classify text as Chinese, Japanese, Korean or English.

    Args:
        text: The input sentence.

    Returns:
        The first LanguageCode whose script occurs in the text, else EN.
    """
    for pattern, code in _PRIORITY:
        if pattern.search(text or ""):
            logger.debug(f"Detected language {code.value} for: {text}")
            return code
    return LanguageCode.EN
