from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import regex as re


class LanguageCode(Enum):
    """Languages the pattern tables cover."""
    EN = "en"
    ZH = "zh"
    JA = "ja"
    KO = "ko"


@dataclass(frozen=True)
class LanguageTable:
    """
    Immutable pattern and numeral data for one language.

    Time patterns expose the named groups ``hour`` and (optionally) ``minute``.
    Weekday patterns expose ``weekday``, whose text is looked up in
    ``weekdays`` (case-folded) to get a Monday=0 .. Sunday=6 number.
    Location patterns expose ``location``; the text they match is removed
    from the content, up to but excluding the activity word that follows.
    """
    code: LanguageCode
    numerals: Mapping[str, int]
    tens_markers: Tuple[str, ...]
    minute_words: Mapping[str, int]
    time_patterns: Tuple[re.Pattern, ...]
    am_markers: re.Pattern
    pm_markers: re.Pattern
    day_after_tomorrow: re.Pattern
    tomorrow: re.Pattern
    today: re.Pattern
    next_next_weekday: re.Pattern
    next_weekday: re.Pattern
    weekday: Optional[re.Pattern]
    weekdays: Mapping[str, int] = field(default_factory=dict)
    location_patterns: Tuple[re.Pattern, ...] = ()

    def weekday_number(self, token: str) -> int:
        return self.weekdays[token.casefold()]


def frozen(mapping) -> Mapping:
    return MappingProxyType(dict(mapping))
