import regex as re

from .table import LanguageCode, LanguageTable, frozen

NUMERALS = {
    'zero': 0, 'one': 1, 'two': 2, 'three': 3, 'four': 4, 'five': 5,
    'six': 6, 'seven': 7, 'eight': 8, 'nine': 9, 'ten': 10,
    'eleven': 11, 'twelve': 12,
}

WEEKDAYS = {
    'monday': 0, 'mon': 0,
    'tuesday': 1, 'tues': 1, 'tue': 1,
    'wednesday': 2, 'wed': 2,
    'thursday': 3, 'thurs': 3, 'thu': 3,
    'friday': 4, 'fri': 4,
    'saturday': 5, 'sat': 5,
    'sunday': 6, 'sun': 6,
}

_FLAGS = re.IGNORECASE
_HOUR_WORD = r"zero|one|two|three|four|five|six|seven|eight|nine|ten|eleven|twelve"
_AT = r"(?:\bat\s+)?"

TIME_PATTERNS = (
    re.compile(
        _AT + r"\b(?P<hour>\d{1,2})(?::(?P<minute>\d{2}))?\s*(?:a\.?m\.?|p\.?m\.?)(?![a-z])",
        _FLAGS,
    ),
    re.compile(_AT + r"\b(?P<hour>\d{1,2}):(?P<minute>\d{2})\b", _FLAGS),
    re.compile(_AT + r"\b(?P<hour>\d{1,2}|%s)\s+o'?clock\b" % _HOUR_WORD, _FLAGS),
    re.compile(r"\bat\s+(?P<hour>\d{1,2})\b(?![:.\-/%]\d)", _FLAGS),
)

# Bare am/pm only counts right after a number, so "I am" is left alone.
AM_MARKERS = re.compile(
    r"(?<=\d\s?)a\.?m\.?(?![a-z])|\b(?:in\s+the\s+)?morning\b", _FLAGS
)
PM_MARKERS = re.compile(
    r"(?<=\d\s?)p\.?m\.?(?![a-z])"
    r"|\b(?:in\s+the\s+)?(?:afternoon|evening)\b|\b(?:at\s+)?night\b|\btonight\b",
    _FLAGS,
)

_SHORT_WEEKDAY = (
    r"(?P<weekday>monday|tuesday|wednesday|thursday|friday|saturday|sunday"
    r"|mon|tues|tue|wed|thurs|thu|fri|sat|sun)\b"
)
_FULL_WEEKDAY = r"(?P<weekday>monday|tuesday|wednesday|thursday|friday|saturday|sunday)\b"

TABLE = LanguageTable(
    code=LanguageCode.EN,
    numerals=frozen(NUMERALS),
    tens_markers=(),
    minute_words=frozen({}),
    time_patterns=TIME_PATTERNS,
    am_markers=AM_MARKERS,
    pm_markers=PM_MARKERS,
    day_after_tomorrow=re.compile(r"\b(?:the\s+)?day\s+after\s+tomorrow\b", _FLAGS),
    tomorrow=re.compile(r"\btomorrow\b|\btmrw?\b", _FLAGS),
    today=re.compile(r"\btoday\b|\btonight\b", _FLAGS),
    next_next_weekday=re.compile(
        r"\b(?:on\s+)?(?:next\s+next|(?:the\s+)?week\s+after\s+next(?:\s+on)?)\s+"
        + _SHORT_WEEKDAY,
        _FLAGS,
    ),
    next_weekday=re.compile(r"\b(?:on\s+)?next\s+" + _SHORT_WEEKDAY, _FLAGS),
    weekday=re.compile(r"\b(?:on\s+|this\s+)?" + _FULL_WEEKDAY, _FLAGS),
    weekdays=frozen(WEEKDAYS),
)
