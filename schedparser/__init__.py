__version__ = "0.3.0"

from .conf import apply_settings, Settings, SettingValidationError
from .parser import TemporalParser, ParseResult

# Re-export the resolver building blocks for convenience
from .languages import (
    LanguageCode,
    LanguageTable,
    get_language_table,
)
from .numerals import resolve_numeral
from .time_of_day import (
    DayPeriod,
    ResolvedTime,
    TimeToken,
    TimeOfDayResolver,
    resolve_time,
    to_24_hour,
)
from .relative_date import (
    DateAnchor,
    DateMarker,
    RelativeDateResolver,
    days_until_weekday,
    next_weekday,
    next_next_weekday,
    resolve_date,
)
from .content import MatchedToken, extract_content, extract_location
from .fallback import FallbackDelegate, FallbackMatch, DateparserFallback
from .errors import (
    TemporalParseError,
    InvalidNumeral,
    NoTimeMatch,
    NoDateMarker,
    FallbackExhausted,
)

# =============================================================================
# Detection Module Exports
# =============================================================================

from .detection import detect_language

# =============================================================================
# Slot Recommendation Exports
# =============================================================================

from .slots import TimeSlot, merge_intervals, recommend_slots

_default_parser = TemporalParser()


@apply_settings
def parse(text, reference=None, language=None, settings=None):
    """Parse a scheduling sentence into a date and its remaining content.

    :param text:
        A sentence in Chinese, Japanese, Korean or English, e.g.
        "明天下午三点开会" or "today 3pm meeting".
    :type text: str

    :param reference:
        The instant relative expressions are resolved against. Defaults to
        the current local time.
    :type reference: datetime

    :param language:
        A language code ('zh', 'ja', 'ko' or 'en') to use instead of
        character-class detection.
    :type language: str

    :param settings:
        Configure customized behavior using settings defined in :mod:`schedparser.conf.Settings`.
    :type settings: dict

    :return: Returns a ``ParseResult``. Its ``date`` is None when nothing could be
        resolved, in which case ``content`` is the original text.
    :rtype: ParseResult

    :raises:
        ``ValueError``: Unknown language, ``SettingValidationError``: A provided setting is not valid.

    Example usage::

        >>> import schedparser
        >>> from datetime import datetime

        >>> result = schedparser.parse("下周六晚上八点数学", reference=datetime(2024, 1, 1))
        >>> result.date
        datetime.datetime(2024, 1, 13, 20, 0)
        >>> result.content
        '数学'
    """
    parser = _default_parser

    if not settings._default:
        parser = TemporalParser(settings=settings)

    return parser.parse(text, reference=reference, language=language)
