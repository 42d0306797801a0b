"""
Relative Date Resolution

Resolves day-level temporal words to a calendar date, relative to a
reference instant truncated to midnight.

Marker Priority (first match wins, markers are never combined):
1. Day after tomorrow: "后天", "明後日", "모레", "day after tomorrow"
2. Tomorrow: "明天", "明日", "내일", "tomorrow"
3. Today: "今天", "今日", "오늘", "today"
4. Next-next weekday: "下下周二", "再来週の火曜日", "다다음 주 화요일"
5. Next weekday: "下周六", "来週の土曜日", "다음 주 토요일", "next Saturday"
6. Bare weekday: "周五", "金曜日", "금요일", "on Friday"
7. No marker: the reference date itself

Weekdays use Monday=0 .. Sunday=6 throughout. ``days_until_weekday`` is the
single definition of weekday distance; "next" adds one week to it and
"next-next" adds two, so "next <weekday>" is always 8 to 14 days away and
"next-next <weekday>" 15 to 21 days away.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple, Union

from dateutil.relativedelta import relativedelta

from .content import MatchedToken
from .errors import NoDateMarker
from .languages import LanguageCode, LanguageTable, get_language_table

logger = logging.getLogger(__name__)


class DateMarker(Enum):
    """Kinds of relative-date marker, in resolution priority order."""
    DAY_AFTER_TOMORROW = "day_after_tomorrow"
    TOMORROW = "tomorrow"
    TODAY = "today"
    NEXT_NEXT_WEEKDAY = "next_next_weekday"
    NEXT_WEEKDAY = "next_weekday"
    WEEKDAY = "weekday"
    NONE = "none"


@dataclass(frozen=True)
class DateAnchor:
    """A reference instant and the calendar date resolved from it."""
    reference: datetime             # The instant the date is relative to
    date: datetime                  # Resolved day, time-of-day zeroed
    marker: DateMarker              # Which kind of marker matched
    token: Optional[MatchedToken] = None  # The matched marker text, if any


@dataclass(frozen=True)
class DatePattern:
    """Definition of a relative-date marker."""
    marker: DateMarker
    attribute: str      # Name of the LanguageTable pattern attribute
    days: int           # Fixed shift in days
    weekday: bool       # Whether the match names a weekday to roll to
    priority: int


DATE_PATTERNS: Tuple[DatePattern, ...] = tuple(sorted(
    (
        DatePattern(DateMarker.DAY_AFTER_TOMORROW, "day_after_tomorrow", 2, False, 100),
        DatePattern(DateMarker.TOMORROW, "tomorrow", 1, False, 90),
        DatePattern(DateMarker.TODAY, "today", 0, False, 80),
        DatePattern(DateMarker.NEXT_NEXT_WEEKDAY, "next_next_weekday", 14, True, 70),
        DatePattern(DateMarker.NEXT_WEEKDAY, "next_weekday", 7, True, 60),
        DatePattern(DateMarker.WEEKDAY, "weekday", 0, True, 50),
    ),
    key=lambda p: p.priority,
    reverse=True,
))


def truncate_to_day(instant: datetime) -> datetime:
    return instant.replace(hour=0, minute=0, second=0, microsecond=0)


def days_until_weekday(today: int, target: int) -> int:
    """
    Days from ``today`` to the next occurrence of ``target`` (Monday=0).

    The result is in 1..7: a target equal to today rolls forward a full week.
    """
    delta = (target - today) % 7
    return delta or 7


def weekday_after(reference: datetime, target: int, extra_days: int = 0) -> datetime:
    """Midnight of the next ``target`` weekday after ``reference``, plus ``extra_days``."""
    delta = days_until_weekday(reference.weekday(), target)
    return truncate_to_day(reference) + relativedelta(days=delta + extra_days)


def next_weekday(reference: datetime, target: int) -> datetime:
    """The ``target`` weekday of the week following the current one (8..14 days)."""
    return weekday_after(reference, target, 7)


def next_next_weekday(reference: datetime, target: int) -> datetime:
    """One week after :func:`next_weekday` (15..21 days)."""
    return weekday_after(reference, target, 14)


class RelativeDateResolver:
    """
    Resolver for day-level relative-date markers of one language.

    Patterns are tried in ``DATE_PATTERNS`` priority order and the first
    match wins.
    """

    def __init__(self, table: LanguageTable):
        self.table = table
        self._patterns = [
            (definition, getattr(table, definition.attribute))
            for definition in DATE_PATTERNS
            if getattr(table, definition.attribute) is not None
        ]

    def match(self, text: str) -> Tuple[DatePattern, MatchedToken, Optional[int]]:
        """
        Find the highest-priority marker in the text.

        Returns:
            (pattern definition, matched token, target weekday or None)

        Raises:
            NoDateMarker: No marker of any kind is present.
        """
        for definition, pattern in self._patterns:
            found = pattern.search(text)
            if not found:
                continue

            target = None
            if definition.weekday:
                target = self.table.weekday_number(found.group("weekday"))

            token = MatchedToken.from_match(found, "date")
            logger.debug(f"Date marker '{definition.marker.value}' matched: {token.text!r}")
            return definition, token, target

        raise NoDateMarker("no relative-date marker in %r" % (text,))

    def resolve(self, text: str, reference: datetime) -> DateAnchor:
        """
        Resolve the text's relative-date marker against ``reference``.

        A text without any marker resolves to the reference day.
        """
        midnight = truncate_to_day(reference)

        try:
            definition, token, target = self.match(text)
        except NoDateMarker:
            return DateAnchor(reference=reference, date=midnight, marker=DateMarker.NONE)

        if definition.weekday:
            date = weekday_after(reference, target, definition.days)
        else:
            date = midnight + relativedelta(days=definition.days)

        logger.debug(f"Resolved {token.text!r} against {reference:%Y-%m-%d} -> {date:%Y-%m-%d}")
        return DateAnchor(reference=reference, date=date, marker=definition.marker, token=token)


def resolve_date(
    text: str,
    language: Union[LanguageCode, str, LanguageTable],
    reference: Optional[datetime] = None,
) -> DateAnchor:
    """
    Resolve the relative-date marker of a sentence.

    Example usage::

        >>> resolve_date("下周六晚上八点数学", "zh", datetime(2024, 1, 1)).date
        datetime.datetime(2024, 1, 13, 0, 0)

    :param text: The sentence to inspect.
    :param language: LanguageCode, its string value, or a LanguageTable.
    :param reference: The instant to resolve against; defaults to now.
    :return: A DateAnchor; its ``marker`` is ``DateMarker.NONE`` when the
        text carries no marker.
    """
    table = language if isinstance(language, LanguageTable) else get_language_table(language)
    if reference is None:
        reference = datetime.now()
    return RelativeDateResolver(table).resolve(text, reference)
