"""
Time-of-day resolution.

Finds the clock time in a sentence ("晚上八点半", "오후 3시", "3pm"), resolves
its numerals, and normalises the hour to the 24-hour clock using the
day-period marker found anywhere in the input.

Conversion rule, identical for every language:

- PM marker and hour < 12: hour + 12
- AM marker (or no marker) and hour == 12: 0
- otherwise the hour is unchanged

When both an AM and a PM marker are present, PM wins.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from .content import MatchedToken, mask
from .errors import InvalidNumeral, NoTimeMatch
from .languages import LanguageCode, LanguageTable, get_language_table
from .numerals import resolve_numeral

logger = logging.getLogger(__name__)


class DayPeriod(Enum):
    """AM/PM-equivalent day periods."""
    AM = "am"
    PM = "pm"


@dataclass(frozen=True)
class TimeToken:
    """The raw pieces of a matched clock time."""
    hour_raw: str
    minute_raw: Optional[str]
    day_period_marker: Optional[str]
    match: MatchedToken
    period: Optional[DayPeriod] = None
    marker: Optional[MatchedToken] = None


@dataclass(frozen=True)
class ResolvedTime:
    """A time of day on the 24-hour clock."""
    hour: int
    minute: int = 0

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise ValueError("hour must be in 0..23, not %r" % self.hour)
        if not 0 <= self.minute <= 59:
            raise ValueError("minute must be in 0..59, not %r" % self.minute)


MIDNIGHT = ResolvedTime(0, 0)


def to_24_hour(hour: int, period: Optional[DayPeriod]) -> int:
    """Apply the 12-hour marker rule to an hour value."""
    if period is DayPeriod.PM and hour < 12:
        return hour + 12
    if period is not DayPeriod.PM and hour == 12:
        return 0
    return hour


def find_day_period(text: str, table: LanguageTable) -> Optional[Tuple[DayPeriod, MatchedToken]]:
    """
    Search the whole input for a day-period marker.

    Args:
        text: The original sentence.
        table: Language table providing the AM and PM marker patterns.

    Returns:
        (period, marker token) for the first PM marker, else the first AM
        marker, else None.
    """
    pm = table.pm_markers.search(text)
    if pm:
        return DayPeriod.PM, MatchedToken.from_match(pm, "period")

    am = table.am_markers.search(text)
    if am:
        return DayPeriod.AM, MatchedToken.from_match(am, "period")

    return None


class TimeOfDayResolver:
    """Matches and resolves clock times for one language."""

    def __init__(self, table: LanguageTable):
        self.table = table

    def match(self, text: str, exclude: Iterable[MatchedToken] = ()) -> TimeToken:
        """
        Find the earliest clock time in the text.

        Args:
            text: The original sentence.
            exclude: Tokens already claimed by another resolver; the time
                pattern never matches inside them ("下周六七点" -> "七点").

        Raises:
            NoTimeMatch: None of the language's time patterns match.
        """
        searchable = mask(text, exclude)

        best = None
        for pattern in self.table.time_patterns:
            found = pattern.search(searchable)
            if found and (best is None or found.start() < best.start()):
                best = found

        if best is None:
            raise NoTimeMatch("no time of day in %r" % (text,))

        matched = MatchedToken(
            text=text[best.start():best.end()],
            start=best.start(),
            end=best.end(),
            kind="time",
        )
        groups = best.groupdict()

        period = marker = None
        day_period = find_day_period(text, self.table)
        if day_period:
            period, marker = day_period

        logger.debug(
            f"Matched time {matched.text!r} (hour={groups['hour']!r}, "
            f"minute={groups.get('minute')!r}, period={period})"
        )

        return TimeToken(
            hour_raw=groups["hour"],
            minute_raw=groups.get("minute"),
            day_period_marker=marker.text if marker else None,
            match=matched,
            period=period,
            marker=marker,
        )

    def resolve_minute(self, minute_raw: Optional[str]) -> int:
        if not minute_raw:
            return 0
        if minute_raw in self.table.minute_words:
            return self.table.minute_words[minute_raw]
        return resolve_numeral(minute_raw, self.table)

    def resolve(self, token: TimeToken) -> ResolvedTime:
        """
        Convert a TimeToken to a 24-hour ResolvedTime.

        Raises:
            InvalidNumeral: A numeral is malformed, or the hour/minute is out
                of range.
        """
        hour = resolve_numeral(token.hour_raw, self.table)
        minute = self.resolve_minute(token.minute_raw)

        if hour > 23:
            raise InvalidNumeral(token.hour_raw, self.table.code, "hour out of range")
        if minute > 59:
            raise InvalidNumeral(token.minute_raw, self.table.code, "minute out of range")

        resolved = ResolvedTime(to_24_hour(hour, token.period), minute)
        logger.debug(f"Resolved {token.match.text!r} -> {resolved.hour:02d}:{resolved.minute:02d}")
        return resolved


def resolve_time(text: str, language: Union[LanguageCode, str, LanguageTable]) -> ResolvedTime:
    """
    Find and resolve the clock time in a sentence.

    Example usage::

        >>> resolve_time("晚上八点半", "zh")
        ResolvedTime(hour=20, minute=30)

    Raises:
        NoTimeMatch: No time pattern matches.
        InvalidNumeral: The matched numerals cannot be resolved.
    """
    table = language if isinstance(language, LanguageTable) else get_language_table(language)
    resolver = TimeOfDayResolver(table)
    return resolver.resolve(resolver.match(text))
