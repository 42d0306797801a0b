"""
Fallback Delegate

When none of the language tables match, the whole sentence is handed to a
general-purpose date phrase parser. The delegate is a black box: it receives
``(text, reference, forward_date_bias)`` and returns either ``None`` or a
``FallbackMatch`` naming the span it used and the instant it resolved.

The default delegate wraps ``dateparser.search.search_dates``. Any callable
with the same signature can be injected instead.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from dateparser.search import search_dates
from tzlocal import get_localzone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FallbackMatch:
    """A date phrase found by the fallback delegate."""
    matched_span: str
    resolved_instant: datetime


class FallbackDelegate(ABC):
    """Base class for fallback date phrase parsers."""

    @abstractmethod
    def __call__(
        self, text: str, reference: datetime, forward_date_bias: bool = True
    ) -> Optional[FallbackMatch]:
        """
        Find a date phrase in ``text``.

        Args:
            text: The whole original sentence.
            reference: Instant relative phrases are resolved against.
            forward_date_bias: Prefer future dates for incomplete phrases
                (a bare time never resolves to the past).

        Returns:
            The first phrase found, or None.
        """
        pass


class DateparserFallback(FallbackDelegate):
    """
    Fallback backed by the ``dateparser`` library.

    :param languages:
        Optional list of dateparser language codes, e.g. ``['en', 'zh']``.
        When omitted dateparser detects the language itself.
    :type languages: list
    """

    def __init__(self, languages: Optional[List[str]] = None):
        self.languages = list(languages) if languages else None

    def _settings(self, reference: datetime, forward_date_bias: bool) -> dict:
        return {
            "RELATIVE_BASE": reference,
            "PREFER_DATES_FROM": "future" if forward_date_bias else "current_period",
            "RETURN_AS_TIMEZONE_AWARE": False,
        }

    def __call__(
        self, text: str, reference: datetime, forward_date_bias: bool = True
    ) -> Optional[FallbackMatch]:
        if not text or not text.strip():
            return None

        local_tz = get_localzone()
        aware_reference = reference.tzinfo is not None
        if aware_reference:
            # dateparser compares against naive local wall-clock time
            reference = reference.astimezone(local_tz).replace(tzinfo=None)

        results = search_dates(
            text,
            languages=self.languages,
            settings=self._settings(reference, forward_date_bias),
        )
        if not results:
            logger.debug(f"dateparser found nothing in {text!r}")
            return None

        span, instant = results[0]
        if aware_reference:
            instant = instant.replace(tzinfo=local_tz)

        logger.debug(f"dateparser matched {span!r} -> {instant}")
        return FallbackMatch(matched_span=span, resolved_instant=instant)

    def __repr__(self):
        return "{}(languages={!r})".format(self.__class__.__name__, self.languages)
