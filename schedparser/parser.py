"""
Temporal Parser

Turns a free-form scheduling sentence into a point in time plus the
remaining task content::

    "下周六晚上八点数学" -> (2024-01-13 20:00, "数学")    # reference 2024-01-01

Pipeline:
1. Detect the language (unless one is given)
2. Resolve the relative-date marker (defaults to the reference day)
3. Resolve the time of day (defaults to 00:00 when a date marker matched)
4. Remove every matched token to get the content
5. Split a place phrase ("在会议室") off the content

If step 2 finds no marker and step 3 finds no time, or any numeral is
invalid, the whole sentence goes to the fallback delegate instead. When that
fails too, the result carries no date and the original text as content.
``TemporalParser.parse`` never raises for a string input; only an unsupported
explicit ``language`` is rejected, with ``ValueError``, before parsing starts.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Union

from .conf import SUPPORTED_LANGUAGES, apply_settings
from .content import extract_content, extract_location
from .detection import detect_language
from .errors import FallbackExhausted, InvalidNumeral, NoTimeMatch
from .fallback import DateparserFallback, FallbackMatch
from .languages import LANGUAGE_TABLES, LanguageCode
from .relative_date import RelativeDateResolver
from .time_of_day import MIDNIGHT, TimeOfDayResolver, find_day_period

logger = logging.getLogger(__name__)

_DEFAULT_FALLBACK = object()

FallbackCallable = Callable[..., Optional[FallbackMatch]]


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of parsing one sentence.

    ``date`` is None only when neither the patterns nor the fallback
    produced a timestamp; ``content`` is then the original text. ``location``
    is the place phrase split off the content ("在会议室开会" -> "会议室"), if any.
    """
    date: Optional[datetime]
    content: str
    location: Optional[str] = None
    language: Optional[LanguageCode] = None
    source: str = "none"    # "pattern", "fallback" or "none"


class TemporalParser:
    """
    Stateless parser for multilingual scheduling sentences.

    :param fallback:
        Delegate called when the pattern tables cannot resolve a sentence.
        Defaults to :class:`~schedparser.fallback.DateparserFallback`; pass
        ``None`` to disable it.
    :type fallback: callable

    :param settings:
        Configure customized behavior using settings defined in
        :mod:`schedparser.conf.Settings`.
    :type settings: dict

    :raises:
        ``SettingValidationError``: A provided setting is not valid.
    """

    @apply_settings
    def __init__(self, fallback=_DEFAULT_FALLBACK, settings=None):
        if not settings.FALLBACK:
            fallback = None
        elif fallback is _DEFAULT_FALLBACK:
            fallback = DateparserFallback()

        self._settings = settings
        self._fallback: Optional[FallbackCallable] = fallback
        self._date_resolvers = {
            code: RelativeDateResolver(table) for code, table in LANGUAGE_TABLES.items()
        }
        self._time_resolvers = {
            code: TimeOfDayResolver(table) for code, table in LANGUAGE_TABLES.items()
        }

    @property
    def settings(self):
        return self._settings

    def _choose_language(self, text: str, language) -> LanguageCode:
        if language is not None:
            try:
                return LanguageCode(language)
            except ValueError:
                raise ValueError(
                    '"language" must be one of {}, not {!r}'.format(
                        ", ".join(SUPPORTED_LANGUAGES), language
                    )
                ) from None
        if self._settings.LANGUAGE is not None:
            return LanguageCode(self._settings.LANGUAGE)
        return detect_language(text)

    def parse(
        self,
        text: str,
        reference: Optional[datetime] = None,
        language: Optional[Union[LanguageCode, str]] = None,
    ) -> ParseResult:
        """
        Parse a sentence into a date and its non-temporal content.

        :param text:
            The sentence, e.g. "明天下午三点开会" or "today 3pm meeting".
        :type text: str

        :param reference:
            Instant relative expressions are resolved against. Defaults to the
            ``RELATIVE_BASE`` setting, else the current local time.
        :type reference: datetime

        :param language:
            Language code to use instead of detecting one.
        :type language: str

        :return: a ``ParseResult``.

        :raises: ValueError - Unknown language code
        """
        text = text or ""
        if reference is None:
            reference = self._settings.RELATIVE_BASE or datetime.now()
        language = self._choose_language(text, language)

        if not text.strip():
            return ParseResult(date=None, content=text, language=language)

        try:
            return self._parse_patterns(text, reference, language)
        except (InvalidNumeral, NoTimeMatch) as e:
            logger.debug(f"Pattern path failed for {text!r}: {e}")
        except Exception as e:
            logger.error(f"Error resolving {text!r} with pattern tables: {e}")

        try:
            return self._parse_fallback(text, reference, language)
        except FallbackExhausted as e:
            logger.debug(f"Could not parse {text!r}: {e}")
            return ParseResult(date=None, content=text, language=language)

    def _parse_patterns(self, text: str, reference: datetime, language: LanguageCode) -> ParseResult:
        anchor = self._date_resolvers[language].resolve(text, reference)
        tokens = [anchor.token] if anchor.token else []

        time_resolver = self._time_resolvers[language]
        try:
            time_token = time_resolver.match(text, exclude=tokens)
        except NoTimeMatch:
            if anchor.token is None:
                raise
            resolved = MIDNIGHT
            day_period = find_day_period(text, time_resolver.table)
            if day_period:
                tokens.append(day_period[1])
        else:
            resolved = time_resolver.resolve(time_token)
            tokens.append(time_token.match)
            if time_token.marker:
                tokens.append(time_token.marker)

        date = anchor.date.replace(hour=resolved.hour, minute=resolved.minute)
        content = extract_content(text, tokens)
        location, content = extract_location(content, LANGUAGE_TABLES[language].location_patterns)

        logger.debug(
            f"Parsed {text!r} [{language.value}] -> {date:%Y-%m-%d %H:%M}, "
            f"content {content!r}, location {location!r}, tokens {[t.text for t in tokens]}"
        )
        return ParseResult(
            date=date,
            content=content,
            location=location,
            language=language,
            source="pattern",
        )

    def _parse_fallback(self, text: str, reference: datetime, language: LanguageCode) -> ParseResult:
        if self._fallback is None:
            raise FallbackExhausted("fallback disabled")

        logger.debug(f"Invoking fallback {self._fallback!r} for {text!r}")
        try:
            found = self._fallback(text, reference, forward_date_bias=True)
        except Exception as e:
            logger.warning(f"Fallback delegate failed for {text!r}: {e}")
            found = None

        if found is None:
            raise FallbackExhausted("fallback found no date in %r" % (text,))

        content = extract_content(text, [found.matched_span])
        location, content = extract_location(content, LANGUAGE_TABLES[language].location_patterns)
        return ParseResult(
            date=found.resolved_instant,
            content=content,
            location=location,
            language=language,
            source="fallback",
        )
