"""
Exceptions raised while resolving temporal expressions.

Every failure the pattern-based path can hit derives from
``TemporalParseError``. The facade (:class:`schedparser.parser.TemporalParser`)
recovers all of them; the lower-level resolvers raise them to their callers.
"""


class TemporalParseError(ValueError):
    """Base class for temporal resolution failures."""


class InvalidNumeral(TemporalParseError):
    """A numeral token is empty, malformed, unmapped or out of range."""

    def __init__(self, token, language=None, reason=None):
        self.token = token
        self.language = language
        message = "invalid numeral %r" % (token,)
        if language is not None:
            message += " for language %r" % getattr(language, "value", language)
        if reason:
            message += ": %s" % reason
        super().__init__(message)


class NoTimeMatch(TemporalParseError):
    """No time-of-day pattern matched the input."""


class NoDateMarker(TemporalParseError):
    """No relative-date marker was found. Resolvers treat this as "today"."""


class FallbackExhausted(TemporalParseError):
    """Neither the primary patterns nor the fallback delegate produced a date."""
