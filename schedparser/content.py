"""
Content extraction.

Removes the temporal tokens recorded during resolution from the original
sentence, leaving the task content ("下周六晚上八点数学" -> "数学"), and
splits a place phrase off that content ("在会议室开会" -> "会议室", "开会").
Temporal text is removed only where resolution recorded it; it is never
re-matched here.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

import regex as re

logger = logging.getLogger(__name__)

RE_SPACES = re.compile(r"\s+")


@dataclass(frozen=True)
class MatchedToken:
    """An exact match recorded while resolving a sentence."""
    text: str           # The matched substring
    start: int          # Start character offset in the original text
    end: int            # End character offset in the original text
    kind: str           # "date", "time" or "period"

    @classmethod
    def from_match(cls, match, kind: str) -> "MatchedToken":
        return cls(text=match.group(0), start=match.start(), end=match.end(), kind=kind)

    def overlaps(self, start: int, end: int) -> bool:
        return self.start < end and start < self.end


def mask(text: str, tokens: Iterable[MatchedToken], fill: str = "\0") -> str:
    """Blank out token spans so later patterns cannot match inside them.

    Offsets are preserved, so matches against the masked text map back onto
    the original.
    """
    chars = list(text)
    for token in tokens:
        for i in range(token.start, min(token.end, len(chars))):
            chars[i] = fill
    return "".join(chars)


def _find_free_occurrence(original: str, token: str, taken: List[Tuple[int, int]]):
    index = original.find(token)
    while index != -1:
        end = index + len(token)
        if not any(start < end and index < stop for start, stop in taken):
            return index, end
        index = original.find(token, index + 1)
    return None


def extract_content(original: str, matched_tokens: Iterable[Union[MatchedToken, str]]) -> str:
    """
    Remove matched tokens from the original text and tidy the remainder.

    Args:
        original: The sentence the tokens were matched in.
        matched_tokens: Tokens in the order they were matched. A MatchedToken
            removes exactly its recorded span; a plain string removes its first
            occurrence that is still free.

    Returns:
        The remaining text with runs of whitespace collapsed and trimmed.
    """
    taken: List[Tuple[int, int]] = []

    for token in matched_tokens:
        if not token:
            continue

        if isinstance(token, MatchedToken):
            if original[token.start:token.end] != token.text:
                logger.debug(f"Token {token.text!r} does not match its span, skipped")
                continue
            if any(token.overlaps(start, end) for start, end in taken):
                continue
            taken.append((token.start, token.end))
        else:
            span = _find_free_occurrence(original, token, taken)
            if span is None:
                logger.debug(f"Token {token!r} not found in {original!r}, skipped")
                continue
            taken.append(span)

    pieces = []
    position = 0
    for start, end in sorted(taken):
        pieces.append(original[position:start])
        position = end
    pieces.append(original[position:])

    return RE_SPACES.sub(" ", "".join(pieces)).strip()


def extract_location(content: str, patterns: Iterable) -> Tuple[Optional[str], str]:
    """
    Pull a place phrase out of the extracted content.

    The first pattern that matches wins. Its whole match ("在会议室") is
    removed and its ``location`` group ("会议室") returned; the activity
    word after it stays in the content.

    Returns:
        (location or None, remaining content)
    """
    for pattern in patterns:
        found = pattern.search(content)
        if not found:
            continue

        location = found.group("location").strip()
        if not location:
            continue

        remaining = content[:found.start()] + content[found.end():]
        logger.debug(f"Location {location!r} extracted from {content!r}")
        return location, RE_SPACES.sub(" ", remaining).strip()

    return None, content
