"""
Tests for the TemporalParser facade and the package-level parse().

The fallback delegate is stubbed throughout so that nothing here depends on
dateparser's own heuristics.
"""

import pytest
from datetime import datetime

import schedparser
from schedparser import (
    FallbackMatch,
    LanguageCode,
    ParseResult,
    SettingValidationError,
    TemporalParser,
)


class RecordingFallback:
    """Fallback stub that records its calls and returns a fixed answer."""

    def __init__(self, answer=None, error=None):
        self.answer = answer
        self.error = error
        self.calls = []

    def __call__(self, text, reference, forward_date_bias=True):
        self.calls.append((text, reference, forward_date_bias))
        if self.error is not None:
            raise self.error
        return self.answer


@pytest.fixture
def reference():
    # Monday
    return datetime(2024, 1, 1, 10, 0)


@pytest.fixture
def fallback():
    return RecordingFallback()


@pytest.fixture
def parser(fallback):
    return TemporalParser(fallback=fallback)


# =============================================================================
# Reference scenarios
# =============================================================================

class TestScenarios:
    """End-to-end scenarios against reference Monday 2024-01-01."""

    def test_tomorrow_afternoon(self, parser, reference):
        result = parser.parse("明天下午三点开会", reference)
        assert result.date == datetime(2024, 1, 2, 15, 0)
        assert result.content == "开会"
        assert result.language is LanguageCode.ZH
        assert result.source == "pattern"

    def test_next_saturday_evening(self, parser, reference):
        result = parser.parse("下周六晚上八点数学", reference)
        assert result.date == datetime(2024, 1, 13, 20, 0)
        assert result.content == "数学"

    def test_next_next_tuesday_without_hour(self, parser, reference):
        result = parser.parse("下下周二早上考试", reference)
        assert result.date == datetime(2024, 1, 16, 0, 0)
        assert result.content == "考试"

    def test_unresolvable_numeral_goes_to_fallback(self, parser, fallback, reference):
        result = parser.parse("晚上X点", reference)
        assert fallback.calls == [("晚上X点", reference, True)]
        assert result == ParseResult(date=None, content="晚上X点", language=LanguageCode.ZH)

    def test_english_today(self, parser, reference):
        result = parser.parse("today 3pm meeting", reference)
        assert result.date == datetime(2024, 1, 1, 15, 0)
        assert result.content == "meeting"
        assert result.language is LanguageCode.EN


# =============================================================================
# Primary path
# =============================================================================

class TestPatternPath:
    """Tests for sentences the language tables resolve on their own."""

    @pytest.mark.parametrize("text,language,expected,content", [
        ("下周六七点上课", "zh", datetime(2024, 1, 13, 7, 0), "上课"),
        ("今晚八点吃饭", "zh", datetime(2024, 1, 1, 20, 0), "吃饭"),
        ("后天上午十点半面试", "zh", datetime(2024, 1, 3, 10, 30), "面试"),
        ("周五下午两点交报告", "zh", datetime(2024, 1, 5, 14, 0), "交报告"),
        ("晚上八点跑步", "zh", datetime(2024, 1, 1, 20, 0), "跑步"),
        ("明天 14:30 牙医", "zh", datetime(2024, 1, 2, 14, 30), "牙医"),
        ("来週の土曜日 午後3時 会議", "ja", datetime(2024, 1, 13, 15, 0), "会議"),
        ("あした ごご 3じ かいぎ", "ja", datetime(2024, 1, 2, 15, 0), "かいぎ"),
        ("내일 오후 3시 회의", "ko", datetime(2024, 1, 2, 15, 0), "회의"),
        ("다음 주 토요일 저녁 일곱시 반 저녁 식사", "ko", datetime(2024, 1, 13, 19, 30), "저녁 식사"),
        ("tomorrow at 9:30am standup", "en", datetime(2024, 1, 2, 9, 30), "standup"),
        ("next Saturday 8pm dinner", "en", datetime(2024, 1, 13, 20, 0), "dinner"),
    ])
    def test_parse(self, parser, fallback, reference, text, language, expected, content):
        result = parser.parse(text, reference, language=language)
        assert result.date == expected
        assert result.content == content
        assert result.source == "pattern"
        assert fallback.calls == []

    def test_date_without_time_is_midnight(self, parser, reference):
        result = parser.parse("明天开会", reference)
        assert result.date == datetime(2024, 1, 2, 0, 0)
        assert result.content == "开会"

    def test_time_without_date_is_reference_day(self, parser, reference):
        result = parser.parse("下午三点开会", reference)
        assert result.date == datetime(2024, 1, 1, 15, 0)

    def test_detected_language_is_used(self, parser, reference):
        result = parser.parse("내일 오후 3시 회의", reference)
        assert result.language is LanguageCode.KO
        assert result.date == datetime(2024, 1, 2, 15, 0)

    def test_explicit_language_overrides_detection(self, parser, reference):
        """Kanji-bearing Japanese is detected as Chinese unless told otherwise."""
        text = "明後日 午後3時 会議"
        result = parser.parse(text, reference, language="ja")
        assert result.language is LanguageCode.JA
        assert result.date == datetime(2024, 1, 3, 15, 0)
        assert result.content == "会議"

    def test_unknown_language_raises(self, parser, reference):
        with pytest.raises(ValueError, match="must be one of"):
            parser.parse("明天", reference, language="fr")

    def test_unknown_language_setting_raises_the_same_way(self):
        with pytest.raises(ValueError, match="must be one of"):
            TemporalParser(fallback=None, settings={"LANGUAGE": "fr"})

    def test_idempotent(self, parser, reference):
        text = "下周六晚上八点数学"
        assert parser.parse(text, reference) == parser.parse(text, reference)

    def test_reference_defaults_to_now(self, parser):
        before = datetime.now()
        result = parser.parse("明天开会")
        assert result.date.date() >= before.date()


# =============================================================================
# Content round trip
# =============================================================================

DATE_MARKERS = {
    "明天": datetime(2024, 1, 2),
    "后天": datetime(2024, 1, 3),
    "下周六": datetime(2024, 1, 13),
}


class TestContentRoundTrip:
    """<date><period><numeral>点<content> always gives back <content> untouched."""

    @pytest.mark.parametrize("date_marker", sorted(DATE_MARKERS))
    @pytest.mark.parametrize("period_marker", ["下午", "晚上"])
    @pytest.mark.parametrize("numeral,hour", [("三", 15), ("八", 20)])
    @pytest.mark.parametrize("content", [
        "开会",
        "十字路口见面",
        "二十个人开会",
        "5公里跑步",
        "刻章",
    ])
    def test_round_trip(self, parser, reference, date_marker, period_marker, numeral, hour, content):
        text = date_marker + period_marker + numeral + "点" + content
        result = parser.parse(text, reference)
        assert result.content == content
        assert result.date == DATE_MARKERS[date_marker].replace(hour=hour)

    @pytest.mark.parametrize("text,minute", [
        ("明天下午三点二十分开会", 20),
        ("明天下午三点十五 开会", 15),
        ("明天下午三点一刻开会", 15),
        ("明天下午三点半开会", 30),
        ("明天下午三点20分开会", 20),
    ])
    def test_minutes_are_still_read(self, parser, reference, text, minute):
        result = parser.parse(text, reference)
        assert result.date == datetime(2024, 1, 2, 15, minute)
        assert result.content == "开会"


class TestCountedWeeks:
    """Week counts and frequencies are task text, not weekday markers."""

    @pytest.mark.parametrize("text,expected,content", [
        ("每周三次健身下午三点", datetime(2024, 1, 1, 15, 0), "每周三次健身"),
        ("一周三天健身晚上八点", datetime(2024, 1, 1, 20, 0), "一周三天健身"),
        ("下周三次会议下午两点", datetime(2024, 1, 1, 14, 0), "下周三次会议"),
    ])
    def test_not_a_weekday(self, parser, reference, text, expected, content):
        result = parser.parse(text, reference)
        assert result.date == expected
        assert result.content == content

    @pytest.mark.parametrize("text,expected", [
        ("周三下午三点健身", datetime(2024, 1, 3, 15, 0)),
        ("这周三下午三点健身", datetime(2024, 1, 3, 15, 0)),
        ("下周三下午三点健身", datetime(2024, 1, 10, 15, 0)),
    ])
    def test_weekday_still_matches(self, parser, reference, text, expected):
        result = parser.parse(text, reference)
        assert result.date == expected
        assert result.content == "健身"


# =============================================================================
# Location
# =============================================================================

class TestLocation:
    """Place phrases are split off the content after the temporal tokens."""

    @pytest.mark.parametrize("text,language,expected,location,content", [
        ("明天下午三点在会议室开会", None, datetime(2024, 1, 2, 15, 0), "会议室", "开会"),
        ("后天上午十点到机场去接人", None, datetime(2024, 1, 3, 10, 0), "机场", "去接人"),
        ("今晚七点在门口等我", None, datetime(2024, 1, 1, 19, 0), "门口", "等我"),
        ("明日 午後3時 会議室で会議", "ja", datetime(2024, 1, 2, 15, 0), "会議室", "会議"),
        ("내일 오후 3시 회의실에서 회의", None, datetime(2024, 1, 2, 15, 0), "회의실", "회의"),
    ])
    def test_location(self, parser, reference, text, language, expected, location, content):
        result = parser.parse(text, reference, language=language)
        assert result.date == expected
        assert result.location == location
        assert result.content == content

    @pytest.mark.parametrize("text", ["明天下午三点开会", "today 3pm meeting at the office"])
    def test_no_location(self, parser, reference, text):
        assert parser.parse(text, reference).location is None

    def test_location_after_fallback(self, reference):
        answer = FallbackMatch(matched_span="March 5, 2024", resolved_instant=datetime(2024, 3, 5))
        parser = TemporalParser(fallback=RecordingFallback(answer=answer))
        result = parser.parse("在公司开会 March 5, 2024", reference)
        assert result.source == "fallback"
        assert result.location == "公司"
        assert result.content == "开会"

    def test_unresolved_keeps_text_and_no_location(self, parser, reference):
        result = parser.parse("在会议室开会", reference)
        assert result.date is None
        assert result.location is None
        assert result.content == "在会议室开会"


# =============================================================================
# Fallback path
# =============================================================================

class TestFallback:
    """Tests for the hand-off to the fallback delegate."""

    def test_invalid_numeral_falls_back(self, reference):
        fallback = RecordingFallback()
        result = TemporalParser(fallback=fallback).parse("晚上十十点", reference)
        assert len(fallback.calls) == 1
        assert result.date is None
        assert result.content == "晚上十十点"

    def test_fallback_result_is_used(self, reference):
        answer = FallbackMatch(matched_span="March 5, 2024", resolved_instant=datetime(2024, 3, 5))
        fallback = RecordingFallback(answer=answer)
        result = TemporalParser(fallback=fallback).parse("dinner on March 5, 2024", reference)
        assert result.date == datetime(2024, 3, 5)
        assert result.content == "dinner on"
        assert result.source == "fallback"

    def test_fallback_exception_is_recovered(self, reference, caplog):
        fallback = RecordingFallback(error=RuntimeError("boom"))
        with caplog.at_level("WARNING", logger="schedparser.parser"):
            result = TemporalParser(fallback=fallback).parse("sometime soon", reference)
        assert result == ParseResult(date=None, content="sometime soon", language=LanguageCode.EN)
        assert "boom" in caplog.text

    def test_fallback_disabled_with_none(self, reference):
        result = TemporalParser(fallback=None).parse("sometime soon", reference)
        assert result.date is None
        assert result.content == "sometime soon"

    def test_fallback_disabled_by_setting(self, reference):
        fallback = RecordingFallback()
        parser = TemporalParser(fallback=fallback, settings={"FALLBACK": False})
        result = parser.parse("sometime soon", reference)
        assert fallback.calls == []
        assert result.date is None

    def test_date_marker_alone_does_not_fall_back(self, parser, fallback, reference):
        parser.parse("后天", reference)
        assert fallback.calls == []

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_input(self, parser, fallback, text):
        result = parser.parse(text)
        assert result.date is None
        assert result.content == text
        assert fallback.calls == []


# =============================================================================
# Settings and package-level parse()
# =============================================================================

class TestSettings:
    """Tests for settings flowing through the parser."""

    def test_relative_base_setting(self):
        parser = TemporalParser(
            fallback=None, settings={"RELATIVE_BASE": datetime(2024, 1, 1)}
        )
        assert parser.parse("明天开会").date == datetime(2024, 1, 2)

    def test_language_setting(self):
        parser = TemporalParser(fallback=None, settings={"LANGUAGE": "ja"})
        result = parser.parse("明日 午後3時", datetime(2024, 1, 1))
        assert result.language is LanguageCode.JA
        assert result.date == datetime(2024, 1, 2, 15, 0)

    def test_invalid_setting(self):
        with pytest.raises(SettingValidationError):
            TemporalParser(settings={"LANGUAGE": "fr"})

    def test_module_parse(self, reference):
        result = schedparser.parse(
            "明天下午三点开会", reference=reference, settings={"FALLBACK": False}
        )
        assert result.date == datetime(2024, 1, 2, 15, 0)
        assert result.content == "开会"

    def test_module_parse_with_relative_base(self):
        result = schedparser.parse(
            "today 3pm meeting",
            settings={"RELATIVE_BASE": datetime(2024, 1, 1), "FALLBACK": False},
        )
        assert result.date == datetime(2024, 1, 1, 15, 0)
