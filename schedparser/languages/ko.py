import regex as re

from .table import LanguageCode, LanguageTable, frozen

# Sino-Korean digits and the native counting words used with 시.
NUMERALS = {
    '영': 0, '공': 0,
    '일': 1, '이': 2, '삼': 3, '사': 4, '오': 5,
    '육': 6, '륙': 6, '칠': 7, '팔': 8, '구': 9,
    '십': 10,
    '한': 1, '하나': 1,
    '두': 2, '둘': 2,
    '세': 3, '셋': 3,
    '네': 4, '넷': 4,
    '다섯': 5, '여섯': 6, '일곱': 7, '여덟': 8, '아홉': 9,
    '열': 10,
}

MINUTE_WORDS = {
    '반': 30,
}

WEEKDAYS = {
    '월': 0, '화': 1, '수': 2, '목': 3, '금': 4, '토': 5, '일': 6,
}

_DIGITS = r"[0-9０-９]"
_SINO = r"[영공일이삼사오육륙칠팔구십]"
_NATIVE = r"열한|열두|하나|다섯|여섯|일곱|여덟|아홉|한|두|세|네|열"

TIME_PATTERNS = (
    re.compile(r"(?P<hour>%s{1,2})\s*[:：]\s*(?P<minute>%s{2})" % (_DIGITS, _DIGITS)),
    re.compile(
        r"(?P<hour>%(d)s{1,2}|%(native)s|%(sino)s{1,3})\s*시(?!간)"
        r"(?:\s*(?P<minute>반|(?:%(d)s{1,2}|%(sino)s{1,3})(?=\s*분))\s*분?)?"
        % {"d": _DIGITS, "native": _NATIVE, "sino": _SINO}
    ),
)

_WEEKDAY = r"(?P<weekday>[월화수목금토일])요일"

# "회의실에서 회의", "카페에서 만나요"
LOCATION_PATTERNS = (
    re.compile(
        r"(?P<location>[^\s,.!?]+?)에서(?=\s*(?:회의|미팅|만나|식사|수업|공부))"
    ),
)

TABLE = LanguageTable(
    code=LanguageCode.KO,
    numerals=frozen(NUMERALS),
    tens_markers=('십', '열'),
    minute_words=frozen(MINUTE_WORDS),
    time_patterns=TIME_PATTERNS,
    am_markers=re.compile(r"오전|아침|새벽"),
    pm_markers=re.compile(r"오후|저녁|낮|밤"),
    day_after_tomorrow=re.compile(r"내일\s*모레|모레"),
    tomorrow=re.compile(r"내일"),
    today=re.compile(r"오늘"),
    next_next_weekday=re.compile(r"다다음\s*주\s*" + _WEEKDAY),
    next_weekday=re.compile(r"(?<!다)다음\s*주\s*" + _WEEKDAY),
    weekday=re.compile(r"(?:이번\s*주\s*)?" + _WEEKDAY),
    weekdays=frozen(WEEKDAYS),
    location_patterns=LOCATION_PATTERNS,
)
