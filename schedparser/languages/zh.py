import regex as re

from .table import LanguageCode, LanguageTable, frozen

NUMERALS = {
    '零': 0, '〇': 0,
    '一': 1,
    '二': 2, '两': 2, '兩': 2,
    '三': 3, '四': 4, '五': 5, '六': 6, '七': 7, '八': 8, '九': 9,
    '十': 10,
}

MINUTE_WORDS = {
    '半': 30,
    '刻': 15, '一刻': 15,
    '两刻': 30, '兩刻': 30, '二刻': 30,
    '三刻': 45,
}

WEEKDAYS = {
    '一': 0, '二': 1, '三': 2, '四': 3, '五': 4, '六': 5,
    '日': 6, '天': 6,
}

_DIGITS = r"[0-9０-９]"
_NUMERAL = r"[零〇一二两兩三四五六七八九十]"

# A bare minute ends at 分, whitespace, punctuation or the end of the text, so
# "三点十字路口" keeps "十字路口". Plain CJK numerals need 分 ("三点一起").
_BOUNDARY = r"(?=\s*分|\s|$|[，。、；：,.;:!?！？）)])"
_MINUTE = (
    r"(?P<minute>半|[一二两兩三]刻"
    r"|(?:刻|%(d)s{1,2}|[一二三四五]?十[一二三四五六七八九]?)%(b)s"
    r"|%(n)s{1,3}(?=\s*分))"
) % {"d": _DIGITS, "n": _NUMERAL, "b": _BOUNDARY}

TIME_PATTERNS = (
    re.compile(r"(?P<hour>%s{1,2})\s*[:：]\s*(?P<minute>%s{2})" % (_DIGITS, _DIGITS)),
    re.compile(
        r"(?P<hour>%s{1,2}|%s{1,3})\s*[点點时時](?:钟|鐘)?"
        r"(?:\s*(?:[零〇](?=[一二三四五六七八九]))?%s\s*分?)?" % (_DIGITS, _NUMERAL, _MINUTE)
    ),
)

AM_MARKERS = re.compile(r"凌晨|清晨|早上|早晨|早间|上午|今早|明早")
PM_MARKERS = re.compile(
    r"下午|午后|午後|中午|傍晚|黄昏|晚上|夜晚|夜里|夜裡|夜间|夜間|深夜|半夜|今晚|明晚"
)

_WEEK = r"(?:周|週|星期|礼拜|禮拜)"
# "每周三次" and "三周" count weeks; "周三次" counts times.
_WEEKDAY = r"\s*(?P<weekday>[一二三四五六日天])(?![次个個回遍])"
_NOT_COUNTED = r"(?<![每一二两兩三四五六七八九十几幾])"

# Place phrases: "在会议室开会", "到机场去", "在门口等". The activity word stays.
_PLACE = r"(?P<location>[^\s，。、,.;；!?！？]+?)"
LOCATION_PATTERNS = (
    re.compile(r"在" + _PLACE + r"(?=开会|開會|见面|見面|上课|上課|吃饭|吃飯)"),
    re.compile(r"到" + _PLACE + r"(?=去|来|來|见|見)"),
    re.compile(r"在" + _PLACE + r"(?=等|见|見)"),
)

TABLE = LanguageTable(
    code=LanguageCode.ZH,
    numerals=frozen(NUMERALS),
    tens_markers=('十',),
    minute_words=frozen(MINUTE_WORDS),
    time_patterns=TIME_PATTERNS,
    am_markers=AM_MARKERS,
    pm_markers=PM_MARKERS,
    day_after_tomorrow=re.compile(r"(?<!大)(?:后天|後天)"),
    tomorrow=re.compile(r"明天|明日|明早|明晚"),
    today=re.compile(r"今天|今日|今早|今晚"),
    next_next_weekday=re.compile(r"下下(?:个|個)?\s*" + _WEEK + _WEEKDAY),
    next_weekday=re.compile(r"下(?:个|個)?\s*" + _WEEK + _WEEKDAY),
    weekday=re.compile(r"(?:(?:这|這|本)(?:个|個)?)?" + _NOT_COUNTED + _WEEK + _WEEKDAY),
    weekdays=frozen(WEEKDAYS),
    location_patterns=LOCATION_PATTERNS,
)
