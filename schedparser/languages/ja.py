import regex as re

from .table import LanguageCode, LanguageTable, frozen

NUMERALS = {
    '零': 0, '〇': 0,
    '一': 1, '二': 2, '三': 3, '四': 4, '五': 5,
    '六': 6, '七': 7, '八': 8, '九': 9,
    '十': 10,
}

MINUTE_WORDS = {
    '半': 30,
    'はん': 30,
}

WEEKDAYS = {
    '月': 0, '火': 1, '水': 2, '木': 3, '金': 4, '土': 5, '日': 6,
    'げつ': 0, 'か': 1, 'すい': 2, 'もく': 3, 'きん': 4, 'ど': 5, 'にち': 6,
}

_DIGITS = r"[0-9０-９]"
_NUMERAL = r"[零〇一二三四五六七八九十]"
_MINUTE_UNIT = r"(?:分|ふん|ぷん)"

TIME_PATTERNS = (
    re.compile(r"(?P<hour>%s{1,2})\s*[:：]\s*(?P<minute>%s{2})" % (_DIGITS, _DIGITS)),
    re.compile(
        r"(?P<hour>%(d)s{1,2}|%(n)s{1,3})\s*(?:時(?!間)|じ(?!かん))"
        r"(?:\s*(?P<minute>半|はん|(?:%(d)s{1,2}|%(n)s{1,3})(?=\s*%(u)s))\s*%(u)s?)?"
        % {"d": _DIGITS, "n": _NUMERAL, "u": _MINUTE_UNIT}
    ),
)

_WEEKDAY = (
    r"(?:(?P<weekday>[月火水木金土日])曜日?"
    r"|(?P<weekday>げつ|か|すい|もく|きん|ど|にち)ようび)"
)

# "会議室で会議", "駅で待ち合わせ"
LOCATION_PATTERNS = (
    re.compile(
        r"(?P<location>[^\s、。,.!?！？]+?)で"
        r"(?=会議|打ち合わせ|待ち合わせ|ミーティング|食事|授業|会う|会いましょう)"
    ),
)

TABLE = LanguageTable(
    code=LanguageCode.JA,
    numerals=frozen(NUMERALS),
    tens_markers=('十',),
    minute_words=frozen(MINUTE_WORDS),
    time_patterns=TIME_PATTERNS,
    am_markers=re.compile(r"午前|早朝|今朝|朝|ごぜん|あさ"),
    pm_markers=re.compile(r"午後|夕方|今夜|今晩|夜|晩|ごご|ゆうがた|よる|こんや"),
    day_after_tomorrow=re.compile(r"明後日|あさって"),
    tomorrow=re.compile(r"明日|あした|あす"),
    today=re.compile(r"今日|今朝|今夜|今晩|きょう"),
    next_next_weekday=re.compile(r"(?:再来週|さらいしゅう)\s*の?\s*" + _WEEKDAY),
    next_weekday=re.compile(r"(?:来週|らいしゅう)\s*の?\s*" + _WEEKDAY),
    weekday=re.compile(r"(?:(?:今週|こんしゅう)\s*の?\s*)?" + _WEEKDAY),
    weekdays=frozen(WEEKDAYS),
    location_patterns=LOCATION_PATTERNS,
)
