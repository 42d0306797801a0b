"""
Free-slot recommendation.

Given a task duration and the day's busy intervals, lists the working-hour
start times at which the task fits without overlapping anything. Busy
intervals arrive the way the scheduler stores them, as
``{"startTime": ISO-8601, "endTime": ISO-8601}`` mappings.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from dateutil.parser import isoparse
from tzlocal import get_localzone

from .conf import apply_settings
from .languages import LanguageCode

logger = logging.getLogger(__name__)

Interval = Tuple[datetime, datetime]

EXPLANATIONS = {
    LanguageCode.EN: {
        "morning": "Best time for focused work in the morning",
        "afternoon": "Good time for meetings and collaborative work",
        "evening": "Quiet time for wrapping up the day",
    },
    LanguageCode.ZH: {
        "morning": "早上是专注工作的最佳时间",
        "afternoon": "下午适合会议和协作工作",
        "evening": "傍晚是总结一天工作的安静时间",
    },
    LanguageCode.JA: {
        "morning": "朝は集中力の高い時間帯です",
        "afternoon": "午後は会議や共同作業に適しています",
        "evening": "夕方は一日の仕事をまとめる静かな時間です",
    },
    LanguageCode.KO: {
        "morning": "아침은 집중력이 높은 시간입니다",
        "afternoon": "오후는 회의와 협업에 적합합니다",
        "evening": "저녁은 하루 일과를 마무리하는 조용한 시간입니다",
    },
}


@dataclass(frozen=True)
class TimeSlot:
    """A recommended free slot."""
    start: datetime
    end: datetime
    explanation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startTime": self.start.isoformat(),
            "endTime": self.end.isoformat(),
            "explanation": self.explanation,
        }


def to_local_naive(value: Union[str, datetime]) -> datetime:
    """Parse an ISO-8601 string (or take a datetime) as naive local time."""
    if isinstance(value, str):
        value = isoparse(value)
    if value.tzinfo is not None:
        value = value.astimezone(get_localzone()).replace(tzinfo=None)
    return value


def parse_interval(interval: Union[Mapping[str, Any], Sequence[Any]]) -> Interval:
    """Accept ``{"startTime", "endTime"}`` mappings or ``(start, end)`` pairs."""
    if isinstance(interval, Mapping):
        start, end = interval["startTime"], interval["endTime"]
    else:
        start, end = interval
    start, end = to_local_naive(start), to_local_naive(end)
    if end < start:
        raise ValueError("interval ends before it starts: %s - %s" % (start, end))
    return start, end


def merge_intervals(intervals: Iterable[Interval]) -> List[Interval]:
    """Sort intervals and merge the ones that overlap or touch."""
    merged: List[Interval] = []
    for start, end in sorted(intervals):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def explain(hour: int, language: Union[LanguageCode, str] = LanguageCode.ZH) -> str:
    explanations = EXPLANATIONS[LanguageCode(language)]
    if hour < 12:
        return explanations["morning"]
    if hour < 15:
        return explanations["afternoon"]
    return explanations["evening"]


@apply_settings
def recommend_slots(
    duration_minutes: int,
    busy: Iterable[Union[Mapping[str, Any], Sequence[Any]]] = (),
    day: Union[date, datetime, None] = None,
    language: Union[LanguageCode, str] = LanguageCode.ZH,
    settings=None,
) -> List[TimeSlot]:
    """
    Recommend free slots on one day.

    Args:
        duration_minutes: Length of the task; must be positive.
        busy: Busy intervals, as ``{"startTime", "endTime"}`` ISO-8601
            mappings or ``(start, end)`` pairs.
        day: The day to search; defaults to today.
        language: Language of the slot explanations.
        settings: ``WORKING_HOURS``, ``LUNCH_BREAK`` and
            ``SLOT_STEP_MINUTES`` are used.

    Returns:
        Slots in chronological order. A candidate is skipped when it starts
        inside the lunch break or overlaps a busy interval.
    """
    if duration_minutes <= 0:
        raise ValueError("duration_minutes must be positive, not %r" % duration_minutes)

    if day is None:
        day = datetime.now()
    if not isinstance(day, datetime):
        day = datetime.combine(day, datetime.min.time())
    day = to_local_naive(day).replace(hour=0, minute=0, second=0, microsecond=0)

    work_start, work_end = settings.WORKING_HOURS
    lunch_start, lunch_end = settings.LUNCH_BREAK
    duration = timedelta(minutes=duration_minutes)
    step = timedelta(minutes=settings.SLOT_STEP_MINUTES)

    busy_intervals = merge_intervals(parse_interval(interval) for interval in busy)

    slots = []
    start = day + timedelta(hours=work_start)
    day_end = day + timedelta(hours=work_end)
    while start + duration <= day_end:
        end = start + duration
        in_lunch_break = lunch_start <= start.hour < lunch_end
        conflict = any(
            start < busy_end and end > busy_start for busy_start, busy_end in busy_intervals
        )
        if conflict:
            logger.debug(f"Slot {start:%H:%M}-{end:%H:%M} conflicts with a busy interval")
        if not (in_lunch_break or conflict):
            slots.append(TimeSlot(start, end, explain(start.hour, language)))
        start += step

    return slots
