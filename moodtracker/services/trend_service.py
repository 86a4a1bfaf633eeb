"""Daily mood aggregation and the fixed-length trend window for the dashboard chart.

Every calendar date here is a UTC date. Stored timestamps without tzinfo
(pymongo's default decoding) are read as UTC.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import structlog

from moodtracker.models.trend import DayBucket, MoodCountStat, TrendSummary
from moodtracker.services.mood_scale import MOOD_LABELS, label_of_score, normalize_mood, score_of

logger = structlog.get_logger()

DEFAULT_WINDOW_DAYS = 7

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def utc_date(ts: datetime) -> date:
    if ts.tzinfo is None:
        return ts.date()
    return ts.astimezone(timezone.utc).date()


def date_key(d: date) -> str:
    return d.isoformat()


def empty_bucket(d: date) -> DayBucket:
    """Bucket for a day with no logged mood, still labelled for the x-axis."""
    return DayBucket(
        date_key=date_key(d),
        day=_WEEKDAYS[d.weekday()],
        label=f"{_MONTHS[d.month - 1]} {d.day}",
        scores=[],
        average=0.0,
    )


def _entry_fields(entry: Any) -> Tuple[Any, datetime]:
    if isinstance(entry, Mapping):
        return entry.get("mood"), entry["timestamp"]
    return entry.mood, entry.timestamp


def aggregate(entries: Iterable[Any]) -> Dict[str, DayBucket]:
    """Group mood entries by UTC day.

    Args:
        entries: MoodEntry models or raw Mongo documents with ``mood`` and
            ``timestamp``. Order does not matter.

    Returns:
        Mapping of ``YYYY-MM-DD`` to a bucket holding every score logged that
        day and their unrounded mean. Days without entries are absent.
    """
    buckets: Dict[str, DayBucket] = {}
    for entry in entries:
        mood, ts = _entry_fields(entry)
        day = utc_date(ts)
        key = date_key(day)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = empty_bucket(day)
            buckets[key] = bucket
        bucket.scores.append(score_of(mood))

    for bucket in buckets.values():
        bucket.average = sum(bucket.scores) / len(bucket.scores)
        bucket.mood_label = label_of_score(bucket.average)

    return buckets


def build_window(
    aggregated: Mapping[str, DayBucket],
    window_end_date: date,
    window_size_days: int = DEFAULT_WINDOW_DAYS,
) -> List[DayBucket]:
    """Pad an aggregation to exactly ``window_size_days`` buckets, oldest first,
    ending at ``window_end_date``.

    The first day of the window must not fall before ``date.min``; such an
    end date raises ``ValueError``.
    """
    if window_size_days < 1:
        raise ValueError(f"window_size_days must be >= 1, got {window_size_days}")
    if window_end_date.toordinal() < window_size_days:
        raise ValueError(
            f"a {window_size_days}-day window cannot end at {window_end_date.isoformat()}"
        )

    window = []
    for i in range(window_size_days - 1, -1, -1):
        day = window_end_date - timedelta(days=i)
        bucket = aggregated.get(date_key(day))
        window.append(bucket if bucket is not None else empty_bucket(day))
    return window


def _mood_counts(entries: Iterable[Any], keys: set) -> List[MoodCountStat]:
    counter: Dict[str, int] = {}
    for entry in entries:
        mood, ts = _entry_fields(entry)
        if date_key(utc_date(ts)) not in keys:
            continue
        label = normalize_mood(mood)
        counter[label] = counter.get(label, 0) + 1

    total = sum(counter.values())
    if total == 0:
        return []

    stats = [
        MoodCountStat(mood=mood, count=count, percentage=round(count / total * 100, 1))
        for mood, count in counter.items()
    ]
    stats.sort(key=lambda s: (-s.count, MOOD_LABELS.index(s.mood)))
    return stats


def _current_streak(window: List[DayBucket]) -> int:
    # Today without an entry yet does not break a streak that ran through yesterday
    days = list(reversed(window))
    if days and not days[0].scores:
        days = days[1:]

    streak = 0
    for bucket in days:
        if not bucket.scores:
            break
        streak += 1
    return streak


def summarize(
    entries: List[Any],
    window_end_date: date,
    window_size_days: int = DEFAULT_WINDOW_DAYS,
) -> TrendSummary:
    window = build_window(aggregate(entries), window_end_date, window_size_days)
    keys = {b.date_key for b in window}

    all_scores = [s for b in window for s in b.scores]
    week_average: Optional[float] = None
    if all_scores:
        week_average = sum(all_scores) / len(all_scores)

    summary = TrendSummary(
        window=window,
        mood_counts=_mood_counts(entries, keys),
        total_entries=len(all_scores),
        active_days=sum(1 for b in window if b.scores),
        week_average=week_average,
        current_streak=_current_streak(window),
    )
    logger.debug(
        "trend_summarized",
        end_date=date_key(window_end_date),
        entries=len(entries),
        active_days=summary.active_days,
    )
    return summary
