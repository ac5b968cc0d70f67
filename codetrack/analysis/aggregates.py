"""
Summary statistics and chart series over a user's problem collection.

Every function is pure: it takes the records and, where time matters, an
explicit ``now``. Stored timestamps are naive UTC; calendar dates are taken
in the time zone carried by ``now`` (UTC when ``now`` is naive), so callers
decide what "today" means by passing a localized ``now``.
"""

from collections import Counter
from datetime import date, datetime, timedelta, timezone

from codetrack.models.record import Difficulty, ProblemStatus


DIFFICULTY_COLORS = {
    Difficulty.EASY.value: '#22c55e',
    Difficulty.MEDIUM.value: '#f59e0b',
    Difficulty.HARD.value: '#ef4444',
}

TOP_TOPICS = 8
ACTIVITY_DAYS = 30
RECENT_DAYS = 7


def _is_solved(record) -> bool:
    return record.status == ProblemStatus.SOLVED.value


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def _zone(now: datetime):
    return now.tzinfo or timezone.utc


def _local_date(dt: datetime, now: datetime) -> date:
    """Calendar date of a stored timestamp in the zone of ``now``."""
    return _as_utc(dt).astimezone(_zone(now)).date()


def _today(now: datetime) -> date:
    return _as_utc(now).astimezone(_zone(now)).date()


def solve_counts(records) -> tuple:
    """Return ``(total, solved, solve_rate)``; the rate is a rounded percentage."""
    total = len(records)
    solved = sum(1 for r in records if _is_solved(r))
    solve_rate = round(solved / total * 100) if total > 0 else 0
    return total, solved, solve_rate


def count_solved_since(records, now: datetime, days: int = RECENT_DAYS) -> int:
    """Solved records whose solved_at lies in the rolling ``days``x24h window ending at now."""
    end = _as_utc(now)
    start = end - timedelta(days=days)
    return sum(
        1 for r in records
        if _is_solved(r) and r.solved_at and start <= _as_utc(r.solved_at) <= end
    )


def current_streak(records, now: datetime) -> int:
    """Consecutive calendar days with a solved problem, ending today or yesterday.

    Returns:
        0 when nothing was solved, or when the latest solved day is older
        than yesterday.
    """
    dates = sorted(
        set(
            _local_date(r.solved_at, now)
            for r in records
            if _is_solved(r) and r.solved_at
        ),
        reverse=True,
    )
    if not dates:
        return 0

    today = _today(now)
    if dates[0] not in (today, today - timedelta(days=1)):
        return 0

    streak = 1
    for prev, curr in zip(dates, dates[1:]):
        if (prev - curr).days == 1:
            streak += 1
        else:
            break
    return streak


def difficulty_breakdown(records) -> list:
    """Count per difficulty in Easy/Medium/Hard order, omitting empty buckets."""
    counter = Counter(r.difficulty for r in records)
    return [
        {'name': name, 'value': counter[name], 'color': DIFFICULTY_COLORS[name]}
        for name in Difficulty.values()
        if counter[name] > 0
    ]


def topic_breakdown(records, limit: int = TOP_TOPICS) -> list:
    """Most common topics, highest count first."""
    counter = Counter(r.topic for r in records)
    return [
        {'topic': topic, 'count': count}
        for topic, count in counter.most_common(limit)
    ]


def daily_activity(records, now: datetime, days: int = ACTIVITY_DAYS) -> list:
    """Problems solved per calendar day for the last ``days`` days, oldest first.

    Counts every record with a solved_at on that day regardless of its
    current status. Always returns exactly ``days`` entries.
    """
    today = _today(now)
    counter = Counter(
        _local_date(r.solved_at, now) for r in records if r.solved_at
    )
    series = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        series.append({'date': day.isoformat(), 'solved': counter.get(day, 0)})
    return series


def compute_stats(records, now: datetime) -> dict:
    """Headline numbers for the dashboard and analytics cards."""
    total, solved, solve_rate = solve_counts(records)
    return {
        'total': total,
        'solved': solved,
        'total_solved': solved,
        'solve_rate': solve_rate,
        'last_7_days': count_solved_since(records, now),
        'current_streak': current_streak(records, now),
    }


def compute_charts(records, now: datetime) -> dict:
    """Series for the analytics charts."""
    return {
        'difficulty_breakdown': difficulty_breakdown(records),
        'topic_breakdown': topic_breakdown(records),
        'daily_activity': daily_activity(records, now),
    }
