from datetime import datetime, timezone

from flask import current_app

from codetrack import display_timezone
from codetrack.analysis.aggregates import compute_stats, compute_charts
from codetrack.services.problem_store import ProblemStore


def _display_now(now=None):
    """Current instant in the configured display zone (naive values are UTC)."""
    now = now or datetime.utcnow()
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(display_timezone(current_app))


class StatsService:
    @staticmethod
    def get_dashboard_data(user_id: int, now=None) -> dict:
        problems = ProblemStore(user_id).list()
        return {
            'stats': compute_stats(problems, _display_now(now)),
            'recent_problems': problems[:5],
        }

    @staticmethod
    def get_analytics_data(user_id: int, now=None) -> dict:
        problems = ProblemStore(user_id).list()
        now = _display_now(now)
        return {
            'stats': compute_stats(problems, now),
            'charts': compute_charts(problems, now),
        }
