"""
Statistics derived from already-fetched projects and messages.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

CHART_COLORS = ['#3B82F6', '#F97316']


def compute_stats(projects: List[Dict[str, Any]], messages: List[Dict[str, Any]]) -> Dict[str, int]:
    """Counters shown on the dashboard cards"""
    return {
        'total': len(projects),
        'mobile': sum(1 for p in projects if p.get('type') == 'mobile'),
        'web': sum(1 for p in projects if p.get('type') == 'web'),
        'messages': len(messages),
        'unread': sum(1 for m in messages if not m.get('isRead')),
    }


def project_distribution(stats: Dict[str, int]) -> List[Dict[str, Any]]:
    return [
        {'name': 'Mobile Apps', 'value': stats.get('mobile', 0)},
        {'name': 'Web Apps', 'value': stats.get('web', 0)},
    ]


def last_days(today: Optional[date] = None, days: int = 7) -> List[date]:
    """Calendar days ending with today, oldest first"""
    if today is None:
        today = datetime.now(timezone.utc).date()
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def message_activity(messages: List[Dict[str, Any]], today: Optional[date] = None,
                     days: int = 7) -> List[Dict[str, Any]]:
    """
    Count messages per calendar day over a trailing window.

    A message belongs to a day when its createdAt string starts with that
    day's ISO date. Always returns one bucket per day, oldest first.
    """
    buckets = []
    for day in last_days(today, days):
        key = day.isoformat()
        count = sum(
            1 for m in messages
            if isinstance(m.get('createdAt'), str) and m['createdAt'].startswith(key)
        )
        buckets.append({'date': key, 'name': day.strftime('%a'), 'messages': count})
    return buckets


def build_dashboard_data(projects, messages, today=None):
    stats = compute_stats(projects, messages)
    return {
        'stats': stats,
        'distribution': project_distribution(stats),
        'activity': message_activity(messages, today=today),
        'colors': CHART_COLORS,
    }
