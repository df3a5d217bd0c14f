"""
analytics_service.py - Analytics aggregation
Single responsibility: tallies and summary figures for the dashboard and charts.
"""
from collections import Counter
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from uxdebt.config import ANALYTICS_MONTHS, TIME_RANGES
from uxdebt.domain.models import DebtItem, DebtType, Severity, Status
from uxdebt.utils.time import month_key, parse_iso


@dataclass
class Summary:
    total: int
    open: int
    high_severity: int
    resolved: int
    accessibility: int
    resolution_rate: float


def count_by_type(items: list[DebtItem]) -> dict[DebtType, int]:
    return dict(Counter(i.type for i in items))


def count_by_severity(items: list[DebtItem]) -> dict[Severity, int]:
    return dict(Counter(i.severity for i in items))


def count_by_status(items: list[DebtItem]) -> dict[Status, int]:
    return dict(Counter(i.status for i in items))


def _trailing_months(now: datetime, months: int) -> list[str]:
    year, month = now.year, now.month
    keys = []
    for _ in range(months):
        keys.append(f"{year:04d}-{month:02d}")
        month -= 1
        if month == 0:
            month = 12
            year -= 1
    return list(reversed(keys))


def count_by_month(
    items: list[DebtItem],
    now: datetime | None = None,
    months: int = ANALYTICS_MONTHS,
) -> dict[str, int]:
    """Creation counts per calendar month, oldest first, zero-filled.

    Items outside the trailing window, or with unreadable timestamps, are ignored.
    """
    now = now or datetime.now(timezone.utc)
    buckets = {key: 0 for key in _trailing_months(now, months)}
    for item in items:
        created = parse_iso(item.created_at)
        if created is None:
            continue
        key = month_key(created)
        if key in buckets:
            buckets[key] += 1
    return buckets


def within_time_range(
    items: list[DebtItem],
    range_key: str = "all",
    now: datetime | None = None,
) -> list[DebtItem]:
    if range_key not in TIME_RANGES:
        raise ValueError(f"Unknown time range: {range_key}")
    days = TIME_RANGES[range_key]
    if days is None:
        return list(items)
    now = now or datetime.now(timezone.utc)
    cutoff = now - timedelta(days=days)
    result = []
    for item in items:
        created = parse_iso(item.created_at)
        if created is not None and created >= cutoff:
            result.append(item)
    return result


def summarize(items: list[DebtItem]) -> Summary:
    total = len(items)
    statuses = count_by_status(items)
    resolved = statuses.get(Status.RESOLVED, 0)
    return Summary(
        total=total,
        open=statuses.get(Status.OPEN, 0),
        high_severity=sum(1 for i in items if i.severity == Severity.HIGH),
        resolved=resolved,
        accessibility=sum(1 for i in items if i.type == DebtType.ACCESSIBILITY),
        resolution_rate=round(resolved / total * 100, 1) if total else 0.0,
    )
