"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across UI.
"""
from uxdebt.config import (
    COLOR_TEXT_MUTED,
    SEVERITY_COLORS,
    STATUS_COLORS,
    TYPE_COLORS,
)
from uxdebt.utils.time import parse_iso


def format_datetime(iso_str: str | None) -> str:
    """ISO 8601 string to "YYYY-MM-DD HH:MM"; fallback to raw on error."""
    dt = parse_iso(iso_str)
    if dt is None:
        return iso_str or ""
    return dt.strftime("%Y-%m-%d %H:%M")


def format_date(iso_str: str | None) -> str:
    """ISO 8601 string to "Jun 10, 2024"."""
    dt = parse_iso(iso_str)
    if dt is None:
        return iso_str or ""
    return f"{dt.strftime('%b')} {dt.day}, {dt.year}"


def _label(value) -> str:
    return getattr(value, "value", value) or ""


def status_color(status) -> str:
    return STATUS_COLORS.get(_label(status), COLOR_TEXT_MUTED)


def severity_color(severity) -> str:
    return SEVERITY_COLORS.get(_label(severity), COLOR_TEXT_MUTED)


def type_color(debt_type) -> str:
    return TYPE_COLORS.get(_label(debt_type), COLOR_TEXT_MUTED)


def greeting(email: str) -> str:
    return f"Hi, {email.split('@', 1)[0]}"
