"""
board_service.py - Kanban board grouping
Single responsibility: split a (filtered) collection into the four status columns.
"""
from uxdebt.domain.models import STATUS_ORDER, DebtItem, Status


def group_by_status(items: list[DebtItem]) -> dict[Status, list[DebtItem]]:
    """Every column is present, empty ones included; within-column order is kept."""
    columns: dict[Status, list[DebtItem]] = {s: [] for s in STATUS_ORDER}
    for item in items:
        columns[item.status].append(item)
    return columns
