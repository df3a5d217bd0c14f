"""
debt_items.py - Debt item repository
Single responsibility: map DebtItem objects to and from stored records.
"""

import logging

from uxdebt.config import DEBT_ITEMS_KEY
from uxdebt.database.store import CollectionStore
from uxdebt.domain.models import DebtItem, DebtType, Severity, Status

logger = logging.getLogger(__name__)


def to_record(item: DebtItem) -> dict:
    record = {
        "id": item.id,
        "projectId": item.project_id,
        "title": item.title,
        "screen": item.screen,
        "type": item.type.value,
        "severity": item.severity.value,
        "status": item.status.value,
        "description": item.description,
        "recommendation": item.recommendation,
        "loggedBy": item.logged_by,
        "createdAt": item.created_at,
        "updatedAt": item.updated_at,
    }
    if item.screenshot:
        record["screenshot"] = item.screenshot
    if item.figma_link:
        record["figmaLink"] = item.figma_link
    return record


def _text(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def _optional_text(data: dict, key: str) -> str | None:
    return _text(data, key) or None


def from_record(data: dict) -> DebtItem:
    """Build a DebtItem; raises KeyError/ValueError/TypeError on malformed records."""
    return DebtItem(
        id=str(data["id"]),
        project_id=str(data.get("projectId", "")),
        title=_text(data, "title"),
        screen=_text(data, "screen"),
        type=DebtType(data["type"]),
        severity=Severity(data["severity"]),
        status=Status(data.get("status", Status.OPEN.value)),
        description=_text(data, "description"),
        recommendation=_text(data, "recommendation"),
        logged_by=_text(data, "loggedBy"),
        created_at=_optional_text(data, "createdAt"),
        updated_at=_optional_text(data, "updatedAt") or _optional_text(data, "createdAt"),
        screenshot=_optional_text(data, "screenshot"),
        figma_link=_optional_text(data, "figmaLink"),
    )


def load_all(store: CollectionStore) -> list[DebtItem]:
    items: list[DebtItem] = []
    for data in store.load(DEBT_ITEMS_KEY):
        try:
            items.append(from_record(data))
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Skipping malformed debt item record: %s", e)
    return items


def save_all(store: CollectionStore, items: list[DebtItem]) -> None:
    store.save(DEBT_ITEMS_KEY, [to_record(i) for i in items])
