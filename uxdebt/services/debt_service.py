"""
debt_service.py - Debt item service layer
Single responsibility: debt item lifecycle (create, status transitions, removal).

Mutations are two-phase: the in-memory collection is updated first, then the
whole collection is persisted. A failed save is logged and re-raised as
PersistenceError carrying the updated item; the in-memory change is kept so the
UI keeps showing what the user did.
"""

import logging
import uuid
from dataclasses import replace

from uxdebt.database.repositories import debt_items as debt_repo
from uxdebt.database.store import CollectionStore
from uxdebt.domain.errors import NotFoundError, PersistenceError, ValidationError
from uxdebt.domain.models import (
    STATUS_FLOW,
    DebtDraft,
    DebtItem,
    DebtType,
    Severity,
    Status,
)
from uxdebt.utils.time import now_iso

logger = logging.getLogger(__name__)

_REQUIRED_TEXT_FIELDS = {
    "title": "Title is required",
    "screen": "Screen/Component is required",
    "description": "Description is required",
    "recommendation": "Recommendation is required",
    "logged_by": "Logged by is required",
}


def _new_id() -> str:
    return uuid.uuid4().hex


def _coerce(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


def validate_draft(draft: DebtDraft) -> dict[str, str]:
    """Return every failing field mapped to its message (empty when valid)."""
    errors: dict[str, str] = {}
    if not (draft.project_id or "").strip():
        errors["project_id"] = "Project is required"
    for name, message in _REQUIRED_TEXT_FIELDS.items():
        if not (getattr(draft, name) or "").strip():
            errors[name] = message
    if _coerce(DebtType, draft.type) is None:
        errors["type"] = "Type is required"
    if _coerce(Severity, draft.severity) is None:
        errors["severity"] = "Severity is required"
    return errors


def next_status(status: Status) -> Status | None:
    return STATUS_FLOW[status]


class DebtService:
    def __init__(self, store: CollectionStore):
        self.store = store
        self._items: list[DebtItem] = []
        self.reload()

    def reload(self) -> None:
        self._items = debt_repo.load_all(self.store)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_all(self) -> list[DebtItem]:
        return list(self._items)

    def list_for_project(self, project_id: str) -> list[DebtItem]:
        return [i for i in self._items if i.project_id == project_id]

    def get(self, item_id: str) -> DebtItem:
        for item in self._items:
            if item.id == item_id:
                return item
        raise NotFoundError("Debt item", item_id)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def _persist(self, item: DebtItem | None = None) -> None:
        try:
            debt_repo.save_all(self.store, self._items)
        except PersistenceError as e:
            logger.error("Debt items not saved; keeping in-memory change: %s", e)
            e.item = item
            raise

    def _replace(self, updated: DebtItem) -> DebtItem:
        for idx, existing in enumerate(self._items):
            if existing.id == updated.id:
                self._items[idx] = updated
                break
        else:
            raise NotFoundError("Debt item", updated.id)
        self._persist(updated)
        return updated

    def create(self, draft: DebtDraft) -> DebtItem:
        errors = validate_draft(draft)
        if errors:
            raise ValidationError(errors)

        existing_ids = {i.id for i in self._items}
        item_id = _new_id()
        while item_id in existing_ids:
            item_id = _new_id()

        now = now_iso()
        item = DebtItem(
            id=item_id,
            project_id=draft.project_id.strip(),
            title=draft.title.strip(),
            screen=draft.screen.strip(),
            type=_coerce(DebtType, draft.type),
            severity=_coerce(Severity, draft.severity),
            description=draft.description.strip(),
            recommendation=draft.recommendation.strip(),
            logged_by=draft.logged_by.strip(),
            status=Status.OPEN,
            created_at=now,
            updated_at=now,
            screenshot=draft.screenshot or None,
            figma_link=(draft.figma_link or "").strip() or None,
        )
        self._items.append(item)
        logger.info("Created debt item %s in project %s", item.id, item.project_id)
        self._persist(item)
        return item

    def advance(self, item: DebtItem) -> DebtItem:
        current = self.get(item.id)
        successor = next_status(current.status)
        if successor is None:
            return current
        return self._replace(replace(current, status=successor, updated_at=now_iso()))

    def set_status(self, item: DebtItem, target: Status | str) -> DebtItem:
        status = _coerce(Status, target)
        if status is None:
            raise ValidationError({"status": f"Unknown status: {target}"})
        current = self.get(item.id)
        return self._replace(replace(current, status=status, updated_at=now_iso()))

    def remove(self, item_id: str) -> None:
        remaining = [i for i in self._items if i.id != item_id]
        if len(remaining) == len(self._items):
            return
        self._items = remaining
        logger.info("Removed debt item %s", item_id)
        self._persist()
