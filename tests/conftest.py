# Shared fixtures: every test gets its own SQLite file under tmp_path.

from pathlib import Path

import pytest

from uxdebt.database.store import CollectionStore
from uxdebt.domain.models import DebtDraft, DebtItem, DebtType, Severity, Status
from uxdebt.services.debt_service import DebtService
from uxdebt.services.project_service import ProjectService


@pytest.fixture
def store(tmp_path: Path) -> CollectionStore:
    s = CollectionStore(str(tmp_path / "data.db"))
    s.initialize()
    return s


@pytest.fixture
def debts(store) -> DebtService:
    return DebtService(store)


@pytest.fixture
def projects(store) -> ProjectService:
    return ProjectService(store)


@pytest.fixture
def make_draft():
    def _make(**overrides) -> DebtDraft:
        values = dict(
            project_id="p1",
            title="Low contrast buttons",
            screen="Checkout",
            type="Accessibility",
            severity="High",
            description="Secondary buttons fail WCAG AA",
            recommendation="Darken the button text",
            logged_by="sam@example.com",
        )
        values.update(overrides)
        return DebtDraft(**values)

    return _make


@pytest.fixture
def make_item():
    counter = {"n": 0}

    def _make(**overrides) -> DebtItem:
        counter["n"] += 1
        n = counter["n"]
        values = dict(
            id=f"item-{n}",
            project_id="p1",
            title=f"Issue {n}",
            screen="Home",
            type=DebtType.VISUAL,
            severity=Severity.MEDIUM,
            description="Something looks off",
            recommendation="Fix it",
            logged_by="sam@example.com",
            status=Status.OPEN,
            created_at="2024-06-01T10:00:00+00:00",
            updated_at="2024-06-01T10:00:00+00:00",
        )
        values.update(overrides)
        return DebtItem(**values)

    return _make
