import pytest

from uxdebt.domain.errors import ValidationError
from uxdebt.domain.models import UserIdentity
from uxdebt.services.debt_service import DebtService
from uxdebt.services.project_service import ProjectService
from uxdebt.services.seed_service import DEMO_DEBT_ITEMS, DEMO_PROJECTS, seed_demo_data
from uxdebt.services.session_service import SessionService


def test_sign_in_and_out(store):
    session = SessionService(store)
    assert session.current_user() is None
    assert not session.is_signed_in()

    user = session.sign_in("  jane.doe@company.com ")
    assert user == UserIdentity(email="jane.doe@company.com")
    assert SessionService(store).current_user() == user

    session.sign_out()
    assert not session.is_signed_in()


@pytest.mark.parametrize("email", ["", "   ", "no-at-sign"])
def test_sign_in_rejects_bad_email(store, email):
    with pytest.raises(ValidationError):
        SessionService(store).sign_in(email)


@pytest.mark.parametrize(
    "email, initials",
    [
        ("jane.doe@company.com", "JD"),
        ("sam@company.com", "SA"),
        ("a_b@x.io", "AB"),
    ],
)
def test_initials(email, initials):
    assert UserIdentity(email=email).initials == initials


def test_seed_only_on_first_run(store):
    assert seed_demo_data(store) is True
    assert ProjectService(store).list_all() == DEMO_PROJECTS
    assert DebtService(store).list_all() == DEMO_DEBT_ITEMS

    ProjectService(store).remove("1")
    assert seed_demo_data(store) is False
    assert len(ProjectService(store).list_all()) == len(DEMO_PROJECTS) - 1


def test_seed_skipped_after_projects_cleared(store, projects):
    project = projects.create("Only")
    projects.remove(project.id)
    assert seed_demo_data(store) is False
    assert ProjectService(store).list_all() == []
