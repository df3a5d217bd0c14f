from uxdebt.domain.models import Severity
from uxdebt.ui_state import AppState


def test_list_view_uses_project_dropdown():
    state = AppState()
    state.project_filter = "p2"
    state.severity = "High"
    spec = state.filter_spec()
    assert spec.project_ids == frozenset({"p2"})
    assert spec.severity == Severity.HIGH


def test_open_project_pins_project_dimension():
    state = AppState()
    state.project_filter = "p2"
    state.selected_project_id = "p1"
    assert state.filter_spec().project_ids == frozenset({"p1"})


def test_active_filters():
    state = AppState()
    assert not state.has_active_filters()

    state.keyword = "  "
    assert not state.has_active_filters()

    state.project_filter = "p2"
    assert state.has_active_filters()

    state.clear_filters()
    assert not state.has_active_filters()


def test_open_project_alone_is_not_an_active_filter():
    state = AppState()
    state.selected_project_id = "p1"
    assert not state.has_active_filters()

    state.status = "Fixed"
    assert state.has_active_filters()
