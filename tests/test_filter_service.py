import pytest

from uxdebt.domain.filters import FilterSpec
from uxdebt.domain.models import DebtType, Severity, Status
from uxdebt.services import filter_service


@pytest.fixture
def five_items(make_item):
    severities = [Severity.HIGH, Severity.MEDIUM, Severity.LOW, Severity.HIGH, Severity.MEDIUM]
    return [make_item(severity=s) for s in severities]


def test_default_spec_is_identity(five_items):
    result = filter_service.apply(five_items, FilterSpec())
    assert result == five_items
    assert result is not five_items


def test_severity_scenario(five_items):
    result = filter_service.apply(five_items, FilterSpec(severity=Severity.HIGH))
    assert result == [five_items[0], five_items[3]]


def test_apply_does_not_mutate_input(five_items):
    before = list(five_items)
    filter_service.apply(five_items, FilterSpec(severity=Severity.LOW))
    assert five_items == before


def test_order_is_preserved(make_item):
    items = [
        make_item(type=DebtType.COPY if n % 2 else DebtType.VISUAL, title=f"T{n}")
        for n in range(10)
    ]
    result = filter_service.apply(items, FilterSpec(type=DebtType.COPY))
    positions = [items.index(i) for i in result]
    assert positions == sorted(positions)
    assert len(result) == 5


def test_search_matches_description_case_insensitively(make_item):
    hit = make_item(title="Buttons hard to read", description="Poor contrast on hover")
    upper = make_item(title="Contrast issue", description="n/a")
    miss = make_item(title="Typo", description="Spelling in footer")
    result = filter_service.apply([hit, upper, miss], FilterSpec(search_text="contrast"))
    assert result == [hit, upper]


@pytest.mark.parametrize("field", ["title", "screen", "description", "recommendation"])
def test_search_fields(make_item, field):
    item = make_item(**{field: "Needle in the haystack"})
    other = make_item()
    assert filter_service.apply([item, other], FilterSpec(search_text="NEEDLE")) == [item]


def test_search_matches_project_name(make_item):
    item = make_item(project_id="p9")
    other = make_item(project_id="p1")
    names = {"p9": "Customer Portal", "p1": "Main Website"}
    result = filter_service.apply([item, other], FilterSpec(search_text="portal"), names)
    assert result == [item]


def test_project_ids_dimension(make_item):
    a = make_item(project_id="a")
    b = make_item(project_id="b")
    c = make_item(project_id="c")
    spec = FilterSpec(project_ids=frozenset({"a", "c"}))
    assert filter_service.apply([a, b, c], spec) == [a, c]


def test_dimensions_combine_with_and(make_item):
    match = make_item(severity=Severity.HIGH, status=Status.OPEN, description="contrast")
    wrong_status = make_item(severity=Severity.HIGH, status=Status.FIXED, description="contrast")
    wrong_text = make_item(severity=Severity.HIGH, status=Status.OPEN, description="copy")
    spec = FilterSpec(severity=Severity.HIGH, status=Status.OPEN, search_text="contrast")
    assert filter_service.apply([match, wrong_status, wrong_text], spec) == [match]


def test_conjunctive_law(make_item):
    items = [
        make_item(
            project_id=["a", "b"][n % 2],
            severity=list(Severity)[n % 3],
            type=list(DebtType)[n % 4],
            status=list(Status)[n % 4],
            description="contrast" if n % 5 == 0 else "layout",
        )
        for n in range(40)
    ]
    single_dimension_specs = [
        FilterSpec(project_ids=frozenset({"a"})),
        FilterSpec(severity=Severity.HIGH),
        FilterSpec(type=DebtType.COPY),
        FilterSpec(status=Status.FIXED),
        FilterSpec(search_text="contrast"),
    ]
    for spec_a in single_dimension_specs:
        for spec_b in single_dimension_specs:
            if spec_a == spec_b:
                continue
            combined = FilterSpec(
                project_ids=spec_a.project_ids or spec_b.project_ids,
                severity=spec_a.severity or spec_b.severity,
                type=spec_a.type or spec_b.type,
                status=spec_a.status or spec_b.status,
                search_text=spec_a.search_text or spec_b.search_text,
            )
            sequential = filter_service.apply(filter_service.apply(items, spec_a), spec_b)
            assert filter_service.apply(items, combined) == sequential


def test_build_filter_normalizes_ui_values():
    spec = filter_service.build_filter(
        project_ids=["all"],
        severity="all",
        type="",
        status="In Progress",
        search_text="  focus  ",
    )
    assert spec.project_ids == frozenset()
    assert spec.severity is None
    assert spec.type is None
    assert spec.status == Status.IN_PROGRESS
    assert spec.search_text == "focus"


def test_build_filter_default_is_default():
    assert filter_service.is_default(filter_service.build_filter())
    assert not filter_service.is_default(filter_service.build_filter(severity="Low"))
    assert not filter_service.is_default(filter_service.build_filter(search_text="x"))


def test_blank_search_is_ignored(five_items):
    assert filter_service.apply(five_items, FilterSpec(search_text="   ")) == five_items
