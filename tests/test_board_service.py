from uxdebt.domain.models import STATUS_ORDER, Status
from uxdebt.services.board_service import group_by_status


def test_all_columns_present_when_empty():
    columns = group_by_status([])
    assert list(columns) == STATUS_ORDER
    assert all(column == [] for column in columns.values())


def test_grouping_keeps_order_within_columns(make_item):
    a = make_item(status=Status.OPEN)
    b = make_item(status=Status.FIXED)
    c = make_item(status=Status.OPEN)
    d = make_item(status=Status.RESOLVED)
    columns = group_by_status([a, b, c, d])
    assert columns[Status.OPEN] == [a, c]
    assert columns[Status.IN_PROGRESS] == []
    assert columns[Status.FIXED] == [b]
    assert columns[Status.RESOLVED] == [d]
