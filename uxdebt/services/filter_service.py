"""
filter_service.py - Filter/search engine
Single responsibility: build FilterSpec values and reduce debt collections with them.

``apply`` is pure: it never mutates its input, never touches the store and keeps
the relative order of surviving items. Dimensions combine with AND; the search
text matches if any searchable field contains it.
"""
from typing import Iterable, Mapping, Optional

from uxdebt.domain.filters import FilterSpec
from uxdebt.domain.models import DebtItem, DebtType, Severity, Status

_ALL_TOKENS = {"", "all", "ALL"}


def _enum_or_none(enum_cls, value):
    if value is None or isinstance(value, enum_cls):
        return value
    if value in _ALL_TOKENS:
        return None
    return enum_cls(value)


def build_filter(
    project_ids: Iterable[str] | None = None,
    severity: Severity | str | None = None,
    type: DebtType | str | None = None,
    status: Status | str | None = None,
    search_text: str = "",
) -> FilterSpec:
    """Normalize raw UI values ("all"/"" mean unset) into a FilterSpec."""
    return FilterSpec(
        project_ids=frozenset(p for p in (project_ids or ()) if p and p not in _ALL_TOKENS),
        severity=_enum_or_none(Severity, severity),
        type=_enum_or_none(DebtType, type),
        status=_enum_or_none(Status, status),
        search_text=(search_text or "").strip(),
    )


def is_default(spec: FilterSpec) -> bool:
    return (
        not spec.project_ids
        and spec.severity is None
        and spec.type is None
        and spec.status is None
        and not spec.search_text.strip()
    )


def matches_search(item: DebtItem, term: str, project_name: str = "") -> bool:
    needle = term.strip().lower()
    if not needle:
        return True
    haystack = (
        item.title,
        item.screen,
        item.description,
        item.recommendation,
        project_name,
    )
    return any(needle in (field or "").lower() for field in haystack)


def matches(
    item: DebtItem,
    spec: FilterSpec,
    project_names: Optional[Mapping[str, str]] = None,
) -> bool:
    if spec.project_ids and item.project_id not in spec.project_ids:
        return False
    if spec.severity is not None and item.severity != spec.severity:
        return False
    if spec.type is not None and item.type != spec.type:
        return False
    if spec.status is not None and item.status != spec.status:
        return False
    if spec.search_text.strip():
        name = (project_names or {}).get(item.project_id, "")
        if not matches_search(item, spec.search_text, name):
            return False
    return True


def apply(
    items: Iterable[DebtItem],
    spec: FilterSpec,
    project_names: Optional[Mapping[str, str]] = None,
) -> list[DebtItem]:
    return [item for item in items if matches(item, spec, project_names)]
