"""
ui_state.py - UI state container
"""
from uxdebt.domain.filters import FilterSpec
from uxdebt.services import filter_service


class AppState:
    def __init__(self):
        self.view_mode: str = "table"  # "table" | "kanban"
        self.selected_project_id: str | None = None
        self.selected_item_id: str | None = None
        self.project_filter: str = "all"
        self.severity: str = "all"
        self.type: str = "all"
        self.status: str = "all"
        self.keyword: str = ""
        self.analytics_range: str = "all"
        self.analytics_project: str = "all"

    def _build(self, project_ids: list[str]) -> FilterSpec:
        return filter_service.build_filter(
            project_ids=project_ids,
            severity=self.severity,
            type=self.type,
            status=self.status,
            search_text=self.keyword,
        )

    def filter_spec(self) -> FilterSpec:
        """Current filter; a selected project dashboard pins the project dimension."""
        if self.selected_project_id:
            return self._build([self.selected_project_id])
        return self._build([self.project_filter])

    def has_active_filters(self) -> bool:
        """True when the user narrowed the list beyond the open project."""
        project_ids = [] if self.selected_project_id else [self.project_filter]
        return not filter_service.is_default(self._build(project_ids))

    def clear_filters(self) -> None:
        self.project_filter = "all"
        self.severity = "all"
        self.type = "all"
        self.status = "all"
        self.keyword = ""
