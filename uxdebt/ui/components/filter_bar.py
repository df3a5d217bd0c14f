import asyncio

import flet as ft

from uxdebt.config import (
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_PRIMARY,
)
from uxdebt.domain.models import DebtType, Project, Severity, Status


def _dropdown(label: str, value: str, values: list[tuple[str, str]], width: int, on_change):
    return ft.Dropdown(
        label=label,
        value=value,
        options=[ft.dropdown.Option(key=k, text=t) for k, t in values],
        width=width,
        dense=True,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
        on_select=on_change,
    )


class FilterBar(ft.Container):
    """Search box plus project/severity/type/status dropdowns bound to AppState."""

    def __init__(
        self,
        page: ft.Page,
        state,
        projects: list[Project] | None,
        on_change,
        on_clear=None,
    ):
        super().__init__()
        self.page_ref = page
        self.state = state
        self.projects = projects
        self.on_change_callback = on_change
        self.on_clear_callback = on_clear
        self.clear_button = ft.TextButton(
            "Clear filters",
            icon=ft.Icons.FILTER_ALT_OFF,
            visible=on_clear is not None and state.has_active_filters(),
            on_click=self._on_clear,
        )
        self._search_task: asyncio.Task | None = None

        self.padding = ft.Padding.all(16)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.border = ft.border.all(1, COLOR_BORDER)
        self.content = self._build_content()

    def _set(self, attr: str):
        def handler(e):
            setattr(self.state, attr, e.control.value or "all")
            self._sync_clear_button()
            self.on_change_callback()

        return handler

    def _sync_clear_button(self):
        self.clear_button.visible = (
            self.on_clear_callback is not None and self.state.has_active_filters()
        )

    def _on_clear(self, _e=None):
        if self.on_clear_callback:
            self.on_clear_callback()

    def _on_search(self, e):
        self.state.keyword = e.control.value or ""
        self._sync_clear_button()
        if self._search_task and not self._search_task.done():
            self._search_task.cancel()

        async def runner(snapshot: str):
            # Debounce so the list is not rebuilt on every keystroke
            try:
                await asyncio.sleep(0.4)
            except asyncio.CancelledError:
                return
            if snapshot == self.state.keyword:
                self.on_change_callback()

        self._search_task = self.page_ref.run_task(runner, self.state.keyword)

    def _build_content(self):
        controls = [
            ft.TextField(
                prefix_icon=ft.Icons.SEARCH,
                hint_text="Search title, screen, description, recommendation...",
                value=self.state.keyword,
                on_change=self._on_search,
                border_radius=BORDER_RADIUS_BTN,
                border_color=COLOR_BORDER,
                dense=True,
                expand=True,
            )
        ]
        # The project dropdown is hidden on a single project's dashboard
        if self.projects is not None:
            controls.append(
                _dropdown(
                    "Project",
                    self.state.project_filter,
                    [("all", "All Projects")] + [(p.id, p.name) for p in self.projects],
                    200,
                    self._set("project_filter"),
                )
            )
        controls += [
            _dropdown(
                "Severity",
                self.state.severity,
                [("all", "All")] + [(s.value, s.value) for s in Severity],
                130,
                self._set("severity"),
            ),
            _dropdown(
                "Type",
                self.state.type,
                [("all", "All Types")] + [(t.value, t.value) for t in DebtType],
                160,
                self._set("type"),
            ),
            _dropdown(
                "Status",
                self.state.status,
                [("all", "All Statuses")] + [(s.value, s.value) for s in Status],
                160,
                self._set("status"),
            ),
            self.clear_button,
        ]
        return ft.Row(controls=controls, spacing=12, wrap=True)
