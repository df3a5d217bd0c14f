"""
views.py - UI view builders
Single responsibility: build flet Views from injected services and callbacks.
"""

import base64
import binascii
import logging

import flet as ft

from uxdebt.config import (
    APP_TITLE,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_APPBAR_BG,
    COLOR_APPBAR_FG,
    COLOR_BG,
    COLOR_BORDER,
    COLOR_CARD,
    COLOR_DANGER,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    KANBAN_COLUMN_WIDTH,
    SHADOW_ELEVATION,
    TIME_RANGES,
)
from uxdebt.domain.errors import NotFoundError, PersistenceError, ValidationError
from uxdebt.domain.models import STATUS_ORDER, DebtItem, Status, UserIdentity
from uxdebt.services import analytics_service, board_service, filter_service
from uxdebt.services.debt_service import DebtService
from uxdebt.services.project_service import ProjectService
from uxdebt.ui.actions import (
    advance_entry,
    confirm_delete,
    move_entry,
    report_save_failure,
    show_snack,
)
from uxdebt.ui.components.debt_card import DebtBoardCard, badge
from uxdebt.ui.components.filter_bar import FilterBar
from uxdebt.ui.helpers import (
    format_date,
    format_datetime,
    greeting,
    severity_color,
    status_color,
    type_color,
)

logger = logging.getLogger(__name__)

DRAG_GROUP = "debt-item"


def build_appbar(
    user: UserIdentity, on_projects, on_debt_list, on_analytics, on_sign_out
) -> ft.AppBar:
    return ft.AppBar(
        title=ft.Text(
            APP_TITLE,
            color=COLOR_APPBAR_FG,
            weight=ft.FontWeight.BOLD,
            size=20,
        ),
        bgcolor=COLOR_APPBAR_BG,
        center_title=False,
        elevation=SHADOW_ELEVATION,
        shadow_color=ft.Colors.BLACK12,
        automatically_imply_leading=False,
        actions=[
            ft.TextButton("Projects", icon=ft.Icons.FOLDER_OPEN, on_click=lambda _: on_projects()),
            ft.TextButton("All UX Debt", icon=ft.Icons.LIST_ALT, on_click=lambda _: on_debt_list()),
            ft.TextButton("Analytics", icon=ft.Icons.BAR_CHART, on_click=lambda _: on_analytics()),
            ft.Container(width=12),
            ft.Text(greeting(user.email), color=COLOR_TEXT_MUTED, size=13),
            ft.Container(width=8),
            ft.CircleAvatar(
                content=ft.Text(user.initials, size=12),
                radius=16,
                bgcolor=COLOR_PRIMARY,
                color="white",
            ),
            ft.IconButton(
                icon=ft.Icons.LOGOUT,
                tooltip="Sign out",
                on_click=lambda _: on_sign_out(),
            ),
            ft.Container(width=12),
        ],
    )


def _empty_state(message: str, icon=ft.Icons.INBOX, size: int = 64) -> ft.Container:
    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(icon, size=size, color="#d0d7de"),
                ft.Text(message, color=COLOR_TEXT_MUTED, size=14),
            ],
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        alignment=ft.Alignment.CENTER,
        padding=40,
    )


def _stat_card(label: str, value, color: str = COLOR_TEXT_MAIN) -> ft.Container:
    return ft.Container(
        content=ft.Column(
            [
                ft.Text(label, size=12, color=COLOR_TEXT_MUTED),
                ft.Text(str(value), size=24, weight=ft.FontWeight.BOLD, color=color),
            ],
            spacing=4,
        ),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
        border=ft.border.all(1, COLOR_BORDER),
        padding=ft.Padding.all(16),
        expand=True,
    )


# ==========================================================================
# Login
# ==========================================================================


def build_login_view(page: ft.Page, on_sign_in):
    """``on_sign_in(email)`` may raise ValidationError; it is shown under the field."""
    email_field = ft.TextField(
        label="Email",
        hint_text="you@company.com",
        autofocus=True,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
        width=360,
    )

    def submit(_e=None):
        email_field.error_text = None
        try:
            on_sign_in(email_field.value or "")
        except ValidationError as err:
            email_field.error_text = err.errors.get("email")
            page.update()
        except PersistenceError as err:
            report_save_failure(page, err)

    email_field.on_submit = submit

    card = ft.Container(
        content=ft.Column(
            controls=[
                ft.Text(APP_TITLE, size=24, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
                ft.Text(
                    "Track and resolve usability and accessibility issues",
                    color=COLOR_TEXT_MUTED,
                ),
                ft.Container(height=8),
                email_field,
                ft.FilledButton(
                    "Sign in",
                    width=360,
                    style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                    on_click=submit,
                ),
            ],
            spacing=12,
            tight=True,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
        padding=ft.Padding.all(32),
        shadow=ft.BoxShadow(blur_radius=6, color=ft.Colors.BLACK12, offset=ft.Offset(0, 2)),
    )

    return ft.View(
        route="/auth",
        bgcolor=COLOR_BG,
        vertical_alignment=ft.MainAxisAlignment.CENTER,
        horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        controls=[card],
    )


# ==========================================================================
# Projects
# ==========================================================================


def build_projects_view(
    page: ft.Page,
    appbar: ft.AppBar,
    projects: ProjectService,
    debts: DebtService,
    on_open_project,
    on_new_project,
    on_changed,
):
    all_items = debts.list_all()

    def on_delete(project_id: str, name: str):
        def do_delete():
            try:
                projects.remove(project_id)
            except PersistenceError as err:
                report_save_failure(page, err)
            on_changed()

        confirm_delete(
            page,
            f"Delete {name}?",
            "The project is removed from the list. Its entries are kept and will show as "
            "belonging to an unknown project.",
            do_delete,
        )

    def build_project_card(project) -> ft.Container:
        counts = projects.status_counts(project.id, all_items)
        total = sum(counts.values())
        count_row = [
            ft.Row(
                [
                    ft.Container(width=8, height=8, bgcolor=status_color(s), border_radius=4),
                    ft.Text(f"{s.value}: {counts[s]}", size=12, color=COLOR_TEXT_MUTED),
                ],
                spacing=4,
            )
            for s in STATUS_ORDER
        ]
        return ft.Container(
            content=ft.Column(
                controls=[
                    ft.Row(
                        controls=[
                            ft.Icon(ft.Icons.FOLDER, color=COLOR_PRIMARY),
                            ft.Text(
                                project.name,
                                size=16,
                                weight=ft.FontWeight.BOLD,
                                color=COLOR_TEXT_MAIN,
                                expand=True,
                            ),
                            ft.IconButton(
                                icon=ft.Icons.DELETE_OUTLINE,
                                tooltip="Delete project",
                                icon_color=COLOR_TEXT_MUTED,
                                on_click=lambda _e, pid=project.id, n=project.name: on_delete(pid, n),
                            ),
                        ],
                    ),
                    ft.Text(
                        project.description or "No description",
                        size=12,
                        color=COLOR_TEXT_MUTED,
                        max_lines=2,
                        overflow=ft.TextOverflow.ELLIPSIS,
                    ),
                    ft.Row(controls=count_row, spacing=12, wrap=True),
                    ft.Text(
                        f"{total} entries"
                        + (f"  ・  Created {format_date(project.created_at)}" if project.created_at else ""),
                        size=12,
                        color=COLOR_TEXT_MUTED,
                    ),
                ],
                spacing=8,
            ),
            bgcolor=COLOR_CARD,
            border_radius=BORDER_RADIUS_CARD,
            border=ft.border.all(1, COLOR_BORDER),
            padding=ft.Padding.all(16),
            width=340,
            ink=True,
            on_click=lambda _e, pid=project.id: on_open_project(pid),
        )

    project_list = projects.list_all()
    if project_list:
        body = ft.Row(
            controls=[build_project_card(p) for p in project_list],
            wrap=True,
            spacing=16,
            run_spacing=16,
        )
    else:
        body = _empty_state("No projects yet. Create one to start logging UX debt.")

    header = ft.Row(
        controls=[
            ft.Column(
                [
                    ft.Text("Your Projects", size=22, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
                    ft.Text(
                        "Select a project to view and manage UX debt entries",
                        color=COLOR_TEXT_MUTED,
                    ),
                ],
                spacing=2,
                expand=True,
            ),
            ft.FilledButton(
                "New Project",
                icon=ft.Icons.ADD,
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=lambda _: on_new_project(),
            ),
        ],
    )

    return ft.View(
        route="/projects",
        appbar=appbar,
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        scroll=ft.ScrollMode.AUTO,
        controls=[header, ft.Container(height=16), body],
    )


# ==========================================================================
# Project dashboard (table / kanban)
# ==========================================================================


def filtered_entries(
    state, projects: ProjectService, debts: DebtService, project_id: str | None = None
) -> tuple[list[DebtItem], int]:
    """Apply the current filter to one project's entries, or to every entry.

    Returns the visible entries and the size of the pool they were drawn from.
    """
    pool = debts.list_for_project(project_id) if project_id else debts.list_all()
    return filter_service.apply(pool, state.filter_spec(), projects.name_map()), len(pool)


def build_debt_table(items: list[DebtItem], on_select_item, project_name=None) -> ft.Control:
    """``project_name(project_id)`` adds a Project column when given."""
    if not items:
        return _empty_state("No entries match the current filters", ft.Icons.SEARCH_OFF)

    def project_cell(item: DebtItem) -> list[ft.DataCell]:
        if project_name is None:
            return []
        return [ft.DataCell(ft.Text(project_name(item.project_id), size=12))]

    def row(item: DebtItem) -> ft.DataRow:
        return ft.DataRow(
            cells=[
                ft.DataCell(
                    ft.Column(
                        [
                            ft.Text(item.title, weight=ft.FontWeight.W_600, color=COLOR_TEXT_MAIN),
                            ft.Text(item.screen, size=11, color=COLOR_TEXT_MUTED),
                        ],
                        spacing=0,
                        tight=True,
                    )
                ),
                *project_cell(item),
                ft.DataCell(badge(item.type.value, type_color(item.type))),
                ft.DataCell(badge(item.severity.value, severity_color(item.severity))),
                ft.DataCell(badge(item.status.value, status_color(item.status))),
                ft.DataCell(ft.Text(item.logged_by, size=12)),
                ft.DataCell(ft.Text(format_date(item.created_at), size=12)),
            ],
            on_select_changed=lambda _e, iid=item.id: on_select_item(iid),
        )

    return ft.Container(
        content=ft.DataTable(
            columns=[
                ft.DataColumn(label=ft.Text("Title")),
                *([ft.DataColumn(label=ft.Text("Project"))] if project_name else []),
                ft.DataColumn(label=ft.Text("Type")),
                ft.DataColumn(label=ft.Text("Severity")),
                ft.DataColumn(label=ft.Text("Status")),
                ft.DataColumn(label=ft.Text("Logged by")),
                ft.DataColumn(label=ft.Text("Created")),
            ],
            rows=[row(i) for i in items],
            show_checkbox_column=False,
            expand=True,
        ),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
        border=ft.border.all(1, COLOR_BORDER),
    )


def build_kanban_board(page: ft.Page, items: list[DebtItem], on_select_item, on_move, on_advance):
    """Four status columns; dropping a card on a column calls ``on_move(item_id, status)``."""
    columns = board_service.group_by_status(items)

    def column(status: Status, column_items: list[DebtItem]) -> ft.Control:
        def on_accept(e, target=status):
            src = page.get_control(e.src_id)
            if src is not None and src.data:
                on_move(src.data, target)

        if column_items:
            cards = [
                ft.Draggable(
                    group=DRAG_GROUP,
                    data=item.id,
                    content=DebtBoardCard(item, on_select_item, on_advance),
                    content_feedback=ft.Container(
                        content=ft.Text(item.title, color="white", size=12),
                        bgcolor=status_color(item.status),
                        padding=ft.Padding.all(8),
                        border_radius=BORDER_RADIUS_BTN,
                    ),
                )
                for item in column_items
            ]
        else:
            cards = [_empty_state(f"No {status.value.lower()} items", ft.Icons.INBOX, 32)]

        return ft.DragTarget(
            group=DRAG_GROUP,
            on_accept=on_accept,
            content=ft.Container(
                content=ft.Column(
                    controls=[
                        ft.Row(
                            [
                                ft.Text(status.value, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
                                ft.Container(expand=True),
                                badge(str(len(column_items)), status_color(status)),
                            ]
                        ),
                        ft.Container(height=8),
                        *cards,
                    ],
                    scroll=ft.ScrollMode.AUTO,
                    spacing=0,
                ),
                width=KANBAN_COLUMN_WIDTH,
                padding=ft.Padding.all(12),
                bgcolor="#F6F8FA",
                border=ft.border.all(2, status_color(status)),
                border_radius=BORDER_RADIUS_CARD,
            ),
        )

    return ft.Row(
        controls=[column(s, columns[s]) for s in STATUS_ORDER],
        spacing=16,
        scroll=ft.ScrollMode.AUTO,
        vertical_alignment=ft.CrossAxisAlignment.START,
    )


def build_project_dashboard_view(
    page: ft.Page,
    state,
    appbar: ft.AppBar,
    project_id: str,
    projects: ProjectService,
    debts: DebtService,
    on_back,
    on_new_entry,
    on_select_item,
    on_changed,
):
    try:
        project = projects.get(project_id)
    except NotFoundError:
        return ft.View(
            route=f"/project/{project_id}",
            appbar=appbar,
            bgcolor=COLOR_BG,
            controls=[
                _empty_state("Project not found", ft.Icons.ERROR_OUTLINE),
                ft.TextButton("Back to projects", on_click=lambda _: on_back()),
            ],
        )

    summary = analytics_service.summarize(debts.list_for_project(project.id))
    visible, total = filtered_entries(state, projects, debts, project.id)

    content_ref = ft.Ref[ft.Container]()
    count_ref = ft.Ref[ft.Text]()

    def move_item(item_id: str, target: Status):
        move_entry(page, debts, item_id, target)
        on_changed()

    def advance_item(item: DebtItem):
        advance_entry(page, debts, item)
        on_changed()

    def build_content() -> ft.Control:
        if state.view_mode == "kanban":
            return build_kanban_board(page, visible, on_select_item, move_item, advance_item)
        return build_debt_table(visible, on_select_item)

    def refilter():
        nonlocal visible, total
        visible, total = filtered_entries(state, projects, debts, project.id)
        if content_ref.current is None:
            on_changed()
            return
        content_ref.current.content = build_content()
        count_ref.current.value = f"Showing {len(visible)} of {total} entries"
        page.update()

    def clear_filters():
        state.clear_filters()
        on_changed()

    def set_view_mode(mode: str):
        state.view_mode = mode
        on_changed()

    mode_toggle = ft.Row(
        [
            ft.IconButton(
                icon=ft.Icons.TABLE_ROWS,
                tooltip="Table view",
                selected=state.view_mode == "table",
                icon_color=COLOR_PRIMARY if state.view_mode == "table" else COLOR_TEXT_MUTED,
                on_click=lambda _: set_view_mode("table"),
            ),
            ft.IconButton(
                icon=ft.Icons.VIEW_KANBAN,
                tooltip="Kanban view",
                selected=state.view_mode == "kanban",
                icon_color=COLOR_PRIMARY if state.view_mode == "kanban" else COLOR_TEXT_MUTED,
                on_click=lambda _: set_view_mode("kanban"),
            ),
        ],
        spacing=0,
    )

    header = ft.Row(
        controls=[
            ft.IconButton(icon=ft.Icons.ARROW_BACK, on_click=lambda _: on_back()),
            ft.Column(
                [
                    ft.Text(project.name, size=22, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
                    ft.Text(project.description or "", color=COLOR_TEXT_MUTED),
                ],
                spacing=2,
                expand=True,
            ),
            mode_toggle,
            ft.FilledButton(
                "Log UX Debt",
                icon=ft.Icons.ADD,
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=lambda _: on_new_entry(project.id),
            ),
        ],
    )

    stats = ft.Row(
        controls=[
            _stat_card("Total", summary.total),
            _stat_card("Open", summary.open, status_color(Status.OPEN)),
            _stat_card("High severity", summary.high_severity, COLOR_DANGER),
            _stat_card("Resolved", summary.resolved, status_color(Status.RESOLVED)),
        ],
        spacing=16,
    )

    return ft.View(
        route=f"/project/{project.id}",
        appbar=appbar,
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        scroll=ft.ScrollMode.AUTO,
        controls=[
            header,
            ft.Container(height=12),
            stats,
            ft.Container(height=16),
            FilterBar(page, state, None, refilter, on_clear=clear_filters),
            ft.Container(height=16),
            ft.Container(ref=content_ref, content=build_content()),
            ft.Text(
                f"Showing {len(visible)} of {total} entries",
                ref=count_ref,
                size=12,
                color=COLOR_TEXT_MUTED,
            ),
        ],
    )


# ==========================================================================
# All UX Debt (cross-project list)
# ==========================================================================


def build_debt_list_view(
    page: ft.Page,
    state,
    appbar: ft.AppBar,
    projects: ProjectService,
    debts: DebtService,
    on_select_item,
    on_changed,
):
    visible, total = filtered_entries(state, projects, debts)

    content_ref = ft.Ref[ft.Container]()
    count_ref = ft.Ref[ft.Text]()

    def build_content() -> ft.Control:
        return build_debt_table(visible, on_select_item, project_name=projects.name_for)

    def refilter():
        nonlocal visible, total
        visible, total = filtered_entries(state, projects, debts)
        if content_ref.current is None:
            on_changed()
            return
        content_ref.current.content = build_content()
        count_ref.current.value = f"Showing {len(visible)} of {total} entries"
        page.update()

    def clear_filters():
        state.clear_filters()
        on_changed()

    return ft.View(
        route="/debt",
        appbar=appbar,
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        scroll=ft.ScrollMode.AUTO,
        controls=[
            ft.Text("All UX Debt", size=22, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
            ft.Text("Every logged entry across your projects", color=COLOR_TEXT_MUTED),
            ft.Container(height=12),
            FilterBar(page, state, projects.list_all(), refilter, on_clear=clear_filters),
            ft.Container(height=16),
            ft.Container(ref=content_ref, content=build_content()),
            ft.Text(
                f"Showing {len(visible)} of {total} entries",
                ref=count_ref,
                size=12,
                color=COLOR_TEXT_MUTED,
            ),
        ],
    )


# ==========================================================================
# Detail
# ==========================================================================


def build_detail_view(
    page: ft.Page,
    appbar: ft.AppBar,
    item_id: str,
    projects: ProjectService,
    debts: DebtService,
    on_back,
    on_changed,
):
    try:
        item = debts.get(item_id)
    except NotFoundError:
        return ft.View(
            route="/detail",
            appbar=appbar,
            bgcolor=COLOR_BG,
            controls=[
                _empty_state("Entry not found", ft.Icons.ERROR_OUTLINE),
                ft.TextButton("Back", on_click=lambda _: on_back()),
            ],
        )

    status_picker = ft.Dropdown(
        label="Status",
        value=item.status.value,
        options=[ft.dropdown.Option(key=s.value, text=s.value) for s in STATUS_ORDER],
        width=200,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )

    def on_update_status(_e=None):
        if status_picker.value == item.status.value:
            return
        try:
            debts.set_status(item, status_picker.value)
            show_snack(page, f"Entry status has been changed to {status_picker.value}.")
        except ValidationError as err:
            show_snack(page, str(err), COLOR_DANGER)
        except PersistenceError as err:
            report_save_failure(page, err)
        on_changed()

    def on_advance(_e=None):
        advance_entry(page, debts, item)
        on_changed()

    def on_delete(_e=None):
        def do_delete():
            try:
                debts.remove(item.id)
            except PersistenceError as err:
                report_save_failure(page, err)
            on_back()

        confirm_delete(page, "Delete this entry?", "This cannot be undone.", do_delete)

    def section(label: str, body: str) -> ft.Column:
        return ft.Column(
            [
                ft.Text(label, size=13, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
                ft.Text(body, selectable=True, color=COLOR_TEXT_MAIN),
            ],
            spacing=4,
        )

    extras: list[ft.Control] = []
    if item.figma_link:
        extras.append(
            ft.TextButton(
                "Open in Figma",
                icon=ft.Icons.OPEN_IN_NEW,
                url=item.figma_link,
            )
        )
    if item.screenshot:
        src = item.screenshot
        if src.startswith("data:"):
            try:
                src = base64.b64decode(src.split(",", 1)[-1])
            except (binascii.Error, ValueError) as err:
                logger.warning("Screenshot of %s is not valid base64: %s", item.id, err)
                src = None
        if src is not None:
            extras.append(ft.Image(src=src, width=600, fit=ft.BoxFit.CONTAIN))

    body = ft.Container(
        content=ft.Column(
            controls=[
                ft.Row(
                    [
                        badge(item.status.value, status_color(item.status)),
                        badge(item.severity.value, severity_color(item.severity)),
                        badge(item.type.value, type_color(item.type)),
                    ],
                    spacing=6,
                ),
                ft.Text(
                    f"{projects.name_for(item.project_id)}  ・  {item.screen}",
                    color=COLOR_TEXT_MUTED,
                ),
                ft.Text(
                    f"Logged by {item.logged_by} on {format_datetime(item.created_at)}"
                    f"  ・  Updated {format_datetime(item.updated_at)}",
                    size=12,
                    color=COLOR_TEXT_MUTED,
                ),
                ft.Divider(),
                section("Description", item.description),
                section("Recommendation", item.recommendation),
                *extras,
                ft.Divider(),
                ft.Row(
                    [
                        status_picker,
                        ft.FilledButton(
                            "Update Status",
                            style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                            on_click=on_update_status,
                        ),
                        ft.OutlinedButton(
                            "Next status",
                            icon=ft.Icons.CHEVRON_RIGHT,
                            disabled=item.status == Status.RESOLVED,
                            on_click=on_advance,
                        ),
                        ft.Container(expand=True),
                        ft.TextButton(
                            "Delete",
                            icon=ft.Icons.DELETE_OUTLINE,
                            style=ft.ButtonStyle(color=COLOR_DANGER),
                            on_click=on_delete,
                        ),
                    ],
                    spacing=12,
                    vertical_alignment=ft.CrossAxisAlignment.CENTER,
                ),
            ],
            spacing=12,
        ),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
        border=ft.border.all(1, COLOR_BORDER),
        padding=ft.Padding.all(24),
    )

    return ft.View(
        route=f"/debt/{item.id}",
        appbar=appbar,
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        scroll=ft.ScrollMode.AUTO,
        controls=[
            ft.Row(
                [
                    ft.IconButton(icon=ft.Icons.ARROW_BACK, on_click=lambda _: on_back()),
                    ft.Text(item.title, size=22, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
                ]
            ),
            ft.Container(height=8),
            body,
        ],
    )


# ==========================================================================
# Analytics
# ==========================================================================


def _bar_chart(title: str, counts: dict[str, int], color_for) -> ft.Container:
    peak = max(counts.values(), default=0) or 1
    rows = []
    for label, count in counts.items():
        rows.append(
            ft.Row(
                [
                    ft.Text(label, width=110, size=12, color=COLOR_TEXT_MAIN),
                    ft.Container(
                        width=max(4, int(260 * count / peak)) if count else 4,
                        height=16,
                        bgcolor=color_for(label),
                        border_radius=4,
                    ),
                    ft.Text(str(count), size=12, color=COLOR_TEXT_MUTED),
                ],
                spacing=8,
            )
        )
    if not rows:
        rows.append(ft.Text("No data", color=COLOR_TEXT_MUTED))
    return ft.Container(
        content=ft.Column(
            [ft.Text(title, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN), *rows],
            spacing=8,
        ),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
        border=ft.border.all(1, COLOR_BORDER),
        padding=ft.Padding.all(16),
        width=460,
    )


def build_analytics_view(
    page: ft.Page,
    state,
    appbar: ft.AppBar,
    projects: ProjectService,
    debts: DebtService,
    on_changed,
):
    items = debts.list_all()
    if state.analytics_project != "all":
        items = filter_service.apply(
            items, filter_service.build_filter(project_ids=[state.analytics_project])
        )
    items = analytics_service.within_time_range(items, state.analytics_range)
    summary = analytics_service.summarize(items)

    by_type = {k.value: v for k, v in analytics_service.count_by_type(items).items()}
    by_severity = {k.value: v for k, v in analytics_service.count_by_severity(items).items()}
    by_month = analytics_service.count_by_month(items)

    def on_range(e):
        state.analytics_range = e.control.value or "all"
        on_changed()

    def on_project(e):
        state.analytics_project = e.control.value or "all"
        on_changed()

    range_labels = {"all": "All Time", "30d": "Last 30 Days", "90d": "Last 90 Days", "1y": "Last Year"}
    filters = ft.Row(
        [
            ft.Dropdown(
                label="Time Range",
                value=state.analytics_range,
                options=[ft.dropdown.Option(key=k, text=range_labels[k]) for k in TIME_RANGES],
                width=200,
                on_select=on_range,
            ),
            ft.Dropdown(
                label="Project",
                value=state.analytics_project,
                options=[ft.dropdown.Option(key="all", text="All Projects")]
                + [ft.dropdown.Option(key=p.id, text=p.name) for p in projects.list_all()],
                width=220,
                on_select=on_project,
            ),
        ],
        spacing=16,
    )

    stats = ft.Row(
        [
            _stat_card("Total entries", summary.total),
            _stat_card("Resolution rate", f"{summary.resolution_rate:.1f}%", status_color(Status.RESOLVED)),
            _stat_card("High severity", summary.high_severity, COLOR_DANGER),
            _stat_card("Accessibility issues", summary.accessibility, type_color("Accessibility")),
        ],
        spacing=16,
    )

    charts = ft.Row(
        [
            _bar_chart("Issues by type", by_type, type_color),
            _bar_chart("Issues by severity", by_severity, severity_color),
            _bar_chart("Entries per month", by_month, lambda _label: COLOR_PRIMARY),
        ],
        wrap=True,
        spacing=16,
        run_spacing=16,
    )

    return ft.View(
        route="/analytics",
        appbar=appbar,
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        scroll=ft.ScrollMode.AUTO,
        controls=[
            ft.Text("Analytics Dashboard", size=22, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN),
            ft.Text("Insights and trends across your UX debt entries", color=COLOR_TEXT_MUTED),
            ft.Container(height=12),
            filters,
            ft.Container(height=12),
            stats,
            ft.Container(height=16),
            charts,
        ],
    )
