"""
actions.py - UI-side actions and dialogs
Single responsibility: modal flows and status actions for projects and debt entries.
"""

import logging

import flet as ft

from uxdebt.config import (
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    COLOR_BORDER,
    COLOR_DANGER,
    COLOR_PRIMARY,
)
from uxdebt.domain.errors import NotFoundError, PersistenceError, ValidationError
from uxdebt.domain.models import DebtDraft, DebtItem, DebtType, Severity, Status
from uxdebt.services.debt_service import DebtService
from uxdebt.services.project_service import ProjectService
from uxdebt.utils.attachments import load_screenshot

logger = logging.getLogger(__name__)


def show_snack(page: ft.Page, message: str, color: str = COLOR_PRIMARY) -> None:
    snack = ft.SnackBar(ft.Text(message), bgcolor=color)
    page.overlay.append(snack)
    snack.open = True
    page.update()


def report_save_failure(page: ft.Page, err: PersistenceError) -> None:
    """Changes stay on screen; tell the user they were not written to disk."""
    show_snack(page, f"Change shown but not saved: {err}", COLOR_DANGER)


def advance_entry(page: ft.Page, debts: DebtService, item: DebtItem) -> None:
    try:
        debts.advance(item)
    except NotFoundError:
        show_snack(page, "Entry no longer exists", COLOR_DANGER)
    except PersistenceError as err:
        report_save_failure(page, err)


def move_entry(page: ft.Page, debts: DebtService, item_id: str, target: Status) -> None:
    """Kanban drop: set the entry's status, reporting a vanished entry or failed save."""
    try:
        debts.set_status(debts.get(item_id), target)
    except NotFoundError:
        show_snack(page, "Entry no longer exists", COLOR_DANGER)
    except PersistenceError as err:
        report_save_failure(page, err)


def _text_field(label: str, **kwargs) -> ft.TextField:
    return ft.TextField(
        label=label,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
        **kwargs,
    )


def _dropdown(label: str, values: list[str]) -> ft.Dropdown:
    return ft.Dropdown(
        label=label,
        options=[ft.dropdown.Option(key=v, text=v) for v in values],
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
        expand=True,
    )


def show_new_project_dialog(page: ft.Page, projects: ProjectService, on_created):
    """Open a dialog to create a project and refresh the caller on success."""
    name_field = _text_field("Project name *")
    description_field = _text_field("Description", multiline=True, min_lines=2, max_lines=4)

    def on_save(_e=None):
        name_field.error_text = None
        try:
            projects.create(name_field.value or "", description_field.value or "")
        except ValidationError as err:
            name_field.error_text = err.errors.get("name")
            page.update()
            return
        except PersistenceError as err:
            report_save_failure(page, err)
        dialog.open = False
        on_created()
        page.update()

    def on_cancel(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Create New Project", weight=ft.FontWeight.BOLD),
        content=ft.Container(
            content=ft.Column(
                controls=[name_field, description_field],
                spacing=16,
                tight=True,
            ),
            width=480,
        ),
        actions=[
            ft.TextButton("Cancel", on_click=on_cancel),
            ft.FilledButton(
                "Create Project",
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=on_save,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def show_new_entry_dialog(
    page: ft.Page,
    debts: DebtService,
    project_id: str,
    logged_by: str,
    on_created,
):
    """Open the "log UX debt" form; every invalid field is flagged at once."""
    draft = DebtDraft(project_id=project_id, logged_by=logged_by)

    title_field = _text_field("Title *")
    screen_field = _text_field("Screen / Component *")
    type_field = _dropdown("Type *", [t.value for t in DebtType])
    severity_field = _dropdown("Severity *", [s.value for s in Severity])
    description_field = _text_field("Description *", multiline=True, min_lines=3, max_lines=6)
    recommendation_field = _text_field(
        "Recommendation *", multiline=True, min_lines=2, max_lines=5
    )
    logged_by_field = _text_field("Logged by *", value=logged_by)
    figma_field = _text_field("Figma link", hint_text="https://www.figma.com/...")
    screenshot_field = _text_field(
        "Screenshot (image path or link)",
        hint_text="C:\\screens\\login.png or https://...",
    )
    screenshot_status = ft.Text("", size=12)
    error_text = ft.Text("", color=COLOR_DANGER, size=12)

    fields = {
        "title": title_field,
        "screen": screen_field,
        "type": type_field,
        "severity": severity_field,
        "description": description_field,
        "recommendation": recommendation_field,
        "logged_by": logged_by_field,
    }

    def on_screenshot_loaded(data_uri: str):
        draft.screenshot = data_uri
        screenshot_status.value = "✓ Screenshot attached"
        screenshot_status.color = COLOR_PRIMARY
        page.update()

    def on_attach_screenshot(_e=None):
        value = (screenshot_field.value or "").strip()
        if not value:
            return
        if value.startswith(("http://", "https://", "data:")):
            on_screenshot_loaded(value)
            return

        async def runner(path: str):
            try:
                await load_screenshot(path, on_screenshot_loaded)
            except (OSError, ValueError) as err:
                logger.warning("Screenshot not attached: %s", err)
                screenshot_status.value = f"⚠  {err}"
                screenshot_status.color = COLOR_DANGER
                page.update()

        screenshot_status.value = "Loading…"
        page.update()
        page.run_task(runner, value)

    screenshot_field.suffix = ft.IconButton(
        icon=ft.Icons.ATTACH_FILE,
        icon_color=COLOR_PRIMARY,
        tooltip="Attach screenshot",
        on_click=on_attach_screenshot,
    )

    def on_save(_e=None):
        draft.title = title_field.value or ""
        draft.screen = screen_field.value or ""
        draft.type = type_field.value
        draft.severity = severity_field.value
        draft.description = description_field.value or ""
        draft.recommendation = recommendation_field.value or ""
        draft.logged_by = logged_by_field.value or ""
        draft.figma_link = figma_field.value or None

        for control in fields.values():
            control.error_text = None
        error_text.value = ""
        try:
            debts.create(draft)
        except ValidationError as err:
            for name, message in err.errors.items():
                if name in fields:
                    fields[name].error_text = message
            error_text.value = "⚠  Please fill in the highlighted fields"
            page.update()
            return
        except PersistenceError as err:
            report_save_failure(page, err)
        dialog.open = False
        on_created()
        page.update()

    def on_cancel(_e=None):
        dialog.open = False
        page.update()

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Log UX Debt", weight=ft.FontWeight.BOLD),
        content=ft.Container(
            content=ft.Column(
                controls=[
                    title_field,
                    screen_field,
                    ft.Row(controls=[type_field, severity_field], spacing=12),
                    description_field,
                    recommendation_field,
                    logged_by_field,
                    figma_field,
                    screenshot_field,
                    screenshot_status,
                    error_text,
                ],
                spacing=14,
                tight=True,
                scroll=ft.ScrollMode.AUTO,
            ),
            width=600,
        ),
        actions=[
            ft.TextButton("Cancel", on_click=on_cancel),
            ft.FilledButton(
                "Create Entry",
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=on_save,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def confirm_delete(page: ft.Page, title: str, message: str, on_confirm):
    def close(_e=None):
        dlg.open = False
        page.update()

    def do_delete(_e=None):
        dlg.open = False
        page.update()
        on_confirm()

    dlg = ft.AlertDialog(
        modal=True,
        title=ft.Text(title, weight=ft.FontWeight.BOLD),
        content=ft.Text(message),
        actions=[
            ft.TextButton("Cancel", on_click=close),
            ft.FilledButton(
                "Delete",
                style=ft.ButtonStyle(bgcolor=COLOR_DANGER, color="white"),
                on_click=do_delete,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    page.overlay.append(dlg)
    dlg.open = True
    page.update()
