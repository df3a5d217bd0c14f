"""
app_main.py - UX Debt Tracker main application
UX Debt Tracker v1.0

Services are built once per page from a single CollectionStore and handed to
every view builder; views never reach for storage on their own.
"""

import logging

import flet as ft

from uxdebt.config import APP_TITLE, COLOR_BG, COLOR_PRIMARY, DB_PATH
from uxdebt.database.store import CollectionStore
from uxdebt.domain.errors import PersistenceError
from uxdebt.services.debt_service import DebtService
from uxdebt.services.project_service import ProjectService
from uxdebt.services.seed_service import seed_demo_data
from uxdebt.services.session_service import SessionService
from uxdebt.ui import actions, views
from uxdebt.ui_state import AppState

logger = logging.getLogger(__name__)


def main(page: ft.Page, db_path: str = DB_PATH):
    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    store = CollectionStore(db_path)
    try:
        store.initialize()
        seed_demo_data(store)
    except Exception as exc:
        logger.exception("Failed to initialize database")
        page.overlay.append(
            ft.AlertDialog(
                title=ft.Text("Database error"),
                content=ft.Text(f"Could not open the data store.\nDetails: {exc}"),
                open=True,
            )
        )
        page.update()
        return

    session = SessionService(store)
    projects = ProjectService(store)
    debts = DebtService(store)
    state = AppState()

    def appbar() -> ft.AppBar:
        return views.build_appbar(
            session.current_user(),
            on_projects=show_projects,
            on_debt_list=show_debt_list,
            on_analytics=show_analytics,
            on_sign_out=sign_out,
        )

    def render(build):
        """Replace the view stack with one freshly built view."""
        try:
            page.views.clear()
            page.views.append(build())
            page.update()
        except Exception as exc:
            logger.exception("Error while rendering view")
            page.overlay.append(
                ft.AlertDialog(
                    title=ft.Text("Something went wrong"),
                    content=ft.Text(f"Details: {exc}"),
                    open=True,
                )
            )
            page.update()

    def guarded(show):
        """Redirect to the login view when no user record exists."""

        def wrapper(*args):
            if not session.is_signed_in():
                show_login()
                return
            show(*args)

        return wrapper

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def show_login():
        render(lambda: views.build_login_view(page, on_sign_in=sign_in))

    def sign_in(email: str):
        session.sign_in(email)
        show_projects()

    def sign_out():
        try:
            session.sign_out()
        except PersistenceError as err:
            actions.report_save_failure(page, err)
        show_login()

    @guarded
    def show_projects():
        state.selected_project_id = None
        state.selected_item_id = None
        render(
            lambda: views.build_projects_view(
                page,
                appbar(),
                projects,
                debts,
                on_open_project=open_project,
                on_new_project=lambda: actions.show_new_project_dialog(
                    page, projects, show_projects
                ),
                on_changed=show_projects,
            )
        )

    def open_project(project_id: str):
        if state.selected_project_id != project_id:
            state.clear_filters()
        state.selected_project_id = project_id
        show_project()

    @guarded
    def show_project():
        state.selected_item_id = None
        render(
            lambda: views.build_project_dashboard_view(
                page,
                state,
                appbar(),
                state.selected_project_id,
                projects,
                debts,
                on_back=show_projects,
                on_new_entry=new_entry,
                on_select_item=show_detail,
                on_changed=show_project,
            )
        )

    @guarded
    def show_debt_list():
        # Filters set on a project dashboard do not carry over to the full list
        if state.selected_project_id:
            state.clear_filters()
        state.selected_project_id = None
        state.selected_item_id = None
        render(
            lambda: views.build_debt_list_view(
                page,
                state,
                appbar(),
                projects,
                debts,
                on_select_item=show_detail,
                on_changed=show_debt_list,
            )
        )

    def new_entry(project_id: str):
        user = session.current_user()
        actions.show_new_entry_dialog(
            page,
            debts,
            project_id,
            logged_by=user.email if user else "",
            on_created=show_project,
        )

    @guarded
    def show_detail(item_id: str):
        state.selected_item_id = item_id

        def back():
            if state.selected_project_id:
                show_project()
            else:
                show_debt_list()

        render(
            lambda: views.build_detail_view(
                page,
                appbar(),
                item_id,
                projects,
                debts,
                on_back=back,
                on_changed=lambda: show_detail(item_id),
            )
        )

    @guarded
    def show_analytics():
        render(
            lambda: views.build_analytics_view(
                page,
                state,
                appbar(),
                projects,
                debts,
                on_changed=show_analytics,
            )
        )

    def view_pop(_e=None):
        if state.selected_item_id:
            if state.selected_project_id:
                show_project()
            else:
                show_debt_list()
        elif state.selected_project_id:
            show_projects()

    page.on_view_pop = view_pop

    if session.is_signed_in():
        show_projects()
    else:
        show_login()


# ==========================================================================
# Entry point
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)
