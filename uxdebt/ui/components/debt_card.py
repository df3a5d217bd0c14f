import flet as ft

from uxdebt.config import (
    BORDER_RADIUS_CARD,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
)
from uxdebt.domain.models import DebtItem, Status
from uxdebt.ui.helpers import severity_color, type_color


def badge(text: str, color: str) -> ft.Container:
    return ft.Container(
        content=ft.Text(text, size=11, color="white", weight=ft.FontWeight.BOLD),
        bgcolor=color,
        border_radius=12,
        padding=ft.Padding.symmetric(horizontal=8, vertical=2),
    )


class DebtBoardCard(ft.Container):
    """Kanban card; the chevron advances the item to the next status."""

    def __init__(self, item: DebtItem, on_click_callback, on_advance_callback):
        super().__init__()
        self.item = item
        self.on_click_callback = on_click_callback
        self.on_advance_callback = on_advance_callback

        self.padding = ft.Padding.all(12)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK12,
            offset=ft.Offset(0, 1),
        )
        self.on_click = self._handle_click
        self.ink = True
        self.margin = ft.margin.only(bottom=10)

        self.content = self._build_content()

    def _handle_click(self, e):
        if self.on_click_callback:
            self.on_click_callback(self.item.id)

    def _handle_advance(self, e):
        if self.on_advance_callback:
            self.on_advance_callback(self.item)

    def _build_content(self):
        item = self.item
        footer = [badge(item.type.value, type_color(item.type)), ft.Container(expand=True)]
        if item.status != Status.RESOLVED:
            footer.append(
                ft.IconButton(
                    icon=ft.Icons.CHEVRON_RIGHT,
                    icon_color=COLOR_PRIMARY,
                    icon_size=18,
                    tooltip="Move to next status",
                    on_click=self._handle_advance,
                )
            )

        return ft.Column(
            controls=[
                ft.Row(
                    controls=[
                        ft.Text(
                            item.title,
                            weight=ft.FontWeight.W_600,
                            size=14,
                            color=COLOR_TEXT_MAIN,
                            max_lines=2,
                            overflow=ft.TextOverflow.ELLIPSIS,
                            expand=True,
                        ),
                        badge(item.severity.value, severity_color(item.severity)),
                    ],
                    vertical_alignment=ft.CrossAxisAlignment.START,
                ),
                ft.Text(item.screen, size=12, color=COLOR_TEXT_MUTED),
                ft.Row(controls=footer, vertical_alignment=ft.CrossAxisAlignment.CENTER),
                ft.Text(
                    item.description,
                    size=12,
                    color=COLOR_TEXT_MUTED,
                    max_lines=2,
                    overflow=ft.TextOverflow.ELLIPSIS,
                ),
            ],
            spacing=6,
        )
