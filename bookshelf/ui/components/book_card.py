import flet as ft
from bookshelf.config import (
    COLOR_CARD,
    COLOR_COVER_PLACEHOLDER,
    COLOR_DANGER,
    COLOR_PRIMARY,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_CARD,
    COVER_HEIGHT,
    COVER_WIDTH,
)
from bookshelf.services.render_service import BookRow


class BookCard(ft.Container):
    def __init__(self, row: BookRow, on_edit, on_delete):
        super().__init__()
        self.row = row
        self.on_edit = on_edit
        self.on_delete = on_delete

        self.padding = ft.Padding.all(16)
        self.bgcolor = COLOR_CARD
        self.border_radius = BORDER_RADIUS_CARD
        self.shadow = ft.BoxShadow(
            blur_radius=2,
            color=ft.Colors.BLACK_12,
            offset=ft.Offset(0, 1),
        )
        self.margin = ft.Margin.only(bottom=12)
        self.data = row.id

        self.content = self._build_content()

    def _build_cover(self):
        if self.row.cover_url:
            return ft.Image(
                src=self.row.cover_url,
                width=COVER_WIDTH,
                height=COVER_HEIGHT,
                border_radius=6,
            )
        return ft.Container(
            width=COVER_WIDTH,
            height=COVER_HEIGHT,
            bgcolor=COLOR_COVER_PLACEHOLDER,
            border_radius=6,
        )

    def _labelled(self, label: str, value: str):
        return ft.Text(
            spans=[
                ft.TextSpan(text=label, style=ft.TextStyle(color=COLOR_TEXT_MUTED)),
                ft.TextSpan(text=value, style=ft.TextStyle(color=COLOR_TEXT_MAIN)),
            ],
            size=13,
        )

    def _build_content(self):
        row = self.row
        info = [
            ft.Text(
                row.title,
                weight=ft.FontWeight.BOLD,
                size=16,
                color=COLOR_TEXT_MAIN,
                max_lines=2,
                overflow=ft.TextOverflow.ELLIPSIS,
            ),
            self._labelled("Author: ", row.author),
            self._labelled("Genre: ", row.genre),
            ft.Text(row.stars, size=14),
        ]
        if row.review:
            info.append(self._labelled("Review: ", row.review))
        if row.date_finished_text:
            info.append(
                ft.Text(
                    f"Date finished: {row.date_finished_text}",
                    size=12,
                    color=COLOR_TEXT_MUTED,
                )
            )
        info.append(
            ft.Row(
                controls=[
                    ft.OutlinedButton(
                        "Edit",
                        icon=ft.Icons.EDIT,
                        style=ft.ButtonStyle(color=COLOR_PRIMARY),
                        on_click=lambda _e: self.on_edit(row.id),
                    ),
                    ft.OutlinedButton(
                        "Delete",
                        icon=ft.Icons.DELETE_OUTLINE,
                        style=ft.ButtonStyle(color=COLOR_DANGER),
                        on_click=lambda _e: self.on_delete(row.id),
                    ),
                ],
                spacing=8,
            )
        )
        info.append(ft.Text(f"Date added: {row.added_text}", size=11, color=COLOR_TEXT_MUTED))

        return ft.Row(
            controls=[
                self._build_cover(),
                ft.Column(controls=info, spacing=4, expand=True),
            ],
            spacing=16,
            vertical_alignment=ft.CrossAxisAlignment.START,
        )
