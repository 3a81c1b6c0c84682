"""
views.py - UI view builders
Single responsibility: build the book list View from AppState using provided callbacks.
"""

import flet as ft

from bookshelf.config import (
    APP_TITLE,
    COLOR_APPBAR_BG,
    COLOR_APPBAR_FG,
    COLOR_BG,
    COLOR_CARD,
    COLOR_PRIMARY,
    COLOR_SUCCESS,
    COLOR_TEXT_MAIN,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    SHADOW_ELEVATION,
)
from bookshelf.services import filter_service
from bookshelf.services.render_service import ListViewModel, build_list_view_model
from bookshelf.ui.components.book_card import BookCard
from bookshelf.ui.helpers import genre_options


def build_appbar(on_add, on_export) -> ft.AppBar:
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
        shadow_color=ft.Colors.BLACK_12,
        automatically_imply_leading=False,
        actions=[
            ft.OutlinedButton(
                "Export CSV",
                icon=ft.Icons.DOWNLOAD,
                on_click=lambda e: on_export(),
            ),
            ft.Container(width=8),
            ft.FilledButton(
                "Add book",
                icon=ft.Icons.ADD,
                style=ft.ButtonStyle(
                    bgcolor=COLOR_SUCCESS,
                    color="white",
                    shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_BTN),
                ),
                on_click=lambda e: on_add(),
            ),
            ft.Container(width=24),
        ],
    )


def _stat_tile(label: str, value_text: ft.Text) -> ft.Container:
    return ft.Container(
        content=ft.Column(
            [ft.Text(label, size=12, color=COLOR_TEXT_MUTED), value_text],
            spacing=2,
        ),
        padding=ft.Padding.symmetric(horizontal=16, vertical=10),
        bgcolor=COLOR_CARD,
        border_radius=BORDER_RADIUS_CARD,
    )


def build_list_controls(vm: ListViewModel, on_edit, on_delete) -> list[ft.Control]:
    if vm.empty_message:
        return [
            ft.Container(
                content=ft.Column(
                    [
                        ft.Icon(ft.Icons.MENU_BOOK, size=64, color="#d0d7de"),
                        ft.Text(vm.empty_message, color=COLOR_TEXT_MUTED, size=16),
                    ],
                    horizontal_alignment=ft.CrossAxisAlignment.CENTER,
                ),
                alignment=ft.Alignment.CENTER,
                padding=60,
                expand=True,
            )
        ]
    return [BookCard(row, on_edit=on_edit, on_delete=on_delete) for row in vm.rows]


def build_book_list_view(
    page: ft.Page,
    state,
    on_add,
    on_edit,
    on_delete,
    on_export,
):
    vm = build_list_view_model(state.books, state.filter)

    total_text = ft.Text(str(vm.total_count), size=18, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN)
    favorite_text = ft.Text(vm.favorite_genre, size=18, weight=ft.FontWeight.BOLD, color=COLOR_TEXT_MAIN)

    if state.loading:
        initial_controls = [
            ft.Container(
                content=ft.ProgressRing(),
                alignment=ft.Alignment.CENTER,
                padding=60,
            )
        ]
    else:
        initial_controls = build_list_controls(vm, on_edit, on_delete)

    list_content = ft.Column(
        controls=initial_controls,
        scroll=ft.ScrollMode.AUTO,
        expand=True,
        spacing=0,
    )

    def _update_list_content_inplace():
        """Re-filter the current snapshot without rebuilding the whole view."""
        new_vm = build_list_view_model(state.books, state.filter)
        total_text.value = str(new_vm.total_count)
        favorite_text.value = new_vm.favorite_genre
        list_content.controls = build_list_controls(new_vm, on_edit, on_delete)
        page.update()

    def on_filter_change(_e=None):
        state.filter = filter_service.build_filter(
            search=search_field.value,
            genre=genre_field.value,
            rating_4_plus=rating_field.value,
        )
        _update_list_content_inplace()

    search_field = ft.TextField(
        prefix_icon=ft.Icons.SEARCH,
        hint_text="Search by title or author...",
        value=state.filter.search,
        on_change=on_filter_change,
        border_radius=BORDER_RADIUS_BTN,
        border_color="transparent",
        bgcolor=COLOR_CARD,
        content_padding=ft.Padding.symmetric(horizontal=12, vertical=12),
        text_size=14,
    )
    genre_field = ft.Dropdown(
        options=genre_options("All Genres"),
        value=state.filter.genre,
        on_select=on_filter_change,
        border_radius=BORDER_RADIUS_BTN,
        border_color="transparent",
        bgcolor=COLOR_CARD,
    )
    rating_field = ft.Checkbox(
        label="Rating 4+",
        value=state.filter.rating_4_plus,
        on_change=on_filter_change,
        active_color=COLOR_PRIMARY,
    )

    filters_row = ft.ResponsiveRow(
        controls=[
            ft.Container(content=search_field, col={"xs": 12, "md": 6}),
            ft.Container(content=genre_field, col={"xs": 12, "md": 4}),
            ft.Container(content=rating_field, col={"xs": 12, "md": 2}),
        ],
        spacing=12,
        run_spacing=12,
        vertical_alignment=ft.CrossAxisAlignment.CENTER,
    )

    stats_row = ft.Row(
        controls=[
            _stat_tile("Total books", total_text),
            _stat_tile("Favorite genre", favorite_text),
        ],
        spacing=12,
    )

    return ft.View(
        route="/",
        appbar=build_appbar(on_add, on_export),
        bgcolor=COLOR_BG,
        padding=ft.Padding.symmetric(horizontal=24, vertical=16),
        controls=[
            stats_row,
            ft.Container(height=16),
            filters_row,
            ft.Container(height=16),
            list_content,
        ],
    )
