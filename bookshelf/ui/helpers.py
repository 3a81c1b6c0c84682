"""
helpers.py - UI helper functions
Single responsibility: small control builders and dialogs shared across UI.
"""
import flet as ft

from bookshelf.config import COLOR_DANGER, COLOR_PRIMARY
from bookshelf.domain.genres import GENRES


def genre_options(all_label: str | None = None) -> list[ft.dropdown.Option]:
    """Dropdown options for the genre enum; all_label adds a leading "" option."""
    options = [ft.dropdown.Option(key="", text=all_label)] if all_label else []
    return options + [ft.dropdown.Option(key=g, text=g) for g in GENRES]


def error_slot() -> ft.Text:
    return ft.Text("", color=COLOR_DANGER, size=12)


def open_dialog(page: ft.Page, dialog: ft.Control) -> None:
    page.overlay.append(dialog)
    dialog.open = True
    page.update()


def close_dialog(page: ft.Page, *controls: ft.Control) -> None:
    """Close overlay controls and drop them from page.overlay."""
    for control in controls:
        control.open = False
        if control in page.overlay:
            page.overlay.remove(control)
    page.update()


def show_alert(page: ft.Page, title: str, message: str) -> None:
    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(title, weight=ft.FontWeight.BOLD),
        content=ft.Text(message),
        actions=[
            ft.FilledButton(
                "OK",
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=lambda _e: close_dialog(page, dialog),
            )
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    open_dialog(page, dialog)
