"""
actions.py - UI-side actions and dialogs
Single responsibility: present add/edit, delete-confirmation and export flows.
"""

import logging
from datetime import date

import flet as ft

from bookshelf.config import (
    COLOR_BORDER,
    COLOR_DANGER,
    COLOR_PRIMARY,
    COLOR_TEXT_MUTED,
    BORDER_RADIUS_BTN,
    BORDER_RADIUS_CARD,
    EXPORT_FILENAME,
)
from bookshelf.domain.errors import ExportPreconditionError
from bookshelf.domain.models import BOOK_FIELDS
from bookshelf.services import dialog_service, export_service
from bookshelf.ui.components.rating_stars import RatingStars
from bookshelf.ui.helpers import close_dialog, error_slot, genre_options, open_dialog, show_alert

logger = logging.getLogger(__name__)


def _set_date_value(e: ft.ControlEvent, field: ft.TextField, page: ft.Page) -> None:
    """Sync DatePicker value into the read-only text field (YYYY-MM-DD)."""
    val = getattr(e.control, "value", "")
    if val:
        field.value = val.strftime("%Y-%m-%d") if hasattr(val, "strftime") else str(val)[:10]
    else:
        field.value = ""
    page.update()


def _open_date_picker(dp: ft.DatePicker, page: ft.Page) -> None:
    dp.open = True
    page.update()


def show_book_dialog(page: ft.Page, state, store):
    """Present the add/edit session opened in state; the list re-renders from the next snapshot."""
    form = state.form

    def text_field(label: str, value: str, **kwargs) -> ft.TextField:
        return ft.TextField(
            label=label,
            value=value,
            border_color=COLOR_BORDER,
            focused_border_color=COLOR_PRIMARY,
            border_radius=BORDER_RADIUS_BTN,
            **kwargs,
        )

    title_field = text_field("Title *", form.title)
    author_field = text_field("Author *", form.author)
    genre_field = ft.Dropdown(
        label="Genre *",
        options=genre_options(),
        value=form.genre or None,
        border_color=COLOR_BORDER,
        focused_border_color=COLOR_PRIMARY,
        border_radius=BORDER_RADIUS_BTN,
    )
    rating_stars = RatingStars(
        form.rating,
        on_select=lambda value: dialog_service.set_rating(state, value),
    )
    review_field = text_field("Review", form.review, multiline=True, min_lines=3, max_lines=6)
    date_field = text_field("Date finished *", form.date_finished, hint_text="Pick a date", read_only=True)
    date_picker = ft.DatePicker(
        first_date=date(1900, 1, 1),
        last_date=date(2100, 12, 31),
        on_change=lambda e: _set_date_value(e, date_field, page),
    )
    page.overlay.append(date_picker)
    date_field.suffix = ft.IconButton(
        icon=ft.Icons.CALENDAR_MONTH,
        tooltip="Pick a date",
        on_click=lambda _e: _open_date_picker(date_picker, page),
    )

    errors = {key: error_slot() for key in BOOK_FIELDS}

    def show_errors():
        for key, slot in errors.items():
            slot.value = state.form_errors.get(key, "")

    def on_save(_e=None):
        form.title = title_field.value or ""
        form.author = author_field.value or ""
        form.genre = genre_field.value or ""
        form.review = review_field.value or ""
        form.date_finished = date_field.value or ""
        # rating is already on the form via the star widget
        if dialog_service.submit_book_form(state, store):
            close_dialog(page, dialog, date_picker)
        else:
            show_errors()
            page.update()

    def on_cancel(_e=None):
        dialog_service.close_book_dialog(state)
        close_dialog(page, dialog, date_picker)

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text(
            "Editing book" if state.editing_id is not None else "Add new book",
            weight=ft.FontWeight.BOLD,
        ),
        content=ft.Container(
            content=ft.Column(
                controls=[
                    title_field,
                    errors["title"],
                    author_field,
                    errors["author"],
                    genre_field,
                    errors["genre"],
                    ft.Text("Rating *", size=12, color=COLOR_TEXT_MUTED),
                    rating_stars,
                    errors["rating"],
                    review_field,
                    errors["review"],
                    date_field,
                    errors["date_finished"],
                ],
                spacing=6,
                tight=True,
                scroll=ft.ScrollMode.AUTO,
            ),
            width=520,
        ),
        actions=[
            ft.TextButton("Cancel", on_click=on_cancel),
            ft.FilledButton(
                "Save",
                style=ft.ButtonStyle(bgcolor=COLOR_PRIMARY, color="white"),
                on_click=on_save,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
        shape=ft.RoundedRectangleBorder(radius=BORDER_RADIUS_CARD),
    )
    open_dialog(page, dialog)


def show_delete_confirm(page: ft.Page, state, store, book_id: int):
    dialog_service.request_delete(state, book_id)

    def on_confirm(_e=None):
        dialog_service.confirm_delete(state, store)
        close_dialog(page, dialog)

    def on_cancel(_e=None):
        dialog_service.cancel_delete(state)
        close_dialog(page, dialog)

    dialog = ft.AlertDialog(
        modal=True,
        title=ft.Text("Delete this book?", weight=ft.FontWeight.BOLD),
        content=ft.Text("This cannot be undone.", color=COLOR_TEXT_MUTED),
        actions=[
            ft.TextButton("No", on_click=on_cancel),
            ft.FilledButton(
                "Yes, delete",
                style=ft.ButtonStyle(bgcolor=COLOR_DANGER, color="white"),
                on_click=on_confirm,
            ),
        ],
        actions_alignment=ft.MainAxisAlignment.END,
    )
    open_dialog(page, dialog)


async def export_books(page: ft.Page, state):
    """Ask where to save books.csv and write the full (unfiltered) list there."""
    books = list(state.books)
    try:
        export_service.build_csv(books)
    except ExportPreconditionError as exc:
        show_alert(page, "Export", str(exc))
        return

    picker = ft.FilePicker()
    page.services.append(picker)
    try:
        path = await picker.save_file(
            dialog_title="Export books",
            file_name=EXPORT_FILENAME,
            allowed_extensions=["csv"],
        )
        if not path:
            return
        export_service.export_csv(books, path)
    except OSError as exc:
        logger.exception("Failed to write %s", EXPORT_FILENAME)
        show_alert(page, "Export failed", str(exc))
    finally:
        page.services.remove(picker)
        page.update()
