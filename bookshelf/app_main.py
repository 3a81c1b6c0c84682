"""
app_main.py - Bookshelf main application
Bookshelf v0.1
"""

import logging

import flet as ft

from bookshelf.config import APP_TITLE, COLOR_BG, COLOR_PRIMARY
from bookshelf.database.schema import initialize_schema
from bookshelf.domain.errors import StoreOperationError
from bookshelf.services import dialog_service
from bookshelf.services.record_store import RecordStore
from bookshelf.ui import actions, views
from bookshelf.ui.helpers import show_alert
from bookshelf.ui_state import AppState

logger = logging.getLogger(__name__)


def _show_fatal(page: ft.Page, title: str, exc: Exception) -> None:
    show_alert(page, title, f"Details: {exc}")


# ==========================================================================
# Main app
# ==========================================================================


def main(page: ft.Page):
    page.title = APP_TITLE
    page.theme_mode = ft.ThemeMode.LIGHT
    page.bgcolor = COLOR_BG
    page.padding = 0
    page.theme = ft.Theme(color_scheme_seed=COLOR_PRIMARY)

    state = AppState()
    store = RecordStore()

    def handle_add():
        dialog_service.open_book_dialog(state)
        actions.show_book_dialog(page, state, store)

    def handle_edit(book_id: int):
        if dialog_service.edit_book(state, book_id):
            actions.show_book_dialog(page, state, store)

    def handle_delete(book_id: int):
        actions.show_delete_confirm(page, state, store, book_id)

    def handle_export():
        page.run_task(actions.export_books, page, state)

    def refresh_list():
        try:
            page.views.clear()
            page.views.append(
                views.build_book_list_view(
                    page=page,
                    state=state,
                    on_add=handle_add,
                    on_edit=handle_edit,
                    on_delete=handle_delete,
                    on_export=handle_export,
                )
            )
            page.update()
        except Exception as exc:
            logger.exception("Error in refresh_list")
            _show_fatal(page, "Something went wrong", exc)

    def on_snapshot(books):
        logger.debug("Snapshot received: %d books", len(books))
        state.replace_books(books)
        refresh_list()

    def route_change(_e: ft.RouteChangeEvent):
        if page.route == "/":
            refresh_list()

    page.on_route_change = route_change

    async def on_window_event(e: ft.WindowEvent):
        if e.type == ft.WindowEventType.CLOSE:
            store.stop()
            page.window.prevent_close = False
            await page.window.close()

    page.window.prevent_close = True
    page.window.on_event = on_window_event

    try:
        initialize_schema()
    except Exception as exc:
        logger.exception("Failed to initialize database schema")
        _show_fatal(page, "Database initialization error", exc)
        return

    # spinner until the first snapshot arrives
    refresh_list()

    try:
        store.subscribe(on_snapshot)
    except StoreOperationError as exc:
        logger.exception("Failed to load books")
        _show_fatal(page, "Could not load books", exc)
        return
    store.start_watching()


# ==========================================================================
# Entry point
# ==========================================================================


if __name__ == "__main__":
    ft.app(main)
