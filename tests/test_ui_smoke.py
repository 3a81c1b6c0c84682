"""
Builds the Flet controls against a minimal page stand-in and drives their handlers.
"""
import asyncio

import flet as ft
import pytest

from bookshelf.config import NO_RESULTS_TEXT
from bookshelf.services import dialog_service
from bookshelf.services.render_service import build_row
from bookshelf.ui import actions, views
from bookshelf.ui.components.book_card import BookCard
from bookshelf.ui.helpers import show_alert


class FakePage:
    """Just enough of ft.Page for building views and opening dialogs."""

    def __init__(self):
        self.overlay: list = []
        self.services: list = []
        self.views: list = []
        self.updates = 0

    def update(self):
        self.updates += 1


@pytest.fixture
def page():
    return FakePage()


def walk(control):
    yield control
    for attr in ("appbar", "title", "content", "controls", "actions", "suffix"):
        child = getattr(control, attr, None)
        children = child if isinstance(child, list) else [child]
        for c in children:
            if isinstance(c, ft.Control):
                yield from walk(c)


def find_all(root, kind):
    return [c for c in walk(root) if isinstance(c, kind)]


def texts(root):
    return [c.value for c in find_all(root, ft.Text)]


def field(root, label):
    (match,) = [c for c in find_all(root, ft.TextField) if c.label == label]
    return match


def button(dialog, label):
    for c in dialog.actions:
        if label in (getattr(c, "content", None), getattr(c, "text", None)):
            return c
    raise LookupError(label)


def build_view(page, state, calls=None):
    calls = calls if calls is not None else []
    return views.build_book_list_view(
        page,
        state,
        on_add=lambda: calls.append(("add",)),
        on_edit=lambda book_id: calls.append(("edit", book_id)),
        on_delete=lambda book_id: calls.append(("delete", book_id)),
        on_export=lambda: calls.append(("export",)),
    )


# ---------------------------------------------------------------------------
# List view
# ---------------------------------------------------------------------------


def test_view_shows_spinner_while_loading(page, state):
    view = build_view(page, state)
    assert find_all(view, ft.ProgressRing)
    assert not find_all(view, BookCard)


def test_view_shows_placeholder_when_nothing_matches(page, state):
    state.replace_books([])
    view = build_view(page, state)
    assert NO_RESULTS_TEXT in texts(view)
    assert not find_all(view, ft.ProgressRing)


def test_view_renders_one_card_per_book(page, state, make_book):
    state.replace_books([make_book(id=1), make_book(id=2, title="Emma", genre="Novel")])
    view = build_view(page, state)
    assert [card.data for card in find_all(view, BookCard)] == [1, 2]
    assert "2" in texts(view)


def test_filters_update_list_in_place(page, state, make_book):
    state.replace_books([
        make_book(id=1),
        make_book(id=2, title="Emma", author="Jane Austen", genre="Novel", rating=3),
    ])
    view = build_view(page, state)

    (search,) = [c for c in find_all(view, ft.TextField) if c.prefix_icon == ft.Icons.SEARCH]
    search.value = "emma"
    search.on_change(None)
    assert state.filter.search == "emma"
    assert [card.data for card in find_all(view, BookCard)] == [2]

    search.value = ""
    search.on_change(None)
    (genre,) = find_all(view, ft.Dropdown)
    genre.value = "Scientific"
    genre.on_select(None)
    assert [card.data for card in find_all(view, BookCard)] == [1]

    genre.value = "Novel"
    genre.on_select(None)
    (rating,) = find_all(view, ft.Checkbox)
    rating.value = True
    rating.on_change(None)
    assert NO_RESULTS_TEXT in texts(view)
    # the stats still count the full list
    assert "2" in texts(view)
    assert page.updates == 5


# ---------------------------------------------------------------------------
# Book card
# ---------------------------------------------------------------------------


def test_book_card_actions_carry_the_book_id(make_book):
    calls = []
    card = BookCard(
        build_row(make_book(id=7, review="Sand everywhere.", date_finished="2024-03-01")),
        on_edit=lambda book_id: calls.append(("edit", book_id)),
        on_delete=lambda book_id: calls.append(("delete", book_id)),
    )
    for b in find_all(card, ft.OutlinedButton):
        b.on_click(None)
    assert calls == [("edit", 7), ("delete", 7)]
    assert "Date finished: 01/03/2024" in texts(card)
    assert "Date added: N/A" in texts(card)


def test_book_card_cover_or_placeholder(make_book):
    with_cover = BookCard(build_row(make_book(cover_url="https://example.org/dune.jpg")), print, print)
    without = BookCard(build_row(make_book()), print, print)
    assert find_all(with_cover, ft.Image)
    assert not find_all(without, ft.Image)


# ---------------------------------------------------------------------------
# Add / edit dialog
# ---------------------------------------------------------------------------


def test_save_new_book_creates_and_closes(page, state, fake_store):
    dialog_service.open_book_dialog(state)
    actions.show_book_dialog(page, state, fake_store)
    dialog = next(c for c in page.overlay if isinstance(c, ft.AlertDialog))
    assert dialog.open

    field(dialog, "Title *").value = "The Hobbit"
    field(dialog, "Author *").value = "J. R. R. Tolkien"
    find_all(dialog, ft.Dropdown)[0].value = "Fantasy"
    dialog_service.set_rating(state, 4)
    field(dialog, "Date finished *").value = "2024-03-01"

    button(dialog, "Save").on_click(None)

    assert fake_store.calls == [(
        "create",
        {
            "title": "The Hobbit",
            "author": "J. R. R. Tolkien",
            "genre": "Fantasy",
            "rating": 4,
            "review": "",
            "date_finished": "2024-03-01",
        },
    )]
    assert not dialog.open
    assert page.overlay == []


def test_save_with_errors_keeps_dialog_and_shows_messages(page, state, fake_store):
    dialog_service.open_book_dialog(state)
    actions.show_book_dialog(page, state, fake_store)
    dialog = next(c for c in page.overlay if isinstance(c, ft.AlertDialog))

    button(dialog, "Save").on_click(None)

    assert fake_store.calls == []
    assert dialog.open
    assert dialog in page.overlay
    assert "Title is required." in texts(dialog)
    assert "Please select a rating." in texts(dialog)


def test_edit_dialog_prefills_and_cancel_cleans_overlay(page, state, fake_store, make_book):
    dialog_service.open_book_dialog(state, make_book(id=3, date_finished="2023-11-20"))
    actions.show_book_dialog(page, state, fake_store)
    dialog = next(c for c in page.overlay if isinstance(c, ft.AlertDialog))
    assert "Editing book" in texts(dialog)
    assert field(dialog, "Title *").value == "Dune"
    assert any(isinstance(c, ft.DatePicker) for c in page.overlay)

    button(dialog, "Cancel").on_click(None)

    assert fake_store.calls == []
    assert state.editing_id is None
    assert page.overlay == []


# ---------------------------------------------------------------------------
# Delete confirmation and alerts
# ---------------------------------------------------------------------------


def test_delete_confirm_yes_deletes_once(page, state, fake_store):
    actions.show_delete_confirm(page, state, fake_store, 4)
    (dialog,) = page.overlay
    button(dialog, "Yes, delete").on_click(None)
    assert fake_store.calls == [("delete", 4)]
    assert page.overlay == []


def test_delete_confirm_no_keeps_book(page, state, fake_store):
    actions.show_delete_confirm(page, state, fake_store, 4)
    (dialog,) = page.overlay
    button(dialog, "No").on_click(None)
    assert fake_store.calls == []
    assert state.delete_id is None
    assert page.overlay == []


def test_alert_is_removed_on_ok(page):
    show_alert(page, "Export", "No books to export!")
    (dialog,) = page.overlay
    assert dialog.open
    button(dialog, "OK").on_click(None)
    assert page.overlay == []


def test_export_with_no_books_alerts(page, state):
    state.replace_books([])
    asyncio.run(actions.export_books(page, state))
    (dialog,) = page.overlay
    assert "No books to export!" in texts(dialog)
    assert page.services == []
