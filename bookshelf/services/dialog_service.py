"""
dialog_service.py - Add/edit and delete-confirmation flows
Single responsibility: drive AppState through the dialog states and call the store.

The Flet dialogs in ui/actions.py only copy control values in and out; every
state transition lives here.
"""
import logging

from bookshelf.config import MAX_RATING
from bookshelf.domain.errors import StoreOperationError, ValidationError
from bookshelf.domain.models import Book, BookForm
from bookshelf.services.validation_service import empty_errors, ensure_valid

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Add / edit dialog
# ---------------------------------------------------------------------------


def open_book_dialog(state, book: Book | None = None) -> None:
    state.editing_id = book.id if book else None
    state.form = BookForm.from_book(book) if book else BookForm()
    state.form_errors = empty_errors()
    state.book_dialog_open = True


def close_book_dialog(state) -> None:
    state.book_dialog_open = False
    state.form = BookForm()
    state.form_errors = empty_errors()
    state.editing_id = None


def find_book(state, book_id: int) -> Book | None:
    return next((b for b in state.books if b.id == book_id), None)


def edit_book(state, book_id: int) -> bool:
    book = find_book(state, book_id)
    if book is None:
        logger.warning("Book %s is not in the current list", book_id)
        return False
    open_book_dialog(state, book)
    return True


def set_rating(state, value: int) -> None:
    """Clicking the k-th star sets the rating to k."""
    if not 1 <= value <= MAX_RATING:
        raise ValueError(f"Rating must be between 1 and {MAX_RATING}: {value}")
    state.form.rating = value


def star_states(rating: int, total: int = MAX_RATING) -> list[bool]:
    return [i < (rating or 0) for i in range(total)]


def submit_book_form(state, store) -> bool:
    """Validate and save; True when the dialog was closed after a successful write."""
    try:
        fields = ensure_valid(state.form)
    except ValidationError as e:
        state.form_errors = e.errors
        return False
    state.form_errors = empty_errors()

    try:
        if state.editing_id is not None:
            store.update(state.editing_id, fields)
        else:
            store.create(fields)
    except StoreOperationError:
        logger.exception("Error saving book: %s", fields["title"])
        return False

    close_book_dialog(state)
    return True


# ---------------------------------------------------------------------------
# Delete confirmation
# ---------------------------------------------------------------------------


def request_delete(state, book_id: int) -> None:
    state.delete_id = book_id
    state.confirm_dialog_open = True


def confirm_delete(state, store) -> bool:
    book_id = state.delete_id
    if book_id is None:
        return False
    deleted = False
    try:
        store.delete(book_id)
        deleted = True
    except StoreOperationError:
        logger.exception("Error deleting book: %s", book_id)
    state.delete_id = None
    state.confirm_dialog_open = False
    return deleted


def cancel_delete(state) -> None:
    state.delete_id = None
    state.confirm_dialog_open = False
