"""
ui_state.py - UI state container
"""
from bookshelf.domain.filters import BookFilter
from bookshelf.domain.models import Book, BookForm
from bookshelf.services.validation_service import empty_errors


class AppState:
    def __init__(self):
        # Replaced wholesale by every store snapshot
        self.books: list[Book] = []
        self.loading: bool = True
        self.filter: BookFilter = BookFilter()

        # Add/edit dialog; editing_id None = creating
        self.book_dialog_open: bool = False
        self.editing_id: int | None = None
        self.form: BookForm = BookForm()
        self.form_errors: dict[str, str] = empty_errors()

        # Delete confirmation, independent of the edit session
        self.confirm_dialog_open: bool = False
        self.delete_id: int | None = None

    def replace_books(self, books: list[Book]) -> None:
        self.books = list(books)
        self.loading = False
