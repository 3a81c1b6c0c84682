"""
Pytest configuration and fixtures for the bookshelf tests.
"""
import pytest

from bookshelf.database import connection
from bookshelf.database.schema import initialize_schema
from bookshelf.domain.errors import StoreOperationError
from bookshelf.domain.models import Book, BookForm
from bookshelf.services.record_store import RecordStore
from bookshelf.ui_state import AppState


@pytest.fixture(scope="function")
def db_path(tmp_path, monkeypatch):
    """Point the connection helper at a fresh database file."""
    path = str(tmp_path / "books.db")
    monkeypatch.setattr(connection, "DB_PATH", path)
    initialize_schema()
    return path


@pytest.fixture(scope="function")
def store(db_path):
    record_store = RecordStore(poll_interval=0.05)
    yield record_store
    record_store.stop()


class FakeStore:
    """Records store calls; raises fail_with from every write when set."""

    def __init__(self, fail_with: Exception | None = None):
        self.calls: list[tuple] = []
        self.fail_with = fail_with

    def _record(self, *call):
        self.calls.append(call)
        if self.fail_with:
            raise self.fail_with

    def create(self, fields: dict) -> int:
        self._record("create", fields)
        return len(self.calls)

    def update(self, book_id: int, fields: dict) -> None:
        self._record("update", book_id, fields)

    def delete(self, book_id: int) -> None:
        self._record("delete", book_id)


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def failing_store():
    return FakeStore(fail_with=StoreOperationError("database is locked"))


@pytest.fixture
def make_book():
    def _make(**overrides) -> Book:
        values = dict(
            id=1,
            title="Dune",
            author="Frank Herbert",
            genre="Scientific",
            rating=5,
            review="",
            date_finished="",
        )
        values.update(overrides)
        return Book(**values)

    return _make


@pytest.fixture
def valid_form():
    return BookForm(
        title="The Hobbit",
        author="J. R. R. Tolkien",
        genre="Fantasy",
        rating=4,
        review="A charming adventure, with dragons.",
        date_finished="2024-03-01",
    )


@pytest.fixture
def state():
    return AppState()
