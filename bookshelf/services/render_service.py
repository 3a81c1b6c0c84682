"""
render_service.py - List view-model
Single responsibility: turn (books, filter) into display-ready rows and summary stats.
"""
from collections import Counter
from dataclasses import dataclass, field

from bookshelf.config import NO_FAVORITE_TEXT, NO_RESULTS_TEXT, NO_TIMESTAMP_TEXT
from bookshelf.domain.filters import BookFilter
from bookshelf.domain.models import Book
from bookshelf.services.filter_service import apply_filter
from bookshelf.utils.time import format_date, format_timestamp

STAR = "⭐"


@dataclass
class BookRow:
    id: int
    title: str
    author: str
    genre: str
    stars: str
    review: str | None = None
    date_finished_text: str | None = None
    added_text: str = NO_TIMESTAMP_TEXT
    cover_url: str | None = None


@dataclass
class ListViewModel:
    rows: list[BookRow] = field(default_factory=list)
    total_count: int = 0
    favorite_genre: str = NO_FAVORITE_TEXT
    empty_message: str | None = None


def favorite_genre(books: list[Book]) -> str:
    """Most frequent genre.

    On a tie, the genre that reached the winning count first (walking the
    list oldest first) wins.
    """
    counts = Counter(b.genre for b in books)
    if not counts:
        return NO_FAVORITE_TEXT
    top = max(counts.values())
    running = Counter()
    for book in books:
        running[book.genre] += 1
        if running[book.genre] == top:
            return book.genre
    return NO_FAVORITE_TEXT


def build_row(book: Book) -> BookRow:
    return BookRow(
        id=book.id,
        title=book.title,
        author=book.author,
        genre=book.genre,
        stars=STAR * (book.rating or 0),
        review=book.review or None,
        date_finished_text=format_date(book.date_finished) if book.date_finished else None,
        added_text=format_timestamp(book.timestamp) if book.timestamp else NO_TIMESTAMP_TEXT,
        cover_url=book.cover_url or None,
    )


def build_list_view_model(books: list[Book], flt: BookFilter) -> ListViewModel:
    visible = apply_filter(books, flt)
    return ListViewModel(
        rows=[build_row(b) for b in visible],
        total_count=len(books),
        favorite_genre=favorite_genre(books),
        empty_message=None if visible else NO_RESULTS_TEXT,
    )
