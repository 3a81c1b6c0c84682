"""
filter_service.py - Filter helpers
Single responsibility: build BookFilter and derive the visible subset of books.
"""
from bookshelf.config import HIGH_RATING_THRESHOLD
from bookshelf.domain.filters import BookFilter
from bookshelf.domain.models import Book


def build_filter(search: str | None = "", genre: str | None = "", rating_4_plus: bool | None = False) -> BookFilter:
    return BookFilter(
        search=search or "",
        genre=genre or "",
        rating_4_plus=bool(rating_4_plus),
    )


def is_identity(flt: BookFilter) -> bool:
    return not flt.search and not flt.genre and not flt.rating_4_plus


def matches(book: Book, flt: BookFilter) -> bool:
    if flt.search:
        term = flt.search.lower()
        if term not in (book.title or "").lower() and term not in (book.author or "").lower():
            return False
    if flt.genre and book.genre != flt.genre:
        return False
    if flt.rating_4_plus and (book.rating or 0) < HIGH_RATING_THRESHOLD:
        return False
    return True


def apply_filter(books: list[Book], flt: BookFilter) -> list[Book]:
    """Books passing every active filter, in store order."""
    if is_identity(flt):
        return list(books)
    return [b for b in books if matches(b, flt)]
