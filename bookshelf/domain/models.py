"""
models.py - Domain models
Single responsibility: typed containers for books and the book form draft.
"""
from dataclasses import dataclass
from typing import Optional

# Writable fields, in form order. Also the keys of the field map sent to the store.
BOOK_FIELDS: tuple[str, ...] = (
    "title",
    "author",
    "genre",
    "rating",
    "review",
    "date_finished",
)


@dataclass
class Book:
    title: str
    author: str
    genre: str
    rating: int
    review: str = ""
    date_finished: str = ""
    cover_url: str | None = None
    timestamp: str | None = None
    id: Optional[int] = None

    def __getitem__(self, key):
        return getattr(self, key)

    def fields(self) -> dict:
        return {name: getattr(self, name) for name in BOOK_FIELDS}


@dataclass
class BookForm:
    """Draft values held by the add/edit dialog; rating 0 means no star selected."""

    title: str = ""
    author: str = ""
    genre: str = ""
    rating: int = 0
    review: str = ""
    date_finished: str = ""

    @classmethod
    def from_book(cls, book: Book) -> "BookForm":
        return cls(
            title=book.title or "",
            author=book.author or "",
            genre=book.genre or "",
            rating=book.rating or 0,
            review=book.review or "",
            date_finished=book.date_finished or "",
        )

    def cleaned(self) -> dict:
        """Field map as submitted: text inputs trimmed, date left as picked."""
        return {
            "title": (self.title or "").strip(),
            "author": (self.author or "").strip(),
            "genre": self.genre or "",
            "rating": int(self.rating or 0),
            "review": (self.review or "").strip(),
            "date_finished": self.date_finished or "",
        }
