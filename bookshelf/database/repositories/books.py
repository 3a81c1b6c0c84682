"""
books.py - Book repository
Single responsibility: persistence for book records.
"""

from bookshelf.database.connection import get_connection
from bookshelf.domain.models import BOOK_FIELDS, Book
from bookshelf.utils.time import now_iso


def _row_to_book(r) -> Book:
    return Book(
        id=r["id"],
        title=r["title"],
        author=r["author"],
        genre=r["genre"],
        rating=r["rating"],
        review=r["review"] or "",
        date_finished=r["date_finished"] or "",
        cover_url=r["cover_url"],
        timestamp=r["timestamp"],
    )


def _writable(fields: dict) -> dict:
    return {k: fields[k] for k in BOOK_FIELDS if k in fields}


def list_all() -> list[Book]:
    """All books, oldest first."""
    with get_connection() as conn:
        rows = conn.execute("SELECT * FROM books ORDER BY id").fetchall()
        return [_row_to_book(r) for r in rows]


def get(book_id: int) -> Book | None:
    with get_connection() as conn:
        row = conn.execute("SELECT * FROM books WHERE id = ?", (book_id,)).fetchone()
        if not row:
            return None
        return _row_to_book(row)


def create(fields: dict) -> int:
    values = _writable(fields)
    with get_connection() as conn:
        cur = conn.execute(
            "INSERT INTO books (title, author, genre, rating, review, date_finished, timestamp)"
            " VALUES (?, ?, ?, ?, ?, ?, ?)",
            (
                values.get("title", ""),
                values.get("author", ""),
                values.get("genre", ""),
                values.get("rating"),
                values.get("review") or "",
                values.get("date_finished") or "",
                now_iso(),
            ),
        )
        return cur.lastrowid


def update(book_id: int, fields: dict) -> bool:
    """Overwrite the named fields; False if the book no longer exists."""
    values = _writable(fields)
    if not values:
        return get(book_id) is not None
    assignments = ", ".join(f"{k} = ?" for k in values)
    with get_connection() as conn:
        cur = conn.execute(
            f"UPDATE books SET {assignments} WHERE id = ?",
            (*values.values(), book_id),
        )
        return cur.rowcount > 0


def delete(book_id: int) -> bool:
    with get_connection() as conn:
        cur = conn.execute("DELETE FROM books WHERE id = ?", (book_id,))
        return cur.rowcount > 0
