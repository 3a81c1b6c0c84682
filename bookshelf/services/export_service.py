"""
export_service.py - CSV export
Single responsibility: serialize the full book list to books.csv.

Fields are wrapped in double quotes as-is; embedded quotes and commas are not
escaped, so the output is not RFC 4180 compliant.
"""
import logging

from bookshelf.domain.errors import ExportPreconditionError
from bookshelf.domain.models import Book

logger = logging.getLogger(__name__)

CSV_HEADERS = ["Title", "Author", "Genre", "Rating", "Review", "Date Finished"]


def _quote(value) -> str:
    return f'"{"" if value is None else value}"'


def build_csv(books: list[Book]) -> str:
    if not books:
        raise ExportPreconditionError("No books to export!")
    lines = [",".join(CSV_HEADERS)]
    for b in books:
        row = [b.title, b.author, b.genre, b.rating, b.review, b.date_finished]
        lines.append(",".join(_quote(v) for v in row))
    return "\n".join(lines)


def export_csv(books: list[Book], path: str) -> str:
    """Write the CSV to path and return it."""
    content = build_csv(books)
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    logger.info("Exported %d books to %s", len(books), path)
    return path
