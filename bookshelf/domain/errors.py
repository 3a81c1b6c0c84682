"""
errors.py - Error taxonomy
Single responsibility: exceptions raised across the service layer.
"""


class BookshelfError(Exception):
    """Base class for application errors."""


class ValidationError(BookshelfError, ValueError):
    """Form input rejected; ``errors`` maps field name to message ("" = ok)."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        failed = [k for k, v in errors.items() if v]
        super().__init__(f"Invalid fields: {', '.join(failed)}")


class StoreOperationError(BookshelfError):
    """A create/update/delete against the record store did not complete."""


class RecordNotFoundError(StoreOperationError):
    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book not found: {book_id}")


class ExportPreconditionError(BookshelfError):
    """Export requested with nothing to export."""
