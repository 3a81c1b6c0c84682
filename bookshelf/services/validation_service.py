"""
validation_service.py - Book form validation
Single responsibility: check the add/edit form before anything reaches the store.
"""
import re

from bookshelf.domain.errors import ValidationError
from bookshelf.domain.genres import GENRES
from bookshelf.domain.models import BOOK_FIELDS, BookForm

LETTERS_ONLY = re.compile(r"^[A-Za-z.,\s]+$")

FIELD_LABELS: dict[str, str] = {
    "title": "Title",
    "author": "Author",
    "genre": "Genre",
    "rating": "Rating",
    "review": "Review",
    "date_finished": "Date finished",
}

TEXT_FIELDS = ("title", "author", "review")
OPTIONAL_FIELDS = ("review",)


def _check_field(key: str, value) -> str:
    label = FIELD_LABELS[key]

    if key == "rating" and value == 0:
        return "Please select a rating."

    if key in TEXT_FIELDS and value:
        # review may span lines; only its non-space characters are checked
        to_check = re.sub(r"\s", "", value) if key == "review" else value
        if not LETTERS_ONLY.match(to_check):
            return f"{label} must contain letters only."

    if key == "genre" and value and value not in GENRES:
        return "Genre must be one of the listed genres."

    if not value and key not in OPTIONAL_FIELDS:
        return f"{label} is required."

    return ""


def validate_book_form(form: BookForm) -> dict[str, str]:
    """Return one message per field; "" means the field passed."""
    fields = form.cleaned()
    return {key: _check_field(key, fields[key]) for key in BOOK_FIELDS}


def has_errors(errors: dict[str, str]) -> bool:
    return any(errors.values())


def ensure_valid(form: BookForm) -> dict:
    """Return the cleaned field map, or raise ValidationError."""
    errors = validate_book_form(form)
    if has_errors(errors):
        raise ValidationError(errors)
    return form.cleaned()


def empty_errors() -> dict[str, str]:
    return {key: "" for key in BOOK_FIELDS}
