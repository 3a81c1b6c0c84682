"""
time.py - time utilities
Single responsibility: common time helpers.
"""
from datetime import date, datetime

from bookshelf.config import DATE_FORMAT, TIMESTAMP_FORMAT


def now_iso() -> str:
    return datetime.now().isoformat(timespec="seconds")


def format_date(iso_str: str | None) -> str:
    """YYYY-MM-DD to DATE_FORMAT; fallback to raw on error."""
    try:
        return date.fromisoformat(iso_str).strftime(DATE_FORMAT)
    except (ValueError, TypeError):
        return iso_str or ""


def format_timestamp(iso_str: str | None) -> str:
    try:
        return datetime.fromisoformat(iso_str).strftime(TIMESTAMP_FORMAT)
    except (ValueError, TypeError):
        return iso_str or ""
