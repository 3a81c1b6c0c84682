"""
filters.py - Filter DTOs
Single responsibility: carry the list filter inputs.
"""
from dataclasses import dataclass


@dataclass
class BookFilter:
    search: str = ""
    genre: str = ""  # "" = all genres
    rating_4_plus: bool = False
