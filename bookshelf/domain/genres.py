"""
genres.py - Shared genre options.
Single responsibility: define the fixed genre set offered by the form and filter.
"""

GENRES: list[str] = [
    "Fantasy",
    "Detective",
    "Novel",
    "Scientific",
    "Classic",
    "Children",
    "Adventure",
    "Romance",
    "Political Fiction",
    "Drama",
    "Historical",
    "Thriller",
]
