"""
Title search over an already fetched book list.
"""

from typing import List

from .models import ProjectedBook


def filter_books(books: List[ProjectedBook], term: str) -> List[ProjectedBook]:
    """Case-insensitive substring match on ``name``. An empty term keeps every book."""
    if not term:
        return list(books)
    needle = term.lower()
    return [book for book in books if needle in book.name.lower()]
