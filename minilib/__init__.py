"""Mini Library - core package

This package contains the in-memory record keeping:
- Data models (book.py, user.py)
- Lending rules and catalog queries (library.py)
- Demo catalog (sample_data.py)
"""

from minilib.book import Book
from minilib.library import MAX_BOOKS_PER_USER, IssueResult, Library, ReturnResult
from minilib.sample_data import load_sample_data
from minilib.user import User

__all__ = [
    "Book",
    "IssueResult",
    "Library",
    "MAX_BOOKS_PER_USER",
    "ReturnResult",
    "User",
    "load_sample_data",
]
