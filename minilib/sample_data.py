"""Fixed demo catalog used when the CLI starts with sample data enabled."""

import logging

from minilib.book import Book
from minilib.library import Library
from minilib.user import User

logger = logging.getLogger(__name__)

SAMPLE_BOOKS = (
    ("978-0134685991", "Effective Java", "Joshua Bloch"),
    ("978-0596009205", "Head First Java", "Kathy Sierra & Bert Bates"),
    ("978-0201633610", "Design Patterns", "Gamma, Helm, Johnson, Vlissides"),
    ("978-0132350884", "Clean Code", "Robert C. Martin"),
    ("978-1617294945", "Java Concurrency in Practice", "Brian Goetz"),
)

SAMPLE_USERS = (
    (1, "Alice", "alice@example.com"),
    (2, "Bob", "bob@example.com"),
    (3, "Charlie", "charlie@example.com"),
)


def load_sample_data(library: Library) -> None:
    """Seed ``library`` with the demo books and users. Entries already present are left alone."""
    books_added = sum(library.add_book(Book(isbn, title, author)) for isbn, title, author in SAMPLE_BOOKS)
    users_added = sum(library.add_user(User(user_id, name, email)) for user_id, name, email in SAMPLE_USERS)
    logger.info("Sample data loaded: %d books, %d users", books_added, users_added)
