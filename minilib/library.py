import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from minilib.book import Book
from minilib.user import User

logger = logging.getLogger(__name__)

MAX_BOOKS_PER_USER = 5


class IssueResult(str, Enum):
    """Outcome of ``Library.issue_book``; the value is the message shown to the user."""
    SUCCESS = "Book issued successfully."
    BOOK_NOT_FOUND = "Book not found."
    USER_NOT_FOUND = "User not found."
    ALREADY_ISSUED = "Book already issued."
    LIMIT_REACHED = f"User has reached max allowed issued books ({MAX_BOOKS_PER_USER})."

    def __str__(self) -> str:
        return self.value

    @property
    def ok(self) -> bool:
        return self is IssueResult.SUCCESS


class ReturnResult(str, Enum):
    """Outcome of ``Library.return_book``; the value is the message shown to the user."""
    SUCCESS = "Book returned successfully."
    BOOK_NOT_FOUND = "Book not found."
    USER_NOT_FOUND = "User not found."
    NOT_ISSUED_TO_USER = "This book is not issued to this user."

    def __str__(self) -> str:
        return self.value

    @property
    def ok(self) -> bool:
        return self is ReturnResult.SUCCESS


class Library:
    """Keeps the book catalog and the user registry and lends books between them."""

    max_books_per_user = MAX_BOOKS_PER_USER

    def __init__(self) -> None:
        self._books: Dict[str, Book] = {}
        self._users: Dict[int, User] = {}

    # ------------------------- Registration ------------------------- #
    def add_book(self, book: Book) -> bool:
        """Add a book to the catalog. Returns False if its ISBN is already taken."""
        if book.isbn in self._books:
            logger.debug("Refused duplicate book isbn=%s", book.isbn)
            return False
        self._books[book.isbn] = book
        logger.info("Book added: isbn=%s title=%r", book.isbn, book.title)
        return True

    def add_user(self, user: User) -> bool:
        """Register a user. Returns False if the id is already taken."""
        if user.user_id in self._users:
            logger.debug("Refused duplicate user id=%s", user.user_id)
            return False
        self._users[user.user_id] = user
        logger.info("User added: id=%s name=%r", user.user_id, user.name)
        return True

    # ------------------------- Lending ------------------------- #
    def issue_book(self, isbn: str, user_id: int) -> IssueResult:
        """Lend a book to a user.

        Checks run in a fixed order and the first failing one decides the
        result: unknown book, unknown user, book already out, user at quota.
        """
        book = self._books.get(isbn)
        if book is None:
            result = IssueResult.BOOK_NOT_FOUND
        elif (user := self._users.get(user_id)) is None:
            result = IssueResult.USER_NOT_FOUND
        elif book.issued:
            result = IssueResult.ALREADY_ISSUED
        elif len(user.issued_books) >= self.max_books_per_user:
            result = IssueResult.LIMIT_REACHED
        else:
            book.issue_to(user_id)
            user.add_issued_book(isbn)
            logger.info("Book issued: isbn=%s user_id=%s", isbn, user_id)
            return IssueResult.SUCCESS

        logger.debug("Issue refused: isbn=%s user_id=%s reason=%s", isbn, user_id, result.name)
        return result

    def return_book(self, isbn: str, user_id: int) -> ReturnResult:
        """Take a book back from the user currently holding it."""
        book = self._books.get(isbn)
        if book is None:
            result = ReturnResult.BOOK_NOT_FOUND
        elif (user := self._users.get(user_id)) is None:
            result = ReturnResult.USER_NOT_FOUND
        elif not book.issued or book.issued_to_user_id != user_id:
            # Not issued at all and issued to someone else share one message.
            result = ReturnResult.NOT_ISSUED_TO_USER
        else:
            book.return_book()
            user.remove_issued_book(isbn)
            logger.info("Book returned: isbn=%s user_id=%s", isbn, user_id)
            return ReturnResult.SUCCESS

        logger.debug("Return refused: isbn=%s user_id=%s reason=%s", isbn, user_id, result.name)
        return result

    # ------------------------- Queries ------------------------- #
    def search_by_title(self, title_part: str) -> List[Book]:
        """Case-insensitive substring search on titles. An empty query matches every book."""
        needle = (title_part or "").lower()
        return self._sorted_books(b for b in self._books.values() if needle in b.title.lower())

    def list_available_books(self) -> List[Book]:
        return self._sorted_books(b for b in self._books.values() if not b.issued)

    def list_all_books(self) -> List[Book]:
        return self._sorted_books(self._books.values())

    def list_all_users(self) -> List[User]:
        return sorted(self._users.values(), key=lambda u: (u.name, u.user_id))

    def get_book_by_isbn(self, isbn: str) -> Optional[Book]:
        return self._books.get(isbn)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_statistics(self) -> Dict[str, Any]:
        """Catalog counters for the stats view."""
        issued = sum(1 for b in self._books.values() if b.issued)
        return {
            "total_books": len(self._books),
            "available_books": len(self._books) - issued,
            "issued_books": issued,
            "total_users": len(self._users),
        }

    # ------------------------- Helpers ------------------------- #
    @staticmethod
    def _sorted_books(books) -> List[Book]:
        # ISBN breaks title ties so listings are deterministic
        return sorted(books, key=lambda b: (b.title, b.isbn))
