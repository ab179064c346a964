from __future__ import annotations


def _required(value: str | None, field: str) -> str:
    if value is None:
        raise ValueError(f"{field} cannot be empty.")
    cleaned = value.strip()
    if not cleaned:
        raise ValueError(f"{field} cannot be empty.")
    return cleaned


class Book:
    """A single catalog entry.

    The ISBN, title and author are fixed at construction. The issued flag and
    the holder's user id only change through ``issue_to`` and ``return_book``,
    and the holder is set if and only if the book is issued.
    """

    def __init__(self, isbn: str, title: str, author: str) -> None:
        self._isbn = _required(isbn, "ISBN")
        self._title = _required(title, "Title")
        self._author = _required(author, "Author")
        self._issued = False
        self._issued_to_user_id: int | None = None

    @property
    def isbn(self) -> str:
        return self._isbn

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def issued(self) -> bool:
        return self._issued

    @property
    def issued_to_user_id(self) -> int | None:
        return self._issued_to_user_id

    def issue_to(self, user_id: int) -> bool:
        """Mark the book as lent to ``user_id``. Returns False if it is already out."""
        if self._issued:
            return False
        self._issued = True
        self._issued_to_user_id = user_id
        return True

    def return_book(self) -> bool:
        """Put the book back on the shelf. Returns False if it was not issued."""
        if not self._issued:
            return False
        self._issued = False
        self._issued_to_user_id = None
        return True

    def __str__(self) -> str:
        status = f"Yes (UserId={self._issued_to_user_id})" if self._issued else "No"
        return f"ISBN: {self._isbn} | Title: {self._title} | Author: {self._author} | Issued: {status}"

    def __repr__(self) -> str:
        return f"Book(isbn={self._isbn!r}, title={self._title!r}, issued={self._issued})"

    def to_dict(self) -> dict:
        return {
            "isbn": self._isbn,
            "title": self._title,
            "author": self._author,
            "issued": self._issued,
            "issued_to_user_id": self._issued_to_user_id,
        }
