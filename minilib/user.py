from __future__ import annotations

from typing import FrozenSet, Set


class User:
    """A library member and the ISBNs they currently hold."""

    def __init__(self, user_id: int, name: str, email: str) -> None:
        if name is None or email is None:
            raise ValueError("Name and email are required.")
        self._user_id = user_id
        self._name = name.strip()
        self._email = email.strip()
        self._issued_books: Set[str] = set()

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def issued_books(self) -> FrozenSet[str]:
        """Snapshot of held ISBNs; changing it does not affect the user."""
        return frozenset(self._issued_books)

    def add_issued_book(self, isbn: str) -> None:
        self._issued_books.add(isbn)

    def remove_issued_book(self, isbn: str) -> None:
        self._issued_books.discard(isbn)

    def __str__(self) -> str:
        return (
            f"UserId: {self._user_id} | Name: {self._name} | Email: {self._email} "
            f"| BooksIssued: {len(self._issued_books)}"
        )

    def __repr__(self) -> str:
        return f"User(user_id={self._user_id!r}, name={self._name!r})"

    def to_dict(self) -> dict:
        return {
            "user_id": self._user_id,
            "name": self._name,
            "email": self._email,
            "issued_books": sorted(self._issued_books),
        }
