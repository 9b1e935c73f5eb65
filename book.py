from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from errors import InvalidArgumentError
from schemas import BookInfo, HistoryEntry

if TYPE_CHECKING:  # pragma: no cover
    from member import Member


class Book:
    """A single catalog item with its availability and borrow history."""

    def __init__(self, book_id: int, title: str, author: str) -> None:
        if not isinstance(title, str):
            raise InvalidArgumentError("title is required.")
        if not isinstance(author, str):
            raise InvalidArgumentError("author is required.")
        self._id = book_id
        self.title = title.strip()
        self.author = author.strip()
        self.available = True
        # Non-owning; the catalog owns members.
        self.borrower: Optional[Member] = None
        self._history: List[Member] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def history(self) -> tuple:
        return tuple(self._history)

    def mark_borrowed(self, member: Member) -> None:
        """Bind the book to ``member``. Availability is checked by the caller."""
        self.available = False
        self.borrower = member
        self._history.append(member)

    def mark_returned(self) -> None:
        self.available = True
        self.borrower = None

    def status(self) -> str:
        if self.available:
            return "Available"
        return f"Not Available, Borrowed by: {self.borrower.name if self.borrower else ''}"

    def describe(self) -> BookInfo:
        return BookInfo(
            id=self.id,
            title=self.title,
            author=self.author,
            available=self.available,
            borrower_id=self.borrower.id if self.borrower else None,
            borrower_name=self.borrower.name if self.borrower else None,
            status=self.status(),
        )

    def history_view(self) -> List[HistoryEntry]:
        return [HistoryEntry(member_name=m.name, member_id=m.id) for m in self._history]

    def to_dict(self) -> dict:
        return self.describe().model_dump()

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ID: {self.id})"

    def __repr__(self) -> str:  # pragma: no cover
        return f"Book(id={self.id!r}, title={self.title!r}, available={self.available!r})"
