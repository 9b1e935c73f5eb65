from __future__ import annotations

from typing import TYPE_CHECKING, List

from errors import InvalidArgumentError
from schemas import MemberInfo

if TYPE_CHECKING:  # pragma: no cover
    from book import Book


class Member:
    """A library patron and the books they currently hold."""

    def __init__(self, member_id: int, name: str) -> None:
        if not isinstance(name, str):
            raise InvalidArgumentError("name is required.")
        self._id = member_id
        self.name = name.strip()
        self._borrowed: List[Book] = []

    @property
    def id(self) -> int:
        return self._id

    @property
    def borrowed_books(self) -> tuple:
        return tuple(self._borrowed)

    def holds(self, book: Book) -> bool:
        return any(b is book for b in self._borrowed)

    def add_borrowed(self, book: Book) -> None:
        if not self.holds(book):
            self._borrowed.append(book)

    def remove_borrowed(self, book: Book) -> bool:
        for i, held in enumerate(self._borrowed):
            if held is book:
                del self._borrowed[i]
                return True
        return False

    def describe(self) -> MemberInfo:
        return MemberInfo(id=self.id, name=self.name, borrowed_book_ids=[b.id for b in self._borrowed])

    def to_dict(self) -> dict:
        return self.describe().model_dump()

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.name} (Member ID: {self.id})"

    def __repr__(self) -> str:  # pragma: no cover
        return f"Member(id={self.id!r}, name={self.name!r})"
