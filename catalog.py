import logging
from typing import List, Optional, Tuple

import lending
from book import Book
from errors import InvalidArgumentError, NotFoundError
from member import Member
from schemas import CatalogStats, HistoryEntry, OperationResult

logger = logging.getLogger(__name__)


class Catalog:
    """Owns every book and member, issues their ids and runs lending by id."""

    def __init__(self) -> None:
        self.books: List[Book] = []
        self.members: List[Member] = []
        self._next_book_id = 1
        self._next_member_id = 1

    # ------------------------- Books ------------------------- #
    def add_book(self, title: Optional[str], author: Optional[str]) -> OperationResult:
        try:
            book = Book(self._next_book_id, title, author)
        except InvalidArgumentError as e:
            logger.info(f"add_book refused: {e}")
            return OperationResult.invalid(str(e))
        self._next_book_id += 1
        self.books.append(book)
        logger.info(f"Book added | id={book.id} title={book.title}")
        return OperationResult.success("Book added successfully.", book=book.describe())

    def edit_book(self, book_id: int, title: Optional[str] = None, author: Optional[str] = None) -> OperationResult:
        """Update title and/or author. Blank or missing values keep the current one."""
        book = self.find_book(book_id)
        if not book:
            logger.warning(f"edit_book: unknown book id {book_id}")
            return OperationResult.not_found(f"Book with ID {book_id} not found.")

        if title is not None and title.strip():
            book.title = title.strip()
        if author is not None and author.strip():
            book.author = author.strip()
        logger.info(f"Book edited | id={book.id}")
        return OperationResult.success("Book details updated successfully.", book=book.describe())

    def find_book(self, book_id: int) -> Optional[Book]:
        for book in self.books:
            if book.id == book_id:
                return book
        return None

    def get_book(self, book_id: int) -> Book:
        book = self.find_book(book_id)
        if book is None:
            raise NotFoundError(f"Book with ID {book_id} not found.")
        return book

    def list_books(self) -> List[Book]:
        return list(self.books)

    def search_books(self, keyword: str) -> List[Book]:
        """Case-insensitive substring search over title and author."""
        if keyword is None:
            raise InvalidArgumentError("keyword is required.")
        needle = keyword.lower()
        return [b for b in self.books if needle in b.title.lower() or needle in b.author.lower()]

    def borrow_history(self, book_id: int) -> List[HistoryEntry]:
        return self.get_book(book_id).history_view()

    # ------------------------- Members ------------------------- #
    def add_member(self, name: Optional[str]) -> OperationResult:
        try:
            member = Member(self._next_member_id, name)
        except InvalidArgumentError as e:
            logger.info(f"add_member refused: {e}")
            return OperationResult.invalid(str(e))
        self._next_member_id += 1
        self.members.append(member)
        logger.info(f"Member added | id={member.id} name={member.name}")
        return OperationResult.success("Member added successfully.", member=member.describe())

    def edit_member(self, member_id: int, name: Optional[str] = None) -> OperationResult:
        member = self.find_member(member_id)
        if not member:
            logger.warning(f"edit_member: unknown member id {member_id}")
            return OperationResult.not_found(f"Member with ID {member_id} not found.")

        if name is not None and name.strip():
            member.name = name.strip()
        logger.info(f"Member edited | id={member.id}")
        return OperationResult.success("Member details updated successfully.", member=member.describe())

    def find_member(self, member_id: int) -> Optional[Member]:
        for member in self.members:
            if member.id == member_id:
                return member
        return None

    def get_member(self, member_id: int) -> Member:
        member = self.find_member(member_id)
        if member is None:
            raise NotFoundError(f"Member with ID {member_id} not found.")
        return member

    def list_members(self) -> List[Member]:
        return list(self.members)

    def members_with_borrowed_books(self) -> List[Tuple[Member, List[Book]]]:
        return [(m, list(m.borrowed_books)) for m in self.members if m.borrowed_books]

    # ------------------------- Lending ------------------------- #
    def borrow_book(self, book_id: int, member_id: int) -> OperationResult:
        try:
            book = self.get_book(book_id)
            member = self.get_member(member_id)
        except NotFoundError as e:
            logger.warning(f"borrow_book: {e}")
            return OperationResult.not_found(str(e))
        return lending.borrow_book(book, member)

    def return_book(self, book_id: int, member_id: int) -> OperationResult:
        try:
            book = self.get_book(book_id)
            member = self.get_member(member_id)
        except NotFoundError as e:
            logger.warning(f"return_book: {e}")
            return OperationResult.not_found(str(e))
        return lending.return_book(book, member)

    # ------------------------- Reporting ------------------------- #
    def get_statistics(self) -> CatalogStats:
        available = sum(1 for b in self.books if b.available)
        return CatalogStats(
            total_books=len(self.books),
            available_books=available,
            borrowed_books=len(self.books) - available,
            total_members=len(self.members),
            members_with_loans=sum(1 for m in self.members if m.borrowed_books),
            unique_authors=len({b.author for b in self.books}),
        )
