"""Structured records handed from the catalog to whatever renders them.

The core never formats text for the console; it returns these models and
the CLI decides how to show them (see ``utils/ui_helpers.py``).
"""
from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class ResultStatus(str, Enum):
    OK = "ok"
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    REJECTED = "rejected"


class RejectionReason(str, Enum):
    """Why the lending protocol refused a valid request."""
    ALREADY_BORROWED = "already_borrowed"
    NOT_BORROWED_BY_MEMBER = "not_borrowed_by_member"


class BookInfo(BaseModel):
    id: int
    title: str
    author: str
    available: bool
    borrower_id: int | None = None
    borrower_name: str | None = None
    status: str


class MemberInfo(BaseModel):
    id: int
    name: str
    borrowed_book_ids: List[int] = Field(default_factory=list)


class HistoryEntry(BaseModel):
    """One successful borrow in a book's history."""
    member_name: str
    member_id: int


class MemberLoans(BaseModel):
    member: MemberInfo
    books: List[BookInfo]


class CatalogStats(BaseModel):
    total_books: int
    available_books: int
    borrowed_books: int
    total_members: int
    members_with_loans: int
    unique_authors: int


class OperationResult(BaseModel):
    """Outcome of a mutating catalog operation."""
    status: ResultStatus
    message: str
    reason: RejectionReason | None = None
    book: BookInfo | None = None
    member: MemberInfo | None = None

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    @classmethod
    def success(cls, message: str, **payload) -> "OperationResult":
        return cls(status=ResultStatus.OK, message=message, **payload)

    @classmethod
    def invalid(cls, message: str) -> "OperationResult":
        return cls(status=ResultStatus.INVALID_ARGUMENT, message=message)

    @classmethod
    def not_found(cls, message: str) -> "OperationResult":
        return cls(status=ResultStatus.NOT_FOUND, message=message)

    @classmethod
    def rejected(cls, reason: RejectionReason, message: str, **payload) -> "OperationResult":
        return cls(status=ResultStatus.REJECTED, reason=reason, message=message, **payload)
