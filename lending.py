"""Borrow/return transitions between one Book and one Member.

A book is either AVAILABLE or BORROWED. Both entities are updated together
or not at all, so after every call ``book in member.borrowed_books`` holds
exactly when ``book.borrower is member``.

Refusals are expected outcomes of user input and come back as REJECTED
results rather than exceptions.
"""
import logging

from book import Book
from member import Member
from schemas import OperationResult, RejectionReason

logger = logging.getLogger(__name__)


def borrow_book(book: Book, member: Member) -> OperationResult:
    if not book.available:
        logger.info(f"Borrow rejected: book {book.id} already borrowed by member {book.borrower.id}")
        return OperationResult.rejected(
            RejectionReason.ALREADY_BORROWED,
            f"'{book.title}' is already borrowed.",
            book=book.describe(),
            member=member.describe(),
        )

    book.mark_borrowed(member)
    member.add_borrowed(book)
    logger.info(f"Member {member.id} borrowed book {book.id}")
    return OperationResult.success(
        f"{member.name} borrowed '{book.title}'.",
        book=book.describe(),
        member=member.describe(),
    )


def return_book(book: Book, member: Member) -> OperationResult:
    # Keyed on the member's record so a different member cannot return the book.
    if not member.remove_borrowed(book):
        logger.info(f"Return rejected: member {member.id} does not hold book {book.id}")
        return OperationResult.rejected(
            RejectionReason.NOT_BORROWED_BY_MEMBER,
            f"{member.name} did NOT check out '{book.title}'.",
            book=book.describe(),
            member=member.describe(),
        )

    book.mark_returned()
    logger.info(f"Member {member.id} returned book {book.id}")
    return OperationResult.success(
        f"{member.name} returned '{book.title}'.",
        book=book.describe(),
        member=member.describe(),
    )
