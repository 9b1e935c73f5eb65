import random

from book import Book
from member import Member
from schemas import RejectionReason, ResultStatus
import lending


def test_dune_scenario(catalog, check_invariants):
    assert catalog.add_book("Dune", "Herbert").book.id == 1
    assert catalog.add_member("Ada").member.id == 1
    catalog.add_member("Grace")
    book = catalog.find_book(1)
    ada = catalog.find_member(1)

    result = catalog.borrow_book(1, 1)
    assert result.ok
    assert result.message == "Ada borrowed 'Dune'."
    assert book.available is False
    assert book.borrower is ada
    assert [m.id for m in book.history] == [1]
    check_invariants(catalog)

    result = catalog.borrow_book(1, 2)
    assert result.status is ResultStatus.REJECTED
    assert result.reason is RejectionReason.ALREADY_BORROWED
    assert book.borrower is ada
    assert [m.id for m in book.history] == [1]
    check_invariants(catalog)

    result = catalog.return_book(1, 2)
    assert result.status is ResultStatus.REJECTED
    assert result.reason is RejectionReason.NOT_BORROWED_BY_MEMBER
    assert result.message == "Grace did NOT check out 'Dune'."
    assert book.available is False
    assert book.borrower is ada
    check_invariants(catalog)

    result = catalog.return_book(1, 1)
    assert result.ok
    assert book.available is True
    assert book.borrower is None
    assert [m.id for m in book.history] == [1]
    assert ada.borrowed_books == ()
    check_invariants(catalog)


def test_borrow_unknown_ids_reports_not_found(stocked):
    result = stocked.borrow_book(999, 1)
    assert result.status is ResultStatus.NOT_FOUND
    assert "Book" in result.message

    result = stocked.borrow_book(1, 999)
    assert result.status is ResultStatus.NOT_FOUND
    assert "Member" in result.message
    assert stocked.find_book(1).available is True


def test_return_unknown_ids_reports_not_found(stocked):
    assert stocked.return_book(999, 1).status is ResultStatus.NOT_FOUND
    assert stocked.return_book(1, 999).status is ResultStatus.NOT_FOUND


def test_return_available_book_is_rejected(stocked, check_invariants):
    result = stocked.return_book(1, 1)
    assert result.status is ResultStatus.REJECTED
    assert result.reason is RejectionReason.NOT_BORROWED_BY_MEMBER
    assert stocked.find_book(1).available is True
    check_invariants(stocked)


def test_same_member_cannot_borrow_twice(stocked):
    assert stocked.borrow_book(1, 1).ok
    result = stocked.borrow_book(1, 1)
    assert result.reason is RejectionReason.ALREADY_BORROWED
    assert [b.id for b in stocked.find_member(1).borrowed_books] == [1]
    assert len(stocked.find_book(1).history) == 1


def test_result_carries_projections(stocked):
    result = stocked.borrow_book(2, 1)
    assert result.book.status == "Not Available, Borrowed by: Ada"
    assert result.book.borrower_id == 1
    assert result.member.borrowed_book_ids == [2]


def test_protocol_on_entities():
    book = Book(1, "Emma", "Austen")
    member = Member(1, "Ada")

    assert lending.borrow_book(book, member).ok
    assert member.holds(book)
    assert lending.return_book(book, member).ok
    assert not member.holds(book)
    assert book.available is True
    assert len(book.history) == 1


def test_mark_borrowed_does_not_check_availability():
    book = Book(1, "Emma", "Austen")
    ada, grace = Member(1, "Ada"), Member(2, "Grace")
    book.mark_borrowed(ada)
    book.mark_borrowed(grace)
    assert book.borrower is grace
    assert [m.name for m in book.history] == ["Ada", "Grace"]


def test_history_counts_only_successful_borrows(stocked, check_invariants):
    rng = random.Random(1234)
    successes = {1: 0, 2: 0}
    for _ in range(300):
        book_id = rng.choice([1, 2])
        member_id = rng.choice([1, 2])
        before = len(stocked.find_book(book_id).history)
        if rng.random() < 0.5:
            result = stocked.borrow_book(book_id, member_id)
            if result.ok:
                successes[book_id] += 1
        else:
            result = stocked.return_book(book_id, member_id)
        assert len(stocked.find_book(book_id).history) >= before
        check_invariants(stocked)

    for book_id, count in successes.items():
        assert len(stocked.find_book(book_id).history) == count


def test_rejections_never_change_state(stocked):
    stocked.borrow_book(1, 1)
    book = stocked.find_book(1)
    snapshot = (book.available, book.borrower, book.history, stocked.find_member(2).borrowed_books)

    stocked.borrow_book(1, 2)
    stocked.return_book(1, 2)
    stocked.return_book(2, 1)

    assert (book.available, book.borrower, book.history, stocked.find_member(2).borrowed_books) == snapshot
