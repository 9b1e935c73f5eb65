import pytest

from catalog import Catalog
from utils.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # Every test starts in plain mode; --output changes made by a test are undone afterwards
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")

@pytest.fixture
def catalog():
    # A fresh catalog per test; nothing is shared between tests
    return Catalog()

@pytest.fixture
def stocked(catalog):
    """Catalog with two books and two members, nothing borrowed."""
    catalog.add_book("Dune", "Herbert")
    catalog.add_book("Neuromancer", "William Gibson")
    catalog.add_member("Ada")
    catalog.add_member("Grace")
    return catalog

@pytest.fixture
def check_invariants():
    def _check(catalog: Catalog) -> None:
        for book in catalog.list_books():
            assert (book.available is False) == (book.borrower is not None)
        for book in catalog.list_books():
            for member in catalog.list_members():
                assert member.holds(book) == (book.borrower is member)
        for member in catalog.list_members():
            ids = [b.id for b in member.borrowed_books]
            assert len(ids) == len(set(ids))
    return _check
