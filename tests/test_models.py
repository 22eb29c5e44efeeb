from datetime import date, datetime

import pytest

from models import storage
from models.author import Author
from models.base_model import format_date, ordinal
from models.book import Book
from models.book_instance import BookInstance, BookInstanceStatus


@pytest.mark.parametrize(
    "day, expected",
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"),
     (13, "13th"), (21, "21st"), (22, "22nd"), (23, "23rd"), (31, "31st")],
)
def test_ordinal(day, expected):
    assert ordinal(day) == expected


def test_format_date():
    assert format_date(date(1775, 12, 16)) == "December 16th, 1775"
    assert format_date(datetime(2026, 10, 19, 14, 30)) == "October 19th, 2026"
    assert format_date(None) == ""


def test_author_derived_fields():
    author = Author(first_name="Jane", family_name="Austen",
                    date_of_birth=date(1775, 12, 16), date_of_death=date(1817, 7, 18))
    assert author.id
    assert author.url == f"/catalog/author/{author.id}"
    assert author.full_name == "Austen, Jane"
    assert author.lifespan == "December 16th, 1775 - July 18th, 1817"


def test_author_without_dates_or_name():
    author = Author(first_name="Jane")
    assert author.full_name == ""
    assert author.lifespan == " - "


def test_book_url():
    book = Book(title="Emma", author_id="a")
    assert book.url == f"/catalog/book/{book.id}"


def test_book_instance_defaults(app, austen):
    book = Book(title="Emma", author_id=austen.id)
    book.save()
    instance = BookInstance(book_id=book.id, imprint="London: John Murray, 1815")
    instance.save()
    storage.close()

    stored =storage.get(BookInstance, instance.id)
    assert stored.status == BookInstanceStatus.MAINTENANCE
    assert stored.status.value == "Maintenance"
    assert stored.due_back is not None
    assert stored.url == f"/catalog/bookinstance/{instance.id}"


def test_book_instance_status_is_closed():
    instance = BookInstance(book_id="b", imprint="x", status="Loaned")
    assert instance.status is BookInstanceStatus.LOANED
    with pytest.raises(ValueError):
        instance.status = "Lost"


def test_book_instance_due_back_formatted():
    instance = BookInstance(book_id="b", imprint="x", due_back=datetime(2026, 3, 2))
    assert instance.due_back_formatted == "March 2nd, 2026"
