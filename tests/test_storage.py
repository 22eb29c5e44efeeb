import pytest
from sqlalchemy.exc import IntegrityError

from models import storage
from models.author import Author
from models.book import Book


def test_find_orders_and_filters(make_author):
    make_author("Charles", "Dickens")
    make_author("Jane", "Austen")
    make_author("Mary", "Shelley")

    names = [a.family_name for a in storage.find(Author, order_by=Author.family_name.asc())]
    assert names == ["Austen", "Dickens", "Shelley"]
    assert [a.first_name for a in storage.find(Author, family_name="Shelley")] == ["Mary"]


def test_find_with_projection_keeps_id(austen, make_book):
    book = make_book(austen, isbn="9780141439587")
    storage.close()

    (found,) = storage.find(Book, fields=("title", "summary"), author_id=austen.id)
    assert found.id == book.id
    assert found.title == "Emma"
    assert found.url == book.url


def test_replace_overwrites_fields(austen):
    updated = storage.replace(Author, austen.id, first_name="J", date_of_birth=None)
    assert updated.first_name == "J"
    assert updated.date_of_birth is None
    storage.close()
    assert storage.get(Author, austen.id).first_name == "J"


def test_replace_missing_returns_none(app):
    assert storage.replace(Author, "nope", first_name="X") is None


def test_delete_by_id(austen):
    assert storage.delete_by_id(Author, austen.id) is True
    assert storage.get(Author, austen.id) is None
    assert storage.delete_by_id(Author, austen.id) is False
    assert storage.delete_by_id(Author, "") is False


def test_foreign_key_restricts_author_removal(austen, make_book):
    make_book(austen)
    with pytest.raises(IntegrityError):
        storage.delete_by_id(Author, austen.id)
    # Rolled back, still there
    assert storage.count(Author) == 1


def test_populate_attaches_referenced_records(austen, make_author, make_book):
    shelley = make_author("Mary", "Shelley")
    make_book(austen, title="Emma")
    make_book(shelley, title="Frankenstein")

    books = storage.find(Book, order_by=Book.title.asc())
    storage.populate(books, "author_id", Author, "author")

    assert [(b.title, b.author.family_name) for b in books] == [
        ("Emma", "Austen"),
        ("Frankenstein", "Shelley"),
    ]


def test_parallel_returns_results_by_name(austen, make_book):
    make_book(austen)
    results = storage.parallel(
        author=lambda: storage.get(Author, austen.id),
        books=lambda: storage.find(Book, author_id=austen.id),
        count=lambda: storage.count(Book),
    )
    assert results["author"].id == austen.id
    assert [b.title for b in results["books"]] == ["Emma"]
    assert results["count"] == 1


def test_parallel_propagates_failures(app):
    def boom():
        raise RuntimeError("store unavailable")

    with pytest.raises(RuntimeError, match="store unavailable"):
        storage.parallel(ok=lambda: storage.count(Author), broken=boom)
