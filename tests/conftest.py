from datetime import date

import pytest

from catalog import create_app
from models import storage
from models.author import Author
from models.book import Book


@pytest.fixture
def app(tmp_path):
    # Fresh SQLite file per test; worker threads share it through the engine pool
    db_file = tmp_path / "catalog.db"
    app = create_app("testing", {"DATABASE_URL": f"sqlite:///{db_file}"})
    yield app
    storage.close()
    storage.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_author(app):
    def _make(first_name="Jane", family_name="Austen", **kwargs):
        author = Author(first_name=first_name, family_name=family_name, **kwargs)
        author.save()
        return author

    return _make


@pytest.fixture
def make_book(app):
    def _make(author, title="Emma", summary="A novel about youthful hubris.", **kwargs):
        book = Book(title=title, author_id=author.id, summary=summary, **kwargs)
        book.save()
        return book

    return _make


@pytest.fixture
def austen(make_author):
    return make_author(date_of_birth=date(1775, 12, 16), date_of_death=date(1817, 7, 18))
