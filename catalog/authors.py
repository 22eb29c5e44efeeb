from __future__ import annotations

import logging

from flask import Blueprint, request, render_template, redirect

from models import storage
from models.author import Author
from models.book import Book
from models.base_model import URL_ROOT
from models.schemas.author import AuthorFormSchema
from .errors import ErrorResult, renders_errors

bp = Blueprint("authors", __name__)
logger = logging.getLogger(__name__)

form_schema = AuthorFormSchema()

AUTHOR_LIST_URL = f"{URL_ROOT}/authors"


def fetch_author_and_books(author_id: str, book_fields=None) -> dict:
    """Author by id and the books referencing it, fetched concurrently."""
    return storage.parallel(
        author=lambda: storage.get(Author, author_id),
        author_books=lambda: storage.find(Book, fields=book_fields, author_id=author_id),
    )


def author_form_values(author: Author) -> dict:
    """Stored author as the string values an HTML form expects."""
    return {
        "first_name": author.first_name or "",
        "family_name": author.family_name or "",
        "date_of_birth": author.date_of_birth.isoformat() if author.date_of_birth else "",
        "date_of_death": author.date_of_death.isoformat() if author.date_of_death else "",
    }


@bp.get("/authors")
def author_list():
    """Every author, by family name."""
    authors = storage.find(Author, order_by=Author.family_name.asc())
    return render_template("author_list.html", title="Author List", author_list=authors)


@bp.get("/author/<author_id>")
@renders_errors
def author_detail(author_id: str):
    """
    Author detail page with the author's books (title and summary only).
    Missing author is a 404.
    """
    results = fetch_author_and_books(author_id, book_fields=("title", "summary"))
    if results["author"] is None:
        return ErrorResult.not_found("Author not found")
    return render_template(
        "author_detail.html",
        title="Author Detail",
        author=results["author"],
        author_books=results["author_books"],
    )


@bp.get("/author/create")
def author_create_get():
    return render_template("author_form.html", title="Create Author", form={}, errors=[])


@bp.post("/author/create")
def author_create_post():
    """
    Validate and sanitize the submitted author.

    Invalid input re-renders the form with what the user typed and every
    error; valid input is saved and we redirect to the new author.
    """
    submitted = request.form.to_dict()
    data, errors = form_schema.validate_form(submitted)
    if errors:
        return render_template("author_form.html", title="Create Author", form=submitted, errors=errors)

    author = Author(**data)
    author.save()
    logger.info("Created author %s (%s)", author.id, author.full_name)
    return redirect(author.url)


@bp.get("/author/<author_id>/delete")
def author_delete_get(author_id: str):
    results = fetch_author_and_books(author_id)
    # Unlike detail/update, a missing author just goes back to the list
    if results["author"] is None:
        return redirect(AUTHOR_LIST_URL)
    return render_template(
        "author_delete.html",
        title="Delete Author",
        author=results["author"],
        author_books=results["author_books"],
    )


@bp.post("/author/<author_id>/delete")
def author_delete_post(author_id: str):
    """
    Delete the author named by the form's `authorid`, unless the author
    still has books; then the confirmation page is shown again instead.
    """
    results = fetch_author_and_books(author_id)
    if results["author_books"]:
        return render_template(
            "author_delete.html",
            title="Delete Author",
            author=results["author"],
            author_books=results["author_books"],
        )

    target_id = request.form.get("authorid", "")
    if storage.delete_by_id(Author, target_id):
        logger.info("Deleted author %s", target_id)
    return redirect(AUTHOR_LIST_URL)


@bp.get("/author/<author_id>/update")
@renders_errors
def author_update_get(author_id: str):
    results = fetch_author_and_books(author_id, book_fields=("title", "summary"))
    if results["author"] is None:
        return ErrorResult.not_found("Author not found")
    return render_template(
        "author_form.html",
        title="Update Author",
        form=author_form_values(results["author"]),
        errors=[],
    )


@bp.post("/author/<author_id>/update")
@renders_errors
def author_update_post(author_id: str):
    """
    Same validation as create. On success every field of the stored author
    is replaced (fields left out of the form are cleared).
    """
    submitted = request.form.to_dict()
    data, errors = form_schema.validate_form(submitted)
    if errors:
        return render_template("author_form.html", title="Update Author", form=submitted, errors=errors)

    author = storage.replace(
        Author,
        author_id,
        first_name=data["first_name"],
        family_name=data["family_name"],
        date_of_birth=data["date_of_birth"],
        date_of_death=data["date_of_death"],
    )
    if author is None:
        return ErrorResult.not_found("Author not found")
    logger.info("Updated author %s", author.id)
    return redirect(author.url)
