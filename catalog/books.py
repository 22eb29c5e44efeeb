from flask import Blueprint

bp = Blueprint("books", __name__)

# Placeholders until the book pages exist; each answers with plain text.


def not_implemented(what: str):
    return f"NOT IMPLEMENTED: {what}", 200, {"Content-Type": "text/plain; charset=utf-8"}


@bp.get("/")
def index():
    return not_implemented("Site Home Page")


@bp.get("/books")
def book_list():
    return not_implemented("Book List")


@bp.get("/book/<book_id>")
def book_detail(book_id: str):
    return not_implemented(f"Book Detail: {book_id}")


@bp.get("/book/create")
def book_create_get():
    return not_implemented("Book create GET")


@bp.post("/book/create")
def book_create_post():
    return not_implemented("Book create POST")


@bp.get("/book/<book_id>/delete")
def book_delete_get(book_id: str):
    return not_implemented("Book delete GET")


@bp.post("/book/<book_id>/delete")
def book_delete_post(book_id: str):
    return not_implemented("Book delete POST")


@bp.get("/book/<book_id>/update")
def book_update_get(book_id: str):
    return not_implemented("Book update GET")


@bp.post("/book/<book_id>/update")
def book_update_post(book_id: str):
    return not_implemented("Book update POST")
