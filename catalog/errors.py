from functools import wraps
import logging

from flask import render_template, current_app
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class ErrorResult:
    """
    A failed request, returned by a view instead of a response.

    Views decorated with `renders_errors` may return one; it is turned into
    the error page by `render_error`.
    """

    def __init__(self, status: int, message: str, exc: BaseException | None = None):
        self.status = status
        self.message = message
        self.exc = exc

    @classmethod
    def not_found(cls, message: str = "Not found"):
        return cls(404, message)

    @classmethod
    def from_exception(cls, err: BaseException):
        if isinstance(err, HTTPException):
            return cls(err.code or 500, err.description or err.name, err)
        return cls(500, "An unexpected error occurred", err)

    def __repr__(self):
        return f"ErrorResult({self.status}, {self.message!r})"


def render_error(result: ErrorResult):
    """The single place an error becomes a response."""
    if result.status >= 500:
        logger.error("%s: %s", result.status, result.message, exc_info=result.exc)
    elif current_app and current_app.debug:
        logger.info("%s: %s", result.status, result.message)

    details = None
    if result.exc is not None and result.status >= 500 and current_app and current_app.debug:
        # In dev, include exception details to speed up debugging
        details = {"type": result.exc.__class__.__name__, "message": str(result.exc)}
    return render_template(
        "error.html",
        title="Error",
        message=result.message,
        status=result.status,
        details=details,
    ), result.status


def renders_errors(view):
    """Route an ErrorResult returned by `view` to `render_error`."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        rv = view(*args, **kwargs)
        if isinstance(rv, ErrorResult):
            return render_error(rv)
        return rv

    return wrapper


def register_error_handlers(app):
    # Werkzeug HTTPExceptions (unknown route, wrong method) keep their status codes
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return render_error(ErrorResult.from_exception(err))

    # 500 Internal Error (catch-all, including store errors)
    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        return render_error(ErrorResult.from_exception(err))
