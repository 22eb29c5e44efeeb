import logging

from flask import Flask, redirect

from .config import get_config
from .errors import register_error_handlers
from models import storage  # DBStorage singleton (scoped_session)
from models.base_model import URL_ROOT


def create_app(config_name: str | None = None, overrides: dict | None = None) -> Flask:
    """
    Application factory: creates and configures the Flask app.

    `overrides` is applied on top of the selected config class (tests use it
    to point DATABASE_URL at a throwaway database).
    """
    app = Flask(__name__)

    # Load configuration (reads .env via get_config)
    app.config.from_object(get_config(config_name))
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Bind the shared storage to this app's database and create tables
    storage.reload(app.config["DATABASE_URL"], echo=app.config.get("SQL_ECHO", False))

    # Render every failure through the same error page
    register_error_handlers(app)

    from .authors import bp as authors_bp
    from .books import bp as books_bp

    app.register_blueprint(authors_bp, url_prefix=URL_ROOT)
    app.register_blueprint(books_bp, url_prefix=URL_ROOT)

    # Ensure the DB session is removed at the end of each request/app context
    @app.teardown_appcontext
    def remove_session(exception=None):
        # This calls scoped_session.remove(), preventing connection leaks
        storage.close()

    @app.route("/")
    def root():
        return redirect(f"{URL_ROOT}/")

    return app
