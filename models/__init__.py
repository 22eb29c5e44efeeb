"""
Catalog records and the global storage instance.

`storage` is created at import time; the Flask app factory binds it to the
configured database with `storage.reload(url)` before the first request.
"""
from models.db_storage import DBStorage

storage = DBStorage()
