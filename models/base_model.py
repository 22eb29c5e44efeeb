#!/usr/bin/env python3
"""
Shared SQLAlchemy base and mixin for the catalog records.

- UUID primary key (String(36)) generated on construction
- created_at / updated_at timestamps
- save() that goes through the global DBStorage
- date formatting used by the derived display fields

Records reference each other by id only; there are no ORM relationships.
Related records are read explicitly with DBStorage.find/populate.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
import uuid

# Importing 'models' gives access to the global 'storage' instance (DBStorage)
# defined in models/__init__.py.
import models

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

# Every record URL lives under the catalog blueprint prefix
URL_ROOT = "/catalog"

# Declarative base for all models
Base = declarative_base()


def _uuid_str() -> str:
    """Return a canonical UUIDv4 string (36 chars, with hyphens)."""
    return str(uuid.uuid4())


def ordinal(day: int) -> str:
    """1 -> '1st', 12 -> '12th', 22 -> '22nd'."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_date(value: date | datetime | None) -> str:
    """
    Human-readable date, e.g. 'December 16th, 1775'.

    Returns an empty string for unset dates so templates can print it as-is.
    """
    if not value:
        return ""
    return f"{value.strftime('%B')} {ordinal(value.day)}, {value.year:04d}"


class BaseModel:
    """
    Base mixin for all persistent records.

    - id, created_at, updated_at
    - save() wired to DBStorage
    """

    id = Column(String(36), primary_key=True, default=_uuid_str, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __init__(self, *args, **kwargs):
        """
        Allow attribute initialization via kwargs without requiring a session here.
        The id is assigned immediately so `url` works before the first flush.
        """
        for key, value in kwargs.items():
            if key != "__class__":
                setattr(self, key, value)
        if getattr(self, "id", None) is None:
            self.id = _uuid_str()

    def save(self):
        """Touch updated_at and persist the instance using DBStorage."""
        self.updated_at = datetime.now(timezone.utc)
        models.storage.new(self)
        models.storage.save()
