from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Column, String, ForeignKey, DateTime
from sqlalchemy.orm import validates
from sqlalchemy.types import Enum as SAEnum

from models.base_model import BaseModel, Base, URL_ROOT, format_date


class BookInstanceStatus(str, Enum):
    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


def _now():
    return datetime.now(timezone.utc)


class BookInstance(BaseModel, Base):
    __tablename__ = "book_instances"

    book_id = Column(String(36), ForeignKey("books.id", ondelete="RESTRICT"), nullable=False, index=True)
    imprint = Column(String(255), nullable=False)
    # Stored by value ("Available", ...) rather than by member name
    status = Column(
        SAEnum(
            BookInstanceStatus,
            name="book_instance_status",
            native_enum=False,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=BookInstanceStatus.MAINTENANCE,
    )
    due_back = Column(DateTime(timezone=True), nullable=False, default=_now)

    def __init__(self, *args, **kwargs):
        kwargs.setdefault("status", BookInstanceStatus.MAINTENANCE)
        kwargs.setdefault("due_back", _now())
        super().__init__(*args, **kwargs)

    @validates("status")
    def _validate_status(self, key, value):
        # Closed set: BookInstanceStatus raises ValueError for anything else
        return BookInstanceStatus(value)

    @property
    def url(self) -> str:
        return f"{URL_ROOT}/bookinstance/{self.id}"

    @property
    def due_back_formatted(self) -> str:
        return format_date(self.due_back)
