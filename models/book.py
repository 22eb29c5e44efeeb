from sqlalchemy import Column, String, Text, ForeignKey, Index

from models.base_model import BaseModel, Base, URL_ROOT


class Book(BaseModel, Base):
    __tablename__ = "books"

    title = Column(String(255), nullable=False)
    # Author: RESTRICT deletion while books reference it (also checked by the delete handler)
    author_id = Column(String(36), ForeignKey("authors.id", ondelete="RESTRICT"), nullable=False, index=True)
    summary = Column(Text, nullable=True)
    isbn = Column(String(13), nullable=True)

    __table_args__ = (
        Index("ix_books_title", "title"),
    )

    @property
    def url(self) -> str:
        return f"{URL_ROOT}/book/{self.id}"
