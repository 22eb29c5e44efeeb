from sqlalchemy import Column, String, Date, Index

from models.base_model import BaseModel, Base, URL_ROOT, format_date


class Author(BaseModel, Base):
    __tablename__ = "authors"

    first_name = Column(String(100), nullable=False)
    family_name = Column(String(100), nullable=False)
    date_of_birth = Column(Date, nullable=True)
    date_of_death = Column(Date, nullable=True)

    __table_args__ = (
        Index("ix_authors_family_name", "family_name"),
    )

    @property
    def full_name(self) -> str:
        # Avoid "undefined, " style output when a name part is missing
        if not self.first_name or not self.family_name:
            return ""
        return f"{self.family_name}, {self.first_name}"

    @property
    def url(self) -> str:
        return f"{URL_ROOT}/author/{self.id}"

    @property
    def date_of_birth_formatted(self) -> str:
        return format_date(self.date_of_birth)

    @property
    def date_of_death_formatted(self) -> str:
        return format_date(self.date_of_death)

    @property
    def lifespan(self) -> str:
        return f"{self.date_of_birth_formatted} - {self.date_of_death_formatted}"
