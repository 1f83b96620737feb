"""Module: pet_type."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from petclinic.db.base import Base


# Reference data ("dog", "cat", ...) maintained by seeding and migrations only.
class PetType(Base):
    __tablename__ = "types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"PetType(id={self.id!r}, name={self.name!r})"
