"""Module: pet."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.db.base import Base
from petclinic.db.models.pet_type import PetType
from petclinic.db.models.visit import Visit


# Pet profile; its visit history is kept in insertion order.
class Pet(Base):
    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    owner_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type_id: Mapped[int] = mapped_column(Integer, ForeignKey("types.id"), nullable=False)

    name: Mapped[str] = mapped_column(String(30), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)

    type: Mapped[PetType] = relationship(lazy="joined")
    visits: Mapped[list[Visit]] = relationship(
        cascade="all, delete-orphan",
        order_by=Visit.id,
        lazy="selectin",
    )

    def add_visit(self, visit: Visit) -> None:
        self.visits.append(visit)

    def __repr__(self) -> str:
        return f"Pet(id={self.id!r}, name={self.name!r})"
