"""Module: vet."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.db.base import Base
from petclinic.db.models.specialty import Specialty

# Link table between vets and the specialties they practise.
vet_specialties = Table(
    "vet_specialties",
    Base.metadata,
    Column("vet_id", Integer, ForeignKey("vets.id", ondelete="CASCADE"), primary_key=True),
    Column("specialty_id", Integer, ForeignKey("specialties.id", ondelete="CASCADE"), primary_key=True),
)


class Vet(Base):
    __tablename__ = "vets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)

    specialties: Mapped[list[Specialty]] = relationship(
        secondary=vet_specialties,
        order_by=Specialty.name,
        lazy="selectin",
    )

    @property
    def nr_of_specialties(self) -> int:
        return len(self.specialties)

    def add_specialty(self, specialty: Specialty) -> None:
        self.specialties.append(specialty)
