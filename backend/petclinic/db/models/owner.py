"""Module: owner."""

from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.db.base import Base
from petclinic.db.models.pet import Pet
from petclinic.db.models.visit import Visit


# Root of the owner aggregate: pets and their visits are persisted by saving the owner.
class Owner(Base):
    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(80), nullable=False)
    telephone: Mapped[str] = mapped_column(String(20), nullable=False)

    pets: Mapped[list[Pet]] = relationship(
        cascade="all, delete-orphan",
        order_by=Pet.id,
        lazy="selectin",
    )

    def add_pet(self, pet: Pet) -> None:
        self.pets.append(pet)

    def get_pet(self, name: str, exclude_id: int | None = None) -> Pet | None:
        """
        Return the pet with exactly this name (case-sensitive).

        ``exclude_id`` skips one pet, so an edited pet never collides with
        its own stored name.
        """
        for pet in self.pets:
            if pet.name == name and (exclude_id is None or pet.id != exclude_id):
                return pet
        return None

    def get_pet_by_id(self, pet_id: int) -> Pet | None:
        for pet in self.pets:
            if pet.id == pet_id:
                return pet
        return None

    def add_visit(self, pet_id: int, visit: Visit) -> None:
        pet = self.get_pet_by_id(pet_id)
        if pet is None:
            raise ValueError(f"Invalid Pet identifier: {pet_id}")
        pet.add_visit(visit)

    def __repr__(self) -> str:
        return f"Owner(id={self.id!r}, first_name={self.first_name!r}, last_name={self.last_name!r})"
