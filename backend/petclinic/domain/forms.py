"""Module: forms.

Form models hold the raw strings a browser submits. Conversion to typed values
happens in the accessors so that bad input becomes a field error instead of a
request-level 422.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, Field

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet
from petclinic.db.models.pet_type import PetType

DATE_FORMAT = "%Y-%m-%d"
# strptime alone accepts unpadded fields such as "2015-2-1".
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_date(value: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` date; raises ValueError for anything else."""
    value = value.strip()
    if not DATE_PATTERN.fullmatch(value):
        raise ValueError(f"expected YYYY-MM-DD, got {value!r}")
    return datetime.strptime(value, DATE_FORMAT).date()


def parse_id(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value.strip())


def has_text(value: str | None) -> bool:
    return value is not None and bool(value.strip())


class _FormModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def merged_with(self, stored: dict[str, Any]):
        # Fields the client did not submit keep their stored value.
        values = {name: stored.get(name) for name in type(self).model_fields if name not in self.model_fields_set}
        return self.model_copy(update=values)

    def as_model(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class OwnerForm(_FormModel):
    id: str | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    address: str | None = None
    city: str | None = None
    telephone: str | None = None

    @classmethod
    def stored_values(cls, owner: Owner) -> dict[str, Any]:
        return {
            "first_name": owner.first_name,
            "last_name": owner.last_name,
            "address": owner.address,
            "city": owner.city,
            "telephone": owner.telephone,
        }

    def apply_to(self, owner: Owner) -> Owner:
        owner.first_name = self.first_name.strip()
        owner.last_name = self.last_name.strip()
        owner.address = self.address.strip()
        owner.city = self.city.strip()
        owner.telephone = self.telephone.strip()
        return owner


class OwnerSearchForm(_FormModel):
    last_name: str | None = Field(default=None, alias="lastName")


class PetForm(_FormModel):
    id: str | None = None
    name: str | None = None
    birth_date: str | None = Field(default=None, alias="birthDate")
    type: str | None = None

    @classmethod
    def stored_values(cls, pet: Pet) -> dict[str, Any]:
        return {
            "id": str(pet.id),
            "name": pet.name,
            "birth_date": pet.birth_date.isoformat() if pet.birth_date else None,
            "type": pet.type.name if pet.type else None,
        }

    def birth_date_value(self) -> date | None:
        if not has_text(self.birth_date):
            return None
        try:
            return parse_date(self.birth_date)
        except ValueError:
            return None

    def resolve_type(self, pet_types: Sequence[PetType]) -> PetType | None:
        # Pet types are submitted by name, matching the select box labels.
        if not has_text(self.type):
            return None
        wanted = self.type.strip()
        for pet_type in pet_types:
            if pet_type.name == wanted:
                return pet_type
        return None

    def display_model(self, pet_types: Sequence[PetType]) -> dict[str, Any]:
        """Form values shaped like a stored pet, with ``type`` as an ``{id, name}`` object."""
        model = self.as_model()
        try:
            model["id"] = parse_id(self.id)
        except ValueError:
            model["id"] = None
        if has_text(self.type):
            pet_type = self.resolve_type(pet_types)
            model["type"] = {
                "id": pet_type.id if pet_type else None,
                "name": pet_type.name if pet_type else self.type.strip(),
            }
        else:
            model["type"] = None
        return model


class VisitForm(_FormModel):
    visit_date: str | None = Field(default=None, alias="date")
    description: str | None = None

    @classmethod
    def blank(cls, today: date | None = None) -> VisitForm:
        return cls(visit_date=(today or date.today()).isoformat())

    def date_value(self, today: date | None = None) -> date | None:
        """Submitted date, today when none was given, None when unparseable."""
        if not has_text(self.visit_date):
            return today or date.today()
        try:
            return parse_date(self.visit_date)
        except ValueError:
            return None
