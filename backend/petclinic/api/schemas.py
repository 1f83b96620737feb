"""Module: schemas.

Read models for entities exposed in view models and JSON resources. Field
names follow the form field names (camelCase) when serialized.
"""

from datetime import date

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ReadModel(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class PetTypeOut(_ReadModel):
    id: int
    name: str


class VisitOut(_ReadModel):
    id: int
    visit_date: date = Field(serialization_alias="date")
    description: str


class PetOut(_ReadModel):
    id: int
    name: str
    birth_date: date
    type: PetTypeOut
    visits: list[VisitOut] = []


class OwnerOut(_ReadModel):
    id: int
    first_name: str
    last_name: str
    address: str
    city: str
    telephone: str
    pets: list[PetOut] = []


class SpecialtyOut(_ReadModel):
    id: int
    name: str


class VetOut(_ReadModel):
    id: int
    first_name: str
    last_name: str
    specialties: list[SpecialtyOut] = []
    nr_of_specialties: int = 0


def dump(schema: type[BaseModel], obj) -> dict:
    return schema.model_validate(obj).model_dump(mode="json", by_alias=True)


def dump_many(schema: type[BaseModel], objs) -> list[dict]:
    return [dump(schema, obj) for obj in objs]
