"""Module: validation.

Explicit, per-entity validation. Every check returns field errors with a
machine-readable code; nothing here touches the database.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet_type import PetType
from petclinic.domain.forms import OwnerForm, PetForm, VisitForm, has_text, parse_date, parse_id

REQUIRED = "required"
DUPLICATE = "duplicate"
NOT_FOUND = "notFound"
TYPE_MISMATCH = "typeMismatch"
FUTURE_BIRTH_DATE = "typeMismatch.birthDate"
PATTERN = "pattern"

# ASCII digits only; str patterns would otherwise accept any Unicode decimal digit.
TELEPHONE_PATTERN = re.compile(r"[0-9]{10}")


@dataclass(frozen=True)
class FieldError:
    field: str
    code: str
    message: str


@dataclass
class BindingResult:
    """Errors collected for one bound form object (``owner``, ``pet``, ...)."""

    object_name: str
    errors: list[FieldError] = field(default_factory=list)

    def reject_value(self, field_name: str, code: str, message: str) -> None:
        self.errors.append(FieldError(field=field_name, code=code, message=message))

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_field_errors(self, field_name: str) -> bool:
        return any(err.field == field_name for err in self.errors)

    def field_codes(self, field_name: str) -> list[str]:
        return [err.code for err in self.errors if err.field == field_name]


def _require(result: BindingResult, field_name: str, value: str | None) -> bool:
    if not has_text(value):
        result.reject_value(field_name, REQUIRED, "must not be blank")
        return False
    return True


def validate_owner(form: OwnerForm) -> BindingResult:
    result = BindingResult("owner")

    if form.id is not None:
        try:
            parse_id(form.id)
        except ValueError:
            result.reject_value("id", TYPE_MISMATCH, "invalid identifier")

    _require(result, "firstName", form.first_name)
    _require(result, "lastName", form.last_name)
    _require(result, "address", form.address)
    _require(result, "city", form.city)
    if _require(result, "telephone", form.telephone):
        if not TELEPHONE_PATTERN.fullmatch(form.telephone.strip()):
            result.reject_value("telephone", PATTERN, "Telephone must be a 10-digit number")
    return result


def validate_pet(
    form: PetForm,
    owner: Owner,
    pet_types: Sequence[PetType],
    pet_id: int | None = None,
    today: date | None = None,
) -> BindingResult:
    """
    Validate a pet form against its owner.

    ``pet_id`` is None for a new pet. For an existing pet the type is never
    re-validated and the name may repeat the pet's own stored name.
    """
    result = BindingResult("pet")
    today = today or date.today()
    is_new = pet_id is None

    if _require(result, "name", form.name):
        if owner.get_pet(form.name.strip(), exclude_id=pet_id) is not None:
            result.reject_value("name", DUPLICATE, "already exists")

    if is_new:
        if not has_text(form.type):
            result.reject_value("type", REQUIRED, "is required")
        elif form.resolve_type(pet_types) is None:
            result.reject_value("type", TYPE_MISMATCH, f"unknown pet type: {form.type.strip()}")

    if not has_text(form.birth_date):
        result.reject_value("birthDate", REQUIRED, "is required")
    else:
        try:
            birth_date = parse_date(form.birth_date)
        except ValueError:
            result.reject_value("birthDate", TYPE_MISMATCH, "invalid date")
        else:
            if birth_date > today:
                result.reject_value("birthDate", FUTURE_BIRTH_DATE, "must not be in the future")
    return result


def validate_visit(form: VisitForm) -> BindingResult:
    result = BindingResult("visit")
    if has_text(form.visit_date):
        try:
            parse_date(form.visit_date)
        except ValueError:
            result.reject_value("date", TYPE_MISMATCH, "invalid date")
    _require(result, "description", form.description)
    return result
