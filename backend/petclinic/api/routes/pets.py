"""Module: pets."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from petclinic.api.routes.deps import get_db, get_form_fields
from petclinic.api.routes.owners import load_owner
from petclinic.api.schemas import OwnerOut, PetOut, PetTypeOut, dump, dump_many
from petclinic.api.views import redirect, render
from petclinic.core.errors import ResourceNotFoundError
from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet
from petclinic.db.models.pet_type import PetType
from petclinic.db.repository import OwnerRepository
from petclinic.domain.forms import PetForm
from petclinic.domain.validation import BindingResult, validate_pet

logger = logging.getLogger(__name__)

router = APIRouter()

VIEWS_PETS_CREATE_OR_UPDATE_FORM = "pets/createOrUpdatePetForm"


# -------------------------
# Helpers
# -------------------------
def load_pet(owner: Owner, pet_id: int) -> Pet:
    pet = owner.get_pet_by_id(pet_id)
    if pet is None:
        raise ResourceNotFoundError("Pet", pet_id)
    return pet


def _form_view(
    request: Request,
    owner: Owner,
    pet: dict,
    pet_types: list[PetType],
    result: BindingResult | None = None,
):
    model = {
        "owner": dump(OwnerOut, owner),
        "pet": pet,
        "types": dump_many(PetTypeOut, pet_types),
    }
    return render(request, VIEWS_PETS_CREATE_OR_UPDATE_FORM, model, result)


# -------------------------
# Endpoints
# -------------------------

@router.get("/owners/{owner_id}/pets/new", summary="New pet form")
def init_creation_form(owner_id: int, request: Request, db: Session = Depends(get_db)):
    repo = OwnerRepository(db)
    owner = load_owner(repo, owner_id)
    pet_types = repo.find_pet_types()
    return _form_view(request, owner, PetForm().display_model(pet_types), pet_types)


@router.post("/owners/{owner_id}/pets/new", summary="Add pet to owner")
def process_creation_form(
    owner_id: int,
    request: Request,
    fields: dict[str, str] = Depends(get_form_fields),
    db: Session = Depends(get_db),
):
    repo = OwnerRepository(db)
    owner = load_owner(repo, owner_id)
    pet_types = repo.find_pet_types()

    form = PetForm.model_validate(fields)
    result = validate_pet(form, owner, pet_types)
    if result.has_errors():
        logger.debug("Rejected new pet for owner %s: %s", owner_id, result.errors)
        return _form_view(request, owner, form.display_model(pet_types), pet_types, result)

    pet = Pet(
        name=form.name.strip(),
        birth_date=form.birth_date_value(),
        type=form.resolve_type(pet_types),
    )
    owner.add_pet(pet)
    repo.save(owner)
    logger.info("Added pet %s to owner %s", pet.id, owner_id)
    return redirect(f"/owners/{owner_id}", message="New Pet has been Added")


@router.get("/owners/{owner_id}/pets/{pet_id}/edit", summary="Edit pet form")
def init_update_form(owner_id: int, pet_id: int, request: Request, db: Session = Depends(get_db)):
    repo = OwnerRepository(db)
    owner = load_owner(repo, owner_id)
    pet = load_pet(owner, pet_id)
    return _form_view(request, owner, dump(PetOut, pet), repo.find_pet_types())


@router.post("/owners/{owner_id}/pets/{pet_id}/edit", summary="Update pet")
def process_update_form(
    owner_id: int,
    pet_id: int,
    request: Request,
    fields: dict[str, str] = Depends(get_form_fields),
    db: Session = Depends(get_db),
):
    repo = OwnerRepository(db)
    owner = load_owner(repo, owner_id)
    pet = load_pet(owner, pet_id)
    pet_types = repo.find_pet_types()

    # The stored type always wins; a submitted type is not re-bound on update.
    form = PetForm.model_validate(fields).merged_with(PetForm.stored_values(pet))
    form = form.model_copy(update={"id": str(pet.id), "type": pet.type.name})
    result = validate_pet(form, owner, pet_types, pet_id=pet.id)
    if result.has_errors():
        logger.debug("Rejected update of pet %s: %s", pet_id, result.errors)
        return _form_view(request, owner, form.display_model(pet_types), pet_types, result)

    pet.name = form.name.strip()
    pet.birth_date = form.birth_date_value()
    repo.save(owner)
    logger.info("Updated pet %s of owner %s", pet_id, owner_id)
    return redirect(f"/owners/{owner_id}", message="Pet details has been edited")
