"""Module: visits."""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from petclinic.api.routes.deps import get_db, get_form_fields
from petclinic.api.routes.owners import load_owner
from petclinic.api.routes.pets import load_pet
from petclinic.api.schemas import OwnerOut, PetOut, dump
from petclinic.api.views import redirect, render
from petclinic.db.models.visit import Visit
from petclinic.db.repository import OwnerRepository
from petclinic.domain.forms import VisitForm
from petclinic.domain.validation import validate_visit

logger = logging.getLogger(__name__)

router = APIRouter()

VIEWS_VISIT_CREATE_OR_UPDATE_FORM = "pets/createOrUpdateVisitForm"


# Endpoint: blank visit form dated today, shown with the pet's previous visits.
@router.get("/owners/{owner_id}/pets/{pet_id}/visits/new", summary="New visit form")
def init_new_visit_form(owner_id: int, pet_id: int, request: Request, db: Session = Depends(get_db)):
    owner = load_owner(OwnerRepository(db), owner_id)
    pet = load_pet(owner, pet_id)
    model = {
        "owner": dump(OwnerOut, owner),
        "pet": dump(PetOut, pet),
        "visit": VisitForm.blank().as_model(),
    }
    return render(request, VIEWS_VISIT_CREATE_OR_UPDATE_FORM, model)


# Endpoint: book a visit; it is appended to the end of the pet's history.
@router.post("/owners/{owner_id}/pets/{pet_id}/visits/new", summary="Book a visit")
def process_new_visit_form(
    owner_id: int,
    pet_id: int,
    request: Request,
    fields: dict[str, str] = Depends(get_form_fields),
    db: Session = Depends(get_db),
):
    repo = OwnerRepository(db)
    owner = load_owner(repo, owner_id)
    pet = load_pet(owner, pet_id)

    form = VisitForm.model_validate(fields)
    result = validate_visit(form)
    if result.has_errors():
        logger.debug("Rejected visit for pet %s: %s", pet_id, result.errors)
        model = {"owner": dump(OwnerOut, owner), "pet": dump(PetOut, pet), "visit": form.as_model()}
        return render(request, VIEWS_VISIT_CREATE_OR_UPDATE_FORM, model, result)

    owner.add_visit(pet.id, Visit(visit_date=form.date_value(), description=form.description.strip()))
    repo.save(owner)
    logger.info("Booked visit for pet %s of owner %s", pet_id, owner_id)
    return redirect(f"/owners/{owner_id}", message="Your visit has been booked")
