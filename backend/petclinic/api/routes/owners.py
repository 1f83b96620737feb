"""Module: owners."""

import logging

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from petclinic.api.routes.deps import get_db, get_form_fields
from petclinic.api.schemas import OwnerOut, dump, dump_many
from petclinic.api.views import redirect, render
from petclinic.core.config import settings
from petclinic.core.errors import ResourceNotFoundError
from petclinic.db.models.owner import Owner
from petclinic.db.repository import OwnerRepository
from petclinic.domain.forms import OwnerForm, OwnerSearchForm, parse_id
from petclinic.domain.validation import NOT_FOUND, BindingResult, validate_owner

logger = logging.getLogger(__name__)

router = APIRouter()

VIEWS_OWNER_CREATE_OR_UPDATE_FORM = "owners/createOrUpdateOwnerForm"
VIEWS_FIND_OWNERS = "owners/findOwners"
VIEWS_OWNERS_LIST = "owners/ownersList"
VIEWS_OWNER_DETAILS = "owners/ownerDetails"


def load_owner(repo: OwnerRepository, owner_id: int) -> Owner:
    # A missing owner is a request failure, never an empty form.
    owner = repo.find_by_id(owner_id)
    if owner is None:
        raise ResourceNotFoundError("Owner", owner_id)
    return owner


# Endpoint: blank owner form.
@router.get("/owners/new", summary="New owner form")
def init_creation_form(request: Request):
    return render(request, VIEWS_OWNER_CREATE_OR_UPDATE_FORM, {"owner": OwnerForm().as_model()})


# Endpoint: create an owner from the submitted form.
@router.post("/owners/new", summary="Create owner")
def process_creation_form(
    request: Request,
    fields: dict[str, str] = Depends(get_form_fields),
    db: Session = Depends(get_db),
):
    form = OwnerForm.model_validate(fields)
    result = validate_owner(form)
    if result.has_errors():
        logger.debug("Rejected owner creation: %s", result.errors)
        return render(request, VIEWS_OWNER_CREATE_OR_UPDATE_FORM, {"owner": form.as_model()}, result)

    owner = OwnerRepository(db).save(form.apply_to(Owner()))
    logger.info("Created owner %s", owner.id)
    return redirect(f"/owners/{owner.id}", message="New Owner Created")


# Endpoint: blank search criterion.
@router.get("/owners/find", summary="Find owners form")
def init_find_form(request: Request):
    return render(request, VIEWS_FIND_OWNERS, {"owner": OwnerSearchForm().as_model()})


# Endpoint: search owners by last-name prefix.
@router.get("/owners", summary="Search owners by last name")
def process_find_form(
    request: Request,
    page: int = Query(default=1),
    last_name: str | None = Query(default=None, alias="lastName"),
    db: Session = Depends(get_db),
):
    # No criterion means "match everything".
    prefix = (last_name or "").strip()
    results = OwnerRepository(db).find_by_last_name_starting_with(prefix, page, settings.page_size)

    if results.total_items == 0:
        result = BindingResult("owner")
        result.reject_value("lastName", NOT_FOUND, "not found")
        return render(request, VIEWS_FIND_OWNERS, {"owner": {"lastName": prefix}}, result)

    if results.total_items == 1 and len(results.items) == 1:
        return redirect(f"/owners/{results.items[0].id}")

    return render(
        request,
        VIEWS_OWNERS_LIST,
        {
            "listOwners": dump_many(OwnerOut, results.items),
            "currentPage": results.page_number,
            "totalPages": results.total_pages,
            "totalItems": results.total_items,
            "isEmpty": results.is_empty,
        },
    )


# Endpoint: edit form pre-filled from the stored owner.
@router.get("/owners/{owner_id}/edit", summary="Edit owner form")
def init_update_owner_form(owner_id: int, request: Request, db: Session = Depends(get_db)):
    owner = load_owner(OwnerRepository(db), owner_id)
    return render(request, VIEWS_OWNER_CREATE_OR_UPDATE_FORM, {"owner": dump(OwnerOut, owner)})


# Endpoint: update an owner; the path id is authoritative.
@router.post("/owners/{owner_id}/edit", summary="Update owner")
def process_update_owner_form(
    owner_id: int,
    request: Request,
    fields: dict[str, str] = Depends(get_form_fields),
    db: Session = Depends(get_db),
):
    repo = OwnerRepository(db)
    owner = load_owner(repo, owner_id)

    form = OwnerForm.model_validate(fields).merged_with(OwnerForm.stored_values(owner))
    result = validate_owner(form)
    if result.has_errors():
        logger.debug("Rejected update of owner %s: %s", owner_id, result.errors)
        model = {"owner": {**form.as_model(), "id": owner_id}}
        return render(request, VIEWS_OWNER_CREATE_OR_UPDATE_FORM, model, result)

    submitted_id = parse_id(form.id)
    if submitted_id is not None and submitted_id != owner_id:
        logger.warning("Owner id mismatch on update: path=%s form=%s", owner_id, submitted_id)
        return redirect(f"/owners/{owner_id}/edit", error="Owner ID mismatch. Please try again.")

    repo.save(form.apply_to(owner))
    logger.info("Updated owner %s", owner_id)
    return redirect(f"/owners/{owner_id}", message="Owner Values Updated")


# Endpoint: owner detail with pets and visit history.
@router.get("/owners/{owner_id}", summary="Owner details")
def show_owner(owner_id: int, request: Request, db: Session = Depends(get_db)):
    owner = load_owner(OwnerRepository(db), owner_id)
    return render(request, VIEWS_OWNER_DETAILS, {"owner": dump(OwnerOut, owner)})
