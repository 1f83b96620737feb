"""Module: vets."""

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from petclinic.api.routes.deps import get_db
from petclinic.api.schemas import VetOut, dump_many
from petclinic.api.views import render
from petclinic.core.config import settings
from petclinic.db.repository import VetRepository

router = APIRouter()

VIEWS_VET_LIST = "vets/vetList"


# Endpoint: paginated vet list view.
@router.get("/vets.html", summary="Vet list page")
def show_vet_list(request: Request, page: int = Query(default=1), db: Session = Depends(get_db)):
    results = VetRepository(db).find_page(page, settings.page_size)
    return render(
        request,
        VIEWS_VET_LIST,
        {
            "listVets": dump_many(VetOut, results.items),
            "currentPage": results.page_number,
            "totalPages": results.total_pages,
            "totalItems": results.total_items,
        },
    )


# Endpoint: every vet with specialties, as a plain JSON resource.
@router.get("/vets", summary="List vets")
def show_resources_vet_list(db: Session = Depends(get_db)):
    return {"vetList": dump_many(VetOut, VetRepository(db).find_all())}
