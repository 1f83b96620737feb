"""Module: router."""

from fastapi import APIRouter

# Operational routes (welcome/health/error showcase).
from petclinic.api.routes.system import router as system_router

# Clinic routes; owners first so /owners/new and /owners/find win over /owners/{owner_id}.
from petclinic.api.routes.owners import router as owners_router
from petclinic.api.routes.pets import router as pets_router
from petclinic.api.routes.visits import router as visits_router
from petclinic.api.routes.vets import router as vets_router


api_router = APIRouter()

api_router.include_router(system_router, tags=["system"])

api_router.include_router(owners_router, tags=["owners"])
api_router.include_router(pets_router, tags=["pets"])
api_router.include_router(visits_router, tags=["visits"])
api_router.include_router(vets_router, tags=["vets"])
