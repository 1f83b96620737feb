"""Module: main."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from petclinic.api.router import api_router
from petclinic.api.views import render
from petclinic.core.config import settings
from petclinic.core.errors import ResourceNotFoundError
from petclinic.core.logging import configure_logging
from petclinic.db.init_db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    init_db()
    if settings.seed_demo_data:
        from petclinic.scripts.seed_data import seed_if_empty

        seed_if_empty()
    logger.info("PetClinic started with database %s", settings.database_url.split("@")[-1])
    yield


app = FastAPI(title="PetClinic API", version="0.1.0", lifespan=lifespan)

app.include_router(api_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Lookup misses for path ids are request failures, not validation errors.
@app.exception_handler(ResourceNotFoundError)
def resource_not_found_handler(request: Request, exc: ResourceNotFoundError):
    logger.warning("%s %s: %s", request.method, request.url.path, exc)
    model = {"status": 404, "error": "Not Found", "message": str(exc)}
    return render(request, "error", model, status_code=404)


@app.exception_handler(Exception)
def unexpected_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    model = {"status": 500, "error": "Internal Server Error", "message": str(exc)}
    return render(request, "error", model, status_code=500)
