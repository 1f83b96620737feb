"""Module: system."""

from fastapi import APIRouter, Request

from petclinic.api.views import render

router = APIRouter()


# Endpoint: landing page.
@router.get("/", summary="Welcome page")
def welcome(request: Request):
    return render(request, "welcome", {})


# Endpoint: lightweight health probe for service liveness.
@router.get("/health")
def health():
    return {"status": "ok"}


# Endpoint: always fails, to exercise the generic error view.
@router.get("/oups", summary="Trigger an unexpected error")
def trigger_exception():
    raise RuntimeError("Expected: controller used to showcase what happens when an exception is thrown")
