"""Module: views."""

from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel

from petclinic.api.flash import clear_flash, push_flash, read_flash
from petclinic.domain.validation import BindingResult


class FieldErrorOut(BaseModel):
    objectName: str
    field: str
    code: str
    message: str


class ViewResult(BaseModel):
    view: str
    model: dict[str, Any]
    errors: list[FieldErrorOut] = []


def render(
    request: Request,
    view: str,
    model: dict[str, Any],
    result: BindingResult | None = None,
    status_code: int = 200,
) -> JSONResponse:
    # Pending flash attributes join the model of the next rendered view only.
    flash = read_flash(request)
    errors = []
    if result is not None:
        errors = [
            FieldErrorOut(objectName=result.object_name, field=err.field, code=err.code, message=err.message)
            for err in result.errors
        ]
    body = ViewResult(view=view, model={**model, **flash}, errors=errors)
    response = JSONResponse(status_code=status_code, content=jsonable_encoder(body))
    clear_flash(request, response)
    return response


def redirect(url: str, message: str | None = None, error: str | None = None) -> RedirectResponse:
    response = RedirectResponse(url=url, status_code=302)
    push_flash(response, message=message, error=error)
    return response
