"""Module: deps."""

from typing import Generator

from fastapi import Request
from sqlalchemy.orm import Session

from petclinic.db.session import SessionLocal


# Dependency provider: one DB session per request lifecycle.
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# Dependency provider: submitted form fields as raw strings.
# Empty values are kept so that "submitted but blank" differs from "not submitted".
async def get_form_fields(request: Request) -> dict[str, str]:
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}
