"""Test configuration and fixtures.

Every test gets a fresh in-memory SQLite database shared by the test and the
application through a StaticPool, with ``get_db`` overridden to hand out the
same session.
"""

from collections.abc import Generator
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from petclinic.api.routes.deps import get_db
from petclinic.db.base import Base
from petclinic.db.models import Owner, Pet, PetType, Visit
from petclinic.main import app

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def pet_types(db_session: Session) -> dict[str, PetType]:
    types = {name: PetType(name=name) for name in ("cat", "dog", "hamster")}
    db_session.add_all(types.values())
    db_session.commit()
    return types


@pytest.fixture
def george(db_session: Session, pet_types: dict[str, PetType]) -> Owner:
    """George Franklin with Max the dog, who has one visit."""
    owner = Owner(
        first_name="George",
        last_name="Franklin",
        address="110 W. Liberty St.",
        city="Madison",
        telephone="6085551023",
    )
    max_ = Pet(name="Max", birth_date=date.today() - timedelta(days=400), type=pet_types["dog"])
    max_.add_visit(Visit(visit_date=date.today(), description="rabies shot"))
    owner.add_pet(max_)
    db_session.add(owner)
    db_session.commit()
    return owner


@pytest.fixture
def owner_with_pets(db_session: Session, pet_types: dict[str, PetType]) -> Owner:
    """An owner with two pets, "petty" and "doggy"."""
    owner = Owner(
        first_name="Harold",
        last_name="Davis",
        address="563 Friendly St.",
        city="Windsor",
        telephone="6085553198",
    )
    owner.add_pet(Pet(name="petty", birth_date=date(2015, 2, 12), type=pet_types["dog"]))
    owner.add_pet(Pet(name="doggy", birth_date=date(2014, 6, 1), type=pet_types["dog"]))
    db_session.add(owner)
    db_session.commit()
    return owner


def field_codes(body: dict, field: str, object_name: str | None = None) -> list[str]:
    return [
        err["code"]
        for err in body["errors"]
        if err["field"] == field and (object_name is None or err["objectName"] == object_name)
    ]
