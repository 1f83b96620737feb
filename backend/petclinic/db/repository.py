"""Module: repository."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet_type import PetType
from petclinic.db.models.vet import Vet

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a larger result set; ``page_number`` is 1-based."""

    items: list[T]
    page_number: int
    page_size: int
    total_items: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_items / self.page_size)

    @property
    def is_empty(self) -> bool:
        return not self.items


def _paginate(db: Session, stmt: Select, page: int, page_size: int) -> Page:
    # Pages below 1 are clamped so a bad query string never yields a negative offset.
    page = max(page, 1)
    total = int(db.execute(select(func.count()).select_from(stmt.order_by(None).subquery())).scalar_one() or 0)
    offset = (page - 1) * page_size
    # Past the last row nothing is fetched, so huge page numbers never reach the driver.
    if offset >= total:
        return Page(items=[], page_number=page, page_size=page_size, total_items=total)
    rows = db.execute(stmt.offset(offset).limit(page_size)).scalars().all()
    return Page(items=list(rows), page_number=page, page_size=page_size, total_items=total)


# Persistence boundary for the owner aggregate (owner + pets + visits).
class OwnerRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, owner_id: int) -> Owner | None:
        return self.db.get(Owner, owner_id)

    def find_by_last_name_starting_with(self, prefix: str, page: int, page_size: int) -> Page[Owner]:
        stmt = (
            select(Owner)
            .where(Owner.last_name.startswith(prefix, autoescape=True))
            .order_by(Owner.last_name, Owner.id)
        )
        return _paginate(self.db, stmt, page, page_size)

    def find_all(self, page: int, page_size: int) -> Page[Owner]:
        return _paginate(self.db, select(Owner).order_by(Owner.last_name, Owner.id), page, page_size)

    def find_pet_types(self) -> list[PetType]:
        return list(self.db.execute(select(PetType).order_by(PetType.name)).scalars().all())

    def save(self, owner: Owner) -> Owner:
        # The whole aggregate is written in one commit; a failure leaves nothing behind.
        self.db.add(owner)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(owner)
        return owner


class VetRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> list[Vet]:
        return list(self.db.execute(select(Vet).order_by(Vet.last_name, Vet.id)).scalars().all())

    def find_page(self, page: int, page_size: int) -> Page[Vet]:
        return _paginate(self.db, select(Vet).order_by(Vet.last_name, Vet.id), page, page_size)
