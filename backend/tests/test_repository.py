"""Unit tests for the owner and vet repositories."""

from datetime import date

from petclinic.db.models import Owner, Pet, Visit
from petclinic.db.repository import OwnerRepository, Page


def _owner(last_name: str, first_name: str = "Pat") -> Owner:
    return Owner(first_name=first_name, last_name=last_name, address="1 Main St.", city="Madison",
                 telephone="6085550000")


def test_page_metadata():
    page = Page(items=[1, 2], page_number=2, page_size=5, total_items=7)
    assert page.total_pages == 2
    assert not page.is_empty
    assert Page(items=[], page_number=1, page_size=5, total_items=0).total_pages == 0


def test_find_by_last_name_starting_with(db_session):
    repo = OwnerRepository(db_session)
    for name in ("Davis", "Davidson", "Franklin", "Black"):
        repo.save(_owner(name))

    page = repo.find_by_last_name_starting_with("Dav", page=1, page_size=5)

    assert [owner.last_name for owner in page.items] == ["Davidson", "Davis"]
    assert page.total_items == 2


def test_prefix_wildcards_are_literal(db_session):
    repo = OwnerRepository(db_session)
    repo.save(_owner("Davis"))

    assert repo.find_by_last_name_starting_with("%", page=1, page_size=5).total_items == 0
    assert repo.find_by_last_name_starting_with("", page=1, page_size=5).total_items == 1


def test_find_all_pages(db_session):
    repo = OwnerRepository(db_session)
    for i in range(6):
        repo.save(_owner(f"Name{i}"))

    first = repo.find_all(page=1, page_size=5)
    second = repo.find_all(page=2, page_size=5)
    clamped = repo.find_all(page=0, page_size=5)

    assert len(first.items) == 5
    assert len(second.items) == 1
    assert first.total_pages == 2
    assert clamped.page_number == 1


def test_save_persists_whole_aggregate(db_session, pet_types):
    repo = OwnerRepository(db_session)
    owner = _owner("Franklin", "George")
    pet = Pet(name="Max", birth_date=date(2012, 9, 4), type=pet_types["dog"])
    pet.add_visit(Visit(visit_date=date(2013, 1, 1), description="rabies shot"))
    owner.add_pet(pet)
    repo.save(owner)
    db_session.expunge_all()

    loaded = repo.find_by_id(owner.id)

    assert loaded.get_pet("Max").visits[0].description == "rabies shot"
    assert loaded.get_pet("max") is None
    assert loaded.get_pet_by_id(pet.id).name == "Max"


def test_find_pet_types_sorted(db_session, pet_types):
    assert [t.name for t in OwnerRepository(db_session).find_pet_types()] == ["cat", "dog", "hamster"]


def test_find_missing_owner(db_session):
    assert OwnerRepository(db_session).find_by_id(42) is None


def test_page_past_the_end_is_empty(db_session):
    repo = OwnerRepository(db_session)
    repo.save(_owner("Davis"))

    page = repo.find_all(page=99999999999999999999, page_size=5)

    assert page.is_empty
    assert page.total_items == 1
    assert page.page_number == 99999999999999999999
