"""Module: seed_data."""

import argparse
import logging
import random
import string
from datetime import date, timedelta

from faker import Faker
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from petclinic.db.init_db import init_db
from petclinic.db.session import SessionLocal

from petclinic.db.models.owner import Owner
from petclinic.db.models.pet import Pet
from petclinic.db.models.pet_type import PetType
from petclinic.db.models.visit import Visit

from petclinic.db.models.specialty import Specialty
from petclinic.db.models.vet import Vet

logger = logging.getLogger(__name__)

fake = Faker()

PET_TYPES = ["cat", "dog", "lizard", "snake", "bird", "hamster"]
SPECIALTIES = ["radiology", "surgery", "dentistry"]

# (first name, last name, specialties)
VETS = [
    ("James", "Carter", []),
    ("Helen", "Leary", ["radiology"]),
    ("Linda", "Douglas", ["surgery", "dentistry"]),
    ("Rafael", "Ortega", ["surgery"]),
    ("Henry", "Stevens", ["radiology"]),
    ("Sharon", "Jenkins", []),
]

# (first name, last name, address, city, telephone, [(pet name, birth date, type)])
OWNERS = [
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023", [("Leo", "2010-09-07", "cat")]),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749", [("Basil", "2012-08-06", "hamster")]),
    ("Eduardo", "Rodriquez", "2693 Commerce St.", "McFarland", "6085558763",
     [("Rosy", "2011-04-17", "dog"), ("Jewel", "2010-03-07", "dog")]),
    ("Harold", "Davis", "563 Friendly St.", "Windsor", "6085553198", [("Iggy", "2010-11-30", "lizard")]),
    ("Peter", "McTavish", "2387 S. Fair Way", "Madison", "6085552765", [("George", "2010-01-20", "snake")]),
    ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654",
     [("Samantha", "2012-09-04", "cat"), ("Max", "2012-09-04", "cat")]),
    ("Jeff", "Black", "1450 Oak Blvd.", "Monona", "6085555387", [("Lucky", "2011-08-06", "bird")]),
    ("Maria", "Escobito", "345 Maple St.", "Madison", "6085557683", [("Mulligan", "2007-02-24", "dog")]),
    ("David", "Schroeder", "2749 Blackhawk Trail", "Madison", "6085559435", [("Freddy", "2010-03-09", "bird")]),
    ("Carlos", "Estaban", "2335 Independence La.", "Waunakee", "6085555487",
     [("Lucky", "2010-06-24", "dog"), ("Sly", "2012-06-08", "cat")]),
]

# (pet name, owner last name, visit date, description)
VISITS = [
    ("Samantha", "Coleman", "2013-01-01", "rabies shot"),
    ("Max", "Coleman", "2013-01-02", "rabies shot"),
    ("Max", "Coleman", "2013-01-03", "neutered"),
    ("Samantha", "Coleman", "2013-01-04", "spayed"),
]


# Shared helpers used by the seed builders.
def generate_telephone() -> str:
    # Madison area code followed by seven digits, matching the owner form rule.
    return "608" + "".join(random.choice(string.digits) for _ in range(7))


def seed_reference_data(session: Session) -> dict[str, PetType]:
    types = {name: PetType(name=name) for name in PET_TYPES}
    session.add_all(types.values())

    specialties = {name: Specialty(name=name) for name in SPECIALTIES}
    session.add_all(specialties.values())

    for first_name, last_name, vet_specialties in VETS:
        vet = Vet(first_name=first_name, last_name=last_name)
        for name in vet_specialties:
            vet.add_specialty(specialties[name])
        session.add(vet)
    return types


def seed_owners(session: Session, types: dict[str, PetType]) -> list[Owner]:
    owners = []
    for first_name, last_name, address, city, telephone, pets in OWNERS:
        owner = Owner(first_name=first_name, last_name=last_name, address=address, city=city, telephone=telephone)
        for pet_name, birth_date, type_name in pets:
            owner.add_pet(Pet(name=pet_name, birth_date=date.fromisoformat(birth_date), type=types[type_name]))
        session.add(owner)
        owners.append(owner)

    by_last_name = {owner.last_name: owner for owner in owners}
    for pet_name, last_name, visit_date, description in VISITS:
        owner = by_last_name[last_name]
        pet = owner.get_pet(pet_name)
        pet.add_visit(Visit(visit_date=date.fromisoformat(visit_date), description=description))
    return owners


def seed_fake_owners(session: Session, types: dict[str, PetType], count: int) -> None:
    type_list = list(types.values())
    for _ in range(count):
        owner = Owner(
            first_name=fake.first_name(),
            last_name=fake.last_name(),
            address=fake.street_address(),
            city=fake.city(),
            telephone=generate_telephone(),
        )
        used_names: set[str] = set()
        for _ in range(random.randint(0, 3)):
            name = fake.first_name()
            if name in used_names:
                continue
            used_names.add(name)
            pet = Pet(
                name=name,
                birth_date=date.today() - timedelta(days=random.randint(30, 365 * 15)),
                type=random.choice(type_list),
            )
            for _ in range(random.randint(0, 2)):
                pet.add_visit(
                    Visit(
                        visit_date=fake.date_between(start_date=pet.birth_date, end_date="today"),
                        description=random.choice(["rabies shot", "annual checkup", "dental cleaning", "neutered"]),
                    )
                )
            owner.add_pet(pet)
        session.add(owner)


def seed(session: Session, fake_owners: int = 0) -> None:
    types = seed_reference_data(session)
    seed_owners(session, types)
    if fake_owners:
        seed_fake_owners(session, types, fake_owners)
    session.commit()


def seed_if_empty(fake_owners: int = 0) -> bool:
    session = SessionLocal()
    try:
        if session.execute(select(func.count(PetType.id))).scalar_one():
            return False
        seed(session, fake_owners)
        logger.info("Seeded sample data")
        return True
    finally:
        session.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Load the PetClinic sample data set.")
    parser.add_argument("--fake-owners", type=int, default=0, help="extra Faker-generated owners to add")
    args = parser.parse_args()

    init_db()
    if seed_if_empty(args.fake_owners):
        print(f"Seeded {len(OWNERS) + args.fake_owners} owners, {len(VETS)} vets.")
    else:
        print("Database already contains data; nothing seeded.")
