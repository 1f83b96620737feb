"""API tests for the visit handler."""

from datetime import date

from conftest import field_codes
from petclinic.db.models import Pet

VISIT_FORM = "pets/createOrUpdateVisitForm"


def test_init_new_visit_form(client, george):
    max_ = george.get_pet("Max")
    response = client.get(f"/owners/{george.id}/pets/{max_.id}/visits/new")

    assert response.status_code == 200
    body = response.json()
    assert body["view"] == VISIT_FORM
    assert body["model"]["visit"]["date"] == date.today().isoformat()
    assert body["model"]["pet"]["name"] == "Max"
    assert len(body["model"]["pet"]["visits"]) == 1


def test_process_new_visit_form_success(client, db_session, george):
    max_ = george.get_pet("Max")
    response = client.post(
        f"/owners/{george.id}/pets/{max_.id}/visits/new",
        data={"date": "2013-01-01", "description": "neutered"},
        follow_redirects=False,
    )

    assert response.status_code == 302
    assert response.headers["location"] == f"/owners/{george.id}"
    visits = db_session.get(Pet, max_.id).visits
    assert [visit.description for visit in visits] == ["rabies shot", "neutered"]
    assert visits[-1].visit_date == date(2013, 1, 1)


def test_visit_date_defaults_to_today(client, db_session, george):
    max_ = george.get_pet("Max")
    client.post(
        f"/owners/{george.id}/pets/{max_.id}/visits/new",
        data={"description": "annual checkup"},
        follow_redirects=False,
    )

    assert db_session.get(Pet, max_.id).visits[-1].visit_date == date.today()


def test_process_new_visit_form_has_errors(client, db_session, george):
    max_ = george.get_pet("Max")
    response = client.post(
        f"/owners/{george.id}/pets/{max_.id}/visits/new",
        data={"date": "01/01/2013", "description": " "},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["view"] == VISIT_FORM
    assert field_codes(body, "description", "visit") == ["required"]
    assert field_codes(body, "date", "visit") == ["typeMismatch"]
    assert len(db_session.get(Pet, max_.id).visits) == 1


def test_booked_visit_shows_on_owner_details(client, george):
    max_ = george.get_pet("Max")
    client.post(
        f"/owners/{george.id}/pets/{max_.id}/visits/new",
        data={"date": "2013-01-02", "description": "dental cleaning"},
        follow_redirects=False,
    )

    body = client.get(f"/owners/{george.id}").json()
    assert body["model"]["message"] == "Your visit has been booked"
    visits = body["model"]["owner"]["pets"][0]["visits"]
    assert visits[-1] == {"id": visits[-1]["id"], "date": "2013-01-02", "description": "dental cleaning"}


def test_visit_for_missing_pet_is_not_found(client, george):
    response = client.post(
        f"/owners/{george.id}/pets/999/visits/new",
        data={"description": "neutered"},
        follow_redirects=False,
    )
    assert response.status_code == 404
