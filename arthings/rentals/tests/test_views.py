import pytest

from arthings.rentals.models import Rental

pytestmark = pytest.mark.django_db


def test_create_rental(client_for, renter, item):
    response = client_for(renter).post(
        "/api/rentals/",
        {"itemId": f"prod-{item.id}", "startDate": "2025-01-01", "endDate": "2025-01-03", "message": "<b>Hi</b>"},
        format="json",
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"].startswith("rental-")
    assert data["itemId"] == f"prod-{item.id}"
    assert data["renterId"] == f"user-{renter.id}"
    assert data["ownerId"] == f"user-{item.owner_id}"
    assert data["days"] == 3
    assert data["totalPrice"] == 300
    assert data["status"] == "pending"
    assert data["message"] == "Hi"


def test_create_rental_accepts_bare_id(client_for, renter, item):
    response = client_for(renter).post(
        "/api/rentals/",
        {"itemId": str(item.id), "startDate": "2025-01-01", "endDate": "2025-01-01"},
        format="json",
    )
    assert response.status_code == 201
    assert response.json()["days"] == 1


def test_create_rental_own_item_conflict(client_for, owner, item):
    response = client_for(owner).post(
        "/api/rentals/",
        {"itemId": f"prod-{item.id}", "startDate": "2025-01-01", "endDate": "2025-01-03"},
        format="json",
    )
    assert response.status_code == 409
    assert Rental.objects.count() == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"itemId": "bogus", "startDate": "2025-01-01", "endDate": "2025-01-03"},
        {"itemId": "prod-1", "startDate": "not-a-date", "endDate": "2025-01-03"},
        {"itemId": "prod-1", "startDate": "2025-01-01"},
    ],
)
def test_create_rental_bad_payload(client_for, renter, item, payload):
    response = client_for(renter).post("/api/rentals/", payload, format="json")
    assert response.status_code == 400


def test_create_rental_requires_auth(api_client, item):
    response = api_client.post(
        "/api/rentals/",
        {"itemId": f"prod-{item.id}", "startDate": "2025-01-01", "endDate": "2025-01-03"},
        format="json",
    )
    assert response.status_code == 401


def test_list_rentals_role(client_for, owner, renter, item, make_rental):
    make_rental(item, renter)

    as_renter = client_for(renter).get("/api/rentals/")
    as_owner = client_for(owner).get("/api/rentals/", {"role": "owner"})
    owner_as_renter = client_for(owner).get("/api/rentals/")

    assert len(as_renter.json()) == 1
    assert len(as_owner.json()) == 1
    assert owner_as_renter.json() == []


def test_retrieve_rental_only_for_parties(client_for, renter, stranger, item, make_rental):
    rental = make_rental(item, renter)

    assert client_for(renter).get(f"/api/rentals/rental-{rental.id}/").status_code == 200
    assert client_for(stranger).get(f"/api/rentals/rental-{rental.id}/").status_code == 403
    assert client_for(renter).get("/api/rentals/rental-9999/").status_code == 404


def test_status_endpoint(client_for, owner, renter, item, make_rental):
    rental = make_rental(item, renter)
    url = f"/api/rentals/rental-{rental.id}/status/"

    forbidden = client_for(renter).put(url, {"status": "approved"}, format="json")
    unknown = client_for(owner).put(url, {"status": "archived"}, format="json")
    approved = client_for(owner).put(url, {"status": "approved"}, format="json")

    assert forbidden.status_code == 403
    assert unknown.status_code == 400
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"
