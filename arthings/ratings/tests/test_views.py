import pytest

from arthings.rentals.models import Rental

pytestmark = pytest.mark.django_db


@pytest.fixture
def completed_rental(item, renter, make_rental):
    return make_rental(item, renter, status=Rental.COMPLETED)


def test_rating_flow(client_for, owner, renter, completed_rental):
    owner_client = client_for(owner)
    renter_client = client_for(renter)
    payload = {"rentalId": f"rental-{completed_rental.id}", "toUserId": f"user-{renter.id}", "score": 5}

    created = owner_client.post("/api/ratings/", payload, format="json")
    duplicate = owner_client.post("/api/ratings/", payload, format="json")
    reverse = renter_client.post(
        "/api/ratings/",
        {"rentalId": completed_rental.id, "toUserId": owner.id, "score": 4, "comment": "Smooth handover"},
        format="json",
    )

    assert created.status_code == 201
    assert created.json()["toUserId"] == f"user-{renter.id}"
    assert duplicate.status_code == 409
    assert reverse.status_code == 201
    assert reverse.json()["comment"] == "Smooth handover"


@pytest.mark.parametrize("score", [0, 6, "five"])
def test_score_out_of_range(client_for, owner, renter, completed_rental, score):
    response = client_for(owner).post(
        "/api/ratings/",
        {"rentalId": completed_rental.id, "toUserId": renter.id, "score": score},
        format="json",
    )
    assert response.status_code == 400


def test_rating_requires_auth(api_client, renter, completed_rental):
    response = api_client.post(
        "/api/ratings/",
        {"rentalId": completed_rental.id, "toUserId": renter.id, "score": 5},
        format="json",
    )
    assert response.status_code == 401


def test_rental_ratings_include_eligibility(client_for, owner, renter, completed_rental):
    client_for(owner).post(
        "/api/ratings/",
        {"rentalId": completed_rental.id, "toUserId": renter.id, "score": 5},
        format="json",
    )

    data = client_for(renter).get(f"/api/ratings/rental/rental-{completed_rental.id}/").json()

    assert len(data["ratings"]) == 1
    assert data["ratings"][0]["fromUserId"] == f"user-{owner.id}"
    assert data["canRateOwner"] is True
    assert data["alreadyRatedOwner"] is False
    assert data["ownerId"] == f"user-{owner.id}"


def test_can_rate_anonymous(api_client, completed_rental):
    data = api_client.get(f"/api/ratings/rental/rental-{completed_rental.id}/can-rate/").json()
    assert data["canRateOwner"] is False
    assert data["canRateRenter"] is False
    assert data["ownerId"] is None


def test_can_rate_invalid_id(client_for, owner):
    assert client_for(owner).get("/api/ratings/rental/nope/can-rate/").status_code == 400


def test_user_ratings_public(api_client, client_for, owner, renter, completed_rental):
    client_for(renter).post(
        "/api/ratings/",
        {"rentalId": completed_rental.id, "toUserId": owner.id, "score": 4},
        format="json",
    )

    data = api_client.get(f"/api/ratings/user/user-{owner.id}/").json()

    assert data["totalCount"] == 1
    assert data["averageScore"] == 4.0
    assert data["ratings"][0]["itemTitle"] == "Camping tent"
    assert data["ratings"][0]["fromUserName"] == "Taras"
