import pytest

from arthings.rental_requests.models import RentalRequest

pytestmark = pytest.mark.django_db


@pytest.fixture
def want_ads(owner, renter):
    return [
        RentalRequest.objects.create(user=owner, title="Need a ladder", description="3m", category="tools", city="Kyiv"),
        RentalRequest.objects.create(user=renter, title="Need a tent", description="Weekend", category="outdoor",
                                     city="Lviv"),
    ]


def test_public_list_newest_first(api_client, want_ads):
    data = api_client.get("/api/rental-requests/").json()
    assert [row["title"] for row in data] == ["Need a tent", "Need a ladder"]
    assert data[0]["user"]["id"].startswith("user-")


def test_filters(api_client, want_ads, owner):
    assert len(api_client.get("/api/rental-requests/", {"category": "tools"}).json()) == 1
    assert len(api_client.get("/api/rental-requests/", {"city": "Lviv"}).json()) == 1
    by_owner = api_client.get("/api/rental-requests/", {"userId": f"user-{owner.id}"}).json()
    assert [row["title"] for row in by_owner] == ["Need a ladder"]


def test_list_is_capped(api_client, owner):
    RentalRequest.objects.bulk_create(
        RentalRequest(user=owner, title=f"Ad {n}", description="d") for n in range(105)
    )
    assert len(api_client.get("/api/rental-requests/").json()) == 100


def test_create_truncates_and_cleans(client_for, renter):
    response = client_for(renter).post(
        "/api/rental-requests/",
        {"title": "<b>" + "t" * 300 + "</b>", "description": "Please", "category": "", "city": "Odesa"},
        format="json",
    )

    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "t" * 255
    assert data["category"] is None
    assert data["city"] == "Odesa"
    assert data["user"]["name"] == "Taras"


@pytest.mark.parametrize("payload", [{"title": "x"}, {"description": "x"}, {"title": " ", "description": "x"}])
def test_create_requires_title_and_description(client_for, renter, payload):
    assert client_for(renter).post("/api/rental-requests/", payload, format="json").status_code == 400


def test_create_requires_auth(api_client):
    response = api_client.post("/api/rental-requests/", {"title": "t", "description": "d"}, format="json")
    assert response.status_code == 401


def test_retrieve(api_client, want_ads):
    ad = want_ads[0]
    assert api_client.get(f"/api/rental-requests/{ad.id}/").json()["title"] == "Need a ladder"
    assert api_client.get("/api/rental-requests/999/").status_code == 404


def test_delete_by_owner_or_admin(client_for, owner, renter, admin_user, want_ads):
    owner_ad, renter_ad = want_ads

    assert client_for(renter).delete(f"/api/rental-requests/{owner_ad.id}/").status_code == 403
    assert client_for(owner).delete(f"/api/rental-requests/{owner_ad.id}/").status_code == 204
    assert client_for(admin_user).delete(f"/api/rental-requests/{renter_ad.id}/").status_code == 204
    assert not RentalRequest.objects.exists()
