from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from rolepermissions.permissions import revoke_permission

from arthings.listings.models import Favorite, Item
from arthings.rentals.models import Rental

User = get_user_model()
pytestmark = pytest.mark.django_db


@pytest.fixture
def admin_client(client_for, admin_user):
    return client_for(admin_user)


@pytest.mark.parametrize(
    "method, url",
    [
        ("get", "/api/admin/check/"),
        ("get", "/api/admin/stats/"),
        ("get", "/api/admin/users/"),
        ("get", "/api/admin/listings/"),
        ("get", "/api/admin/rentals/"),
    ],
)
def test_non_admins_are_rejected(api_client, client_for, renter, method, url):
    assert getattr(api_client, method)(url).status_code == 401
    assert getattr(client_for(renter), method)(url).status_code == 403


def test_admin_without_role_permission_is_rejected(client_for, admin_user):
    revoke_permission(admin_user, "manage_users")
    client = client_for(User.objects.get(pk=admin_user.pk))

    assert client.get("/api/admin/users/").status_code == 403
    assert client.get("/api/admin/stats/").status_code == 200


def test_check(admin_client):
    assert admin_client.get("/api/admin/check/").json() == {"admin": True}


def test_stats(admin_client, item, renter, make_rental):
    make_rental(item, renter, status=Rental.APPROVED)
    make_rental(item, renter, status=Rental.PENDING)

    data = admin_client.get("/api/admin/stats/").json()

    assert data["stats"]["totalUsers"] == 3
    assert data["stats"]["totalListings"] == 1
    assert data["stats"]["totalRentals"] == 2
    assert data["stats"]["activeRentals"] == 1
    assert Decimal(str(data["stats"]["totalRevenue"])) == Decimal("600")
    assert len(data["recentRentals"]) == 2


def test_stats_with_no_rentals(admin_client):
    data = admin_client.get("/api/admin/stats/").json()
    assert data["stats"]["totalRevenue"] == 0
    assert data["recentRentals"] == []


def test_users_search_and_pagination(admin_client, make_user):
    for n in range(3):
        make_user(f"member{n}@example.com", name=f"Member {n}")

    page = admin_client.get("/api/admin/users/", {"limit": 2, "page": 1}).json()
    search = admin_client.get("/api/admin/users/", {"search": "member1"}).json()

    assert page["total"] == 4
    assert page["totalPages"] == 2
    assert page["page"] == 1
    assert len(page["results"]) == 2
    assert [row["email"] for row in search["results"]] == ["member1@example.com"]


def test_delete_user(admin_client, admin_user, renter):
    assert admin_client.delete(f"/api/admin/users/user-{admin_user.id}/").status_code == 400
    assert admin_client.delete(f"/api/admin/users/user-{renter.id}/").status_code == 204
    assert not User.objects.filter(pk=renter.pk).exists()


def test_toggle_admin(admin_client, admin_user, renter):
    url = f"/api/admin/users/user-{renter.id}/toggle-admin/"

    granted = admin_client.put(url)
    revoked = admin_client.put(url)

    assert granted.json()["isAdmin"] is True
    assert revoked.json()["isAdmin"] is False
    assert admin_client.put(f"/api/admin/users/user-{admin_user.id}/toggle-admin/").status_code == 400
    assert admin_client.put("/api/admin/users/user-9999/toggle-admin/").status_code == 404


def test_listings_with_counts(admin_client, item, renter, make_rental):
    make_rental(item, renter)
    Favorite.objects.create(user=renter, item=item)

    data = admin_client.get("/api/admin/listings/", {"search": "tent"}).json()

    assert data["total"] == 1
    row = data["results"][0]
    assert row["id"] == f"prod-{item.id}"
    assert row["rentalsCount"] == 1
    assert row["favoritesCount"] == 1


def test_force_delete_listing(admin_client, item):
    assert admin_client.delete(f"/api/admin/listings/prod-{item.id}/").status_code == 204
    assert not Item.objects.exists()


def test_rentals_status_filter_and_override(admin_client, item, renter, make_rental):
    declined = make_rental(item, renter, status=Rental.DECLINED)
    make_rental(item, renter, status=Rental.PENDING)

    filtered = admin_client.get("/api/admin/rentals/", {"status": "declined"}).json()
    override = admin_client.put(f"/api/admin/rentals/rental-{declined.id}/status/", {"status": "completed"},
                                format="json")
    invalid = admin_client.put(f"/api/admin/rentals/rental-{declined.id}/status/", {"status": "lost"}, format="json")

    assert filtered["total"] == 1
    assert override.status_code == 200
    assert override.json()["status"] == "completed"
    assert invalid.status_code == 400
