import pytest
from django.contrib.auth import get_user_model
from django.core.management import call_command, CommandError
from django.test import override_settings

from arthings.listings.models import Item
from arthings.rentals.models import Rental

User = get_user_model()
pytestmark = pytest.mark.django_db


def test_me_requires_auth(api_client):
    assert api_client.get("/api/users/me/").status_code == 401


def test_get_profile(client_for, owner):
    data = client_for(owner).get("/api/users/me/").json()
    assert data["id"] == f"user-{owner.id}"
    assert data["name"] == "Olena"
    assert data["phone"] == "+380501112233"


def test_update_profile(client_for, owner):
    response = client_for(owner).patch(
        "/api/users/me/", {"name": " <b>Olena K.</b> ", "phone": "", "email": "hacker@example.com"}, format="json",
    )

    assert response.status_code == 200
    owner.refresh_from_db()
    assert owner.name == "Olena K."
    assert owner.phone is None
    assert owner.email == "owner@example.com"


def test_update_profile_rejects_empty_name(client_for, owner):
    assert client_for(owner).patch("/api/users/me/", {"name": "  "}, format="json").status_code == 400


def test_delete_account_cascades(client_for, owner, renter, item, make_rental):
    make_rental(item, renter)

    response = client_for(owner).delete("/api/users/me/")

    assert response.status_code == 204
    assert not User.objects.filter(pk=owner.pk).exists()
    assert not Item.objects.exists()
    assert not Rental.objects.exists()


def test_promote_admin_command(owner):
    call_command("promote_admin", "--email", "OWNER@example.com")
    owner.refresh_from_db()
    assert owner.is_admin


@override_settings(ADMIN_EMAIL="owner@example.com")
def test_promote_admin_uses_setting(owner):
    call_command("promote_admin")
    assert owner.is_admin


@override_settings(ADMIN_EMAIL="")
def test_promote_admin_errors(db):
    with pytest.raises(CommandError):
        call_command("promote_admin")
    with pytest.raises(CommandError):
        call_command("promote_admin", "--email", "nobody@example.com")
