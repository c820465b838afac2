import io
from datetime import date
from decimal import Decimal

import pytest
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.test import APIClient
from rolepermissions.roles import assign_role

from arthings.listings.models import Item
from arthings.rentals.models import Rental

User = get_user_model()


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def make_user(db):
    def _make_user(email, password="secret123", role="member", **extra):
        user = User.objects.create_user(email=email, password=password, **extra)
        assign_role(user, role)
        return user
    return _make_user


@pytest.fixture
def owner(make_user):
    return make_user("owner@example.com", name="Olena", city="Kyiv", phone="+380501112233")


@pytest.fixture
def renter(make_user):
    return make_user("renter@example.com", name="Taras", city="Lviv")


@pytest.fixture
def stranger(make_user):
    return make_user("stranger@example.com", name="Ivan")


@pytest.fixture
def admin_user(make_user):
    return make_user("admin@example.com", name="Admin", role="admin")


@pytest.fixture
def client_for():
    def _client_for(user):
        client = APIClient()
        client.force_authenticate(user=user)
        return client
    return _client_for


@pytest.fixture
def make_item(db):
    def _make_item(owner, **fields):
        defaults = {
            "title": "Camping tent",
            "description": "Four-person tent, used twice.",
            "category": "sports",
            "price": Decimal("100.00"),
            "city": "Kyiv",
        }
        defaults.update(fields)
        return Item.objects.create(owner=owner, **defaults)
    return _make_item


@pytest.fixture
def item(owner, make_item):
    return make_item(owner)


@pytest.fixture
def make_rental(db):
    def _make_rental(item, renter, status=Rental.PENDING, start=date(2025, 1, 1), end=date(2025, 1, 3)):
        days = (end - start).days + 1
        return Rental.objects.create(
            item=item,
            renter=renter,
            start_date=start,
            end_date=end,
            days=days,
            price_per_day=item.price,
            total_price=item.price * days,
            status=status,
        )
    return _make_rental


@pytest.fixture
def image_file():
    def _image_file(name="photo.png", fmt="PNG", content_type="image/png", size=(10, 10)):
        buffer = io.BytesIO()
        Image.new("RGB", size, color=(200, 120, 40)).save(buffer, format=fmt)
        return SimpleUploadedFile(name, buffer.getvalue(), content_type=content_type)
    return _image_file
