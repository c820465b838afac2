from decimal import Decimal

import pytest

from arthings.listings.models import Item

pytestmark = pytest.mark.django_db


@pytest.fixture
def catalogue(owner, renter, make_item):
    return {
        "drill": make_item(owner, title="Cordless drill", description="18V", category="tools",
                           price=Decimal("50.00"), city="Kyiv", views=10),
        "tent": make_item(owner, title="Tent", description="Sleeps four", category="outdoor",
                          price=Decimal("120.00"), city="Lviv", views=3),
        "camera": make_item(renter, title="Camera", description="Mirrorless, with a drill-proof case",
                            category="electronics", price=Decimal("300.00"), city="kyiv",
                            is_available=False, views=25),
    }


def titles(response):
    return [row["title"] for row in response.json()]


def test_default_order_is_newest_first(api_client, catalogue):
    assert titles(api_client.get("/api/products/")) == ["Camera", "Tent", "Cordless drill"]


def test_search_matches_title_or_description(api_client, catalogue):
    assert sorted(titles(api_client.get("/api/products/", {"search": "DRILL"}))) == ["Camera", "Cordless drill"]


def test_price_range_is_inclusive(api_client, catalogue):
    response = api_client.get("/api/products/", {"minPrice": "50", "maxPrice": "120", "sort": "price-asc"})
    assert titles(response) == ["Cordless drill", "Tent"]


def test_city_is_case_insensitive(api_client, catalogue):
    assert sorted(titles(api_client.get("/api/products/", {"city": "KYIV"}))) == ["Camera", "Cordless drill"]


def test_available_and_category(api_client, catalogue):
    assert titles(api_client.get("/api/products/", {"available": "false"})) == ["Camera"]
    assert titles(api_client.get("/api/products/", {"category": "outdoor"})) == ["Tent"]


def test_user_id_accepts_prefixed_and_bare(api_client, catalogue, renter):
    assert titles(api_client.get("/api/products/", {"userId": f"user-{renter.id}"})) == ["Camera"]
    assert titles(api_client.get("/api/products/", {"userId": str(renter.id)})) == ["Camera"]
    assert api_client.get("/api/products/", {"userId": "someone"}).status_code == 400


@pytest.mark.parametrize(
    "sort, expected",
    [
        ("price-desc", ["Camera", "Tent", "Cordless drill"]),
        ("popular", ["Camera", "Cordless drill", "Tent"]),
        ("newest", ["Camera", "Tent", "Cordless drill"]),
    ],
)
def test_sort(api_client, catalogue, sort, expected):
    assert titles(api_client.get("/api/products/", {"sort": sort})) == expected


def test_combined_filters(api_client, catalogue):
    response = api_client.get("/api/products/", {"city": "kyiv", "available": "true", "maxPrice": "100"})
    assert titles(response) == ["Cordless drill"]
    assert Item.objects.count() == 3
