import pytest
from django.db.utils import DatabaseError
from rest_framework.exceptions import ValidationError
from rest_framework.test import APIRequestFactory

from arthings.common.exceptions import exception_handler
from arthings.common.identifiers import format_id, parse_id


@pytest.mark.parametrize(
    "value, expected",
    [("prod-12", 12), ("12", 12), (12, 12), (" prod-7 ", 7)],
)
def test_parse_id_accepts_prefixed_and_bare(value, expected):
    assert parse_id(value, "prod") == expected


@pytest.mark.parametrize("value", ["user-12", "prod-", "prod-abc", "", None, "0", -3, True, "12.5"])
def test_parse_id_rejects_garbage(value):
    with pytest.raises(ValidationError):
        parse_id(value, "prod")


def test_format_id():
    assert format_id("rental", 5) == "rental-5"
    assert format_id("rental", None) is None


def test_unhandled_exception_is_hidden():
    request = APIRequestFactory().get("/")
    response = exception_handler(RuntimeError("secret stack detail"), {"request": request, "view": None})

    assert response.status_code == 500
    assert response.data == {"detail": "Internal server error."}


@pytest.mark.django_db
def test_health(api_client):
    data = api_client.get("/api/health/").json()
    assert data["status"] == "healthy"
    assert data["database"] == "connected"


@pytest.mark.django_db
def test_health_reports_database_failure(api_client, monkeypatch):
    class BrokenConnection:
        def cursor(self):
            raise DatabaseError("connection refused")

    monkeypatch.setattr("arthings.common.views.connection", BrokenConnection())

    response = api_client.get("/api/health/")

    assert response.status_code == 503
    assert response.json() == {"status": "unhealthy", "database": "disconnected"}
