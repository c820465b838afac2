import pytest

from arthings.legal.models import LegalConsent, LegalDocument
from arthings.legal.services import ConsentService

pytestmark = pytest.mark.django_db


@pytest.fixture
def documents(db):
    LegalDocument.objects.create(type="privacy-policy", version="1.0")
    LegalDocument.objects.create(type="public-offer", version="2.0")


def test_record_consent_is_idempotent(renter):
    first, created = ConsentService.record_consent(renter, "privacy-policy", "1.0", ip_address="10.0.0.1")
    second, created_again = ConsentService.record_consent(renter, "privacy-policy", "1.0")

    assert created is True
    assert created_again is False
    assert first.pk == second.pk
    assert LegalConsent.objects.count() == 1


def test_consent_endpoint(client_for, renter):
    client = client_for(renter)
    payload = {"documentType": "privacy-policy", "documentVersion": "1.0"}

    first = client.post("/api/legal/consent/", payload, format="json", HTTP_USER_AGENT="pytest", REMOTE_ADDR="10.1.2.3")
    second = client.post("/api/legal/consent/", payload, format="json")

    assert first.status_code == 201
    assert second.status_code == 200
    assert first.json()["id"] == second.json()["id"]
    consent = LegalConsent.objects.get()
    assert consent.user_agent == "pytest"
    assert consent.ip_address == "10.1.2.3"


def test_consent_requires_auth(api_client):
    response = api_client.post(
        "/api/legal/consent/", {"documentType": "privacy-policy", "documentVersion": "1.0"}, format="json",
    )
    assert response.status_code == 401


def test_consent_check(client_for, renter, documents):
    ConsentService.record_consent(renter, "privacy-policy", "1.0")
    ConsentService.record_consent(renter, "public-offer", "1.0")
    client = client_for(renter)

    data = client.get("/api/legal/consent/check/").json()
    only_offer = client.get("/api/legal/consent/check/", {"type": "public-offer"}).json()

    assert {row["type"]: row["hasConsent"] for row in data} == {"privacy-policy": True, "public-offer": False}
    assert only_offer == [{"type": "public-offer", "version": "2.0", "hasConsent": False}]
    assert client.get("/api/legal/consent/check/", {"type": "cookies"}).status_code == 404


def test_documents_are_public(api_client, documents):
    listing = api_client.get("/api/legal/documents/")
    detail = api_client.get("/api/legal/documents/public-offer/")

    assert [row["type"] for row in listing.json()] == ["privacy-policy", "public-offer"]
    assert detail.json()["version"] == "2.0"
    assert detail.json()["fileUrl"] is None
    assert api_client.get("/api/legal/documents/missing/").status_code == 404
