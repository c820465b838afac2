import logging

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound

from .models import LegalConsent, LegalDocument

logger = logging.getLogger(__name__)


class ConsentService:

    @staticmethod
    def record_consent(user, document_type, document_version, ip_address=None, user_agent=None):
        """
        Record acceptance of a document version. Returns ``(consent, created)``;
        an existing acceptance of the same version is returned unchanged.
        """
        lookup = {
            "user": user,
            "document_type": document_type,
            "document_version": document_version,
        }
        existing = LegalConsent.objects.filter(**lookup).first()
        if existing:
            return existing, False

        try:
            with transaction.atomic():
                consent = LegalConsent.objects.create(
                    ip_address=ip_address,
                    user_agent=user_agent,
                    **lookup,
                )
        except IntegrityError:
            # Lost a race with a concurrent request for the same version.
            return LegalConsent.objects.get(**lookup), False

        logger.info(f"Consent recorded: {user.email} accepted {document_type} v{document_version}")
        return consent, True

    @staticmethod
    def consent_status(user, document_type=None):
        documents = LegalDocument.objects.all()
        if document_type:
            documents = documents.filter(type=document_type)
            if not documents.exists():
                raise NotFound("Document type not found.")

        accepted = set(
            LegalConsent.objects.filter(user=user).values_list("document_type", "document_version")
        )
        return [
            {
                "type": doc.type,
                "version": doc.version,
                "has_consent": (doc.type, doc.version) in accepted,
            }
            for doc in documents
        ]
