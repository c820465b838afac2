from django.conf import settings
from django.db import models


class LegalDocument(models.Model):
    type = models.SlugField(max_length=50, unique=True)
    version = models.CharField(max_length=20)
    file = models.FileField(upload_to="legal/", blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["type"]

    def __str__(self):
        return f"{self.type} v{self.version}"


class LegalConsent(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="legal_consents")
    document_type = models.CharField(max_length=50)
    document_version = models.CharField(max_length=20)
    accepted_at = models.DateTimeField(auto_now_add=True)
    ip_address = models.GenericIPAddressField(blank=True, null=True)
    user_agent = models.TextField(blank=True, null=True)

    class Meta:
        ordering = ["-accepted_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["user", "document_type", "document_version"],
                name="unique_user_document_consent",
            ),
        ]
        indexes = [
            models.Index(fields=["user", "document_type"], name="idx_consent_user_type"),
        ]

    def __str__(self):
        return f"{self.user} accepted {self.document_type} v{self.document_version}"
