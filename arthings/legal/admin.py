from django.contrib import admin

from .models import LegalDocument, LegalConsent


@admin.register(LegalDocument)
class LegalDocumentAdmin(admin.ModelAdmin):
    list_display = ("type", "version", "file", "updated_at")
    search_fields = ("type",)
    readonly_fields = ("updated_at",)


@admin.register(LegalConsent)
class LegalConsentAdmin(admin.ModelAdmin):
    list_display = ("user", "document_type", "document_version", "accepted_at", "ip_address")
    search_fields = ("user__email", "document_type")
    list_filter = ("document_type", "document_version")
    readonly_fields = ("user", "document_type", "document_version", "accepted_at", "ip_address", "user_agent")
