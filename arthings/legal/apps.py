from django.apps import AppConfig


class LegalConfig(AppConfig):
    name = "arthings.legal"
    verbose_name = "Legal"
