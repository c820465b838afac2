from django.apps import AppConfig


class AdministrationConfig(AppConfig):
    name = "arthings.administration"
    verbose_name = "Administration"
