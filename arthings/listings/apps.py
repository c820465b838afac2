from django.apps import AppConfig


class ListingsConfig(AppConfig):
    name = "arthings.listings"
    verbose_name = "Listings"
