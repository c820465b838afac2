from django.apps import AppConfig


class RentalsConfig(AppConfig):
    name = "arthings.rentals"
    verbose_name = "Rentals"
