from django.apps import AppConfig


class RentalRequestsConfig(AppConfig):
    name = "arthings.rental_requests"
    verbose_name = "Rental requests"
