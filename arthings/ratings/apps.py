from django.apps import AppConfig


class RatingsConfig(AppConfig):
    name = "arthings.ratings"
    verbose_name = "Ratings"
