from django.urls import path

from .views import RatingCreateView, UserRatingsView, RentalRatingsView, CanRateView

urlpatterns = [
    path("", RatingCreateView.as_view(), name="rating-create"),
    path("user/<str:user_id>/", UserRatingsView.as_view(), name="rating-user"),
    path("rental/<str:rental_id>/", RentalRatingsView.as_view(), name="rating-rental"),
    path("rental/<str:rental_id>/can-rate/", CanRateView.as_view(), name="rating-can-rate"),
]
