from django.urls import path
from rest_framework.routers import DefaultRouter

from .views import ItemViewSet, FavoriteViewSet

router = DefaultRouter()
router.register(r"products", ItemViewSet, basename="product")

favorite_list = FavoriteViewSet.as_view({"get": "list"})
favorite_detail = FavoriteViewSet.as_view({"post": "add", "delete": "remove"})
favorite_check = FavoriteViewSet.as_view({"get": "check"})

urlpatterns = [
    path("favorites/", favorite_list, name="favorite-list"),
    path("favorites/check/<str:item_id>/", favorite_check, name="favorite-check"),
    path("favorites/<str:item_id>/", favorite_detail, name="favorite-detail"),
] + router.urls
