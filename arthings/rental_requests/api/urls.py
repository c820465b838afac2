from rest_framework.routers import SimpleRouter

from .views import RentalRequestViewSet

router = SimpleRouter()
router.register(r"", RentalRequestViewSet, basename="rental-request")

urlpatterns = router.urls
