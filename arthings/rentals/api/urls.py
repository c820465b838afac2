from rest_framework.routers import SimpleRouter

from .views import RentalViewSet

router = SimpleRouter()
router.register(r"", RentalViewSet, basename="rental")

urlpatterns = router.urls
