from rest_framework.routers import SimpleRouter

from .views import AdminDashboardViewSet, AdminUserViewSet, AdminListingViewSet, AdminRentalViewSet

router = SimpleRouter()
router.register(r"users", AdminUserViewSet, basename="admin-user")
router.register(r"listings", AdminListingViewSet, basename="admin-listing")
router.register(r"rentals", AdminRentalViewSet, basename="admin-rental")
router.register(r"", AdminDashboardViewSet, basename="admin")

urlpatterns = router.urls
