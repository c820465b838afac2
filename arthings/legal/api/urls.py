from rest_framework.routers import DefaultRouter

from .views import LegalDocumentViewSet, ConsentViewSet

router = DefaultRouter()
router.register(r"documents", LegalDocumentViewSet, basename="legal-document")
router.register(r"consent", ConsentViewSet, basename="legal-consent")

urlpatterns = router.urls
