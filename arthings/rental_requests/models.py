from django.conf import settings
from django.db import models


class RentalRequest(models.Model):
    """A want-ad: what a user would like to rent. Not tied to any listing."""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="rental_requests")
    title = models.CharField(max_length=255)
    description = models.TextField(max_length=5000)
    category = models.CharField(max_length=50, blank=True, null=True)
    city = models.CharField(max_length=100, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["category"], name="idx_request_category"),
            models.Index(fields=["created_at"], name="idx_request_created"),
        ]

    def __str__(self):
        return self.title
