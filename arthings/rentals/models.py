from django.conf import settings
from django.db import models

from arthings.listings.models import Item


class Rental(models.Model):
    PENDING = "pending"
    APPROVED = "approved"
    DECLINED = "declined"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    STATUS_CHOICES = [
        (PENDING, "Pending"),
        (APPROVED, "Approved"),
        (DECLINED, "Declined"),
        (COMPLETED, "Completed"),
        (CANCELLED, "Cancelled"),
    ]

    item = models.ForeignKey(Item, on_delete=models.CASCADE, related_name="rentals")
    renter = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="rentals_as_renter")
    start_date = models.DateField()
    end_date = models.DateField()
    days = models.PositiveIntegerField()
    # Copied from the item at creation; later price edits never touch it.
    price_per_day = models.DecimalField(max_digits=10, decimal_places=2)
    total_price = models.DecimalField(max_digits=12, decimal_places=2)
    message = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=PENDING, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            models.CheckConstraint(condition=models.Q(end_date__gte=models.F("start_date")), name="rental_dates_ordered"),
            models.CheckConstraint(condition=models.Q(days__gte=1), name="rental_days_positive"),
        ]
        indexes = [
            models.Index(fields=["renter", "status"], name="idx_rental_renter_status"),
        ]

    def __str__(self):
        return f"Rental {self.id} of {self.item} by {self.renter}"
