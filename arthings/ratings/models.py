from django.conf import settings
from django.db import models

from arthings.rentals.models import Rental


class Rating(models.Model):
    MIN_SCORE = 1
    MAX_SCORE = 5

    rental = models.ForeignKey(Rental, on_delete=models.CASCADE, related_name="ratings")
    from_user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="ratings_given")
    to_user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="ratings_received")
    score = models.PositiveSmallIntegerField()  # 1–5
    comment = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        constraints = [
            # One rating per direction per rental
            models.UniqueConstraint(fields=["rental", "from_user", "to_user"], name="unique_rental_rating"),
            models.CheckConstraint(condition=models.Q(score__gte=1, score__lte=5), name="rating_valid_range"),
        ]
        indexes = [
            models.Index(fields=["to_user", "created_at"], name="idx_rating_to_user"),
        ]

    def __str__(self):
        return f"{self.score}/5 for {self.to_user.email} by {self.from_user.email}"
