import logging

from django.contrib.auth import get_user_model
from django.db.models import Count, DecimalField, Sum, Value
from django.db.models.functions import Coalesce
from rest_framework.exceptions import ValidationError

from arthings.listings.models import Item
from arthings.rentals.models import Rental
from arthings.users.services.user_service import UserService

User = get_user_model()
logger = logging.getLogger(__name__)

RECENT_RENTALS = 10


class AdminService:

    @staticmethod
    def dashboard_stats():
        revenue = Rental.objects.aggregate(
            total=Coalesce(Sum("total_price"), Value(0), output_field=DecimalField(max_digits=14, decimal_places=2))
        )["total"]
        return {
            "stats": {
                "total_users": User.objects.count(),
                "total_listings": Item.objects.count(),
                "total_rentals": Rental.objects.count(),
                "active_rentals": Rental.objects.filter(status=Rental.APPROVED).count(),
                "total_revenue": revenue,
            },
            "recent_rentals": Rental.objects.select_related("item", "renter")[:RECENT_RENTALS],
        }

    @staticmethod
    def listings_with_counts():
        return (
            Item.objects
            .select_related("owner")
            .prefetch_related("images")
            .annotate(
                rentals_count=Count("rentals", distinct=True),
                favorites_count=Count("favorited_by", distinct=True),
            )
        )

    @staticmethod
    def users_with_counts():
        return User.objects.annotate(
            listings_count=Count("items", distinct=True),
            rentals_count=Count("rentals_as_renter", distinct=True),
        )

    @staticmethod
    def delete_user(user, admin):
        if user.pk == admin.pk:
            raise ValidationError("Cannot delete your own account from the admin panel.")
        logger.warning(f"Admin {admin.email} is deleting user {user.email}")
        UserService.delete_account(user)

    @staticmethod
    def toggle_admin(user, admin):
        if user.pk == admin.pk:
            raise ValidationError("Cannot change your own admin status.")
        UserService.toggle_admin(user)
        return user.is_admin
