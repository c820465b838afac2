import logging
from datetime import timedelta
from decimal import Decimal
import math

from django.db import transaction
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from arthings.common.exceptions import Conflict
from arthings.common.permissions import is_admin
from arthings.listings.services.item_service import ItemService
from .models import Rental

logger = logging.getLogger(__name__)

# Allowed (from status -> target statuses) for each party.
OWNER_TRANSITIONS = {
    Rental.PENDING: {Rental.APPROVED, Rental.DECLINED},
    Rental.APPROVED: {Rental.COMPLETED},
}
RENTER_TRANSITIONS = {
    Rental.PENDING: {Rental.CANCELLED},
    Rental.APPROVED: {Rental.CANCELLED},
}
REQUESTABLE_STATUSES = [Rental.APPROVED, Rental.DECLINED, Rental.COMPLETED, Rental.CANCELLED]
ALL_STATUSES = [value for value, _label in Rental.STATUS_CHOICES]

# Largest value Rental.total_price (12 digits, 2 decimal places) can store.
MAX_TOTAL_PRICE = Decimal("9999999999.99")

ROLE_OWNER = "owner"
ROLE_RENTER = "renter"


class RentalService:

    @staticmethod
    def compute_days(start_date, end_date) -> int:
        """Inclusive day count: a rental from the 1st to the 3rd lasts 3 days."""
        return math.ceil((end_date - start_date) / timedelta(days=1)) + 1

    @staticmethod
    def get_rental(rental_id):
        try:
            return Rental.objects.select_related("item", "item__owner", "renter").get(pk=rental_id)
        except Rental.DoesNotExist:
            raise NotFound("Rental not found.")

    @staticmethod
    def get_rental_for_party(rental_id, user):
        rental = RentalService.get_rental(rental_id)
        if user.pk not in (rental.item.owner_id, rental.renter_id) and not is_admin(user):
            raise PermissionDenied("You are not a party to this rental.")
        return rental

    @staticmethod
    def list_rentals(user, role=ROLE_RENTER):
        queryset = Rental.objects.select_related("item", "item__owner", "renter").prefetch_related("item__images")
        if role == ROLE_OWNER:
            return queryset.filter(item__owner=user)
        if role == ROLE_RENTER:
            return queryset.filter(renter=user)
        raise ValidationError(f"Invalid role. Must be one of: {ROLE_OWNER}, {ROLE_RENTER}.")

    @staticmethod
    @transaction.atomic
    def create_rental(*, renter, item_id, start_date, end_date, message=None):
        """
        Create a pending rental request. The item's current price is copied
        onto the rental and the total is fixed here.
        """
        item = ItemService.get_item(item_id)

        if item.owner_id == renter.pk:
            raise Conflict("You cannot rent your own item.", code="self_rental")

        if not item.is_available:
            raise ValidationError("This item is not available for rent.")

        days = RentalService.compute_days(start_date, end_date)
        if days < 1:
            raise ValidationError("End date must be on or after the start date.")

        price_per_day = item.price
        total_price = price_per_day * days
        if total_price > MAX_TOTAL_PRICE:
            raise ValidationError("The rental period is too long for this item's price.")

        rental = Rental.objects.create(
            item=item,
            renter=renter,
            start_date=start_date,
            end_date=end_date,
            days=days,
            price_per_day=price_per_day,
            total_price=total_price,
            message=message or None,
        )
        logger.info(f"Rental {rental.id} requested for item {item.id} by {renter.email}")
        return rental

    @staticmethod
    @transaction.atomic
    def change_status(*, rental_id, actor, new_status):
        if new_status not in REQUESTABLE_STATUSES:
            raise ValidationError(f"Invalid status. Must be one of: {', '.join(REQUESTABLE_STATUSES)}.")

        try:
            rental = Rental.objects.select_related("item").get(pk=rental_id)
        except Rental.DoesNotExist:
            raise NotFound("Rental not found.")

        if new_status == Rental.CANCELLED:
            if actor.pk != rental.renter_id:
                raise PermissionDenied("Only the renter can cancel a rental.")
            allowed = RENTER_TRANSITIONS
        else:
            if actor.pk != rental.item.owner_id:
                raise PermissionDenied("Only the item owner can approve, decline or complete a rental.")
            allowed = OWNER_TRANSITIONS

        if new_status not in allowed.get(rental.status, set()):
            raise PermissionDenied(f"Cannot change status from {rental.status} to {new_status}.")

        previous = rental.status
        rental.status = new_status
        rental.save(update_fields=["status", "updated_at"])
        logger.info(f"Rental {rental.id} moved {previous} -> {new_status} by {actor.email}")
        return rental

    @staticmethod
    @transaction.atomic
    def force_status(*, rental_id, new_status, admin):
        """Admin override: any of the five statuses, no transition checks."""
        if new_status not in ALL_STATUSES:
            raise ValidationError(f"Invalid status. Must be one of: {', '.join(ALL_STATUSES)}.")

        try:
            rental = Rental.objects.get(pk=rental_id)
        except Rental.DoesNotExist:
            raise NotFound("Rental not found.")

        previous = rental.status
        rental.status = new_status
        rental.save(update_fields=["status", "updated_at"])
        logger.warning(f"Rental {rental.id} status forced {previous} -> {new_status} by admin {admin.email}")
        return rental
