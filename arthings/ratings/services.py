import logging

import bleach
from django.db import IntegrityError, transaction
from django.db.models import Avg, Count
from rest_framework.exceptions import PermissionDenied, ValidationError

from arthings.common.exceptions import Conflict
from arthings.rentals.models import Rental
from arthings.rentals.services import RentalService
from .models import Rating

logger = logging.getLogger(__name__)

COMMENT_MAX_LENGTH = 1000
USER_RATINGS_LIMIT = 50


class RatingService:

    @staticmethod
    def clamp_score(score) -> int:
        return min(Rating.MAX_SCORE, max(Rating.MIN_SCORE, int(score)))

    @staticmethod
    def clean_comment(comment):
        if not comment:
            return None
        cleaned = bleach.clean(str(comment), tags=[], strip=True).strip()[:COMMENT_MAX_LENGTH]
        return cleaned or None

    @staticmethod
    def submit_rating(*, rater, rental_id, to_user_id, score, comment=None):
        """
        Record ``rater``'s rating of the other party of a completed rental.

        The owner may rate the renter and the renter may rate the owner, once
        each per rental.
        """
        rental = RentalService.get_rental(rental_id)

        if rental.status != Rental.COMPLETED:
            raise ValidationError("You can only rate after the rental is completed.")

        owner_id = rental.item.owner_id
        renter_id = rental.renter_id
        if rater.pk == owner_id:
            counterparty_id, label = renter_id, "renter"
        elif rater.pk == renter_id:
            counterparty_id, label = owner_id, "owner"
        else:
            raise PermissionDenied("You can only rate for your own rentals.")

        if to_user_id != counterparty_id:
            raise ValidationError(f"You can only rate the {label}.")

        if Rating.objects.filter(rental=rental, from_user=rater, to_user_id=to_user_id).exists():
            raise Conflict("You have already rated this user for this rental.")

        try:
            with transaction.atomic():
                rating = Rating.objects.create(
                    rental=rental,
                    from_user=rater,
                    to_user_id=to_user_id,
                    score=RatingService.clamp_score(score),
                    comment=RatingService.clean_comment(comment),
                )
        except IntegrityError:
            raise Conflict("You have already rated this user for this rental.")

        logger.info(f"Rating {rating.id} ({rating.score}/5) on rental {rental.id} by {rater.email}")
        return rating

    @staticmethod
    def eligibility(rental, user):
        """
        Who ``user`` may still rate on ``rental``. Derived from the rating rows
        every time; nothing about eligibility is stored.
        """
        result = {
            "can_rate_owner": False,
            "can_rate_renter": False,
            "already_rated_owner": False,
            "already_rated_renter": False,
            "owner_id": None,
            "owner_name": None,
            "renter_id": None,
            "renter_name": None,
        }
        if rental is None or user is None or not user.is_authenticated:
            return result

        owner = rental.item.owner
        renter = rental.renter
        result.update({
            "owner_id": owner.pk,
            "owner_name": owner.name or None,
            "renter_id": renter.pk,
            "renter_name": renter.name or None,
        })
        if rental.status != Rental.COMPLETED:
            return result

        rated = set(
            Rating.objects
            .filter(rental=rental, from_user=user)
            .values_list("to_user_id", flat=True)
        )
        result["already_rated_owner"] = owner.pk in rated
        result["already_rated_renter"] = renter.pk in rated
        if user.pk == renter.pk:
            result["can_rate_owner"] = not result["already_rated_owner"]
        if user.pk == owner.pk:
            result["can_rate_renter"] = not result["already_rated_renter"]
        return result

    @staticmethod
    def can_rate(rental_id, user):
        try:
            rental = Rental.objects.select_related("item__owner", "renter").get(pk=rental_id)
        except Rental.DoesNotExist:
            rental = None
        return RatingService.eligibility(rental, user)

    @staticmethod
    def rental_ratings(rental_id, user):
        ratings = (
            Rating.objects
            .filter(rental_id=rental_id)
            .select_related("from_user", "to_user")
            .order_by("created_at", "id")
        )
        return {
            "ratings": ratings,
            **RatingService.can_rate(rental_id, user),
        }

    @staticmethod
    def user_summary(user_id):
        received = Rating.objects.filter(to_user_id=user_id)
        aggregate = received.aggregate(average=Avg("score"), count=Count("id"))
        average = aggregate["average"]
        return {
            "ratings": received.select_related("from_user", "rental__item")[:USER_RATINGS_LIMIT],
            "average_score": round(average, 1) if average is not None else None,
            "total_count": aggregate["count"],
        }
