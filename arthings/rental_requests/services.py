import logging

from .models import RentalRequest

logger = logging.getLogger(__name__)

LIST_LIMIT = 100


class RentalRequestService:

    @staticmethod
    def create_request(user, validated_data):
        request = RentalRequest.objects.create(user=user, **validated_data)
        logger.info(f"Rental request {request.id} posted by {user.email}")
        return request

    @staticmethod
    def delete_request(rental_request, actor):
        request_id = rental_request.id
        rental_request.delete()
        logger.info(f"Rental request {request_id} deleted by {actor.email}")
