import logging

from django.db import IntegrityError, transaction
from rest_framework.exceptions import NotFound

from arthings.common.exceptions import Conflict
from ..models import Favorite
from .item_service import ItemService

logger = logging.getLogger(__name__)


class FavoriteService:

    @staticmethod
    def list_favorites(user):
        return (
            Favorite.objects.filter(user=user)
            .select_related("item", "item__owner")
            .prefetch_related("item__images")
        )

    @staticmethod
    def add_favorite(user, item_id):
        item = ItemService.get_item(item_id)
        if Favorite.objects.filter(user=user, item=item).exists():
            raise Conflict("Product is already in favorites.")
        try:
            with transaction.atomic():
                favorite = Favorite.objects.create(user=user, item=item)
        except IntegrityError:
            raise Conflict("Product is already in favorites.")
        logger.info(f"{user.email} added item {item.id} to favorites")
        return favorite

    @staticmethod
    def remove_favorite(user, item_id):
        deleted, _ = Favorite.objects.filter(user=user, item_id=item_id).delete()
        if not deleted:
            raise NotFound("Favorite not found.")
        logger.info(f"{user.email} removed item {item_id} from favorites")

    @staticmethod
    def is_favorite(user, item_id):
        if not user or not user.is_authenticated:
            return False
        return Favorite.objects.filter(user=user, item_id=item_id).exists()
