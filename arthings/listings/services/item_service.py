import logging

from django.db import transaction
from django.db.models import F, Max
from rest_framework.exceptions import NotFound

from ..models import Item, ItemImage

logger = logging.getLogger(__name__)


class ItemService:

    @staticmethod
    def get_item(item_id):
        try:
            return Item.objects.select_related("owner").get(pk=item_id)
        except Item.DoesNotExist:
            raise NotFound("Product not found.")

    @staticmethod
    @transaction.atomic
    def create_item(owner, validated_data, images=None):
        """Create the listing and its images together; a failed image insert rolls back the listing."""
        item = Item.objects.create(owner=owner, **validated_data)
        ItemService.add_images(item, images)
        logger.info(f"Item {item.id} created by {owner.email}")
        return item

    @staticmethod
    @transaction.atomic
    def update_item(item, validated_data, images=None):
        for field, value in validated_data.items():
            setattr(item, field, value)
        item.save()
        ItemService.add_images(item, images)
        logger.info(f"Item {item.id} updated")
        return item

    @staticmethod
    def add_images(item, images):
        """Append images after the item's current highest sort order."""
        if not images:
            return []
        current_max = item.images.aggregate(max_order=Max("sort_order"))["max_order"]
        start = 0 if current_max is None else current_max + 1
        return [
            ItemImage.objects.create(item=item, image=image, sort_order=start + index)
            for index, image in enumerate(images)
        ]

    @staticmethod
    @transaction.atomic
    def delete_item(item, actor=None):
        item_id = item.id
        files = [(img.image.storage, img.image.name) for img in item.images.all() if img.image]
        item.delete()
        transaction.on_commit(lambda: ItemService._delete_files(files))
        logger.info(f"Item {item_id} deleted{f' by {actor.email}' if actor else ''}")

    @staticmethod
    def _delete_files(files):
        for storage, name in files:
            try:
                storage.delete(name)
            except Exception:
                logger.exception(f"Could not delete image file {name}")

    @staticmethod
    def increment_views(item):
        """
        Bump the view counter. Concurrent reads may race; the counter is approximate.
        """
        item.views = F("views") + 1
        item.save(update_fields=["views"])
        item.refresh_from_db(fields=["views"])
        return item
