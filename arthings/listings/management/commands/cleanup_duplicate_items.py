from django.core.management.base import BaseCommand
from django.db import transaction
from django.db.models import Count, Min

from arthings.listings.models import Item
from arthings.listings.services.item_service import ItemService


class Command(BaseCommand):
    help = "Delete duplicate listings (same owner and title), keeping the oldest one"

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Only report what would be deleted",
        )

    def handle(self, *args, **options):
        duplicates = (
            Item.objects.values("owner_id", "title")
            .annotate(copies=Count("id"), keep_id=Min("id"))
            .filter(copies__gt=1)
            .order_by()
        )

        if not duplicates:
            self.stdout.write(self.style.SUCCESS("No duplicates found"))
            return

        total_deleted = 0
        for dup in duplicates:
            extra = Item.objects.filter(owner_id=dup["owner_id"], title=dup["title"]).exclude(id=dup["keep_id"])
            self.stdout.write(
                f'"{dup["title"]}" (user {dup["owner_id"]}): {dup["copies"]} copies, keeping id {dup["keep_id"]}'
            )
            if options["dry_run"]:
                continue
            with transaction.atomic():
                for item in extra:
                    ItemService.delete_item(item)
                    total_deleted += 1

        if options["dry_run"]:
            self.stdout.write(self.style.WARNING("Dry run, nothing deleted"))
        else:
            self.stdout.write(self.style.SUCCESS(f"Removed {total_deleted} duplicate items"))
