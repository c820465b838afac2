from django.core.management.base import BaseCommand
from django.db import transaction

from arthings.legal.models import LegalDocument
from arthings.listings.models import Category, City

CATEGORIES = [
    {"id": "electronics", "name": "Electronics", "name_uk": "Електроніка", "icon": "📷"},
    {"id": "emergency", "name": "Emergency & Survival", "name_uk": "Надзвичайні ситуації", "icon": "🔦"},
    {"id": "tools", "name": "Tools & Equipment", "name_uk": "Інструменти", "icon": "🔧"},
    {"id": "outdoor", "name": "Outdoor & Camping", "name_uk": "Активний відпочинок", "icon": "⛺"},
    {"id": "home", "name": "Home & Garden", "name_uk": "Дім і сад", "icon": "🏠"},
    {"id": "sports", "name": "Sports & Fitness", "name_uk": "Спорт та фітнес", "icon": "⚽"},
    {"id": "vehicles", "name": "Vehicles & Transport", "name_uk": "Транспорт", "icon": "🚗"},
    {"id": "music", "name": "Music & Audio", "name_uk": "Музика та аудіо", "icon": "🎸"},
    {"id": "party", "name": "Party & Events", "name_uk": "Свята та події", "icon": "🎉"},
    {"id": "baby", "name": "Baby & Kids", "name_uk": "Дитячі товари", "icon": "👶"},
    {"id": "fashion", "name": "Fashion & Accessories", "name_uk": "Мода та аксесуари", "icon": "👗"},
    {"id": "other", "name": "Other", "name_uk": "Інше", "icon": "📦"},
]

CITIES = [
    "Kyiv", "Kharkiv", "Odesa", "Dnipro", "Donetsk", "Zaporizhzhia",
    "Lviv", "Kryvyi Rih", "Mykolaiv", "Mariupol", "Luhansk", "Vinnytsia",
    "Makiivka", "Simferopol", "Kherson", "Poltava", "Chernihiv", "Cherkasy",
    "Zhytomyr", "Sumy", "Rivne", "Ivano-Frankivsk", "Ternopil", "Lutsk", "Uzhhorod",
]

LEGAL_DOCUMENTS = [
    {"type": "public-offer", "version": "1.0", "file": "legal/PUBLIC-OFFER-AGREEMENT.docx"},
    {"type": "privacy-policy", "version": "1.0", "file": "legal/privacy-policy-arthings.docx"},
    {"type": "terms-of-performance", "version": "1.0", "file": "legal/terms-of-performance-arthings.docx"},
]


class Command(BaseCommand):
    help = "Load categories, cities and legal documents into the database"

    @transaction.atomic
    def handle(self, *args, **options):
        for entry in CATEGORIES:
            defaults = {key: value for key, value in entry.items() if key != "id"}
            Category.objects.update_or_create(id=entry["id"], defaults=defaults)
        self.stdout.write(self.style.SUCCESS(f"Loaded {len(CATEGORIES)} categories"))

        for name in CITIES:
            City.objects.get_or_create(name=name)
        self.stdout.write(self.style.SUCCESS(f"Loaded {len(CITIES)} cities"))

        for doc in LEGAL_DOCUMENTS:
            LegalDocument.objects.update_or_create(
                type=doc["type"],
                defaults={"version": doc["version"], "file": doc["file"]},
            )
        self.stdout.write(self.style.SUCCESS(f"Loaded {len(LEGAL_DOCUMENTS)} legal documents"))
