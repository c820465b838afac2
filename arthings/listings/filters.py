import django_filters
from django.db.models import Q

from arthings.common.identifiers import parse_id, USER_PREFIX
from .models import Item


class ItemFilter(django_filters.FilterSet):
    SORT_ORDERING = {
        "newest": ("-created_at", "-id"),
        "price-asc": ("price", "-id"),
        "price-desc": ("-price", "-id"),
        "popular": ("-views", "-id"),
    }

    search = django_filters.CharFilter(method="filter_search")
    category = django_filters.CharFilter(field_name="category")
    min_price = django_filters.NumberFilter(field_name="price", lookup_expr="gte")
    max_price = django_filters.NumberFilter(field_name="price", lookup_expr="lte")
    available = django_filters.BooleanFilter(field_name="is_available")
    city = django_filters.CharFilter(field_name="city", lookup_expr="iexact")
    user_id = django_filters.CharFilter(method="filter_user")
    sort = django_filters.ChoiceFilter(
        choices=[(key, key) for key in SORT_ORDERING],
        method="filter_sort",
    )

    class Meta:
        model = Item
        fields = []

    def filter_search(self, queryset, name, value):
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(Q(title__icontains=value) | Q(description__icontains=value))

    def filter_user(self, queryset, name, value):
        return queryset.filter(owner_id=parse_id(value, USER_PREFIX, "user ID"))

    def filter_sort(self, queryset, name, value):
        return queryset.order_by(*self.SORT_ORDERING[value])
