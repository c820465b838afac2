import django_filters

from arthings.common.identifiers import parse_id, USER_PREFIX
from .models import RentalRequest


class RentalRequestFilter(django_filters.FilterSet):
    category = django_filters.CharFilter(field_name="category")
    city = django_filters.CharFilter(field_name="city")
    user_id = django_filters.CharFilter(method="filter_user")

    class Meta:
        model = RentalRequest
        fields = []

    def filter_user(self, queryset, name, value):
        return queryset.filter(user_id=parse_id(value, USER_PREFIX, "user ID"))
