"""
Prefixed identifiers at the API boundary.

Rows are addressed internally by their integer primary key. Clients see
and may send ``prod-12`` style strings; a bare ``12`` is accepted as well.
"""
from rest_framework import serializers
from rest_framework.exceptions import ValidationError

ITEM_PREFIX = "prod"
USER_PREFIX = "user"
RENTAL_PREFIX = "rental"
FAVORITE_PREFIX = "fav"


def format_id(prefix, pk):
    if pk is None:
        return None
    return f"{prefix}-{pk}"


def parse_id(value, prefix, label="ID"):
    """Return the integer key for ``value`` or raise a ValidationError."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label}.")
    if isinstance(value, int):
        pk = value
    else:
        raw = str(value or "").strip()
        if raw.startswith(f"{prefix}-"):
            raw = raw[len(prefix) + 1:]
        if not raw.isdigit():
            raise ValidationError(f"Invalid {label}.")
        pk = int(raw)
    if pk < 1:
        raise ValidationError(f"Invalid {label}.")
    return pk


class PrefixedIdField(serializers.Field):
    """Serializes an integer key as ``<prefix>-<pk>`` and parses both forms back."""

    def __init__(self, prefix, label_text="ID", **kwargs):
        self.prefix = prefix
        self.label_text = label_text
        super().__init__(**kwargs)

    def to_representation(self, value):
        return format_id(self.prefix, getattr(value, "pk", value))

    def to_internal_value(self, data):
        return parse_id(data, self.prefix, self.label_text)
