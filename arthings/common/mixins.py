from .identifiers import parse_id


class PrefixedLookupMixin:
    """Accepts ``<prefix>-<pk>`` or a bare pk in the detail route of a viewset."""
    lookup_prefix = None
    lookup_label = "ID"

    def get_object(self):
        lookup_url_kwarg = self.lookup_url_kwarg or self.lookup_field
        self.kwargs[lookup_url_kwarg] = parse_id(
            self.kwargs[lookup_url_kwarg], self.lookup_prefix, self.lookup_label
        )
        return super().get_object()
