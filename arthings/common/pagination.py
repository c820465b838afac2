import math

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class AdminPagination(PageNumberPagination):
    page_size = 20
    page_size_query_param = "limit"
    max_page_size = 100

    def get_paginated_response(self, data):
        total = self.page.paginator.count
        page_size = self.page.paginator.per_page
        return Response({
            "results": data,
            "total": total,
            "page": self.page.number,
            "total_pages": math.ceil(total / page_size) if page_size else 0,
        })

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                "results": schema,
                "total": {"type": "integer"},
                "page": {"type": "integer"},
                "total_pages": {"type": "integer"},
            },
        }
