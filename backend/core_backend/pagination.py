import math

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardPagination(PageNumberPagination):
    """
    Page-number pagination driven by ``?pageIndex=`` (1-based) and ``?pageSize=``.

    Responses look like::

        {"<results_key>": [...], "pagination": {"pageIndex": 1, "pageSize": 10, "totalPages": 3}}

    Views set ``results_key`` on the paginator (defaults to "results").
    """

    page_query_param = "pageIndex"
    page_size_query_param = "pageSize"
    page_size = 10
    max_page_size = 100
    results_key = "results"

    def get_paginated_response(self, data):
        page_size = self.page.paginator.per_page
        total_pages = math.ceil(self.page.paginator.count / page_size) if page_size else 0
        return Response(
            {
                self.results_key: data,
                "pagination": {
                    "pageIndex": self.page.number,
                    "pageSize": page_size,
                    "totalPages": total_pages,
                },
            }
        )

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                self.results_key: schema,
                "pagination": {
                    "type": "object",
                    "properties": {
                        "pageIndex": {"type": "integer"},
                        "pageSize": {"type": "integer"},
                        "totalPages": {"type": "integer"},
                    },
                },
            },
        }
