import math

from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response

from base import Constants


class PagedList(PageNumberPagination):
    """ A customised DRF's paginator """

    page_size = Constants.DEFAULT_PAGINATOR_PAGE_SIZE
    page_size_query_param = "limit"  # Optionally allow the client to override the default page size
    max_page_size = Constants.MAX_PAGINATOR_PAGE_SIZE

    def get_paginated_response(self, data):
        limit = self.get_page_size(self.request)
        total = self.page.paginator.count
        return Response({
            "data": data,
            "pagination": {
                "page": self.page.number,
                "limit": limit,
                "total": total,
                "totalPages": math.ceil(total / limit) if limit else 0,
                "hasNext": self.page.has_next(),
                "hasPrevious": self.page.has_previous(),
            }
        })
