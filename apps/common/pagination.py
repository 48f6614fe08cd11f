# apps/common/pagination.py
"""
Global pagination for the CostCook API.

Applied through REST_FRAMEWORK["DEFAULT_PAGINATION_CLASS"], so every list
endpoint accepts:

    - limit: Number of items to return (default: 10, max: 100)
    - offset: Starting position in the result set (default: 0)

    GET /api/recipes/?limit=20&offset=20    → Items 21-40

Response format:
    {"count": 150, "next": "...", "previous": "...", "results": [...]}
"""

from rest_framework.pagination import LimitOffsetPagination


class StandardLimitOffsetPagination(LimitOffsetPagination):
    """
    LimitOffsetPagination with a default page size and an upper bound.
    """

    default_limit = 10
    max_limit = 100

    limit_query_param = 'limit'
    offset_query_param = 'offset'

    def get_limit(self, request):
        """
        Clamp the limit to at least 1; DRF already caps it at max_limit.
        """
        limit = super().get_limit(request)

        if limit is not None and limit < 1:
            return self.default_limit

        return limit
