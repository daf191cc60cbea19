"""
Pagination and sorting parameters shared by list endpoints.
"""
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidSortKey

SORT_ORDERS = ("asc", "desc")


@dataclass(frozen=True)
class Pagination:
    sort: str = ""
    sort_order: str = ""
    page: Optional[int] = None
    per_page: Optional[int] = None

    def params(self, sort_keys=()):
        """Query parameters for an endpoint accepting the given sort keys.

        Raises InvalidSortKey before any request is made when the sort key or
        order is not accepted by the endpoint.
        """
        params = {}
        if self.sort:
            if self.sort not in sort_keys:
                raise InvalidSortKey(f"invalid sort key: {self.sort}")
            params["sort"] = self.sort
        if self.sort_order:
            if self.sort_order not in SORT_ORDERS:
                raise InvalidSortKey(f"invalid sort order: {self.sort_order}")
            params["sort_order"] = self.sort_order
        if self.page is not None:
            params["page"] = str(self.page)
        if self.per_page is not None:
            params["per_page"] = str(self.per_page)
        return params


def pagination_params(pagination, sort_keys=()):
    if pagination is None:
        return {}
    return pagination.params(sort_keys)
