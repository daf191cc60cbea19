"""
Marketplace service: listings, inventories, price suggestions and stats.
"""
from . import validators
from .pagination import pagination_params
from .resources import (
    Inventory,
    Listing,
    PriceSuggestions,
    Stats,
)

INVENTORY_SORT_KEYS = ("listed", "price", "item", "artist", "label", "catno", "audio", "status", "location")


class MarketplaceService:
    def __init__(self, requester, url, users_url, currency):
        self._requester = requester
        self.url = url
        self.users_url = users_url
        self.currency = currency

    def inventory(self, username, pagination=None):
        """GET /users/{username}/inventory: a seller's listings."""
        params = pagination_params(pagination, INVENTORY_SORT_KEYS)
        username = validators.username(username)
        return self._requester.get(f"{self.users_url}/{username}/inventory", params, Inventory())

    def listing(self, listing_id):
        return self._requester.get(
            f"{self.url}/listings/{listing_id}", {"curr_abbr": self.currency}, Listing()
        )

    def edit_listing(self, listing_id, new_listing):
        """POST /marketplace/listings/{id}. Discogs answers 204 on success."""
        return self._requester.with_json_body(
            "POST", f"{self.url}/listings/{listing_id}", {"curr_abbr": self.currency}, new_listing
        )

    def delete_listing(self, listing_id):
        return self._requester.with_method("DELETE", f"{self.url}/listings/{listing_id}")

    def price_suggestions(self, release_id):
        """GET suggested prices per condition. Needs a seller token."""
        release_id = validators.release_id(release_id)
        return self._requester.get(
            f"{self.url}/price_suggestions/{release_id}", None, PriceSuggestions()
        )

    def release_statistics(self, release_id):
        release_id = validators.release_id(release_id)
        return self._requester.get(
            f"{self.url}/stats/{release_id}", {"curr_abbr": self.currency}, Stats()
        )
