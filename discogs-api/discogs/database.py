"""
Database service: releases, ratings, artists, labels and masters.
"""
from . import validators
from .pagination import pagination_params
from .resources import (
    Artist,
    ArtistReleases,
    Label,
    LabelReleases,
    Master,
    MasterVersions,
    Release,
    ReleaseRating,
    UserReleaseRating,
)

ARTIST_RELEASES_SORT_KEYS = ("year", "title", "format")
MASTER_VERSIONS_SORT_KEYS = ("released", "title", "format", "label", "catno", "country")


class DatabaseService:
    def __init__(self, requester, url, currency):
        self._requester = requester
        self.url = url
        self.currency = currency

    def release(self, release_id):
        """GET /releases/{id}, with prices in the client currency."""
        release_id = validators.release_id(release_id)
        return self._requester.get(
            f"{self.url}/releases/{release_id}",
            {"curr_abbr": self.currency},
            Release(),
        )

    def release_rating(self, release_id):
        """GET /releases/{id}/rating: community average and vote count."""
        release_id = validators.release_id(release_id)
        return self._requester.get(f"{self.url}/releases/{release_id}/rating", None, ReleaseRating())

    def release_rating_by_user(self, release_id, username):
        return self._requester.get(self._user_rating_url(release_id, username), None, UserReleaseRating())

    def delete_release_rating(self, release_id, username):
        return self._requester.with_method("DELETE", self._user_rating_url(release_id, username))

    def artist(self, artist_id):
        return self._requester.get(f"{self.url}/artists/{artist_id}", None, Artist())

    def artist_releases(self, artist_id, pagination=None):
        """GET /artists/{id}/releases, sortable by year, title or format."""
        params = pagination_params(pagination, ARTIST_RELEASES_SORT_KEYS)
        return self._requester.get(f"{self.url}/artists/{artist_id}/releases", params, ArtistReleases())

    def label(self, label_id):
        return self._requester.get(f"{self.url}/labels/{label_id}", None, Label())

    def label_releases(self, label_id, pagination=None):
        """GET /labels/{id}/releases. The endpoint accepts no sort key."""
        params = pagination_params(pagination)
        return self._requester.get(f"{self.url}/labels/{label_id}/releases", params, LabelReleases())

    def master(self, master_id):
        return self._requester.get(f"{self.url}/masters/{master_id}", None, Master())

    def master_versions(self, master_id, pagination=None):
        params = pagination_params(pagination, MASTER_VERSIONS_SORT_KEYS)
        return self._requester.get(f"{self.url}/masters/{master_id}/versions", params, MasterVersions())

    def _user_rating_url(self, release_id, username):
        release_id = validators.release_id(release_id)
        username = validators.username(username)
        return f"{self.url}/releases/{release_id}/rating/{username}"
