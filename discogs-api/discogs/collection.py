"""
Collection service: a user's folders and the releases filed in them.
Reading a private collection or changing folders requires a token.
"""
from . import validators
from .pagination import pagination_params
from .resources import (
    CollectionFolders,
    CollectionItems,
    CollectionValue,
    Folder,
)

COLLECTION_ITEMS_SORT_KEYS = ("label", "artist", "title", "catno", "format", "rating", "added", "year")


class CollectionService:
    def __init__(self, requester, url):
        self._requester = requester
        self.url = url

    def collection_folders(self, username):
        return self._requester.get(f"{self._collection_url(username)}/folders", None, CollectionFolders())

    def folder(self, username, folder_id):
        return self._requester.get(self._folder_url(username, folder_id), None, Folder())

    def rename_folder(self, username, folder_id, name):
        return self._requester.with_json_body(
            "POST", self._folder_url(username, folder_id), None, {"name": name}, Folder()
        )

    def delete_folder(self, username, folder_id):
        """DELETE a folder. Discogs refuses to delete folders that are not empty."""
        return self._requester.with_method("DELETE", self._folder_url(username, folder_id))

    def collection_items_by_folder(self, username, folder_id, pagination=None):
        """GET the releases in a folder. Folder 0 holds every release."""
        params = pagination_params(pagination, COLLECTION_ITEMS_SORT_KEYS)
        return self._requester.get(
            f"{self._folder_url(username, folder_id)}/releases", params, CollectionItems()
        )

    def collection_items_by_release(self, username, release_id):
        """GET every instance of a release in the user's collection."""
        release_id = validators.release_id(release_id)
        return self._requester.get(
            f"{self._collection_url(username)}/releases/{release_id}", None, CollectionItems()
        )

    def delete_release_from_folder(self, username, folder_id, release_id, instance_id):
        release_id = validators.release_id(release_id)
        return self._requester.with_method(
            "DELETE",
            f"{self._folder_url(username, folder_id)}/releases/{release_id}/instances/{instance_id}",
        )

    def collection_value(self, username):
        """GET the minimum, median and maximum value of the collection."""
        return self._requester.get(f"{self._collection_url(username)}/value", None, CollectionValue())

    def _collection_url(self, username):
        return f"{self.url}/{validators.username(username)}/collection"

    def _folder_url(self, username, folder_id):
        return f"{self._collection_url(username)}/folders/{folder_id}"
