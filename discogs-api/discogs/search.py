"""
Search service: GET /database/search. Discogs requires a token for search.
"""
from dataclasses import dataclass, fields
from typing import Optional

from .resources import Search


@dataclass(frozen=True)
class SearchRequest:
    """Search filters. Empty fields are not sent.

    type is one of "release", "master", "artist" or "label".
    """

    q: str = ""
    type: str = ""
    title: str = ""
    release_title: str = ""
    credit: str = ""
    artist: str = ""
    anv: str = ""
    label: str = ""
    genre: str = ""
    style: str = ""
    country: str = ""
    year: str = ""
    format: str = ""
    catno: str = ""
    barcode: str = ""
    track: str = ""
    submitter: str = ""
    contributor: str = ""
    page: Optional[int] = None
    per_page: Optional[int] = None

    def params(self):
        params = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value == "":
                continue
            params[f.name] = str(value)
        return params


class SearchService:
    def __init__(self, requester, url):
        self._requester = requester
        self.url = url

    def search(self, request=None, **filters):
        """Search releases, masters, artists and labels.

        Takes a SearchRequest or the same filters as keyword arguments,
        e.g. search(q="nevermind", type="release", per_page=20).
        """
        if request is None:
            request = SearchRequest(**filters)
        elif filters:
            raise TypeError("pass either a SearchRequest or keyword filters, not both")
        return self._requester.get(self.url, request.params(), Search())
