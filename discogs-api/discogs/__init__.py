"""
Discogs API client: collection, database, marketplace and search services
over one shared request pipeline.
"""
from .client import CURRENCIES, DISCOGS_API, Discogs, Options, from_settings, new
from .errors import (
    CurrencyNotSupported,
    DecodeError,
    DiscogsError,
    InvalidReleaseID,
    InvalidSortKey,
    InvalidUsername,
    TooManyRequests,
    Unauthorized,
    UnknownStatus,
    UserAgentInvalid,
)
from .pagination import Pagination
from .resources import NewListing
from .search import SearchRequest

__all__ = [
    "CURRENCIES",
    "DISCOGS_API",
    "CurrencyNotSupported",
    "DecodeError",
    "Discogs",
    "DiscogsError",
    "InvalidReleaseID",
    "InvalidSortKey",
    "InvalidUsername",
    "NewListing",
    "Options",
    "Pagination",
    "SearchRequest",
    "TooManyRequests",
    "Unauthorized",
    "UnknownStatus",
    "UserAgentInvalid",
    "from_settings",
    "new",
]
