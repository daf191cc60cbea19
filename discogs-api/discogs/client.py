"""
Discogs API client. Start with api_root() to verify credentials.

    client = new(user_agent="MyApp/1.0 +https://example.com", token="...")
    client.database.release(249504)
    client.search.search(q="nevermind", type="release")

Inside the Django project, from_settings() builds the client from the
DISCOGS_* settings.
"""
from dataclasses import dataclass, replace
from types import MappingProxyType

from django.conf import settings

from .collection import CollectionService
from .database import DatabaseService
from .errors import CurrencyNotSupported, UserAgentInvalid
from .marketplace import MarketplaceService
from .request import Requester
from .resources import ApiRoot
from .search import SearchService

DISCOGS_API = "https://api.discogs.com"
DEFAULT_CURRENCY = "USD"
CURRENCIES = ("USD", "GBP", "EUR", "CAD", "AUD", "JPY", "CHF", "MXN", "BRL", "NZD", "SEK", "ZAR")


@dataclass(frozen=True)
class Options:
    """Client configuration. user_agent is required, token is needed for
    search and for anything touching a user's own data."""

    url: str = DISCOGS_API
    currency: str = ""
    user_agent: str = ""
    token: str = ""


def currency(code):
    """Validate the marketplace currency, defaulting to USD when empty."""
    if not code:
        return DEFAULT_CURRENCY
    if code not in CURRENCIES:
        raise CurrencyNotSupported()
    return code


def _headers(options):
    """Build request headers for Discogs API (User-Agent required, token optional)."""
    headers = {"User-Agent": options.user_agent}
    if options.token:
        headers["Authorization"] = f"Discogs token={options.token}"
    return MappingProxyType(headers)


class Discogs:
    """Entry point holding the four services of one configured client."""

    def __init__(self, options):
        if options is None or not options.user_agent:
            raise UserAgentInvalid()
        cur = currency(options.currency)
        url = (options.url or DISCOGS_API).rstrip("/")

        self.options = replace(options, url=url, currency=cur)
        self.headers = _headers(self.options)
        self._requester = Requester(self.headers)

        self._collection = CollectionService(self._requester, f"{url}/users")
        self._database = DatabaseService(self._requester, url, cur)
        self._marketplace = MarketplaceService(self._requester, f"{url}/marketplace", f"{url}/users", cur)
        self._search = SearchService(self._requester, f"{url}/database/search")

    @property
    def currency(self):
        return self.options.currency

    @property
    def collection(self):
        return self._collection

    @property
    def database(self):
        return self._database

    @property
    def marketplace(self):
        return self._marketplace

    @property
    def search(self):
        return self._search

    def api_root(self):
        """GET api.discogs.com/ to verify client and credentials work."""
        return self._requester.get(f"{self.options.url}/", None, ApiRoot())

    def __repr__(self):
        return f"<Discogs {self.options.url} currency={self.currency}>"


def new(options=None, **kwargs):
    """Return a configured client from Options and/or keyword overrides."""
    if options is None:
        options = Options(**kwargs)
    elif kwargs:
        options = replace(options, **kwargs)
    return Discogs(options)


def from_settings(**overrides):
    """Build a client from DISCOGS_API_BASE_URL, DISCOGS_CURRENCY,
    DISCOGS_USER_AGENT and DISCOGS_TOKEN. Keyword overrides win."""
    options = Options(
        url=getattr(settings, "DISCOGS_API_BASE_URL", "") or DISCOGS_API,
        currency=getattr(settings, "DISCOGS_CURRENCY", "") or "",
        user_agent=getattr(settings, "DISCOGS_USER_AGENT", "") or "",
        token=getattr(settings, "DISCOGS_TOKEN", "") or "",
    )
    return new(options, **overrides)
