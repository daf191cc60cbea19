"""
Argument checks run before a request is sent.
"""
from urllib.parse import quote

from .errors import InvalidReleaseID, InvalidUsername


def username(value):
    """Return the username quoted for use as a single path segment."""
    if not isinstance(value, str) or not value or value != value.strip():
        raise InvalidUsername()
    return quote(value, safe="")


def release_id(value):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidReleaseID()
    return value
