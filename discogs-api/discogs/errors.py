"""
Errors raised by the Discogs API client. Construction and argument errors are
also ValueErrors; HTTP status errors are raised by the request pipeline.
"""


class DiscogsError(Exception):
    """Base class for every error raised by the client."""

    message = "discogs error"

    def __init__(self, message=None):
        super().__init__(message or self.message)


class UserAgentInvalid(DiscogsError, ValueError):
    message = "invalid user-agent"


class CurrencyNotSupported(DiscogsError, ValueError):
    message = "currency does not supported"


class InvalidReleaseID(DiscogsError, ValueError):
    message = "invalid release id"


class InvalidUsername(DiscogsError, ValueError):
    message = "invalid username"


class InvalidSortKey(DiscogsError, ValueError):
    message = "invalid sort key"


class Unauthorized(DiscogsError):
    message = "authentication required"


class TooManyRequests(DiscogsError):
    message = "too many requests"


class UnknownStatus(DiscogsError):
    """Any non-200 status without a dedicated error. Keeps the status line."""

    def __init__(self, status_code, status):
        self.status_code = status_code
        self.status = status
        super().__init__(f"unknown error: {status}")


class DecodeError(DiscogsError, ValueError):
    """A 200 response whose body is not JSON or does not fit the destination."""
