"""
Request pipeline shared by every Discogs service.

One synchronous HTTP exchange per call: attach the client's headers, send,
map the status to an error or decode the JSON body into the destination.
Transport errors from requests and body serialization errors propagate
unchanged; nothing is retried.
"""
import json
import logging

import requests

from .errors import DecodeError, TooManyRequests, Unauthorized, UnknownStatus
from .resources import Resource

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class Requester:
    """Dispatches requests with the read-only headers of one client."""

    def __init__(self, headers):
        self.headers = headers

    def get(self, url, params=None, into=None):
        return self.with_method("GET", url, params, into)

    def with_method(self, method, url, params=None, into=None):
        return self.send(method, url, params, None, into)

    def with_json_body(self, method, url, params, body, into=None):
        if isinstance(body, Resource):
            body = body.to_json()
        data = json.dumps(body)
        return self.send(method, url, params, data, into)

    def send(self, method, url, params, data, into):
        """Perform the exchange and return the populated destination.

        With no destination the decoded JSON is returned as-is. A 204 returns
        the destination untouched (None when there is none).
        """
        headers = dict(self.headers)
        headers["Content-Type"] = JSON_CONTENT_TYPE

        logger.debug(f"Discogs {method} {url} params={params}")
        with requests.request(method, url, params=params, data=data, headers=headers) as response:
            return _handle_response(response, into)


def _handle_response(response, into):
    status_code = response.status_code
    if status_code != requests.codes.ok:
        if status_code == requests.codes.no_content:
            return into
        if status_code == requests.codes.unauthorized:
            logger.info(f"Discogs {response.url} returned 401")
            raise Unauthorized()
        if status_code == requests.codes.too_many_requests:
            logger.warning(f"Discogs rate limit reached on {response.url}")
            raise TooManyRequests()
        status = f"{status_code} {response.reason or ''}".strip()
        logger.info(f"Discogs {response.url} returned {status}")
        raise UnknownStatus(status_code, status)

    body = response.content
    if into is not None:
        return into.load_json(body)
    try:
        return json.loads(body)
    except ValueError as e:
        raise DecodeError(str(e)) from e
