"""
Tests for the request pipeline: status classification, decoding and bodies.
"""
from typing import Optional
from unittest import mock

import requests
import responses
from django.test import SimpleTestCase
from responses import matchers

from discogs.errors import DecodeError, TooManyRequests, Unauthorized, UnknownStatus
from discogs.request import Requester
from discogs.resources import Release, Resource

URL = "https://discogs.test/thing"
HEADERS = {"User-Agent": "Agent/1.0"}


class Thing(Resource):
    id: Optional[int] = None
    name: Optional[str] = None


class StatusTests(SimpleTestCase):
    def setUp(self):
        self.requester = Requester(HEADERS)

    @responses.activate
    def test_200_decodes_into_destination(self):
        responses.add(responses.GET, URL, json={"id": 42})
        thing = self.requester.get(URL, None, Thing())
        self.assertEqual(thing.id, 42)
        self.assertIsNone(thing.name)

    @responses.activate
    def test_200_populates_the_given_instance(self):
        responses.add(responses.GET, URL, json={"id": 42, "name": "x"})
        destination = Thing()
        result = self.requester.get(URL, None, destination)
        self.assertIs(result, destination)
        self.assertEqual(destination.name, "x")

    @responses.activate
    def test_200_without_destination_returns_json(self):
        responses.add(responses.GET, URL, json=[1, 2, 3])
        self.assertEqual(self.requester.get(URL), [1, 2, 3])

    @responses.activate
    def test_204_leaves_destination_unchanged(self):
        responses.add(responses.DELETE, URL, status=204)
        destination = Thing(id=7, name="kept")
        result = self.requester.with_method("DELETE", URL, None, destination)
        self.assertIs(result, destination)
        self.assertEqual((destination.id, destination.name), (7, "kept"))

    @responses.activate
    def test_204_without_destination_returns_none(self):
        responses.add(responses.DELETE, URL, status=204)
        self.assertIsNone(self.requester.with_method("DELETE", URL))

    @responses.activate
    def test_401_raises_unauthorized_without_decoding(self):
        responses.add(responses.GET, URL, status=401, body="<html>not json</html>")
        destination = Thing(id=1)
        with self.assertRaises(Unauthorized) as ctx:
            self.requester.get(URL, None, destination)
        self.assertEqual(str(ctx.exception), "authentication required")
        self.assertEqual(destination.id, 1)

    @responses.activate
    def test_429_raises_once_without_retry(self):
        responses.add(responses.GET, URL, status=429, json={"message": "slow down"})
        with self.assertLogs("discogs.request", level="WARNING"):
            with self.assertRaises(TooManyRequests):
                self.requester.get(URL, None, Thing())
        self.assertEqual(len(responses.calls), 1)

    @responses.activate
    def test_other_status_is_unknown_error(self):
        for status in (201, 404, 500):
            with self.subTest(status=status):
                url = f"{URL}/{status}"
                responses.add(responses.GET, url, status=status, json={"message": "nope"})
                with self.assertRaises(UnknownStatus) as ctx:
                    self.requester.get(url, None, Thing())
                self.assertEqual(ctx.exception.status_code, status)
                self.assertTrue(str(ctx.exception).startswith(f"unknown error: {status}"))

    @responses.activate
    def test_not_found_keeps_status_text(self):
        responses.add(responses.GET, URL, status=404, json={"message": "Release not found."})
        with self.assertRaises(UnknownStatus) as ctx:
            self.requester.get(URL, None, Thing())
        self.assertEqual(str(ctx.exception), "unknown error: 404 Not Found")


class DecodeTests(SimpleTestCase):
    def setUp(self):
        self.requester = Requester(HEADERS)

    @responses.activate
    def test_malformed_json_is_a_decode_error(self):
        responses.add(responses.GET, URL, body="{not json", content_type="application/json")
        with self.assertRaises(DecodeError) as ctx:
            self.requester.get(URL, None, Thing())
        self.assertIsInstance(ctx.exception.__cause__, ValueError)

    @responses.activate
    def test_empty_body_is_a_decode_error(self):
        responses.add(responses.GET, URL, body="")
        with self.assertRaises(DecodeError):
            self.requester.get(URL, None, Thing())

    @responses.activate
    def test_shape_mismatch_is_a_decode_error(self):
        responses.add(responses.GET, URL, json={"id": "forty-two"})
        with self.assertRaises(DecodeError) as ctx:
            self.requester.get(URL, None, Thing())
        self.assertIn("id", str(ctx.exception))

    @responses.activate
    def test_array_into_object_shape_is_a_decode_error(self):
        responses.add(responses.GET, URL, json=[{"id": 1}])
        with self.assertRaises(DecodeError):
            self.requester.get(URL, None, Release())

    @responses.activate
    def test_rejected_body_leaves_destination_unchanged(self):
        responses.add(responses.GET, URL, json={"id": 99, "title": "new", "year": "nineteen"})
        destination = Release(id=1, title="old")
        with self.assertRaises(DecodeError):
            self.requester.get(URL, None, destination)
        self.assertEqual((destination.id, destination.title, destination.year), (1, "old", None))


class ResponseClosingTests(SimpleTestCase):
    """The response is released on every outcome of the exchange."""

    def setUp(self):
        self.requester = Requester(HEADERS)
        patcher = mock.patch.object(requests.Response, "close", autospec=True)
        self.close = patcher.start()
        self.addCleanup(patcher.stop)

    @responses.activate
    def test_closed_after_success(self):
        responses.add(responses.GET, URL, json={"id": 1})
        self.requester.get(URL, None, Thing())
        self.close.assert_called_once()

    @responses.activate
    def test_closed_after_no_content(self):
        responses.add(responses.DELETE, URL, status=204)
        self.requester.with_method("DELETE", URL)
        self.close.assert_called_once()

    @responses.activate
    def test_closed_after_error_statuses(self):
        cases = ((401, Unauthorized), (429, TooManyRequests), (404, UnknownStatus))
        for status, error in cases:
            with self.subTest(status=status):
                self.close.reset_mock()
                url = f"{URL}/{status}"
                responses.add(responses.GET, url, status=status, json={})
                with self.assertLogs("discogs.request", level="INFO"):
                    with self.assertRaises(error):
                        self.requester.get(url, None, Thing())
                self.close.assert_called_once()

    @responses.activate
    def test_closed_after_decode_error(self):
        responses.add(responses.GET, URL, body="{not json")
        with self.assertRaises(DecodeError):
            self.requester.get(URL, None, Thing())
        self.close.assert_called_once()


class DispatchTests(SimpleTestCase):
    def setUp(self):
        self.requester = Requester(HEADERS)

    @responses.activate
    def test_query_params_are_encoded(self):
        responses.add(
            responses.GET,
            URL,
            json={},
            match=[matchers.query_param_matcher({"q": "a b&c", "page": "2"})],
        )
        self.requester.get(URL, {"q": "a b&c", "page": "2"})
        self.assertIn("q=a+b%26c", responses.calls[0].request.url)

    @responses.activate
    def test_json_body_is_sent(self):
        responses.add(
            responses.PUT,
            URL,
            json={"id": 3},
            match=[
                matchers.json_params_matcher({"rating": 5}),
                matchers.header_matcher({"Content-Type": "application/json"}),
            ],
        )
        thing = self.requester.with_json_body("PUT", URL, None, {"rating": 5}, Thing())
        self.assertEqual(thing.id, 3)

    @responses.activate
    def test_resource_body_drops_unset_fields(self):
        responses.add(responses.POST, URL, json={}, match=[matchers.json_params_matcher({"id": 9})])
        self.requester.with_json_body("POST", URL, None, Thing(id=9))

    @responses.activate
    def test_unserializable_body_propagates_before_dispatch(self):
        with self.assertRaises(TypeError):
            self.requester.with_json_body("POST", URL, None, {"when": object()})
        self.assertEqual(len(responses.calls), 0)

    @responses.activate
    def test_transport_errors_propagate(self):
        responses.add(responses.GET, URL, body=requests.exceptions.ConnectionError("refused"))
        with self.assertRaises(requests.exceptions.ConnectionError):
            self.requester.get(URL, None, Thing())

    @responses.activate
    def test_shared_headers_are_not_mutated(self):
        headers = dict(HEADERS)
        responses.add(responses.GET, URL, json={})
        Requester(headers).get(URL)
        self.assertEqual(headers, HEADERS)
        self.assertNotIn("Content-Type", headers)
