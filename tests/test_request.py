import unittest

import requests

from s3sign.exceptions import InvalidRequest, UnsupportedHeaderEncoding
from s3sign.request import HTTPMethod, RequestDescriptor, parse_url


class TestHTTPMethod(unittest.TestCase):
    def test_coerce_ignores_case(self):
        self.assertIs(HTTPMethod.coerce("get"), HTTPMethod.GET)
        self.assertIs(HTTPMethod.coerce(" Put "), HTTPMethod.PUT)
        self.assertIs(HTTPMethod.coerce(b"DELETE"), HTTPMethod.DELETE)
        self.assertIs(HTTPMethod.coerce(HTTPMethod.HEAD), HTTPMethod.HEAD)

    def test_coerce_rejects_unknown(self):
        for value in ("FETCH", "", None, 7):
            with self.assertRaises(InvalidRequest):
                HTTPMethod.coerce(value)


class TestParseURL(unittest.TestCase):
    def test_absolute_url(self):
        parsed = parse_url("https://s3.amazonaws.com/b/k?acl")
        self.assertEqual(parsed.path, "/b/k")
        self.assertEqual(parsed.query, "acl")

    def test_rejects_unusable_urls(self):
        for url in ("", None, "not a url", "/b/k", "ftp://host/b",
                    "http://host:port/b", "http://[::1/b"):
            with self.assertRaises(InvalidRequest):
                parse_url(url)


class TestRequestDescriptor(unittest.TestCase):
    URL = "https://s3.amazonaws.com/mybucket/mykey"

    def test_headers_are_case_insensitive(self):
        request = RequestDescriptor("get", self.URL, {"Content-Type": "text/plain"})
        self.assertIs(request.method, HTTPMethod.GET)
        self.assertEqual(request.get("content-type"), "text/plain")
        self.assertIn("CONTENT-TYPE", request)
        self.assertIsNone(request.get("Content-MD5"))

    def test_repeated_headers(self):
        request = RequestDescriptor(
            "PUT", self.URL, [("x-amz-meta-a", "1"), ("X-Amz-Meta-A", "2")]
        )
        self.assertEqual(request.get_all("x-amz-meta-a"), ("1", "2"))
        self.assertEqual(request.get("x-amz-meta-a"), "1,2")
        self.assertEqual(len(list(request.items())), 2)

    def test_bytes_values_decoded_and_none_skipped(self):
        request = RequestDescriptor(
            "GET", self.URL, {"x-amz-meta-a": b"caf\xe9", "x-amz-meta-b": None}
        )
        self.assertEqual(request.get("x-amz-meta-a"), "caf\xe9")
        self.assertNotIn("x-amz-meta-b", request)

    def test_rejects_values_outside_header_charset(self):
        with self.assertRaises(UnsupportedHeaderEncoding):
            RequestDescriptor("GET", self.URL, {"x-amz-meta-a": "☃"})
        with self.assertRaises(UnsupportedHeaderEncoding):
            RequestDescriptor("GET", self.URL, {"x-amz-meta-a": 12})

    def test_immutable(self):
        request = RequestDescriptor("GET", self.URL)
        with self.assertRaises(AttributeError):
            request.method = "PUT"
        with self.assertRaises(AttributeError):
            request.extra = 1

    def test_equality(self):
        self.assertEqual(
            RequestDescriptor("GET", self.URL, {"A": "1"}),
            RequestDescriptor("get", self.URL, {"a": "1"}),
        )
        self.assertNotEqual(
            RequestDescriptor("GET", self.URL), RequestDescriptor("PUT", self.URL)
        )

    def test_from_prepared_request(self):
        prepared = requests.Request(
            "PUT", self.URL, headers={"x-amz-acl": "private"}, data=b"abc"
        ).prepare()
        request = RequestDescriptor.from_request(prepared)
        self.assertIs(request.method, HTTPMethod.PUT)
        self.assertEqual(request.get("x-amz-acl"), "private")
        self.assertEqual(request.get("Content-Length"), "3")

    def test_from_unprepared_request_applies_params(self):
        unprepared = requests.Request(
            "GET", "https://s3.amazonaws.com/mybucket", params={"prefix": "abc"}
        )
        request = RequestDescriptor.from_request(unprepared)
        self.assertEqual(request.url, "https://s3.amazonaws.com/mybucket?prefix=abc")

    def test_from_unprepared_request_skips_auth(self):
        def explode(r):
            raise AssertionError("auth must not run")

        unprepared = requests.Request("GET", self.URL, auth=explode)
        self.assertEqual(RequestDescriptor.from_request(unprepared).url, self.URL)

    def test_from_request_returns_descriptor_unchanged(self):
        request = RequestDescriptor("GET", self.URL)
        self.assertIs(RequestDescriptor.from_request(request), request)

    def test_from_request_missing_attributes(self):
        with self.assertRaises(InvalidRequest):
            RequestDescriptor.from_request(object())

    def test_repr(self):
        self.assertEqual(
            repr(RequestDescriptor("GET", self.URL)),
            "<RequestDescriptor [GET https://s3.amazonaws.com/mybucket/mykey]>",
        )
