# -*- coding: utf-8 -*-
"""
s3sign.request
~~~~~~~~~~~~~~

Read-only description of an outgoing HTTP request.

The canonicalizer never touches a live HTTP object directly; it works on a
:class:`RequestDescriptor` built from plain values or from a ``requests``
request.
"""

import copy
from enum import Enum
from urllib.parse import urlsplit

import requests
from requests.structures import CaseInsensitiveDict

from .exceptions import InvalidRequest
from .util import header_text


class HTTPMethod(str, Enum):
    """HTTP verbs accepted by the S3 REST API."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    @classmethod
    def coerce(cls, value):
        """
        Turn ``value`` into a member, ignoring case.

        Raises:
            InvalidRequest: If ``value`` is not a known verb
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bytes):
            value = value.decode("ascii", "replace")
        if not isinstance(value, str):
            raise InvalidRequest("HTTP method must be a string, got {0!r}".format(value))
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise InvalidRequest("Unsupported HTTP method: {0!r}".format(value))


def parse_url(url):
    """
    Split an absolute http(s) URL.

    Args:
        url (str): The request URL

    Returns:
        urllib.parse.SplitResult: The parsed URL

    Raises:
        InvalidRequest: If the URL is not an absolute http or https URL
    """
    if isinstance(url, bytes):
        url = url.decode("utf-8", "replace")
    if not isinstance(url, str) or not url:
        raise InvalidRequest("Request URL must be a non-empty string, got {0!r}".format(url))
    try:
        parsed = urlsplit(url)
        # Accessing hostname/port validates brackets and port digits
        parsed.hostname
        parsed.port
    except ValueError as exc:
        raise InvalidRequest("Cannot parse request URL {0!r}: {1}".format(url, exc))
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidRequest("Request URL must be absolute http(s): {0!r}".format(url))
    return parsed


class RequestDescriptor:
    """
    Immutable view of an HTTP request: method, URL and headers.

    Header names are case-insensitive. A header may carry several values,
    either by passing a list/tuple as the value or by passing ``headers``
    as a sequence of ``(name, value)`` pairs with repeated names.

    Args:
        method (str): HTTP verb
        url (str): Absolute request URL, query string included
        headers (dict or list, optional): Request headers

    Raises:
        InvalidRequest: If the method or URL is unusable
        UnsupportedHeaderEncoding: If a header value is not ISO-8859-1 text
    """

    __slots__ = ("_method", "_url", "_parsed_url", "_headers")

    def __init__(self, method, url, headers=None):
        self._method = HTTPMethod.coerce(method)
        self._parsed_url = parse_url(url)
        self._url = self._parsed_url.geturl()
        self._headers = CaseInsensitiveDict()

        items = headers.items() if hasattr(headers, "items") else (headers or ())
        for name, value in items:
            values = value if isinstance(value, (list, tuple)) else (value,)
            values = tuple(header_text(name, v) for v in values if v is not None)
            if values:
                self._headers[name] = self._headers.get(name, ()) + values

    @classmethod
    def from_request(cls, request):
        """
        Build a descriptor from a ``requests.Request``, a
        ``requests.PreparedRequest`` or any object with ``method``,
        ``url`` and ``headers`` attributes.
        """
        if isinstance(request, cls):
            return request
        if isinstance(request, requests.Request):
            # Prepare a copy so params, body headers and hooks are applied
            # without running any auth handler attached to the original
            unsigned = copy.copy(request)
            unsigned.auth = None
            request = unsigned.prepare()
        for attr in ("method", "url", "headers"):
            if not hasattr(request, attr):
                raise InvalidRequest(
                    "Cannot sign {0!r}: missing {1!r} attribute".format(request, attr)
                )
        return cls(request.method, request.url, request.headers)

    @property
    def method(self):
        return self._method

    @property
    def url(self):
        return self._url

    @property
    def parsed_url(self):
        return self._parsed_url

    def get(self, name, default=None):
        """Return the values of header ``name`` joined by commas."""
        values = self._headers.get(name)
        if values is None:
            return default
        return ",".join(values)

    def get_all(self, name):
        """Return every value of header ``name`` as a tuple."""
        return self._headers.get(name, ())

    def items(self):
        """Yield ``(name, value)`` for every header value, repeats included."""
        for name, values in self._headers.items():
            for value in values:
                yield name, value

    def __contains__(self, name):
        return name in self._headers

    def __setattr__(self, name, value):
        if hasattr(self, "_headers"):
            raise AttributeError("RequestDescriptor is immutable")
        super(RequestDescriptor, self).__setattr__(name, value)

    def __eq__(self, other):
        if not isinstance(other, RequestDescriptor):
            return NotImplemented
        return (
            self._method == other._method
            and self._url == other._url
            and dict(self._headers.lower_items()) == dict(other._headers.lower_items())
        )

    def __hash__(self):
        return hash((self._method, self._url))

    def __repr__(self):
        return "<RequestDescriptor [{0} {1}]>".format(self._method.value, self._url)
