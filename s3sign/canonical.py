# -*- coding: utf-8 -*-
"""
s3sign.canonical
~~~~~~~~~~~~~~~~

Canonicalization of S3 requests for AWS Signature Version 2.

The string to sign is::

    HTTP-Verb + "\\n" +
    Content-MD5 + "\\n" +
    Content-Type + "\\n" +
    Date + "\\n" +
    CanonicalizedAmzHeaders +
    CanonicalizedResource
"""

import re
from operator import itemgetter
from urllib.parse import quote, unquote, urlsplit

from .exceptions import InvalidRequest
from .request import RequestDescriptor
from .util import header_text

# A regexp used for detecting virtual hosted-style aws bucket names
BUCKET_VHOST_MATCH = re.compile(
    r"^(?:(?P<bucket>[a-z0-9.\-]+)\.)?s3(?:[.\-][a-z0-9\-]+)?\.amazonaws\.com$",
    flags=re.IGNORECASE,
)

# Query parameters that identify a subresource and are part of the signature
SUB_RESOURCE_KEYS = frozenset(
    [
        "accelerate",
        "acl",
        "analytics",
        "cors",
        "defaultObjectAcl",
        "delete",
        "inventory",
        "lifecycle",
        "location",
        "logging",
        "metrics",
        "notification",
        "object-lock",
        "partNumber",
        "policy",
        "replication",
        "requestPayment",
        "response-cache-control",
        "response-content-disposition",
        "response-content-encoding",
        "response-content-language",
        "response-content-type",
        "response-expires",
        "restore",
        "select",
        "select-type",
        "storageClass",
        "tagging",
        "torrent",
        "uploadId",
        "uploads",
        "versionId",
        "versioning",
        "versions",
        "website",
    ]
)

AMZ_HEADER_PREFIX = "x-amz-"

# Characters left unescaped in the resource path, besides alphanumerics and
# "_.-~". "%" keeps already-escaped paths from being escaped twice.
RESOURCE_PATH_SAFE = "/!$&'()*+,:;=?@%"


def _split(url):
    if isinstance(url, bytes):
        url = url.decode("utf-8")
    if isinstance(url, str):
        try:
            return urlsplit(url)
        except ValueError as exc:
            raise InvalidRequest("Cannot parse URL {0!r}: {1}".format(url, exc))
    if hasattr(url, "geturl"):
        # urlparse() results keep ";params" apart from the path
        return _split(url.geturl())
    if hasattr(url, "path") and hasattr(url, "query"):
        return url
    raise InvalidRequest("Expected a URL, got {0!r}".format(url))


def subresource_query_string(query):
    """
    Filter a raw query string down to signed subresources.

    Args:
        query (str): Query string without the leading ``?``

    Returns:
        str: ``?``-prefixed, key-sorted subresources, or ``''`` if none

    Examples:
        >>> subresource_query_string('prefix=abc&acl')
        '?acl'
        >>> subresource_query_string('uploadId=7&partNumber=2')
        '?partNumber=2&uploadId=7'
    """
    if not query:
        return ""

    sub_resources = []
    for param in query.split("&"):
        key, _, value = param.partition("=")
        key = unquote(key)
        if key in SUB_RESOURCE_KEYS:
            sub_resources.append((key, unquote(value)))

    if not sub_resources:
        return ""

    # Sort on the key alone so repeated keys keep their order
    sub_resources.sort(key=itemgetter(0))
    return "?" + "&".join(
        "{0}={1}".format(key, value) if value else key
        for key, value in sub_resources
    )


def canonical_resource(url):
    """
    Build the CanonicalizedResource element for ``url``.

    Path-style URLs (``https://s3.amazonaws.com/bucket/key``) keep their
    path. For virtual hosted-style URLs (``https://bucket.s3.amazonaws.com/
    key``) the bucket is moved from the host name back in front of the
    path. Only the query parameters in :data:`SUB_RESOURCE_KEYS` survive.

    Args:
        url: URL string or a ``urllib.parse`` split/parse result

    Returns:
        str: Canonical resource, always starting with ``/``

    Raises:
        InvalidRequest: If ``url`` cannot be parsed

    Examples:
        >>> canonical_resource('https://s3.amazonaws.com/mybucket?prefix=abc&acl')
        '/mybucket?acl'
        >>> canonical_resource('https://johnsmith.s3.amazonaws.com/photos/puppy.jpg')
        '/johnsmith/photos/puppy.jpg'
    """
    parsed = _split(url)
    path = parsed.path or "/"
    if not path.startswith("/"):
        path = "/" + path

    hostname = getattr(parsed, "hostname", None)
    if hostname:
        match = BUCKET_VHOST_MATCH.match(hostname)
        if match and match.group("bucket"):
            path = "/{0}{1}".format(match.group("bucket"), path)

    resource = quote(path, safe=RESOURCE_PATH_SAFE)
    return resource + subresource_query_string(parsed.query)


def canonical_amz_headers(headers):
    """
    Build the CanonicalizedAmzHeaders element.

    Names are lowercased, values stripped, repeated headers joined with a
    comma and the resulting lines sorted by name. Each line ends with a
    newline so the result can be glued straight onto the resource.

    Args:
        headers: Mapping of name to value (or list of values), a sequence
            of ``(name, value)`` pairs, or a :class:`RequestDescriptor`

    Returns:
        str: ``name:value\\n`` lines, or ``''`` if there are no x-amz headers

    Raises:
        UnsupportedHeaderEncoding: If a value is not header text
    """
    amz_headers = {}

    items = headers.items() if hasattr(headers, "items") else headers
    for key, value in items:
        key_lower = key.lower()
        if not key_lower.startswith(AMZ_HEADER_PREFIX):
            continue
        values = value if isinstance(value, (list, tuple)) else (value,)
        for item in values:
            item = header_text(key, item).strip()
            if key_lower in amz_headers:
                amz_headers[key_lower] += "," + item
            else:
                amz_headers[key_lower] = item

    return "".join(
        "{0}:{1}\n".format(key, amz_headers[key]) for key in sorted(amz_headers)
    )


def string_to_sign(request, timestamp):
    """
    Build the canonical request string for Signature Version 2.

    ``Content-MD5`` and ``Content-Type`` are left as empty lines when the
    request does not carry them, so the line count never changes.

    Args:
        request: :class:`RequestDescriptor`, ``requests`` request, or any
            object with ``method``, ``url`` and ``headers``
        timestamp (str): HTTP-date placed verbatim on the date line

    Returns:
        str: The string to sign

    Raises:
        InvalidRequest: On a bad method or URL, or an empty timestamp
        UnsupportedHeaderEncoding: If a signed header is not header text
    """
    request = RequestDescriptor.from_request(request)
    if not isinstance(timestamp, str) or not timestamp:
        raise InvalidRequest("A non-empty timestamp string is required")

    content_md5 = request.get("Content-MD5", "")
    content_type = request.get("Content-Type", "")

    return "\n".join(
        [
            request.method.value,
            content_md5,
            content_type,
            timestamp,
            canonical_amz_headers(request) + canonical_resource(request.parsed_url),
        ]
    )
