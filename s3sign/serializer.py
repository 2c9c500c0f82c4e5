# -*- coding: utf-8 -*-
"""
s3sign.serializer
~~~~~~~~~~~~~~~~~

Build signed S3 requests that any ``requests`` session can send.
"""

import logging
import mimetypes
from urllib.parse import quote, urlencode

import requests

from .acl import acl_headers
from .auth import S3Auth
from .region import US_STANDARD, Region

logger = logging.getLogger(__name__)

STORAGE_CLASS_HEADER = "x-amz-storage-class"
META_HEADER_PREFIX = "x-amz-meta-"
DEFAULT_CONTENT_TYPE = "application/octet-stream"

STORAGE_CLASSES = frozenset(
    ["STANDARD", "STANDARD_IA", "REDUCED_REDUNDANCY", "GLACIER"]
)


class S3RequestSerializer:
    """
    Serialize path-style requests for one bucket (or for the service).

    Args:
        access_key (str): AWS access key id
        secret_key (str): AWS secret access key
        region (Region or str): Region object or name, ``us-east-1`` by default
        bucket (str, optional): Bucket every request addresses
        tls (bool): Use https
        session_token (str, optional): STS session token

    Examples:
        >>> serializer = S3RequestSerializer(key, secret, bucket='johnsmith')
        >>> prepared = serializer.prepare('GET', 'photos/puppy.jpg')
        >>> requests.Session().send(prepared)
    """

    def __init__(
        self,
        access_key,
        secret_key,
        region=US_STANDARD,
        bucket=None,
        tls=True,
        session_token=None,
    ):
        if isinstance(region, str):
            region = Region.from_name(region)
        self.region = region
        self.bucket = bucket
        self.tls = tls
        self.auth = S3Auth(
            access_key,
            secret_key,
            endpoint=region.endpoint,
            session_token=session_token,
        )

    @property
    def endpoint_url(self):
        """Base URL of every request: ``scheme://endpoint[/bucket]``."""
        protocol = "https" if self.tls else "http"
        url = "{0}://{1}".format(protocol, self.region.endpoint)
        if self.bucket:
            url += "/" + quote(self.bucket, safe="")
        return url

    def request_url(self, path=None, subresource=None, params=None):
        """
        Build the URL for ``path`` inside the bucket.

        Args:
            path (str, optional): Object key
            subresource (str, optional): Bare subresource such as ``'acl'``
            params (dict, optional): Extra query parameters; empty keys or
                values are skipped

        Returns:
            str: The request URL
        """
        url = self.endpoint_url
        if path:
            url += "/" + quote(path.lstrip("/"), safe="/")

        query = []
        if subresource:
            query.append(subresource)
        if params:
            pairs = sorted((k, v) for k, v in params.items() if k and v)
            if pairs:
                query.append(urlencode(pairs))
        if query:
            url += "?" + "&".join(query)
        return url

    def build_headers(
        self,
        path=None,
        acl=None,
        metadata=None,
        storage_class="STANDARD",
        headers=None,
    ):
        """
        Collect the headers of an S3 request before signing.

        Raises:
            ValueError: On an unknown storage class or canned ACL
        """
        if storage_class not in STORAGE_CLASSES:
            raise ValueError("Unknown storage class: {0!r}".format(storage_class))

        content_type = None
        if path:
            content_type = mimetypes.guess_type(path)[0]

        result = {
            "Content-Type": content_type or DEFAULT_CONTENT_TYPE,
            STORAGE_CLASS_HEADER: storage_class,
        }
        result.update(acl_headers(acl))
        for key, value in (metadata or {}).items():
            result[META_HEADER_PREFIX + key] = value
        result.update(headers or {})
        return result

    def request(
        self,
        method,
        path=None,
        subresource=None,
        acl=None,
        metadata=None,
        storage_class="STANDARD",
        params=None,
        headers=None,
        data=None,
    ):
        """
        Build an unsent ``requests.Request`` carrying :class:`S3Auth`.

        Returns:
            requests.Request: Signed when it is prepared
        """
        return requests.Request(
            method=method.upper(),
            url=self.request_url(path, subresource=subresource, params=params),
            headers=self.build_headers(
                path,
                acl=acl,
                metadata=metadata,
                storage_class=storage_class,
                headers=headers,
            ),
            data=data,
            auth=self.auth,
        )

    def prepare(self, method, path=None, **kwargs):
        """
        Build and sign a request, ready for ``requests.Session.send``.

        Accepts the same keyword arguments as :meth:`request`.

        Returns:
            requests.PreparedRequest: With ``Date`` and ``Authorization`` set
        """
        prepared = self.request(method, path, **kwargs).prepare()
        logger.debug("Prepared %s %s", prepared.method, prepared.url)
        return prepared

    def __repr__(self):
        return "<S3RequestSerializer region={0!r} bucket={1!r}>".format(
            self.region.name, self.bucket
        )
