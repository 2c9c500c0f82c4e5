# -*- coding: utf-8 -*-
"""
s3sign.signatures.v2
~~~~~~~~~~~~~~~~~~~~

AWS Signature Version 2 implementation.

This is the legacy S3 signature method (``Authorization: AWS
<AccessKeyId>:<Signature>``), still accepted by S3 and most S3-compatible
services.
"""

from ..canonical import string_to_sign
from ..datetime_utils import http_date
from .base import DEFAULT_DIGEST, BaseSignature, encoded_signature

AUTHORIZATION_SCHEME = "AWS"


def aws_signature_for_request(
    request, timestamp, secret, digestmod=DEFAULT_DIGEST, quote=True
):
    """
    Compute the Signature Version 2 signature of ``request``.

    Args:
        request: :class:`~s3sign.request.RequestDescriptor`, ``requests``
            request, or any object with ``method``, ``url`` and ``headers``
        timestamp (str): HTTP-date, used verbatim
        secret (str or bytes): Secret access key
        digestmod: Hash used for the HMAC
        quote (bool): Percent-escape the Base64 signature

    Returns:
        str: The signature

    Raises:
        InvalidRequest: If the method, URL or timestamp is unusable
        MissingCredential: If ``secret`` is empty
        UnsupportedHeaderEncoding: If a header value is not header text
    """
    canonical = string_to_sign(request, timestamp)
    return encoded_signature(canonical, secret, digestmod=digestmod, quote=quote)


class SignatureV2(BaseSignature):
    """
    AWS Signature Version 2 signer bound to one set of credentials.
    """

    def string_to_sign(self, request, timestamp):
        """Return the canonical request string for ``request``."""
        return string_to_sign(request, timestamp)

    def signature(self, request, timestamp, quote=True):
        """
        Sign ``request`` as it would be sent at ``timestamp``.

        Returns:
            str: Base64 signature, percent-escaped unless ``quote`` is false
        """
        return aws_signature_for_request(
            request, timestamp, self.secret_key, digestmod=self.digestmod, quote=quote
        )

    def authorization_header(self, request, timestamp):
        """
        Build the ``Authorization`` header value.

        S3 reads the signature in the header as plain Base64, so it is not
        percent-escaped here.
        """
        return "{0} {1}:{2}".format(
            AUTHORIZATION_SCHEME,
            self.access_key,
            self.signature(request, timestamp, quote=False),
        )

    def sign_request(self, request):
        """
        Sign request using AWS Signature Version 2.

        A ``Date`` header is added when the request has none; an existing
        one is signed as is.

        Args:
            request: Object with ``method``, ``url`` and a mutable
                ``headers`` mapping, e.g. ``requests.PreparedRequest``

        Returns:
            The same request object with ``Date`` and ``Authorization`` set
        """
        timestamp = request.headers.get("Date")
        if not timestamp:
            timestamp = http_date()
            request.headers["Date"] = timestamp

        request.headers["Authorization"] = self.authorization_header(
            request, timestamp
        )
        return request
