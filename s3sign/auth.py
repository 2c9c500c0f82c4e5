# -*- coding: utf-8 -*-
"""
s3sign.auth
~~~~~~~~~~~

``requests`` authentication handler that signs S3 requests.

    >>> import requests
    >>> from s3sign import S3Auth
    >>> requests.get('https://s3.amazonaws.com/mybucket/mykey',
    ...              auth=S3Auth(access_key, secret_key))
"""

import logging

from requests.auth import AuthBase

from .canonical import canonical_resource
from .region import Region
from .signatures import SignatureV2
from .signatures.base import DEFAULT_DIGEST

logger = logging.getLogger(__name__)

SIGNATURE_VERSIONS = {
    "s3": SignatureV2,
    "v2": SignatureV2,
}

SECURITY_TOKEN_HEADER = "x-amz-security-token"


class S3Auth(AuthBase):
    """
    Attach an AWS Signature Version 2 ``Authorization`` header.

    Args:
        access_key (str): AWS access key id
        secret_key (str): AWS secret access key
        endpoint (str): S3 endpoint host name
        signature_version (str): ``'s3'`` (alias ``'v2'``)
        session_token (str, optional): STS session token, sent as
            ``x-amz-security-token`` and therefore signed
        digestmod: Hash used for the HMAC

    Raises:
        ValueError: If ``signature_version`` is not supported
        MissingCredential: If the access key or secret is empty
    """

    def __init__(
        self,
        access_key,
        secret_key,
        endpoint="s3.amazonaws.com",
        signature_version="s3",
        session_token=None,
        digestmod=DEFAULT_DIGEST,
    ):
        try:
            signer_class = SIGNATURE_VERSIONS[signature_version]
        except KeyError:
            raise ValueError(
                "Unsupported signature version {0!r}, expected one of {1}".format(
                    signature_version, ", ".join(sorted(SIGNATURE_VERSIONS))
                )
            )
        self.endpoint = endpoint
        self.signature_version = signature_version
        self.session_token = session_token
        self.signer = signer_class(access_key, secret_key, digestmod=digestmod)

    @property
    def access_key(self):
        return self.signer.access_key

    @property
    def region(self):
        """Name of the region serving :attr:`endpoint`."""
        return Region.from_endpoint(self.endpoint).name

    def __call__(self, r):
        if self.session_token:
            r.headers[SECURITY_TOKEN_HEADER] = self.session_token

        self.signer.sign_request(r)
        logger.debug(
            "Signed %s %s (signature version %s)",
            r.method,
            canonical_resource(r.url),
            self.signature_version,
        )
        return r

    def __eq__(self, other):
        if not isinstance(other, S3Auth):
            return NotImplemented
        return (
            self.access_key == other.access_key
            and self.signer.secret_key == other.signer.secret_key
            and self.endpoint == other.endpoint
            and self.signature_version == other.signature_version
            and self.session_token == other.session_token
        )

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return "<S3Auth access_key={0!r} endpoint={1!r} signature_version={2!r}>".format(
            self.access_key, self.endpoint, self.signature_version
        )
