# -*- coding: utf-8 -*-
"""
s3sign.signatures.base
~~~~~~~~~~~~~~~~~~~~~~

Keyed-hash signing shared by the signature implementations.
"""

import base64
import hashlib
import hmac
from urllib.parse import quote as percent_encode

from ..exceptions import MissingCredential
from ..util import stringify

DEFAULT_DIGEST = hashlib.sha1


def resolve_digest(digestmod):
    """
    Validate a digest choice for :func:`hmac.new`.

    Args:
        digestmod: A ``hashlib`` constructor (``hashlib.sha256``) or an
            algorithm name (``'sha256'``)

    Returns:
        The digest, unchanged

    Raises:
        ValueError: If the name is not a hash algorithm hashlib provides
    """
    if isinstance(digestmod, str):
        if digestmod.lower() not in hashlib.algorithms_available:
            raise ValueError("Unsupported digest algorithm: {0!r}".format(digestmod))
        return digestmod.lower()
    if not callable(digestmod):
        raise ValueError("digestmod must be a hashlib constructor or name")
    return digestmod


def secret_bytes(secret):
    """Return ``secret`` as key bytes, refusing empty credentials."""
    if secret is None or len(secret) == 0:
        raise MissingCredential("A non-empty secret key is required for signing")
    return stringify(secret)


def encoded_signature(canonical_string, secret, digestmod=DEFAULT_DIGEST, quote=True):
    """
    Sign ``canonical_string`` with ``secret``.

    Computes HMAC(secret, canonical_string) with ``digestmod`` (SHA-1 for
    Signature Version 2), Base64-encodes the digest and, unless ``quote``
    is false, percent-escapes ``+``, ``/`` and ``=`` so the value is safe
    in a query string.

    Args:
        canonical_string (str): The string to sign
        secret (str or bytes): Secret access key
        digestmod: Hash constructor or name, see :func:`resolve_digest`
        quote (bool): Percent-escape the Base64 output

    Returns:
        str: The signature

    Raises:
        MissingCredential: If ``secret`` is empty
        EncodingError: If ``canonical_string`` is not encodable as UTF-8

    Examples:
        >>> encoded_signature('GET\\n\\n\\nTue, 27 Mar 2007 19:36:42 +0000\\n'
        ...                   '/johnsmith/photos/puppy.jpg',
        ...                   'wJalrXUtnFEMI/K7MDENG/bPxRfiCYEXAMPLEKEY')
        'bWq2s1WEIj%2BYdj0vQ697zp%2BIXMU%3D'
    """
    key = secret_bytes(secret)
    digest = hmac.new(
        key, msg=stringify(canonical_string), digestmod=resolve_digest(digestmod)
    ).digest()

    signature = base64.b64encode(digest).decode("ascii")
    if quote:
        signature = percent_encode(signature, safe="")
    return signature


class BaseSignature:
    """
    Base class for AWS signature implementations.

    Args:
        access_key (str): AWS access key id
        secret_key (str): AWS secret access key
        digestmod: Hash used for the HMAC, see :func:`resolve_digest`
    """

    def __init__(self, access_key, secret_key, digestmod=DEFAULT_DIGEST):
        if not access_key:
            raise MissingCredential("A non-empty access key id is required")
        secret_bytes(secret_key)
        self.access_key = access_key
        self.secret_key = secret_key
        self.digestmod = resolve_digest(digestmod)

    def sign_request(self, request):
        """
        Sign the given request.

        Args:
            request: The request object to sign

        Returns:
            The signed request object
        """
        raise NotImplementedError("Subclasses must implement sign_request")

    def __repr__(self):
        return "<{0} access_key={1!r}>".format(type(self).__name__, self.access_key)
