# -*- coding: utf-8 -*-
"""
s3sign.exceptions
~~~~~~~~~~~~~~~~~

Errors raised while canonicalizing and signing requests.
"""


class S3SignError(Exception):
    """Base class for every error raised by s3sign."""


class InvalidRequest(S3SignError, ValueError):
    """The request method, URL or timestamp cannot be used for signing."""


class MissingCredential(S3SignError, ValueError):
    """The secret key (or access key id) is empty."""


class UnsupportedHeaderEncoding(S3SignError, UnicodeError):
    """A header value cannot be represented in the HTTP header charset."""

    def __init__(self, name, value):
        self.name = name
        self.value = value
        super(UnsupportedHeaderEncoding, self).__init__(
            "Header {0!r} has a value that is not ISO-8859-1 text: {1!r}".format(
                name, value
            )
        )


class EncodingError(S3SignError, UnicodeError):
    """The string to sign cannot be encoded as UTF-8."""
