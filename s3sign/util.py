# -*- coding: utf-8 -*-
"""
s3sign.util
~~~~~~~~~~~

Small text/bytes helpers shared by the canonicalizer and the signer.
"""

from .exceptions import EncodingError, UnsupportedHeaderEncoding

# Charset of HTTP/1.1 header field values
HEADER_ENCODING = "iso-8859-1"


def stringify(value, encoding="utf-8"):
    """
    Convert ``value`` to bytes.

    Args:
        value: str, bytes or any object with a ``__str__``
        encoding (str): Encoding used for text values

    Returns:
        bytes: The encoded value

    Raises:
        EncodingError: If text cannot be encoded with ``encoding``
    """
    if isinstance(value, bytes):
        return value
    if not isinstance(value, str):
        value = str(value)
    try:
        return value.encode(encoding)
    except UnicodeEncodeError as exc:
        raise EncodingError(
            "Cannot encode {0!r} as {1}: {2}".format(value, encoding, exc.reason)
        )


def header_text(name, value):
    """
    Return a header value as ``str``, checking it is valid header text.

    Bytes are decoded as ISO-8859-1, the charset requests and http.client
    use for header values. Text containing characters outside that charset
    is rejected rather than silently mangled.

    Raises:
        UnsupportedHeaderEncoding: If the value is neither str nor bytes,
            or is not representable in ISO-8859-1
    """
    if isinstance(value, bytes):
        return value.decode(HEADER_ENCODING)
    if not isinstance(value, str):
        raise UnsupportedHeaderEncoding(name, value)
    try:
        value.encode(HEADER_ENCODING)
    except UnicodeEncodeError:
        raise UnsupportedHeaderEncoding(name, value)
    return value
