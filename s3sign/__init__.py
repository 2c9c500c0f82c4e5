# -*- coding: utf-8 -*-
"""
s3sign
~~~~~~

AWS Signature Version 2 request signing for the Amazon S3 REST API.
"""

from .auth import S3Auth
from .canonical import (
    SUB_RESOURCE_KEYS,
    canonical_amz_headers,
    canonical_resource,
    string_to_sign,
)
from .datetime_utils import http_date
from .exceptions import (
    EncodingError,
    InvalidRequest,
    MissingCredential,
    S3SignError,
    UnsupportedHeaderEncoding,
)
from .request import HTTPMethod, RequestDescriptor
from .serializer import S3RequestSerializer
from .signatures import SignatureV2, aws_signature_for_request, encoded_signature

__title__ = "s3sign"
__version__ = "1.0.0"
__license__ = "MIT"
__all__ = [
    "EncodingError",
    "HTTPMethod",
    "InvalidRequest",
    "MissingCredential",
    "RequestDescriptor",
    "S3Auth",
    "S3RequestSerializer",
    "S3SignError",
    "SUB_RESOURCE_KEYS",
    "SignatureV2",
    "UnsupportedHeaderEncoding",
    "aws_signature_for_request",
    "canonical_amz_headers",
    "canonical_resource",
    "encoded_signature",
    "http_date",
    "string_to_sign",
]
