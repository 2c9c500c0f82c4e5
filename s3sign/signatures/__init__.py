# -*- coding: utf-8 -*-
"""
s3sign.signatures
~~~~~~~~~~~~~~~~~

HMAC signing and the AWS Signature Version 2 signer.
"""

from .base import BaseSignature, encoded_signature
from .v2 import SignatureV2, aws_signature_for_request

__all__ = [
    "BaseSignature",
    "SignatureV2",
    "aws_signature_for_request",
    "encoded_signature",
]
