# -*- coding: utf-8 -*-
"""
s3sign.acl
~~~~~~~~~~

Access control lists expressed as ``x-amz-acl`` / ``x-amz-grant-*``
request headers. These headers are part of the signed string.
"""

from collections import namedtuple
from enum import Enum

ACL_HEADER = "x-amz-acl"


class PredefinedACL(Enum):
    """Canned ACLs recognized by S3."""

    PRIVATE = "private"
    PUBLIC_READ_WRITE = "public-read-write"
    PUBLIC_READ = "public-read"
    AUTHENTICATED_READ = "authenticated-read"
    BUCKET_OWNER_READ = "bucket-owner-read"
    BUCKET_OWNER_FULL_CONTROL = "bucket-owner-full-control"
    LOG_DELIVERY_WRITE = "log-delivery-write"

    def headers(self):
        return {ACL_HEADER: self.value}


class ACLPermission(Enum):
    """Permissions that can be granted, with the header that grants them."""

    READ = "x-amz-grant-read"
    WRITE = "x-amz-grant-write"
    READ_ACP = "x-amz-grant-read-acp"
    WRITE_ACP = "x-amz-grant-write-acp"
    FULL_CONTROL = "x-amz-grant-full-control"

    @property
    def header_name(self):
        return self.value


class ACLGrantee(namedtuple("ACLGrantee", ["header_value"])):
    """A grantee as written in a ``x-amz-grant-*`` header."""

    __slots__ = ()

    @classmethod
    def email(cls, address):
        return cls('emailAddress="{0}"'.format(address))

    @classmethod
    def user_id(cls, canonical_id):
        return cls('id="{0}"'.format(canonical_id))

    @classmethod
    def group(cls, uri):
        return cls('uri="{0}"'.format(uri))


AUTHENTICATED_USERS = ACLGrantee.group(
    "http://acs.amazonaws.com/groups/global/AuthenticatedUsers"
)
ALL_USERS = ACLGrantee.group("http://acs.amazonaws.com/groups/global/AllUsers")
LOG_DELIVERY = ACLGrantee.group("http://acs.amazonaws.com/groups/s3/LogDelivery")


class PermissionGrant:
    """
    One permission granted to one or more grantees.

    Args:
        permission (ACLPermission): What is granted
        grantees: A single :class:`ACLGrantee` or an iterable of them
    """

    def __init__(self, permission, grantees):
        if isinstance(grantees, ACLGrantee):
            grantees = [grantees]
        self.permission = ACLPermission(permission)
        self.grantees = frozenset(grantees)
        if not self.grantees:
            raise ValueError("A permission grant needs at least one grantee")

    def headers(self):
        # Sorted so identical grants always produce identical signatures
        value = ", ".join(sorted(g.header_value for g in self.grantees))
        return {self.permission.header_name: value}

    def __eq__(self, other):
        if not isinstance(other, PermissionGrant):
            return NotImplemented
        return self.permission == other.permission and self.grantees == other.grantees

    def __hash__(self):
        return hash((self.permission, self.grantees))

    def __repr__(self):
        return "<PermissionGrant {0} x{1}>".format(self.permission.name, len(self.grantees))


class CustomACL:
    """
    A set of permission grants, at most one per permission.

    Raises:
        ValueError: If two grants use the same permission
    """

    def __init__(self, grants):
        self.grants = tuple(grants)
        permissions = [grant.permission for grant in self.grants]
        if len(set(permissions)) != len(permissions):
            raise ValueError("Each permission may only be granted once per ACL")

    def headers(self):
        headers = {}
        for grant in self.grants:
            headers.update(grant.headers())
        return headers


def acl_headers(acl):
    """
    Return the request headers for ``acl``.

    Args:
        acl: :class:`PredefinedACL`, its string value (``'public-read'``),
            :class:`PermissionGrant`, :class:`CustomACL` or ``None``

    Returns:
        dict: Header name to value

    Raises:
        ValueError: If ``acl`` is an unknown canned ACL name
    """
    if acl is None:
        return {}
    if isinstance(acl, str):
        acl = PredefinedACL(acl)
    return acl.headers()
