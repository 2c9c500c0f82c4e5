# -*- coding: utf-8 -*-
"""
s3sign.region
~~~~~~~~~~~~~

Amazon S3 regions and their Signature Version 2 endpoints.
"""

from collections import namedtuple


class Region(namedtuple("Region", ["name", "endpoint"])):
    """
    An S3 region: its name (``eu-west-1``) and endpoint host name.

    Use :meth:`custom` for S3-compatible services.
    """

    __slots__ = ()

    @classmethod
    def custom(cls, name, endpoint):
        return cls(name, endpoint)

    @classmethod
    def from_name(cls, name):
        """
        Look up a known region by name.

        Raises:
            ValueError: If ``name`` is not a known region
        """
        for region in REGIONS:
            if region.name == name:
                return region
        raise ValueError("Unknown S3 region: {0!r}".format(name))

    @classmethod
    def from_endpoint(cls, endpoint):
        """
        Guess the region serving ``endpoint``.

        Known endpoints map to their region; ``s3-<region>.amazonaws.com``
        and ``s3.<region>.amazonaws.com`` are parsed. Anything else is
        treated as a custom endpoint in ``us-east-1``.
        """
        for region in REGIONS:
            if region.endpoint == endpoint:
                return region

        if ".amazonaws.com" in endpoint:
            if "s3-" in endpoint:
                return cls(endpoint.split("s3-")[1].split(".amazonaws.com")[0], endpoint)
            if "s3." in endpoint:
                name = endpoint.split("s3.")[1].split(".amazonaws.com")[0]
                if name:
                    return cls(name, endpoint)
        return cls(US_STANDARD.name, endpoint)


US_STANDARD = Region("us-east-1", "s3.amazonaws.com")
US_WEST_1 = Region("us-west-1", "s3-us-west-1.amazonaws.com")
US_WEST_2 = Region("us-west-2", "s3-us-west-2.amazonaws.com")
EU_WEST_1 = Region("eu-west-1", "s3-eu-west-1.amazonaws.com")
EU_CENTRAL_1 = Region("eu-central-1", "s3-eu-central-1.amazonaws.com")
AP_SOUTHEAST_1 = Region("ap-southeast-1", "s3-ap-southeast-1.amazonaws.com")
AP_SOUTHEAST_2 = Region("ap-southeast-2", "s3-ap-southeast-2.amazonaws.com")
AP_NORTHEAST_1 = Region("ap-northeast-1", "s3-ap-northeast-1.amazonaws.com")
AP_NORTHEAST_2 = Region("ap-northeast-2", "s3-ap-northeast-2.amazonaws.com")
SA_EAST_1 = Region("sa-east-1", "s3-sa-east-1.amazonaws.com")

REGIONS = (
    US_STANDARD,
    US_WEST_1,
    US_WEST_2,
    EU_WEST_1,
    EU_CENTRAL_1,
    AP_SOUTHEAST_1,
    AP_SOUTHEAST_2,
    AP_NORTHEAST_1,
    AP_NORTHEAST_2,
    SA_EAST_1,
)
