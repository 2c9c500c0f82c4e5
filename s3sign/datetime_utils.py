# -*- coding: utf-8 -*-
"""
s3sign.datetime_utils
~~~~~~~~~~~~~~~~~~~~~

Timestamp helpers for the ``Date`` header of signed requests.
"""

from datetime import datetime, timezone
from email.utils import format_datetime


def get_utc_datetime():
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def http_date(when=None):
    """
    Format a timestamp as an HTTP-date suitable for the ``Date`` header.

    ``email.utils`` spells out day and month names itself, so the result
    does not depend on the process locale.

    Args:
        when (datetime, optional): Time to format, defaults to now. Naive
            datetimes are taken to be UTC.

    Returns:
        str: e.g. ``'Tue, 27 Mar 2007 19:36:42 GMT'``

    Examples:
        >>> http_date(datetime(2007, 3, 27, 19, 36, 42))
        'Tue, 27 Mar 2007 19:36:42 GMT'
    """
    if when is None:
        when = get_utc_datetime()
    elif when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    else:
        when = when.astimezone(timezone.utc)

    return format_datetime(when.replace(microsecond=0), usegmt=True)
