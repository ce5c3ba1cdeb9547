"""wp_client.utils

Helpers shared across the wp_client package.
"""
from __future__ import annotations

import datetime as _dt
from typing import Any, List, Optional, Union

__all__ = [
    "TIMESTAMP_FORMAT",
    "as_list",
    "date_to_timestamp",
    "cutoff_to_timestamp",
]

TIMESTAMP_FORMAT = "%Y%m%d%H%M%S"

DateLike = Union[_dt.datetime, _dt.date]


def as_list(value: Any) -> List[Any]:
    """Normalize a remote array result so callers never see ``None``.

    The webservice omits empty arrays, sends ``null`` for them, and collapses
    single-element arrays into the bare element.
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return [value]


def date_to_timestamp(value: DateLike) -> str:
    """Return the 14-digit GMT ``yyyyMMddHHmmss`` string for *value*.

    Aware datetimes are converted to GMT, naive datetimes are read as local
    time, and plain dates are taken as midnight GMT.
    """
    if isinstance(value, _dt.datetime):
        moment = value.astimezone(_dt.timezone.utc)
    elif isinstance(value, _dt.date):
        moment = _dt.datetime(value.year, value.month, value.day, tzinfo=_dt.timezone.utc)
    else:
        raise TypeError(f"expected date or datetime, got {type(value).__name__}")
    # strftime %Y is not zero-padded before year 1000
    return f"{moment.year:04d}" + moment.strftime(TIMESTAMP_FORMAT[2:])


def cutoff_to_timestamp(cutoff: Optional[DateLike]) -> str:
    """Like :func:`date_to_timestamp`, but ``None`` means "since the beginning"."""
    if cutoff is None:
        return "0"
    return date_to_timestamp(cutoff)
