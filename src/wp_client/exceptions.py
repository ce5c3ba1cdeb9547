"""Exception types raised by wp_client.

Transport and HTTP failures are not wrapped: they surface as the
``requests`` exceptions that caused them.
"""
from __future__ import annotations

__all__ = ["WikiPathwaysError", "ConverterError", "NotAuthenticatedError"]


class WikiPathwaysError(Exception):
    """Base class for errors raised by this package."""


class ConverterError(WikiPathwaysError):
    """GPML could not be parsed or written."""


class NotAuthenticatedError(WikiPathwaysError):
    """A write operation was attempted without credentials from ``login``."""
