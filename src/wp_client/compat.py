"""wp_client.compat

Deprecated entry points kept for older callers.  New code should use
:class:`~wp_client.client.WikiPathwaysClient` directly.
"""
from __future__ import annotations

import warnings
from typing import List

from .bio import Xref
from .client import WikiPathwaysClient
from .models import WSSearchResult

__all__ = ["LegacyWikiPathwaysClient"]


class LegacyWikiPathwaysClient(WikiPathwaysClient):
    """WikiPathwaysClient plus the deprecated single-id xref search."""

    def find_pathways_by_xref_id(self, id: str) -> List[WSSearchResult]:
        """Search by a bare identifier with no database.

        .. deprecated:: use ``find_pathways_by_xref(Xref(id, data_source))``.
        """
        warnings.warn(
            "find_pathways_by_xref_id() is deprecated; pass an Xref with a data source "
            "to find_pathways_by_xref() instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.find_pathways_by_xref(Xref(id, None))
