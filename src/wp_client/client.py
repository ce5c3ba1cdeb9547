"""wp_client.client

Client for the WikiPathways webservice.

Every public method maps to one remote operation.  Reads go out as ``GET``
requests; writes and login as ``POST`` form submissions.  All ask for JSON.
Failures from ``requests`` (connection errors, HTTP errors via ``raise_for_status``)
propagate unchanged and are never retried.

Writes need the :class:`~wp_client.models.WSAuth` returned by :meth:`login`.
The client itself keeps no session state, so one instance can serve several
accounts at once.
"""
from __future__ import annotations

import base64
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type, TypeVar, Union

import requests
from pydantic import BaseModel

from .bio import DataSource, Organism, Xref
from .config import ClientSettings
from .exceptions import NotAuthenticatedError
from .gpml import Pathway, read_gpml, write_gpml
from .models import (
    WSAuth,
    WSCurationTag,
    WSCurationTagHistory,
    WSPathway,
    WSPathwayHistory,
    WSPathwayInfo,
    WSSearchResult,
)
from .utils import DateLike, as_list, cutoff_to_timestamp, date_to_timestamp

__all__ = ["WikiPathwaysClient", "xrefs_to_arrays"]

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def xrefs_to_arrays(xrefs: Sequence[Xref]) -> Tuple[List[str], List[Optional[str]]]:
    """Split xrefs into parallel (ids, system codes) lists, keeping order."""
    ids = [x.id for x in xrefs]
    codes = [x.system_code for x in xrefs]
    return ids, codes


def _species(organism: Union[Organism, str, None]) -> Optional[str]:
    if organism is None:
        return None
    if isinstance(organism, Organism):
        return organism.latin_name
    return organism


def _check_revision(revision: int) -> int:
    if revision < 0:
        raise ValueError(f"revision must be non-negative, got {revision}")
    return revision


def _require_auth(auth: Optional[WSAuth]) -> WSAuth:
    if auth is None:
        raise NotAuthenticatedError("this operation needs credentials; call login() first")
    return auth


class WikiPathwaysClient:
    """Public client for the WikiPathways webservice."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        settings: Optional[ClientSettings] = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self.base_url = (base_url or self.settings.base_url).rstrip("/")
        headers = {
            "Accept": "application/json",
            "User-Agent": self.settings.user_agent,
        }
        if session is None or settings is not None:
            self.session = session or requests.Session()
            self.session.headers.update(headers)
            self.session.verify = self.settings.verify_ssl
        else:
            # caller-configured transport: keep its verify, proxies and headers
            self.session = session
            for name, value in headers.items():
                self.session.headers.setdefault(name, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base_url!r})"

    # ------------------------------------------------------------ transport

    def _get(self, method: str, **params: Any) -> Dict[str, Any]:
        query = {k: v for k, v in params.items() if v is not None}
        query["format"] = "json"
        logger.debug(f"GET {method} {sorted(query)}")
        r = self.session.get(f"{self.base_url}/{method}", params=query, timeout=self.settings.timeout)
        r.raise_for_status()
        return r.json() or {}

    def _post(self, method: str, auth: Optional[WSAuth], **data: Any) -> Dict[str, Any]:
        form = {k: v for k, v in data.items() if v is not None}
        if auth is not None:
            form["auth"] = auth.key
            form["username"] = auth.user
        logger.debug(f"POST {method} {sorted(form)}")
        r = self.session.post(
            f"{self.base_url}/{method}",
            params={"format": "json"},
            data=form,
            timeout=self.settings.timeout,
        )
        r.raise_for_status()
        return r.json() or {}

    def _get_list(self, method: str, key: str, model: Optional[Type[M]] = None, **params: Any) -> List[Any]:
        items = as_list(self._get(method, **params).get(key))
        if model is None:
            return items
        return [model.model_validate(item) for item in items]

    # ------------------------------------------------------------ reads

    def get_pathway_info(self, id: str) -> WSPathwayInfo:
        """Info about a pathway without its GPML."""
        payload = self._get("getPathwayInfo", pwId=id)
        return WSPathwayInfo.model_validate(payload.get("pathwayInfo"))

    def get_pathway(self, id: str, revision: int = 0) -> WSPathway:
        """Fetch a pathway; revision ``0`` means the latest one.

        See :meth:`to_pathway` to turn the result into a model.
        """
        payload = self._get("getPathway", pwId=id, revision=_check_revision(revision))
        return WSPathway.model_validate(payload.get("pathway"))

    def list_pathways(self, organism: Union[Organism, str, None] = None) -> List[WSPathwayInfo]:
        """List all pathways, optionally only those of one organism."""
        return self._get_list("listPathways", "pathways", WSPathwayInfo, organism=_species(organism))

    def list_organisms(self) -> List[str]:
        return [str(o) for o in self._get_list("listOrganisms", "organisms")]

    def get_pathway_history(self, id: str, start: Optional[DateLike] = None) -> WSPathwayHistory:
        """Revision history of a pathway since *start* (everything if ``None``)."""
        payload = self._get("getPathwayHistory", pwId=id, timestamp=cutoff_to_timestamp(start))
        return WSPathwayHistory.model_validate(payload.get("history"))

    def get_pathway_as(self, file_type: str, id: str, revision: int = 0) -> bytes:
        """The pathway rendered as *file_type* (``gpml``, ``png``, ``svg``, ``pdf``, ...)."""
        payload = self._get("getPathwayAs", fileType=file_type, pwId=id, revision=_check_revision(revision))
        return base64.b64decode(payload.get("data") or b"")

    def save_pathway_as(self, path: Union[str, Path], file_type: str, id: str, revision: int = 0) -> Path:
        """Download a rendering of the pathway and write it to *path*."""
        data = self.get_pathway_as(file_type, id, revision)
        path = Path(path)
        with path.open("wb") as fh:
            fh.write(data)
        logger.info(f"Saved {id} ({file_type}, revision {revision}) to {path}")
        return path

    def get_xref_list(self, id: str, data_source: DataSource) -> List[str]:
        """Identifiers on the pathway, translated to *data_source*.

        :param data_source: the database system to translate to, e.g. Entrez Gene.
        """
        return [str(x) for x in self._get_list("getXrefList", "xrefs", pwId=id, code=data_source.system_code)]

    def get_curation_tags(self, id: str) -> List[WSCurationTag]:
        return self._get_list("getCurationTags", "tags", WSCurationTag, pwId=id)

    def get_curation_tags_by_name(self, tag_name: str) -> List[WSCurationTag]:
        return self._get_list("getCurationTagsByName", "tags", WSCurationTag, tagName=tag_name)

    def get_curation_tag_history(self, id: str, cutoff: Optional[DateLike] = None) -> List[WSCurationTagHistory]:
        """Curation tag changes on a pathway after *cutoff* (all of them if ``None``)."""
        return self._get_list(
            "getCurationTagHistory", "history", WSCurationTagHistory, pwId=id, timestamp=cutoff_to_timestamp(cutoff)
        )

    def get_recent_changes(self, cutoff: DateLike) -> List[WSPathwayInfo]:
        """Pathways changed since *cutoff*."""
        return self._get_list("getRecentChanges", "pathways", WSPathwayInfo, timestamp=date_to_timestamp(cutoff))

    # ------------------------------------------------------------ search

    def find_pathways_by_text(self, query: str, organism: Union[Organism, str, None] = None) -> List[WSSearchResult]:
        return self._get_list("findPathwaysByText", "result", WSSearchResult, query=query, species=_species(organism))

    def find_pathways_by_xref(self, *xrefs: Xref) -> List[WSSearchResult]:
        """Pathways containing any of *xrefs*, following mappings to other databases."""
        ids, codes = xrefs_to_arrays(xrefs)
        # requests drops None list items, which would misalign the two arrays
        wire_codes = ["" if c is None else c for c in codes]
        return self._get_list("findPathwaysByXref", "result", WSSearchResult, ids=ids, codes=wire_codes)

    def find_interactions(self, query: str) -> List[WSSearchResult]:
        return self._get_list("findInteractions", "result", WSSearchResult, query=query)

    def find_pathways_by_literature(self, query: str) -> List[WSSearchResult]:
        """Search by literature reference (PubMed id, title or author)."""
        return self._get_list("findPathwaysByLiterature", "result", WSSearchResult, query=query)

    # ------------------------------------------------------------ conversion

    @staticmethod
    def to_pathway(ws_pathway: WSPathway) -> Pathway:
        """Parse the GPML of a fetched pathway.  Raises ``ConverterError``."""
        return read_gpml(ws_pathway.gpml)

    # ------------------------------------------------------------ writes

    def login(self, name: str, password: str) -> WSAuth:
        """Log in with a WikiPathways account.

        The returned credentials are what every write operation expects.
        """
        logger.debug(f"Logging in as {name}")
        # form data keeps the password out of URLs and request-line logs
        payload = self._post("login", None, name=name, **{"pass": password})
        return WSAuth(user=name, key=str(payload.get("auth", "")))

    def update_pathway(
        self, id: str, pathway: Pathway, description: str, revision: int, *, auth: Optional[WSAuth]
    ) -> None:
        """Upload a new version of a pathway.

        :param description: summary of the changes
        :param revision: the revision the changes are based on, to detect conflicts
        """
        auth = _require_auth(auth)
        gpml = write_gpml(pathway)
        self._post(
            "updatePathway",
            auth,
            pwId=id,
            description=description,
            gpml=gpml,
            revision=_check_revision(revision),
        )

    def create_pathway(self, pathway: Pathway, *, auth: Optional[WSAuth]) -> WSPathwayInfo:
        """Create a new pathway; the result carries its id and first revision."""
        auth = _require_auth(auth)
        payload = self._post("createPathway", auth, gpml=write_gpml(pathway))
        return WSPathwayInfo.model_validate(payload.get("pathwayInfo"))

    def save_curation_tag(
        self, id: str, tag_name: str, text: str, revision: int = 0, *, auth: Optional[WSAuth]
    ) -> None:
        """Apply a curation tag, replacing any existing tag with the same name.

        :param tag_name: e.g. ``CurationTag:Approved``
        """
        auth = _require_auth(auth)
        self._post(
            "saveCurationTag",
            auth,
            pwId=id,
            tagName=tag_name,
            text=text,
            revision=_check_revision(revision),
        )

    def remove_curation_tag(self, id: str, tag_name: str, *, auth: Optional[WSAuth]) -> None:
        auth = _require_auth(auth)
        self._post("removeCurationTag", auth, pwId=id, tagName=tag_name)
