"""wp_client.models

Records returned by the WikiPathways webservice.  Field names follow the
service's JSON (camelCase aliases); unknown keys are ignored.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import as_list

__all__ = [
    "WSAuth",
    "WSPathwayInfo",
    "WSPathway",
    "WSHistoryRow",
    "WSPathwayHistory",
    "WSIndexField",
    "WSSearchResult",
    "WSCurationTag",
    "WSCurationTagHistory",
]


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class WSAuth(BaseModel):
    """Credentials returned by ``login``; pass them to every write call."""

    model_config = ConfigDict(frozen=True)

    user: str
    key: str = Field(repr=False)


class WSPathwayInfo(_Record):
    id: str
    url: Optional[str] = None
    name: Optional[str] = None
    species: Optional[str] = None
    revision: Optional[int] = None


class WSPathway(WSPathwayInfo):
    gpml: str = ""


class WSHistoryRow(_Record):
    revision: Optional[int] = None
    comment: Optional[str] = None
    user: Optional[str] = None
    timestamp: Optional[str] = None


class WSPathwayHistory(WSPathwayInfo):
    history: List[WSHistoryRow] = Field(default_factory=list)

    @field_validator("history", mode="before")
    @classmethod
    def listify_history(cls, value):
        return as_list(value)


class WSIndexField(_Record):
    name: str
    values: List[str] = Field(default_factory=list)

    @field_validator("values", mode="before")
    @classmethod
    def listify_values(cls, value):
        return as_list(value)


class WSSearchResult(WSPathwayInfo):
    score: Optional[float] = None
    fields: List[WSIndexField] = Field(default_factory=list)

    @field_validator("fields", mode="before")
    @classmethod
    def listify_fields(cls, value):
        return as_list(value)


class WSCurationTag(_Record):
    name: str
    display_name: Optional[str] = Field(default=None, alias="displayName")
    pathway: Optional[WSPathwayInfo] = None
    revision: Optional[int] = None
    text: Optional[str] = None
    time_modified: Optional[int] = Field(default=None, alias="timeModified")
    user_modified: Optional[str] = Field(default=None, alias="userModified")


class WSCurationTagHistory(_Record):
    pathway_id: Optional[str] = Field(default=None, alias="pathwayId")
    tag_name: Optional[str] = Field(default=None, alias="tagName")
    text: Optional[str] = None
    action: Optional[str] = None
    user: Optional[str] = None
    time: Optional[str] = None
