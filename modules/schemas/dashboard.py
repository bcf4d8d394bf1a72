"""
Dashboard Schemas.

Pydantic models for the dashboard collection envelope returned by
GET {base_url}dashboard, and for the typed payloads carried by its
recognized data fields.

Envelope shape (Collection+JSON):

    {"collection": {"items": [{"data": [{"name": "...", "value": ...}]}]}}

Unlike the configuration schemas these models ignore unknown members:
the API adds fields over time and the console only reads what it needs.
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, field_validator

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
"""Timestamp the API reports for actions that were never updated."""


class _LenientBase(BaseModel):
    """Base with extra='ignore' so unknown API members are tolerated."""

    model_config = ConfigDict(extra="ignore")


# =============================================================================
# Envelope
# =============================================================================


class DataField(_LenientBase):
    """A named, untyped payload. The payload shape depends on the name."""

    name: StrictStr
    value: Any = None


class CollectionItem(_LenientBase):
    data: list[DataField] = Field(default_factory=list)


class Collection(_LenientBase):
    items: list[CollectionItem] = Field(default_factory=list)


class Envelope(_LenientBase):
    """Top-level response of the dashboard endpoint."""

    collection: Collection


# =============================================================================
# Payloads
# =============================================================================


class Investigator(_LenientBase):
    name: StrictStr = ""


class Action(_LenientBase):
    """One historical action launched against a target."""

    id: StrictFloat = 0
    name: StrictStr = ""
    target: StrictStr = ""
    investigators: list[Investigator] = Field(default_factory=list)
    last_update_time: datetime = Field(default=ZERO_TIME, alias="lastupdatetime")

    @field_validator("investigators", mode="before")
    @classmethod
    def _null_investigators(cls, value: Any) -> Any:
        return [] if value is None else value


class AgentsSum(_LenientBase):
    """Number of agents running a given version."""

    version: StrictStr
    count: StrictFloat
