"""Pydantic models describing the Phish.net v5 setlist payloads."""

from __future__ import annotations

from collections.abc import Mapping
from logging import getLogger
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

log = getLogger(__name__)


def _string_or_blank(value: object) -> str:
    return value if isinstance(value, str) else ""


class PhishNetBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class SetlistPayload(PhishNetBaseModel):
    """One setlist row; every field is read as a string, anything else becomes blank."""

    showid: str = ""
    showdate: str = ""
    permalink: str = ""
    showyear: str = ""
    uniqueid: str = ""
    meta: str = ""
    reviews: str = ""
    exclude: str = ""
    setlistnotes: str = ""
    soundcheck: str = ""
    songid: str = ""
    position: str = ""
    transition: str = ""
    footnote: str = ""
    set: str = ""
    isjam: str = ""
    isreprise: str = ""
    isjamchart: str = ""
    jamchart_description: str = ""
    tracktime: str = ""
    gap: str = ""
    tourid: str = ""
    tourname: str = ""
    tourwhen: str = ""
    song: str = ""
    nickname: str = ""
    slug: str = ""
    is_original: str = ""
    venueid: str = ""
    venue: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    trans_mark: str = ""
    artistid: str = ""
    artist_slug: str = ""
    artist_name: str = ""

    _coerce_strings = field_validator("*", mode="before")(_string_or_blank)


class SetlistsResponse(PhishNetBaseModel):
    error: bool = False
    error_message: str = ""
    data: list[SetlistPayload] = Field(default_factory=list["SetlistPayload"])

    @field_validator("error_message", mode="before")
    @classmethod
    def _normalize_message(cls, value: object) -> str:
        return _string_or_blank(value)

    @field_validator("error", mode="before")
    @classmethod
    def _normalize_error(cls, value: object) -> object:
        return False if value is None else value

    @field_validator("data", mode="before")
    @classmethod
    def _keep_objects(cls, value: object) -> list[Mapping[str, object]]:
        if not isinstance(value, list):
            return []
        items = cast(list[object], value)
        rows: list[Mapping[str, object]] = []
        for item in items:
            if isinstance(item, Mapping):
                rows.append(cast(Mapping[str, object], item))
            else:
                log.warning("Skipping non-object Phish.net setlist row: %r", item)
        return rows
