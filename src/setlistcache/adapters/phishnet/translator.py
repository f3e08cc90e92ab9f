"""Translate Phish.net payloads into setlist entries."""

from __future__ import annotations

from collections.abc import Mapping

from setlistcache.domain.model import SetlistEntry

from .schema import SetlistPayload

type SetlistPayloadInput = SetlistPayload | Mapping[str, object]


def parse_setlist_entry(payload: SetlistPayloadInput) -> SetlistEntry:
    model = (
        payload
        if isinstance(payload, SetlistPayload)
        else SetlistPayload.model_validate(payload)
    )
    return SetlistEntry.from_mapping(model.model_dump())
