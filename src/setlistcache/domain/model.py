"""Setlist records as stored and served by the cache.

A ``SetlistEntry`` is one line of a show's setlist (usually one song). Every field
is an opaque string; only ``showid`` carries meaning for the cache, since it is the
key the store is queried by. Many entries share one ``showid``.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Mapping

type ShowId = str


@dataclass(frozen=True, slots=True)
class SetlistEntry:
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

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object]) -> SetlistEntry:
        """Build an entry from a loosely typed mapping.

        Missing keys and non-string values become ``""``.
        """

        values: dict[str, str] = {}
        for name in SETLIST_FIELDS:
            value = mapping.get(name)
            values[name] = value if isinstance(value, str) else ""
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in SETLIST_FIELDS}


SETLIST_FIELDS: Final[tuple[str, ...]] = tuple(field.name for field in fields(SetlistEntry))
