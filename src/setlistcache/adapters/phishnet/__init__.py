"""Public interface for the Phish.net adapter."""

from __future__ import annotations

from .client import PhishNetAPIError, PhishNetClient
from .schema import SetlistPayload, SetlistsResponse
from .translator import SetlistPayloadInput, parse_setlist_entry

__all__ = [
    "PhishNetAPIError",
    "PhishNetClient",
    "SetlistPayload",
    "SetlistPayloadInput",
    "SetlistsResponse",
    "parse_setlist_entry",
]
