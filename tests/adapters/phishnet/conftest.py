"""Shared fixtures for Phish.net adapter tests."""

from __future__ import annotations

import pytest

from setlistcache.config.http_resilience import ResilienceConfig, RetryPolicy
from setlistcache.config.phishnet import PhishNetConfig
from tests.helpers.phishnet import API_KEY, PhishNetPayload


@pytest.fixture
def phishnet_config() -> PhishNetConfig:
    return PhishNetConfig(
        api_key=API_KEY,
        resilience=ResilienceConfig(
            name="phishnet",
            base_url="https://api.phish.net/v5",
            retry=RetryPolicy(total=0),
        ),
    )


@pytest.fixture
def setlist_rows() -> list[PhishNetPayload]:
    return [
        {
            "showid": "1252698368",
            "showdate": "1997-12-31",
            "permalink": "https://phish.net/setlists/phish-december-31-1997.html",
            "showyear": "1997",
            "set": "1",
            "position": "1",
            "song": "Wolfman's Brother",
            "slug": "wolfmans-brother",
            "transition": "1",
            "trans_mark": ",",
            "venue": "Madison Square Garden",
            "city": "New York",
            "state": "NY",
            "country": "USA",
            "artist_name": "Phish",
            "artist_slug": "phish",
        },
        {
            "showid": "1252698368",
            "showdate": "1997-12-31",
            "set": "1",
            "position": "2",
            "song": "Reba",
            "venue": "Madison Square Garden",
            "city": "New York",
            "state": "NY",
            "country": "USA",
            "isjamchart": 1,
            "footnote": None,
        },
    ]
